"""Executable entrypoint for `python -m sandboxer`.

Delegates directly to :func:`sandboxer.cli.main`.
"""

from sandboxer.cli import main

if __name__ == "__main__":
    main()
