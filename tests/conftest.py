from __future__ import annotations

import logging

import pytest

from sandboxer.utils.logging import _close_handlers


@pytest.fixture(autouse=True)
def reset_sandboxer_logging():
    yield
    root = logging.getLogger("sandboxer")
    _close_handlers(root)
    root.propagate = True
    root.setLevel(logging.NOTSET)
    for attr in ("_sandboxer_log_file", "_sandboxer_log_level"):
        if hasattr(root, attr):
            delattr(root, attr)


@pytest.fixture
def nobody_lookup():
    calls = []

    def lookup():
        calls.append(True)
        return 65534, 65533

    lookup.calls = calls
    return lookup
