from __future__ import annotations

import logging
from contextlib import suppress
from pathlib import Path
from typing import Optional

_FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(log_file: Optional[Path] = None, level: int = logging.INFO) -> None:
    root = logging.getLogger("sandboxer")
    configured_file = getattr(root, "_sandboxer_log_file", None)
    configured_level = getattr(root, "_sandboxer_log_level", None)
    target = str(log_file) if log_file is not None else ""
    if configured_file == target and configured_level == level:
        return

    _close_handlers(root)
    root.setLevel(level)
    root.propagate = False

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(console_handler)

    if log_file is not None:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as err:
            root.warning("Cannot open log file %s (%s); logging to console only.", log_file, err)
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
            root.addHandler(file_handler)

    root._sandboxer_log_file = target  # type: ignore[attr-defined]
    root._sandboxer_log_level = level  # type: ignore[attr-defined]


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        with suppress(Exception):
            handler.close()
