"""Environment variable parsing and process environment snapshot helpers.

"""

from __future__ import annotations

import logging
import os
from typing import List, Mapping, Optional

_LEVEL_NAMES = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def env_flag(name: str, default: bool = False) -> bool:
    """Env flag.

    Args:
        name (str): Environment variable to read.
        default (bool): Value used when the variable is unset.

    Returns:
        bool: False for ``0``, ``false``, ``no`` and ``off``; True for any other set value.

    Side Effects / I/O:
        - Reads environment variables.

    Examples:
        >>> from sandboxer.utils.env import env_flag
        >>> env_flag("SANDBOXER_DEBUG")

    """
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off"}


def env_log_level(name: str, default: int = logging.INFO) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    level_name = raw.strip().upper()
    if level_name not in _LEVEL_NAMES:
        return default
    return logging.getLevelName(level_name)


def snapshot_environ(limit: int, environ: Optional[Mapping[str, str]] = None) -> tuple[List[str], int]:
    """Capture environment entries as ``KEY=VALUE`` strings.

    Args:
        limit (int): Maximum number of entries kept.
        environ (Optional[Mapping[str, str]]): Source mapping; defaults to ``os.environ``.

    Returns:
        tuple[List[str], int]: Kept entries in enumeration order, and the number dropped past ``limit``.

    Side Effects / I/O:
        - Reads the process environment once when ``environ`` is not given.

    Examples:
        >>> from sandboxer.utils.env import snapshot_environ
        >>> snapshot_environ(255)

    """
    source = os.environ if environ is None else environ
    entries = [f"{key}={value}" for key, value in source.items()]
    return entries[:limit], max(len(entries) - limit, 0)
