"""Public package entrypoints for the sandbox launcher.

This module defines the stable, top-level APIs intended for external callers.
"""

from __future__ import annotations

__version__ = "0.1.0"

from sandboxer.config import UNLIMITED, Config, ParsedArgs, Unlimited, build_config
from sandboxer.errors import IdentityResolutionError, InvalidInvocationError, SandboxerError

__all__ = [
    "build_config",
    "Config",
    "ParsedArgs",
    "Unlimited",
    "UNLIMITED",
    "SandboxerError",
    "InvalidInvocationError",
    "IdentityResolutionError",
]
