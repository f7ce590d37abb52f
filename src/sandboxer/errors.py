"""Exception types raised while turning an invocation into a sandbox config.

"""

from __future__ import annotations


class SandboxerError(Exception):
    """Base class for launcher configuration failures."""


class InvalidInvocationError(SandboxerError):
    """Malformed, unrecognized or missing command-line arguments."""


class IdentityResolutionError(SandboxerError):
    """The default unprivileged account could not be resolved."""


class ConfigFormatError(SandboxerError, ValueError):
    """A serialized config payload does not describe a valid config."""
