"""Account lookups used to pick the default sandbox identity.

"""

from __future__ import annotations

import logging
import pwd
from typing import Callable, Tuple

from sandboxer.errors import IdentityResolutionError

IdentityLookup = Callable[[], Tuple[int, int]]
NOBODY_ACCOUNT = "nobody"
LOGGER = logging.getLogger("sandboxer.config")


def lookup_nobody(name: str = NOBODY_ACCOUNT) -> Tuple[int, int]:
    """Resolve the unprivileged account's uid and gid.

    Args:
        name (str): Account name looked up in the password database.

    Returns:
        Tuple[int, int]: ``(uid, gid)`` of the account.

    Raises:
        IdentityResolutionError: Raised when the account does not exist.

    Side Effects / I/O:
        - Reads the platform password database.

    Examples:
        >>> from sandboxer.config.identity import lookup_nobody
        >>> lookup_nobody()

    """
    try:
        entry = pwd.getpwnam(name)
    except KeyError as err:
        raise IdentityResolutionError(f"Cannot resolve default account `{name}`: no such user.") from err
    LOGGER.debug("Resolved account %s to uid=%s gid=%s", name, entry.pw_uid, entry.pw_gid)
    return entry.pw_uid, entry.pw_gid
