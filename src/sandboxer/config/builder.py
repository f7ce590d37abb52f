"""Normalization of parsed invocation values into a launch config.

"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence, Tuple

from sandboxer.config.identity import IdentityLookup, lookup_nobody
from sandboxer.config.model import (
    DEFAULT_INPUT_PATH,
    DEFAULT_LOG_PATH,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_STACK_BYTES,
    MAX_ENV_ENTRIES,
    UNLIMITED,
    Config,
    LimitValue,
    ParsedArgs,
)
from sandboxer.utils.env import snapshot_environ

LOGGER = logging.getLogger("sandboxer.config")


def build_config(
    parsed: ParsedArgs,
    *,
    environ: Optional[Mapping[str, str]] = None,
    identity_lookup: Optional[IdentityLookup] = None,
    max_env: int = MAX_ENV_ENTRIES,
) -> Config:
    """Build config.

    Args:
        parsed (ParsedArgs): Invocation values from the argument parser.
        environ (Optional[Mapping[str, str]]): Environment inherited when no ``exe_envs`` are given;
            defaults to the current process environment.
        identity_lookup (Optional[IdentityLookup]): Returns ``(uid, gid)`` of the default unprivileged account;
            defaults to :func:`lookup_nobody`.
        max_env (int): Maximum number of inherited environment entries.

    Returns:
        Config: Fully resolved launch configuration.

    Raises:
        IdentityResolutionError: Raised when uid or gid is missing and the default account lookup fails.

    Side Effects / I/O:
        - Reads the process environment when no ``exe_envs`` are given.
        - May read the platform password database.

    Examples:
        >>> from sandboxer.config.builder import build_config
        >>> build_config(ParsedArgs(exe_path="/bin/echo"))

    """
    executable_path = strip_double_quotes(parsed.exe_path)
    uid, gid = resolve_identity(parsed.uid, parsed.gid, identity_lookup)

    return Config(
        max_cpu_time_ms=resolve_limit(parsed.max_cpu_time),
        max_real_time_ms=resolve_limit(parsed.max_real_time),
        max_memory_bytes=resolve_limit(parsed.max_memory),
        max_stack_bytes=resolve_limit(parsed.max_stack, fallback=DEFAULT_STACK_BYTES),
        max_process_number=resolve_limit(parsed.max_process_number),
        max_output_bytes=resolve_limit(parsed.max_output_size),
        executable_path=executable_path,
        input_path=_resolve_path(parsed.input_path, DEFAULT_INPUT_PATH),
        output_path=_resolve_path(parsed.output_path, DEFAULT_OUTPUT_PATH),
        log_path=_resolve_path(parsed.log_path, DEFAULT_LOG_PATH),
        argv=build_argv(executable_path, parsed.exe_args),
        envp=build_envp(parsed.exe_envs, environ=environ, max_env=max_env),
        seccomp_rules_name=None if parsed.seccomp_rules is None else strip_double_quotes(parsed.seccomp_rules),
        uid=uid,
        gid=gid,
        print_args_requested=bool(parsed.print_args),
    )


def strip_double_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def resolve_limit(raw: Optional[int], fallback: LimitValue = UNLIMITED) -> LimitValue:
    """Map an optional ceiling to a concrete value; absent and ``0`` both mean ``fallback``."""
    if raw is None or raw == 0:
        return fallback
    return raw


def build_argv(executable_path: str, exe_args: Sequence[str]) -> Tuple[str, ...]:
    return (executable_path, *(strip_double_quotes(arg) for arg in exe_args))


def build_envp(
    exe_envs: Sequence[str],
    *,
    environ: Optional[Mapping[str, str]] = None,
    max_env: int = MAX_ENV_ENTRIES,
) -> Tuple[str, ...]:
    """Explicit entries win; otherwise inherit the environment up to ``max_env`` entries."""
    if exe_envs:
        return tuple(strip_double_quotes(entry) for entry in exe_envs)

    inherited, dropped = snapshot_environ(max_env, environ)
    if dropped:
        LOGGER.warning(
            "Inherited environment has more than %s entries; dropped the last %s.",
            max_env,
            dropped,
        )
    return tuple(inherited)


def resolve_identity(
    uid: Optional[int],
    gid: Optional[int],
    identity_lookup: Optional[IdentityLookup] = None,
) -> Tuple[int, int]:
    if uid is not None and gid is not None:
        return uid, gid
    lookup = identity_lookup if identity_lookup is not None else lookup_nobody
    nobody_uid, nobody_gid = lookup()
    return (
        nobody_uid if uid is None else uid,
        nobody_gid if gid is None else gid,
    )


def _resolve_path(raw: Optional[str], default: str) -> str:
    if raw is None:
        return default
    return strip_double_quotes(raw)
