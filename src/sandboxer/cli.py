from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, NoReturn, Optional, Sequence

from sandboxer import __version__
from sandboxer.config import (
    MAX_ARG_ENTRIES,
    MAX_ENV_ENTRIES,
    Config,
    ParsedArgs,
    build_config,
    dump_config,
    strip_double_quotes,
)
from sandboxer.errors import IdentityResolutionError, InvalidInvocationError
from sandboxer.report import print_config
from sandboxer.utils import env_flag, env_log_level, setup_logging

EXIT_INVALID_INVOCATION = 2
EXIT_CONFIG_ERROR = 3
LOGGER = logging.getLogger("sandboxer.cli")


@dataclass(frozen=True)
class Invocation:
    args: ParsedArgs
    dump_path: Optional[str] = None


class _InvocationParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise InvalidInvocationError(message)


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def _executable_path(raw: str) -> str:
    if not strip_double_quotes(raw):
        raise argparse.ArgumentTypeError("executable path must not be empty")
    return raw


def build_parser() -> argparse.ArgumentParser:
    parser = _InvocationParser(prog="sandboxer", description="Sandboxed process launcher")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument("--max_cpu_time", type=_non_negative_int, default=None, help="Max cpu running time (ms).")
    parser.add_argument("--max_real_time", type=_non_negative_int, default=None, help="Max real running time (ms).")
    parser.add_argument("--max_memory", type=_non_negative_int, default=None, help="Max memory (byte).")
    parser.add_argument(
        "--max_stack",
        type=_non_negative_int,
        default=None,
        help="Max stack size (byte, default 16384K).",
    )
    parser.add_argument("--max_process_number", type=_non_negative_int, default=None, help="Max process number.")
    parser.add_argument("--max_output_size", type=_non_negative_int, default=None, help="Max output size (byte).")

    parser.add_argument("--exe_path", type=_executable_path, required=True, help="Executable file path.")
    parser.add_argument("--input_path", default=None, help="Input file path (default /dev/stdin).")
    parser.add_argument("--output_path", default=None, help="Output file path (default /dev/stdout).")
    parser.add_argument("--log_path", default=None, help="Log file path (default sandbox.log).")
    parser.add_argument(
        "--exe_args",
        action="append",
        default=[],
        help=f"Argument for the executable file. Repeat for more (up to {MAX_ARG_ENTRIES}).",
    )
    parser.add_argument(
        "--exe_envs",
        action="append",
        default=[],
        help=f"KEY=VALUE environment entry. Repeat for more (up to {MAX_ENV_ENTRIES}). "
        "Defaults to the launcher's environment.",
    )
    parser.add_argument("--seccomp_rules", default=None, help="Seccomp rules.")
    parser.add_argument("--print_args", type=int, default=None, help="Print args after config (0 or 1).")
    parser.add_argument("--uid", type=int, default=None, help="UID for executable file (default `nobody`).")
    parser.add_argument("--gid", type=int, default=None, help="GID for executable file (default `nobody`).")
    parser.add_argument("--dump_config", default=None, help="Write the resolved config to a YAML or JSON file.")
    return parser


def parse_invocation(argv: Optional[Sequence[str]] = None) -> Invocation:
    parser = build_parser()
    namespace = _parse_namespace(parser, argv)
    return Invocation(
        args=ParsedArgs(
            exe_path=namespace.exe_path,
            max_cpu_time=namespace.max_cpu_time,
            max_real_time=namespace.max_real_time,
            max_memory=namespace.max_memory,
            max_stack=namespace.max_stack,
            max_process_number=namespace.max_process_number,
            max_output_size=namespace.max_output_size,
            input_path=namespace.input_path,
            output_path=namespace.output_path,
            log_path=namespace.log_path,
            exe_args=tuple(namespace.exe_args),
            exe_envs=tuple(namespace.exe_envs),
            seccomp_rules=namespace.seccomp_rules,
            uid=namespace.uid,
            gid=namespace.gid,
            print_args=namespace.print_args,
        ),
        dump_path=namespace.dump_config,
    )


def resolve_invocation(argv: Optional[Sequence[str]] = None) -> Config:
    level = logging.DEBUG if env_flag("SANDBOXER_DEBUG") else env_log_level("SANDBOXER_LOG_LEVEL")
    setup_logging(level=level)

    invocation = parse_invocation(argv)
    parsed = invocation.args

    try:
        config = build_config(parsed)
    except IdentityResolutionError as err:
        sys.stderr.write(f"sandboxer: {err}\n")
        raise SystemExit(EXIT_CONFIG_ERROR) from None

    if parsed.log_path is not None:
        setup_logging(Path(config.log_path), level=level)
    LOGGER.debug("Resolved launch config for %s (%s args)", config.executable_path, len(config.argv) - 1)

    if config.print_args_requested:
        print_config(config)

    if invocation.dump_path:
        try:
            target = dump_config(config, invocation.dump_path)
        except OSError as err:
            sys.stderr.write(f"sandboxer: cannot write config to {invocation.dump_path}: {err}\n")
            raise SystemExit(EXIT_CONFIG_ERROR) from None
        LOGGER.info("Wrote launch config to %s", target)

    return config


def main(argv: Optional[Sequence[str]] = None) -> None:
    resolve_invocation(argv)


def _parse_namespace(parser: argparse.ArgumentParser, argv: Optional[Sequence[str]]) -> argparse.Namespace:
    try:
        namespace = parser.parse_args(argv)
        _check_entry_count(namespace.exe_args, "--exe_args", MAX_ARG_ENTRIES)
        _check_entry_count(namespace.exe_envs, "--exe_envs", MAX_ENV_ENTRIES)
    except InvalidInvocationError as err:
        parser.print_usage(sys.stderr)
        sys.stderr.write(f"{parser.prog}: error: {err}\n")
        raise SystemExit(EXIT_INVALID_INVOCATION) from None
    return namespace


def _check_entry_count(entries: List[str], flag: str, limit: int) -> None:
    if len(entries) > limit:
        raise InvalidInvocationError(f"{flag} accepts at most {limit} entries, got {len(entries)}")
