"""Configuration data types shared by the builder, reporter and codec.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union


class Unlimited(Enum):
    """Sentinel for a resource ceiling with no practical limit."""

    UNLIMITED = "unlimited"

    def __str__(self) -> str:
        return self.value


UNLIMITED = Unlimited.UNLIMITED

LimitValue = Union[int, Unlimited]

DEFAULT_STACK_BYTES = 16 * 1024 * 1024
DEFAULT_INPUT_PATH = "/dev/stdin"
DEFAULT_OUTPUT_PATH = "/dev/stdout"
DEFAULT_LOG_PATH = "sandbox.log"
MAX_ARG_ENTRIES = 255
MAX_ENV_ENTRIES = 255


@dataclass(frozen=True)
class ParsedArgs:
    """Raw invocation values, with ``None`` for anything not supplied.

    Args:
        exe_path (str): Executable to run inside the sandbox.
        max_cpu_time (Optional[int]): CPU time ceiling in milliseconds.
        max_real_time (Optional[int]): Wall-clock ceiling in milliseconds.
        max_memory (Optional[int]): Memory ceiling in bytes.
        max_stack (Optional[int]): Stack size in bytes.
        max_process_number (Optional[int]): Process count ceiling.
        max_output_size (Optional[int]): Output size ceiling in bytes.
        input_path (Optional[str]): File wired to the child's stdin.
        output_path (Optional[str]): File wired to the child's stdout.
        log_path (Optional[str]): Sandbox log file.
        exe_args (Tuple[str, ...]): Arguments passed after the executable.
        exe_envs (Tuple[str, ...]): ``KEY=VALUE`` environment entries.
        seccomp_rules (Optional[str]): Seccomp profile name.
        uid (Optional[int]): User id to run as.
        gid (Optional[int]): Group id to run as.
        print_args (Optional[int]): Nonzero to print the resolved config.

    """

    exe_path: str
    max_cpu_time: Optional[int] = None
    max_real_time: Optional[int] = None
    max_memory: Optional[int] = None
    max_stack: Optional[int] = None
    max_process_number: Optional[int] = None
    max_output_size: Optional[int] = None
    input_path: Optional[str] = None
    output_path: Optional[str] = None
    log_path: Optional[str] = None
    exe_args: Tuple[str, ...] = field(default_factory=tuple)
    exe_envs: Tuple[str, ...] = field(default_factory=tuple)
    seccomp_rules: Optional[str] = None
    uid: Optional[int] = None
    gid: Optional[int] = None
    print_args: Optional[int] = None


@dataclass(frozen=True)
class Config:
    """Fully resolved launch configuration handed to the isolation engine."""

    max_cpu_time_ms: LimitValue
    max_real_time_ms: LimitValue
    max_memory_bytes: LimitValue
    max_stack_bytes: LimitValue
    max_process_number: LimitValue
    max_output_bytes: LimitValue
    executable_path: str
    input_path: str
    output_path: str
    log_path: str
    argv: Tuple[str, ...]
    envp: Tuple[str, ...]
    seccomp_rules_name: Optional[str]
    uid: int
    gid: int
    print_args_requested: bool = False
