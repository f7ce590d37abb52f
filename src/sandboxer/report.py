from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from sandboxer.config.model import Config

_NULL = "(null)"


def render_config_lines(config: Config) -> List[str]:
    lines = [
        f"max_cpu_time: {config.max_cpu_time_ms}",
        f"max_real_time: {config.max_real_time_ms}",
        f"max_memory: {config.max_memory_bytes}",
        f"max_stack: {config.max_stack_bytes}",
        f"max_process_number: {config.max_process_number}",
        f"max_output_size: {config.max_output_bytes}",
        f"exe_path: {_text(config.executable_path)}",
        f"input_path: {_text(config.input_path)}",
        f"output_path: {_text(config.output_path)}",
        f"log_path: {_text(config.log_path)}",
    ]
    lines.extend(f"exe_args[{index}]: {value}" for index, value in enumerate(config.argv))
    lines.extend(f"exe_envs[{index}]: {value}" for index, value in enumerate(config.envp))
    lines.append(f"seccomp_rules: {_text(config.seccomp_rules_name)}")
    lines.append(f"uid: {config.uid}")
    lines.append(f"gid: {config.gid}")
    lines.append(f"print_args: {int(config.print_args_requested)}")
    return lines


def print_config(config: Config, stream: Optional[TextIO] = None) -> None:
    out = stream if stream is not None else sys.stdout
    for line in render_config_lines(config):
        out.write(line + "\n")
    out.flush()


def _text(value: Optional[str]) -> str:
    return _NULL if value is None else value
