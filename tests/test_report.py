from __future__ import annotations

import io

from sandboxer.config import UNLIMITED, Config
from sandboxer.report import print_config, render_config_lines


def _config(**overrides) -> Config:
    values = dict(
        max_cpu_time_ms=1000,
        max_real_time_ms=UNLIMITED,
        max_memory_bytes=134217728,
        max_stack_bytes=16777216,
        max_process_number=UNLIMITED,
        max_output_bytes=UNLIMITED,
        executable_path="/bin/echo",
        input_path="/dev/stdin",
        output_path="/dev/stdout",
        log_path="sandbox.log",
        argv=("/bin/echo", "hi"),
        envp=("PATH=/usr/bin",),
        seccomp_rules_name=None,
        uid=65534,
        gid=65534,
        print_args_requested=True,
    )
    values.update(overrides)
    return Config(**values)


def test_render_config_lines_uses_fixed_layout() -> None:
    assert render_config_lines(_config()) == [
        "max_cpu_time: 1000",
        "max_real_time: unlimited",
        "max_memory: 134217728",
        "max_stack: 16777216",
        "max_process_number: unlimited",
        "max_output_size: unlimited",
        "exe_path: /bin/echo",
        "input_path: /dev/stdin",
        "output_path: /dev/stdout",
        "log_path: sandbox.log",
        "exe_args[0]: /bin/echo",
        "exe_args[1]: hi",
        "exe_envs[0]: PATH=/usr/bin",
        "seccomp_rules: (null)",
        "uid: 65534",
        "gid: 65534",
        "print_args: 1",
    ]


def test_render_config_lines_without_env_entries() -> None:
    lines = render_config_lines(_config(envp=(), seccomp_rules_name="general", print_args_requested=False))
    assert not any(line.startswith("exe_envs[") for line in lines)
    assert "seccomp_rules: general" in lines
    assert lines[-1] == "print_args: 0"


def test_print_config_writes_one_line_per_entry() -> None:
    buffer = io.StringIO()
    config = _config()
    print_config(config, buffer)
    assert buffer.getvalue().splitlines() == render_config_lines(config)
