"""Tests for the structured config encoding."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from sandboxer.config import UNLIMITED, Config, config_from_dict, config_to_dict, dump_config, load_config
from sandboxer.errors import ConfigFormatError


def _config() -> Config:
    return Config(
        max_cpu_time_ms=2000,
        max_real_time_ms=UNLIMITED,
        max_memory_bytes=UNLIMITED,
        max_stack_bytes=16777216,
        max_process_number=UNLIMITED,
        max_output_bytes=4096,
        executable_path="/bin/echo",
        input_path="/dev/stdin",
        output_path="/dev/stdout",
        log_path="sandbox.log",
        argv=("/bin/echo", "hello"),
        envp=("LANG=C",),
        seccomp_rules_name="c_cpp",
        uid=65534,
        gid=65534,
        print_args_requested=False,
    )


def test_config_to_dict_encodes_unlimited_as_text() -> None:
    payload = config_to_dict(_config())
    assert payload["max_cpu_time_ms"] == 2000
    assert payload["max_real_time_ms"] == "unlimited"
    assert payload["argv"] == ["/bin/echo", "hello"]
    assert payload["seccomp_rules_name"] == "c_cpp"


@pytest.mark.parametrize("suffix", [".json", ".yaml"])
def test_dump_and_load_preserve_every_field(tmp_path: Path, suffix: str) -> None:
    target = dump_config(_config(), tmp_path / "nested" / f"launch{suffix}")
    assert target.exists()
    assert load_config(target) == _config()


def test_dump_config_picks_format_from_suffix(tmp_path: Path) -> None:
    json_path = dump_config(_config(), tmp_path / "launch.json")
    yaml_path = dump_config(_config(), tmp_path / "launch.yml")
    assert json.loads(json_path.read_text(encoding="utf-8"))["max_memory_bytes"] == "unlimited"
    assert yaml.safe_load(yaml_path.read_text(encoding="utf-8"))["envp"] == ["LANG=C"]


def test_config_from_dict_rejects_zero_limit() -> None:
    payload = config_to_dict(_config())
    payload["max_cpu_time_ms"] = 0
    with pytest.raises(ConfigFormatError, match="max_cpu_time_ms"):
        config_from_dict(payload)


def test_config_from_dict_rejects_missing_field() -> None:
    payload = config_to_dict(_config())
    del payload["uid"]
    with pytest.raises(ConfigFormatError, match="uid"):
        config_from_dict(payload)


def test_config_from_dict_rejects_empty_argv() -> None:
    payload = config_to_dict(_config())
    payload["argv"] = []
    with pytest.raises(ValueError, match="argv"):
        config_from_dict(payload)


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_load_config_rejects_non_mapping_yaml(tmp_path: Path) -> None:
    path = tmp_path / "launch.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigFormatError, match="mapping"):
        load_config(path)


@pytest.mark.parametrize(
    "field,value,message",
    [
        ("max_stack_bytes", "unlimited", "max_stack_bytes"),
        ("executable_path", "", "executable_path"),
        ("argv", ["/bin/other", "hello"], r"argv\[0\]"),
    ],
)
def test_config_from_dict_rejects_payloads_breaking_invariants(field: str, value, message: str) -> None:
    payload = config_to_dict(_config())
    payload[field] = value
    with pytest.raises(ConfigFormatError, match=message):
        config_from_dict(payload)


def test_load_config_rejects_unlimited_stack(tmp_path: Path) -> None:
    payload = config_to_dict(_config())
    payload["max_stack_bytes"] = "unlimited"
    path = tmp_path / "launch.yaml"
    path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
    with pytest.raises(ConfigFormatError, match="never unlimited"):
        load_config(path)
