"""Structured encoding of launch configs for cross-process handoff.

"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import yaml

from sandboxer.config.model import UNLIMITED, Config, LimitValue, Unlimited
from sandboxer.errors import ConfigFormatError

_LIMIT_FIELDS: List[str] = [
    "max_cpu_time_ms",
    "max_real_time_ms",
    "max_memory_bytes",
    "max_stack_bytes",
    "max_process_number",
    "max_output_bytes",
]
_PATH_FIELDS: List[str] = ["executable_path", "input_path", "output_path", "log_path"]
_LIST_FIELDS: List[str] = ["argv", "envp"]
_INT_FIELDS: List[str] = ["uid", "gid"]


def config_to_dict(config: Config) -> Dict[str, Any]:
    """Config to dict.

    Args:
        config (Config): Resolved launch configuration.

    Returns:
        Dict[str, Any]: Plain mapping of every field; unlimited ceilings become ``"unlimited"``.

    Side Effects / I/O:
        - Primarily performs in-memory transformations.

    Examples:
        >>> from sandboxer.config.codec import config_to_dict
        >>> config_to_dict(config)

    """
    payload: Dict[str, Any] = {}
    for name in _LIMIT_FIELDS:
        value = getattr(config, name)
        payload[name] = value.value if isinstance(value, Unlimited) else value
    for name in _PATH_FIELDS:
        payload[name] = getattr(config, name)
    for name in _LIST_FIELDS:
        payload[name] = list(getattr(config, name))
    payload["seccomp_rules_name"] = config.seccomp_rules_name
    for name in _INT_FIELDS:
        payload[name] = getattr(config, name)
    payload["print_args_requested"] = config.print_args_requested
    return payload


def config_from_dict(payload: Dict[str, Any]) -> Config:
    """Config from dict.

    Args:
        payload (Dict[str, Any]): Mapping produced by :func:`config_to_dict`.

    Returns:
        Config: Decoded launch configuration.

    Raises:
        ConfigFormatError: Raised when a field is missing or has the wrong type.

    Examples:
        >>> from sandboxer.config.codec import config_from_dict
        >>> config_from_dict(payload)

    """
    if not isinstance(payload, dict):
        raise ConfigFormatError("Config payload must be a mapping.")

    values: Dict[str, Any] = {}
    for name in _LIMIT_FIELDS:
        values[name] = _decode_limit(name, _require(payload, name))
    for name in _PATH_FIELDS:
        values[name] = _require_str(name, _require(payload, name))
    for name in _LIST_FIELDS:
        raw = _require(payload, name)
        if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
            raise ConfigFormatError(f"`{name}` must be a list of strings.")
        values[name] = tuple(raw)
    if values["max_stack_bytes"] is UNLIMITED:
        raise ConfigFormatError("`max_stack_bytes` must be a positive integer; the stack is never unlimited.")
    if not values["executable_path"]:
        raise ConfigFormatError("`executable_path` must not be empty.")
    if not values["argv"]:
        raise ConfigFormatError("`argv` must contain at least the executable path.")
    if values["argv"][0] != values["executable_path"]:
        raise ConfigFormatError("`argv[0]` must equal `executable_path`.")

    seccomp = _require(payload, "seccomp_rules_name")
    values["seccomp_rules_name"] = None if seccomp is None else _require_str("seccomp_rules_name", seccomp)
    for name in _INT_FIELDS:
        raw = _require(payload, name)
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise ConfigFormatError(f"`{name}` must be an integer.")
        values[name] = raw
    print_args = _require(payload, "print_args_requested")
    if not isinstance(print_args, bool):
        raise ConfigFormatError("`print_args_requested` must be a boolean.")
    values["print_args_requested"] = print_args
    return Config(**values)


def dump_config(config: Config, path: str | Path) -> Path:
    target = Path(path).expanduser()
    payload = config_to_dict(config)
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        if target.suffix.lower() == ".json":
            json.dump(payload, handle, ensure_ascii=False, indent=2)
            handle.write("\n")
        else:
            yaml.safe_dump(payload, handle, sort_keys=False, allow_unicode=True)
    return target


def load_config(path: str | Path) -> Config:
    source = Path(path).expanduser()
    if not source.exists():
        raise FileNotFoundError(f"Config file not found: {source}")

    with source.open("r", encoding="utf-8") as handle:
        if source.suffix.lower() == ".json":
            try:
                loaded = json.load(handle)
            except json.JSONDecodeError as err:
                raise ConfigFormatError(f"{source} is not valid JSON. Error: {err.msg}") from err
        else:
            try:
                loaded = yaml.safe_load(handle)
            except yaml.YAMLError as err:
                raise ConfigFormatError(f"{source} is not valid YAML. Error: {err}") from err
    return config_from_dict(loaded)


def _require(payload: Dict[str, Any], name: str) -> Any:
    if name not in payload:
        raise ConfigFormatError(f"Missing config field `{name}`.")
    return payload[name]


def _require_str(name: str, raw: Any) -> str:
    if not isinstance(raw, str):
        raise ConfigFormatError(f"`{name}` must be a string.")
    return raw


def _decode_limit(name: str, raw: Any) -> LimitValue:
    if raw == UNLIMITED.value:
        return UNLIMITED
    if isinstance(raw, bool) or not isinstance(raw, int) or raw <= 0:
        raise ConfigFormatError(f"`{name}` must be a positive integer or `{UNLIMITED.value}`.")
    return raw
