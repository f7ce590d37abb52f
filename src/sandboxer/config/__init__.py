from sandboxer.config.builder import build_config, resolve_limit, strip_double_quotes
from sandboxer.config.codec import config_from_dict, config_to_dict, dump_config, load_config
from sandboxer.config.identity import lookup_nobody
from sandboxer.config.model import (
    DEFAULT_STACK_BYTES,
    MAX_ARG_ENTRIES,
    MAX_ENV_ENTRIES,
    UNLIMITED,
    Config,
    ParsedArgs,
    Unlimited,
)

__all__ = [
    "Config",
    "ParsedArgs",
    "Unlimited",
    "UNLIMITED",
    "DEFAULT_STACK_BYTES",
    "MAX_ARG_ENTRIES",
    "MAX_ENV_ENTRIES",
    "build_config",
    "resolve_limit",
    "strip_double_quotes",
    "lookup_nobody",
    "config_to_dict",
    "config_from_dict",
    "dump_config",
    "load_config",
]
