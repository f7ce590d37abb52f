from sandboxer.utils.env import env_flag, env_log_level, snapshot_environ
from sandboxer.utils.logging import setup_logging

__all__ = [
    "env_flag",
    "env_log_level",
    "snapshot_environ",
    "setup_logging",
]
