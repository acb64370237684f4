import logging
import os
from pathlib import Path

from linkpage.rules.models import Rules

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    """Operational requirements are not met; the service must not start."""


def validate_ops_rules(rules: Rules, data_dir: Path) -> None:
    """
    Validate operational requirements before startup.

    Raises:
        ConfigError: the data directory is unusable or required env vars are missing.
    """
    ops = rules.ops

    # 1. Check Data Dir
    if ops.data_dir_required:
        data_dir.mkdir(parents=True, exist_ok=True)
        if not os.access(data_dir, os.W_OK):
            raise ConfigError(f"Data directory {data_dir} is not writable")

    # 2. Check Required Env
    missing = [env_var for env_var in ops.required_env if env_var not in os.environ]
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

    logger.info("Configuration validated (rules %s)", rules.project.rules_version)
