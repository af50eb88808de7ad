"""Configuration loader for gigatools-agent."""

import json
import os
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from gigatools_agent.config.schema import AgentDefaults, Config, LoggingConfig, ProvidersConfig

DEFAULT_CONFIG_DIR = Path.home() / ".gigatools-agent"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.json"
CONFIG_PATH_ENV = "GIGATOOLS_AGENT_CONFIG"


def get_config_path(config_path: Path | None = None) -> Path:
    """Resolve the config file: explicit path, then $GIGATOOLS_AGENT_CONFIG, then the default."""
    if config_path:
        return config_path
    env_path = os.environ.get(CONFIG_PATH_ENV)
    return Path(env_path).expanduser() if env_path else DEFAULT_CONFIG_FILE


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file and environment variables.

    Values in the config file win over environment variables, which win over
    defaults. An unreadable or invalid file is reported and ignored.

    Args:
        config_path: Optional path to config file. See get_config_path for the fallbacks.

    Returns:
        Loaded configuration.
    """
    path = get_config_path(config_path)
    if not path.exists():
        return Config()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning(f"Cannot read config {path}: {e}, using defaults")
        return Config()

    try:
        config = Config(**data)
    except ValidationError as e:
        fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in e.errors())
        logger.warning(f"Invalid config {path} ({fields}), using defaults")
        return Config()

    logger.debug(f"Config loaded from {path}")
    return config


def save_default_config(config_path: Path | None = None, overwrite: bool = False) -> Path:
    """
    Save default configuration to file.

    Only built-in defaults are written, so a credential taken from the
    environment never ends up on disk.

    Args:
        config_path: Optional path to save config. See get_config_path for the fallbacks.
        overwrite: Replace an existing file instead of raising FileExistsError.

    Returns:
        Path where config was saved.
    """
    path = get_config_path(config_path)
    if path.exists() and not overwrite:
        raise FileExistsError(f"Config already exists at {path}")
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "agent": AgentDefaults().model_dump(mode="json"),
        "providers": ProvidersConfig().model_dump(mode="json"),
        "logging": LoggingConfig().model_dump(mode="json"),
    }
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    logger.info(f"Default config saved to {path}")
    return path
