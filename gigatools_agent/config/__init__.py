"""Configuration module."""

from gigatools_agent.config.schema import Config
from gigatools_agent.config.loader import get_config_path, load_config, save_default_config

__all__ = ["Config", "get_config_path", "load_config", "save_default_config"]
