"""Ambient services for tinydraw: persisted settings and logging setup."""

from .config import DEFAULT_CONFIG, DrawConfig, LoggingConfig, PngConfig, config_path, load_config, save_config
from .logging_setup import JsonFormatter, configure_logging, get_logger, log_dir

__all__ = [
    "DEFAULT_CONFIG",
    "DrawConfig",
    "JsonFormatter",
    "LoggingConfig",
    "PngConfig",
    "config_path",
    "configure_logging",
    "get_logger",
    "load_config",
    "log_dir",
    "save_config",
]
