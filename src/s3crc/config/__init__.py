"""Configuration models and loaders for s3crc."""

from .loader import ConfigError, DEFAULT_CONFIG_PATH, load_config
from .models import LoggingConfig, RuntimeConfig, S3CrcConfig

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "LoggingConfig",
    "RuntimeConfig",
    "S3CrcConfig",
    "load_config",
]
