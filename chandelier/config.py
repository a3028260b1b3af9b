"""Configuration for Chandelier.

Settings are read from ``~/.config/chandelier/config.toml`` when it exists.
Every setting has a default, so the file is optional.
"""

import logging
import os
from pathlib import Path
from typing import Literal, Optional

import toml
from pydantic import BaseModel, Field, ValidationError

from chandelier.exchange import BINANCE_BASE_URL, DEFAULT_INTERVAL

logger = logging.getLogger(__name__)

CONFIG_PATH = Path.home() / ".config" / "chandelier" / "config.toml"

BASE_URL_ENV = "CHANDELIER_BASE_URL"


class ExchangeConfig(BaseModel):
    base_url: str = Field(default=BINANCE_BASE_URL, description="Exchange API root URL")
    timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds")


class ScanConfig(BaseModel):
    interval: str = Field(default=DEFAULT_INTERVAL, description="Default candle interval")


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Log level name"
    )


class ScannerConfig(BaseModel):
    """Top-level configuration."""

    exchange: ExchangeConfig = Field(default_factory=ExchangeConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: Optional[Path] = None) -> ScannerConfig:
    """Load configuration from a TOML file.

    A missing file gives the defaults. A file that cannot be parsed is
    reported and ignored. The CHANDELIER_BASE_URL environment variable
    overrides the configured exchange URL.

    Args:
        path: Config file location (defaults to CONFIG_PATH).

    Returns:
        The loaded configuration.
    """
    config_path = path or CONFIG_PATH
    data: dict = {}

    if config_path.exists():
        try:
            data = toml.load(config_path)
        except (OSError, toml.TomlDecodeError) as e:
            logger.warning("Could not read %s: %s", config_path, e)

    try:
        config = ScannerConfig.model_validate(data)
    except ValidationError as e:
        logger.warning("Invalid configuration in %s, using defaults: %s", config_path, e)
        config = ScannerConfig()

    base_url = os.environ.get(BASE_URL_ENV)
    if base_url:
        config = config.model_copy(
            update={"exchange": config.exchange.model_copy(update={"base_url": base_url})}
        )

    return config
