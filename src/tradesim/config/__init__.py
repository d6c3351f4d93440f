"""Config loading and validation."""

from tradesim.config.loader import compute_config_hash, load_config, parse_strategy, serialize_config
from tradesim.config.models import (
    BotConfig,
    FeedConfig,
    IndicatorConfig,
    LedgerConfig,
    MonitoringConfig,
    RuntimeConfig,
    SimulatorConfig,
    Strategy,
    validate_bot_config,
)

__all__ = [
    "BotConfig",
    "FeedConfig",
    "IndicatorConfig",
    "LedgerConfig",
    "MonitoringConfig",
    "RuntimeConfig",
    "SimulatorConfig",
    "Strategy",
    "compute_config_hash",
    "load_config",
    "parse_strategy",
    "serialize_config",
    "validate_bot_config",
]
