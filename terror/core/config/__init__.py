"""
Runtime configuration for the enrichers and for logging.

Feature toggles can be passed explicitly as a ``FeatureConfig`` or read
lazily from the environment through ``get_config()``.
"""

from terror.core.config.feature_config import FeatureConfig
from terror.core.config.logging_config import LoggingConfig
from terror.core.config.settings import Config, get_config

__all__ = [
    "Config",
    "FeatureConfig",
    "LoggingConfig",
    "get_config",
]
