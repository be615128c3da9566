"""
Environment-driven settings: which enrichers are enabled and how to log.

Nothing is read at import time; the environment (and a ``.env`` file, if
present) is loaded the first time :func:`get_config` is called.
"""

import logging
import os
from functools import lru_cache

from dotenv import load_dotenv

from terror.core.config.feature_config import FeatureConfig
from terror.core.config.logging_config import LoggingConfig


def _split_names(value: str) -> list[str]:
    return [item for item in value.split(",") if item.strip()]


class Config:
    """Feature toggles and logging settings read from the environment."""

    def __init__(self) -> None:
        # Comma-separated toggles, e.g. TERROR_FEATURES="err_id,time,mdn"
        self.features = FeatureConfig.from_names(_split_names(os.getenv("TERROR_FEATURES", "")))

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
            format=os.getenv("LOG_FORMAT", "console").lower(),
        )

    def validate(self) -> bool:
        """Validate configuration."""
        errors = []

        if self.logging.format not in ("console", "json"):
            errors.append("LOG_FORMAT must be 'console' or 'json'")

        if not isinstance(getattr(logging, self.logging.level, None), int):
            errors.append(f"LOG_LEVEL {self.logging.level!r} is not a logging level")

        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

        return True


@lru_cache()
def get_config() -> Config:
    """Return the process-wide ``Config``, loading ``.env`` on first use."""
    load_dotenv()
    return Config()
