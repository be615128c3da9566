"""Timestamp enricher: the UTC moment the error was built."""

from datetime import datetime, timezone
from typing import Any

from terror.core.models import Feature
from terror.enrichers.base import BaseEnricher


class TimestampEnricher(BaseEnricher):
    """Captures the current time in UTC."""

    feature = Feature.TIME
    field = "timestamp"
    on_request = True
    description = "UTC build time, serialized as ISO-8601 with a Z designator"

    def enrich(self, status: int) -> Any | None:
        return datetime.now(timezone.utc)
