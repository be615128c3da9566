"""Identifier enricher: a correlation key for each error."""

import uuid
from typing import Any

from terror.core.models import Feature
from terror.enrichers.base import BaseEnricher


class IdentifierEnricher(BaseEnricher):
    """Assigns a random version-4 UUID to the error."""

    feature = Feature.ERR_ID
    field = "id"
    on_request = True
    description = "Random 128-bit version-4 UUID generated once per build"

    def enrich(self, status: int) -> Any | None:
        return uuid.uuid4()
