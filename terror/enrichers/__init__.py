"""
Registry of build-time enrichers.

Enrichers run in registry order, one per feature toggle.
"""

from terror.core.models import Feature
from terror.enrichers.base import BaseEnricher
from terror.enrichers.identifier import IdentifierEnricher
from terror.enrichers.reference import ReferenceEnricher, reference_for
from terror.enrichers.timestamp import TimestampEnricher

ENRICHERS: dict[Feature, BaseEnricher] = {
    Feature.ERR_ID: IdentifierEnricher(),
    Feature.TIME: TimestampEnricher(),
    Feature.MDN: ReferenceEnricher(),
}

__all__ = [
    "ENRICHERS",
    "BaseEnricher",
    "IdentifierEnricher",
    "ReferenceEnricher",
    "TimestampEnricher",
    "reference_for",
]
