"""Base enricher interface.

This module defines the abstract base class that all enrichers must implement.
An enricher derives one optional field of an error value at build time.
"""

from abc import ABC, abstractmethod
from typing import Any

from terror.core.models import Feature


class BaseEnricher(ABC):
    """Abstract base class for all build-time enrichers.

    Attributes:
        feature: Toggle that must be enabled for the enricher to run.
        field: Serialized key of the field the enricher populates.
        on_request: Whether the builder must explicitly request the field.
            When False the field is derived whenever the feature is enabled.
        description: Human-readable description of what the enricher adds.
    """

    feature: Feature
    field: str = ""
    on_request: bool = True
    description: str = ""

    @abstractmethod
    def enrich(self, status: int) -> Any | None:
        """Produce the field value.

        Args:
            status: Status code of the error value being built.

        Returns:
            The value for ``field``, or None when the field should be absent.
        """
        pass

    def applies(self, enabled: bool, requested: bool) -> bool:
        """Whether the enricher runs for a build with the given flags."""
        if not enabled:
            return False
        return requested or not self.on_request

    def get_description(self) -> dict[str, Any]:
        return {
            "feature": self.feature.value,
            "field": self.field,
            "on_request": self.on_request,
            "description": self.description,
        }
