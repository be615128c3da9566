"""
Feature toggle configuration.

Each toggle gates one optional enricher. Toggles are independent and any
combination, including none, is valid.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from terror.core.errors import UnknownFeatureError
from terror.core.models import Feature


@dataclass(frozen=True)
class FeatureConfig:
    """Feature toggle configuration."""

    err_id: bool = False  # random UUID4 per error, on request
    time: bool = False  # UTC build timestamp, on request
    mdn: bool = False  # MDN reference link, derived from status

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "FeatureConfig":
        """Enable the named features, rejecting names that are not recognized."""
        enabled: dict[str, bool] = {}
        for raw in names:
            name = raw.strip().lower()
            if not name:
                continue
            try:
                feature = Feature(name)
            except ValueError:
                raise UnknownFeatureError(raw.strip()) from None
            enabled[feature.value] = True
        return cls(**enabled)

    @classmethod
    def all(cls) -> "FeatureConfig":
        return cls(err_id=True, time=True, mdn=True)

    @classmethod
    def none(cls) -> "FeatureConfig":
        return cls()

    def is_enabled(self, feature: Feature) -> bool:
        return bool(getattr(self, Feature(feature).value))

    @property
    def enabled(self) -> frozenset[Feature]:
        return frozenset(feature for feature in Feature if self.is_enabled(feature))
