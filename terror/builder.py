"""
Fluent builder for :class:`~terror.core.models.ErrorObj`.

A builder is created from the mandatory status and message, optional fields
are chained onto it, and ``build()`` consumes it to produce a frozen value.
Enrichers (identifier, timestamp, reference link) only run inside ``build()``,
so every generated value is produced exactly once per error.
"""

from typing import Any

import structlog
from pydantic import StrictInt, StrictStr, TypeAdapter

from terror.core.config import FeatureConfig, get_config
from terror.core.constants import DEFAULT_ERROR_STATUS
from terror.core.errors import BuilderConsumedError
from terror.core.models import ErrorObj, Feature
from terror.enrichers import ENRICHERS

logger = structlog.get_logger(__name__)

_status_adapter = TypeAdapter(StrictInt)
_message_adapter = TypeAdapter(StrictStr)


class Builder:
    """A one-shot builder for :class:`ErrorObj`, consumed by :meth:`build`."""

    def __init__(self, status: int, message: str, *, features: FeatureConfig | None = None) -> None:
        self._status = status
        self._message = message
        self._features = features
        self._short_message: str | None = None
        self._error_code: str | None = None
        self._details: dict[str, Any] = {}
        self._tags: list[str] = []
        self._requested: set[Feature] = set()
        self._consumed = False

    @classmethod
    def from_error(cls, err: BaseException, *, features: FeatureConfig | None = None) -> "Builder":
        """Start from any exception, assuming ``500 Internal Server Error``."""
        return cls(DEFAULT_ERROR_STATUS, str(err), features=features)

    def short_message(self, msg: str) -> "Builder":
        self._short_message = msg
        return self

    def error_code(self, code: str) -> "Builder":
        """Set the machine-readable error code. Later calls overwrite earlier ones."""
        self._error_code = code
        return self

    def add_detail(self, name: str, value: Any) -> "Builder":
        """
        Add a named detail of any JSON-serializable type.

        Example:
            Builder(500, "generic error").add_detail("object_id", 922).build()

        renders as::

            {"status": 500, "message": "generic error", "details": {"object_id": 922}}
        """
        self._details[name] = value
        return self

    def add_tag(self, tag: str) -> "Builder":
        """Add a log tag. Tags show up in ``str(err)`` but are never serialized."""
        self._tags.append(tag)
        return self

    def with_id(self) -> "Builder":
        """Request a UUID. Has no effect unless the ``err_id`` feature is enabled."""
        self._requested.add(Feature.ERR_ID)
        return self

    def with_timestamp(self) -> "Builder":
        """Request a build timestamp. Has no effect unless the ``time`` feature is enabled."""
        self._requested.add(Feature.TIME)
        return self

    def build(self) -> ErrorObj:
        """
        Conclude the configuration and produce a new :class:`ErrorObj`.

        Enabled enrichers run here, once. The builder is consumed; calling
        ``build()`` again raises :class:`BuilderConsumedError`. A status that is
        not an ``int`` or a message that is not a ``str`` raises pydantic's
        ``ValidationError`` before any enricher runs.
        """
        if self._consumed:
            raise BuilderConsumedError("Builder has already been consumed by build()")
        self._consumed = True

        # Checked before any enricher sees the status
        _status_adapter.validate_python(self._status)
        _message_adapter.validate_python(self._message)

        features = self._features if self._features is not None else get_config().features
        enriched: dict[str, Any] = {}
        for feature, enricher in ENRICHERS.items():
            enabled = features.is_enabled(feature)
            requested = feature in self._requested
            if requested and not enabled:
                logger.debug("feature_request_ignored", feature=feature.value, status=self._status)
            if not enricher.applies(enabled, requested):
                continue
            value = enricher.enrich(self._status)
            if value is not None:
                enriched[enricher.field] = value

        err = ErrorObj(
            status=self._status,
            message=self._message,
            short_message=self._short_message,
            error_code=self._error_code,
            details=dict(self._details) or None,
            tags=tuple(self._tags),
            **enriched,
        )
        logger.debug(
            "error_built",
            status=err.status,
            error_code=err.error_code,
            enrichments=sorted(enriched),
        )
        return err
