import copy
from collections.abc import Mapping
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any
from uuid import UUID

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_serializer

from terror.core.constants import TIMESTAMP_FORMAT


class Feature(str, Enum):
    """Named toggles gating the optional enrichers."""

    ERR_ID = "err_id"
    TIME = "time"
    MDN = "mdn"

    def __str__(self) -> str:
        return self.value


def format_timestamp(value: datetime) -> str:
    """Render a point in time as fixed-width ISO-8601 with a ``Z`` designator."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def _freeze_details(value: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(copy.deepcopy(dict(value)))


Details = Annotated[Mapping[str, Any], AfterValidator(_freeze_details)]


class ErrorObj(BaseModel):
    """
    A buildable error object suited to most error reporting in web services.

    At the minimum it reports the HTTP status associated with the error and
    the error message. Everything else is optional and omitted from the
    serialized record when absent. Instances are frozen and details are
    held in a read-only copy; use :class:`terror.builder.Builder` to assemble one.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: StrictInt
    message: StrictStr
    short_message: str | None = None
    error_code: str | None = None
    details: Details | None = None
    identifier: UUID | None = Field(default=None, alias="id")
    timestamp: datetime | None = None
    reference_link: str | None = Field(default=None, alias="reference")
    tags: tuple[str, ...] = Field(default=(), exclude=True)

    @field_serializer("details")
    def _serialize_details(self, value: Mapping[str, Any] | None) -> dict[str, Any] | None:
        return dict(value) if value is not None else None

    @field_serializer("timestamp")
    def _serialize_timestamp(self, value: datetime | None) -> str | None:
        return format_timestamp(value) if value is not None else None

    def __str__(self) -> str:
        """
        Format the object as a log line.

        Examples:
            (409) :: failed to persist entity due to version conflict
            [op:persist ctx:none] (409) :: failed to persist entity due to version conflict
        """
        prefix = f"[{' '.join(self.tags)}] " if self.tags else ""
        return f"{prefix}({self.status}) :: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Structured record with absent optional fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ErrorObj":
        """Reconstruct an error value from a record produced by :meth:`to_dict`."""
        return cls.model_validate(data)
