"""Structured error response bodies for consistent REST API error handling."""

from typing import Any

from terror.builder import Builder
from terror.core.config import FeatureConfig


def create_error_response(
    status: int,
    message: str,
    error_code: str | None = None,
    details: dict[str, Any] | None = None,
    features: FeatureConfig | None = None,
) -> dict[str, Any]:
    """Create a standardized error response body.

    An identifier and a timestamp are requested, and each is present only
    when its feature is enabled.
    """
    builder = Builder(status, message, features=features).with_id().with_timestamp()
    if error_code is not None:
        builder.error_code(error_code)
    for name, value in (details or {}).items():
        builder.add_detail(name, value)
    return builder.build().to_dict()
