"""Reference-link enricher.

Maps an HTTP status code to the MDN page describing its standard meaning.
Codes outside the known table yield no link rather than an error.
"""

from typing import Any

import structlog

from terror.core.constants import MDN_STATUS_CODES, MDN_STATUS_REF
from terror.core.models import Feature
from terror.enrichers.base import BaseEnricher

logger = structlog.get_logger(__name__)


def reference_for(status: int) -> str | None:
    """Return the MDN documentation URL for a status code, if one exists."""
    if status not in MDN_STATUS_CODES:
        return None
    return f"{MDN_STATUS_REF}/{status}"


class ReferenceEnricher(BaseEnricher):
    """Attaches a reference to the MDN page explaining the status code."""

    feature = Feature.MDN
    field = "reference"
    on_request = False
    description = "MDN documentation link looked up from the status code"

    def enrich(self, status: int) -> Any | None:
        url = reference_for(status)
        if url is None:
            logger.debug("reference_not_found", status=status)
        return url
