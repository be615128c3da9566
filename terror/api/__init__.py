# REST response body helpers

from terror.api.errors import create_error_response

__all__ = [
    "create_error_response",
]
