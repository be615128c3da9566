"""
Uniform error bodies for REST API responses.

    from terror import Builder

    err = Builder(404, "no such user").error_code("user.not_found").build()
    err.to_json()
"""

from terror.api.errors import create_error_response
from terror.builder import Builder
from terror.core.config import FeatureConfig
from terror.core.errors import BuilderConsumedError, TerrorError, UnknownFeatureError
from terror.core.models import ErrorObj, Feature

__version__ = "0.1.0"

__all__ = [
    "Builder",
    "BuilderConsumedError",
    "ErrorObj",
    "Feature",
    "FeatureConfig",
    "TerrorError",
    "UnknownFeatureError",
    "create_error_response",
]
