"""
Core error classes for the terror library.
"""


class TerrorError(Exception):
    """Base class for errors raised by the library itself."""

    pass


class UnknownFeatureError(TerrorError, ValueError):
    """Raised when a feature toggle name is not recognized."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown feature: {name!r}")


class BuilderConsumedError(TerrorError, RuntimeError):
    """Raised when build() is called on a builder that was already built."""

    pass
