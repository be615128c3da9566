from terror.core.utils.logging import configure_logging, log_error

__all__ = [
    "configure_logging",
    "log_error",
]
