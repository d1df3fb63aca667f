"""Core infrastructure: logging and error responses."""
from .logging_config import setup_logging
from .errors import register_exception_handlers

__all__ = [
    "setup_logging",
    "register_exception_handlers",
]
