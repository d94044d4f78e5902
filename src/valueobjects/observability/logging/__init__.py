"""Observability – structured logging helpers."""
from valueobjects.observability.logging.factory import JsonLoggerFactory
from valueobjects.observability.logging.processors import (
    ValueObjectProcessor,
    configure_logging,
    get_logger,
)

__all__ = [
    "JsonLoggerFactory",
    "ValueObjectProcessor",
    "configure_logging",
    "get_logger",
]
