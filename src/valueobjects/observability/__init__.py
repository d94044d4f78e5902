"""Observability – logging for the value-object kernel."""

from valueobjects.observability.logging import (
    JsonLoggerFactory,
    ValueObjectProcessor,
    configure_logging,
    get_logger,
)

__all__ = ["JsonLoggerFactory", "ValueObjectProcessor", "configure_logging", "get_logger"]
