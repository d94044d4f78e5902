"""Observability – structlog processors and logger helpers."""
from __future__ import annotations

from typing import Any

import structlog

from valueobjects.config.loaders import EnvSettingsLoader
from valueobjects.config.settings import ValuesSettings
from valueobjects.kernel.ddd.value_object import ValueObject


class ValueObjectProcessor:
    """structlog processor that renders value objects as plain dicts.

    Top-level event values that are :class:`ValueObject` instances become
    ``{"type": ..., "fields": {...}}`` so JSON output stays readable.
    Unchecked instances are left for the renderer's ``repr`` fallback.

    Usage::

        structlog.configure(processors=[ValueObjectProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, ValueObject) and value._core is not None:
                event_dict[key] = {"type": type(value).__name__, "fields": value.as_dict()}
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def configure_logging(settings: ValuesSettings | None = None) -> ValuesSettings:
    """Apply *settings* (or ``VALUES_*`` env vars) to the logging stack."""
    from valueobjects.observability.logging.factory import JsonLoggerFactory

    if settings is None:
        settings = EnvSettingsLoader().load(ValuesSettings)
    JsonLoggerFactory.configure(settings.level, json=settings.json_logs)
    return settings


__all__ = ["ValueObjectProcessor", "configure_logging", "get_logger"]
