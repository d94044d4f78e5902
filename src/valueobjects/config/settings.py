"""Config settings – Settings base class and the library's own settings."""
from __future__ import annotations

import dataclasses
import logging

from valueobjects.kernel.errors.application import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ValuesSettings(Settings):
    """Logging knobs, read from ``VALUES_*`` environment variables."""

    _prefix: dataclasses.ClassVar[str] = "VALUES"

    log_level: str = "INFO"
    json_logs: bool = True

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["Settings", "ValuesSettings"]
