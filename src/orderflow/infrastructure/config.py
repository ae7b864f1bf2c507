"""Runtime settings, read from the environment (or a .env / settings.ini).

All variables are prefixed with ``ORDERFLOW_``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from decouple import config

LOG_FORMATS = ("json", "console")


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_format: str = "json"

    def __post_init__(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        if self.log_format not in LOG_FORMATS:
            raise ValueError(
                f"Unknown log format {self.log_format!r}, expected one of {LOG_FORMATS}"
            )

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            log_level=config("ORDERFLOW_LOG_LEVEL", default="INFO").upper(),
            log_format=config("ORDERFLOW_LOG_FORMAT", default="json").lower(),
        )
