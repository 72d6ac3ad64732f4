"""Pydantic schemas defining configuration contracts."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator

DEFAULT_INTERVAL_MS = 500


class SamplerConfig(BaseModel):
    device_index: int = Field(default=0, ge=0)
    interval_ms: int = Field(default=DEFAULT_INTERVAL_MS, gt=0)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @property
    def interval_s(self) -> float:
        return self.interval_ms / 1000.0
