"""Common exception hierarchy used across the sampler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(eq=False)
class SamplerError(RuntimeError):
    message: str
    code: str = "sampler_error"
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "metadata": self.metadata}


@dataclass(eq=False)
class TelemetryError(SamplerError):
    """A boundary library call failed; ``message`` is the library's own error text."""

    code: str = "telemetry_error"
    operation: str = ""
    nvml_code: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["operation"] = self.operation
        payload["nvml_code"] = self.nvml_code
        return payload

