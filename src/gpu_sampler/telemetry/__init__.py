"""GPU telemetry boundary and sample types."""

from .backend import DeviceHandle, TelemetryBackend, TelemetryError
from .nvml import NvmlBackend
from .samples import MemorySample, UtilizationSample, format_sample_line

__all__ = [
    "DeviceHandle",
    "TelemetryBackend",
    "TelemetryError",
    "NvmlBackend",
    "MemorySample",
    "UtilizationSample",
    "format_sample_line",
]
