"""Boundary interface to the vendor telemetry library."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..core.exceptions import TelemetryError
from .samples import MemorySample, UtilizationSample

__all__ = ["DeviceHandle", "TelemetryBackend", "TelemetryError"]

DeviceHandle = Any


class TelemetryBackend(ABC):
    """Operations the sampler consumes from an NVML-style library.

    Every method raises :class:`TelemetryError` carrying the library's own
    error text when the underlying call fails.
    """

    @abstractmethod
    def init(self) -> None:
        """Initialise the library."""

    @abstractmethod
    def shutdown(self) -> None:
        """Release library resources."""

    @abstractmethod
    def device_count(self) -> int:
        pass

    @abstractmethod
    def handle_by_index(self, index: int) -> DeviceHandle:
        pass

    @abstractmethod
    def device_name(self, handle: DeviceHandle) -> str:
        pass

    @abstractmethod
    def utilization(self, handle: DeviceHandle) -> UtilizationSample:
        pass

    @abstractmethod
    def memory(self, handle: DeviceHandle) -> MemorySample:
        pass
