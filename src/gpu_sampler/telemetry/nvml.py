"""NVML implementation of the telemetry boundary."""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

import pynvml

from ..core.exceptions import TelemetryError
from .backend import DeviceHandle, TelemetryBackend
from .samples import MemorySample, UtilizationSample

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


def _call(operation: str, func: Callable[..., T], *args: Any) -> T:
    try:
        return func(*args)
    except pynvml.NVMLError as exc:
        # str() goes through nvmlErrorString
        raise TelemetryError(
            str(exc),
            operation=operation,
            nvml_code=getattr(exc, "value", None),
        ) from exc


class NvmlBackend(TelemetryBackend):
    """Thin adapter over ``pynvml`` (nvidia-ml-py)."""

    def init(self) -> None:
        _call("init", pynvml.nvmlInit)
        LOGGER.debug("NVML initialised")

    def shutdown(self) -> None:
        _call("shutdown", pynvml.nvmlShutdown)
        LOGGER.debug("NVML shut down")

    def device_count(self) -> int:
        return int(_call("device_count", pynvml.nvmlDeviceGetCount))

    def handle_by_index(self, index: int) -> DeviceHandle:
        return _call("handle_by_index", pynvml.nvmlDeviceGetHandleByIndex, index)

    def device_name(self, handle: DeviceHandle) -> str:
        name = _call("device_name", pynvml.nvmlDeviceGetName, handle)
        # older bindings return bytes
        if isinstance(name, bytes):
            return name.decode("utf-8", errors="replace")
        return str(name)

    def utilization(self, handle: DeviceHandle) -> UtilizationSample:
        util = _call("utilization", pynvml.nvmlDeviceGetUtilizationRates, handle)
        return UtilizationSample(gpu=int(util.gpu), memory=int(util.memory))

    def memory(self, handle: DeviceHandle) -> MemorySample:
        info = _call("memory", pynvml.nvmlDeviceGetMemoryInfo, handle)
        return MemorySample(used=int(info.used), total=int(info.total))
