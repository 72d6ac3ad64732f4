"""Polling loop that samples one GPU until a stop is requested."""

from __future__ import annotations

import logging
import sys
import time
from typing import Optional, TextIO

from ..config.schema import SamplerConfig
from ..core.exceptions import TelemetryError
from ..core.signals import StopToken
from ..telemetry.backend import DeviceHandle, TelemetryBackend
from ..telemetry.samples import MemorySample, UtilizationSample, format_sample_line

LOGGER = logging.getLogger(__name__)

__all__ = ["EXIT_FAILURE", "EXIT_OK", "SamplerLoop", "run_sampler"]

EXIT_OK = 0
EXIT_FAILURE = 1


class SamplerLoop:
    """Run the init → poll → shutdown sequence against a telemetry backend.

    Fatal problems (init, device lookup, shutdown) are logged and turned into
    ``EXIT_FAILURE``. Per-iteration query failures are logged and the affected
    values print as ``N/A``.
    """

    def __init__(
        self,
        backend: TelemetryBackend,
        config: Optional[SamplerConfig] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.backend = backend
        self.config = config or SamplerConfig()
        self._stream = stream or sys.stdout
        self._handle: Optional[DeviceHandle] = None
        self.device_name: Optional[str] = None
        self.iterations = 0

    def run(self, token: StopToken) -> int:
        if not self.start():
            return EXIT_FAILURE
        self.poll(token)
        if token.signum is not None:
            self._emit(f"Interrupt signal ({token.signum}) received. Stopping...")
        return self.stop()

    def start(self) -> bool:
        try:
            self.backend.init()
        except TelemetryError as exc:
            self._report("Error initializing NVML", exc)
            return False

        index = self.config.device_index
        try:
            count = self.backend.device_count()
        except TelemetryError as exc:
            self._report("No NVIDIA devices found or NVML error", exc)
            self._abandon()
            return False
        if count == 0:
            LOGGER.error("No NVIDIA devices found or NVML error: no devices reported")
            self._abandon()
            return False
        if index >= count:
            LOGGER.error("Unable to get handle for device %d: only %d device(s) visible", index, count)
            self._abandon()
            return False

        try:
            self._handle = self.backend.handle_by_index(index)
        except TelemetryError as exc:
            self._report(f"Unable to get handle for device {index}", exc)
            self._abandon()
            return False

        try:
            self.device_name = self.backend.device_name(self._handle)
        except TelemetryError as exc:
            self._report("Unable to get device name", exc)
        else:
            self._emit(f"Using GPU: {self.device_name}")
        return True

    def poll(self, token: StopToken) -> int:
        """Sample until ``token`` is set; returns the number of iterations run."""
        interval = self.config.interval_s
        while not token.is_set():
            self.sample_once()
            # a signal during the sleep is honoured at the loop head
            time.sleep(interval)
        return self.iterations

    def sample_once(self) -> str:
        if self._handle is None:
            raise RuntimeError("Sampler has not been started")

        utilization: Optional[UtilizationSample] = None
        memory: Optional[MemorySample] = None
        try:
            utilization = self.backend.utilization(self._handle)
        except TelemetryError as exc:
            self._report("Unable to get utilization rates", exc)
        try:
            memory = self.backend.memory(self._handle)
        except TelemetryError as exc:
            self._report("Unable to get memory info", exc)

        line = format_sample_line(utilization, memory)
        self._emit(line)
        self.iterations += 1
        return line

    def stop(self) -> int:
        try:
            self.backend.shutdown()
        except TelemetryError as exc:
            self._report("Error shutting down NVML", exc)
            return EXIT_FAILURE
        finally:
            self._handle = None
        self._emit("Done. Exiting normally.")
        return EXIT_OK

    def _abandon(self) -> None:
        try:
            self.backend.shutdown()
        except TelemetryError as exc:
            LOGGER.warning("Error shutting down NVML: %s", exc)

    def _report(self, prefix: str, exc: TelemetryError) -> None:
        LOGGER.error("%s: %s", prefix, exc, extra={"operation": exc.operation, "nvml_code": exc.nvml_code})

    def _emit(self, line: str) -> None:
        print(line, file=self._stream, flush=True)


def run_sampler(
    backend: TelemetryBackend,
    token: StopToken,
    config: Optional[SamplerConfig] = None,
    stream: Optional[TextIO] = None,
) -> int:
    """Sample until ``token`` is set and return the process exit code."""
    return SamplerLoop(backend, config=config, stream=stream).run(token)
