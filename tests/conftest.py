import sys
import warnings
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Silence the legacy pynvml package warning if both bindings are installed
warnings.filterwarnings("ignore", message=".*pynvml package is deprecated.*", category=FutureWarning)

from gpu_sampler.core.exceptions import TelemetryError  # noqa: E402
from gpu_sampler.core.signals import StopToken  # noqa: E402
from gpu_sampler.telemetry.backend import TelemetryBackend  # noqa: E402
from gpu_sampler.telemetry.samples import MemorySample, UtilizationSample  # noqa: E402

MIB = 1024 * 1024


class FakeBackend(TelemetryBackend):
    """Scriptable stand-in for the NVML boundary.

    ``errors`` maps an operation name to a TelemetryError raised on every call,
    or to a list consumed one call at a time (``None`` entries succeed).
    """

    def __init__(
        self,
        *,
        count: int = 1,
        name: str = "Fake GPU",
        utilization: Optional[UtilizationSample] = None,
        memory: Optional[MemorySample] = None,
        errors: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.count = count
        self.name = name
        self.utilization_sample = utilization or UtilizationSample(gpu=37, memory=12)
        self.memory_sample = memory or MemorySample(used=512 * MIB, total=1024 * MIB)
        self.errors: Dict[str, Any] = dict(errors or {})
        self.calls: List[str] = []
        self.after_memory: Optional[Callable[[int], None]] = None
        self.memory_calls = 0

    def _maybe_fail(self, operation: str) -> None:
        self.calls.append(operation)
        error = self.errors.get(operation)
        if isinstance(error, list):
            error = error.pop(0) if error else None
        if error is not None:
            raise error

    def init(self) -> None:
        self._maybe_fail("init")

    def shutdown(self) -> None:
        self._maybe_fail("shutdown")

    def device_count(self) -> int:
        self._maybe_fail("device_count")
        return self.count

    def handle_by_index(self, index: int) -> Any:
        self._maybe_fail("handle_by_index")
        return ("handle", index)

    def device_name(self, handle: Any) -> str:
        self._maybe_fail("device_name")
        return self.name

    def utilization(self, handle: Any) -> UtilizationSample:
        self._maybe_fail("utilization")
        return self.utilization_sample

    def memory(self, handle: Any) -> MemorySample:
        self.memory_calls += 1
        try:
            self._maybe_fail("memory")
            return self.memory_sample
        finally:
            if self.after_memory is not None:
                self.after_memory(self.memory_calls)


def nvml_error(message: str, operation: str = "", code: int = 999) -> TelemetryError:
    return TelemetryError(message, operation=operation, nvml_code=code)


def stop_after(token: StopToken, iterations: int) -> Callable[[int], None]:
    def _hook(calls: int) -> None:
        if calls >= iterations:
            token.request_stop()

    return _hook


@pytest.fixture
def token() -> StopToken:
    return StopToken()


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()

