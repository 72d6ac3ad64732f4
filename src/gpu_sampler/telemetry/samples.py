"""Point-in-time GPU readings and the console line built from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

BYTES_PER_MB = 1024 * 1024
UNAVAILABLE = "N/A"


@dataclass(frozen=True)
class UtilizationSample:
    gpu: int
    memory: int = 0


@dataclass(frozen=True)
class MemorySample:
    """Framebuffer usage in bytes. ``used <= total`` is not enforced."""

    used: int
    total: int

    @property
    def used_mb(self) -> float:
        return self.used / BYTES_PER_MB

    @property
    def total_mb(self) -> float:
        return self.total / BYTES_PER_MB

    @property
    def used_percent(self) -> Optional[float]:
        if self.total == 0:
            return None
        return self.used / self.total * 100.0


def format_sample_line(utilization: Optional[UtilizationSample], memory: Optional[MemorySample]) -> str:
    """Render one iteration; a reading that failed this iteration shows as ``N/A``."""
    util_text = f"{utilization.gpu}%" if utilization is not None else UNAVAILABLE

    if memory is None:
        mem_text = f"{UNAVAILABLE} / {UNAVAILABLE} ({UNAVAILABLE})"
    else:
        percent = memory.used_percent
        percent_text = f"{percent:.2f}%" if percent is not None else UNAVAILABLE
        mem_text = f"{memory.used_mb:.2f}MB / {memory.total_mb:.2f}MB ({percent_text})"

    return f"[GPU Util: {util_text} | Mem Used: {mem_text}]"
