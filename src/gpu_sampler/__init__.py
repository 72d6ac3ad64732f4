"""GPU utilisation and memory sampler built on NVML."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "config",
    "core",
    "runners",
    "telemetry",
]
