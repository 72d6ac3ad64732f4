"""Core infrastructure and utilities.

Responsibility: Provides foundational primitives (logging, exceptions, cancellation)
used across the sampler modules.
"""

from .exceptions import SamplerError, TelemetryError
from .logging import configure_logging, get_logger
from .signals import DEFAULT_STOP_SIGNALS, StopToken, handle_signals

__all__ = [
    "SamplerError",
    "TelemetryError",
    "configure_logging",
    "get_logger",
    "DEFAULT_STOP_SIGNALS",
    "StopToken",
    "handle_signals",
]
