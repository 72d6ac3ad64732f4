"""Sampling runners.

Responsibility: Drives the telemetry backend through init, the polling loop and
shutdown, and maps the outcome to a process exit code.
"""

from .sampler import EXIT_FAILURE, EXIT_OK, SamplerLoop, run_sampler

__all__ = ["EXIT_FAILURE", "EXIT_OK", "SamplerLoop", "run_sampler"]
