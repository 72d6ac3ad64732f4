"""Sampler settings.

Responsibility: Defines the validated parameter object the runner and CLI pass
around; the process itself always uses the defaults.
"""

from .schema import DEFAULT_INTERVAL_MS, SamplerConfig

__all__ = ["DEFAULT_INTERVAL_MS", "SamplerConfig"]
