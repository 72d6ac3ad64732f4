"""Typer CLI entrypoint: sample the first GPU until interrupted."""

from __future__ import annotations

import typer

from ..config.schema import SamplerConfig
from ..core.logging import configure_logging, get_logger
from ..core.signals import StopToken, handle_signals
from ..runners.sampler import run_sampler
from ..telemetry.backend import TelemetryBackend
from ..telemetry.nvml import NvmlBackend

LOGGER = get_logger(__name__)

app = typer.Typer(add_completion=False, help="Print GPU utilisation and memory usage until Ctrl+C.")


def _make_backend() -> TelemetryBackend:
    return NvmlBackend()


@app.command()
def sample() -> None:
    """Poll the GPU every 500 ms and print one line per sample."""

    config = SamplerConfig()
    configure_logging(config.log_level)

    LOGGER.debug("Sampling device %d every %d ms", config.device_index, config.interval_ms)
    token = StopToken()
    with handle_signals(token):
        code = run_sampler(_make_backend(), token, config=config)
    if code:
        raise typer.Exit(code=code)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
