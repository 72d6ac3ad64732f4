"""Cooperative cancellation token and the signal adapter that feeds it."""

from __future__ import annotations

import signal
from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, Optional

DEFAULT_STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class StopToken:
    """Stop request shared between a signal handler and a polling loop.

    ``request_stop`` only assigns plain attributes and takes no locks, so a
    handler may run it at any point in the main thread.
    """

    def __init__(self) -> None:
        self._stopped = False
        self.signum: Optional[int] = None

    def request_stop(self, signum: Optional[int] = None) -> None:
        if self.signum is None:
            self.signum = signum
        self._stopped = True

    def is_set(self) -> bool:
        return self._stopped


@contextmanager
def handle_signals(token: StopToken, signals: Iterable[int] = DEFAULT_STOP_SIGNALS) -> Iterator[StopToken]:
    """Route ``signals`` to ``token`` for the duration of the block."""

    def _handler(signum, frame):  # pragma: no cover - depends on signal delivery
        token.request_stop(signum)

    previous: Dict[int, object] = {}
    try:
        for signum in signals:
            previous[signum] = signal.signal(signum, _handler)
        yield token
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)
