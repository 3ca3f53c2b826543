"""Fake API calls used by the demo window. Each one blocks for `delay` seconds."""

from __future__ import annotations
import time

from outcome_ui.result import Failure, Result, Success, guard


def fetch_greeting(delay: float = 1.0) -> Result[str]:
    def _call() -> Result[str]:
        time.sleep(delay)
        return Success("Hello World", message="Loaded!")
    return guard(_call)


def fetch_rejected(delay: float = 1.0) -> Result[str]:
    def _call() -> Result[str]:
        time.sleep(delay)
        return Failure("bad request")
    return guard(_call)


def fetch_offline(delay: float = 1.0) -> Result[str]:
    def _call() -> Result[str]:
        time.sleep(delay)
        raise ConnectionError("host unreachable")
    return guard(_call)
