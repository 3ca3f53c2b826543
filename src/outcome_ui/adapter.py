from __future__ import annotations
from typing import Any, Callable
import logging

from outcome_ui.handler import handle_outcome
from outcome_ui.presenter import Presenter
from outcome_ui.reactive import AsyncData, AsyncError, AsyncValue, ResultProvider

LOG_ADAPTER = logging.getLogger("outcome.adapter")


def dispatch_when_data(
    presenter: Presenter,
    value: AsyncValue[Any],
    on_retry: Callable[[], None],
) -> None:
    """Forward the held Result to the handler only while `value` holds data."""
    if isinstance(value, AsyncData):
        handle_outcome(presenter, value.value, on_retry)
    elif isinstance(value, AsyncError):
        # Not routed through the handler.
        LOG_ADAPTER.warning("Unhandled container error: %s", value.error)


def bind_outcome(
    provider: ResultProvider,
    presenter: Presenter,
    on_retry: Callable[[], None],
) -> Callable[[], None]:
    """
    Dispatch every state `provider` emits.
    Returns a callable that removes the binding.
    """
    def _on_changed(value: AsyncValue[Any]) -> None:
        dispatch_when_data(presenter, value, on_retry)

    provider.changed.connect(_on_changed)
    bound = {"flag": True}

    def _unbind() -> None:
        if not bound["flag"]:
            return
        bound["flag"] = False
        provider.changed.disconnect(_on_changed)

    return _unbind
