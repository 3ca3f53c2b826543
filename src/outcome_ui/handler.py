from __future__ import annotations
from typing import Any, Callable, assert_never
import logging

from outcome_ui.presenter import ChoiceAction, Presenter
from outcome_ui.result import Failure, NetworkError, Result, Success

LOG_HANDLER = logging.getLogger("outcome.handler")

CONNECTION_ERROR_TITLE = "Connection Error"
RETRY_LABEL = "Retry"


def _once(action: Callable[[], None]) -> Callable[[], None]:
    fired = {"flag": False}

    def _run() -> None:
        if fired["flag"]:
            LOG_HANDLER.debug("Retry already triggered; ignoring repeat")
            return
        fired["flag"] = True
        action()

    return _run


def handle_outcome(
    presenter: Presenter,
    result: Result[Any],
    on_retry: Callable[[], None],
) -> None:
    """
    Present one settled outcome.

    Success and Failure show a transient message with the result's text.
    NetworkError shows a blocking "Connection Error" dialog whose single
    Retry action runs `on_retry` at most once.
    """
    match result:
        case Success(message=message):
            LOG_HANDLER.info("Success: %s", message)
            presenter.show_transient_message(message)
        case Failure(message=message):
            LOG_HANDLER.warning("Failure: %s", message)
            presenter.show_transient_message(message)
        case NetworkError(message=message):
            LOG_HANDLER.warning("Network error: %s", message)
            presenter.show_blocking_choice(
                CONNECTION_ERROR_TITLE,
                message,
                [ChoiceAction(RETRY_LABEL, _once(on_retry))],
            )
        case _:
            assert_never(result)


class OutcomeHandler:
    """Binds a presenter and retry action so UI code can call ``handler(result)``."""

    def __init__(self, presenter: Presenter, on_retry: Callable[[], None]) -> None:
        self._presenter = presenter
        self._on_retry = on_retry

    def __call__(self, result: Result[Any]) -> None:
        handle_outcome(self._presenter, result, self._on_retry)
