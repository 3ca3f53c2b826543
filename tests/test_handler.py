import pytest

from outcome_ui.handler import OutcomeHandler, handle_outcome
from outcome_ui.result import Failure, NetworkError, Success


def test_success_shows_one_transient_message(presenter):
    handle_outcome(presenter, Success({"id": 1}, message="Loaded!"), lambda: None)
    assert presenter.messages == ["Loaded!"]
    assert presenter.dialogs == []


def test_failure_shows_one_transient_message(presenter):
    handle_outcome(presenter, Failure("bad request"), lambda: None)
    assert presenter.messages == ["bad request"]
    assert presenter.dialogs == []


def test_network_error_retry_runs_once(presenter):
    calls = []
    handle_outcome(presenter, NetworkError(), lambda: calls.append(1))

    assert presenter.messages == []
    assert len(presenter.dialogs) == 1
    title, body, actions = presenter.dialogs[0]
    assert title == "Connection Error"
    assert body == "No internet connection"
    assert [a.label for a in actions] == ["Retry"]
    assert calls == []

    presenter.choose("Retry")
    presenter.choose("Retry")
    assert calls == [1]


def test_same_success_twice_is_not_deduplicated(presenter):
    r = Success("x", message="Loaded!")
    handle_outcome(presenter, r, lambda: None)
    handle_outcome(presenter, r, lambda: None)
    assert presenter.messages == ["Loaded!", "Loaded!"]


def test_unknown_variant_fails_loudly(presenter):
    with pytest.raises(AssertionError):
        handle_outcome(presenter, "not a result", lambda: None)  # type: ignore[arg-type]


def test_outcome_handler_binds_retry(presenter):
    calls = []
    handler = OutcomeHandler(presenter, lambda: calls.append("retry"))
    handler(NetworkError("offline"))
    presenter.choose("Retry")
    assert presenter.dialogs[0][1] == "offline"
    assert calls == ["retry"]
