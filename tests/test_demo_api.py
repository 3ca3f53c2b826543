from outcome_ui.demo_api import fetch_greeting, fetch_offline, fetch_rejected
from outcome_ui.result import Failure, NetworkError, Success


def test_demo_calls_settle_into_each_variant():
    assert fetch_greeting(0) == Success("Hello World", message="Loaded!")
    assert fetch_rejected(0) == Failure("bad request")
    assert fetch_offline(0) == NetworkError()
