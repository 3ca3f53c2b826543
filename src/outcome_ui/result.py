"""Tri-state API outcomes: Success, Failure and NetworkError.

A producer settles every API call into exactly one of these variants before
it reaches the UI. ``guard`` is the mapping producers use for raised
exceptions.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union
import logging

T = TypeVar("T")

LOG_RESULT = logging.getLogger("outcome.result")

DEFAULT_SUCCESS_MESSAGE = "Success"
DEFAULT_NETWORK_MESSAGE = "No internet connection"

@dataclass(frozen=True)
class Success(Generic[T]):
    data: T
    message: str = DEFAULT_SUCCESS_MESSAGE

@dataclass(frozen=True)
class Failure:
    message: str

@dataclass(frozen=True)
class NetworkError:
    message: str = DEFAULT_NETWORK_MESSAGE

Result = Union[Success[T], Failure, NetworkError]

RESULT_TYPES = (Success, Failure, NetworkError)


def is_success(result: Result[Any]) -> bool:
    return isinstance(result, Success)

def is_failure(result: Result[Any]) -> bool:
    return isinstance(result, Failure)

def is_network_error(result: Result[Any]) -> bool:
    return isinstance(result, NetworkError)


def guard(
    call: Callable[[], Any],
    *,
    failure_types: tuple[type[BaseException], ...] = (),
) -> Result[Any]:
    """
    Run `call` and settle it into a Result.

    A returned Result passes through unchanged; any other return value is
    wrapped in Success. Exceptions listed in `failure_types` become a Failure
    carrying the exception text; every other Exception becomes NetworkError.
    """
    try:
        value = call()
    except failure_types as ex:
        LOG_RESULT.info("Call failed: %s", ex)
        return Failure(str(ex) or type(ex).__name__)
    except (ConnectionError, TimeoutError, OSError) as ex:
        LOG_RESULT.warning("Network failure: %s", ex)
        return NetworkError()
    except Exception:
        LOG_RESULT.exception("Unexpected error, reported as network failure")
        return NetworkError()

    if isinstance(value, RESULT_TYPES):
        return value
    return Success(value)
