"""Reactive container for an asynchronously produced Result.

``ResultProvider`` owns one ``AsyncValue`` and emits ``changed`` on every
transition. Producers run on the global ``QThreadPool``; their settled value
is delivered back on the UI thread through a queued signal.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union
import logging

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

from outcome_ui.result import Result

T = TypeVar("T")

LOG_REACTIVE = logging.getLogger("outcome.reactive")

@dataclass(frozen=True)
class AsyncLoading:
    pass

@dataclass(frozen=True)
class AsyncData(Generic[T]):
    value: T

@dataclass(frozen=True)
class AsyncError:
    error: BaseException

AsyncValue = Union[AsyncLoading, AsyncData[T], AsyncError]

Producer = Callable[[], Result[Any]]


class _RunnerSignals(QObject):
    # (generation, AsyncData | AsyncError)
    settled = Signal(int, object)


class _ProducerRunnable(QRunnable):
    def __init__(self, producer: Producer, generation: int, signals: _RunnerSignals) -> None:
        super().__init__()
        self._producer = producer
        self._generation = generation
        self._signals = signals

    def run(self) -> None:
        try:
            state: AsyncValue = AsyncData(self._producer())
        except Exception as ex:
            LOG_REACTIVE.error("Producer raised outside its result mapping: %s", ex)
            state = AsyncError(ex)
        self._signals.settled.emit(self._generation, state)


class ResultProvider(QObject):
    """Holds the current state of one asynchronous Result."""

    changed = Signal(object)

    def __init__(self, parent: Optional[QObject] = None, pool: Optional[QThreadPool] = None) -> None:
        super().__init__(parent)
        self._state: AsyncValue = AsyncLoading()
        self._producer: Optional[Producer] = None
        self._generation = 0
        self._pool = pool or QThreadPool.globalInstance()
        # Lives on the UI thread, so emits from pool threads arrive queued.
        self._signals = _RunnerSignals(self)
        self._signals.settled.connect(self._on_settled)

    @property
    def state(self) -> AsyncValue:
        return self._state

    def load(self, producer: Producer) -> None:
        """Start `producer` off the UI thread; the state goes to Loading first."""
        self._producer = producer
        self._generation += 1
        LOG_REACTIVE.debug("Load #%d started", self._generation)
        self._set_state(AsyncLoading())
        self._pool.start(_ProducerRunnable(producer, self._generation, self._signals))

    def reload(self) -> None:
        if self._producer is None:
            raise RuntimeError("reload() called before load()")
        self.load(self._producer)

    @Slot(int, object)
    def _on_settled(self, generation: int, state: AsyncValue) -> None:
        if generation != self._generation:
            LOG_REACTIVE.debug("Dropping superseded load #%d", generation)
            return
        self._set_state(state)

    def _set_state(self, state: AsyncValue) -> None:
        self._state = state
        self.changed.emit(state)
