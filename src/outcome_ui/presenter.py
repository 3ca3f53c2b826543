"""Presentation capability used by the outcome handler.

The handler never touches widgets directly; it talks to a ``Presenter``.
``outcome_ui.ui.qt_presenter.QtPresenter`` is the Qt implementation.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Protocol, Sequence


@dataclass(frozen=True)
class ChoiceAction:
    label: str
    callback: Callable[[], None]


class Presenter(Protocol):
    def show_transient_message(self, text: str) -> None:
        """Show an auto-dismissing, non-blocking message."""
        ...

    def show_blocking_choice(
        self, title: str, body: str, actions: Sequence[ChoiceAction]
    ) -> None:
        """
        Show a modal surface offering `actions`.
        The callback of the chosen action runs after the surface is dismissed.
        """
        ...
