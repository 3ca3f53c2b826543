from __future__ import annotations
import os
import time
from typing import Callable, List, Sequence, Tuple

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from outcome_ui.presenter import ChoiceAction  # noqa: E402


class RecordingPresenter:
    """Presenter fake: records every surface it is asked to show."""

    def __init__(self) -> None:
        self.messages: List[str] = []
        self.dialogs: List[Tuple[str, str, Sequence[ChoiceAction]]] = []

    def show_transient_message(self, text: str) -> None:
        self.messages.append(text)

    def show_blocking_choice(self, title: str, body: str, actions: Sequence[ChoiceAction]) -> None:
        self.dialogs.append((title, body, list(actions)))

    def choose(self, label: str, dialog_index: int = -1) -> None:
        _, _, actions = self.dialogs[dialog_index]
        for action in actions:
            if action.label == label:
                action.callback()
                return
        raise KeyError(label)


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


def _wait_until(predicate: Callable[[], bool], timeout: float = 5.0) -> bool:
    from PySide6.QtCore import QCoreApplication
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        QCoreApplication.processEvents()
        if predicate():
            return True
        time.sleep(0.01)
    QCoreApplication.processEvents()
    return predicate()


@pytest.fixture
def wait_until(qapp):
    return _wait_until
