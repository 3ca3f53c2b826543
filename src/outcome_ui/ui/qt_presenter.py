from __future__ import annotations
from typing import Dict, Sequence
import logging

from PySide6.QtWidgets import QAbstractButton, QMainWindow, QMessageBox

from outcome_ui.presenter import ChoiceAction

LOG_UI = logging.getLogger("outcome.ui")


class QtPresenter:
    """
    Presenter backed by the host window.
    Transient messages use the status bar; blocking choices use a modal QMessageBox.
    """

    def __init__(self, window: QMainWindow, toast_timeout_ms: int = 4000) -> None:
        self._window = window
        self._toast_timeout_ms = toast_timeout_ms

    def show_transient_message(self, text: str) -> None:
        self._window.statusBar().showMessage(text, self._toast_timeout_ms)

    def build_choice_box(
        self, title: str, body: str, actions: Sequence[ChoiceAction]
    ) -> tuple[QMessageBox, Dict[QAbstractButton, ChoiceAction]]:
        box = QMessageBox(self._window)
        box.setIcon(QMessageBox.Warning)
        box.setWindowTitle(title)
        box.setText(body)
        buttons: Dict[QAbstractButton, ChoiceAction] = {}
        for action in actions:
            btn = box.addButton(action.label, QMessageBox.AcceptRole)
            buttons[btn] = action
        if buttons:
            box.setDefaultButton(next(iter(buttons)))
        # Hidden escape button: closing or Esc must not count as an action.
        esc = box.addButton(QMessageBox.Cancel)
        esc.hide()
        box.setEscapeButton(esc)
        return box, buttons

    def show_blocking_choice(
        self, title: str, body: str, actions: Sequence[ChoiceAction]
    ) -> None:
        box, buttons = self.build_choice_box(title, body, actions)
        box.exec()
        chosen = buttons.get(box.clickedButton())
        box.deleteLater()
        if chosen is None:
            LOG_UI.info("Dialog '%s' dismissed without a choice", title)
            return
        LOG_UI.info("Dialog '%s': %s selected", title, chosen.label)
        chosen.callback()
