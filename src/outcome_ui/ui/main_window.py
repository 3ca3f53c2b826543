"""Main application window for the outcome demo."""
from __future__ import annotations

import logging
from functools import partial
from typing import Any, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QStatusBar, QVBoxLayout, QLabel
)

from outcome_ui.adapter import bind_outcome
from outcome_ui.config import UIConfig
from outcome_ui.demo_api import fetch_greeting, fetch_offline, fetch_rejected
from outcome_ui.reactive import AsyncData, AsyncError, AsyncLoading, AsyncValue, ResultProvider
from outcome_ui.result import Success
from outcome_ui.ui.menu_bar import build_menu_bar
from outcome_ui.ui.qt_presenter import QtPresenter

log = logging.getLogger("outcome.ui")

LOADING_TEXT = "Loading…"
RAW_ERROR_TEXT = "Could not load data."


class MainWindow(QMainWindow):
    def __init__(self, config: Optional[UIConfig] = None, autoload: bool = True) -> None:
        super().__init__()
        self._config = config or UIConfig()
        self.setWindowTitle(self._config.window_title)
        self.resize(640, 400)

        self._provider = ResultProvider(self)
        self._presenter = QtPresenter(self, self._config.toast_timeout_ms)
        self._init_ui()

        self._provider.changed.connect(self._render)
        self._unbind = bind_outcome(self._provider, self._presenter, self._on_retry)

        if autoload:
            self._on_reload()

    # ------------------------ UI wiring ---------------------------------
    def _init_ui(self) -> None:
        build_menu_bar(self)
        status = QStatusBar()
        status.showMessage("Ready")
        self.setStatusBar(status)

        central = QWidget(self)
        lay = QVBoxLayout(central)
        self._body = QLabel(LOADING_TEXT, self)
        self._body.setAlignment(Qt.AlignCenter)
        lay.addWidget(self._body)
        central.setLayout(lay)
        self.setCentralWidget(central)

    @property
    def provider(self) -> ResultProvider:
        return self._provider

    @property
    def body_text(self) -> str:
        return self._body.text()

    # ------------------------ Actions ------------------------------------
    def _delay(self) -> float:
        return self._config.demo_delay_ms / 1000.0

    def _on_reload(self) -> None:
        self._provider.load(partial(fetch_greeting, self._delay()))

    def _on_simulate_failure(self) -> None:
        self._provider.load(partial(fetch_rejected, self._delay()))

    def _on_simulate_offline(self) -> None:
        self._provider.load(partial(fetch_offline, self._delay()))

    def _on_retry(self) -> None:
        log.info("Retry requested")
        self._provider.reload()

    # ------------------------ Rendering ----------------------------------
    def _render(self, value: AsyncValue[Any]) -> None:
        if isinstance(value, AsyncLoading):
            self._body.setText(LOADING_TEXT)
        elif isinstance(value, AsyncData):
            result = value.value
            if isinstance(result, Success):
                self._body.setText(str(result.data))
            else:
                self._body.setText(result.message)
        elif isinstance(value, AsyncError):
            self._body.setText(RAW_ERROR_TEXT)

    # ------------------------ Qt events ----------------------------------
    def closeEvent(self, event) -> None:  # noqa: N802 (Qt API)
        """Detach the outcome binding so late results are not presented."""
        try:
            self._unbind()
        finally:
            super().closeEvent(event)
