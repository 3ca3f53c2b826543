from __future__ import annotations
from pathlib import Path
from typing import Optional
import logging
import sys

from PySide6.QtWidgets import QApplication, QMessageBox

from outcome_ui.config import UIConfig, find_project_root, load_config
from outcome_ui.errors import Err
from outcome_ui.logging_setup import configure_logging
from outcome_ui.ui.main_window import MainWindow

log = logging.getLogger("outcome.ui")


def _get_or_create_app() -> QApplication:
    """
    Return the existing QApplication if present; otherwise create one.
    Never create a second QApplication (avoids RuntimeError on rerun).
    """
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    return app


def _find_existing_window(app: QApplication) -> MainWindow | None:
    """Return an existing MainWindow instance if one is already alive."""
    for w in app.topLevelWidgets():
        if isinstance(w, MainWindow):
            return w
    return None


def _show_window(win: MainWindow) -> None:
    """Show and bring the window to the front."""
    win.show()
    win.raise_()
    win.activateWindow()


def main(project_root: Optional[Path] = None) -> int:
    configure_logging()
    root = project_root or find_project_root(Path.cwd())
    res = load_config(root)
    config_error = None
    if isinstance(res, Err):
        config_error = res.error
        log.error("Config rejected, using defaults: %s", config_error)
        config = UIConfig()
    else:
        config = res.value
    configure_logging(config.log_level)

    app = _get_or_create_app()

    # If a previous MainWindow still exists (same kernel/process), reuse it.
    win = _find_existing_window(app)
    if win is None:
        win = MainWindow(config)

    _show_window(win)
    if config_error is not None:
        QMessageBox.warning(
            win,
            "Configuration",
            f"{config_error}\n\nDefault settings are in use.",
        )

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
