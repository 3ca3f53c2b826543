"""Menu bar construction for the demo window."""
from __future__ import annotations
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMenuBar, QMainWindow

def build_menu_bar(window: QMainWindow) -> QMenuBar:
    """Create and return the application menu bar.
    Always shows menu actions; connects to window slots when available.
    """
    menu_bar: QMenuBar = window.menuBar()

    # ------------------------------------------------------------------
    # File menu
    # ------------------------------------------------------------------
    file_menu = menu_bar.addMenu("&File")

    entries = (
        ("&Reload", "_on_reload"),
        ("Simulate &Failure", "_on_simulate_failure"),
        ("Simulate &Offline", "_on_simulate_offline"),
    )
    # Status bar is reserved for transient outcome messages; no status tips.
    for text, slot_name in entries:
        action = QAction(text, window)
        slot = getattr(window, slot_name, None)
        if callable(slot):
            action.triggered.connect(slot)  # type: ignore[call-arg]
        else:
            action.setEnabled(False)
        file_menu.addAction(action)

    file_menu.addSeparator()

    # Exit
    exit_action = QAction("E&xit", window)
    exit_action.triggered.connect(window.close)
    file_menu.addAction(exit_action)

    return menu_bar
