"""
RPS Match GUI

PySide6 user interface components.
"""

from gui.main_window import MainWindow, select_screen

__all__ = [
    "MainWindow",
    "select_screen",
]
