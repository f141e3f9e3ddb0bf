"""
Game Over Screen

Shown once either side reaches the win threshold.
"""

from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QPushButton
from PySide6.QtCore import Qt, Slot

from engine.match_engine import MatchState
from gui.styles.theme import (
    TEXT_PRIMARY, TEXT_ON_LIGHT, SURFACE_BUTTON, FONT_SIZE_MD, FONT_SIZE_DISPLAY, button_style,
)
from models.schemas import MatchSummary
from services.event_bus import EventBus


class GameOverScreen(QWidget):
    """Final verdict with a Play Again button that restarts the match."""

    def __init__(self, event_bus: EventBus, parent=None):
        super().__init__(parent)
        self.event_bus = event_bus
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.addStretch()

        self.verdict = QLabel("")
        self.verdict.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.verdict.setStyleSheet(f"font-size: {FONT_SIZE_DISPLAY}pt; font-weight: bold; color: {TEXT_PRIMARY};")
        layout.addWidget(self.verdict)

        self.final_score = QLabel("")
        self.final_score.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.final_score.setStyleSheet(f"font-size: {FONT_SIZE_MD}pt; color: {TEXT_PRIMARY};")
        layout.addWidget(self.final_score)

        layout.addStretch()

        self.btn_play_again = QPushButton("Play Again")
        self.btn_play_again.setStyleSheet(button_style(TEXT_ON_LIGHT, SURFACE_BUTTON))
        self.btn_play_again.clicked.connect(lambda: self.event_bus.request_restart())
        layout.addWidget(self.btn_play_again, alignment=Qt.AlignmentFlag.AlignCenter)

    @Slot(object)
    def show_summary(self, state: MatchState) -> None:
        """Fill the screen from the final match snapshot."""
        summary = MatchSummary.from_state(state)
        self.verdict.setText("You Win!" if summary.player_won else "You Lose...")
        self.final_score.setText(
            f"{summary.player_score} - {summary.opponent_score}"
            f"  ({summary.tie_count} ties, {summary.rounds_played} rounds)"
        )
