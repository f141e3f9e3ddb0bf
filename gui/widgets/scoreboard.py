"""
Scoreboard Widget

Compact score header shown at the top of every screen.
"""

from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel
from PySide6.QtCore import Qt, Slot

from config import UI_SETTINGS
from engine.match_engine import MatchState
from gui.styles.theme import TEXT_PRIMARY


class ScoreboardWidget(QWidget):
    """
    Compact scoreboard showing:
    - Player score
    - Tie count
    - Bot score
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self) -> None:
        """Build the scoreboard UI."""
        layout = QHBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)

        self.player_score = self._create_label(Qt.AlignmentFlag.AlignLeft)
        self.tie_score = self._create_label(Qt.AlignmentFlag.AlignCenter)
        self.bot_score = self._create_label(Qt.AlignmentFlag.AlignRight)

        layout.addWidget(self.player_score)
        layout.addStretch()
        layout.addWidget(self.tie_score)
        layout.addStretch()
        layout.addWidget(self.bot_score)

        self.update_score(MatchState())

    def _create_label(self, alignment: Qt.AlignmentFlag) -> QLabel:
        label = QLabel()
        label.setAlignment(alignment)
        label.setStyleSheet(f"font-size: {UI_SETTINGS.score_font_size}pt; color: {TEXT_PRIMARY};")
        return label

    @Slot(object)
    def update_score(self, state: MatchState) -> None:
        """Update the scoreboard from a MatchState."""
        self.player_score.setText(f"Your Score: {state.player_score}")
        self.tie_score.setText(f"Tie Score: {state.tie_count}")
        self.bot_score.setText(f"Bot Score: {state.opponent_score}")
