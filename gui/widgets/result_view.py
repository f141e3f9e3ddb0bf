"""
Round Result Screen

Shows both moves and who took the point after a round that did not
end the match.
"""

from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QPushButton
from PySide6.QtCore import Qt, Signal, Slot

from config import UI_SETTINGS
from engine.match_engine import RoundResult
from gui.icons import move_emoji, UNKNOWN
from gui.styles.theme import TEXT_PRIMARY, SURFACE_BUTTON_ALT, button_style, emoji_style
from gui.widgets.scoreboard import ScoreboardWidget
from models.move import RoundOutcome

RESULT_MESSAGES = {
    RoundOutcome.PLAYER_WIN: "Your Point!",
    RoundOutcome.OPPONENT_WIN: "Bot's Point...",
    RoundOutcome.TIE: "It's a tie!",
}


class ResultScreen(QWidget):
    """Round result display with a Keep Playing button."""

    keep_playing = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)

        self.scoreboard = ScoreboardWidget()
        layout.addWidget(self.scoreboard)
        layout.addStretch()

        self.bot_move = QLabel(UNKNOWN)
        self.bot_move.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.bot_move.setStyleSheet(emoji_style(UI_SETTINGS.robot_font_size))
        layout.addWidget(self.bot_move)

        self.message = QLabel("")
        self.message.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.message.setStyleSheet(f"font-size: {UI_SETTINGS.title_font_size}pt; color: {TEXT_PRIMARY};")
        layout.addWidget(self.message)

        self.player_move = QLabel(UNKNOWN)
        self.player_move.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.player_move.setStyleSheet(emoji_style(UI_SETTINGS.choice_font_size))
        layout.addWidget(self.player_move)

        layout.addStretch()

        self.btn_keep_playing = QPushButton("Keep Playing")
        self.btn_keep_playing.setStyleSheet(button_style(TEXT_PRIMARY, SURFACE_BUTTON_ALT))
        self.btn_keep_playing.clicked.connect(self.keep_playing)
        layout.addWidget(self.btn_keep_playing, alignment=Qt.AlignmentFlag.AlignCenter)

    @Slot(object)
    def show_result(self, result: RoundResult) -> None:
        """Fill the screen from a resolved round."""
        self.scoreboard.update_score(result.state)
        self.bot_move.setText(move_emoji(result.opponent_move))
        self.player_move.setText(move_emoji(result.player_move))
        self.message.setText(RESULT_MESSAGES[result.outcome])
