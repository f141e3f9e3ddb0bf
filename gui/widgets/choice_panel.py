"""
Choice Screen

Start screen where the player picks rock, paper or scissors.
"""

from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton
from PySide6.QtCore import Qt, Slot

from config import UI_SETTINGS
from engine.match_engine import MatchState
from gui.icons import ROBOT, MOVE_EMOJI
from gui.styles.theme import TEXT_PRIMARY, FONT_SIZE_LG, SPACING_SM, emoji_style
from gui.widgets.scoreboard import ScoreboardWidget
from services.event_bus import EventBus


class ChoiceScreen(QWidget):
    """
    Move selection screen.

    Each emoji button asks the controller (through the EventBus) to play
    that move. Buttons are disabled once the match has concluded.
    """

    def __init__(self, event_bus: EventBus, win_threshold: int, parent=None):
        super().__init__(parent)
        self.event_bus = event_bus
        self._move_buttons: list[QPushButton] = []
        self._build_ui(win_threshold)

    def _build_ui(self, win_threshold: int) -> None:
        """Build the choice screen UI."""
        layout = QVBoxLayout(self)

        self.scoreboard = ScoreboardWidget()
        layout.addWidget(self.scoreboard)
        layout.addStretch()

        robot = QLabel(ROBOT)
        robot.setAlignment(Qt.AlignmentFlag.AlignCenter)
        robot.setStyleSheet(emoji_style(UI_SETTINGS.robot_font_size))
        layout.addWidget(robot)

        title = QLabel("Rock, Paper, Scissors")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet(f"font-size: {UI_SETTINGS.title_font_size}pt; color: {TEXT_PRIMARY};")
        layout.addWidget(title)

        self.subtitle = QLabel(f"First to {win_threshold} wins!")
        self.subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.subtitle.setStyleSheet(f"font-size: {FONT_SIZE_LG}pt; color: {TEXT_PRIMARY};")
        layout.addWidget(self.subtitle)

        buttons = QHBoxLayout()
        buttons.setSpacing(SPACING_SM)
        for move, emoji in MOVE_EMOJI.items():
            btn = QPushButton(emoji)
            btn.setObjectName(f"choice_{move.value}")
            btn.setFlat(True)
            btn.setStyleSheet(emoji_style(UI_SETTINGS.choice_font_size) + " border: none;")
            btn.clicked.connect(lambda _=False, m=move.value: self.event_bus.request_move(m))
            buttons.addWidget(btn)
            self._move_buttons.append(btn)
        layout.addLayout(buttons)

        layout.addStretch()

    @Slot(object)
    def update_state(self, state: MatchState) -> None:
        """Refresh scores and enable/disable move buttons."""
        self.scoreboard.update_score(state)
        for btn in self._move_buttons:
            btn.setEnabled(not state.is_concluded)
