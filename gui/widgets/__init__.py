"""
RPS Match GUI Widgets

Screens and reusable widget components.
"""

from gui.widgets.choice_panel import ChoiceScreen
from gui.widgets.result_view import ResultScreen, RESULT_MESSAGES
from gui.widgets.game_over_view import GameOverScreen
from gui.widgets.scoreboard import ScoreboardWidget

__all__ = [
    "ChoiceScreen",
    "ResultScreen",
    "RESULT_MESSAGES",
    "GameOverScreen",
    "ScoreboardWidget",
]
