"""
Main Window

Single window that switches between the choice, round result and
game-over screens. Uses QStackedWidget to navigate between them.
"""

from PySide6.QtWidgets import QMainWindow, QStackedWidget, QStatusBar
from PySide6.QtCore import Slot

from config import UI_SETTINGS
from engine.match_engine import MatchPhase, MatchState, RoundResult
from gui.styles.theme import SURFACE_MAIN, TEXT_PRIMARY, FONT_UI
from services.event_bus import EventBus

SCREENS = {
    "choice": 0,
    "result": 1,
    "game_over": 2,
}


def select_screen(phase: MatchPhase, round_just_resolved: bool) -> str:
    """
    Pick the screen to show for the current match.

    The engine only exposes the phase; whether a round result is waiting
    to be acknowledged is tracked by the window itself.
    """
    if phase == MatchPhase.CONCLUDED:
        return "game_over"
    if round_just_resolved:
        return "result"
    return "choice"


class MainWindow(QMainWindow):
    """
    Presentation layer for a rock-paper-scissors match.

    Renders engine output received through the EventBus and forwards
    player actions back to it. Holds no game logic.
    """

    def __init__(self, event_bus: EventBus, win_threshold: int):
        super().__init__()
        self.event_bus = event_bus
        self._phase = MatchPhase.IN_PROGRESS
        self._round_just_resolved = False

        self.setWindowTitle("Rock, Paper, Scissors")
        self.setMinimumSize(UI_SETTINGS.min_width, UI_SETTINGS.min_height)
        self.setStyleSheet(
            f"background-color: {SURFACE_MAIN}; color: {TEXT_PRIMARY}; font-family: {FONT_UI};"
        )

        self.stack = QStackedWidget()
        self.stack.setObjectName("main_stack")
        self.setCentralWidget(self.stack)

        # Import screens here to avoid circular imports
        from gui.widgets.choice_panel import ChoiceScreen
        from gui.widgets.result_view import ResultScreen
        from gui.widgets.game_over_view import GameOverScreen

        self.choice_screen = ChoiceScreen(event_bus, win_threshold, self)
        self.result_screen = ResultScreen(self)
        self.game_over_screen = GameOverScreen(event_bus, self)

        self.stack.addWidget(self.choice_screen)      # index 0
        self.stack.addWidget(self.result_screen)      # index 1
        self.stack.addWidget(self.game_over_screen)   # index 2

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

        self._connect_signals()

    def _connect_signals(self) -> None:
        """Connect event bus and screen signals."""
        self.event_bus.round_resolved.connect(self._on_round_resolved)
        self.event_bus.score_updated.connect(self._on_score_updated)
        self.event_bus.match_reset.connect(self._on_match_reset)
        self.event_bus.navigate_to.connect(self.navigate_to)
        self.event_bus.system_message.connect(self._on_system_message)
        self.result_screen.keep_playing.connect(self._on_keep_playing)

    @Slot(str)
    def navigate_to(self, screen: str) -> None:
        """Navigate to a specific screen."""
        if screen in SCREENS:
            self.stack.setCurrentIndex(SCREENS[screen])

    def _refresh_screen(self) -> None:
        self.event_bus.navigate_to.emit(select_screen(self._phase, self._round_just_resolved))

    @Slot(object)
    def _on_round_resolved(self, result: RoundResult) -> None:
        self._phase = result.state.phase
        if result.state.is_concluded:
            self._round_just_resolved = False
            self.game_over_screen.show_summary(result.state)
        else:
            self._round_just_resolved = True
            self.result_screen.show_result(result)
        self._refresh_screen()

    @Slot(object)
    def _on_score_updated(self, state: MatchState) -> None:
        self._phase = state.phase
        self.choice_screen.update_state(state)

    @Slot()
    def _on_keep_playing(self) -> None:
        self._round_just_resolved = False
        self._refresh_screen()

    @Slot()
    def _on_match_reset(self) -> None:
        self._phase = MatchPhase.IN_PROGRESS
        self._round_just_resolved = False
        self._refresh_screen()
        self.status_bar.clearMessage()

    @Slot(str, str)
    def _on_system_message(self, level: str, message: str) -> None:
        """Display system message in status bar."""
        self.status_bar.showMessage(f"[{level.upper()}] {message}", UI_SETTINGS.message_timeout_ms)
