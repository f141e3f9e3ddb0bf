"""
RPS Match Application Controller

Top-level controller that wires together all application components.
"""

import logging
from typing import Optional

from pydantic import ValidationError
from PySide6.QtCore import QObject, Slot

from config import MATCH_SETTINGS
from engine.match_engine import MatchEngine, InvalidStateError, RoundResult
from engine.opponent import MoveSource
from models.schemas import MoveSubmission
from services.event_bus import EventBus

logger = logging.getLogger(__name__)


class RPSMatchApp(QObject):
    """
    Top-level application controller.
    Owns the MatchEngine and relays between it and the GUI.
    """

    def __init__(self, move_source: Optional[MoveSource] = None,
                 win_threshold: int = MATCH_SETTINGS.win_threshold,
                 with_window: bool = True):
        super().__init__()

        # Core services
        self.event_bus = EventBus()
        self.engine = MatchEngine(move_source=move_source, win_threshold=win_threshold)

        # Wire up engine signals to event bus
        self.engine.round_resolved.connect(self.event_bus.round_resolved.emit)
        self.engine.score_updated.connect(self.event_bus.score_updated.emit)
        self.engine.match_concluded.connect(self.event_bus.match_concluded.emit)
        self.engine.match_reset.connect(self.event_bus.match_reset.emit)

        # Player requests from the GUI
        self.event_bus.move_requested.connect(self.play_move)
        self.event_bus.restart_requested.connect(self.restart)

        self.main_window = None
        if with_window:
            from gui.main_window import MainWindow
            self.main_window = MainWindow(self.event_bus, self.engine.win_threshold)

    def show(self) -> None:
        """Show the main application window."""
        if self.main_window is not None:
            self.main_window.show()

    @Slot(str)
    def play_move(self, move: str) -> Optional[RoundResult]:
        """
        Validate a move request and submit it to the engine.

        Returns:
            The RoundResult, or None if the request was rejected
        """
        try:
            submission = MoveSubmission(move=move)
        except ValidationError as exc:
            logger.warning("Invalid move request %r: %s", move, exc)
            self.event_bus.emit_message("warning", f"Invalid move: {move}")
            return None

        try:
            return self.engine.submit_move(submission.move)
        except InvalidStateError as exc:
            self.event_bus.emit_message("warning", str(exc))
            return None

    @Slot()
    def restart(self) -> None:
        """Start a new match."""
        self.engine.reset()
        self.event_bus.emit_message("info", "New match started")
