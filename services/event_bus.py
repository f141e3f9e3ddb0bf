"""
Event Bus - Central signal hub for inter-module communication.

All modules connect to this single object rather than directly to each other,
keeping the match engine and the GUI loosely coupled.
"""

from PySide6.QtCore import QObject, Signal


class EventBus(QObject):
    """
    Central signal hub for RPS Match.

    The EventBus acts as a mediator between application components:
    - MatchEngine emits round and score events
    - GUI screens listen and update displays
    - GUI screens request moves and restarts

    Usage:
        # In the application controller
        engine.round_resolved.connect(event_bus.round_resolved.emit)

        # In MainWindow
        self.event_bus.round_resolved.connect(self._on_round_resolved)
    """

    # ============ Player Requests ============
    move_requested = Signal(str)        # move value ("rock", "paper", "scissors")
    restart_requested = Signal()

    # ============ Match Lifecycle ============
    match_concluded = Signal(dict)      # Final results dict
    match_reset = Signal()

    # ============ Round Events ============
    round_resolved = Signal(object)     # RoundResult
    score_updated = Signal(object)      # MatchState

    # ============ UI Navigation ============
    navigate_to = Signal(str)           # screen name

    # ============ System Events ============
    system_message = Signal(str, str)   # (level, message) - e.g., ("warning", "Match is over")

    def __init__(self):
        super().__init__()

    def request_move(self, move: str) -> None:
        """Convenience method to ask the controller to play a move."""
        self.move_requested.emit(move)

    def request_restart(self) -> None:
        """Convenience method to ask the controller for a new match."""
        self.restart_requested.emit()

    def emit_message(self, level: str, message: str) -> None:
        """Emit a system message (info, warning, error)."""
        self.system_message.emit(level, message)
