"""
Match Engine - Core game logic for a rock-paper-scissors match.

The MatchEngine runs independently of the GUI. It resolves rounds against
a randomized opponent, keeps the running score, and concludes the match
once either side reaches the win threshold.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from PySide6.QtCore import QObject, Signal

from config import MATCH_SETTINGS
from models.move import Move, RoundOutcome
from engine.opponent import MoveSource, RandomMoveSource
from engine.rules import RulesEngine

logger = logging.getLogger(__name__)


class InvalidStateError(RuntimeError):
    """Raised when an operation is not allowed in the current match phase."""


class MatchPhase(Enum):
    """State machine states for the match lifecycle."""
    IN_PROGRESS = "in_progress"
    CONCLUDED = "concluded"


@dataclass(frozen=True)
class MatchState:
    """
    Immutable snapshot of the current match.
    Emitted after every state change for GUI updates.
    """
    player_score: int = 0
    opponent_score: int = 0
    tie_count: int = 0
    last_player_move: Optional[Move] = None
    last_opponent_move: Optional[Move] = None
    last_outcome: Optional[RoundOutcome] = None
    phase: MatchPhase = MatchPhase.IN_PROGRESS
    win_threshold: int = MATCH_SETTINGS.win_threshold

    @property
    def rounds_played(self) -> int:
        return self.player_score + self.opponent_score + self.tie_count

    @property
    def is_concluded(self) -> bool:
        return self.phase == MatchPhase.CONCLUDED


@dataclass(frozen=True)
class RoundResult:
    """A fully resolved round and the match state right after it."""
    player_move: Move
    opponent_move: Move
    outcome: RoundOutcome
    round_number: int
    state: MatchState


class MatchEngine(QObject):
    """
    Owns the match state and enforces the match rules.
    Emits Qt Signals so GUI layers can react without polling.

    Not thread-safe: callers must serialize submit_move() and reset().
    """

    # Signals
    round_resolved = Signal(object)     # RoundResult
    score_updated = Signal(object)      # MatchState
    match_concluded = Signal(dict)      # final results
    match_reset = Signal()
    state_changed = Signal(str)         # new phase name

    def __init__(self, move_source: Optional[MoveSource] = None,
                 win_threshold: Optional[int] = None):
        """
        Initialize the match engine.

        Args:
            move_source: Where opponent moves come from (uniform random by default)
            win_threshold: Score that ends the match (defaults to MATCH_SETTINGS)
        """
        super().__init__()
        if win_threshold is None:
            win_threshold = MATCH_SETTINGS.win_threshold

        valid, message = RulesEngine.validate_win_threshold(win_threshold)
        if not valid:
            raise ValueError(message)

        self._move_source = move_source or RandomMoveSource()
        self._win_threshold = win_threshold
        self._state = MatchState(win_threshold=win_threshold)

    @property
    def phase(self) -> MatchPhase:
        """Current phase of the match."""
        return self._state.phase

    @property
    def win_threshold(self) -> int:
        return self._win_threshold

    def current_state(self) -> MatchState:
        """Get the current match state snapshot."""
        return self._state

    def submit_move(self, player_move: Move) -> RoundResult:
        """
        Play one round with the given player move.

        Draws the opponent move, resolves the outcome, bumps exactly one
        counter and concludes the match if a score reaches the threshold.

        Args:
            player_move: ROCK, PAPER or SCISSORS

        Returns:
            The resolved RoundResult with the post-round snapshot

        Raises:
            InvalidStateError: If the match has already concluded
            TypeError: If player_move is not a Move
        """
        if self._state.phase != MatchPhase.IN_PROGRESS:
            logger.warning("Rejected move %s: match is %s", player_move, self._state.phase.value)
            raise InvalidStateError(
                f"Cannot submit a move in phase: {self._state.phase.value}; reset the match first"
            )
        if not isinstance(player_move, Move):
            raise TypeError(f"Expected a Move, got {type(player_move).__name__}")

        opponent_move = self._move_source.draw()
        outcome = RulesEngine.resolve_round(player_move, opponent_move)

        player_score = self._state.player_score
        opponent_score = self._state.opponent_score
        tie_count = self._state.tie_count

        if outcome == RoundOutcome.PLAYER_WIN:
            player_score += 1
        elif outcome == RoundOutcome.OPPONENT_WIN:
            opponent_score += 1
        else:
            tie_count += 1

        phase = MatchPhase.IN_PROGRESS
        if RulesEngine.is_match_over(player_score, opponent_score, self._win_threshold):
            phase = MatchPhase.CONCLUDED

        self._state = replace(
            self._state,
            player_score=player_score,
            opponent_score=opponent_score,
            tie_count=tie_count,
            last_player_move=player_move,
            last_opponent_move=opponent_move,
            last_outcome=outcome,
            phase=phase,
        )

        result = RoundResult(
            player_move=player_move,
            opponent_move=opponent_move,
            outcome=outcome,
            round_number=self._state.rounds_played,
            state=self._state,
        )
        logger.debug(
            "Round %d: %s vs %s -> %s (%d-%d, ties %d)",
            result.round_number, player_move.value, opponent_move.value,
            outcome.value, player_score, opponent_score, tie_count,
        )

        self.round_resolved.emit(result)
        self.score_updated.emit(self._state)

        if phase == MatchPhase.CONCLUDED:
            self._conclude_match()

        return result

    def reset(self) -> None:
        """Start a fresh match, discarding the current state."""
        self._state = MatchState(win_threshold=self._win_threshold)
        logger.info("Match reset (first to %d)", self._win_threshold)

        self.match_reset.emit()
        self.state_changed.emit(self._state.phase.value)
        self.score_updated.emit(self._state)

    def _conclude_match(self) -> None:
        """Announce the end of the match."""
        state = self._state
        winner = RulesEngine.determine_match_winner(state.player_score, state.opponent_score)
        logger.info(
            "Match concluded: %s wins %d-%d after %d rounds",
            winner, state.player_score, state.opponent_score, state.rounds_played,
        )

        self.state_changed.emit(state.phase.value)
        self.match_concluded.emit({
            "winner": winner,
            "player_score": state.player_score,
            "opponent_score": state.opponent_score,
            "tie_count": state.tie_count,
            "rounds_played": state.rounds_played,
        })

    # ============ Query Methods ============

    @property
    def is_match_complete(self) -> bool:
        """Check if the match is complete."""
        return self._state.phase == MatchPhase.CONCLUDED

    @property
    def can_submit_move(self) -> bool:
        """Check if a move can be submitted."""
        return self._state.phase == MatchPhase.IN_PROGRESS
