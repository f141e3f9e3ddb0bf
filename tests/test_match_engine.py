"""
Unit tests for the MatchEngine.

Tests cover round resolution, score tracking, match conclusion and reset.
"""

import random

import pytest
from unittest.mock import MagicMock

from config import MATCH_SETTINGS
from engine.match_engine import (
    MatchEngine,
    MatchPhase,
    MatchState,
    RoundResult,
    InvalidStateError,
)
from engine.opponent import RandomMoveSource, ScriptedMoveSource
from engine.rules import RulesEngine
from models.move import Move, RoundOutcome


def scripted_engine(*moves: Move, win_threshold: int = 5) -> MatchEngine:
    """Engine whose opponent plays the given moves in order."""
    return MatchEngine(move_source=ScriptedMoveSource(moves), win_threshold=win_threshold)


class TestMatchEngineRounds:
    """Tests for single-round resolution."""

    def test_initial_state_is_zeroed(self):
        """A new engine should start in progress with all counters at zero."""
        engine = MatchEngine()
        state = engine.current_state()

        assert state.player_score == 0
        assert state.opponent_score == 0
        assert state.tie_count == 0
        assert state.last_player_move is None
        assert state.last_opponent_move is None
        assert state.last_outcome is None
        assert state.phase == MatchPhase.IN_PROGRESS
        assert engine.can_submit_move

    def test_rock_beats_scissors_awards_player_point(self):
        """Rock against Scissors should be a player win, score 0 -> 1."""
        engine = scripted_engine(Move.SCISSORS)

        result = engine.submit_move(Move.ROCK)

        assert result.outcome == RoundOutcome.PLAYER_WIN
        assert result.player_move == Move.ROCK
        assert result.opponent_move == Move.SCISSORS
        assert result.state.player_score == 1
        assert result.state.opponent_score == 0
        assert result.round_number == 1

    def test_paper_vs_paper_is_tie(self):
        """Equal moves should increment the tie count only."""
        engine = scripted_engine(Move.PAPER)

        result = engine.submit_move(Move.PAPER)

        assert result.outcome == RoundOutcome.TIE
        assert result.state.tie_count == 1
        assert result.state.player_score == 0
        assert result.state.opponent_score == 0
        assert result.state.phase == MatchPhase.IN_PROGRESS

    def test_opponent_win_awards_opponent_point(self):
        """Rock against Paper should be an opponent win."""
        engine = scripted_engine(Move.PAPER)

        result = engine.submit_move(Move.ROCK)

        assert result.outcome == RoundOutcome.OPPONENT_WIN
        assert result.state.opponent_score == 1
        assert result.state.player_score == 0

    def test_last_round_recorded_in_state(self):
        """The snapshot should carry the moves and outcome of the last round."""
        engine = scripted_engine(Move.ROCK, Move.SCISSORS)

        engine.submit_move(Move.PAPER)
        engine.submit_move(Move.PAPER)
        state = engine.current_state()

        assert state.last_player_move == Move.PAPER
        assert state.last_opponent_move == Move.SCISSORS
        assert state.last_outcome == RoundOutcome.OPPONENT_WIN

    def test_result_snapshot_matches_current_state(self):
        """The returned snapshot should be the engine's post-round state."""
        engine = scripted_engine(Move.ROCK)

        result = engine.submit_move(Move.ROCK)

        assert result.state == engine.current_state()

    def test_snapshot_is_immutable(self):
        """Snapshots handed out must not be writable."""
        engine = MatchEngine()
        state = engine.current_state()

        with pytest.raises(AttributeError):
            state.player_score = 3

    def test_non_move_is_rejected(self):
        """Passing a raw string should raise TypeError and leave state alone."""
        engine = scripted_engine(Move.ROCK)

        with pytest.raises(TypeError):
            engine.submit_move("rock")

        assert engine.current_state() == MatchState()


class TestMatchEngineScoring:
    """Tests for cumulative scoring and the win threshold."""

    def test_counters_sum_to_rounds_played(self):
        """player + opponent + ties should equal the number of rounds."""
        engine = MatchEngine(move_source=RandomMoveSource(random.Random(1234)), win_threshold=5)

        rounds = 0
        while engine.can_submit_move:
            move = random.Random(rounds).choice(list(Move))
            result = engine.submit_move(move)
            rounds += 1
            state = result.state
            assert state.player_score + state.opponent_score + state.tie_count == rounds
            assert state.rounds_played == rounds
            assert result.round_number == rounds

    def test_five_player_wins_conclude_match(self):
        """Five straight player wins should conclude the match at 5."""
        engine = scripted_engine(*[Move.SCISSORS] * 5)

        for i in range(4):
            result = engine.submit_move(Move.ROCK)
            assert result.state.phase == MatchPhase.IN_PROGRESS
            assert result.state.player_score == i + 1

        result = engine.submit_move(Move.ROCK)

        assert result.state.phase == MatchPhase.CONCLUDED
        assert result.state.player_score == 5
        assert engine.is_match_complete
        assert not engine.can_submit_move

    def test_ties_never_conclude_match(self):
        """Any number of ties should leave the match in progress."""
        engine = scripted_engine(*[Move.ROCK] * 12)

        for _ in range(12):
            engine.submit_move(Move.ROCK)

        assert engine.phase == MatchPhase.IN_PROGRESS
        assert engine.current_state().tie_count == 12

    def test_opponent_reaching_threshold_concludes_match(self):
        """The match should also end when the opponent reaches the threshold."""
        engine = scripted_engine(*[Move.PAPER] * 5)

        for _ in range(5):
            engine.submit_move(Move.ROCK)

        state = engine.current_state()
        assert state.phase == MatchPhase.CONCLUDED
        assert state.opponent_score == 5
        assert state.player_score == 0

    def test_concludes_exactly_when_threshold_first_reached(self):
        """Mixed results: phase flips on the round the leader hits 5, not before."""
        # player wins (W), opponent wins (L), ties (T): W L T W W L W T W
        opponent = [
            Move.SCISSORS, Move.PAPER, Move.ROCK, Move.SCISSORS, Move.SCISSORS,
            Move.PAPER, Move.SCISSORS, Move.ROCK, Move.SCISSORS,
        ]
        engine = scripted_engine(*opponent)

        phases = [engine.submit_move(Move.ROCK).state.phase for _ in opponent]

        assert phases[:-1] == [MatchPhase.IN_PROGRESS] * (len(opponent) - 1)
        assert phases[-1] == MatchPhase.CONCLUDED
        assert engine.current_state().player_score == 5
        assert engine.current_state().opponent_score == 2
        assert engine.current_state().tie_count == 2

    def test_custom_threshold(self):
        """A lower threshold should end the match sooner."""
        engine = scripted_engine(Move.SCISSORS, Move.SCISSORS, win_threshold=2)

        engine.submit_move(Move.ROCK)
        assert not engine.is_match_complete

        engine.submit_move(Move.ROCK)
        assert engine.is_match_complete
        assert engine.current_state().win_threshold == 2

    def test_default_threshold_is_five(self):
        """Without an explicit threshold the match is first to 5."""
        assert MatchEngine().win_threshold == 5

    def test_default_threshold_shared_with_settings(self):
        """Snapshot, engine and rules all take their default from MATCH_SETTINGS."""
        assert MatchState().win_threshold == MATCH_SETTINGS.win_threshold
        assert MatchEngine().win_threshold == MATCH_SETTINGS.win_threshold
        assert RulesEngine.DEFAULT_WIN_THRESHOLD == MATCH_SETTINGS.win_threshold

    @pytest.mark.parametrize("threshold", [0, -1])
    def test_invalid_threshold_rejected(self, threshold):
        """A threshold below 1 should be refused at construction."""
        with pytest.raises(ValueError, match="at least 1"):
            MatchEngine(win_threshold=threshold)


class TestMatchEngineConcluded:
    """Tests for behaviour after the match has concluded."""

    def setup_method(self):
        """Play a match to a 5-0 player win."""
        self.engine = scripted_engine(*[Move.SCISSORS] * 5, Move.SCISSORS)
        for _ in range(5):
            self.engine.submit_move(Move.ROCK)

    def test_submit_after_conclusion_raises(self):
        """Submitting a move once concluded should raise InvalidStateError."""
        with pytest.raises(InvalidStateError, match="concluded"):
            self.engine.submit_move(Move.ROCK)

    def test_rejected_submit_does_not_mutate_state(self):
        """A rejected submission must leave the state untouched."""
        before = self.engine.current_state()

        with pytest.raises(InvalidStateError):
            self.engine.submit_move(Move.PAPER)

        assert self.engine.current_state() == before

    def test_rejected_submit_does_not_draw_opponent_move(self):
        """The opponent source should not be consumed by a rejected call."""
        with pytest.raises(InvalidStateError):
            self.engine.submit_move(Move.ROCK)

        assert self.engine._move_source.remaining == 1

    def test_reset_allows_play_again(self):
        """After reset a new match can be played."""
        self.engine.reset()

        result = self.engine.submit_move(Move.ROCK)

        assert result.state.player_score == 1
        assert result.round_number == 1


class TestMatchEngineReset:
    """Tests for reset()."""

    def test_reset_from_fresh_engine(self):
        """Resetting a fresh engine should still yield the zeroed state."""
        engine = MatchEngine()
        engine.reset()

        assert engine.current_state() == MatchState()

    def test_reset_mid_match(self):
        """Reset mid-match should zero all counters and clear the last round."""
        engine = scripted_engine(Move.SCISSORS, Move.PAPER, Move.ROCK)
        for _ in range(3):
            engine.submit_move(Move.ROCK)

        engine.reset()
        state = engine.current_state()

        assert state.player_score == 0
        assert state.opponent_score == 0
        assert state.tie_count == 0
        assert state.last_outcome is None
        assert state.phase == MatchPhase.IN_PROGRESS

    def test_reset_is_idempotent(self):
        """Calling reset repeatedly gives the same state."""
        engine = scripted_engine(*[Move.SCISSORS] * 5, win_threshold=5)
        for _ in range(5):
            engine.submit_move(Move.ROCK)

        engine.reset()
        first = engine.current_state()
        engine.reset()

        assert engine.current_state() == first
        assert first.phase == MatchPhase.IN_PROGRESS

    def test_reset_keeps_threshold(self):
        """The configured threshold survives a reset."""
        engine = MatchEngine(win_threshold=3)
        engine.reset()

        assert engine.current_state().win_threshold == 3


class TestMatchEngineSignals:
    """Tests for signal emissions."""

    def setup_method(self):
        """Set up engine with signal mocks."""
        self.engine = scripted_engine(*[Move.SCISSORS] * 5, win_threshold=5)

        self.round_resolved_mock = MagicMock()
        self.score_updated_mock = MagicMock()
        self.match_concluded_mock = MagicMock()
        self.match_reset_mock = MagicMock()
        self.state_changed_mock = MagicMock()

        self.engine.round_resolved.connect(self.round_resolved_mock)
        self.engine.score_updated.connect(self.score_updated_mock)
        self.engine.match_concluded.connect(self.match_concluded_mock)
        self.engine.match_reset.connect(self.match_reset_mock)
        self.engine.state_changed.connect(self.state_changed_mock)

    def test_round_resolved_emitted(self):
        """round_resolved should carry the RoundResult."""
        result = self.engine.submit_move(Move.ROCK)

        self.round_resolved_mock.assert_called_once()
        emitted = self.round_resolved_mock.call_args[0][0]
        assert isinstance(emitted, RoundResult)
        assert emitted == result

    def test_score_updated_emitted(self):
        """score_updated should carry the new MatchState."""
        self.engine.submit_move(Move.ROCK)

        emitted = self.score_updated_mock.call_args[0][0]
        assert isinstance(emitted, MatchState)
        assert emitted.player_score == 1

    def test_match_concluded_emitted_once(self):
        """match_concluded should fire exactly once, on the final round."""
        for _ in range(4):
            self.engine.submit_move(Move.ROCK)
        self.match_concluded_mock.assert_not_called()

        self.engine.submit_move(Move.ROCK)

        self.match_concluded_mock.assert_called_once()
        results = self.match_concluded_mock.call_args[0][0]
        assert results["winner"] == "player"
        assert results["player_score"] == 5
        assert results["opponent_score"] == 0
        assert results["rounds_played"] == 5
        self.state_changed_mock.assert_called_once_with("concluded")

    def test_reset_emits_signals(self):
        """reset should announce the new match."""
        self.engine.submit_move(Move.ROCK)
        self.engine.reset()

        self.match_reset_mock.assert_called_once()
        self.state_changed_mock.assert_called_with("in_progress")
        emitted = self.score_updated_mock.call_args[0][0]
        assert emitted == MatchState()
