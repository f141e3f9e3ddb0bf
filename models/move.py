"""
Move and round outcome definitions for rock-paper-scissors.
"""

import enum


class Move(enum.Enum):
    """The three hand shapes a player can throw."""
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"


class RoundOutcome(enum.Enum):
    """Result of a single round, from the player's point of view."""
    PLAYER_WIN = "player_win"
    OPPONENT_WIN = "opponent_win"
    TIE = "tie"


# Dominance relation: (player_move, opponent_move) -> outcome, all 9 pairs
OUTCOME_TABLE = {
    (Move.ROCK, Move.ROCK): RoundOutcome.TIE,
    (Move.ROCK, Move.PAPER): RoundOutcome.OPPONENT_WIN,
    (Move.ROCK, Move.SCISSORS): RoundOutcome.PLAYER_WIN,
    (Move.PAPER, Move.ROCK): RoundOutcome.PLAYER_WIN,
    (Move.PAPER, Move.PAPER): RoundOutcome.TIE,
    (Move.PAPER, Move.SCISSORS): RoundOutcome.OPPONENT_WIN,
    (Move.SCISSORS, Move.ROCK): RoundOutcome.OPPONENT_WIN,
    (Move.SCISSORS, Move.PAPER): RoundOutcome.PLAYER_WIN,
    (Move.SCISSORS, Move.SCISSORS): RoundOutcome.TIE,
}

# One-letter shortcuts accepted from text input
MOVE_SHORTCUTS = {
    "r": Move.ROCK,
    "p": Move.PAPER,
    "s": Move.SCISSORS,
}
