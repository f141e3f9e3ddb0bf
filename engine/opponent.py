"""
Opponent move sources.

The MatchEngine draws the opponent's move from an injectable source so
tests and demos can substitute a deterministic sequence.
"""

import random
from collections import deque
from typing import Iterable, Optional, Protocol

from models.move import Move


class MoveSource(Protocol):
    """Anything that can draw an opponent move."""

    def draw(self) -> Move:
        ...


class RandomMoveSource:
    """Uniform random choice over the three moves."""

    MOVES = tuple(Move)

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Random generator to draw from (seed it for reproducible matches)
        """
        self._rng = rng or random.Random()

    def draw(self) -> Move:
        return self._rng.choice(self.MOVES)


class ScriptedMoveSource:
    """
    Returns a fixed sequence of moves in order.

    Raises RuntimeError once the sequence is exhausted.
    """

    def __init__(self, moves: Iterable[Move]):
        self._moves: deque[Move] = deque(moves)

    @property
    def remaining(self) -> int:
        """Number of moves left in the script."""
        return len(self._moves)

    def draw(self) -> Move:
        if not self._moves:
            raise RuntimeError("Scripted move source is exhausted")
        return self._moves.popleft()
