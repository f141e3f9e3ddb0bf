"""
RPS Match Game Engine

Core game logic for the rock-paper-scissors match.
This module contains no GUI dependencies.
"""

from engine.match_engine import (
    MatchEngine,
    MatchState,
    MatchPhase,
    RoundResult,
    InvalidStateError,
)
from engine.rules import RulesEngine
from engine.opponent import MoveSource, RandomMoveSource, ScriptedMoveSource

__all__ = [
    "MatchEngine",
    "MatchState",
    "MatchPhase",
    "RoundResult",
    "InvalidStateError",
    "RulesEngine",
    "MoveSource",
    "RandomMoveSource",
    "ScriptedMoveSource",
]
