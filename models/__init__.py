"""
RPS Match Models

Move definitions, the dominance table, and pydantic schemas.
"""

from models.move import Move, RoundOutcome, OUTCOME_TABLE, MOVE_SHORTCUTS
from models.schemas import MoveSubmission, MatchSummary

__all__ = [
    "Move",
    "RoundOutcome",
    "OUTCOME_TABLE",
    "MOVE_SHORTCUTS",
    "MoveSubmission",
    "MatchSummary",
]
