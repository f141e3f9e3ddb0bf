"""
Pydantic schemas for data validation at the presentation boundary.
"""

from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, Field, field_validator

from models.move import Move, MOVE_SHORTCUTS

if TYPE_CHECKING:
    from engine.match_engine import MatchState


# ============ Move Schemas ============

class MoveSubmission(BaseModel):
    """Schema for a move chosen by the player (button or typed input)."""
    move: Move

    @field_validator("move", mode="before")
    @classmethod
    def parse_move(cls, v):
        if isinstance(v, Move):
            return v
        if not isinstance(v, str):
            raise ValueError("Move must be rock, paper or scissors")
        text = v.strip().lower()
        if text in MOVE_SHORTCUTS:
            return MOVE_SHORTCUTS[text]
        try:
            return Move(text)
        except ValueError:
            raise ValueError(f"Unknown move: {v!r}") from None


# ============ Match Summary Schema ============

class MatchSummary(BaseModel):
    """
    Final result of a concluded match.
    Used by the game-over screen to pick its copy.
    """
    player_score: int = Field(0, ge=0)
    opponent_score: int = Field(0, ge=0)
    tie_count: int = Field(0, ge=0)
    rounds_played: int = Field(0, ge=0)
    winner: Optional[str] = None

    @classmethod
    def from_state(cls, state: "MatchState") -> "MatchSummary":
        """Build a summary by comparing the final scores of a snapshot."""
        from engine.rules import RulesEngine

        return cls(
            player_score=state.player_score,
            opponent_score=state.opponent_score,
            tie_count=state.tie_count,
            rounds_played=state.rounds_played,
            winner=RulesEngine.determine_match_winner(
                state.player_score, state.opponent_score
            ),
        )

    @property
    def player_won(self) -> bool:
        return self.winner == "player"
