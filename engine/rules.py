"""
Rules Engine - Rock-paper-scissors round resolution and match rules.

Handles the dominance relation, threshold checks, and winner determination.
"""

from typing import Optional

from config import MATCH_SETTINGS
from models.move import Move, RoundOutcome, OUTCOME_TABLE


class RulesEngine:
    """
    Stateless rock-paper-scissors rules.

    Every round is resolved by a lookup into OUTCOME_TABLE, which covers
    all 9 (player, opponent) move pairs.
    """

    # Score a side must reach to win the match
    DEFAULT_WIN_THRESHOLD = MATCH_SETTINGS.win_threshold

    @staticmethod
    def resolve_round(player_move: Move, opponent_move: Move) -> RoundOutcome:
        """
        Resolve a single round.

        Args:
            player_move: The move thrown by the player
            opponent_move: The move drawn for the opponent

        Returns:
            PLAYER_WIN, OPPONENT_WIN, or TIE
        """
        return OUTCOME_TABLE[(player_move, opponent_move)]

    @staticmethod
    def is_match_over(player_score: int, opponent_score: int,
                      win_threshold: int = DEFAULT_WIN_THRESHOLD) -> bool:
        """Check whether either side has reached the win threshold."""
        return player_score >= win_threshold or opponent_score >= win_threshold

    @staticmethod
    def determine_match_winner(player_score: int, opponent_score: int) -> Optional[str]:
        """
        Determine the match winner by comparing final scores.

        Returns:
            "player", "opponent", or None (level)
        """
        if player_score > opponent_score:
            return "player"
        elif opponent_score > player_score:
            return "opponent"
        return None

    # ============ Validation Methods ============

    @staticmethod
    def validate_win_threshold(threshold: int) -> tuple[bool, str]:
        """Validate a win threshold."""
        if isinstance(threshold, bool) or not isinstance(threshold, int):
            return False, "Win threshold must be an integer"
        if threshold < 1:
            return False, "Win threshold must be at least 1"
        return True, ""
