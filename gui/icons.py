"""
Emoji glyphs for moves and the opponent.

Emoji are rendered as label/button text, so no pixmaps are needed.
"""

from typing import Optional

from models.move import Move

ROBOT = "🤖"
UNKNOWN = "❓"

MOVE_EMOJI = {
    Move.ROCK: "👊🏼",
    Move.PAPER: "✋🏼",
    Move.SCISSORS: "✌🏼",
}


def move_emoji(move: Optional[Move]) -> str:
    """Emoji for a move, or a question mark before the first round."""
    if move is None:
        return UNKNOWN
    return MOVE_EMOJI.get(move, UNKNOWN)
