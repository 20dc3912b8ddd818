"""Core domain layer - pure rules logic with zero external dependencies.

Quick start::

    from kingfall.core import Rules, parse_square

    pos = Rules.initial_position()
    targets = Rules.legal_moves(pos, parse_square("e2"))
    result = Rules.apply_move(pos, parse_square("e2"), parse_square("e4"))
    print(result.outcome)
"""

from kingfall.core.board import Board
from kingfall.core.enums import Color, GameStatus, PieceType
from kingfall.core.move import Move
from kingfall.core.move_generator import MoveGenerator
from kingfall.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from kingfall.core.outcome import MoveResult, Outcome
from kingfall.core.piece import Piece
from kingfall.core.position import Position
from kingfall.core.rules import Rules
from kingfall.core.types import (
    Square,
    file_of,
    in_bounds,
    is_valid_square,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "in_bounds",
    "is_valid_square",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "MoveResult",
    "Outcome",
    "Piece",
    "Position",
    "Rules",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
