"""High-level rules: check, checkmate and move application."""

from __future__ import annotations

from kingfall.core.enums import Color
from kingfall.core.move import Move
from kingfall.core.move_generator import MoveGenerator
from kingfall.core.outcome import MoveResult, Outcome
from kingfall.core.position import Position
from kingfall.core.types import Square, is_valid_square


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Terminal states are king capture and check with no legal reply. A side
    with no legal reply that is *not* in check is left ``IN_PROGRESS``;
    stalemate is deliberately not detected.
    """

    @staticmethod
    def initial_position() -> Position:
        return Position.initial()

    @staticmethod
    def legal_moves(position: Position, sq: Square) -> set[Square]:
        """Legal destinations of the piece on *sq* (empty for empty squares)."""
        return MoveGenerator(position).legal_moves_from(sq)

    @staticmethod
    def is_in_check(position: Position, color: Color) -> bool:
        return MoveGenerator(position).is_in_check(color)

    @staticmethod
    def has_legal_reply(position: Position) -> bool:
        """Whether the side to move has any legal move at all."""
        return MoveGenerator(position).has_legal_move(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position, position.side_to_move):
            return False
        return not Rules.has_legal_reply(position)

    @staticmethod
    def evaluate(position: Position) -> Outcome:
        """Outcome for the side to move, as seen right after the opponent moved."""
        color = position.side_to_move
        gen = MoveGenerator(position)
        if not gen.is_in_check(color):
            return Outcome.in_progress()
        if gen.has_legal_move(color):
            return Outcome.check(color)
        return Outcome.win(color.opposite)

    @staticmethod
    def apply_move(position: Position, from_sq: Square, to_sq: Square) -> MoveResult:
        """Play *from_sq* → *to_sq* on a copy of *position*.

        Legality is the caller's concern; the move is applied as given.
        Capturing a king ends the game on the spot: the returned position is
        the unchanged copy, the turn does not pass and no check scan runs.
        An empty or off-board origin (or an off-board target) is a no-op.
        """
        nxt = position.copy()
        if not (is_valid_square(from_sq) and is_valid_square(to_sq)):
            return MoveResult(nxt, Rules.evaluate(nxt))
        piece = nxt.board[from_sq]
        if piece is None:
            return MoveResult(nxt, Rules.evaluate(nxt))

        captured = nxt.board[to_sq]
        if captured is not None and captured.is_king:
            return MoveResult(nxt, Outcome.win(piece.color), captured)

        nxt.make_move(Move(from_sq, to_sq))
        return MoveResult(nxt, Rules.evaluate(nxt), captured)
