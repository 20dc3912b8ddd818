"""Position - board plus side to move, with make/unmake."""

from __future__ import annotations

from dataclasses import dataclass

from kingfall.core.board import Board
from kingfall.core.enums import Color
from kingfall.core.move import Move
from kingfall.core.piece import Piece


@dataclass(slots=True)
class _PositionState:
    """Snapshot saved before each move so we can undo it."""

    moved_piece: Piece
    captured_piece: Piece | None


class Position:
    """Board placement and the side to move.

    A committed position is treated as immutable: callers that want to
    explore a move work on :meth:`copy`. :meth:`make_move` /
    :meth:`unmake_move` exist for such scratch copies and keep an internal
    undo stack (Command pattern).
    """

    __slots__ = ("board", "side_to_move", "_history")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self._history: list[_PositionState] = []

    @classmethod
    def initial(cls) -> Position:
        """Starting layout with White to move."""
        return cls(Board.initial(), Color.WHITE)

    # ── Core move operations ─────────────────────────────────────────────

    def make_move(self, move: Move) -> Piece | None:
        """Relocate the piece on ``move.from_sq`` and hand the turn over.

        The mover lands with ``has_moved`` set; whatever stood on the
        destination is overwritten and returned.
        """
        piece = self.board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")
        captured = self.board[move.to_sq]

        self._history.append(_PositionState(moved_piece=piece, captured_piece=captured))

        self.board[move.from_sq] = None
        self.board[move.to_sq] = piece.moved()
        self.side_to_move = self.side_to_move.opposite
        return captured

    def unmake_move(self, move: Move) -> None:
        """Undo the last :meth:`make_move`."""
        state = self._history.pop()
        self.side_to_move = self.side_to_move.opposite
        self.board[move.to_sq] = state.captured_piece
        self.board[move.from_sq] = state.moved_piece

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy without history."""
        return Position(board=self.board.copy(), side_to_move=self.side_to_move)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.side_to_move == other.side_to_move and self.board == other.board

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move} to move"
