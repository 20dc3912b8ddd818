"""Game state - current position, outcome, move history and captures."""

from __future__ import annotations

from dataclasses import dataclass, field

from kingfall.core.enums import Color
from kingfall.core.move import Move
from kingfall.core.notation import STARTING_FEN, position_from_fen
from kingfall.core.outcome import Outcome
from kingfall.core.piece import Piece
from kingfall.core.position import Position
from kingfall.core.rules import Rules
from kingfall.core.types import Square, is_valid_square


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    outcome: Outcome
    captured: Piece | None = None

    @property
    def was_capture(self) -> bool:
        return self.captured is not None

    @property
    def was_check(self) -> bool:
        return self.outcome.is_check


def _new_captured_log() -> dict[Color, list[Piece]]:
    return {Color.WHITE: [], Color.BLACK: []}


@dataclass
class GameState:
    """Folds rules results into the state a board UI displays.

    ``captured`` is keyed by the color of the captured pieces. The state is
    a pure data/logic class: no threading, no UI.
    """

    position: Position = field(default_factory=Position.initial, init=False)
    outcome: Outcome = field(default_factory=Outcome.in_progress, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    captured: dict[Color, list[Piece]] = field(
        default_factory=_new_captured_log, init=False
    )
    last_move: Move | None = field(default=None, init=False)
    start_fen: str = field(default=STARTING_FEN, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game."""
        self.start_fen = fen or STARTING_FEN
        self.position = position_from_fen(self.start_fen)
        self.outcome = Rules.evaluate(self.position)
        self.move_history.clear()
        self.captured = _new_captured_log()
        self.last_move = None

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord | None:
        """Commit *move* and return its history record.

        Returns ``None`` without touching anything once the game is won or
        when the origin is empty or either square is off the board. Legality
        is the caller's concern.
        """
        if self.is_game_over or not is_valid_square(move.to_sq):
            return None
        piece = self.piece_at(move.from_sq)
        if piece is None:
            return None

        result = Rules.apply_move(self.position, move.from_sq, move.to_sq)
        if result.captured is not None:
            self.captured[result.captured.color].append(result.captured)

        record = MoveRecord(
            move=move,
            piece=piece,
            outcome=result.outcome,
            captured=result.captured,
        )
        self.move_history.append(record)
        self.outcome = result.outcome

        # A king capture ends the game before the board is updated.
        if not (result.captured is not None and result.captured.is_king):
            self.position = result.position
            self.last_move = move
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece | None:
        if not is_valid_square(sq):
            return None
        return self.position.board[sq]

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_win

    @property
    def winner(self) -> Color | None:
        return self.outcome.winner

    @property
    def is_check(self) -> bool:
        return self.outcome.is_check

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def legal_moves(self, sq: Square) -> set[Square]:
        """Legal destinations of the piece on *sq* in the current position."""
        return Rules.legal_moves(self.position, sq)
