"""Per-piece move generation + attack detection.

Two entry points keep the check/generation recursion one level deep:
:meth:`MoveGenerator.attacks_from` never consults check detection, and
:meth:`MoveGenerator.legal_moves_from` filters its result through
:meth:`MoveGenerator.is_in_check`, which only ever calls ``attacks_from``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kingfall.core.enums import Color, PieceType
from kingfall.core.move import Move
from kingfall.core.types import (
    Square,
    file_of,
    in_bounds,
    is_valid_square,
    make_square,
    rank_of,
)

if TYPE_CHECKING:
    from kingfall.core.piece import Piece
    from kingfall.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        moves: list[Square] = []
        for df, dr in offsets:
            af = file_idx + df
            ar = rank_idx + dr
            if in_bounds(af, ar):
                moves.append(make_square(af, ar))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    """Per square, one ray per direction running up to (not past) the edge."""
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af = file_idx + df
            ar = rank_idx + dr
            ray: list[Square] = []
            while in_bounds(af, ar):
                ray.append(make_square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_SLIDING_RAYS: dict[PieceType, tuple[tuple[tuple[Square, ...], ...], ...]] = {
    PieceType.BISHOP: _build_rays(BISHOP_DIRS),
    PieceType.ROOK: _build_rays(ROOK_DIRS),
    PieceType.QUEEN: _build_rays(QUEEN_DIRS),
}
_STEP_TARGETS: dict[PieceType, tuple[tuple[Square, ...], ...]] = {
    PieceType.KNIGHT: _KNIGHT_TARGETS,
    PieceType.KING: _KING_TARGETS,
}


class MoveGenerator:
    """Generates destination squares for single pieces of a :class:`Position`.

    The position passed in is only read. Self-check filtering plays each
    candidate on a private scratch copy via ``make_move`` / ``unmake_move``,
    which yields the same result as cloning the position per candidate.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def generate(self, sq: Square, filter_self_check: bool = True) -> set[Square]:
        """Destinations for the piece on *sq*, legal or pseudo-legal."""
        if filter_self_check:
            return self.legal_moves_from(sq)
        return self.attacks_from(sq)

    def legal_moves_from(self, sq: Square) -> set[Square]:
        """Destinations that do not leave the mover's own king attacked."""
        candidates = self.attacks_from(sq)
        if not candidates:
            return candidates

        color = self._board[sq].color  # type: ignore[union-attr]
        scratch = self._pos.copy()
        probe = MoveGenerator(scratch)
        legal: set[Square] = set()
        for to_sq in candidates:
            move = Move(sq, to_sq)
            scratch.make_move(move)
            if not probe.is_in_check(color):
                legal.add(to_sq)
            scratch.unmake_move(move)
        return legal

    def attacks_from(self, sq: Square) -> set[Square]:
        """Pseudo-legal destinations for the piece on *sq* (no check filter)."""
        if not is_valid_square(sq):
            return set()
        piece = self._board[sq]
        if piece is None:
            return set()

        if piece.piece_type == PieceType.PAWN:
            return self._gen_pawn(sq, piece)
        if piece.piece_type in _STEP_TARGETS:
            return self._gen_step(sq, piece.color, _STEP_TARGETS[piece.piece_type][sq])
        return self._gen_sliding(sq, piece.color, _SLIDING_RAYS[piece.piece_type][sq])

    def has_legal_move(self, color: Color) -> bool:
        """Whether any piece of *color* has at least one legal destination."""
        return any(self.legal_moves_from(sq) for sq in self._board.occupied(color))

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        A missing king is never in check.
        """
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* among the pseudo-legal destinations of any *by_color* piece?"""
        return any(
            sq in self.attacks_from(from_sq)
            for from_sq in self._board.occupied(by_color)
        )

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, piece: Piece) -> set[Square]:
        board = self._board
        moves: set[Square] = set()
        direction = piece.color.forward
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)

        one_rank = rank_idx + direction
        if in_bounds(file_idx, one_rank):
            one_step = make_square(file_idx, one_rank)
            if board.is_empty(one_step):
                moves.add(one_step)
                two_rank = one_rank + direction
                if not piece.has_moved and in_bounds(file_idx, two_rank):
                    two_step = make_square(file_idx, two_rank)
                    if board.is_empty(two_step):
                        moves.add(two_step)

        for df in (-1, 1):
            cap_file = file_idx + df
            if not in_bounds(cap_file, one_rank):
                continue
            cap_sq = make_square(cap_file, one_rank)
            target = board[cap_sq]
            if target is not None and target.color != piece.color:
                moves.add(cap_sq)
        return moves

    def _gen_step(
        self, sq: Square, color: Color, targets: tuple[Square, ...]
    ) -> set[Square]:
        board = self._board
        moves: set[Square] = set()
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.add(to_sq)
        return moves

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
    ) -> set[Square]:
        board = self._board
        moves: set[Square] = set()
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.add(to_sq)
                    continue
                if target.color != color:
                    moves.add(to_sq)
                break
        return moves
