"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from kingfall.core.enums import Color, PieceType

# FEN character ↔ PieceType (uppercase = white, lowercase = black)
_TYPE_CHARS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_CHAR_TYPES: dict[str, PieceType] = {v: k for k, v in _TYPE_CHARS.items()}

_UNICODE: dict[PieceType, str] = {
    PieceType.PAWN: "♟",
    PieceType.KNIGHT: "♞",
    PieceType.BISHOP: "♝",
    PieceType.ROOK: "♜",
    PieceType.QUEEN: "♛",
    PieceType.KING: "♚",
}
_UNICODE_OUTLINE: dict[PieceType, str] = {
    PieceType.PAWN: "♙",
    PieceType.KNIGHT: "♘",
    PieceType.BISHOP: "♗",
    PieceType.ROOK: "♖",
    PieceType.QUEEN: "♕",
    PieceType.KING: "♔",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a piece on the board.

    ``has_moved`` only gates the pawn double step. Moving a piece yields a
    new value via :meth:`moved`; existing values are never mutated, so
    position snapshots stay independent.
    """

    color: Color
    piece_type: PieceType
    has_moved: bool = False

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        char = _TYPE_CHARS[self.piece_type]
        return char.upper() if self.color == Color.WHITE else char

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create an unmoved piece from a FEN character, e.g. 'N' → white knight."""
        try:
            ptype = _CHAR_TYPES[char.lower()]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, ptype)

    # ── Derived values ───────────────────────────────────────────────────

    def moved(self) -> Piece:
        """Copy of this piece flagged as having moved."""
        if self.has_moved:
            return self
        return replace(self, has_moved=True)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol: outline glyphs for white, solid for black."""
        if self.color == Color.WHITE:
            return _UNICODE_OUTLINE[self.piece_type]
        return _UNICODE[self.piece_type]

    @property
    def is_king(self) -> bool:
        return self.piece_type == PieceType.KING
