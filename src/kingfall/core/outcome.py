"""Outcome and move-result value objects."""

from __future__ import annotations

from dataclasses import dataclass

from kingfall.core.enums import Color, GameStatus
from kingfall.core.piece import Piece
from kingfall.core.position import Position


@dataclass(frozen=True, slots=True)
class Outcome:
    """Game status after a move.

    ``color`` is the side to move for ``CHECK``, the winner for ``WIN`` and
    ``None`` while the game is simply in progress. There is no draw state:
    a side without legal moves that is not in check stays ``IN_PROGRESS``.
    """

    status: GameStatus
    color: Color | None = None

    @classmethod
    def in_progress(cls) -> Outcome:
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def check(cls, color: Color) -> Outcome:
        return cls(GameStatus.CHECK, color)

    @classmethod
    def win(cls, color: Color) -> Outcome:
        return cls(GameStatus.WIN, color)

    @property
    def is_win(self) -> bool:
        return self.status == GameStatus.WIN

    @property
    def is_check(self) -> bool:
        return self.status == GameStatus.CHECK

    @property
    def winner(self) -> Color | None:
        return self.color if self.is_win else None

    def __str__(self) -> str:
        if self.status == GameStatus.WIN:
            return f"{self.color} wins"
        if self.status == GameStatus.CHECK:
            return f"{self.color} in check"
        return "in progress"


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Everything :meth:`Rules.apply_move` hands back to its caller."""

    position: Position
    outcome: Outcome
    captured: Piece | None = None
