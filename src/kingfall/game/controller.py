"""GameController - the central orchestrator of a game session.

Coordinates: GameState, Rules, square selection.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from kingfall.core.move import Move
from kingfall.core.outcome import Outcome
from kingfall.core.types import Square
from kingfall.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[Outcome], None]
SelectionCallback = Callable[[Square | None, frozenset[Square]], None]
ResetCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Turns board clicks into moves, keeps the selection, restarts games.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_state", "_selected", "_targets", "events")

    def __init__(self, fen: str | None = None) -> None:
        self._state = GameState()
        self._state.setup(fen)
        self._selected: Square | None = None
        self._targets: frozenset[Square] = frozenset()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def targets(self) -> frozenset[Square]:
        """Legal destinations of the selected piece."""
        return self._targets

    # ── Interaction ──────────────────────────────────────────────────────

    def click(self, sq: Square) -> bool:
        """Handle a click on *sq*. Returns True if a move was played.

        Clicking the selected square deselects it, clicking one of its
        targets plays the move, clicking a piece of the side to move
        selects it. Other clicks leave the selection as it is.
        """
        if self._state.is_game_over:
            return False

        if self._selected == sq:
            self._set_selection(None)
            return False

        if self._selected is not None and sq in self._targets:
            return self._play(Move(self._selected, sq))

        piece = self._state.piece_at(sq)
        if piece is not None and piece.color == self._state.side_to_move:
            self._set_selection(sq)
        return False

    def submit_move(self, move: Move) -> bool:
        """Play *move* if it is legal for the side to move."""
        if self._state.is_game_over:
            return False
        piece = self._state.piece_at(move.from_sq)
        if piece is None or piece.color != self._state.side_to_move:
            return False
        if move.to_sq not in self._state.legal_moves(move.from_sq):
            return False
        return self._play(move)

    def restart(self) -> None:
        """Reset to the starting layout and drop any selection."""
        self._state.setup(self._state.start_fen)
        self._set_selection(None)
        _LOGGER.debug("Game restarted from %s", self._state.start_fen)
        for cb in self.events.on_reset:
            cb()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _play(self, move: Move) -> bool:
        record = self._state.apply_move(move)
        if record is None:
            return False
        self._set_selection(None)
        _LOGGER.debug("Move %s -> %s", move, record.outcome)

        for cb in self.events.on_move:
            cb(record, self._state)

        if self._state.is_game_over:
            _LOGGER.info("Game over: %s", self._state.outcome)
            for game_over_cb in self.events.on_game_over:
                game_over_cb(self._state.outcome)
        return True

    def _set_selection(self, sq: Square | None) -> None:
        self._selected = sq
        self._targets = (
            frozenset(self._state.legal_moves(sq)) if sq is not None else frozenset()
        )
        for cb in self.events.on_selection_changed:
            cb(self._selected, self._targets)
