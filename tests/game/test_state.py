"""Tests for GameState."""

from kingfall.core.enums import Color, PieceType
from kingfall.core.move import Move
from kingfall.core.notation import position_to_fen
from kingfall.core.outcome import Outcome
from kingfall.core.position import Position
from kingfall.core.types import (
    A1, A8, D5, D7, D8, E1, E2, E4, E5, E7, E8, F2, F3, G2, G4, H4,
)
from kingfall.game.state import GameState

KING_EXPOSED = "4k3/8/8/8/8/8/8/4R1K1 w"


def _play(gs: GameState, *moves: tuple[int, int]) -> None:
    for from_sq, to_sq in moves:
        assert gs.apply_move(Move(from_sq, to_sq)) is not None


class TestGameStateSetup:
    def test_position_is_available_before_setup(self) -> None:
        gs = GameState()
        assert gs.side_to_move == Color.WHITE
        assert gs.position == Position.initial()

    def test_setup_default(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.outcome == Outcome.in_progress()
        assert gs.side_to_move == Color.WHITE
        assert gs.ply_count == 0
        assert gs.last_move is None
        assert gs.captured == {Color.WHITE: [], Color.BLACK: []}

    def test_setup_custom_fen(self) -> None:
        gs = GameState()
        gs.setup("4k3/8/8/8/8/8/8/4K3 b")
        assert gs.side_to_move == Color.BLACK
        assert gs.start_fen == "4k3/8/8/8/8/8/8/4K3 b"

    def test_setup_evaluates_custom_position(self) -> None:
        gs = GameState()
        gs.setup("rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w")
        assert gs.winner == Color.BLACK
        assert gs.is_game_over

    def test_setup_resets_to_pristine_layout(self) -> None:
        gs = GameState()
        gs.setup()
        _play(gs, (E2, E4), (D7, D5), (E4, D5))
        gs.setup()
        assert gs.ply_count == 0
        assert gs.position == Position.initial()
        assert not any(
            gs.position.board[sq].has_moved
            for sq in range(64)
            if gs.position.board[sq] is not None
        )
        assert gs.captured == {Color.WHITE: [], Color.BLACK: []}
        assert gs.last_move is None


class TestGameStateApplyMove:
    def test_apply_move_records_history(self) -> None:
        gs = GameState()
        gs.setup()
        record = gs.apply_move(Move(E2, E4))
        assert record is not None
        assert record.piece.piece_type == PieceType.PAWN
        assert not record.was_capture
        assert not record.was_check
        assert gs.ply_count == 1
        assert gs.last_move == Move(E2, E4)
        assert gs.side_to_move == Color.BLACK

    def test_capture_is_logged_by_captured_color(self) -> None:
        gs = GameState()
        gs.setup()
        _play(gs, (E2, E4), (D7, D5), (E4, D5))
        black_losses = gs.captured[Color.BLACK]
        assert len(black_losses) == 1
        assert black_losses[0].piece_type == PieceType.PAWN
        assert black_losses[0].color == Color.BLACK
        assert gs.captured[Color.WHITE] == []
        assert gs.move_history[-1].was_capture

    def test_empty_origin_rejected(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.apply_move(Move(E4, E5)) is None
        assert gs.ply_count == 0

    def test_off_board_target_rejected(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.apply_move(Move(E2, 64)) is None
        assert gs.apply_move(Move(E2, -1)) is None
        assert gs.ply_count == 0
        assert gs.last_move is None
        assert gs.side_to_move == Color.WHITE
        assert gs.position == Position.initial()

    def test_off_board_origin_rejected(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.apply_move(Move(64, E4)) is None
        assert gs.ply_count == 0

    def test_checkmate_ends_game(self) -> None:
        gs = GameState()
        gs.setup()
        _play(gs, (F2, F3), (E7, E5), (G2, G4), (D8, H4))
        assert gs.is_game_over
        assert gs.winner == Color.BLACK
        assert gs.apply_move(Move(E1, F2)) is None
        assert gs.ply_count == 4

    def test_check_is_reported(self) -> None:
        gs = GameState()
        gs.setup("4k3/8/8/8/8/8/8/R5K1 w")
        record = gs.apply_move(Move(A1, A8))
        assert record is not None
        assert record.was_check
        assert gs.is_check
        assert not gs.is_game_over


class TestKingCapture:
    def test_king_capture_wins(self) -> None:
        gs = GameState()
        gs.setup(KING_EXPOSED)
        record = gs.apply_move(Move(E1, E8))
        assert record is not None
        assert gs.winner == Color.WHITE
        assert record.captured is not None and record.captured.is_king

    def test_board_is_left_as_before_the_capture(self) -> None:
        gs = GameState()
        gs.setup(KING_EXPOSED)
        before = position_to_fen(gs.position)
        gs.apply_move(Move(E1, E8))
        assert position_to_fen(gs.position) == before
        assert gs.side_to_move == Color.WHITE
        assert gs.last_move is None

    def test_captured_king_is_logged(self) -> None:
        gs = GameState()
        gs.setup(KING_EXPOSED)
        gs.apply_move(Move(E1, E8))
        assert [p.piece_type for p in gs.captured[Color.BLACK]] == [PieceType.KING]

    def test_no_moves_after_king_capture(self) -> None:
        gs = GameState()
        gs.setup(KING_EXPOSED)
        gs.apply_move(Move(E1, E8))
        assert gs.apply_move(Move(E8, D8)) is None
        assert gs.ply_count == 1
