"""Tests for Rules: check, checkmate and move application."""

from kingfall.core.enums import Color, GameStatus, PieceType
from kingfall.core.notation import position_from_fen
from kingfall.core.outcome import Outcome
from kingfall.core.piece import Piece
from kingfall.core.position import Position
from kingfall.core.rules import Rules
from kingfall.core.types import (
    A7, A8, D1, D2, D5, D8, E1, E2, E3, E4, E5, E7, E8, F2, F3, G1, G2, G4, G6, H1,
    H4, H8,
)

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w"


class TestIsInCheck:
    def test_initial_not_in_check(self) -> None:
        pos = Rules.initial_position()
        assert not Rules.is_in_check(pos, Color.WHITE)
        assert not Rules.is_in_check(pos, Color.BLACK)

    def test_queen_gives_check(self) -> None:
        pos = position_from_fen(FOOLS_MATE)
        assert Rules.is_in_check(pos, Color.WHITE)

    def test_missing_king_not_in_check(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4R3 b")
        assert not Rules.is_in_check(pos, Color.WHITE)
        assert Rules.is_in_check(pos, Color.BLACK)


class TestCheckmate:
    def test_fools_mate_is_checkmate(self) -> None:
        pos = position_from_fen(FOOLS_MATE)
        assert Rules.is_checkmate(pos)
        assert not Rules.has_legal_reply(pos)
        assert Rules.evaluate(pos) == Outcome.win(Color.BLACK)

    def test_check_with_escape_is_not_mate(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4R1K1 b")
        assert not Rules.is_checkmate(pos)
        assert Rules.evaluate(pos) == Outcome.check(Color.BLACK)

    def test_stalemate_is_not_detected(self) -> None:
        pos = position_from_fen("7k/8/5KQ1/8/8/8/8/8 b")
        assert not Rules.has_legal_reply(pos)
        assert not Rules.is_checkmate(pos)
        assert Rules.evaluate(pos) == Outcome.in_progress()


class TestApplyMove:
    def test_quiet_move(self) -> None:
        pos = Rules.initial_position()
        result = Rules.apply_move(pos, E2, E4)
        assert result.outcome == Outcome.in_progress()
        assert result.captured is None
        assert result.position.side_to_move == Color.BLACK
        assert result.position.board[E2] is None
        assert result.position.board[E4] == Piece(
            Color.WHITE, PieceType.PAWN, has_moved=True
        )

    def test_input_position_untouched(self) -> None:
        pos = Rules.initial_position()
        Rules.apply_move(pos, E2, E4)
        assert pos == Position.initial()

    def test_capture_reports_captured_piece(self) -> None:
        pos = position_from_fen("4k3/8/8/3p4/4P3/8/8/4K3 w")
        result = Rules.apply_move(pos, E4, D5)
        assert result.captured == Piece(Color.BLACK, PieceType.PAWN)
        assert result.position.board[D5].color == Color.WHITE

    def test_fools_mate_sequence(self) -> None:
        pos = Rules.initial_position()
        for from_sq, to_sq in ((F2, F3), (E7, E5), (G2, G4)):
            result = Rules.apply_move(pos, from_sq, to_sq)
            assert result.outcome.status == GameStatus.IN_PROGRESS
            pos = result.position
        result = Rules.apply_move(pos, D8, H4)
        assert result.outcome == Outcome.win(Color.BLACK)
        assert result.outcome.winner == Color.BLACK

    def test_move_giving_check(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K2R w")
        result = Rules.apply_move(pos, H1, H8)
        assert result.outcome == Outcome.check(Color.BLACK)
        assert result.outcome.is_check
        assert not result.outcome.is_win

    def test_back_rank_mate(self) -> None:
        pos = position_from_fen("3k4/R7/3K4/8/8/8/8/8 w")
        result = Rules.apply_move(pos, A7, A8)
        assert result.outcome == Outcome.win(Color.WHITE)

    def test_king_capture_wins_without_moving(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4R1K1 w")
        result = Rules.apply_move(pos, E1, E8)
        assert result.outcome == Outcome.win(Color.WHITE)
        assert result.captured == Piece(Color.BLACK, PieceType.KING)
        assert result.position == pos
        assert result.position.side_to_move == Color.WHITE
        assert result.position is not pos

    def test_stalemating_move_stays_in_progress(self) -> None:
        pos = position_from_fen("7k/8/5K2/8/8/8/8/6Q1 w")
        result = Rules.apply_move(pos, G1, G6)
        assert result.outcome == Outcome.in_progress()
        assert not Rules.has_legal_reply(result.position)

    def test_empty_origin_is_noop(self) -> None:
        pos = Rules.initial_position()
        result = Rules.apply_move(pos, E4, E5)
        assert result.position == pos
        assert result.captured is None
        assert result.outcome == Outcome.in_progress()

    def test_off_board_squares_are_noop(self) -> None:
        pos = Rules.initial_position()
        assert Rules.apply_move(pos, -1, E4).position == pos
        assert Rules.apply_move(pos, E2, 64).position == pos

    def test_position_without_kings(self) -> None:
        pos = position_from_fen("8/8/8/8/8/8/3r4/3R4 w")
        result = Rules.apply_move(pos, D1, D2)
        assert result.outcome == Outcome.in_progress()
        assert result.captured == Piece(Color.BLACK, PieceType.ROOK)
        assert result.position.side_to_move == Color.BLACK


class TestLegalMoves:
    def test_wraps_move_generator(self) -> None:
        pos = Rules.initial_position()
        assert Rules.legal_moves(pos, E2) == {E3, E4}
        assert Rules.legal_moves(pos, E4) == set()


class TestOutcome:
    def test_string_forms(self) -> None:
        assert str(Outcome.win(Color.WHITE)) == "white wins"
        assert str(Outcome.check(Color.BLACK)) == "black in check"
        assert str(Outcome.in_progress()) == "in progress"

    def test_winner_only_for_wins(self) -> None:
        assert Outcome.check(Color.BLACK).winner is None
        assert Outcome.win(Color.BLACK).winner == Color.BLACK
