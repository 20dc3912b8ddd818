"""MainWindow - top-level window assembling the board and side widgets."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QLabel,
    QMainWindow,
    QPushButton,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from kingfall.core.enums import Color
from kingfall.core.piece import Piece
from kingfall.core.types import Square
from kingfall.game.controller import GameController
from kingfall.game.state import GameState, MoveRecord
from kingfall.ui.board_view import BoardView
from kingfall.ui.settings import AppSettings
from kingfall.ui.theme import BoardTheme


class MainWindow(QMainWindow):
    """Main application window for Kingfall.

    Layout, top to bottom: black pieces captured by White, the board, the
    restart button, white pieces captured by Black, the winner banner.
    """

    def __init__(
        self,
        controller: GameController | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Kingfall")
        self.setMinimumSize(480, 640)

        self._controller = controller if controller is not None else GameController()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._connect_signals()
        self.apply_settings()
        self._refresh()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._captured_black = QLabel()
        self._captured_black.setObjectName("capturedRow")
        root.addWidget(self._captured_black)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=1)

        self._restart_button = QPushButton("Restart Game")
        root.addWidget(self._restart_button, alignment=Qt.AlignmentFlag.AlignHCenter)

        self._captured_white = QLabel()
        self._captured_white.setObjectName("capturedRow")
        root.addWidget(self._captured_white)

        self._winner_banner = QLabel()
        self._winner_banner.setObjectName("winnerBanner")
        self._winner_banner.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._winner_banner.hide()
        root.addWidget(self._winner_banner)

        self._status = QStatusBar()
        self.setStatusBar(self._status)

    def _connect_signals(self) -> None:
        self._board_view.square_clicked.connect(self._on_square_clicked)
        self._restart_button.clicked.connect(self._on_restart)

        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_selection_changed.append(self._on_selection_changed)
        events.on_reset.append(self._refresh)

    # ── Settings ─────────────────────────────────────────────────────────

    def apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.named(s.board_theme))
        scene.set_flipped(s.flipped)
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)
        scene.show_selection(self._controller.selected, self._controller.targets)

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── Event handlers ───────────────────────────────────────────────────

    def _on_square_clicked(self, sq: Square) -> None:
        self._controller.click(sq)

    def _on_selection_changed(
        self, sq: Square | None, targets: frozenset[Square]
    ) -> None:
        self._board_view.board_scene.show_selection(sq, targets)

    def _on_move(self, _record: MoveRecord, _state: GameState) -> None:
        self._refresh()

    def _on_restart(self, _checked: bool = False) -> None:
        self._controller.restart()

    # ── Display sync ─────────────────────────────────────────────────────

    def _refresh(self) -> None:
        state = self._controller.state
        scene = self._board_view.board_scene
        scene.set_position(state.position)
        scene.show_selection(self._controller.selected, self._controller.targets)
        scene.highlight_last_move(state.last_move)
        scene.highlight_check(state.side_to_move if state.is_check else None)

        self._captured_black.setText(_symbols(state.captured[Color.BLACK]))
        self._captured_white.setText(_symbols(state.captured[Color.WHITE]))

        winner = state.winner
        if winner is not None:
            self._winner_banner.setText(f"{winner.name.capitalize()} wins!")
            self._winner_banner.show()
        else:
            self._winner_banner.clear()
            self._winner_banner.hide()

        self._status.showMessage(_status_text(state))


def _symbols(pieces: list[Piece]) -> str:
    return " ".join(p.symbol for p in pieces)


def _status_text(state: GameState) -> str:
    if state.winner is not None:
        return str(state.outcome)
    side = state.side_to_move.name.capitalize()
    if state.is_check:
        return f"{side} to move - check"
    return f"{side} to move"
