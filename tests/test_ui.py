import pytest

pytest.importorskip("PySide6")

from PySide6.QtWidgets import QMessageBox  # noqa: E402

from tictactoe import config  # noqa: E402
from tictactoe.game_logic import EMPTY, IN_PROGRESS, FINISHED  # noqa: E402
from tictactoe.ui.board_widget import BoardWidget  # noqa: E402
from tictactoe.ui.main_window import TicTacToeWindow  # noqa: E402


@pytest.fixture
def alerts(monkeypatch):
    seen = []
    monkeypatch.setattr(QMessageBox, "information",
                        lambda parent, title, text: seen.append((title, text)))
    return seen


@pytest.fixture
def window(qapp, alerts):
    w = TicTacToeWindow()
    yield w
    w.close()


def test_cell_at_maps_square_grid(qapp):
    w = BoardWidget()
    w.resize(300, 300)
    assert w.cell_at(10, 10) == 0
    assert w.cell_at(150, 150) == 4
    assert w.cell_at(299, 299) == 8
    assert w.cell_at(299, 10) == 2


def test_cell_at_ignores_margin_outside_grid(qapp):
    w = BoardWidget()
    w.resize(400, 300)         # grid is centred, 50px margins left and right
    assert w.cell_at(10, 10) is None
    assert w.cell_at(60, 10) == 0
    assert w.cell_at(390, 290) is None


def test_board_starts_locked(window):
    assert window.board_widget.accepts_clicks() is False
    assert window.board_widget.cells == (EMPTY,) * 9


def test_start_requires_both_names(window, alerts):
    window.player1_input.setText("Ann")
    window._on_start_clicked()
    assert alerts == [("Missing names", "Both players need to enter their names.")]
    assert window.board_widget.accepts_clicks() is False


def test_play_to_win_through_window(window, alerts):
    window.player1_input.setText("Ann"); window.player2_input.setText("Bob")
    window._on_start_clicked()
    assert window.presenter.controller.state == IN_PROGRESS
    assert window.board_widget.accepts_clicks() is True
    assert window.message_label.text() == "Ann's turn (X)"
    for i in (0, 3, 1, 4, 2):
        window.board_widget.cell_clicked.emit(i)
    assert window.presenter.controller.state == FINISHED
    assert window.board_widget.cells[:3] == ("X", "X", "X")
    assert window.board_widget.winning_line == (0, 1, 2)
    assert window.board_widget.accepts_clicks() is False
    assert alerts == [("Game over", "Ann wins!")]
    assert window.message_label.styleSheet() == config.STATUS_STYLES["success"]


def test_restart_button_clears_board(window):
    window.player1_input.setText("Ann"); window.player2_input.setText("Bob")
    window._on_start_clicked()
    window._on_cell_clicked(4)
    window.restart_button.click()
    assert window.board_widget.cells == (EMPTY,) * 9
    assert window.board_widget.accepts_clicks() is False


def test_prefilled_names(qapp, alerts):
    w = TicTacToeWindow("Ann", "Bob")
    assert w.names() == ("Ann", "Bob")
    w.close()


def test_locked_board_ignores_real_mouse_clicks(qapp):
    QtTest = pytest.importorskip("PySide6.QtTest")
    from PySide6.QtCore import Qt, QPoint

    w = BoardWidget()
    w.resize(300, 300)
    w.show()
    emitted = []
    w.cell_clicked.connect(emitted.append)

    w.set_accept_clicks(False)
    QtTest.QTest.mouseClick(w, Qt.LeftButton, Qt.NoModifier, QPoint(150, 150))
    assert emitted == []

    w.set_accept_clicks(True)
    QtTest.QTest.mouseClick(w, Qt.LeftButton, Qt.NoModifier, QPoint(150, 150))
    assert emitted == [4]
    w.close()
