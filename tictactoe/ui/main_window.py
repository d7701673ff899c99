from .. import config
from ..game_logic import IN_PROGRESS
from ..presenter import GamePresenter
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QLineEdit,
    QGroupBox, QMessageBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot


class TicTacToeWindow(QMainWindow):
    """
    main window: name inputs, board, status line. acts as the
    presenter's view, all game decisions live in the presenter
    """
    def __init__(self, player1="", player2=""):
        """
        init ui widgets, presenter, signals
        """
        super().__init__()
        self.board_widget = BoardWidget(parent=self)
        self._setup_ui()
        self.player1_input.setText(player1); self.player2_input.setText(player2)
        self.presenter = GamePresenter(self)
        self.presenter.refresh()
        self.show_status("Enter both names and press Start.")

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(config.WINDOW_TITLE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_player_controls()     # names + start
        self.main_layout.addWidget(self.player_controls_group)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + restart
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self._on_new_game_clicked)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_player_controls(self):
        '''two name fields + start button'''
        self.player_controls_group = QGroupBox("Players")
        layout = QVBoxLayout()
        self.player1_input = QLineEdit(); self.player1_input.setPlaceholderText("Player 1 (X)")
        self.player2_input = QLineEdit(); self.player2_input.setPlaceholderText("Player 2 (O)")
        for label, field in (("X:", self.player1_input), ("O:", self.player2_input)):
            row = QHBoxLayout(); row.addWidget(QLabel(label)); row.addWidget(field)
            layout.addLayout(row)
        self.start_button = QPushButton("Start")
        self.start_button.clicked.connect(self._on_start_clicked)
        layout.addWidget(self.start_button, alignment=Qt.AlignCenter)
        self.player_controls_group.setLayout(layout)

    def _create_bottom_controls(self):
        # status label + restart button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.restart_button = QPushButton("Restart")
        self.restart_button.clicked.connect(self._on_restart_clicked)
        hl.addWidget(self.message_label); hl.addStretch(1); hl.addWidget(self.restart_button)

    def names(self):
        return self.player1_input.text(), self.player2_input.text()

    # --- GameView -----------------------------------------------------------

    def render(self, cells, winning_line=None):
        self.board_widget.set_board(cells, winning_line)
        # clicks only while a game runs
        self.board_widget.set_accept_clicks(self.presenter.controller.state == IN_PROGRESS)

    def show_status(self, text, kind="info"):
        # set message text + style
        self.message_label.setStyleSheet(config.STATUS_STYLES.get(kind, config.STATUS_STYLES["info"]))
        self.message_label.setText(text)

    def show_alert(self, title, text):
        QMessageBox.information(self, title, text)

    # --- slots --------------------------------------------------------------

    @Slot()
    def _on_start_clicked(self):
        self.presenter.on_start_clicked(*self.names())

    @Slot()
    def _on_new_game_clicked(self):
        self.presenter.on_new_game_clicked(*self.names())

    @Slot(int)
    def _on_cell_clicked(self, index):
        self.presenter.on_cell_selected(index)

    @Slot()
    def _on_restart_clicked(self):
        self.presenter.on_restart_clicked()
