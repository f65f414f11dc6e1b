from ..game_logic import GameEngine, GameStatus
from ..ui.board_widget import BoardWidget
from ..ui.status_text import status_text

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont, QGuiApplication
from PySide6.QtCore import Qt, Slot

WINDOW_TITLE = "Tic Tac Toe"
WINDOW_WIDTH, WINDOW_HEIGHT = 360, 420
STATUS_FONT_SIZE = 12


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self):
        """
        init engine, ui widgets, signals
        """
        super().__init__()
        self.engine = GameEngine()
        self.board_widget = BoardWidget(self.engine, parent=self)
        self._setup_ui()
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_top_controls()        # status + reset
        self.main_layout.addWidget(self.controls_top_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_top_controls(self):
        # status label + reset button
        self.controls_top_widget = QWidget()
        hl = QHBoxLayout(self.controls_top_widget)
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(STATUS_FONT_SIZE); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label, 1)
        hl.addWidget(self.reset_button)

    def center_on_screen(self):
        # place window in the middle of the primary screen
        screen = QGuiApplication.primaryScreen()
        if screen is None:
            return
        frame = self.frameGeometry()
        frame.moveCenter(screen.availableGeometry().center())
        self.move(frame.topLeft())

    def _update_message(self, text, is_success=False, is_turn=False):
        # set message text + style
        style = ""
        if is_success: style = "color: #2e7d32; font-weight: bold;"
        elif is_turn:  style = "color: #1f5fa8;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _refresh(self):
        # redraw board + status from a fresh snapshot
        view = self.engine.view()
        self._update_message(status_text(view),
                             is_success=view.status is GameStatus.WON,
                             is_turn=view.status is GameStatus.IN_PROGRESS)
        self.board_widget.update()

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        # stray clicks (taken cell, game over) are ignored
        res = self.engine.apply_move_at(r, c)
        if res.accepted:
            self._refresh()

    @Slot()
    def reset_game(self):
        # back to a fresh game, X first
        self.engine.reset()
        self._refresh()

    def closeEvent(self, event):
        print("window closed")
        event.accept()
