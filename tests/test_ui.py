import os
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

try:
    from PySide6.QtWidgets import QApplication
    HAS_QT = True
except ImportError:
    HAS_QT = False

from tictactoe.game_logic import GameEngine, GameStatus, Player
from tictactoe.ui.status_text import status_text


class TestStatusText(unittest.TestCase):
    def test_messages(self) -> None:
        engine = GameEngine()
        self.assertEqual(status_text(engine.view()), "Player X's turn")
        engine.apply_move(0)
        self.assertEqual(status_text(engine.view()), "Player O's turn")
        for i in (1, 3, 2, 6):
            engine.apply_move(i)
        self.assertEqual(status_text(engine.view()), "Player X wins!")
        engine.reset()
        for i in (0, 1, 2, 4, 3, 5, 7, 6, 8):
            engine.apply_move(i)
        self.assertEqual(status_text(engine.view()), "It's a draw!")


@unittest.skipUnless(HAS_QT, "PySide6 widgets unavailable")
class TestWindow(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.app = QApplication.instance() or QApplication([])

    def setUp(self) -> None:
        from tictactoe.ui.main_window import TicTacToeWindow
        self.window = TicTacToeWindow()

    def tearDown(self) -> None:
        self.window.deleteLater()

    def test_initial_status(self) -> None:
        self.assertEqual(self.window.windowTitle(), "Tic Tac Toe")
        self.assertEqual(self.window.message_label.text(), "Player X's turn")

    def test_clicks_drive_engine(self) -> None:
        self.window.board_widget.cell_clicked.emit(0, 0)
        self.assertIs(self.window.engine.view().cell(0), Player.X)
        self.assertEqual(self.window.message_label.text(), "Player O's turn")
        # taken cell ignored
        self.window.board_widget.cell_clicked.emit(0, 0)
        self.assertEqual(self.window.message_label.text(), "Player O's turn")
        for r, c in ((0, 1), (1, 0), (0, 2), (2, 0)):
            self.window.board_widget.cell_clicked.emit(r, c)
        self.assertEqual(self.window.message_label.text(), "Player X wins!")
        self.assertIs(self.window.engine.status, GameStatus.WON)

    def test_reset_button(self) -> None:
        self.window.board_widget.cell_clicked.emit(1, 1)
        self.window.reset_button.click()
        self.assertEqual(self.window.engine.view(), GameEngine().view())
        self.assertEqual(self.window.message_label.text(), "Player X's turn")

    def test_cell_hit_testing(self) -> None:
        board = self.window.board_widget
        board.resize(300, 300)
        self.assertEqual(board.cell_at(15, 15), (0, 0))
        self.assertEqual(board.cell_at(149, 244), (2, 1))
        self.assertIsNone(board.cell_at(102, 50))    # gap between cells
        self.assertIsNone(board.cell_at(5, 5))       # margin
        self.assertIsNone(board.cell_at(295, 150))


if __name__ == "__main__":
    unittest.main()
