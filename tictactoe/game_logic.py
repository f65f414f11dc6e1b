from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

BOARD_SIZE = 3                          # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# rows, cols, diags (row-major indices); first match wins for highlighting
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Player(Enum):
    """
    the two marks
    """
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        return Player.O if self is Player.X else Player.X


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class MoveResult(Enum):
    """
    outcome of apply_move; the last three are rejections
    """
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"
    GAME_OVER = "game_over"
    INVALID_INDEX = "invalid_index"
    CELL_OCCUPIED = "cell_occupied"

    @property
    def accepted(self) -> bool:
        return self in (MoveResult.CONTINUE, MoveResult.WIN, MoveResult.DRAW)


@dataclass(frozen=True)
class BoardView:
    """
    read-only snapshot handed to the ui
    """
    cells: Tuple[Optional[Player], ...]
    active_player: Player
    status: GameStatus
    winner: Optional[Player] = None
    winning_line: Optional[Tuple[int, int, int]] = None

    def cell(self, index):
        return self.cells[index]

    @property
    def is_over(self):
        return self.status is not GameStatus.IN_PROGRESS

    @property
    def move_count(self):
        return sum(1 for c in self.cells if c is not None)

    def empty_cells(self):
        return [i for i, c in enumerate(self.cells) if c is None]


def index_of(row, col):
    """
    row/col -> board index, None if off the grid
    """
    if isinstance(row, bool) or isinstance(col, bool):
        return None
    if not (isinstance(row, int) and isinstance(col, int)):
        return None
    if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
        return row * BOARD_SIZE + col
    return None


def find_winning_line(cells, player):
    """
    first line fully owned by player, or None
    """
    for line in WINNING_LINES:
        if all(cells[i] is player for i in line):
            return line
    return None


class GameEngine:
    """
    tic-tac-toe rules and state
    """
    def __init__(self):
        self.reset()

    def reset(self):
        """
        clear board, X to move, game back in progress
        """
        self._cells = [None] * CELL_COUNT
        self._active = Player.X
        self._status = GameStatus.IN_PROGRESS
        self._winner = None
        self._winning_line = None
        self._accepted_moves = 0

    @property
    def active_player(self):
        return self._active

    @property
    def status(self):
        return self._status

    @property
    def winner(self):
        return self._winner

    def is_cell_empty(self, index):
        """
        true if index on the board and cell blank
        """
        return self._valid_index(index) and self._cells[index] is None

    def apply_move(self, index):
        """
        mark index for the active player, then check win -> draw -> toggle
        returns a MoveResult; rejected moves leave state untouched
        """
        if self._status is not GameStatus.IN_PROGRESS:
            return MoveResult.GAME_OVER
        if not self._valid_index(index):
            return MoveResult.INVALID_INDEX
        if self._cells[index] is not None:
            return MoveResult.CELL_OCCUPIED

        player = self._active
        self._cells[index] = player
        self._accepted_moves += 1
        self._check_invariants()

        # win beats draw when the last cell completes a line
        line = find_winning_line(self._cells, player)
        if line is not None:
            self._status = GameStatus.WON
            self._winner = player; self._winning_line = line
            return MoveResult.WIN
        if all(c is not None for c in self._cells):
            self._status = GameStatus.DRAW
            return MoveResult.DRAW
        self._active = player.opposite()
        return MoveResult.CONTINUE

    def apply_move_at(self, row, col):
        """
        grid-coordinate entry point for the board widget
        """
        index = index_of(row, col)
        if index is None:
            # keep check order: a finished game reports game over first
            if self._status is not GameStatus.IN_PROGRESS:
                return MoveResult.GAME_OVER
            return MoveResult.INVALID_INDEX
        return self.apply_move(index)

    def view(self):
        """
        immutable snapshot of board, turn and status
        """
        return BoardView(
            cells=tuple(self._cells),
            active_player=self._active,
            status=self._status,
            winner=self._winner,
            winning_line=self._winning_line,
        )

    @staticmethod
    def _valid_index(index):
        # bools are ints in python, reject them
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < CELL_COUNT

    def _check_invariants(self):
        assert len(self._cells) == CELL_COUNT, "board must hold 9 cells"
        x = sum(1 for c in self._cells if c is Player.X)
        o = sum(1 for c in self._cells if c is Player.O)
        assert x + o == self._accepted_moves, "mark count out of sync"
        assert x - o in (0, 1), "turn order broken"
