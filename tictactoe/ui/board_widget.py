from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_SIZE, Player

BACKGROUND_COLOR = QColor("#d6d6d6")     # shows through the gaps as grid
CELL_COLOR = QColor("#ffffff")
WIN_CELL_COLOR = QColor(220, 255, 220)   # light green for the winning line
X_COLOR = QColor("#1f5fa8")
O_COLOR = QColor("#b83232")
CELL_GAP = 6                             # px between cells
BOARD_MARGIN = 10                        # px around the grid
MARK_WIDTH = 6


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, engine, parent=None):
        super().__init__(parent)
        self.engine = engine          # reads engine.view() only
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square grid origin + cell size, centred in the widget
        w, h = self.width(), self.height()
        side = max(0.0, min(w, h) - 2 * BOARD_MARGIN)
        ox, oy = (w - side) / 2, (h - side) / 2
        cell = (side - (BOARD_SIZE - 1) * CELL_GAP) / BOARD_SIZE
        return ox, oy, side, cell

    def cell_rect(self, row, col):
        ox, oy, _, cell = self._geometry()
        x = ox + col * (cell + CELL_GAP)
        y = oy + row * (cell + CELL_GAP)
        return QRectF(x, y, cell, cell)

    def cell_at(self, x, y):
        """
        map widget coords to (row, col); None for gaps and outside
        """
        ox, oy, side, cell = self._geometry()
        if cell <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        step = cell + CELL_GAP
        col = int((x - ox) // step); row = int((y - oy) // step)
        if row >= BOARD_SIZE or col >= BOARD_SIZE:
            return None
        # click landed in a gap
        if (x - ox) - col * step >= cell or (y - oy) - row * step >= cell:
            return None
        return row, col

    def paintEvent(self, event):
        """
        draw cells, X/O marks, and highlight winner
        """
        view = self.engine.view()
        highlight = set(view.winning_line or ())
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            for index, mark in enumerate(view.cells):
                row, col = divmod(index, BOARD_SIZE)
                rect = self.cell_rect(row, col)
                painter.fillRect(rect, WIN_CELL_COLOR if index in highlight else CELL_COLOR)
                if mark is None:
                    continue
                cx, cy = rect.center().x(), rect.center().y()
                rad = rect.width() / 2 * 0.6
                if mark is Player.X:
                    painter.setPen(QPen(X_COLOR, MARK_WIDTH, Qt.SolidLine, Qt.RoundCap))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(O_COLOR, MARK_WIDTH))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if event.button() != Qt.LeftButton:
            return
        pos = event.position()
        hit = self.cell_at(pos.x(), pos.y())
        if hit is None:
            return
        self.cell_clicked.emit(*hit)  # notify main window
