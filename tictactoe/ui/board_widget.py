from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from .. import config
from ..game_logic import BOARD_CELLS, EMPTY

GRID = 3


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits cell index 0-8 on click

    def __init__(self, parent=None):
        super().__init__(parent)
        self.cells = (EMPTY,) * BOARD_CELLS  # last rendered board
        self.winning_line = None
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(config.MIN_BOARD_SIZE, config.MIN_BOARD_SIZE))
        self._accept_clicks = True      # toggle click handling

    def set_board(self, cells, winning_line=None):
        # new snapshot from the presenter
        self.cells = tuple(cells)
        self.winning_line = winning_line
        self.update()

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square side and its offset inside the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return side, (w - side) / 2, (h - side) / 2

    def _cell_center(self, index, side, ox, oy):
        cell = side / GRID
        r, c = divmod(index, GRID)
        return QPointF(ox + c*cell + cell/2, oy + r*cell + cell/2)

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        side, ox, oy = self._geometry()
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        cell = side / GRID
        col = int((x-ox) // cell); row = int((y-oy) // cell)
        # clamp to valid range
        row = max(0, min(row, GRID-1)); col = max(0, min(col, GRID-1))
        return row * GRID + col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            side, ox, oy = self._geometry()
            painter.fillRect(self.rect(), QColor(config.BOARD_BACKGROUND))
            cell_size = side / GRID
            # grid lines
            painter.setPen(QPen(QColor(config.GRID_LINE_COLOR), 2))
            for i in range(1, GRID):
                x = ox + i*cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy+side))
                y = oy + i*cell_size
                painter.drawLine(int(ox), int(y), int(ox+side), int(y))
            # marks
            rad = cell_size/2 * 0.7
            for i, sym in enumerate(self.cells):
                if sym == EMPTY: continue
                center = self._cell_center(i, side, ox, oy)
                cx, cy = center.x(), center.y()
                if sym == 'X':
                    painter.setPen(QPen(QColor(config.X_COLOR), config.MARK_PEN_WIDTH))
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(config.O_COLOR), config.MARK_PEN_WIDTH))
                    painter.drawEllipse(center, rad, rad)
            # strike through winning cells
            if self.winning_line:
                first, last = self.winning_line[0], self.winning_line[-1]
                painter.setPen(QPen(QColor(config.WIN_LINE_COLOR), 8,
                                    Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
                painter.drawLine(self._cell_center(first, side, ox, oy),
                                 self._cell_center(last, side, ox, oy))
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks:
            return
        index = self.cell_at(event.position().x(), event.position().y())
        if index is not None:
            self.cell_clicked.emit(index)  # notify main window
