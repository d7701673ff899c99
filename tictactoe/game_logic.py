import logging
from collections import namedtuple

logger = logging.getLogger(__name__)

BOARD_CELLS = 9                      # fixed 3x3 grid, flattened
EMPTY = ''
MARKERS = ('X', 'O')                 # player 1, player 2

# eight fixed lines, checked in this order
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6),             # diags
)

# session states
NOT_STARTED = "not_started"
IN_PROGRESS = "in_progress"
FINISHED = "finished"

# play_move results
CONTINUE = "continue"
WIN = "win"
TIE = "tie"
NOOP = "noop"


class InvalidPlayerNames(ValueError):
    """
    raised by start_game when a name is missing
    """


class Board:
    """
    9 cells, each EMPTY or a marker
    """
    def __init__(self):
        self._cells = [EMPTY] * BOARD_CELLS

    def get(self):
        # read-only view
        return tuple(self._cells)

    def set_mark(self, index, marker):
        """
        write marker only if index is on the board and the cell is free
        returns True when the cell was written
        """
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        if 0 <= index < BOARD_CELLS and self._cells[index] == EMPTY:
            self._cells[index] = marker
            return True
        return False

    def reset(self):
        self._cells = [EMPTY] * BOARD_CELLS

    def is_full(self):
        return all(cell != EMPTY for cell in self._cells)

    def empty_cells(self):
        return [i for i, cell in enumerate(self._cells) if cell == EMPTY]

    def winning_line(self):
        """
        first line holding three equal non-empty markers, or None
        """
        c = self._cells
        for a, b, d in WINNING_LINES:
            if c[a] != EMPTY and c[a] == c[b] == c[d]:
                return (a, b, d)
        return None


class Player(namedtuple("Player", ["name", "marker"])):
    """
    immutable name/marker pair
    """
    __slots__ = ()

    def get_name(self):
        return self.name

    def get_marker(self):
        return self.marker


def create_player(name, marker):
    # plain record, no validation here
    return Player(name, marker)


class TurnController:
    """
    owns the two players, whose turn it is and whether the game ended.
    every move goes through the board's write-if-empty contract
    """
    def __init__(self, board=None):
        self.board = board if board is not None else Board()
        self._players = ()
        self._mover = 0               # index into _players
        self._finished = False
        self._winner = None           # Player or None

    @property
    def state(self):
        if not self._players:
            return NOT_STARTED
        return FINISHED if self._finished else IN_PROGRESS

    @property
    def players(self):
        return self._players

    @property
    def current_player(self):
        # always derived from the mover index
        if not self._players:
            return None
        return self._players[self._mover]

    @property
    def winner(self):
        return self._winner

    @property
    def winning_line(self):
        return self.board.winning_line()

    def start_game(self, name1, name2):
        """
        set up a fresh game for two named players; X always moves first.
        raises InvalidPlayerNames and changes nothing if a name is empty
        """
        name1 = (name1 or '').strip()
        name2 = (name2 or '').strip()
        if not name1 or not name2:
            raise InvalidPlayerNames("Both players need to enter their names.")
        self._players = (create_player(name1, MARKERS[0]),
                         create_player(name2, MARKERS[1]))
        self._mover = 0
        self._finished = False
        self._winner = None
        self.board.reset()
        logger.info("%s is player 1 and %s is player 2", name1, name2)

    def play_move(self, index):
        """
        place the mover's marker at index
        returns CONTINUE, WIN, TIE or NOOP
        """
        if self.state != IN_PROGRESS:
            logger.debug("move %r ignored, game is %s", index, self.state)
            return NOOP
        mover = self.current_player
        if not self.board.set_mark(index, mover.marker):
            # occupied or off the board, turn stays
            logger.debug("move %r ignored, cell not available", index)
            return NOOP
        if self.board.winning_line() is not None:
            self._finished = True; self._winner = mover
            logger.info("%s (%s) wins", mover.name, mover.marker)
            return WIN
        if self.board.is_full():
            self._finished = True
            logger.info("game tied")
            return TIE
        self._mover = 1 - self._mover
        return CONTINUE

    def reset_board(self):
        """
        clear the grid only; the session goes back to not started
        and needs start_game before moves count again
        """
        self.board.reset()
        self._players = ()
        self._mover = 0
        self._finished = False
        self._winner = None

    def get_board_snapshot(self):
        return self.board.get()

    def check_winner(self):
        # marker on the winning line, or None
        line = self.board.winning_line()
        if line is None:
            return None
        return self.board.get()[line[0]]
