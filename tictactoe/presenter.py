"""
Glue between a view (Qt window, console, test fake) and the rules in
game_logic. The presenter never touches a UI toolkit: it only calls the
three GameView methods below, so any front-end can drive a game.
"""
import logging
from typing import Optional, Protocol, Sequence, Tuple

from .game_logic import (
    Board, TurnController, InvalidPlayerNames,
    CONTINUE, WIN, TIE, NOT_STARTED, IN_PROGRESS,
)

logger = logging.getLogger(__name__)

NAMES_REQUIRED = "Both players need to enter their names."
PRESS_START = "Enter both names and press Start."


class GameView(Protocol):
    def render(self, cells: Sequence[str],
               winning_line: Optional[Tuple[int, int, int]]) -> None: ...

    def show_status(self, text: str, kind: str = "info") -> None: ...

    def show_alert(self, title: str, text: str) -> None: ...


class GamePresenter:
    """
    handles start/cell/restart events and re-renders after each one
    """
    def __init__(self, view: GameView, controller: Optional[TurnController] = None):
        self.view = view
        self.controller = controller if controller is not None else TurnController()

    def refresh(self):
        # push current board to the view
        self.view.render(self.controller.get_board_snapshot(),
                         self.controller.winning_line)

    def _announce_turn(self):
        p = self.controller.current_player
        self.view.show_status(f"{p.name}'s turn ({p.marker})", "turn")

    def on_start_clicked(self, name1, name2):
        """
        returns True when a game was started
        """
        try:
            self.controller.start_game(name1, name2)
        except InvalidPlayerNames as e:
            logger.warning("start refused: %s", e)
            self.view.show_alert("Missing names", NAMES_REQUIRED)
            self.view.show_status(NAMES_REQUIRED, "error")
            if self.controller.state == IN_PROGRESS:
                # running game is untouched, put its turn line back
                self._announce_turn()
            return False
        self.refresh()
        self._announce_turn()
        return True

    def on_new_game_clicked(self, name1, name2):
        """
        full restart: throw away the old session and build a new one
        """
        previous = self.controller
        self.controller = TurnController(Board())
        if not self.on_start_clicked(name1, name2):
            self.controller = previous
            if previous.state == IN_PROGRESS:
                self._announce_turn()
            return False
        return True

    def on_cell_selected(self, index):
        """
        play index for the current mover and report the outcome
        """
        mover = self.controller.current_player
        result = self.controller.play_move(index)
        if result == CONTINUE:
            self.refresh()
            self._announce_turn()
        elif result == WIN:
            self.refresh()
            msg = f"{mover.name} wins!"
            self.view.show_status(msg, "success")
            self.view.show_alert("Game over", msg)
        elif result == TIE:
            self.refresh()
            msg = "It's a tie!"
            self.view.show_status(msg, "success")
            self.view.show_alert("Game over", msg)
        elif self.controller.state == NOT_STARTED:
            self.view.show_status(PRESS_START, "info")
        return result

    def on_restart_clicked(self):
        """
        board-clear only; a new Start is needed before playing
        """
        self.controller.reset_board()
        self.refresh()
        self.view.show_status(PRESS_START, "info")
