import logging

from .presenter import GamePresenter
from .game_logic import EMPTY, IN_PROGRESS

logger = logging.getLogger(__name__)

HELP = "Enter a cell 0-8, (r)estart, (n)ew players or (q)uit."


class ConsoleView:
    """
    GameView that prints to stdout (or any print-like callable)
    """
    def __init__(self, out=print):
        self.out = out

    def render(self, cells, winning_line=None):
        """
        draw the board; free cells show their index
        """
        self.out("\n-------------")
        for r in range(3):
            row = []
            for c in range(3):
                i = r * 3 + c
                row.append(cells[i] if cells[i] != EMPTY else str(i))
            self.out(f"  {' | '.join(row)}")
            if r < 2: self.out("  ---------")
        self.out("-------------")

    def show_status(self, text, kind="info"):
        prefix = "!! " if kind == "error" else ""
        self.out(f"{prefix}{text}")

    def show_alert(self, title, text):
        self.out(f"*** {title}: {text} ***")


def _ask_names(presenter, input_fn):
    # keep asking until both names are given
    while True:
        name1 = input_fn("Player 1 (X) name: ").strip()
        name2 = input_fn("Player 2 (O) name: ").strip()
        if presenter.on_new_game_clicked(name1, name2):
            return name1, name2


def run_console(input_fn=input, out=print):
    """
    interactive loop on stdin/stdout; returns exit code
    """
    view = ConsoleView(out)
    presenter = GamePresenter(view)
    out("--- Tic-Tac-Toe ---")
    try:
        names = _ask_names(presenter, input_fn)
        out(HELP)
        while True:
            state = presenter.controller.state
            prompt = "> " if state == IN_PROGRESS else "Game over. (r)estart, (n)ew players or (q)uit: "
            cmd = input_fn(prompt).strip().lower()
            if cmd == 'q':
                break
            elif cmd == 'r':
                presenter.on_restart_clicked()
                presenter.on_start_clicked(*names)
            elif cmd == 'n':
                names = _ask_names(presenter, input_fn)
            elif cmd.isdecimal():
                if state != IN_PROGRESS:
                    view.show_status("Game is over. Restart to play again.", "error")
                    continue
                index = int(cmd)
                before = presenter.controller.get_board_snapshot()
                presenter.on_cell_selected(index)
                if presenter.controller.get_board_snapshot() == before:
                    view.show_status(f"Cell {index} is not available.", "error")
            else:
                view.show_status(HELP, "error")
    except (EOFError, KeyboardInterrupt):
        out("")
        logger.info("console input closed")
    out("Exiting.")
    return 0
