import argparse
import logging
import sys

from . import config

# -----------------------------------------------------------------------------
# DARK PALETTE (role name -> color; disabled roles listed separately)
# -----------------------------------------------------------------------------

PALETTE = {
    "Window": (53, 53, 53),
    "WindowText": "white",
    "Base": (35, 35, 35),
    "AlternateBase": (53, 53, 53),
    "ToolTipBase": "white",
    "ToolTipText": "black",
    "Text": "white",
    "Button": (66, 66, 66),
    "ButtonText": "white",
    "BrightText": "red",
    "Link": (42, 130, 218),
    "Highlight": (42, 130, 218),
    "HighlightedText": "white",
    "PlaceholderText": (160, 160, 160),
}
DISABLED_ROLES = ("Text", "ButtonText", "WindowText")
DISABLED_COLOR = (127, 127, 127)


def apply_default_palette(app):
    """
    Apply the dark Fusion palette defined above.
    """
    from PySide6.QtGui import QPalette, QColor

    def color(value):
        return QColor(*value) if isinstance(value, tuple) else QColor(value)

    palette = QPalette()
    for role, value in PALETTE.items():
        palette.setColor(getattr(QPalette.ColorRole, role), color(value))
    for role in DISABLED_ROLES:
        palette.setColor(QPalette.ColorGroup.Disabled, getattr(QPalette.ColorRole, role),
                         color(DISABLED_COLOR))
    app.setPalette(palette)


def build_parser():
    p = argparse.ArgumentParser(prog="tictactoe", description="Two-player tic-tac-toe")
    p.add_argument("--console", action="store_true", help="Play in the terminal instead of a window")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    p.add_argument("--player1", default="", help="Prefill player 1 (X) name in the window")
    p.add_argument("--player2", default="", help="Prefill player 2 (O) name in the window")
    return p


def run_gui(ns):
    from PySide6.QtWidgets import QApplication
    from .ui.main_window import TicTacToeWindow

    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = TicTacToeWindow(ns.player1, ns.player2)
    window.show()
    return app.exec()

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    ns = build_parser().parse_args(argv)
    logging.basicConfig(level=config.log_level(ns.verbose), format=config.LOG_FORMAT)
    if ns.console:
        from .console import run_console
        return run_console()
    return run_gui(ns)

