import logging
import os

# -----------------------------------------------------------------------------
# WINDOW
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic-Tac-Toe"
MIN_BOARD_SIZE = 150                  # px, board widget stays square

# -----------------------------------------------------------------------------
# BOARD COLORS
# -----------------------------------------------------------------------------

BOARD_BACKGROUND = "#333"
GRID_LINE_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
WIN_LINE_COLOR = "#7CFC00"
MARK_PEN_WIDTH = 4

# -----------------------------------------------------------------------------
# STATUS LABEL STYLES (keyed by message kind)
# -----------------------------------------------------------------------------

STATUS_STYLES = {
    "info": "color: #eee;",
    "turn": "color: #8acaff; font-weight: bold;",
    "success": "color: lime; font-weight: bold;",
    "error": "color: #ff8a8a; font-weight: bold;",
}

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

LOG_FORMAT = "[%(levelname)s] %(message)s"
LOG_LEVEL_ENV = "TTT_LOG_LEVEL"


def log_level(verbose=False):
    """
    --verbose wins, then TTT_LOG_LEVEL, then INFO
    unknown level names fall back to INFO
    """
    if verbose:
        return logging.DEBUG
    name = os.getenv(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.INFO
    return level if isinstance(level, int) else logging.INFO
