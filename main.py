import sys

from tictactoe.app import main

# -----------------------------------------------------------------------------
# ENTRY POINT (installed script: tictactoe = tictactoe.app:main)
# -----------------------------------------------------------------------------

if __name__ == '__main__':
    sys.exit(main())
