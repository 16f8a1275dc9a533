import sys

from arcade_pong.gui.game_app import main

if __name__ == "__main__":
    sys.exit(main())
