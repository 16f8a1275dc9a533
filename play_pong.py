#!/usr/bin/env python3
"""
Main script to launch Arcade Pong with PyGame graphical interface
"""

import sys

from arcade_pong.gui.game_app import main

if __name__ == "__main__":
    print("=== ARCADE PONG ===")
    print()
    print("CONTROLS:")
    print("  Player 1 (Left): W/S (QWERTY) or Z/S (AZERTY)")
    print("  Player 2 (Right): Up/Down arrows")
    print("  P: Pause")
    print("  R: Restart")
    print("  ESC: Quit")
    print()

    sys.exit(main())
