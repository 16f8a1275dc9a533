"""
Arcade Pong - two-player Pong with pause, restart and a win condition
"""

__version__ = "0.1.0"
