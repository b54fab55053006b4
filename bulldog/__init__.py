"""
Bulldog - turn-based push-your-luck dice game.

Players take turns rolling a single die; rolling the bust face ends the
turn with nothing. First player to reach the target score wins.
"""

__version__ = "0.1.0"
