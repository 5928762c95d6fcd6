"""chessling - a chess rules engine.

The engine owns the board, answers move-legality and check queries, and
commits moves. Rendering, input handling and game-over labeling belong to
the caller.
"""

__version__ = "0.1.0"
