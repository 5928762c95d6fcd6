"""Core domain layer - pure chess rules with zero external dependencies.

Quick start::

    from chessling.core import Board, E2, E4

    board = Board.initial()
    pawn = board[E2]
    if E4 in board.get_valid_moves(pawn):
        board.move_piece(E2, E4)
        board.flip_on_move()
"""

from chessling.core.board import BACK_RANK, PROMOTION_KINDS, Board
from chessling.core.enums import PieceColor, PieceKind
from chessling.core.move_generator import MoveGenerator
from chessling.core.piece import Piece
from chessling.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A2, B2, C2, D2, E2, F2, G2, H2,
    A3, B3, C3, D3, E3, F3, G3, H3,
    A4, B4, C4, D4, E4, F4, G4, H4,
    A5, B5, C5, D5, E5, F5, G5, H5,
    A6, B6, C6, D6, E6, F6, G6, H6,
    A7, B7, C7, D7, E7, F7, G7, H7,
    A8, B8, C8, D8, E8, F8, G8, H8,
    Coordinate,
)

__all__ = [
    # Enums
    "PieceColor",
    "PieceKind",
    # Types
    "Coordinate",
    # Domain objects
    "Board",
    "MoveGenerator",
    "Piece",
    # Constants
    "BACK_RANK",
    "PROMOTION_KINDS",
    # Squares
    "A1", "B1", "C1", "D1", "E1", "F1", "G1", "H1",
    "A2", "B2", "C2", "D2", "E2", "F2", "G2", "H2",
    "A3", "B3", "C3", "D3", "E3", "F3", "G3", "H3",
    "A4", "B4", "C4", "D4", "E4", "F4", "G4", "H4",
    "A5", "B5", "C5", "D5", "E5", "F5", "G5", "H5",
    "A6", "B6", "C6", "D6", "E6", "F6", "G6", "H6",
    "A7", "B7", "C7", "D7", "E7", "F7", "G7", "H7",
    "A8", "B8", "C8", "D8", "E8", "F8", "G8", "H8",
]
