"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessling.core.enums import PieceColor, PieceKind
from chessling.core.types import Coordinate

_LETTERS: dict[PieceKind, str] = {
    PieceKind.PAWN: "p",
    PieceKind.KNIGHT: "n",
    PieceKind.BISHOP: "b",
    PieceKind.ROOK: "r",
    PieceKind.QUEEN: "q",
    PieceKind.KING: "k",
}

_UNICODE: dict[tuple[PieceColor, PieceKind], str] = {
    (PieceColor.WHITE, PieceKind.PAWN): "♙",
    (PieceColor.WHITE, PieceKind.KNIGHT): "♘",
    (PieceColor.WHITE, PieceKind.BISHOP): "♗",
    (PieceColor.WHITE, PieceKind.ROOK): "♖",
    (PieceColor.WHITE, PieceKind.QUEEN): "♕",
    (PieceColor.WHITE, PieceKind.KING): "♔",
    (PieceColor.BLACK, PieceKind.PAWN): "♟",
    (PieceColor.BLACK, PieceKind.KNIGHT): "♞",
    (PieceColor.BLACK, PieceKind.BISHOP): "♝",
    (PieceColor.BLACK, PieceKind.ROOK): "♜",
    (PieceColor.BLACK, PieceKind.QUEEN): "♛",
    (PieceColor.BLACK, PieceKind.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object for a piece standing on a square.

    ``moved`` records whether this particular piece has ever moved; it gates
    castling and the pawn double step.
    """

    kind: PieceKind
    color: PieceColor
    square: Coordinate
    moved: bool = False

    def moved_to(self, square: Coordinate) -> Piece:
        """Copy of this piece after it moved to *square*."""
        return replace(self, square=square, moved=True)

    def placed_at(self, square: Coordinate) -> Piece:
        """Copy of this piece standing on *square*, ``moved`` untouched."""
        return replace(self, square=square)

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        """Identifier such as ``'white_knight'``."""
        return f"{self.color}_{self.kind}"

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.kind)]

    def __str__(self) -> str:
        """FEN letter (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.kind]
        return letter.upper() if self.color == PieceColor.WHITE else letter
