"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class PieceColor(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> PieceColor:
        return PieceColor(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank delta of a pawn step: +1 for white, -1 for black."""
        return 1 if self == PieceColor.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(Enum):
    """Chess piece kinds."""

    PAWN = "pawn"
    ROOK = "rook"
    KNIGHT = "knight"
    BISHOP = "bishop"
    KING = "king"
    QUEEN = "queen"

    def __str__(self) -> str:
        return self.value
