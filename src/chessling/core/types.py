"""Coordinate type and square helpers.

Files and ranks are zero-indexed: ``Coordinate(0, 0)`` is a1,
``Coordinate(7, 7)`` is h8.
"""

from __future__ import annotations

from typing import NamedTuple

_FILES = "abcdefgh"
_RANKS = "12345678"


class Coordinate(NamedTuple):
    """A ``(file, rank)`` pair.

    Arithmetic may yield off-board values while generating moves; check
    :meth:`is_on_board` before using one.
    """

    file: int
    rank: int

    def offset(self, df: int, dr: int) -> Coordinate:
        return Coordinate(self.file + df, self.rank + dr)

    def is_on_board(self) -> bool:
        return 0 <= self.file < 8 and 0 <= self.rank < 8

    @property
    def name(self) -> str:
        """Human-readable name, e.g. ``Coordinate(4, 3)`` -> ``'e4'``."""
        return _FILES[self.file] + _RANKS[self.rank]

    @classmethod
    def parse(cls, name: str) -> Coordinate:
        """Parse square name, e.g. ``'e4'`` -> ``Coordinate(4, 3)``."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(_FILES.index(name[0]), _RANKS.index(name[1]))

    def __str__(self) -> str:
        if not self.is_on_board():
            return f"({self.file}, {self.rank})"
        return self.name


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Coordinate(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Coordinate(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Coordinate(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Coordinate(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Coordinate(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Coordinate(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Coordinate(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Coordinate(f, 7) for f in range(8))
