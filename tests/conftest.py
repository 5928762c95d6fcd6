"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from chessling.core.board import Board
from chessling.core.enums import PieceColor, PieceKind
from chessling.core.piece import Piece
from chessling.core.types import Coordinate

_LETTERS: dict[str, tuple[PieceColor, PieceKind]] = {
    "P": (PieceColor.WHITE, PieceKind.PAWN),
    "N": (PieceColor.WHITE, PieceKind.KNIGHT),
    "B": (PieceColor.WHITE, PieceKind.BISHOP),
    "R": (PieceColor.WHITE, PieceKind.ROOK),
    "Q": (PieceColor.WHITE, PieceKind.QUEEN),
    "K": (PieceColor.WHITE, PieceKind.KING),
    "p": (PieceColor.BLACK, PieceKind.PAWN),
    "n": (PieceColor.BLACK, PieceKind.KNIGHT),
    "b": (PieceColor.BLACK, PieceKind.BISHOP),
    "r": (PieceColor.BLACK, PieceKind.ROOK),
    "q": (PieceColor.BLACK, PieceKind.QUEEN),
    "k": (PieceColor.BLACK, PieceKind.KING),
}

MakeBoard = Callable[..., Board]
Play = Callable[[Board, Coordinate, Coordinate], None]


@pytest.fixture
def board() -> Board:
    """Fresh standard starting position."""
    return Board.initial()


@pytest.fixture
def make_board() -> MakeBoard:
    """Build a position from ``{"e1": "K", "d8": "k", ...}``.

    Squares listed in *moved* get ``moved=True``.
    """

    def _make(
        layout: dict[str, str],
        *,
        moved: Iterable[str] = (),
        on_move: PieceColor = PieceColor.WHITE,
        en_passant_file: int | None = None,
    ) -> Board:
        moved_squares = {Coordinate.parse(name) for name in moved}
        b = Board(on_move=on_move, en_passant_file=en_passant_file)
        for name, letter in layout.items():
            sq = Coordinate.parse(name)
            color, kind = _LETTERS[letter]
            b.place(Piece(kind, color, sq, moved=sq in moved_squares))
        return b

    return _make


@pytest.fixture
def play() -> Play:
    """Commit a move after checking it is offered, then pass the turn."""

    def _play(b: Board, from_sq: Coordinate, to_sq: Coordinate) -> None:
        piece = b[from_sq]
        assert piece is not None, f"No piece on {from_sq}"
        assert piece.color == b.on_move, f"{piece.name} is not on move"
        assert to_sq in b.get_valid_moves(piece), f"{from_sq}{to_sq} not legal"
        b.move_piece(from_sq, to_sq)
        b.flip_on_move()

    return _play
