"""Seeded random games checking board invariants after every committed move."""

import random

import pytest

from chessling.core.board import PROMOTION_KINDS, Board
from chessling.core.enums import PieceColor, PieceKind
from chessling.core.types import Coordinate


def _is_en_passant(board: Board, from_sq: Coordinate, to_sq: Coordinate) -> bool:
    piece = board[from_sq]
    return (
        piece is not None
        and piece.kind == PieceKind.PAWN
        and from_sq.file != to_sq.file
        and board[to_sq] is None
    )


def _safe_moves(board: Board) -> list[tuple[Coordinate, Coordinate]]:
    """Legal moves of the side on move, minus en-passant captures into check."""
    color = board.on_move
    moves: list[tuple[Coordinate, Coordinate]] = []
    for piece in board.pieces_of(color):
        for target in board.get_valid_moves(piece):
            trial = board.copy()
            trial.move_piece(piece.square, target)
            if trial.is_checked(trial.king(color)):
                assert _is_en_passant(board, piece.square, target), (
                    f"{piece.name} {piece.square}{target} leaves the king in check"
                )
                continue
            moves.append((piece.square, target))
    return moves


def _assert_invariants(board: Board) -> None:
    for sq, piece in board.pieces.items():
        assert piece.square == sq
        assert sq.is_on_board()
    for color in PieceColor:
        kings = [p for p in board.pieces_of(color) if p.kind == PieceKind.KING]
        assert len(kings) == 1
    assert len(board.pieces) <= 32


def _random_game(seed: int, plies: int) -> Board:
    rng = random.Random(seed)
    board = Board.initial()
    for _ in range(plies):
        moves = _safe_moves(board)
        if not moves:
            break
        from_sq, to_sq = rng.choice(moves)
        board.move_piece(from_sq, to_sq)
        pawn = board.take_promotion()
        if pawn is not None:
            board.promote(pawn.square, pawn.color, rng.choice(PROMOTION_KINDS))
        board.flip_on_move()
        _assert_invariants(board)
    return board


class TestRandomPlayout:
    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_short_games(self, seed: int) -> None:
        board = _random_game(seed, plies=40)
        if board.turn_number < 40:
            assert _safe_moves(board) == []

    def test_deterministic(self) -> None:
        assert _random_game(7, plies=20) == _random_game(7, plies=20)

    @pytest.mark.slow
    @pytest.mark.parametrize("seed", range(10, 15))
    def test_long_games(self, seed: int) -> None:
        board = _random_game(seed, plies=300)
        if board.turn_number < 300:
            assert _safe_moves(board) == []
