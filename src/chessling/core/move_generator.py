"""Legal move generation + attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessling.core.enums import PieceColor, PieceKind
from chessling.core.piece import Piece
from chessling.core.types import Coordinate

if TYPE_CHECKING:
    from chessling.core.board import Board


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 2),
    (2, 1),
    (-1, 2),
    (2, -1),
    (1, -2),
    (-2, 1),
    (-1, -2),
    (-2, -1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (-1, 1), (1, -1), (-1, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

_SLIDER_DIRS: dict[PieceKind, tuple[tuple[int, int], ...]] = {
    PieceKind.ROOK: ROOK_DIRS,
    PieceKind.BISHOP: BISHOP_DIRS,
    PieceKind.QUEEN: QUEEN_DIRS,
}

# Rank a pawn must stand on to take en passant.
_EN_PASSANT_RANK: dict[PieceColor, int] = {
    PieceColor.WHITE: 4,
    PieceColor.BLACK: 3,
}


class MoveGenerator:
    """Answers attack, check and legality queries for a :class:`Board`.

    Legality is decided by simulation: every candidate destination is played
    on a copy of the board and rejected if the mover's king ends up attacked.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def looking_at(self, piece: Piece) -> list[Coordinate]:
        """Squares *piece* attacks, ignoring self-check and pawn pushes."""
        kind = piece.kind
        if kind == PieceKind.KING:
            return self._step_targets(piece, KING_OFFSETS)
        if kind == PieceKind.KNIGHT:
            return self._step_targets(piece, KNIGHT_OFFSETS)
        if kind in _SLIDER_DIRS:
            return self._ray_targets(piece, _SLIDER_DIRS[kind])
        if kind == PieceKind.PAWN:
            return self._pawn_captures(piece)
        return []

    def is_checked(self, piece: Piece) -> bool:
        """Is the square *piece* stands on attacked by the other color?"""
        for attacker in self._board.pieces.values():
            if attacker.color == piece.color:
                continue
            if piece.square in self.looking_at(attacker):
                return True
        return False

    def valid_moves(self, piece: Piece) -> list[Coordinate]:
        """All legal destinations for *piece* in the current position."""
        candidates = self.looking_at(piece)
        if piece.kind == PieceKind.PAWN:
            candidates.extend(self._pawn_pushes(piece))

        moves = [sq for sq in candidates if self.leaves_king_safe(piece, sq)]

        if piece.kind == PieceKind.KING:
            moves.extend(self._castling_moves(piece, moves))
        elif piece.kind == PieceKind.PAWN:
            # Not passed through leaves_king_safe.
            moves.extend(self._en_passant_moves(piece))
        return moves

    def has_moves(self, color: PieceColor) -> bool:
        """Does *color* have at least one legal move?"""
        for piece in self._board.pieces.values():
            if piece.color == color and self.valid_moves(piece):
                return True
        return False

    def leaves_king_safe(self, piece: Piece, target: Coordinate) -> bool:
        """Would moving *piece* to *target* keep its own king out of check?

        The move is played on a copy of the board: the piece is lifted from
        its square and a copy is dropped on *target*, replacing any occupant.
        """
        simulated = self._board.copy()
        simulated.remove(piece.square)
        simulated.place(piece.placed_at(target))
        king = simulated.king(piece.color)
        return not MoveGenerator(simulated).is_checked(king)

    # -- Piece-specific generators (private) -------------------------------

    def _step_targets(
        self, piece: Piece, offsets: tuple[tuple[int, int], ...]
    ) -> list[Coordinate]:
        board = self._board
        targets: list[Coordinate] = []
        for df, dr in offsets:
            to_sq = piece.square.offset(df, dr)
            if not to_sq.is_on_board():
                continue
            occupant = board[to_sq]
            if occupant is not None and occupant.color == piece.color:
                continue
            targets.append(to_sq)
        return targets

    def _ray_targets(
        self, piece: Piece, directions: tuple[tuple[int, int], ...]
    ) -> list[Coordinate]:
        board = self._board
        targets: list[Coordinate] = []
        for df, dr in directions:
            to_sq = piece.square.offset(df, dr)
            while to_sq.is_on_board():
                occupant = board[to_sq]
                if occupant is not None:
                    if occupant.color != piece.color:
                        targets.append(to_sq)
                    break
                targets.append(to_sq)
                to_sq = to_sq.offset(df, dr)
        return targets

    def _pawn_captures(self, piece: Piece) -> list[Coordinate]:
        board = self._board
        forward = piece.color.forward
        targets: list[Coordinate] = []
        for df in (1, -1):
            to_sq = piece.square.offset(df, forward)
            if not to_sq.is_on_board():
                continue
            occupant = board[to_sq]
            if occupant is not None and occupant.color != piece.color:
                targets.append(to_sq)
        return targets

    def _pawn_pushes(self, piece: Piece) -> list[Coordinate]:
        board = self._board
        forward = piece.color.forward
        one_step = piece.square.offset(0, forward)
        if not one_step.is_on_board() or board[one_step] is not None:
            return []
        pushes = [one_step]
        two_step = one_step.offset(0, forward)
        if not piece.moved and two_step.is_on_board() and board[two_step] is None:
            pushes.append(two_step)
        return pushes

    def _castling_moves(
        self, king: Piece, king_moves: list[Coordinate]
    ) -> list[Coordinate]:
        if king.moved or self.is_checked(king):
            return []

        board = self._board
        moves: list[Coordinate] = []
        for direction in (-1, 1):
            if king.square.offset(direction, 0) not in king_moves:
                continue
            landing = king.square.offset(2 * direction, 0)
            if board[landing] is not None:
                continue
            if self.is_checked(Piece(PieceKind.KING, king.color, landing)):
                continue

            # Only the first occupied square past the landing square matters.
            for distance in range(3, 8):
                beyond = king.square.offset(distance * direction, 0)
                if not beyond.is_on_board():
                    break
                occupant = board[beyond]
                if occupant is None:
                    continue
                if (
                    occupant.kind == PieceKind.ROOK
                    and occupant.color == king.color
                    and not occupant.moved
                ):
                    moves.append(landing)
                break
        return moves

    def _en_passant_moves(self, pawn: Piece) -> list[Coordinate]:
        ep_file = self._board.en_passant_file
        if ep_file is None or pawn.square.rank != _EN_PASSANT_RANK[pawn.color]:
            return []
        return [
            pawn.square.offset(df, pawn.color.forward)
            for df in (-1, 1)
            if pawn.square.file + df == ep_file
        ]
