"""Board - the authoritative game state and every mutation of it."""

from __future__ import annotations

import logging

from chessling.core.enums import PieceColor, PieceKind
from chessling.core.move_generator import MoveGenerator
from chessling.core.piece import Piece
from chessling.core.types import Coordinate

_LOGGER = logging.getLogger(__name__)

BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.KING,
    PieceKind.QUEEN,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)

PROMOTION_KINDS: tuple[PieceKind, ...] = (
    PieceKind.QUEEN,
    PieceKind.ROOK,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
)


class Board:
    """Piece placement, side to move and en-passant eligibility.

    ``pieces`` maps each occupied square to the piece standing on it, and
    every piece's ``square`` equals its key. Use :meth:`place` and
    :meth:`remove` to keep it that way.
    """

    __slots__ = ("pieces", "on_move", "turn_number", "en_passant_file")

    def __init__(
        self,
        pieces: dict[Coordinate, Piece] | None = None,
        on_move: PieceColor = PieceColor.WHITE,
        turn_number: int = 0,
        en_passant_file: int | None = None,
    ) -> None:
        self.pieces: dict[Coordinate, Piece] = pieces if pieces is not None else {}
        self.on_move = on_move
        self.turn_number = turn_number
        # File of the pawn that double-stepped on the last move, if any.
        self.en_passant_file = en_passant_file

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, white to move."""
        b = cls()
        for color, back, front in (
            (PieceColor.WHITE, 0, 1),
            (PieceColor.BLACK, 7, 6),
        ):
            for f, kind in enumerate(BACK_RANK):
                b.place(Piece(kind, color, Coordinate(f, back)))
            for f in range(8):
                b.place(Piece(PieceKind.PAWN, color, Coordinate(f, front)))
        return b

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Coordinate) -> Piece | None:
        return self.pieces.get(sq)

    def place(self, piece: Piece) -> None:
        """Put *piece* on its own square, replacing any occupant."""
        if not piece.square.is_on_board():
            raise ValueError(f"Square off the board: {piece.square}")
        self.pieces[piece.square] = piece

    def remove(self, sq: Coordinate) -> Piece | None:
        """Remove and return the piece on *sq* (``None`` if empty)."""
        return self.pieces.pop(sq, None)

    def pieces_of(self, color: PieceColor) -> list[Piece]:
        return [p for p in self.pieces.values() if p.color == color]

    def king(self, color: PieceColor) -> Piece:
        """Return the king of *color*."""
        for piece in self.pieces.values():
            if piece.kind == PieceKind.KING and piece.color == color:
                return piece
        raise ValueError(f"No {color.name} king on board")

    # -- Queries --------------------------------------------------------------

    def looking_at(self, piece: Piece) -> list[Coordinate]:
        """Squares *piece* attacks; see :meth:`MoveGenerator.looking_at`."""
        return MoveGenerator(self).looking_at(piece)

    def is_checked(self, piece: Piece) -> bool:
        return MoveGenerator(self).is_checked(piece)

    def get_valid_moves(self, piece: Piece) -> list[Coordinate]:
        """Legal destinations for *piece*, castling and en passant included."""
        return MoveGenerator(self).valid_moves(piece)

    def has_moves(self, color: PieceColor) -> bool:
        """Whether *color* has any legal move.

        Checkmate is ``is_checked(king) and not has_moves(color)``; stalemate
        is the same without the check.
        """
        return MoveGenerator(self).has_moves(color)

    # -- Mutation -------------------------------------------------------------

    def move_piece(self, from_sq: Coordinate, to_sq: Coordinate) -> None:
        """Commit a move taken from :meth:`get_valid_moves`.

        Legality is not re-checked. Castling also relocates the rook, an
        en-passant capture removes the passed pawn, and a pawn double step
        opens en passant for exactly one reply.
        """
        piece = self.pieces[from_sq].moved_to(to_sq)
        capture = to_sq in self.pieces
        self.pieces[to_sq] = piece
        del self.pieces[from_sq]

        distance = to_sq.file - from_sq.file
        if piece.kind == PieceKind.KING and abs(distance) > 1:
            direction = 1 if distance > 0 else -1
            rook_to = from_sq.offset(direction, 0)
            rook_from = to_sq.offset(direction, 0)
            while rook_from.is_on_board():
                if rook_from in self.pieces:
                    _LOGGER.debug("Castling: rook %s -> %s", rook_from, rook_to)
                    self.move_piece(rook_from, rook_to)
                    break
                rook_from = rook_from.offset(direction, 0)

        if piece.kind == PieceKind.PAWN and not capture and distance != 0:
            passed = Coordinate(to_sq.file, from_sq.rank)
            _LOGGER.debug("En passant: %s takes on %s", piece.name, passed)
            self.remove(passed)

        self.en_passant_file = None
        if piece.kind == PieceKind.PAWN and abs(to_sq.rank - from_sq.rank) > 1:
            self.en_passant_file = to_sq.file

    def flip_on_move(self) -> None:
        """Hand the move to the other side."""
        self.turn_number += 1
        self.on_move = self.on_move.opposite

    # -- Promotion ------------------------------------------------------------

    def promotion_square(self) -> Coordinate | None:
        """Square of a pawn standing on either back rank, if any."""
        for rank in (7, 0):
            for f in range(8):
                piece = self.pieces.get(Coordinate(f, rank))
                if piece is not None and piece.kind == PieceKind.PAWN:
                    return piece.square
        return None

    def take_promotion(self) -> Piece | None:
        """Remove a pawn that reached a back rank and return it.

        The caller picks the replacement and puts it back with :meth:`promote`.
        """
        sq = self.promotion_square()
        if sq is None:
            return None
        _LOGGER.debug("Promotion pending on %s", sq)
        return self.remove(sq)

    def promote(self, sq: Coordinate, color: PieceColor, kind: PieceKind) -> Piece:
        """Place the piece chosen for a promotion on *sq*."""
        if kind not in PROMOTION_KINDS:
            raise ValueError(f"Cannot promote to {kind}")
        if sq in self.pieces:
            raise ValueError(f"Square {sq} is occupied")
        piece = Piece(kind, color, sq)
        self.place(piece)
        return piece

    # -- Copying --------------------------------------------------------------

    def copy(self) -> Board:
        # Pieces are immutable, so copying the mapping copies the state.
        return Board(
            pieces=self.pieces.copy(),
            on_move=self.on_move,
            turn_number=self.turn_number,
            en_passant_file=self.en_passant_file,
        )

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.pieces == other.pieces
            and self.on_move == other.on_move
            and self.turn_number == other.turn_number
            and self.en_passant_file == other.en_passant_file
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self.pieces.get(Coordinate(file, rank))
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
