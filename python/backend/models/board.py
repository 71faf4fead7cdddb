"""Board model for the sliding-tile solver."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Iterable

from backend.models.errors import IllegalMoveError, InvalidBoardError

if TYPE_CHECKING:
    from backend.models.move import Move


class Direction(StrEnum):
    """Direction the *tile* travels when it slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def check_size(size: int) -> None:
    if size < 2:
        raise InvalidBoardError(f"Grid size must be at least 2, got {size}.")


@dataclass(frozen=True)
class Board:
    """Immutable N×N board stored as a flat, row-major tuple.

    The value ``size * size - 1`` is the blank.  The board is solved
    when every index holds its own value, so the blank's goal is the
    bottom-right corner.
    """

    size: int
    tiles: tuple[int, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Iterable[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Raises :class:`InvalidBoardError` unless *flat* is a permutation
        of ``0 .. size*size - 1``.

        Example::

            Board.from_flat(3, [0, 1, 2, 3, 4, 5, 6, 8, 7])
        """
        board = cls(size=size, tiles=tuple(flat))
        board.validate()
        return board

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal board (identity permutation, blank bottom-right)."""
        check_size(size)
        return cls(size=size, tiles=tuple(range(size * size)))

    def validate(self) -> None:
        """Raise :class:`InvalidBoardError` unless the tiles form a valid grid.

        Boards built through the constructor are not checked; callers
        handing such a board to the solver get the same errors as
        :meth:`from_flat`.
        """
        size = self.size
        check_size(size)
        if len(self.tiles) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(self.tiles)}."
            )

        counts = Counter(self.tiles)
        duplicated = sorted(v for v, n in counts.items() if n > 1)
        missing = [v for v in range(size * size) if v not in counts]
        if duplicated or missing:
            raise InvalidBoardError(
                f"Board is not a permutation of 0..{size * size - 1} "
                f"(duplicated: {duplicated}, missing: {missing})."
            )

    # -- queries --------------------------------------------------------------

    @property
    def blank(self) -> int:
        return self.size * self.size - 1

    @property
    def blank_index(self) -> int:
        return self.tiles.index(self.blank)

    @property
    def key(self) -> bytes:
        """Canonical key: equal boards map to equal keys and vice versa."""
        if len(self.tiles) <= 256:
            return bytes(self.tiles)
        return b"".join(v.to_bytes(2, "big") for v in self.tiles)

    def position(self, index: int) -> tuple[int, int]:
        return divmod(index, self.size)

    def index(self, row: int, col: int) -> int:
        return row * self.size + col

    def rows(self) -> list[list[int]]:
        """Return a 2D copy of the tiles, one list per row."""
        n = self.size
        return [list(self.tiles[r * n : (r + 1) * n]) for r in range(n)]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return all(v == i for i, v in enumerate(self.tiles))

    def is_tile_correct(self, index: int) -> bool:
        return self.tiles[index] == index

    def is_adjacent(self, a: int, b: int) -> bool:
        ar, ac = self.position(a)
        br, bc = self.position(b)
        return abs(ar - br) + abs(ac - bc) == 1

    # -- transitions ----------------------------------------------------------

    def is_legal(self, move: Move) -> bool:
        """True if *move* slides its piece from a neighbour into the blank."""
        nn = len(self.tiles)
        if not (0 <= move.from_index < nn and 0 <= move.to_index < nn):
            return False
        return (
            self.tiles[move.to_index] == self.blank
            and self.tiles[move.from_index] == move.piece
            and self.is_adjacent(move.from_index, move.to_index)
        )

    def apply(self, move: Move) -> Board:
        """Return the board after *move*.  The receiver is left untouched."""
        if not self.is_legal(move):
            raise IllegalMoveError(
                f"Cannot move piece {move.piece} from {move.from_index} "
                f"to {move.to_index} on {list(self.tiles)}."
            )
        tiles = list(self.tiles)
        tiles[move.to_index] = move.piece
        tiles[move.from_index] = self.blank
        return Board(size=self.size, tiles=tuple(tiles))
