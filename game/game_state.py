"""
Game state for Tic Tac Toe.
Tracks the board and whose turn it is.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass, field

import numpy as np

from .config import BoardConfig


class Mark(Enum):
    """The two marks a cell can hold. Player 1 plays X and always starts."""
    X = 1
    O = 2

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        return Mark.O if self == Mark.X else Mark.X

    @property
    def player_label(self) -> str:
        """Player name for this mark, e.g. "Player 1"."""
        return BoardConfig.PLAYER_LABELS[self.name]


def _empty_board() -> np.ndarray:
    return np.full(BoardConfig.CELL_COUNT, BoardConfig.EMPTY, dtype=np.int8)


@dataclass
class GameState:
    """
    The board and current turn.

    Tracks:
    - The 9 cells as a flat int8 vector (0 = empty, otherwise a Mark value)
    - The mark that moves next

    The game outcome is deliberately NOT stored here; it is always
    derived from the board (see win_checker.compute_outcome).
    """

    # Flat board, index = row * 3 + col
    board: np.ndarray = field(default_factory=_empty_board)

    # Mark that places next
    current_mark: Mark = Mark.X

    def cell(self, index: int) -> Optional[Mark]:
        """
        Get the mark in a cell.

        Args:
            index: Cell index (0-8).

        Returns:
            The Mark in the cell, or None if it is empty.
        """
        code = int(self.board[index])
        return None if code == BoardConfig.EMPTY else Mark(code)

    def cells(self) -> Tuple[Optional[Mark], ...]:
        """All nine cells in row-major order."""
        return tuple(self.cell(i) for i in range(BoardConfig.CELL_COUNT))

    def is_empty(self, index: int) -> bool:
        return int(self.board[index]) == BoardConfig.EMPTY

    def place(self, index: int):
        """
        Put the current mark on a cell and pass the turn.

        No rule checks happen here; callers validate first.

        Args:
            index: Cell index (0-8).
        """
        self.board[index] = self.current_mark.value
        self.current_mark = self.current_mark.opposite()

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of cell indices in row-major order.
        """
        return [int(i) for i in np.flatnonzero(self.board == BoardConfig.EMPTY)]

    def mark_counts(self) -> Dict[Mark, int]:
        """How many cells each mark occupies."""
        return {mark: int(np.count_nonzero(self.board == mark.value)) for mark in Mark}
