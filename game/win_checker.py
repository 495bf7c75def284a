"""
Win checker for Tic Tac Toe.
Derives the game outcome (in progress, win or draw) from a board.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

import numpy as np

from .config import BoardConfig
from .game_state import Mark


# All winning lines as flat cell indices. The order matters: when asked
# which line won, the first uniform line in this order is reported.
WINNING_LINES = np.array([
    # Rows, top to bottom
    [0, 1, 2],
    [3, 4, 5],
    [6, 7, 8],
    # Columns, left to right
    [0, 3, 6],
    [1, 4, 7],
    [2, 5, 8],
    # Diagonals
    [0, 4, 8],
    [2, 4, 6],
], dtype=np.intp)
WINNING_LINES.setflags(write=False)


class OutcomeStatus(Enum):
    """Where the game stands."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.

    mark and line are only set for a win.
    """
    status: OutcomeStatus
    mark: Optional[Mark] = None
    line: Optional[Tuple[int, int, int]] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(OutcomeStatus.IN_PROGRESS)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(OutcomeStatus.DRAW)

    @classmethod
    def win(cls, mark: Mark, line: Tuple[int, int, int]) -> "Outcome":
        return cls(OutcomeStatus.WIN, mark, line)

    @property
    def is_over(self) -> bool:
        return self.status is not OutcomeStatus.IN_PROGRESS

    @property
    def is_win(self) -> bool:
        return self.status is OutcomeStatus.WIN

    @property
    def is_draw(self) -> bool:
        return self.status is OutcomeStatus.DRAW


def compute_outcome(board) -> Outcome:
    """
    Evaluate a board.

    A line wins when its three cells are filled with the same mark. The
    first such line in WINNING_LINES order is reported. With no winning
    line, a full board is a draw and anything else is still in progress.

    Args:
        board: Sequence of 9 cell codes (0 = empty, else a Mark value).

    Returns:
        The Outcome for this board.
    """
    board = np.asarray(board)
    if board.shape != (BoardConfig.CELL_COUNT,):
        raise ValueError(f"Expected {BoardConfig.CELL_COUNT} cells, got shape {board.shape}")

    lines = board[WINNING_LINES]  # (8, 3)
    uniform = (lines[:, 0] != BoardConfig.EMPTY) & np.all(lines == lines[:, :1], axis=1)

    if uniform.any():
        # argmax returns the first True, which keeps the scan order
        first = int(np.argmax(uniform))
        line = tuple(int(i) for i in WINNING_LINES[first])
        return Outcome.win(Mark(int(lines[first, 0])), line)

    if np.all(board != BoardConfig.EMPTY):
        return Outcome.draw()

    return Outcome.in_progress()
