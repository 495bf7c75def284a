"""
Move validator for Tic Tac Toe.
Validates that moves follow the rules.
"""

from typing import List, Optional
from dataclasses import dataclass

import numpy as np

from rejections import Rejection
from .config import BoardConfig
from .game_state import GameState
from .win_checker import Outcome


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    rejection: Optional[Rejection] = None
    error_message: Optional[str] = None


def check_cell_index(index) -> int:
    """
    Check that a cell index is an integer in 0-8.

    An out-of-range index is a caller bug rather than a stale UI action,
    so it raises instead of being ignored.

    Raises:
        ValueError: If index is not an int or is outside the board.
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise ValueError(f"Cell index must be an int, got {index!r}")
    if not 0 <= index < BoardConfig.CELL_COUNT:
        raise ValueError(f"Cell index {index} out of range [0, {BoardConfig.CELL_COUNT})")
    return int(index)


class MoveValidator:
    """
    Validates Tic Tac Toe moves.

    Rules:
    1. Game must not be over
    2. Can only place on empty cells
    """

    def validate_move(
        self,
        game_state: GameState,
        outcome: Outcome,
        index: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            outcome: Outcome derived from the current board.
            index: Cell to place the mark on (0-8).

        Returns:
            ValidationResult with is_valid, rejection and error_message.

        Raises:
            ValueError: If index is outside the board.
        """
        index = check_cell_index(index)

        # Check if game is over
        if outcome.is_over:
            return ValidationResult(
                is_valid=False,
                rejection=Rejection.INVALID_MOVE,
                error_message="Game is already over"
            )

        # Check if cell is empty
        if not game_state.is_empty(index):
            return ValidationResult(
                is_valid=False,
                rejection=Rejection.INVALID_MOVE,
                error_message=f"Cell {index} is already occupied by {game_state.cell(index).name}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState, outcome: Outcome) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            Cell indices that would be accepted, empty once the game is over.
        """
        if outcome.is_over:
            return []
        return game_state.get_empty_cells()
