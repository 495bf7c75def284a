"""
Board engine for Tic Tac Toe.

Owns the board and the turn, applies moves and keeps the outcome in
step with the board. All commands are synchronous; a lock serializes
them when more than one thread drives the same engine.
"""

import logging
import threading
from typing import Dict, List, Optional, Tuple

from .config import BoardConfig
from .game_state import GameState, Mark
from .move_validator import MoveValidator, ValidationResult, check_cell_index
from .win_checker import Outcome, compute_outcome

logger = logging.getLogger(__name__)


class BoardEngine:
    """
    Two-player Tic Tac Toe state machine.

    Game flow:
    1. X (Player 1) moves first
    2. Each accepted move places the current mark and passes the turn
    3. After every move the outcome is recomputed from the board
    4. Once someone wins or the board fills up, moves are ignored until reset
    """

    def __init__(self):
        self._lock = threading.Lock()
        self.validator = MoveValidator()
        self._state = GameState()
        self._outcome = compute_outcome(self._state.board)
        self.last_validation: Optional[ValidationResult] = None

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def apply_move(self, index: int) -> bool:
        """
        Place the current player's mark on a cell.

        Moves on an occupied cell or after the game ended are ignored.

        Args:
            index: Cell index (0-8), row-major.

        Returns:
            True if the move was accepted, False if it was ignored.

        Raises:
            ValueError: If index is outside the board.
        """
        with self._lock:
            result = self.validator.validate_move(self._state, self._outcome, index)
            self.last_validation = result
            if not result.is_valid:
                logger.debug("Ignored move at %s: %s", index, result.error_message)
                return False

            index = int(index)
            mark = self._state.current_mark
            self._state.place(index)
            self._outcome = compute_outcome(self._state.board)

            row, col = BoardConfig.index_to_cell(index)
            logger.debug("%s placed at %d (row %d, col %d)", mark.name, index, row, col)

            if self._outcome.is_win:
                logger.info("%s wins on line %s", self._outcome.mark.name, self._outcome.line)
            elif self._outcome.is_draw:
                logger.info("Game drawn")
            return True

    def reset(self):
        """Start over with an empty board and X to move."""
        with self._lock:
            self._state = GameState()
            self._outcome = compute_outcome(self._state.board)
            self.last_validation = None
        logger.debug("Board reset")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_board(self) -> Tuple[Optional[Mark], ...]:
        """Nine cells in row-major order, None for empty."""
        with self._lock:
            return self._state.cells()

    def get_turn(self) -> Mark:
        with self._lock:
            return self._state.current_mark

    def get_outcome(self) -> Outcome:
        with self._lock:
            return self._outcome

    def is_cell_in_winning_line(self, index: int) -> bool:
        """
        Check whether a cell belongs to the winning line.

        Returns:
            True only when the game is won and the cell is on that line.
        """
        index = check_cell_index(index)
        outcome = self.get_outcome()
        return outcome.is_win and index in outcome.line

    def is_cell_playable(self, index: int) -> bool:
        """True if a move on this cell would currently be accepted."""
        index = check_cell_index(index)
        with self._lock:
            return not self._outcome.is_over and self._state.is_empty(index)

    def available_moves(self) -> List[int]:
        with self._lock:
            return self.validator.get_valid_moves(self._state, self._outcome)

    def mark_counts(self) -> Dict[Mark, int]:
        with self._lock:
            return self._state.mark_counts()

    def status_text(self) -> str:
        """
        Human-readable game status.

        Returns:
            "Next: Player 1 (X)", "Player 2 (O) wins!" or "It's a draw!".
        """
        with self._lock:
            outcome = self._outcome
            turn = self._state.current_mark

        if outcome.is_win:
            return BoardConfig.WIN_TEMPLATE.format(
                player=outcome.mark.player_label, mark=outcome.mark.name
            )
        if outcome.is_draw:
            return BoardConfig.DRAW_TEXT
        return BoardConfig.NEXT_TEMPLATE.format(player=turn.player_label, mark=turn.name)

    def reset_label(self) -> str:
        """Label for the reset control: "Play Again" once the game is over."""
        if self.get_outcome().is_over:
            return BoardConfig.PLAY_AGAIN_LABEL
        return BoardConfig.RESET_LABEL
