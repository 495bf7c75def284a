"""
Game session: one board and one chat log, owned together.

This is the surface a presentation layer talks to. The board engine and
the reaction ledger stay independent; the only thing the session decides
is whether resetting the game also clears the chat.
"""

import logging
from typing import List, Optional, Tuple, Union

from game import BoardEngine, Mark, Outcome
from chat import Reaction, ReactionLedger, MessageSnapshot

logger = logging.getLogger(__name__)


class GameSession:
    """
    Commands and queries for one in-memory session.

    Args:
        clear_chat_on_reset: If True, reset_game() also empties the chat
            log. Off by default: the chat survives "Play Again".
        engine: Board engine to use (a fresh one by default).
        ledger: Reaction ledger to use (a fresh one by default).
    """

    def __init__(
        self,
        clear_chat_on_reset: bool = False,
        engine: Optional[BoardEngine] = None,
        ledger: Optional[ReactionLedger] = None
    ):
        self.clear_chat_on_reset = clear_chat_on_reset
        self.engine = engine if engine is not None else BoardEngine()
        self.ledger = ledger if ledger is not None else ReactionLedger()

    # ==================== COMMANDS ====================

    def apply_move(self, index: int) -> bool:
        return self.engine.apply_move(index)

    def reset_game(self):
        """Reset the board, and the chat too if the session is set up that way."""
        self.engine.reset()
        if self.clear_chat_on_reset:
            self.ledger.clear()
        logger.info("Game reset (chat %s)", "cleared" if self.clear_chat_on_reset else "kept")

    def submit_message(self, text: str) -> Optional[int]:
        return self.ledger.submit_message(text)

    def add_reaction(self, message_index: int, symbol: Union[Reaction, str]) -> bool:
        return self.ledger.add_reaction(message_index, symbol)

    def add_highlight(self, message_index: int) -> bool:
        return self.ledger.add_highlight(message_index)

    # ==================== QUERIES ====================

    def get_board(self) -> Tuple[Optional[Mark], ...]:
        return self.engine.get_board()

    def get_turn(self) -> Mark:
        return self.engine.get_turn()

    def get_outcome(self) -> Outcome:
        return self.engine.get_outcome()

    def is_cell_in_winning_line(self, index: int) -> bool:
        return self.engine.is_cell_in_winning_line(index)

    def list_messages(self) -> List[MessageSnapshot]:
        return self.ledger.list_messages()

    def status_text(self) -> str:
        return self.engine.status_text()

    def reset_label(self) -> str:
        return self.engine.reset_label()
