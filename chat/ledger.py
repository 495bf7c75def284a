"""
Reaction ledger: the ordered message log with per-message reactions.

Messages are append-only and addressed by their position. Bad input
(blank text, unknown message, unknown symbol) is ignored and logged at
debug level, never raised.
"""

import logging
import threading
from typing import List, Optional, Union

from rejections import Rejection
from .config import ChatConfig
from .message import Message, MessageSnapshot
from .reactions import Reaction, is_highlight_symbol

logger = logging.getLogger(__name__)


class ReactionLedger:
    """
    Ordered chat log with emoji reactions and trophy highlights.

    Appends, lookups and clear() are serialized by a ledger-wide lock;
    counter increments are serialized by each message's own lock, so
    reactions on different messages never contend.
    """

    def __init__(self, max_message_length: int = ChatConfig.MAX_MESSAGE_LENGTH):
        if max_message_length < 1:
            raise ValueError(f"max_message_length must be positive, got {max_message_length}")
        self.max_message_length = max_message_length
        self._messages: List[Message] = []
        self._lock = threading.Lock()
        self.last_rejection: Optional[Rejection] = None

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def submit_message(self, text: str) -> Optional[int]:
        """
        Append a message to the log.

        Args:
            text: Message text. Surrounding whitespace is trimmed.

        Returns:
            Index of the new message, or None if the text was not a str,
            was blank, or was longer than max_message_length.
        """
        if not isinstance(text, str):
            return self._reject(
                Rejection.INVALID_MESSAGE, f"text must be a str, got {type(text).__name__}"
            )

        trimmed = text.strip()
        if not trimmed:
            return self._reject(Rejection.INVALID_MESSAGE, "blank message")
        if len(trimmed) > self.max_message_length:
            return self._reject(
                Rejection.INVALID_MESSAGE,
                f"message of {len(trimmed)} chars exceeds {self.max_message_length}",
            )

        with self._lock:
            self._messages.append(Message(trimmed))
            index = len(self._messages) - 1
            self.last_rejection = None
        logger.debug("Message %d submitted (%d chars)", index, len(trimmed))
        return index

    def add_reaction(self, message_index: int, symbol: Union[Reaction, str]) -> bool:
        """
        Add one reaction to a message.

        Args:
            message_index: Position of the message in the log.
            symbol: A Reaction or its emoji.

        Returns:
            True if the count went up, False if the command was ignored.
        """
        reaction = Reaction.from_symbol(symbol)
        if reaction is None:
            if is_highlight_symbol(symbol):
                detail = "trophy is counted with add_highlight"
            else:
                detail = f"unknown reaction {symbol!r}"
            self._reject(Rejection.INVALID_TARGET, detail)
            return False

        message = self._lookup(message_index)
        if message is None:
            return False

        count = message.add_reaction(reaction)
        self._accept()
        logger.debug("Message %d: %s -> %d", message_index, reaction.name, count)
        return True

    def add_highlight(self, message_index: int) -> bool:
        """Add one trophy to a message. Returns False if ignored."""
        message = self._lookup(message_index)
        if message is None:
            return False

        count = message.add_highlight()
        self._accept()
        logger.debug("Message %d: highlight -> %d", message_index, count)
        return True

    def clear(self):
        """
        Drop every message.

        Only meant for hosts that tie a chat reset to a game reset.
        """
        with self._lock:
            self._messages = []
            self.last_rejection = None
        logger.debug("Ledger cleared")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_messages(self) -> List[MessageSnapshot]:
        """All messages in submission order, as snapshots."""
        with self._lock:
            messages = list(self._messages)
        return [message.snapshot(i) for i, message in enumerate(messages)]

    def get_message(self, message_index: int) -> Optional[MessageSnapshot]:
        with self._lock:
            if not self._in_range(message_index):
                return None
            message = self._messages[message_index]
        return message.snapshot(message_index)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _in_range(self, message_index) -> bool:
        # bool is an int, but True is not a message address
        if isinstance(message_index, bool) or not isinstance(message_index, int):
            return False
        return 0 <= message_index < len(self._messages)

    def _lookup(self, message_index: int) -> Optional[Message]:
        with self._lock:
            if self._in_range(message_index):
                return self._messages[message_index]
            size = len(self._messages)
        self._reject(
            Rejection.INVALID_TARGET,
            f"message {message_index!r} out of range [0, {size})",
        )
        return None

    def _accept(self):
        with self._lock:
            self.last_rejection = None

    def _reject(self, rejection: Rejection, detail: str) -> None:
        with self._lock:
            self.last_rejection = rejection
        logger.debug("Ignored %s: %s", rejection.value, detail)
        return None
