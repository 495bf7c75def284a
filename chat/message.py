"""
Chat messages and their reaction counters.
"""

import threading
from typing import Dict, Union
from dataclasses import dataclass

import numpy as np

from .reactions import Reaction


@dataclass(frozen=True)
class MessageSnapshot:
    """
    Read-only view of one message at a point in time.

    reactions always holds every symbol of the alphabet, in display
    order, with 0 for symbols nobody has used yet.
    """
    index: int
    text: str
    reactions: Dict[Reaction, int]
    highlight_count: int

    def count(self, symbol: Union[Reaction, str]) -> int:
        """Count for one reaction; 0 for symbols outside the alphabet."""
        reaction = Reaction.from_symbol(symbol)
        if reaction is None:
            return 0
        return self.reactions[reaction]

    @property
    def total_reactions(self) -> int:
        return sum(self.reactions.values())


class Message:
    """
    One entry in the message log.

    The text never changes after creation. Counters only go up, one step
    per call, under a lock owned by this message so that concurrent
    reactions on the same message are never lost.
    """

    def __init__(self, text: str):
        self._text = text
        self._counts = np.zeros(len(Reaction), dtype=np.int64)
        self._highlight_count = 0
        self._lock = threading.Lock()

    @property
    def text(self) -> str:
        return self._text

    def add_reaction(self, reaction: Reaction) -> int:
        """
        Count one more reaction.

        Returns:
            The new count for that reaction.
        """
        with self._lock:
            self._counts[reaction.ordinal] += 1
            return int(self._counts[reaction.ordinal])

    def add_highlight(self) -> int:
        with self._lock:
            self._highlight_count += 1
            return self._highlight_count

    def snapshot(self, index: int) -> MessageSnapshot:
        """
        Copy the current counters into a MessageSnapshot.

        Args:
            index: Position of this message in its log.
        """
        with self._lock:
            counts = self._counts.copy()
            highlight_count = self._highlight_count

        return MessageSnapshot(
            index=index,
            text=self._text,
            reactions={reaction: int(counts[reaction.ordinal]) for reaction in Reaction},
            highlight_count=highlight_count,
        )
