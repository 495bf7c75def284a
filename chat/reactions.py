"""
Reaction alphabet for chat messages.
"""

from enum import Enum
from typing import Optional, Union

from .config import ChatConfig

# Emoji presentation selector; "❤️" is usually typed with it, sometimes not
_VARIATION_SELECTOR = "\ufe0f"


class Reaction(Enum):
    """
    The closed set of general reactions, in display order.

    The trophy highlight is not a member; it has its own counter.
    """
    GRIN = "\U0001F600"             # 😀
    PARTY = "\U0001F389"            # 🎉
    THUMBS_UP = "\U0001F44D"        # 👍
    ASTONISHED = "\U0001F632"       # 😲
    HEART = "\u2764" + _VARIATION_SELECTOR  # ❤️

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def ordinal(self) -> int:
        """Position in display order, used as the slot in count vectors."""
        return _ORDINALS[self]

    @classmethod
    def from_symbol(cls, symbol: Union["Reaction", str]) -> Optional["Reaction"]:
        """
        Look up a reaction by emoji.

        Args:
            symbol: A Reaction, or its emoji with or without the
                emoji presentation selector.

        Returns:
            The matching Reaction, or None if the symbol is not in the
            alphabet (the highlight trophy included).
        """
        if isinstance(symbol, cls):
            return symbol
        if not isinstance(symbol, str):
            return None
        # Only a single trailing selector is tolerated
        if symbol.endswith(_VARIATION_SELECTOR):
            symbol = symbol[:-len(_VARIATION_SELECTOR)]
        return _BY_SYMBOL.get(symbol)

    @classmethod
    def from_name(cls, name: str) -> Optional["Reaction"]:
        """Look up a reaction by name, e.g. "heart" or "thumbs_up"."""
        key = name.strip().upper().replace("-", "_")
        return _ALIASES.get(key, cls.__members__.get(key))


_ORDINALS = {reaction: i for i, reaction in enumerate(Reaction)}
_BY_SYMBOL = {reaction.value.rstrip(_VARIATION_SELECTOR): reaction for reaction in Reaction}
_ALIASES = {
    "SMILE": Reaction.GRIN,
    "TADA": Reaction.PARTY,
    "THUMBS": Reaction.THUMBS_UP,
    "WOW": Reaction.ASTONISHED,
    "LOVE": Reaction.HEART,
}


def is_highlight_symbol(symbol: str) -> bool:
    """True for the trophy, which goes through add_highlight instead."""
    return isinstance(symbol, str) and symbol == ChatConfig.HIGHLIGHT_SYMBOL
