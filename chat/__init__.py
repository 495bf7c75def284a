"""
Chat module for Tic Tac Toe.
Handles the message log and per-message reactions.
"""

from .config import ChatConfig
from .reactions import Reaction
from .message import Message, MessageSnapshot
from .ledger import ReactionLedger
