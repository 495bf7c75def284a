"""
Rejection reasons shared by the board engine and the reaction ledger.

Rejected commands are absorbed as no-ops; the reason is reported back
through validation results and the debug log, never raised.
"""

from enum import Enum


class Rejection(Enum):
    """Why a command was ignored."""
    INVALID_MOVE = "invalid_move"        # Occupied cell or finished game
    INVALID_MESSAGE = "invalid_message"  # Blank or over-long text
    INVALID_TARGET = "invalid_target"    # Unknown message index or symbol
