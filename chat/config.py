"""
Chat configuration for the Tic Tac Toe message log.
"""


class ChatConfig:
    """
    Limits and symbols for the message log.

    The general reaction alphabet itself lives in chat.reactions.Reaction.
    """

    # ==================== MESSAGES ====================
    # Longest accepted message, counted after trimming
    MAX_MESSAGE_LENGTH = 200

    # Shown by hosts when the log is empty
    EMPTY_LOG_PLACEHOLDER = "Start chatting..."

    # ==================== HIGHLIGHT ====================
    # Trophy acknowledgment, counted apart from the general reactions
    HIGHLIGHT_SYMBOL = "\U0001F3C6"  # trophy
