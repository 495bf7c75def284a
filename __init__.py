"""
Tic Tac Toe Session
===================
A two-player Tic Tac Toe board engine with a chat log that supports
emoji reactions and trophy highlights.

Packages: game (board engine), chat (reaction ledger).
"""

__version__ = "1.0.0"
