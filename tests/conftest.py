"""
Pytest configuration for the Tic Tac Toe session.

Shared fixtures for the board engine, the reaction ledger and the session.
"""

import pytest

from game import BoardEngine
from chat import ReactionLedger
from session import GameSession


@pytest.fixture
def engine():
    return BoardEngine()


@pytest.fixture
def ledger():
    return ReactionLedger()


@pytest.fixture
def session():
    return GameSession()


def play(engine, moves):
    """Apply a sequence of moves, returning the accept/ignore results."""
    return [engine.apply_move(index) for index in moves]
