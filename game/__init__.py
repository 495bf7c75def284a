"""
Game module for Tic Tac Toe.
Handles the board, turns, move rules and win/draw detection.
"""

from .config import BoardConfig
from .game_state import GameState, Mark
from .win_checker import WINNING_LINES, Outcome, OutcomeStatus, compute_outcome
from .move_validator import MoveValidator, ValidationResult
from .board_engine import BoardEngine
