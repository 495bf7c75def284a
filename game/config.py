"""
Board configuration for Tic Tac Toe.
Fixed board geometry and the text shown for each game status.
"""


class BoardConfig:
    """
    Constants for the 3x3 board.

    The board size is fixed; nothing in the engine reads it from the
    environment.
    """

    # ==================== GEOMETRY ====================
    BOARD_SIZE = 3                         # 3x3 grid
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE   # Cells indexed 0-8, row-major

    # Internal cell codes used in the numpy board vector
    EMPTY = 0

    # ==================== PLAYERS ====================
    # Player number shown next to each mark
    PLAYER_LABELS = {
        "X": "Player 1",
        "O": "Player 2",
    }

    # ==================== STATUS TEXT ====================
    NEXT_TEMPLATE = "Next: {player} ({mark})"
    WIN_TEMPLATE = "{player} ({mark}) wins!"
    DRAW_TEXT = "It's a draw!"

    # Reset button label while playing / after the game ended
    RESET_LABEL = "Reset"
    PLAY_AGAIN_LABEL = "Play Again"

    @classmethod
    def index_to_cell(cls, index: int):
        """Convert a flat cell index to (row, col)."""
        return divmod(index, cls.BOARD_SIZE)

    @classmethod
    def cell_to_index(cls, row: int, col: int) -> int:
        """Convert (row, col) to a flat cell index."""
        return row * cls.BOARD_SIZE + col
