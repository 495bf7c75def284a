"""
Console host for the Tic Tac Toe session.

Plays the part of the presentation layer in a terminal: prints the board
and the chat, reads one command per line and forwards it to the session.

Commands:
    move N | N       Place a mark on cell N (0-8)
    move R C         Place a mark at row R, column C
    say TEXT         Post a chat message
    react I SYMBOL   React to message I (emoji or name, e.g. "heart")
    trophy I         Give message I a trophy
    reset            Reset the board
    board | chat     Show the board / the chat log
    help | quit
"""

import logging
from typing import Callable, Optional
from dataclasses import dataclass

from game import BoardConfig, Mark
from chat import ChatConfig, Reaction
from chat.reactions import is_highlight_symbol
from session import GameSession

logger = logging.getLogger(__name__)


class CommandError(ValueError):
    """A console line that could not be understood."""


@dataclass
class Command:
    """A parsed console command."""
    name: str
    index: Optional[int] = None
    text: Optional[str] = None
    symbol: Optional[str] = None


_SIMPLE_COMMANDS = {"reset", "board", "chat", "help", "quit", "exit"}


def _parse_int(word: str, what: str) -> int:
    try:
        return int(word)
    except ValueError:
        raise CommandError(f"{what} must be a number, got {word!r}") from None


def parse_command(line: str) -> Command:
    """
    Parse one console line.

    Args:
        line: Raw input line.

    Returns:
        The parsed Command.

    Raises:
        CommandError: If the line is empty or malformed.
    """
    words = line.split()
    if not words:
        raise CommandError("Empty command")

    verb = words[0].lower()

    # A bare number is a move
    if verb.isdecimal() and len(words) == 1:
        return Command("move", index=int(verb))

    if verb in _SIMPLE_COMMANDS:
        return Command("quit" if verb == "exit" else verb)

    if verb == "move":
        if len(words) == 2:
            return Command("move", index=_parse_int(words[1], "Cell"))
        if len(words) == 3:
            row = _parse_int(words[1], "Row")
            col = _parse_int(words[2], "Column")
            if not (0 <= row < BoardConfig.BOARD_SIZE and 0 <= col < BoardConfig.BOARD_SIZE):
                raise CommandError(f"Invalid position ({row}, {col}). Must be 0-2.")
            return Command("move", index=BoardConfig.cell_to_index(row, col))
        raise CommandError("Usage: move N  or  move R C")

    if verb == "say":
        # Keep the message exactly as typed; the ledger trims it
        text = line.lstrip()[len(words[0]):]
        return Command("say", text=text)

    if verb == "react":
        if len(words) != 3:
            raise CommandError("Usage: react I SYMBOL")
        return Command("react", index=_parse_int(words[1], "Message"), symbol=words[2])

    if verb == "trophy":
        if len(words) != 2:
            raise CommandError("Usage: trophy I")
        return Command("trophy", index=_parse_int(words[1], "Message"))

    raise CommandError(f"Unknown command {verb!r} (type 'help')")


def format_board(session: GameSession) -> str:
    """
    Render the board as text.

    Empty cells show their index, cells on the winning line are wrapped
    in brackets.
    """
    board = session.get_board()
    size = BoardConfig.BOARD_SIZE
    lines = []

    for row in range(size):
        cells = []
        for col in range(size):
            index = BoardConfig.cell_to_index(row, col)
            mark = board[index]
            text = str(index) if mark is None else mark.name
            if session.is_cell_in_winning_line(index):
                cells.append(f"[{text}]")
            else:
                cells.append(f" {text} ")
        lines.append("|".join(cells))
        if row < size - 1:
            lines.append("+".join(["---"] * size))

    lines.append("")
    lines.append(session.status_text())
    return "\n".join(lines)


def format_messages(session: GameSession) -> str:
    """Render the chat log, one message per line with its non-zero counts."""
    messages = session.list_messages()
    if not messages:
        return ChatConfig.EMPTY_LOG_PLACEHOLDER

    lines = []
    for message in messages:
        counts = []
        if message.highlight_count > 0:
            counts.append(f"{ChatConfig.HIGHLIGHT_SYMBOL}{message.highlight_count}")
        for reaction, count in message.reactions.items():
            if count > 0:
                counts.append(f"{reaction.symbol}{count}")
        suffix = "  " + " ".join(counts) if counts else ""
        lines.append(f"#{message.index} {message.text}{suffix}")
    return "\n".join(lines)


class ConsoleHost:
    """
    Reads commands and forwards them to a GameSession.

    Args:
        session: The session to drive.
        output: Where text goes (print by default).
    """

    def __init__(self, session: GameSession, output: Callable[[str], None] = print):
        self.session = session
        self.output = output

    def handle(self, line: str) -> bool:
        """
        Run one console line.

        Returns:
            False when the user asked to quit, True otherwise.
        """
        try:
            command = parse_command(line)
        except CommandError as e:
            logger.debug("Bad command %r: %s", line, e)
            self.output(f"  ✗ {e}")
            return True

        if command.name == "quit":
            return False
        if command.name == "help":
            self.output(__doc__.split("Commands:", 1)[1].rstrip())
        elif command.name == "board":
            self.output(format_board(self.session))
        elif command.name == "chat":
            self.output(format_messages(self.session))
        elif command.name == "reset":
            self.session.reset_game()
            self.output(format_board(self.session))
        elif command.name == "move":
            self._move(command.index)
        elif command.name == "say":
            if self.session.submit_message(command.text) is None:
                self.output("  ✗ Message must be 1-"
                            f"{self.session.ledger.max_message_length} characters")
            else:
                self.output(format_messages(self.session))
        elif command.name == "react":
            self._react(command.index, command.symbol)
        elif command.name == "trophy":
            if self.session.add_highlight(command.index):
                self.output(format_messages(self.session))
            else:
                self.output(f"  ✗ No message #{command.index}")
        return True

    def _move(self, index: int):
        if not 0 <= index < BoardConfig.CELL_COUNT:
            self.output(f"  ✗ Cell must be 0-{BoardConfig.CELL_COUNT - 1}")
            return
        if not self.session.apply_move(index):
            self.output(f"  ✗ {self.session.engine.last_validation.error_message}")
        self.output(format_board(self.session))

    def _react(self, index: int, word: str):
        # The trophy has its own counter
        if is_highlight_symbol(word) or word.lower() == "trophy":
            accepted = self.session.add_highlight(index)
        else:
            reaction = Reaction.from_symbol(word) or Reaction.from_name(word)
            if reaction is None:
                names = ", ".join(r.name.lower() for r in Reaction)
                self.output(f"  ✗ Unknown reaction {word!r} (try: {names})")
                return
            accepted = self.session.add_reaction(index, reaction)

        if accepted:
            self.output(format_messages(self.session))
        else:
            self.output(f"  ✗ No message #{index}")

    def run(self, read_line: Callable[[str], str] = input):
        """Main loop. Stops on 'quit', EOF or Ctrl-C."""
        self.output("=" * 40)
        self.output("   Tic Tac Toe")
        self.output(f"   X: {Mark.X.player_label}   O: {Mark.O.player_label}")
        self.output("=" * 40)
        self.output(format_board(self.session))

        while True:
            try:
                line = read_line("> ")
            except EOFError:
                break
            if not self.handle(line):
                break


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Tic Tac Toe with chat")
    parser.add_argument(
        "--clear-chat-on-reset",
        action="store_true",
        help="Also clear the chat log when the board is reset"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    session = GameSession(clear_chat_on_reset=args.clear_chat_on_reset)
    host = ConsoleHost(session)

    try:
        host.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
