"""Interactive read loop: prompt, read, tokenize, print tokens, repeat."""

import contextlib
import os
import readline
import sys

from simplelexer.tokenizer import Token, scan

HISTORY_FILE = os.path.expanduser("~/.simplelexer_history")
HISTORY_LENGTH = 1000
PROMPT = "> "


def render_tokens(tokens: list[Token]) -> list[str]:
    """Format tokens as '<index> <reg|lit> <value>' lines."""
    return [f"{i} {token.kind.tag} {token.value}" for i, token in enumerate(tokens)]


class Repl:
    """Read loop state and main loop."""

    def __init__(self, history_file: str = HISTORY_FILE, prompt: str = PROMPT) -> None:
        self.history_file = history_file
        self.prompt = prompt

    def load_history(self) -> None:
        with contextlib.suppress(FileNotFoundError, PermissionError, OSError):
            readline.read_history_file(self.history_file)

    def save_history(self) -> None:
        with contextlib.suppress(PermissionError, OSError):
            readline.write_history_file(self.history_file)

    def run_line(self, line: str) -> None:
        """Tokenize one line and print its tokens to stdout.

        The line is used as-is: no stripping, no comment handling. An
        unterminated quote or escape drops its token; that is reported on
        stderr without changing what goes to stdout.
        """
        result = scan(line)
        for rendered in render_tokens(result.tokens):
            print(rendered)
        if result.unterminated:
            print(
                "simplelexer: unterminated quote or escape, last token dropped",
                file=sys.stderr,
            )

    def run(self) -> None:
        """Main loop. Returns at end of input or on Ctrl-C."""
        self.load_history()
        readline.set_history_length(HISTORY_LENGTH)

        while True:
            try:
                line = input(self.prompt)
            except (EOFError, KeyboardInterrupt):
                print()
                break

            self.run_line(line)

        self.save_history()


def main() -> None:
    """Entry point."""
    repl = Repl()
    repl.run()
