"""Tokenize a shell input line into regular and literal tokens.

Regular tokens come from bare words and double-quoted strings and may later
have variables substituted into them. Literal tokens come from single-quoted
strings and are never substituted.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple, TypeAlias

SPACE = " "

# Control characters produced by a backslash inside quotes
ESCAPES: dict[str, str] = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "v": "\v",
}


class TokenKind(Enum):
    REGULAR = auto()
    LITERAL = auto()

    @property
    def tag(self) -> str:
        """Two-letter display tag: 'reg' or 'lit'."""
        return "reg" if self is TokenKind.REGULAR else "lit"


@dataclass(frozen=True)
class Token:
    """A decoded token: quotes stripped, escapes resolved."""

    kind: TokenKind
    value: str

    def __str__(self) -> str:
        return self.value


class Mode(Enum):
    WHITESPACE = auto()
    WORD = auto()
    STRING = auto()
    LITERAL = auto()


@dataclass(frozen=True)
class Backslash:
    """Inside an escape; decodes one character, then resumes ``return_to``."""

    return_to: Mode


LexState: TypeAlias = Mode | Backslash


class Step(NamedTuple):
    """Result of feeding one character to the state machine.

    ``append`` is the decoded text to add to the pending token ("" for none).
    ``emit`` is the kind to flush the pending token as, or None.
    """

    state: LexState
    append: str = ""
    emit: TokenKind | None = None


class ScanResult(NamedTuple):
    tokens: list[Token]
    state: LexState

    @property
    def unterminated(self) -> bool:
        """True if a quote or escape was left open and its token dropped."""
        return self.state != Mode.WHITESPACE


def transition(state: LexState, char: str) -> Step:
    """Advance the lexer by one character.

    Only a plain space separates words. A quote opened in the middle of a
    word continues that word; closing a quote always ends the token.
    """
    match state, char:
        case Backslash(return_to=resume), _:
            return Step(resume, ESCAPES.get(char, char))
        case (Mode.WHITESPACE | Mode.WORD), '"':
            return Step(Mode.STRING)
        case (Mode.WHITESPACE | Mode.WORD), "'":
            return Step(Mode.LITERAL)
        case Mode.WHITESPACE, " ":
            return Step(Mode.WHITESPACE)
        case Mode.WORD, " ":
            return Step(Mode.WHITESPACE, emit=TokenKind.REGULAR)
        case (Mode.WHITESPACE | Mode.WORD), _:
            return Step(Mode.WORD, char)
        case Mode.STRING, '"':
            return Step(Mode.WHITESPACE, emit=TokenKind.REGULAR)
        case Mode.LITERAL, "'":
            return Step(Mode.WHITESPACE, emit=TokenKind.LITERAL)
        case (Mode.STRING | Mode.LITERAL), "\\":
            return Step(Backslash(state))
        case (Mode.STRING | Mode.LITERAL), _:
            return Step(state, char)
    raise ValueError(f"not a lexer state: {state!r}")


def scan(line: str) -> ScanResult:
    """Run the state machine over ``line`` and report where it stopped.

    An unterminated quote or escape swallows the trailing space and is never
    flushed, so its token is missing from the result.
    """
    tokens: list[Token] = []
    pending: list[str] = []
    state: LexState = Mode.WHITESPACE

    # The extra space flushes a word still in progress at end of line
    for char in line + SPACE:
        state, append, emit = transition(state, char)
        if append:
            pending.append(append)
        if emit is not None:
            tokens.append(Token(emit, "".join(pending)))
            pending.clear()

    return ScanResult(tokens, state)


def tokenize(line: str) -> list[Token]:
    """Tokenize a single input line. Never raises."""
    return scan(line).tokens
