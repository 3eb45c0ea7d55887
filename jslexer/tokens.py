"""Token model: source positions, spans, token kinds and tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

TokenValue = Union[str, float, bool, None]


@dataclass(frozen=True)
class Position:
    """A 1-based line and column in the source text."""

    line: int
    column: int


@dataclass(frozen=True)
class Span:
    """The region of source text a token covers."""

    start: Position
    end: Position

    @classmethod
    def from_positions(
        cls, start_line: int, start_column: int, end_line: int, end_column: int
    ) -> Span:
        """Build a span from raw line and column numbers."""
        return cls(Position(start_line, start_column), Position(end_line, end_column))


class TokenKind(Enum):
    """Every kind of token the lexer can produce."""

    # Literals
    IDENTIFIER = auto()
    NUMBER = auto()
    BIGINT = auto()
    STRING = auto()
    TEMPLATE_STRING = auto()
    BOOLEAN = auto()
    NULL = auto()
    UNDEFINED = auto()
    REGEX = auto()

    KEYWORD = auto()
    SYMBOL = auto()

    COMMENT = auto()
    WHITESPACE = auto()
    EOF = auto()

    # Punctuation
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    DOT = auto()
    SEMICOLON = auto()
    COMMA = auto()
    COLON = auto()
    QUESTION = auto()
    EXCLAMATION = auto()
    TILDE = auto()

    # Assignment
    ASSIGN = auto()
    PLUS_ASSIGN = auto()
    MINUS_ASSIGN = auto()
    STAR_ASSIGN = auto()
    SLASH_ASSIGN = auto()
    PERCENT_ASSIGN = auto()
    STAR_STAR_ASSIGN = auto()
    LEFT_SHIFT_ASSIGN = auto()
    RIGHT_SHIFT_ASSIGN = auto()
    UNSIGNED_RIGHT_SHIFT_ASSIGN = auto()
    BITWISE_AND_ASSIGN = auto()
    BITWISE_OR_ASSIGN = auto()
    BITWISE_XOR_ASSIGN = auto()

    # Comparison
    EQUAL = auto()
    NOT_EQUAL = auto()
    STRICT_EQUAL = auto()
    STRICT_NOT_EQUAL = auto()
    LESS_THAN = auto()
    LESS_THAN_EQUAL = auto()
    GREATER_THAN = auto()
    GREATER_THAN_EQUAL = auto()

    # Logical
    LOGICAL_AND = auto()
    LOGICAL_OR = auto()
    NULLISH_COALESCING = auto()

    INCREMENT = auto()
    DECREMENT = auto()

    # Arithmetic
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    PERCENT = auto()
    STAR_STAR = auto()

    # Bitwise
    BITWISE_AND = auto()
    BITWISE_OR = auto()
    BITWISE_XOR = auto()
    LEFT_SHIFT = auto()
    RIGHT_SHIFT = auto()
    UNSIGNED_RIGHT_SHIFT = auto()

    # Other
    ARROW = auto()
    OPTIONAL_CHAINING = auto()
    SPREAD = auto()
    REST = auto()
    PRIVATE_FIELD = auto()


LITERAL_KINDS = frozenset(
    {
        TokenKind.NUMBER,
        TokenKind.STRING,
        TokenKind.BOOLEAN,
        TokenKind.NULL,
        TokenKind.UNDEFINED,
    }
)

OPERATOR_KINDS = frozenset(
    {
        TokenKind.PLUS,
        TokenKind.MINUS,
        TokenKind.STAR,
        TokenKind.SLASH,
        TokenKind.PERCENT,
        TokenKind.STAR_STAR,
        TokenKind.EQUAL,
        TokenKind.NOT_EQUAL,
        TokenKind.STRICT_EQUAL,
        TokenKind.STRICT_NOT_EQUAL,
        TokenKind.LESS_THAN,
        TokenKind.LESS_THAN_EQUAL,
        TokenKind.GREATER_THAN,
        TokenKind.GREATER_THAN_EQUAL,
        TokenKind.LEFT_SHIFT,
        TokenKind.RIGHT_SHIFT,
        TokenKind.UNSIGNED_RIGHT_SHIFT,
        TokenKind.BITWISE_AND,
        TokenKind.BITWISE_OR,
        TokenKind.BITWISE_XOR,
        TokenKind.LOGICAL_AND,
        TokenKind.LOGICAL_OR,
        TokenKind.NULLISH_COALESCING,
        TokenKind.INCREMENT,
        TokenKind.DECREMENT,
    }
)


@dataclass(frozen=True)
class Token:
    """A token: its kind, an optional payload and where it sits in the source.

    The payload is the text of identifiers, keywords, strings, template
    strings, BigInt literals and comments, the float of a number, the bool
    of a boolean, and None for every other kind.
    """

    kind: TokenKind
    value: TokenValue
    span: Span

    @classmethod
    def with_positions(
        cls,
        kind: TokenKind,
        value: TokenValue,
        start_line: int,
        start_column: int,
        end_line: int,
        end_column: int,
    ) -> Token:
        """Build a token from raw line and column numbers."""
        return cls(kind, value, Span.from_positions(start_line, start_column, end_line, end_column))

    def start(self) -> Position:
        """Where the token begins."""
        return self.span.start

    def end(self) -> Position:
        """Where the token ends."""
        return self.span.end

    def is_keyword(self) -> bool:
        return self.kind is TokenKind.KEYWORD

    def is_identifier(self) -> bool:
        return self.kind is TokenKind.IDENTIFIER

    def is_literal(self) -> bool:
        return self.kind in LITERAL_KINDS

    def is_operator(self) -> bool:
        return self.kind in OPERATOR_KINDS