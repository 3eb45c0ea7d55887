"""Errors raised while lexing."""

from __future__ import annotations


class LexerError(Exception):
    """Base class of every lexing error.

    Two errors are equal when they are of the same class and carry the
    same details.
    """

    template = "Lexer error"

    def __str__(self) -> str:
        return self.template.format(*self.args)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self.args))})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LexerError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class _DetailedError(LexerError):
    """A lexing error that carries one piece of detail text."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)

    @property
    def detail(self) -> str:
        return self.args[0]


class UnexpectedCharacter(LexerError):
    template = "Unexpected character: {0}"

    def __init__(self, char: str) -> None:
        super().__init__(char)

    @property
    def char(self) -> str:
        return self.args[0]


class InvalidNumber(_DetailedError):
    template = "Invalid number: {0}"


class UnterminatedString(LexerError):
    template = "Unterminated string"

    def __init__(self) -> None:
        super().__init__()


class UnterminatedTemplateString(LexerError):
    template = "Unterminated template string"

    def __init__(self) -> None:
        super().__init__()


class UnterminatedComment(LexerError):
    template = "Unterminated comment"

    def __init__(self) -> None:
        super().__init__()


class InvalidEscapeSequence(_DetailedError):
    template = "Invalid escape sequence: {0}"


class InvalidUnicodeEscape(_DetailedError):
    template = "Invalid Unicode escape: {0}"


class InvalidHexEscape(_DetailedError):
    template = "Invalid hex escape: {0}"


class InvalidOctalEscape(_DetailedError):
    template = "Invalid octal escape: {0}"


class InvalidBinaryLiteral(_DetailedError):
    template = "Invalid binary literal: {0}"


class InvalidOctalLiteral(_DetailedError):
    template = "Invalid octal literal: {0}"


class InvalidHexLiteral(_DetailedError):
    template = "Invalid hex literal: {0}"


class InvalidBigIntLiteral(_DetailedError):
    template = "Invalid BigInt literal: {0}"


class InvalidRegexLiteral(_DetailedError):
    template = "Invalid regex literal: {0}"


class InvalidRegexFlags(_DetailedError):
    template = "Invalid regex flags: {0}"


class InvalidIdentifier(_DetailedError):
    template = "Invalid identifier: {0}"


class InvalidKeyword(_DetailedError):
    template = "Invalid keyword: {0}"


class InvalidOperator(_DetailedError):
    template = "Invalid operator: {0}"


class InvalidSymbol(_DetailedError):
    template = "Invalid symbol: {0}"


class InvalidComment(_DetailedError):
    template = "Invalid comment: {0}"


class InvalidWhitespace(_DetailedError):
    template = "Invalid whitespace: {0}"


class InvalidToken(_DetailedError):
    template = "Invalid token: {0}"


class UnexpectedEndOfInput(LexerError):
    template = "End of input reached unexpectedly"

    def __init__(self) -> None:
        super().__init__()


class InternalError(_DetailedError):
    template = "Internal lexer error: {0}"