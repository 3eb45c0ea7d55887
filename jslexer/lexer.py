"""Turn JavaScript source text into a list of tokens."""

from __future__ import annotations

from .errors import (
    LexerError,
    InvalidNumber,
    UnexpectedCharacter,
    UnterminatedComment,
    UnterminatedString,
)
from .tokens import Token, TokenKind, TokenValue

_KEYWORDS = frozenset(
    {
        "this", "super",
        "let", "const", "var", "function", "if", "else", "return",
        "async", "await", "yield", "import", "export", "new",
        "class", "extends", "static", "get", "set", "try", "catch", "finally",
        "throw", "break", "continue", "switch", "case", "default", "for", "while",
        "do", "in", "of", "with", "delete", "instanceof", "typeof", "void",
        "debugger", "enum", "interface", "package", "private", "protected", "public",
        "implements", "abstract", "boolean", "byte", "char", "double", "final",
        "float", "goto", "int", "long", "native", "short", "synchronized",
        "throws", "transient", "volatile",
    }
)

_LITERAL_WORDS: dict[str, tuple[TokenKind, TokenValue]] = {
    "true": (TokenKind.BOOLEAN, True),
    "false": (TokenKind.BOOLEAN, False),
    "null": (TokenKind.NULL, None),
    "undefined": (TokenKind.UNDEFINED, None),
}

_THREE_CHAR_OPERATORS = {
    "===": TokenKind.STRICT_EQUAL,
    "!==": TokenKind.STRICT_NOT_EQUAL,
    "**=": TokenKind.STAR_STAR_ASSIGN,
    "<<=": TokenKind.LEFT_SHIFT_ASSIGN,
    ">>=": TokenKind.RIGHT_SHIFT_ASSIGN,
    ">>>": TokenKind.UNSIGNED_RIGHT_SHIFT,
}

_TWO_CHAR_OPERATORS = {
    "==": TokenKind.EQUAL,
    "!=": TokenKind.NOT_EQUAL,
    "<=": TokenKind.LESS_THAN_EQUAL,
    ">=": TokenKind.GREATER_THAN_EQUAL,
    "++": TokenKind.INCREMENT,
    "--": TokenKind.DECREMENT,
    "&&": TokenKind.LOGICAL_AND,
    "||": TokenKind.LOGICAL_OR,
    "=>": TokenKind.ARROW,
    "??": TokenKind.NULLISH_COALESCING,
}

_ONE_CHAR_OPERATORS = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    "[": TokenKind.LEFT_BRACKET,
    "]": TokenKind.RIGHT_BRACKET,
    ".": TokenKind.DOT,
    ";": TokenKind.SEMICOLON,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
    "?": TokenKind.QUESTION,
    "!": TokenKind.EXCLAMATION,
    "~": TokenKind.TILDE,
    "=": TokenKind.ASSIGN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "%": TokenKind.PERCENT,
    "<": TokenKind.LESS_THAN,
    ">": TokenKind.GREATER_THAN,
    "&": TokenKind.BITWISE_AND,
    "|": TokenKind.BITWISE_OR,
    "^": TokenKind.BITWISE_XOR,
}

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_RADIX_PREFIXES = {
    "x": (16, _HEX_DIGITS),
    "X": (16, _HEX_DIGITS),
    "b": (2, frozenset("01")),
    "B": (2, frozenset("01")),
    "o": (8, frozenset("01234567")),
    "O": (8, frozenset("01234567")),
}
_DECIMAL_CHARS = frozenset("0123456789.eE+-")
_MAX_RADIX_VALUE = 2**64 - 1

# Separators that str.isspace accepts but that are not Unicode white space.
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def _is_whitespace(char: str) -> bool:
    return char.isspace() and char not in _NOT_WHITESPACE


def _starts_identifier(char: str) -> bool:
    return (char.isascii() and char.isalpha()) or char in ("_", "$") or not char.isascii()


def _continues_identifier(char: str) -> bool:
    return bool(char) and (char.isalnum() or char in ("_", "$") or not char.isascii())


class Lexer:
    """Reads tokens one at a time from a piece of source text."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1

    def tokenize(self) -> list[Token]:
        """Read every remaining token; the list always ends with an EOF token."""
        tokens: list[Token] = []
        while not self._at_end():
            token = self.next_token()
            tokens.append(token)
            if token.kind is TokenKind.EOF:
                break
        if not tokens or tokens[-1].kind is not TokenKind.EOF:
            tokens.append(self._eof())
        return tokens

    def next_token(self) -> Token:
        """Read the next token, skipping white space; EOF once the text is used up."""
        self._skip_whitespace()
        if self._at_end():
            return self._eof()
        start_line, start_column = self._line, self._column
        kind, value = self._read_token()
        return Token.with_positions(
            kind, value, start_line, start_column, self._line, self._column
        )

    def _read_token(self) -> tuple[TokenKind, TokenValue]:
        char = self._peek()
        if _starts_identifier(char):
            return self._read_identifier_or_keyword()
        if char.isascii() and char.isdigit():
            return self._read_number()
        if char in ('"', "'"):
            return self._read_string()
        if char == "`":
            return self._read_template_string()
        if char == "/" and self._peek(1) == "/":
            return self._read_line_comment()
        if char == "/" and self._peek(1) == "*":
            return self._read_block_comment()
        return self._read_operator()

    def _read_identifier_or_keyword(self) -> tuple[TokenKind, TokenValue]:
        start = self._pos
        while _continues_identifier(self._peek()):
            self._advance()
        word = self._source[start:self._pos]
        if word in _LITERAL_WORDS:
            return _LITERAL_WORDS[word]
        if word in _KEYWORDS:
            return TokenKind.KEYWORD, word
        return TokenKind.IDENTIFIER, word

    def _read_number(self) -> tuple[TokenKind, TokenValue]:
        start = self._pos
        radix = None
        allowed = _DECIMAL_CHARS
        if self._peek() == "0" and self._peek(1) in _RADIX_PREFIXES:
            radix, allowed = _RADIX_PREFIXES[self._peek(1)]
            self._advance(2)
        while self._peek() and self._peek() in allowed:
            self._advance()
        text = self._source[start:self._pos]

        if self._peek() == "n":
            self._advance()
            return TokenKind.BIGINT, text + "n"

        if radix is not None:
            digits = text[2:]
            if not digits:
                raise InvalidNumber(text)
            value = int(digits, radix)
            if value > _MAX_RADIX_VALUE:
                raise InvalidNumber(text)
            return TokenKind.NUMBER, float(value)

        try:
            return TokenKind.NUMBER, float(text)
        except ValueError:
            raise InvalidNumber(text) from None

    def _read_string(self) -> tuple[TokenKind, TokenValue]:
        quote = self._peek()
        self._advance()
        parts: list[str] = []
        while not self._at_end():
            char = self._peek()
            self._advance()
            if char == quote:
                return TokenKind.STRING, "".join(parts)
            if char == "\\":
                if not self._at_end():
                    parts.append(self._read_escape())
            else:
                parts.append(char)
        raise UnterminatedString()

    def _read_template_string(self) -> tuple[TokenKind, TokenValue]:
        # An unclosed template simply runs to the end of the source.
        self._advance()
        parts: list[str] = []
        while not self._at_end():
            char = self._peek()
            self._advance()
            if char == "`":
                break
            if char == "\\":
                if not self._at_end():
                    parts.append(self._read_escape())
            else:
                parts.append(char)
        return TokenKind.TEMPLATE_STRING, "".join(parts)

    def _read_escape(self) -> str:
        escaped = self._peek()
        self._advance()
        return _ESCAPES.get(escaped, escaped)

    def _read_line_comment(self) -> tuple[TokenKind, TokenValue]:
        self._advance(2)
        start = self._pos
        while not self._at_end() and self._peek() != "\n":
            self._advance()
        return TokenKind.COMMENT, self._source[start:self._pos]

    def _read_block_comment(self) -> tuple[TokenKind, TokenValue]:
        self._advance(2)
        start = self._pos
        while not self._at_end():
            if self._peek() == "*" and self._peek(1) == "/":
                text = self._source[start:self._pos]
                self._advance(2)
                return TokenKind.COMMENT, text
            self._advance()
        raise UnterminatedComment()

    def _read_operator(self) -> tuple[TokenKind, TokenValue]:
        for width, table in (
            (3, _THREE_CHAR_OPERATORS),
            (2, _TWO_CHAR_OPERATORS),
            (1, _ONE_CHAR_OPERATORS),
        ):
            kind = table.get(self._source[self._pos:self._pos + width])
            if kind is not None:
                self._advance(width)
                return kind, None
        raise UnexpectedCharacter(self._peek())

    def _skip_whitespace(self) -> None:
        while not self._at_end() and _is_whitespace(self._peek()):
            if self._peek() == "\n":
                self._line += 1
                self._column = 1
            else:
                self._column += 1
            self._advance()

    def _advance(self, count: int = 1) -> None:
        for _ in range(count):
            if self._at_end():
                return
            self._pos += 1
            self._column += 1

    def _peek(self, offset: int = 0) -> str:
        index = self._pos + offset
        return self._source[index] if index < len(self._source) else ""

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _eof(self) -> Token:
        return Token.with_positions(
            TokenKind.EOF, None, self._line, self._column, self._line, self._column
        )


def tokenize(source: str) -> list[Token]:
    """Tokenize a whole source text, raising a LexerError on bad input."""
    return Lexer(source).tokenize()


def tokenize_fallback(source: str) -> list[Token]:
    """Tokenize a source text; on any lexing error return a lone EOF token."""
    try:
        return tokenize(source)
    except LexerError:
        return [Token.with_positions(TokenKind.EOF, None, 1, 1, 1, 1)]