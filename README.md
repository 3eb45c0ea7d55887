# jslexer

A small lexer for JavaScript/ECMAScript source. It turns source text into a
list of tokens. Each token records where it starts and where it ends, as a
line and a column.

The lexer recognises:

- identifiers. Any non-ASCII character may start or continue one, so `π`,
  `你好` and `🚀` all count as identifiers.
- keywords such as `let`, `function`, `this` and `return`. The reserved-word
  list also includes words such as `get`, `set`, `of`, `int` and `volatile`.
  Words not on the list, for example `constructor` and `from`, are
  identifiers.
- the literals `true`, `false`, `null` and `undefined`
- decimal numbers, hexadecimal (`0xFF`), binary (`0b1010`) and octal
  (`0o755`) numbers
- BigInt literals such as `42n`. The `n` suffix is accepted after any number
  text.
- single- and double-quoted strings. `\n`, `\t` and `\r` are decoded. Any
  other escaped character stands for itself, so `\"`, `\'` and `\\` work.
- template strings, with the same escapes. `${...}` parts are kept as plain
  text. A template with no closing backtick runs to the end of the source.
- line comments (`// ...`) and block comments (`/* ... */`), each returned as
  a comment token
- these operators and punctuation:
  `=== !== **= <<= >>= >>> == != <= >= ++ -- && || => ?? ( ) { } [ ] . ; , : ? ! ~ = + - * / % < > & | ^`

## Installation

```
pip install .
```

## Usage

```python
from jslexer.lexer import tokenize, tokenize_fallback, Lexer
from jslexer.tokens import TokenKind

tokens = tokenize("let x = 42;")
for token in tokens:
    print(token.kind, token.value, token.start(), token.end())
```

The result always ends with a `TokenKind.EOF` token. White space is skipped
and produces no tokens.

### Token values

Each token has a `kind`, which is a member of `TokenKind`, and a `value`:

| Kind | Value |
| --- | --- |
| `IDENTIFIER`, `KEYWORD` | the word, as a `str` |
| `STRING`, `TEMPLATE_STRING` | the text, with escapes decoded |
| `COMMENT` | the comment text, without `//` or `/* */` |
| `NUMBER` | a `float` |
| `BIGINT` | the literal as written, for example `"42n"` |
| `BOOLEAN` | `True` or `False` |
| every other kind | `None` |

Tokens are frozen dataclasses. Two tokens are equal when their kind, value
and span are all equal.

### Token helpers

`Token.is_keyword()`, `Token.is_identifier()`, `Token.is_literal()` and
`Token.is_operator()` tell you what sort of token you have. Literals are
numbers, strings, booleans, `null` and `undefined`. `Token.with_positions()`
builds a token from a kind, a value and raw line and column numbers.

### Positions

Positions are `Position(line, column)` values. They start at line 1,
column 1. A token's `span` is a `Span(start, end)`, and `token.start()` and
`token.end()` return its two ends.

### Stepping through tokens

You can create a lexer and ask it for one token at a time. Once the text is
used up, `next_token()` returns an EOF token.

```python
lexer = Lexer("a + b")
first = lexer.next_token()
```

## Errors

Lexing problems raise a subclass of `jslexer.errors.LexerError`. The lexer
raises these four:

- `UnterminatedString` when a string has no closing quote
- `UnterminatedComment` when a block comment has no closing `*/`
- `InvalidNumber` when a number literal is malformed. For example, `0x` has
  no digits, and `1.2.3` is not a valid decimal.
- `UnexpectedCharacter` when a character starts no token, for example `@` or
  `#`

`jslexer.errors` also defines further error classes, such as
`InvalidEscapeSequence` and `InvalidRegexLiteral`, for use by callers. The
lexer itself never raises them. Errors print a readable message. They compare
equal when they are of the same class and carry the same details.

```python
from jslexer.errors import UnterminatedString

try:
    tokenize('"unterminated')
except UnterminatedString as exc:
    print(exc)  # Unterminated string
```

If you would rather not handle exceptions, call `tokenize_fallback`. On
success it returns the same tokens as `tokenize`. On error it returns a list
holding a single EOF token at line 1, column 1.

## What it does not do

- It is only a lexer. It builds no syntax tree and runs no code, and it has
  no command-line tool.
- Regular-expression literals are not recognised. A `/` outside a comment is
  always a division operator.
- Compound assignments such as `+=` are not produced as single tokens. `+=`
  comes out as `PLUS` followed by `ASSIGN`. The same goes for `**`, `<<`,
  `>>`, `?.` and `...`.
- A decimal number takes in every following digit, `.`, `e`, `E`, `+` and
  `-`. As a result, `10-1` written without spaces raises `InvalidNumber`.
- Errors do not report the position where they occurred.