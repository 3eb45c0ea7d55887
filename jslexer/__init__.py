"""Lexer for JavaScript/ECMAScript source with line and column tracking."""

__version__ = "0.1.0"
__all__ = ["errors", "lexer", "tokens"]