"""Lexer, parser and scope-based type lookup for the flang language."""

__version__ = "0.1.0"
__all__ = ["ast", "checker", "lexer", "parser", "span", "tokens"]