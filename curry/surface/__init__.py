from .lexer import Token, tokenize
from .parser import Parser, parse_type, parse_term
from .printer import format_type, format_term, format_context, format_sequent

__all__ = [
    "Token", "tokenize",
    "Parser", "parse_type", "parse_term",
    "format_type", "format_term", "format_context", "format_sequent",
]
