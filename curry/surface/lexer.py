"""
Tokenizer for the surface syntax of propositions and terms.

One regex table, tried in order at each position. Identifiers that are
keywords come out as their own token type, and the Unicode spellings
of the connectives are folded onto the ASCII token types, so the parser
never sees the difference.
"""

import re
from dataclasses import dataclass
from typing import List

from ..core.errors import ParseError


@dataclass
class Token:
    type: str
    value: str
    col: int


KEYWORDS = {
    "fun": "FUN",
    "case": "CASE",
    "of": "OF",
    "fst": "FST",
    "snd": "SND",
    "left": "LEFT",
    "right": "RIGHT",
    "absurd": "ABSURD",
    "not": "NOT",
    "T": "TRUE",
}

SYMBOL_ALIASES = {
    "λ": "FUN",
    "→": "ARROW",
    "⇒": "IMPLIES",
    "∧": "AND",
    "∨": "OR",
    "⊤": "TRUE",
    "⊥": "FALSE",
    "¬": "NOT",
}

IDENT_PATTERN = r"[A-Za-z][A-Za-z0-9_']*"

TOKEN_PATTERNS = [
    ("WHITESPACE", r"\s+"),
    ("ARROW", r"->"),
    ("IMPLIES", r"=>"),
    ("AND", r"/\\"),
    ("OR", r"\\/"),
    ("IDENT", IDENT_PATTERN),
    ("FALSE", r"_"),
    ("LPAREN", r"\("),
    ("RPAREN", r"\)"),
    ("COMMA", r","),
    ("COLON", r":"),
    ("PIPE", r"\|"),
    ("SYMBOL", "[" + "".join(SYMBOL_ALIASES) + "]"),
]

_REGEX = re.compile("|".join(f"(?P<{name}>{pat})" for name, pat in TOKEN_PATTERNS))


def is_identifier(name: str) -> bool:
    """Can name be written, and referred to, as a variable in surface syntax?"""
    return re.fullmatch(IDENT_PATTERN, name) is not None and name not in KEYWORDS


def tokenize(source: str) -> List[Token]:
    tokens = []
    pos = 0
    while pos < len(source):
        match = _REGEX.match(source, pos)
        if not match:
            raise ParseError(f"Unexpected character: {source[pos]!r}", pos + 1)
        kind, value = match.lastgroup, match.group()
        if kind == "IDENT":
            kind = KEYWORDS.get(value, "IDENT")
        elif kind == "SYMBOL":
            kind = SYMBOL_ALIASES[value]
        if kind != "WHITESPACE":
            tokens.append(Token(kind, value, pos + 1))
        pos = match.end()
    tokens.append(Token("EOF", "", len(source) + 1))
    return tokens
