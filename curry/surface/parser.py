"""
Recursive-descent parser from surface text to propositions and terms.

Propositions, loosest binding first:
    A => B          right-associative
    A \\/ B          right-associative
    A /\\ B          right-associative
    not A           sugar for A => _
    T, _, atoms, ( A )

Terms:
    fun (x : A) -> t
    case t of x -> u | y -> v
    t u v           application, left-associative
    x, (), (t), (t , u), fst(t), snd(t), left(t,B), right(A,t), absurd(t,A)

Bodies of fun and the last case branch extend as far right as possible.
"""

from typing import List

from ..core.errors import ParseError
from ..core.syntax import (
    Atom, Implies, And, Or, Truth, Falsity, Prop, Term, negation,
    Var, Abs, App, Pair, Fst, Snd, Left, Right, Case, UnitTerm, Absurd,
)
from .lexer import Token, tokenize


# Tokens that can begin an argument in an application.
SIMPLE_START = {"IDENT", "LPAREN", "FST", "SND", "LEFT", "RIGHT", "ABSURD"}


class Parser:

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def current(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        tok = self.current()
        if tok.type != "EOF":
            self.pos += 1
        return tok

    def match(self, *token_types: str) -> bool:
        return self.current().type in token_types

    def expect(self, token_type: str) -> Token:
        tok = self.current()
        if tok.type != token_type:
            found = repr(tok.value) if tok.value else "end of input"
            raise ParseError(f"Expected {token_type}, got {found}", tok.col)
        return self.advance()

    def expect_end(self):
        self.expect("EOF")

    # ── Propositions ─────────────────────────────────────────────────────────

    def parse_type(self) -> Prop:
        left = self.parse_or()
        if self.match("IMPLIES"):
            self.advance()
            return Implies(left, self.parse_type())
        return left

    def parse_or(self) -> Prop:
        left = self.parse_and()
        if self.match("OR"):
            self.advance()
            return Or(left, self.parse_or())
        return left

    def parse_and(self) -> Prop:
        left = self.parse_unary()
        if self.match("AND"):
            self.advance()
            return And(left, self.parse_and())
        return left

    def parse_unary(self) -> Prop:
        if self.match("NOT"):
            self.advance()
            return negation(self.parse_unary())
        tok = self.current()
        if tok.type == "IDENT":
            self.advance()
            return Atom(tok.value)
        if tok.type == "TRUE":
            self.advance()
            return Truth()
        if tok.type == "FALSE":
            self.advance()
            return Falsity()
        if tok.type == "LPAREN":
            self.advance()
            prop = self.parse_type()
            self.expect("RPAREN")
            return prop
        found = repr(tok.value) if tok.value else "end of input"
        raise ParseError(f"Expected a proposition, got {found}", tok.col)

    # ── Terms ────────────────────────────────────────────────────────────────

    def parse_term(self) -> Term:
        if self.match("FUN"):
            self.advance()
            self.expect("LPAREN")
            name = self.expect("IDENT").value
            self.expect("COLON")
            domain = self.parse_type()
            self.expect("RPAREN")
            self.expect("ARROW")
            return Abs(name, domain, self.parse_term())

        if self.match("CASE"):
            self.advance()
            scrutinee = self.parse_term()
            self.expect("OF")
            x = self.expect("IDENT").value
            self.expect("ARROW")
            u = self.parse_term()
            self.expect("PIPE")
            y = self.expect("IDENT").value
            self.expect("ARROW")
            v = self.parse_term()
            return Case(scrutinee, x, u, y, v)

        term = self.parse_simple()
        while self.current().type in SIMPLE_START:
            term = App(term, self.parse_simple())
        return term

    def parse_simple(self) -> Term:
        tok = self.advance()

        if tok.type == "IDENT":
            return Var(tok.value)

        if tok.type == "LPAREN":
            if self.match("RPAREN"):
                self.advance()
                return UnitTerm()
            term = self.parse_term()
            if self.match("COMMA"):
                self.advance()
                term = Pair(term, self.parse_term())
            self.expect("RPAREN")
            return term

        if tok.type in ("FST", "SND"):
            self.expect("LPAREN")
            inner = self.parse_term()
            self.expect("RPAREN")
            return Fst(inner) if tok.type == "FST" else Snd(inner)

        if tok.type in ("LEFT", "ABSURD"):
            self.expect("LPAREN")
            inner = self.parse_term()
            self.expect("COMMA")
            prop = self.parse_type()
            self.expect("RPAREN")
            return Left(inner, prop) if tok.type == "LEFT" else Absurd(inner, prop)

        if tok.type == "RIGHT":
            self.expect("LPAREN")
            prop = self.parse_type()
            self.expect("COMMA")
            inner = self.parse_term()
            self.expect("RPAREN")
            return Right(prop, inner)

        found = repr(tok.value) if tok.value else "end of input"
        raise ParseError(f"Expected a term, got {found}", tok.col)


def parse_type(text: str) -> Prop:
    """Parse a whole string as a proposition."""
    parser = Parser(tokenize(text))
    prop = parser.parse_type()
    parser.expect_end()
    return prop


def parse_term(text: str) -> Term:
    """Parse a whole string as a proof term."""
    parser = Parser(tokenize(text))
    term = parser.parse_term()
    parser.expect_end()
    return term
