"""
Pretty-printing of propositions, terms, contexts and sequents.

Output is valid surface syntax: parse_type(format_type(a)) == a and
parse_term(format_term(t)) == t, in both ASCII and Unicode mode.
Compound sub-expressions are parenthesized; the outermost one is not.
"""

from ..core.context import Context, Sequent
from ..core.syntax import (
    Atom, Implies, And, Or, Truth, Falsity,
    Var, Abs, App, Pair, Fst, Snd, Left, Right, Case, UnitTerm, Absurd,
)


ASCII_SYMBOLS = {
    "implies": "=>", "and": "/\\", "or": "\\/",
    "truth": "T", "falsity": "_",
    "fun": "fun", "arrow": "->", "turnstile": "|-",
}

UNICODE_SYMBOLS = {
    "implies": "⇒", "and": "∧", "or": "∨",
    "truth": "⊤", "falsity": "⊥",
    "fun": "λ", "arrow": "→", "turnstile": "⊢",
}


def _symbols(unicode):
    return UNICODE_SYMBOLS if unicode else ASCII_SYMBOLS


# ── Propositions ─────────────────────────────────────────────────────────────

def _type(prop, sym, nested):
    if isinstance(prop, Atom):
        return prop.name
    if isinstance(prop, Truth):
        return sym["truth"]
    if isinstance(prop, Falsity):
        return sym["falsity"]
    if isinstance(prop, Implies):
        op, a, b = sym["implies"], prop.antecedent, prop.consequent
    elif isinstance(prop, And):
        op, a, b = sym["and"], prop.left, prop.right
    elif isinstance(prop, Or):
        op, a, b = sym["or"], prop.left, prop.right
    else:
        raise TypeError(f"not a proposition: {prop!r}")
    text = f"{_type(a, sym, True)} {op} {_type(b, sym, True)}"
    return f"({text})" if nested else text


def format_type(prop, unicode=False) -> str:
    return _type(prop, _symbols(unicode), False)


# ── Terms ────────────────────────────────────────────────────────────────────

def _term(term, sym, nested):
    ty = lambda p: _type(p, sym, False)
    top = lambda t: _term(t, sym, False)
    sub = lambda t: _term(t, sym, True)

    if isinstance(term, Var):
        return term.name
    if isinstance(term, UnitTerm):
        return "()"
    if isinstance(term, Pair):
        return f"({top(term.left)} , {top(term.right)})"
    if isinstance(term, Fst):
        return f"fst({top(term.term)})"
    if isinstance(term, Snd):
        return f"snd({top(term.term)})"
    if isinstance(term, Left):
        return f"left({top(term.term)},{ty(term.other)})"
    if isinstance(term, Right):
        return f"right({ty(term.other)},{top(term.term)})"
    if isinstance(term, Absurd):
        return f"absurd({top(term.term)},{ty(term.target)})"

    if isinstance(term, App):
        text = f"{sub(term.function)} {sub(term.argument)}"
    elif isinstance(term, Abs):
        text = (f"{sym['fun']} ({term.name} : {ty(term.domain)}) "
                f"{sym['arrow']} {top(term.body)}")
    elif isinstance(term, Case):
        arrow = sym["arrow"]
        text = (f"case {sub(term.scrutinee)} of "
                f"{term.left_name} {arrow} {sub(term.left_branch)} | "
                f"{term.right_name} {arrow} {sub(term.right_branch)}")
    else:
        raise TypeError(f"not a term: {term!r}")
    return f"({text})" if nested else text


def format_term(term, unicode=False) -> str:
    return _term(term, _symbols(unicode), False)


# ── Contexts and sequents ────────────────────────────────────────────────────

def format_context(ctx: Context, unicode=False) -> str:
    return ", ".join(f"{name} : {format_type(prop, unicode)}" for name, prop in ctx)


def format_sequent(seq: Sequent, unicode=False) -> str:
    turnstile = _symbols(unicode)["turnstile"]
    return f"{format_context(seq.context, unicode)} {turnstile} {format_type(seq.goal, unicode)}".lstrip()
