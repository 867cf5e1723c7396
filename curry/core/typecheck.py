"""
Syntax-directed type inference for proof terms.

Each term constructor determines exactly one inference rule, so there is
no search and no backtracking: infer() either returns the unique
proposition a term proves or raises TypeCheckError. Propositions are
compared structurally, with no normalization.
"""

from typing import Optional

from .context import Context, EMPTY
from .errors import ErrorKind, TypeCheckError
from .syntax import (
    Implies, And, Or, Truth, Falsity, Prop, Term,
    Var, Abs, App, Pair, Fst, Snd, Left, Right, Case, UnitTerm, Absurd,
)


def _shape_error(term, expected: str, found: Prop) -> TypeCheckError:
    return TypeCheckError(
        f"{term!r} should prove {expected}, but proves {found!r}",
        ErrorKind.SHAPE_MISMATCH,
    )


def infer(context: Optional[Context], term: Term) -> Prop:
    """Return the proposition that term proves under context."""
    ctx = EMPTY if context is None else context

    if isinstance(term, Var):
        return ctx.lookup(term.name)

    if isinstance(term, Abs):
        return Implies(term.domain, infer(ctx.extend(term.name, term.domain), term.body))

    if isinstance(term, App):
        fn = infer(ctx, term.function)
        if not isinstance(fn, Implies):
            raise _shape_error(term.function, "an implication", fn)
        check(ctx, term.argument, fn.antecedent)
        return fn.consequent

    if isinstance(term, Pair):
        return And(infer(ctx, term.left), infer(ctx, term.right))

    if isinstance(term, Left):
        return Or(infer(ctx, term.term), term.other)

    if isinstance(term, Right):
        return Or(term.other, infer(ctx, term.term))

    if isinstance(term, Case):
        scrutinee = infer(ctx, term.scrutinee)
        if not isinstance(scrutinee, Or):
            raise _shape_error(term.scrutinee, "a disjunction", scrutinee)
        left = infer(ctx.extend(term.left_name, scrutinee.left), term.left_branch)
        right = infer(ctx.extend(term.right_name, scrutinee.right), term.right_branch)
        if left != right:
            raise TypeCheckError(
                f"case branches disagree: {left!r} vs {right!r}",
                ErrorKind.TYPE_MISMATCH,
            )
        return left

    if isinstance(term, (Fst, Snd)):
        pair = infer(ctx, term.term)
        if not isinstance(pair, And):
            raise _shape_error(term.term, "a conjunction", pair)
        return pair.left if isinstance(term, Fst) else pair.right

    if isinstance(term, UnitTerm):
        return Truth()

    if isinstance(term, Absurd):
        bottom = infer(ctx, term.term)
        if not isinstance(bottom, Falsity):
            raise _shape_error(term.term, "falsity", bottom)
        return term.target

    raise TypeError(f"not a term: {term!r}")


def check(context: Optional[Context], term: Term, expected: Prop) -> None:
    """Raise TypeCheckError unless term proves exactly expected."""
    found = infer(context, term)
    if found != expected:
        raise TypeCheckError(
            f"{term!r} proves {found!r}, expected {expected!r}",
            ErrorKind.TYPE_MISMATCH,
        )
