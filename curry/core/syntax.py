"""
Core data structures: propositions and proof terms.

These are the atoms of the whole system. Nothing in here depends on the
type checker, the tactic engine, or the surface syntax.

Propositions (types):
    Atom("A")                  A
    Implies(A, B)              A => B
    And(A, B)                  A /\\ B
    Or(A, B)                   A \\/ B
    Truth()                    T
    Falsity()                  _

Terms (proofs):
    Var("x")                   x
    Abs("x", A, t)             fun (x : A) -> t
    App(t, u)                  t u
    Pair(t, u)                 (t , u)
    Fst(t), Snd(t)             fst(t), snd(t)
    Left(t, B), Right(A, t)    left(t,B), right(A,t)
    Case(t, x, u, y, v)        case t of x -> u | y -> v
    UnitTerm()                 ()
    Absurd(t, A)               absurd(t,A)

Everything is a frozen dataclass, so equality is structural and nothing
is normalized: Implies(A, B) equals only another Implies(A, B).
"""

from dataclasses import dataclass
from typing import Union


# ── Propositions ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Atom:
    """An opaque propositional variable."""
    name: str


@dataclass(frozen=True)
class Implies:
    antecedent: "Prop"
    consequent: "Prop"


@dataclass(frozen=True)
class And:
    left: "Prop"
    right: "Prop"


@dataclass(frozen=True)
class Or:
    left: "Prop"
    right: "Prop"


@dataclass(frozen=True)
class Truth:
    """The trivially provable proposition."""


@dataclass(frozen=True)
class Falsity:
    """The absurd proposition."""


Prop = Union[Atom, Implies, And, Or, Truth, Falsity]


def negation(prop: Prop) -> Implies:
    """not A is sugar for A => _."""
    return Implies(prop, Falsity())


# ── Terms ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Var:
    name: str


@dataclass(frozen=True)
class Abs:
    """Lambda abstraction; introduces an implication."""
    name: str
    domain: Prop
    body: "Term"


@dataclass(frozen=True)
class App:
    """Application; eliminates an implication."""
    function: "Term"
    argument: "Term"


@dataclass(frozen=True)
class Pair:
    left: "Term"
    right: "Term"


@dataclass(frozen=True)
class Fst:
    term: "Term"


@dataclass(frozen=True)
class Snd:
    term: "Term"


@dataclass(frozen=True)
class Left:
    """Left injection. The right disjunct cannot be inferred, so it is carried."""
    term: "Term"
    other: Prop


@dataclass(frozen=True)
class Right:
    """Right injection. The left disjunct is carried explicitly."""
    other: Prop
    term: "Term"


@dataclass(frozen=True)
class Case:
    """Disjunction elimination: case scrutinee of x -> u | y -> v."""
    scrutinee: "Term"
    left_name: str
    left_branch: "Term"
    right_name: str
    right_branch: "Term"


@dataclass(frozen=True)
class UnitTerm:
    """The proof of Truth."""


@dataclass(frozen=True)
class Absurd:
    """Ex falso: from a proof of Falsity, a proof of any target."""
    term: "Term"
    target: Prop


Term = Union[Var, Abs, App, Pair, Fst, Snd, Left, Right, Case, UnitTerm, Absurd]
