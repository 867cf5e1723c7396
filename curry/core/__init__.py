from .syntax import (
    Atom, Implies, And, Or, Truth, Falsity, Prop, negation,
    Var, Abs, App, Pair, Fst, Snd, Left, Right, Case, UnitTerm, Absurd, Term,
)
from .errors import (
    ErrorKind, ProofError, TypeCheckError, ParseError,
    TacticError, EndOfInput, IntegrityError,
)
from .context import Context, Sequent, EMPTY
from .typecheck import infer, check
from .engine import elaborate, Subgoal, TACTICS, PROMPT

__all__ = [
    "Atom", "Implies", "And", "Or", "Truth", "Falsity", "Prop", "negation",
    "Var", "Abs", "App", "Pair", "Fst", "Snd", "Left", "Right", "Case",
    "UnitTerm", "Absurd", "Term",
    "ErrorKind", "ProofError", "TypeCheckError", "ParseError",
    "TacticError", "EndOfInput", "IntegrityError",
    "Context", "Sequent", "EMPTY",
    "infer", "check",
    "elaborate", "Subgoal", "TACTICS", "PROMPT",
]
