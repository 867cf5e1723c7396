"""
Curry: an interactive proof assistant for intuitionistic propositional logic.

Propositions are types and proofs are terms (the Curry-Howard
correspondence). A proof is built one tactic at a time -- intro, elim,
exact -- and the finished term is type-checked against the goal.

Usage:
    python -m curry                 asks whether to load or record a proof
    python -m curry --new NAME      prove interactively, record to NAME.proof
    python -m curry --load NAME     replay NAME.proof
"""

from .core.syntax import (
    Atom, Implies, And, Or, Truth, Falsity, negation,
    Var, Abs, App, Pair, Fst, Snd, Left, Right, Case, UnitTerm, Absurd,
)
from .core.errors import (
    ErrorKind, ProofError, TypeCheckError, ParseError,
    TacticError, EndOfInput, IntegrityError,
)
from .core.context import Context, Sequent
from .core.typecheck import infer, check
from .core.engine import elaborate, TACTICS
from .surface.parser import parse_type, parse_term
from .surface.printer import format_type, format_term, format_context, format_sequent
from .session import (
    Proof, run_session, prove_from_lines, record_proof, replay_proof, proof_path,
)

__all__ = [
    "Atom", "Implies", "And", "Or", "Truth", "Falsity", "negation",
    "Var", "Abs", "App", "Pair", "Fst", "Snd", "Left", "Right", "Case",
    "UnitTerm", "Absurd",
    "ErrorKind", "ProofError", "TypeCheckError", "ParseError",
    "TacticError", "EndOfInput", "IntegrityError",
    "Context", "Sequent",
    "infer", "check",
    "elaborate", "TACTICS",
    "parse_type", "parse_term",
    "format_type", "format_term", "format_context", "format_sequent",
    "Proof", "run_session", "prove_from_lines", "record_proof", "replay_proof",
    "proof_path",
]
