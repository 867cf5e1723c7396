"""
The tactic engine.

Given a sequent, read one tactic command at a time until the goal is
discharged. A tactic either closes the goal with a term, or opens exactly
one subgoal together with a way to wrap the subgoal's term into a term
for the current goal. There is never more than one open goal, so there
is no goal stack: subgoals are handled by recursion, and the recursion
depth is bounded by the size of the goal.

A tactic that does not apply raises TacticError. The engine reports it
on the display and asks again for the same goal. Nothing else is caught
here: end of input, or an error from a collaborator, ends the session.

Commands are echoed verbatim to the log as they are read, before they
are interpreted, so the log replays the session exactly.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, TextIO, Union

from .context import Context, EMPTY, Sequent
from .errors import EndOfInput, ErrorKind, ParseError, TacticError, TypeCheckError
from .syntax import Implies, Prop, Term, Abs, App, Var
from .typecheck import check
from ..surface.lexer import is_identifier
from ..surface.parser import parse_term
from ..surface.printer import format_sequent


PROMPT = "? "


@dataclass(frozen=True)
class Subgoal:
    """One new goal, and how its proof becomes a proof of the parent goal."""
    sequent: Sequent
    wrap: Callable[[Term], Term]


TacticResult = Union[Term, Subgoal]


# ── Tactics ──────────────────────────────────────────────────────────────────

def intro(seq: Sequent, arg: str) -> TacticResult:
    """A => B: assume A under the given name, then prove B."""
    goal = seq.goal
    if not isinstance(goal, Implies):
        raise TacticError("Don't know how to introduce this.", ErrorKind.SHAPE_MISMATCH)
    if not arg:
        raise TacticError("Please provide an argument for intro.", ErrorKind.MISSING_ARGUMENT)
    if not is_identifier(arg):
        raise TacticError(f"Invalid name for intro: {arg}", ErrorKind.SYNTAX_ERROR)
    domain = goal.antecedent
    return Subgoal(
        Sequent(seq.context.extend(arg, domain), goal.consequent),
        lambda body: Abs(arg, domain, body),
    )


def exact(seq: Sequent, arg: str) -> TacticResult:
    """Close the goal with a term written out in full."""
    try:
        term = parse_term(arg)
    except ParseError as e:
        raise TacticError(f"Could not parse term: {e}", ErrorKind.SYNTAX_ERROR) from e
    try:
        check(seq.context, term, seq.goal)
    except TypeCheckError as e:
        raise TacticError(f"Not the right type. {e}", e.kind) from e
    return term


def elim(seq: Sequent, arg: str) -> TacticResult:
    """Goal B with f : A => B in context: prove A, then apply f."""
    if not arg:
        raise TacticError("Please provide an argument for elim.", ErrorKind.MISSING_ARGUMENT)
    if arg not in seq.context:
        raise TacticError(f"Unknown hypothesis: {arg}.", ErrorKind.UNBOUND_VARIABLE)
    hypothesis = seq.context.lookup(arg)
    if not isinstance(hypothesis, Implies):
        raise TacticError("Argument provided is not a function.", ErrorKind.SHAPE_MISMATCH)
    if hypothesis.consequent != seq.goal:
        raise TacticError(
            "The specified function return type does not match the goal.",
            ErrorKind.TYPE_MISMATCH,
        )
    return Subgoal(
        Sequent(seq.context, hypothesis.antecedent),
        lambda argument: App(Var(arg), argument),
    )


def cut(seq: Sequent, arg: str) -> TacticResult:
    raise TacticError("The cut tactic is not implemented.", ErrorKind.NOT_IMPLEMENTED)


TACTICS = {
    "intro": intro,
    "exact": exact,
    "elim":  elim,
    "cut":   cut,
}


def split_command(line: str):
    """Split at the first space into (tactic name, trimmed argument)."""
    name, _, arg = line.partition(" ")
    return name, arg.strip()


def run_tactic(seq: Sequent, line: str) -> TacticResult:
    name, arg = split_command(line)
    tactic = TACTICS.get(name)
    if tactic is None:
        raise TacticError(f"Unknown command: {name}", ErrorKind.UNKNOWN_COMMAND)
    return tactic(seq, arg)


# ── The loop ─────────────────────────────────────────────────────────────────

def read_command(commands: Iterator[str], log: Optional[TextIO] = None) -> str:
    """Next command line, echoed to the log before anything else happens."""
    try:
        line = next(commands)
    except StopIteration:
        raise EndOfInput() from None
    line = line.rstrip("\r\n")
    if log is not None:
        log.write(line + "\n")
        log.flush()
    return line


def _elaborate(seq, commands, log, out, verbose, prompt, unicode) -> Term:
    while True:
        if verbose:
            print(format_sequent(seq, unicode), file=out)
            if prompt:
                print(prompt, end="", file=out, flush=True)
        line = read_command(commands, log)
        try:
            result = run_tactic(seq, line)
        except TacticError as e:
            print(e, file=out)
            continue
        if isinstance(result, Subgoal):
            sub = _elaborate(result.sequent, commands, log, out, verbose, prompt, unicode)
            return result.wrap(sub)
        return result


def elaborate(
    context: Optional[Context],
    goal: Prop,
    commands: Iterable[str],
    log: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
    verbose: bool = True,
    prompt: Optional[str] = PROMPT,
    unicode: bool = False,
) -> Term:
    """
    Build a term proving goal under context, driven by tactic commands.

    Args:
        context:   starting context (None for the empty one)
        goal:      proposition to prove
        commands:  lines of tactic commands; shared by every subgoal
        log:       if set, every command read is echoed here
        out:       where sequents, prompts and tactic errors go
                   (default: sys.stdout)
        verbose:   show the sequent and prompt before each step
        prompt:    prompt string; None or "" for no prompt
        unicode:   display sequents with Unicode connectives

    Raises:
        EndOfInput if commands run out with a goal still open.
    """
    seq = Sequent(EMPTY if context is None else context, goal)
    return _elaborate(seq, iter(commands), log, out, verbose, prompt, unicode)
