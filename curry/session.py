"""
The proof driver: one whole proof session from goal to checked term.

A session reads the goal from the first command line, runs the tactic
engine on it until the goal is discharged, prints the resulting term,
and type-checks that term against the goal once more. The last check
can only fail if the engine itself is wrong, so a failure there is an
IntegrityError, not a tactic error.

Transcripts are plain text: the goal on the first line, then one tactic
per line in the order they were issued. Recording a session writes
exactly that; replaying one feeds the file back in as the command source.
"""

import sys
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

from .core.context import EMPTY
from .core.engine import PROMPT, elaborate, read_command
from .core.errors import IntegrityError, TypeCheckError
from .core.syntax import Prop, Term
from .core.typecheck import check
from .surface.parser import parse_type
from .surface.printer import format_term, format_type


PROOF_SUFFIX = ".proof"


@dataclass(frozen=True)
class Proof:
    """A finished proof: the goal and the term that proves it."""
    goal: Prop
    term: Term

    def __str__(self):
        return f"{format_term(self.term)} : {format_type(self.goal)}"


def proof_path(name: str) -> str:
    return name + PROOF_SUFFIX


def run_session(
    commands: Iterable[str],
    log: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
    interactive: bool = True,
    verbose: bool = True,
    unicode: bool = False,
) -> Proof:
    """
    Run one proof session.

    Args:
        commands:     goal line followed by tactic lines
        log:          transcript sink; every line read is echoed here
        out:          display stream (default: sys.stdout)
        interactive:  ask for the goal and show the tactic prompt
        verbose:      show sequents and progress messages
        unicode:      display with Unicode connectives

    Raises:
        ParseError      if the goal does not parse
        EndOfInput      if commands run out before the proof is done
        IntegrityError  if the finished term does not check
    """
    commands = iter(commands)

    def say(*args, **kwargs):
        if verbose:
            print(*args, file=out, **kwargs)

    say("Please enter the formula to prove:" if interactive else "Goal:")
    # A replayed transcript already holds its goal; only a fresh session writes it.
    goal_text = read_command(commands, log if interactive else None)
    say(goal_text)
    goal = parse_type(goal_text)

    say("Let's prove it.")
    term = elaborate(
        EMPTY, goal, commands,
        log=log, out=out, verbose=verbose,
        prompt=PROMPT if interactive else None,
        unicode=unicode,
    )
    say("done.")
    say("Proof term is")
    say(format_term(term, unicode))

    say("Typechecking... ", end="", flush=True)
    try:
        check(EMPTY, term, goal)
    except TypeCheckError as e:
        raise IntegrityError(f"Proof term does not prove the goal: {e}") from e
    say("ok.")
    return Proof(goal, term)


def prove_from_lines(lines: Iterable[str], out: Optional[TextIO] = None,
                     verbose: bool = False, unicode: bool = False) -> Proof:
    """Run a non-interactive session over in-memory lines (goal first)."""
    return run_session(lines, out=out, interactive=False,
                       verbose=verbose, unicode=unicode)


def record_proof(name: str, commands: Iterable[str], out: Optional[TextIO] = None,
                 verbose: bool = True, unicode: bool = False) -> Proof:
    """Run an interactive session, writing its transcript to <name>.proof."""
    with open(proof_path(name), "w") as log:
        return run_session(commands, log=log, out=out, interactive=True,
                           verbose=verbose, unicode=unicode)


def replay_proof(name: str, out: Optional[TextIO] = None,
                 verbose: bool = True, unicode: bool = False) -> Proof:
    """Replay <name>.proof, echoing each command to the display."""
    with open(proof_path(name)) as commands:
        echo = (out or sys.stdout) if verbose else None
        return run_session(commands, log=echo, out=out,
                           interactive=False, verbose=verbose, unicode=unicode)
