"""
Typing contexts and sequents.

A Context is an association list of (name, proposition) bindings.
Lookup returns the most recently added binding for a name, so a later
x shadows an earlier x. Contexts are immutable: extend() returns a new
context and leaves the old one alone, which is what lets sibling
subgoals each keep their own snapshot.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

from .errors import ErrorKind, TypeCheckError
from .syntax import Prop


@dataclass(frozen=True)
class Context:
    # Most recent binding first.
    bindings: Tuple[Tuple[str, Prop], ...] = ()

    @classmethod
    def of(cls, *pairs) -> "Context":
        """Build a context from (name, prop) pairs listed oldest first."""
        ctx = cls()
        for name, prop in pairs:
            ctx = ctx.extend(name, prop)
        return ctx

    def extend(self, name: str, prop: Prop) -> "Context":
        return Context(((name, prop),) + self.bindings)

    def lookup(self, name: str) -> Prop:
        for bound, prop in self.bindings:
            if bound == name:
                return prop
        raise TypeCheckError(f"Unbound variable: {name}", ErrorKind.UNBOUND_VARIABLE)

    def __contains__(self, name) -> bool:
        return any(bound == name for bound, _ in self.bindings)

    def __iter__(self) -> Iterator[Tuple[str, Prop]]:
        """Oldest binding first, the order they were introduced in."""
        return iter(reversed(self.bindings))

    def __len__(self) -> int:
        return len(self.bindings)


EMPTY = Context()


@dataclass(frozen=True)
class Sequent:
    """A context paired with the goal to prove in it."""
    context: Context
    goal: Prop
