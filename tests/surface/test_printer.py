"""
Tests for the printer.

Core claims:
    - The outermost expression is not parenthesized; compound children are
    - Output parses back to a structurally equal value, in ASCII and Unicode
"""

from hypothesis import given
from hypothesis import strategies as st

from curry.core.context import Context, Sequent
from curry.core.syntax import (
    Atom, Implies, And, Or, Truth, Falsity,
    Var, Abs, App, Pair, Fst, Snd, Left, Right, Case, UnitTerm, Absurd,
)
from curry.surface.parser import parse_type, parse_term
from curry.surface.printer import (
    format_type, format_term, format_context, format_sequent,
)


A, B, C = Atom("A"), Atom("B"), Atom("C")


# ── Generators ───────────────────────────────────────────────────────────────

atoms = st.sampled_from(["A", "B", "C", "Prop1", "Q'"]).map(Atom)
names = st.sampled_from(["x", "y", "t", "f", "h_2"])

props = st.recursive(
    st.one_of(atoms, st.just(Truth()), st.just(Falsity())),
    lambda children: st.one_of(
        st.builds(Implies, children, children),
        st.builds(And, children, children),
        st.builds(Or, children, children),
    ),
    max_leaves=8,
)

terms = st.recursive(
    st.one_of(names.map(Var), st.just(UnitTerm())),
    lambda children: st.one_of(
        st.builds(Abs, names, props, children),
        st.builds(App, children, children),
        st.builds(Pair, children, children),
        st.builds(Fst, children),
        st.builds(Snd, children),
        st.builds(Left, children, props),
        st.builds(Right, props, children),
        st.builds(Case, children, names, children, names, children),
        st.builds(Absurd, children, props),
    ),
    max_leaves=10,
)


# ── Unit tests ───────────────────────────────────────────────────────────────

class TestFormatType:
    def test_outermost_is_bare(self):
        assert format_type(Implies(A, Implies(B, A))) == "A => (B => A)"

    def test_left_nested_implication(self):
        assert format_type(Implies(Implies(A, B), C)) == "(A => B) => C"

    def test_constants(self):
        assert format_type(And(Truth(), Or(Falsity(), A))) == "T /\\ (_ \\/ A)"

    def test_unicode(self):
        assert format_type(Implies(And(A, Truth()), Or(B, Falsity())), unicode=True) == \
            "(A ∧ ⊤) ⇒ (B ∨ ⊥)"


class TestFormatTerm:
    def test_curried_abstraction(self):
        term = Abs("x", A, Abs("y", B, Var("x")))
        assert format_term(term) == "fun (x : A) -> fun (y : B) -> x"

    def test_application_parenthesizes_compound_arguments(self):
        term = App(Var("f"), App(Var("g"), Var("x")))
        assert format_term(term) == "f (g x)"

    def test_builtins(self):
        term = Pair(Snd(Var("t")), Fst(Var("t")))
        assert format_term(term) == "(snd(t) , fst(t))"
        assert format_term(UnitTerm()) == "()"
        assert format_term(Absurd(Var("b"), A)) == "absurd(b,A)"

    def test_case(self):
        term = Case(Var("t"), "x", Right(B, Var("x")), "y", Left(Var("y"), A))
        assert format_term(term) == "case t of x -> right(B,x) | y -> left(y,A)"

    def test_unicode(self):
        assert format_term(Abs("x", Implies(A, B), Var("x")), unicode=True) == \
            "λ (x : A ⇒ B) → x"


class TestFormatContext:
    def test_oldest_binding_first(self):
        ctx = Context.of(("f", Implies(A, B)), ("a", A))
        assert format_context(ctx) == "f : A => B, a : A"

    def test_sequent(self):
        seq = Sequent(Context.of(("f", Implies(A, B)), ("y", A)), B)
        assert format_sequent(seq) == "f : A => B, y : A |- B"

    def test_empty_sequent(self):
        assert format_sequent(Sequent(Context(), A)) == "|- A"
        assert format_sequent(Sequent(Context(), A), unicode=True) == "⊢ A"


# ── Property-based tests ─────────────────────────────────────────────────────

class TestPrinterProperties:

    @given(props, st.booleans())
    def test_type_round_trip(self, prop, unicode):
        assert parse_type(format_type(prop, unicode)) == prop

    @given(terms, st.booleans())
    def test_term_round_trip(self, term, unicode):
        assert parse_term(format_term(term, unicode)) == term
