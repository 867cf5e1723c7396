"""
Tests for the proof driver and transcripts.

Core claims:
    - A session reads the goal, elaborates it, and re-checks the result
    - A bad goal, running out of input, or a term that fails the final
      check all end the session
    - A recorded transcript holds the goal and every command, and
      replaying it rebuilds the same term
"""

import io

import pytest

import curry.session
from curry.core.errors import EndOfInput, IntegrityError, ParseError
from curry.core.syntax import Atom, Implies, Abs, Var
from curry.session import (
    Proof, proof_path, prove_from_lines, record_proof, replay_proof, run_session,
)


A, B = Atom("A"), Atom("B")

K_SCRIPT = ["A => B => A", "intro x", "intro y", "exact x"]


class TestRunSession:
    def test_returns_goal_and_term(self):
        proof = prove_from_lines(K_SCRIPT)
        assert proof == Proof(Implies(A, Implies(B, A)),
                              Abs("x", A, Abs("y", B, Var("x"))))

    def test_str_shows_term_and_goal(self):
        proof = prove_from_lines(K_SCRIPT)
        assert str(proof) == "fun (x : A) -> fun (y : B) -> x : A => (B => A)"

    def test_interactive_display(self):
        out, log = io.StringIO(), io.StringIO()
        run_session(K_SCRIPT, log=log, out=out)
        text = out.getvalue()
        assert text.startswith("Please enter the formula to prove:\n")
        assert "Let's prove it." in text
        assert "x : A |- B => A" in text
        assert "? " in text
        assert text.endswith("Typechecking... ok.\n")
        assert log.getvalue() == "".join(line + "\n" for line in K_SCRIPT)

    def test_non_interactive_display(self):
        out, log = io.StringIO(), io.StringIO()
        run_session(K_SCRIPT, log=log, out=out, interactive=False)
        text = out.getvalue()
        assert text.startswith("Goal:\nA => B => A\n")
        assert "? " not in text
        # The goal is already in a replayed transcript; only commands are echoed.
        assert log.getvalue() == "intro x\nintro y\nexact x\n"

    def test_quiet_session_prints_nothing(self):
        out = io.StringIO()
        prove_from_lines(K_SCRIPT, out=out)
        assert out.getvalue() == ""

    def test_recoverable_errors_do_not_end_the_session(self):
        out = io.StringIO()
        proof = prove_from_lines(["A => A", "cut", "exact nope", "intro x", "exact x"],
                                 out=out)
        assert proof.term == Abs("x", A, Var("x"))
        assert "The cut tactic is not implemented." in out.getvalue()

    def test_bad_goal_is_fatal(self):
        with pytest.raises(ParseError):
            prove_from_lines(["A =>", "intro x"])

    def test_no_goal_is_fatal(self):
        with pytest.raises(EndOfInput):
            prove_from_lines([])

    def test_unfinished_proof_is_fatal(self):
        with pytest.raises(EndOfInput):
            prove_from_lines(["A => B => A", "intro x"])

    def test_final_check_failure_is_an_integrity_error(self, monkeypatch):
        monkeypatch.setattr(curry.session, "elaborate", lambda *a, **k: Var("x"))
        with pytest.raises(IntegrityError):
            prove_from_lines(["A => A"])


class TestTranscripts:
    def test_proof_path(self):
        assert proof_path("k") == "k.proof"

    def test_record_writes_every_line(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        lines = ["A => A", "intro", "intro x", "exact x"]
        record_proof("identity", lines, out=io.StringIO())
        assert (tmp_path / "identity.proof").read_text() == "".join(l + "\n" for l in lines)

    def test_replay_rebuilds_the_same_term(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        recorded = record_proof("k", K_SCRIPT, out=io.StringIO())
        out = io.StringIO()
        replayed = replay_proof("k", out=out)
        assert replayed == recorded
        text = out.getvalue()
        assert text.startswith("Goal:\n")
        assert "intro y\n" in text
        assert text.endswith("ok.\n")

    def test_interrupted_recording_keeps_issued_commands(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(EndOfInput):
            record_proof("partial", ["A => B => A", "intro x"], verbose=False)
        assert (tmp_path / "partial.proof").read_text() == "A => B => A\nintro x\n"

    def test_replay_missing_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(FileNotFoundError):
            replay_proof("nothing", verbose=False)
