"""Tests for logged_dfa.py — verifies logging during automaton runs."""

import tempfile
import pytest

from alphabet import ANY
from logged_dfa import LoggedCommentDFA, LoggedWordDFA


class TestLoggedWord:
    def test_same_results_as_plain(self):
        dfa = LoggedWordDFA("foo", log_dir=tempfile.mkdtemp())
        assert dfa.run("foo") is True
        assert dfa.run("fo") is False
        assert dfa.run("fox") is False

    def test_step_count(self):
        """1 init step + N symbol steps."""
        dfa = LoggedWordDFA("abc", log_dir=tempfile.mkdtemp())
        dfa.run("abc")
        assert len(dfa.logger.steps) == 4

    def test_run_summary(self):
        dfa = LoggedWordDFA("ab", log_dir=tempfile.mkdtemp())
        dfa.run("ab")
        summary = dfa.logger.runs[0]
        assert summary.input_word == "ab"
        assert summary.accepted is True
        assert summary.path == [0, 1, 2]

    def test_explicit_transition_label(self):
        dfa = LoggedWordDFA("ab", log_dir=tempfile.mkdtemp())
        dfa.run("a")
        rec = dfa.logger.steps[1]
        assert rec.transition == "(0, 'a') → 1"
        assert rec.next_state == 1

    def test_fallback_logged_as_trap(self):
        dfa = LoggedWordDFA("ab", log_dir=tempfile.mkdtemp())
        dfa.run("az")
        rec = dfa.logger.steps[-1]
        assert rec.transition == "TRAP"
        assert rec.in_trap is True
        assert dfa.logger.runs[0].trapped_at == 1

    def test_one_shot_iterable(self):
        dfa = LoggedWordDFA("ab", log_dir=tempfile.mkdtemp())
        assert dfa.run(iter("ab")) is True
        assert dfa.logger.runs[0].input_word == "ab"
        assert dfa.logger.runs[0].path == [0, 1, 2]

    def test_save_log(self):
        dfa = LoggedWordDFA("ab", log_dir=tempfile.mkdtemp())
        dfa.run("ab")
        dfa.run("b")
        path = dfa.save_log()
        rows = dfa.logger.load(path)
        runs = [r for r in rows if r["kind"] == "run"]
        assert [r["accepted"] for r in runs] == [True, False]


class TestLoggedComment:
    def test_canonical_symbols_recorded(self):
        dfa = LoggedCommentDFA(log_dir=tempfile.mkdtemp())
        assert dfa.run("{x}") is True
        recs = dfa.logger.steps[1:]
        assert [r.symbol for r in recs] == ["{", "x", "}"]
        assert [r.canonical for r in recs] == ["{", ANY, "}"]
        assert recs[-1].accepting is True

    def test_trap_self_loop_is_explicit(self):
        dfa = LoggedCommentDFA(log_dir=tempfile.mkdtemp())
        dfa.run("/*x")
        recs = dfa.logger.steps[1:]
        assert recs[1].next_state == 8
        # trap is wired for every symbol, so no fallback is needed
        assert all(r.transition != "TRAP" for r in recs)

    def test_visit_counts(self):
        dfa = LoggedCommentDFA(log_dir=tempfile.mkdtemp())
        dfa.run("{}")
        dfa.run("{")
        counts = dfa.logger.visit_counts(dfa.num_states)
        assert counts[0] == 2
        assert counts[4] == 2
        assert counts[3] == 1
