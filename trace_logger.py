"""
TraceLogger — Captures per-step automaton state for later inspection.

Logs the state before each step, the raw and canonical symbol, the
transition taken (or the trap fallback) and run summaries to a single
JSONL file.
"""

import json
import os
import numpy as np
from dataclasses import dataclass, field, asdict
from typing import Optional


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

@dataclass
class StepRecord:
    """One logged timestep."""
    step: int
    run: int
    phase: str = "step"               # "init" or "step"

    state: int = 0                    # state before the step
    symbol: Optional[str] = None      # raw input
    canonical: Optional[str] = None   # symbol after map_symbol()
    next_state: Optional[int] = None
    transition: Optional[str] = None  # "(q, s) → q'" or "TRAP"

    accepting: bool = False           # after the step
    in_trap: bool = False


@dataclass
class RunSummary:
    """Outcome of one run() call."""
    run: int
    input_word: str
    accepted: bool = False
    path: list = field(default_factory=list)
    trapped_at: Optional[int] = None  # index of the symbol that hit the trap


# ---------------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------------

class TraceLogger:
    """Captures per-step automaton state and writes to JSONL."""

    def __init__(self, log_dir: str = "logs", filename: str = "dfa_trace.jsonl"):
        self.log_dir = log_dir
        self.log_path = os.path.join(log_dir, filename)
        self.steps: list[StepRecord] = []
        self.runs: list[RunSummary] = []
        self._step_counter = 0
        self._current: Optional[RunSummary] = None

    # -- Runs ----------------------------------------------------------------

    def begin_run(self, input_word: str, initial_state: int) -> RunSummary:
        """Open a new run and log its init step."""
        summary = RunSummary(
            run=len(self.runs),
            input_word=input_word,
            path=[initial_state],
        )
        self.runs.append(summary)
        self._current = summary
        self.log_step(state=initial_state, phase="init")
        return summary

    def end_run(self, accepted: bool) -> Optional[RunSummary]:
        summary = self._current
        if summary is not None:
            summary.accepted = accepted
        self._current = None
        return summary

    # -- Step logging --------------------------------------------------------

    def log_step(
        self,
        state: int,
        phase: str = "step",
        symbol: str | None = None,
        canonical: str | None = None,
        next_state: int | None = None,
        transition: str | None = None,
        accepting: bool = False,
        in_trap: bool = False,
    ) -> StepRecord:
        """Record a single step. Steps outside a run get run index -1."""
        run = self._current.run if self._current is not None else -1
        rec = StepRecord(
            step=self._step_counter,
            run=run,
            phase=phase,
            state=state,
            symbol=symbol,
            canonical=canonical,
            next_state=next_state,
            transition=transition,
            accepting=accepting,
            in_trap=in_trap,
        )
        self.steps.append(rec)
        self._step_counter += 1

        if self._current is not None and phase == "step":
            self._current.path.append(next_state)
            if in_trap and self._current.trapped_at is None:
                self._current.trapped_at = len(self._current.path) - 2
        return rec

    # -- Statistics ----------------------------------------------------------

    def visit_counts(self, num_states: int) -> np.ndarray:
        """How often each state 0..num_states-1 was entered across all runs."""
        visited = [q for r in self.runs for q in r.path if 0 <= q < num_states]
        if not visited:
            return np.zeros(num_states, dtype=np.int64)
        return np.bincount(np.asarray(visited, dtype=np.int64), minlength=num_states)

    # -- Serialization -------------------------------------------------------

    def save(self):
        """Write all steps followed by the run summaries to the JSONL file."""
        os.makedirs(self.log_dir, exist_ok=True)
        with open(self.log_path, "w", encoding="utf-8") as f:
            for rec in self.steps:
                row = {"kind": "step", **asdict(rec)}
                f.write(json.dumps(row, separators=(",", ":")) + "\n")
            for summary in self.runs:
                row = {"kind": "run", **asdict(summary)}
                f.write(json.dumps(row, separators=(",", ":")) + "\n")

    def load(self, path: str | None = None) -> list[dict]:
        """Load a JSONL log file and return list of row dicts."""
        p = path or self.log_path
        rows = []
        with open(p, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line:
                    rows.append(json.loads(line))
        return rows
