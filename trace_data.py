"""
trace_data.py — Loads automaton JSONL traces into structured Python objects
for inspection and reporting.
"""

from trace_logger import TraceLogger


class TraceData:
    """Parsed trace log — provides step-by-step and per-run access."""

    def __init__(self, rows: list[dict]):
        self.steps = [r for r in rows if r.get("kind", "step") == "step"]
        self.runs = [r for r in rows if r.get("kind") == "run"]
        self.num_steps = len(self.steps)

    # -- Access helpers -------------------------------------------------------

    def get_step(self, idx: int) -> dict:
        """Get a step by index (0-based)."""
        if 0 <= idx < self.num_steps:
            return self.steps[idx]
        return {}

    def get_run(self, run: int) -> dict:
        for r in self.runs:
            if r.get("run") == run:
                return r
        return {}

    def get_run_steps(self, run: int) -> list[dict]:
        return [s for s in self.steps if s.get("run") == run]

    def get_path(self, run: int) -> list[int]:
        """Visited states of one run, rebuilt from its steps."""
        path = []
        for s in self.get_run_steps(run):
            if s.get("phase") == "init":
                path.append(s.get("state"))
            else:
                path.append(s.get("next_state"))
        return path

    def get_state_series(self) -> list[int]:
        """State after every logged step."""
        series = []
        for s in self.steps:
            if s.get("phase") == "init":
                series.append(s.get("state"))
            else:
                series.append(s.get("next_state"))
        return series

    def acceptance_rate(self) -> float:
        if not self.runs:
            return 0.0
        accepted = sum(1 for r in self.runs if r.get("accepted"))
        return accepted / len(self.runs)

    def trap_entries(self) -> list[dict]:
        """Steps where the automaton moved into the trap from another state."""
        hits = []
        for s in self.steps:
            if s.get("phase") != "step" or not s.get("in_trap"):
                continue
            if s.get("state") != s.get("next_state"):
                hits.append(s)
        return hits

    # -- Narrative -------------------------------------------------------------

    def describe_step(self, idx: int) -> str:
        """Generate a human-readable description of a given step."""
        step = self.get_step(idx)
        if not step:
            return "No data for this step."

        lines = [f"Step {step.get('step', '?')} (run {step.get('run', '?')})"]
        if step.get("phase") == "init":
            lines.append(f"Starting state: {step.get('state')}")
            return "\n".join(lines)

        symbol = step.get("symbol")
        canonical = step.get("canonical")
        if canonical is not None and canonical != symbol:
            lines.append(f"INPUT: {symbol!r} read as {canonical!r}")
        else:
            lines.append(f"INPUT: {symbol!r}")

        if step.get("transition") == "TRAP":
            lines.append(f"TRANSITION: none from {step.get('state')}, fell back to trap")
        else:
            lines.append(f"TRANSITION: {step.get('transition')}")

        if step.get("in_trap"):
            status = "trapped"
        elif step.get("accepting"):
            status = "accepting"
        else:
            status = "running"
        lines.append(f"RESULT: state {step.get('next_state')} ({status})")
        return "\n".join(lines)


def load_trace(path: str) -> TraceData:
    """Load a JSONL trace file."""
    return TraceData(TraceLogger().load(path))
