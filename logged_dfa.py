"""
Tracing variants of the automata — subclasses that instrument step() and
run() to emit per-step TraceLogger records.
"""

from comment_dfa import CommentDFA
from trace_logger import TraceLogger
from word_dfa import WordDFA


class TracingMixin:
    """Adds TraceLogger recording to any AbstractDFA subclass."""

    def __init__(self, *args, log_dir="logs", **kwargs):
        super().__init__(*args, **kwargs)
        self.logger = TraceLogger(log_dir=log_dir)

    def step(self, symbol):
        before = self.current_state
        canonical = self.map_symbol(symbol)
        fell_back = (before, canonical) not in self.transitions
        super().step(symbol)
        after = self.current_state

        if fell_back:
            transition = "TRAP"
        else:
            transition = f"({before}, {canonical!r}) → {after}"
        self.logger.log_step(
            state=before,
            symbol=symbol,
            canonical=canonical,
            next_state=after,
            transition=transition,
            accepting=self.is_accepting(),
            in_trap=self.in_trap,
        )

    def run(self, input_word):
        symbols = list(input_word)
        self.reset()
        self.logger.begin_run("".join(str(s) for s in symbols), self.current_state)
        for symbol in symbols:
            self.step(symbol)
        accepted = self.is_accepting()
        self.logger.end_run(accepted)
        return accepted

    def save_log(self):
        """Write all logged steps to disk."""
        self.logger.save()
        return self.logger.log_path


class LoggedWordDFA(TracingMixin, WordDFA):
    """WordDFA with per-step logging."""


class LoggedCommentDFA(TracingMixin, CommentDFA):
    """CommentDFA with per-step logging."""
