"""
automata.py — Deterministic finite automaton engine over single characters.

States are plain integers (0 is the initial state), symbols are one-character
strings. Any (state, symbol) pair without an explicit transition leads to the
trap state at lookup time.
"""

import numpy as np


class TransitionTable:
    """Mapping (state, symbol) -> state. Keys are unique, last write wins."""

    def __init__(self):
        self._table: dict[tuple[int, str], int] = {}

    def set(self, state: int, symbol: str, target: int):
        self._table[(state, symbol)] = target

    def get(self, state: int, symbol: str, default=None):
        return self._table.get((state, symbol), default)

    def __contains__(self, key) -> bool:
        return key in self._table

    def __len__(self) -> int:
        return len(self._table)

    def items(self):
        return self._table.items()

    def states(self) -> list[int]:
        """Distinct source states with at least one explicit transition."""
        return sorted({q for (q, _) in self._table})

    def symbols(self) -> list[str]:
        """Distinct symbols used by any explicit transition."""
        return sorted({s for (_, s) in self._table})

    def to_matrix(self, num_states: int, alphabet, fill: int) -> np.ndarray:
        """Dense (num_states x len(alphabet)) view; missing entries hold `fill`."""
        alphabet = list(alphabet)
        matrix = np.full((num_states, len(alphabet)), fill, dtype=np.int64)
        for col, sym in enumerate(alphabet):
            for q in range(num_states):
                target = self._table.get((q, sym))
                if target is not None:
                    matrix[q, col] = target
        return matrix


class AbstractDFA:
    """
    Generic DFA: transition table, final states, trap state and a cursor.

    Subclasses configure the tables in their constructor through
    add_transition / add_final_state / set_trap, and may override
    map_symbol() to canonicalize raw input before the table lookup.
    """

    INITIAL_STATE = 0
    NO_TRAP = -1

    def __init__(self, num_states: int = 0):
        self.num_states = num_states
        self.transitions = TransitionTable()
        self.final_states: list[int] = []
        self._trap_state = self.NO_TRAP
        self._current_state = self.INITIAL_STATE

    # -- Execution -----------------------------------------------------------

    @property
    def current_state(self) -> int:
        return self._current_state

    @property
    def in_trap(self) -> bool:
        return self._current_state == self._trap_state

    def reset(self):
        """Move the cursor back to the initial state."""
        self._current_state = self.INITIAL_STATE

    def map_symbol(self, symbol: str) -> str:
        """Canonicalize a raw input symbol. Identity by default."""
        return symbol

    def step(self, symbol: str):
        """
        Perform one step for the given symbol. If there is a transition for
        it the automaton moves to the successor state, otherwise it goes to
        the trap state, where by construction it stays for every symbol.
        """
        sym = self.map_symbol(symbol)
        self._current_state = self.transitions.get(
            self._current_state, sym, self._trap_state
        )

    def is_accepting(self) -> bool:
        return self._current_state in self.final_states

    def run(self, input_word) -> bool:
        """Run the automaton on the whole input and report acceptance."""
        self.reset()
        for symbol in input_word:
            self.step(symbol)
        return self.is_accepting()

    def path(self, input_word) -> list[int]:
        """Run on the input and return the visited states, starting with 0."""
        self.reset()
        history = [self._current_state]
        for symbol in input_word:
            self.step(symbol)
            history.append(self._current_state)
        return history

    # -- Configuration -------------------------------------------------------

    def add_transition(self, from_state: int, symbol: str, to_state: int):
        self.transitions.set(from_state, symbol, to_state)

    def add_final_state(self, state: int):
        self.final_states.append(state)

    def set_trap(self, state: int):
        self._trap_state = state

    def get_trap(self) -> int:
        return self._trap_state

    def transition_matrix(self, alphabet) -> np.ndarray:
        """Dense transition matrix over `alphabet`, unmapped cells -> trap."""
        return self.transitions.to_matrix(self.num_states, alphabet, self._trap_state)
