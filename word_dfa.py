from automata import AbstractDFA


class WordDFA(AbstractDFA):
    """
    DFA recognizing exactly one word.

    For "foo" the automaton looks like  -> 0 -f-> 1 -o-> 2 -o-> [3]
    and every other letter, from every state including the final one,
    leads to the trap state 4 where the automaton then remains.
    """

    def __init__(self, word: str):
        n = len(word)
        super().__init__(num_states=n + 2)
        self.word = word
        trap = n + 1
        self.set_trap(trap)

        # Default every letter of the word to the trap, trap included
        for letter in set(word):
            for q in range(n + 2):
                self.add_transition(q, letter, trap)

        for i, letter in enumerate(word):
            self.add_transition(i, letter, i + 1)

        self.add_final_state(n)
