from automata import AbstractDFA
from alphabet import ANY, COMMENT_ALPHABET, canonicalize


# States
START = 0
SLASH = 1           # after the first '/'
LINE_BODY = 2       # inside // ... \n
ACCEPT = 3
BRACE_BODY = 4      # inside { ... }
PAREN = 5           # after '('
STAR_BODY = 6       # inside (* ... *)
STAR_CLOSE = 7      # saw '*' inside (* ... *)
TRAP = 8


class CommentDFA(AbstractDFA):
    """
    DFA recognizing comments within source code. There are three kinds:
      1. a single line comment that starts with // and ends with a newline
      2. a multiline comment that starts with (* and ends with *)
      3. a multiline comment that starts with { and ends with }

    Input characters are reduced to COMMENT_ALPHABET before each lookup, so
    the table only has to cover the distinguished characters plus ANY.
    Inside a body only ANY is absorbed; any other distinguished character
    that is not the terminator leads to the trap.
    """

    def __init__(self):
        super().__init__(num_states=TRAP + 1)
        self.set_trap(TRAP)

        for q in range(TRAP + 1):
            for sym in COMMENT_ALPHABET:
                self.add_transition(q, sym, TRAP)

        # // ... \n
        self.add_transition(START, "/", SLASH)
        self.add_transition(SLASH, "/", LINE_BODY)
        self.add_transition(LINE_BODY, ANY, LINE_BODY)
        self.add_transition(LINE_BODY, "\n", ACCEPT)

        # { ... }
        self.add_transition(START, "{", BRACE_BODY)
        self.add_transition(BRACE_BODY, ANY, BRACE_BODY)
        self.add_transition(BRACE_BODY, "}", ACCEPT)

        # (* ... *)
        self.add_transition(START, "(", PAREN)
        self.add_transition(PAREN, "*", STAR_BODY)
        self.add_transition(STAR_BODY, ANY, STAR_BODY)
        self.add_transition(STAR_BODY, "*", STAR_CLOSE)
        self.add_transition(STAR_CLOSE, ANY, STAR_BODY)
        self.add_transition(STAR_CLOSE, ")", ACCEPT)

        self.add_final_state(ACCEPT)

    def map_symbol(self, symbol: str) -> str:
        return canonicalize(symbol)
