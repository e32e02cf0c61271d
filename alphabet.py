"""Shared alphabet for the comment automaton."""

# Stands for every character that is not distinguished. It is longer than one
# character so it can never collide with real input.
ANY = "<any>"

DISTINGUISHED = ("/", "\n", "*", "{", "}", "(", ")")

COMMENT_ALPHABET = DISTINGUISHED + (ANY,)


def canonicalize(symbol: str) -> str:
    """Map a character to itself if distinguished, otherwise to ANY."""
    if symbol in DISTINGUISHED:
        return symbol
    return ANY
