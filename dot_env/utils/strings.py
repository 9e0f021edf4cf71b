"""String helpers.

Only ASCII letters are case-folded by the comparator; everything else must
match exactly. Whitespace trimming is limited to the characters a `.env` line
can realistically carry (space, tab, CR, LF), so other Unicode spaces survive.
"""

WHITESPACE = " \t\r\n"


def _ascii_lower(ch: str) -> str:
    if "A" <= ch <= "Z":
        return chr(ord(ch) + 32)
    return ch


def equals_case_insensitive(a: str, b: str) -> bool:
    """Compare two strings as if both were ASCII-lowercased."""
    if len(a) != len(b):
        return False
    return all(_ascii_lower(x) == _ascii_lower(y) for x, y in zip(a, b))


def strip_whitespace(text: str) -> str:
    """Trim leading/trailing space, tab, CR and LF."""
    return text.strip(WHITESPACE)
