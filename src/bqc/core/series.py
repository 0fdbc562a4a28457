"""Series labels.

Series 0-25 are the single letters a-z. Series 26-51 are "z" followed
by a second letter: 26 -> "za", 51 -> "zz". Nothing beyond 51 has a
label.
"""

from .errors import MalformedToken, SeriesOutOfRange

LETTERS = "abcdefghijklmnopqrstuvwxyz"
MAX_SERIES = 2 * len(LETTERS) - 1  # 51

# Reverse lookup: ASCII letter (either case) -> index
LETTER_TO_INDEX = {c: i for i, c in enumerate(LETTERS)}
LETTER_TO_INDEX.update({c.upper(): i for i, c in enumerate(LETTERS)})


def series_label(s: int) -> str:
    """Render series index s as its lowercase label."""
    if isinstance(s, bool) or not isinstance(s, int) or not 0 <= s <= MAX_SERIES:
        raise SeriesOutOfRange(f"Series must be 0-{MAX_SERIES}, got {s!r}")
    if s < len(LETTERS):
        return LETTERS[s]
    return "z" + LETTERS[s - len(LETTERS)]


def parse_series_label(token: str) -> tuple[int, str]:
    """Split the series label off the front of a token.

    Returns (series index, remaining text). ASCII letters only, in
    either case. A "z" followed by another letter is always read as a
    two-letter label.
    """
    if not token:
        raise MalformedToken("Token is empty")
    first = LETTER_TO_INDEX.get(token[0])
    if first is None:
        raise MalformedToken(f"Token must start with a series letter a-z: {token!r}")
    if first == LETTER_TO_INDEX["z"] and len(token) > 1:
        second = LETTER_TO_INDEX.get(token[1])
        if second is not None:
            return len(LETTERS) + second, token[2:]
    return first, token[1:]
