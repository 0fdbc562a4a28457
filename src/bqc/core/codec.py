"""Balanced Quad Carry (BQC) encoding.

Every non-negative integer up to MAX_VALUE maps to exactly one token
of the form <label><d>_<d>_<d>_<d>, e.g. "a0_0_1_1", "c7_8_8_8",
"za0_0_0_0".

Integers are grouped into series of 40:

    series 0 ("a"):   0-36 -> balanced quad, 37 -> 9_9_9_0, 38 -> 9_9_0_0
    series s >= 1:    40s - 1       -> 9_0_0_0   (carry-in)
                      40s + 0..36   -> balanced quad of the offset
                      40s + 37      -> 9_9_9_0
                      40s + 38      -> 9_9_0_0

Series "a" has no carry-in token: "a9_0_0_0" is not a valid token and
no integer encodes to it. Only 39 integers live in series "a".
"""

from .errors import InvalidInput, InvalidQuad, MalformedToken, SeriesOutOfRange
from .quad import (
    BALANCED_MAX,
    BALANCED_TO_SUM,
    Q_9900,
    Q_9990,
    Q_CARRY_IN,
    balanced_quad,
    parse_quad,
    quad_to_string,
)
from .series import MAX_SERIES, parse_series_label, series_label

BLOCK_SIZE = 40

# Offsets of the fixed specials from the series base
OFFSET_9990 = BALANCED_MAX + 1  # 37
OFFSET_9900 = BALANCED_MAX + 2  # 38

MAX_VALUE = BLOCK_SIZE * MAX_SERIES + OFFSET_9900  # 2078, "zz9_9_0_0"


def _offset_quad(offset: int) -> tuple[int, int, int, int]:
    """Quad for an offset 0-38 from a series base."""
    if offset <= BALANCED_MAX:
        return balanced_quad(offset)
    if offset == OFFSET_9990:
        return Q_9990
    return Q_9900


def encode(n: int) -> str:
    """Encode a non-negative integer as a BQC token."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidInput(f"encode expects an integer, got {n!r}")
    if n < 0:
        raise InvalidInput(f"encode expects an integer >= 0, got {n}")

    if n <= OFFSET_9900:
        return series_label(0) + quad_to_string(_offset_quad(n))

    s = (n + 1) // BLOCK_SIZE
    if s > MAX_SERIES:
        raise SeriesOutOfRange(
            f"{n} needs series {s}, largest encodable value is {MAX_VALUE}")

    t = n - (BLOCK_SIZE * s - 1)  # position 0-39 within the series
    quad = Q_CARRY_IN if t == 0 else _offset_quad(t - 1)
    return series_label(s) + quad_to_string(quad)


def split_token(token: str) -> tuple[int, tuple[int, int, int, int]]:
    """Parse a token into (series index, quad) without checking canonicity."""
    if not isinstance(token, str):
        raise MalformedToken(f"Token must be a string, got {type(token).__name__}")
    if len(token) < 2:
        raise MalformedToken(f"Token too short: {token!r}")
    s, rest = parse_series_label(token)
    return s, parse_quad(rest)


def decode(token: str) -> int:
    """Decode a BQC token back to its integer.

    Labels are case-insensitive. Any quad that is not one of the
    specials and not the canonical balanced quad for its digit sum is
    rejected with InvalidQuad.
    """
    s, quad = split_token(token)
    base = BLOCK_SIZE * s

    if s > 0 and quad == Q_CARRY_IN:
        return base - 1
    if quad == Q_9990:
        return base + OFFSET_9990
    if quad == Q_9900:
        return base + OFFSET_9900

    total = sum(quad)
    if total > BALANCED_MAX:
        raise InvalidQuad(
            f"Balanced quad sum must be 0-{BALANCED_MAX}, got {total} in {token!r}")
    if BALANCED_TO_SUM.get(quad) != total:
        raise InvalidQuad(
            f"Not the canonical balanced quad for sum {total}: {token!r} "
            f"(expected {quad_to_string(balanced_quad(total))})")
    return base + total


def is_valid_token(token: str) -> bool:
    """True if decode() would accept the token."""
    try:
        decode(token)
    except (MalformedToken, InvalidQuad):
        return False
    return True


def canonicalize(token: str) -> str:
    """Return the canonical (lowercase) spelling of a valid token."""
    return encode(decode(token))


def series_range(s: int) -> tuple[int, int]:
    """Inclusive (first, last) integers covered by series s."""
    series_label(s)  # range check
    if s == 0:
        return 0, OFFSET_9900
    return BLOCK_SIZE * s - 1, BLOCK_SIZE * s + OFFSET_9900


def series_tokens(s: int) -> list[str]:
    """Every token of series s, in integer order."""
    first, last = series_range(s)
    return [encode(n) for n in range(first, last + 1)]
