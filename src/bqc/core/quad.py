"""Quad primitives and their "d_d_d_d" text form.

A quad is four digits 0-9 written as "d_d_d_d". The balanced quad for
n in 0-36 starts from [q, q, q, q] with q = n // 4 and adds the
remainder one at a time to the rightmost slots (l, then k, then j).
"""

from .errors import InvalidQuad, MalformedToken

QUAD_SEPARATOR = "_"
QUAD_WIDTH = 4
BALANCED_MAX = 36

DIGITS = "0123456789"

# Special quads outside the balanced range
Q_CARRY_IN = (9, 0, 0, 0)   # one below a series base; series >= 1 only
Q_9990 = (9, 9, 9, 0)       # base + 37
Q_9900 = (9, 9, 0, 0)       # base + 38

SPECIAL_QUADS = (Q_CARRY_IN, Q_9990, Q_9900)


def balanced_quad(n: int) -> tuple[int, int, int, int]:
    """Return the canonical balanced quad for n in 0-36."""
    if isinstance(n, bool) or not isinstance(n, int) or not 0 <= n <= BALANCED_MAX:
        raise InvalidQuad(f"Balanced sum must be 0-{BALANCED_MAX}, got {n!r}")
    q, r = divmod(n, 4)
    i = j = k = l = q
    if r >= 1:
        l += 1
    if r >= 2:
        k += 1
    if r >= 3:
        j += 1
    return (i, j, k, l)


# Precomputed: canonical quad -> sum
BALANCED_TO_SUM = {balanced_quad(n): n for n in range(BALANCED_MAX + 1)}


def is_balanced(quad) -> bool:
    """True if quad is the canonical balanced quad for its own digit sum."""
    return tuple(quad) in BALANCED_TO_SUM


def quad_to_string(quad) -> str:
    return QUAD_SEPARATOR.join(str(d) for d in quad)


def parse_quad(text: str) -> tuple[int, int, int, int]:
    """Parse "d_d_d_d" into a tuple of four digits.

    Each field must be exactly one ASCII digit. Anything else (wrong
    field count, empty field, sign, whitespace, multi-digit number)
    raises MalformedToken.
    """
    fields = text.split(QUAD_SEPARATOR)
    if len(fields) != QUAD_WIDTH:
        raise MalformedToken(
            f"Quad must have {QUAD_WIDTH} digits, got {len(fields)} in {text!r}")
    digits = []
    for field in fields:
        if len(field) != 1 or field not in DIGITS:
            raise MalformedToken(f"Quad digits must be 0-9, got {field!r} in {text!r}")
        digits.append(DIGITS.index(field))
    return tuple(digits)
