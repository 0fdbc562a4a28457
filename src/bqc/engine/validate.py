"""Self-test harness for the BQC codec.

Verifies:
1. Round-trip: decode(encode(N)) == N over a range of integers
2. Token stability: encode(decode(T)) == T for every emitted token
3. Boundary literals and required rejections
4. Bijection over the whole token space (every label x every quad)
"""

import sys
import time
from itertools import product

from ..core.codec import MAX_VALUE, decode, encode
from ..core.errors import (
    BQCError,
    InvalidInput,
    InvalidQuad,
    MalformedToken,
    SeriesOutOfRange,
)
from ..core.quad import is_balanced, quad_to_string, Q_9900, Q_9990, Q_CARRY_IN
from ..core.series import MAX_SERIES, series_label

DEFAULT_LIMIT = 5000

BOUNDARY_ENCODINGS = [
    (0, "a0_0_0_0"),
    (2, "a0_0_1_1"),
    (36, "a9_9_9_9"),
    (37, "a9_9_9_0"),
    (38, "a9_9_0_0"),
    (39, "b9_0_0_0"),
    (40, "b0_0_0_0"),
    (76, "b9_9_9_9"),
    (79, "c9_0_0_0"),
    (1039, "za9_0_0_0"),
    (1040, "za0_0_0_0"),
    (MAX_VALUE, "zz9_9_0_0"),
]

REQUIRED_REJECTIONS = [
    ("encode", -1, InvalidInput),
    ("encode", 3.5, InvalidInput),
    ("encode", "7", InvalidInput),
    ("encode", MAX_VALUE + 1, SeriesOutOfRange),
    ("decode", "a1_0_0_1", InvalidQuad),
    ("decode", "a9_0_0_0", InvalidQuad),
    ("decode", "b9_9_9_1", InvalidQuad),
    ("decode", "a0_0_0", MalformedToken),
    ("decode", "a0_0_0_10", MalformedToken),
    ("decode", "1_0_0_0", MalformedToken),
    ("decode", "\u212a0_0_0_0", MalformedToken),
    ("decode", "zzz0_0_0_0", MalformedToken),
    ("decode", " a0_0_0_0", MalformedToken),
    ("decode", "a", MalformedToken),
]


def validate_roundtrip(limit=DEFAULT_LIMIT):
    """decode(encode(N)) == N for every encodable N up to limit.

    Values above MAX_VALUE must raise SeriesOutOfRange instead.
    """
    errors = []
    checked = 0
    for n in range(limit + 1):
        checked += 1
        if n > MAX_VALUE:
            try:
                encode(n)
            except SeriesOutOfRange:
                continue
            errors.append(f"  NOT REJECTED: {n} is above {MAX_VALUE}")
            continue
        try:
            back = decode(encode(n))
        except BQCError as e:
            errors.append(f"  ERROR: {n}: {e}")
            continue
        if back != n:
            errors.append(f"  MISMATCH: {n} -> {encode(n)} -> {back}")
    return {"passed": not errors, "checked": checked, "errors": errors}


def validate_token_stability(limit=DEFAULT_LIMIT):
    """encode(decode(T)) == T for every token encode() emits."""
    errors = []
    checked = 0
    for n in range(min(limit, MAX_VALUE) + 1):
        token = encode(n)
        checked += 1
        again = encode(decode(token))
        if again != token:
            errors.append(f"  UNSTABLE: {token} -> {again}")
    return {"passed": not errors, "checked": checked, "errors": errors}


def validate_boundaries():
    """Known integer/token pairs, checked in both directions."""
    errors = []
    for n, token in BOUNDARY_ENCODINGS:
        got = encode(n)
        if got != token:
            errors.append(f"  ENCODE: {n} expected {token} got {got}")
        back = decode(token)
        if back != n:
            errors.append(f"  DECODE: {token} expected {n} got {back}")
        if decode(token.upper()) != n:
            errors.append(f"  CASE: {token.upper()} did not decode to {n}")
    return {"passed": not errors, "checked": len(BOUNDARY_ENCODINGS), "errors": errors}


def validate_rejections():
    """Inputs that must fail, with the error kind they must fail with."""
    ops = {"encode": encode, "decode": decode}
    errors = []
    for op, arg, expected in REQUIRED_REJECTIONS:
        try:
            result = ops[op](arg)
        except expected:
            continue
        except BQCError as e:
            errors.append(f"  WRONG ERROR: {op}({arg!r}) raised "
                          f"{type(e).__name__}, expected {expected.__name__}")
            continue
        errors.append(f"  ACCEPTED: {op}({arg!r}) returned {result!r}")
    return {"passed": not errors, "checked": len(REQUIRED_REJECTIONS), "errors": errors}


def _expected_valid(s, quad):
    if quad in (Q_9990, Q_9900):
        return True
    if quad == Q_CARRY_IN:
        return s > 0
    return is_balanced(quad)


def validate_exhaustive_quads():
    """Try all 10^4 quads under every label.

    Exactly the canonical quads must decode, and no two tokens may
    decode to the same integer.
    """
    errors = []
    seen = {}
    checked = 0
    for s in range(MAX_SERIES + 1):
        label = series_label(s)
        for quad in product(range(10), repeat=4):
            token = label + quad_to_string(quad)
            checked += 1
            should_pass = _expected_valid(s, quad)
            try:
                n = decode(token)
            except InvalidQuad:
                if should_pass:
                    errors.append(f"  REJECTED: {token}")
                continue
            if not should_pass:
                errors.append(f"  ACCEPTED: {token} -> {n}")
                continue
            if n in seen:
                errors.append(f"  COLLISION: {seen[n]} and {token} -> {n}")
            seen[n] = token
    if len(seen) != MAX_VALUE + 1:
        errors.append(f"  COVERAGE: {len(seen)} integers reached, "
                      f"expected {MAX_VALUE + 1}")
    return {"passed": not errors, "checked": checked, "errors": errors}


def run_validation(limit=DEFAULT_LIMIT, verbose=False, log_file=None):
    """Run every check, print a report, return True if all passed."""
    log = open(log_file, "w") if log_file else None

    def _log(msg):
        if log:
            log.write(msg + "\n")
        print(msg)

    checks = [
        ("Round-trip", lambda: validate_roundtrip(limit)),
        ("Token Stability", lambda: validate_token_stability(limit)),
        ("Boundary Literals", validate_boundaries),
        ("Required Rejections", validate_rejections),
        ("Exhaustive Quads", validate_exhaustive_quads),
    ]

    try:
        _log(f"=== Validating BQC codec (limit={limit}, max value={MAX_VALUE}) ===\n")
        all_passed = True
        for name, check in checks:
            _log(f"--- {name} ---")
            t0 = time.time()
            result = check()
            elapsed = time.time() - t0
            if result["passed"]:
                _log(f"  PASSED: {result['checked']:,} cases ({elapsed:.2f}s)")
            else:
                all_passed = False
                _log(f"  FAILED: {len(result['errors'])} errors")
                shown = result["errors"] if verbose else result["errors"][:10]
                for e in shown:
                    _log(e)
            _log("")

        _log(f"=== {'ALL VALIDATIONS PASSED' if all_passed else 'SOME VALIDATIONS FAILED'} ===")
    finally:
        if log:
            log.close()

    return all_passed


if __name__ == "__main__":
    limit = int(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_LIMIT
    success = run_validation(limit)
    sys.exit(0 if success else 1)
