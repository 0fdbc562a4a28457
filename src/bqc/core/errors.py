"""Error kinds raised by the BQC codec.

All of them subclass ValueError, so callers that only care about
"bad value" can keep catching that.
"""


class BQCError(ValueError):
    """Base class for every codec failure."""


class InvalidInput(BQCError):
    """encode() was given a non-integer or a negative number."""


class SeriesOutOfRange(BQCError):
    """Series index outside the labelled range a..z, za..zz."""


class MalformedToken(BQCError):
    """Token text does not parse as <label><d>_<d>_<d>_<d>."""


class InvalidQuad(BQCError):
    """Quad parses but is neither a special nor a canonical balanced quad."""
