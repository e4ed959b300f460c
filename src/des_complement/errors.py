"""Error types raised while verifying the DES complementation property."""


class ComplementError(ValueError):
    """Base class for every failure surfaced by a verification run."""


class MalformedHexError(ComplementError):
    """Input string is not an even-length sequence of hex digits."""


class InvalidKeyLengthError(ComplementError):
    """Key is not exactly one DES key (8 bytes)."""


class InvalidBlockAlignmentError(ComplementError):
    """Data length is not a positive multiple of the block size."""


class CipherPrimitiveError(ComplementError):
    """The underlying block-cipher library rejected the operation."""
