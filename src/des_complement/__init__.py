"""DES complementation property demonstration: E(~K, ~P) == ~E(K, P)."""

from .errors import (
    ComplementError,
    MalformedHexError,
    InvalidKeyLengthError,
    InvalidBlockAlignmentError,
    CipherPrimitiveError,
)
from .interfaces import CipherConfig, DEFAULT_CONFIG, VerificationResult, BlockCipher
from .golden import DESCipher
from .verifier import ComplementVerifier, encrypt, complement, verify_complement_property

__version__ = "0.1.0"

# Default inputs: the DES standard's worked-example key and plaintext
DEFAULT_KEY_HEX = "133457799BBCDFF1"
DEFAULT_PT_HEX = "0123456789ABCDEF"

__all__ = [
    "DEFAULT_KEY_HEX",
    "DEFAULT_PT_HEX",
    "ComplementError",
    "MalformedHexError",
    "InvalidKeyLengthError",
    "InvalidBlockAlignmentError",
    "CipherPrimitiveError",
    "CipherConfig",
    "DEFAULT_CONFIG",
    "VerificationResult",
    "BlockCipher",
    "DESCipher",
    "ComplementVerifier",
    "encrypt",
    "complement",
    "verify_complement_property",
]
