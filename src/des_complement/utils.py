"""
Utility functions for hex/byte conversions and bitwise complements.

Hex strings are decoded case-insensitively and always encoded in
uppercase, so a value survives any number of decode/encode passes
without changing representation:

  "0123456789abcdef" -> b"\\x01\\x23\\x45\\x67\\x89\\xab\\xcd\\xef"
  b"\\x01\\x23..."      -> "0123456789ABCDEF"
"""

import string

from .errors import MalformedHexError

_HEX_DIGITS = frozenset(string.hexdigits)


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert hex string to bytes.

    Args:
        hex_str: Even-length string of hex digits (either case)

    Returns:
        bytes

    Raises:
        MalformedHexError: On odd length or any non-hex character
    """
    if len(hex_str) % 2 != 0:
        raise MalformedHexError(
            f"Hex string must have even length, got {len(hex_str)} chars"
        )
    bad = sorted({c for c in hex_str if c not in _HEX_DIGITS})
    if bad:
        raise MalformedHexError(
            f"Hex string contains non-hex characters: {''.join(bad)!r}"
        )
    return bytes.fromhex(hex_str)


def bytes_to_hex(data: bytes) -> str:
    """
    Convert bytes to hex string.

    Args:
        data: bytes

    Returns:
        Uppercase hex string
    """
    return data.hex().upper()


def complement_bytes(data: bytes) -> bytes:
    """
    Flip every bit of a byte sequence (XOR each byte with 0xFF).
    """
    return bytes(b ^ 0xFF for b in data)


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """
    XOR two byte sequences of equal length.
    """
    if len(a) != len(b):
        raise ValueError(f"Length mismatch: {len(a)} vs {len(b)}")
    return bytes(x ^ y for x, y in zip(a, b))


def split_blocks(data: bytes, block_size: int = 8) -> list[bytes]:
    """
    Split data into consecutive blocks of block_size bytes.

    A trailing partial block is returned as-is.
    """
    return [data[i:i + block_size] for i in range(0, len(data), block_size)]


def format_blocks(data: bytes, block_size: int = 8) -> str:
    """
    Format data as space-separated uppercase hex blocks.

    Returns a string like:
      85E813540F0AB405 7A17ECABF0F54BFA
    """
    return " ".join(bytes_to_hex(block) for block in split_blocks(data, block_size))


def count_differing_bits(a: bytes, b: bytes) -> int:
    """
    Count bit positions where two equal-length byte sequences differ.
    """
    return sum(bin(x).count("1") for x in xor_bytes(a, b))
