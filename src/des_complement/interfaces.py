"""Core interfaces and data structures for complement verification."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from .utils import bytes_to_hex, split_blocks

SUPPORTED_MODES = ("cbc", "ecb")


@dataclass(frozen=True)
class CipherConfig:
    """Configuration object for DES encryption.

    Built once and passed to every encrypt call of a run. Both
    encryptions of a verification must see the same config; under CBC
    that pins them to the same all-zero IV.
    """

    # Chaining mode: "cbc" (default) or "ecb"
    mode: str = "cbc"

    # DES block size in bytes (64-bit block)
    block_size: int = 8

    # DES key size in bytes (56 effective bits + 8 parity bits)
    key_size: int = 8

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.mode not in SUPPORTED_MODES:
            raise ValueError(
                f"mode must be one of {', '.join(SUPPORTED_MODES)}, got {self.mode!r}"
            )
        if self.block_size != 8:
            raise ValueError(f"DES block_size must be 8, got {self.block_size}")
        if self.key_size != 8:
            raise ValueError(f"DES key_size must be 8, got {self.key_size}")

    @property
    def iv(self) -> bytes:
        """Initialization vector: always block_size zero bytes."""
        return bytes(self.block_size)


DEFAULT_CONFIG = CipherConfig()


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of one complementation-property check."""

    key: bytes
    plaintext: bytes
    cipher: bytes
    complement_key: bytes
    complement_plaintext: bytes
    complement_cipher: bytes
    expected_complement_cipher: bytes
    mode: str = "cbc"
    block_size: int = 8
    block_matches: tuple[bool, ...] = field(default=())

    @property
    def matches(self) -> bool:
        """True when E(~K, ~P) equals ~E(K, P) byte for byte."""
        return self.complement_cipher == self.expected_complement_cipher

    @property
    def first_mismatch_block(self) -> int | None:
        """Index of the first block that breaks the property, if any."""
        for i, ok in enumerate(self.block_matches):
            if not ok:
                return i
        return None

    @classmethod
    def from_values(
        cls,
        key: bytes,
        plaintext: bytes,
        cipher: bytes,
        complement_key: bytes,
        complement_plaintext: bytes,
        complement_cipher: bytes,
        expected_complement_cipher: bytes,
        config: CipherConfig,
    ) -> VerificationResult:
        """Build a result, deriving the per-block comparison."""
        actual = split_blocks(complement_cipher, config.block_size)
        expected = split_blocks(expected_complement_cipher, config.block_size)
        block_matches = tuple(a == e for a, e in zip(actual, expected))
        return cls(
            key=key,
            plaintext=plaintext,
            cipher=cipher,
            complement_key=complement_key,
            complement_plaintext=complement_plaintext,
            complement_cipher=complement_cipher,
            expected_complement_cipher=expected_complement_cipher,
            mode=config.mode,
            block_size=config.block_size,
            block_matches=block_matches,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary for serialization."""
        return {
            "mode": self.mode,
            "key_hex": bytes_to_hex(self.key),
            "plaintext_hex": bytes_to_hex(self.plaintext),
            "cipher_hex": bytes_to_hex(self.cipher),
            "complement_key_hex": bytes_to_hex(self.complement_key),
            "complement_plaintext_hex": bytes_to_hex(self.complement_plaintext),
            "complement_cipher_hex": bytes_to_hex(self.complement_cipher),
            "expected_complement_cipher_hex": bytes_to_hex(
                self.expected_complement_cipher
            ),
            "matches": self.matches,
            "block_matches": list(self.block_matches),
        }


class BlockCipher(ABC):
    """Abstract base class for the block-cipher primitive.

    Implementations take raw bytes and assume the caller already checked
    key length and block alignment.
    """

    name: str = "base"

    @abstractmethod
    def encrypt_cbc(self, key: bytes, iv: bytes, plaintext: bytes) -> bytes:
        """Encrypt block-aligned plaintext in CBC mode without padding.

        Args:
            key: Raw key bytes
            iv: Initialization vector, one block long
            plaintext: Block-aligned plaintext

        Returns:
            Ciphertext of the same length as plaintext

        Raises:
            CipherPrimitiveError: If the underlying library fails
        """
        raise NotImplementedError

    @abstractmethod
    def encrypt_ecb(self, key: bytes, plaintext: bytes) -> bytes:
        """Encrypt block-aligned plaintext in ECB mode without padding."""
        raise NotImplementedError

    def encrypt(self, key: bytes, plaintext: bytes, config: CipherConfig) -> bytes:
        """Dispatch to the mode selected by config."""
        if config.mode == "cbc":
            return self.encrypt_cbc(key, config.iv, plaintext)
        return self.encrypt_ecb(key, plaintext)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
