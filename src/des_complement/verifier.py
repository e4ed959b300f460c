"""
DES complementation property: E(~K, ~P) == ~E(K, P).

DES is a Feistel construction. The 64-bit block is split into halves
L and R, and each round computes

    L' = R
    R' = L XOR f(R, K_i)

where f expands R, XORs it with the round subkey K_i, then runs the
result through the S-boxes and a bit permutation. Complementing the key
complements every subkey (the key schedule only selects and permutes
bits), and complementing R complements its expansion, so the two
complements cancel inside f: the S-boxes see exactly the same input.
L is complemented too, so R' comes out complemented and the property
carries through all sixteen rounds and the final permutation.
"""

from __future__ import annotations

from typing import Callable

from .errors import InvalidBlockAlignmentError, InvalidKeyLengthError
from .golden import DESCipher
from .interfaces import DEFAULT_CONFIG, BlockCipher, CipherConfig, VerificationResult
from .reporting import TraceRecorder
from .utils import bytes_to_hex, complement_bytes, hex_to_bytes

Reporter = Callable[[VerificationResult], None]


class ComplementVerifier:
    """Runs the complementation check against a block-cipher primitive.

    Holds only immutable collaborators, so one instance may be shared
    freely between callers.
    """

    def __init__(
        self,
        config: CipherConfig = DEFAULT_CONFIG,
        cipher: BlockCipher | None = None,
        reporter: Reporter | None = None,
    ):
        self.config = config
        self.cipher = cipher if cipher is not None else DESCipher()
        self.reporter = reporter

    def encrypt_bytes(self, key: bytes, plaintext: bytes) -> bytes:
        """Encrypt raw bytes after checking key length and alignment."""
        if len(key) != self.config.key_size:
            raise InvalidKeyLengthError(
                f"Key must be {self.config.key_size} bytes, got {len(key)}"
            )
        if not plaintext or len(plaintext) % self.config.block_size != 0:
            raise InvalidBlockAlignmentError(
                f"Plaintext must be a positive multiple of "
                f"{self.config.block_size} bytes, got {len(plaintext)}"
            )
        return self.cipher.encrypt(key, plaintext, self.config)

    def encrypt(self, key_hex: str, plaintext_hex: str) -> str:
        """Encrypt hex plaintext under a hex key; returns uppercase hex."""
        key = hex_to_bytes(key_hex)
        plaintext = hex_to_bytes(plaintext_hex)
        return bytes_to_hex(self.encrypt_bytes(key, plaintext))

    def complement(self, value_hex: str) -> str:
        """Bitwise complement of a hex string; returns uppercase hex."""
        return bytes_to_hex(complement_bytes(hex_to_bytes(value_hex)))

    def verify(
        self,
        key_hex: str,
        plaintext_hex: str,
        tracer: TraceRecorder | None = None,
    ) -> VerificationResult:
        """Check E(~K, ~P) == ~E(K, P) for one key and plaintext.

        Args:
            key_hex: 16 hex chars (8-byte DES key)
            plaintext_hex: Hex plaintext, a positive multiple of 8 bytes
            tracer: Optional recorder for each intermediate value

        Returns:
            VerificationResult with both compared ciphertexts

        Raises:
            ComplementError: Any input or cipher failure, unchanged
        """
        cipher_hex = self.encrypt(key_hex, plaintext_hex)
        if tracer:
            tracer.record(step="encrypt", key=key_hex, plaintext=plaintext_hex,
                          output=cipher_hex)

        complement_key_hex = self.complement(key_hex)
        complement_plaintext_hex = self.complement(plaintext_hex)
        if tracer:
            tracer.record(step="complement_inputs", key=complement_key_hex,
                          plaintext=complement_plaintext_hex)

        complement_cipher_hex = self.encrypt(complement_key_hex, complement_plaintext_hex)
        if tracer:
            tracer.record(step="encrypt_complemented", key=complement_key_hex,
                          plaintext=complement_plaintext_hex,
                          output=complement_cipher_hex)

        expected_hex = self.complement(cipher_hex)
        if tracer:
            tracer.record(step="complement_cipher", input=cipher_hex,
                          output=expected_hex)

        result = VerificationResult.from_values(
            key=hex_to_bytes(key_hex),
            plaintext=hex_to_bytes(plaintext_hex),
            cipher=hex_to_bytes(cipher_hex),
            complement_key=hex_to_bytes(complement_key_hex),
            complement_plaintext=hex_to_bytes(complement_plaintext_hex),
            complement_cipher=hex_to_bytes(complement_cipher_hex),
            expected_complement_cipher=hex_to_bytes(expected_hex),
            config=self.config,
        )
        if tracer:
            tracer.record(step="compare", matches=result.matches,
                          block_matches=list(result.block_matches))

        if self.reporter is not None:
            self.reporter(result)
        return result


_DEFAULT_VERIFIER = ComplementVerifier()


def encrypt(key_hex: str, plaintext_hex: str) -> str:
    """DES-CBC encrypt with the shared zero IV (see ComplementVerifier.encrypt)."""
    return _DEFAULT_VERIFIER.encrypt(key_hex, plaintext_hex)


def complement(value_hex: str) -> str:
    """Bitwise complement of a hex string."""
    return _DEFAULT_VERIFIER.complement(value_hex)


def verify_complement_property(
    key_hex: str,
    plaintext_hex: str,
    config: CipherConfig = DEFAULT_CONFIG,
    reporter: Reporter | None = None,
) -> VerificationResult:
    """Verify the complementation property with the PyCryptodome primitive."""
    return ComplementVerifier(config=config, reporter=reporter).verify(
        key_hex, plaintext_hex
    )
