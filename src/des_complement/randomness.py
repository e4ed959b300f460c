"""Random key/plaintext source for property sweeps."""

from __future__ import annotations

import random
import secrets
from typing import Iterator

from .utils import bytes_to_hex


class RandomSource:
    """Random source for test vectors.

    Deterministic when seeded, so a failing sweep can be replayed;
    otherwise draws from secrets.
    """

    def __init__(self, seed: int | None = None):
        """Initialize random source.

        Args:
            seed: Optional seed for deterministic vectors
        """
        self._seed = seed
        self._rng: random.Random | None = None
        self._bytes_used = 0
        self.reset()

    def reset(self) -> None:
        """Reset usage counter and, when seeded, rewind the stream."""
        self._bytes_used = 0
        if self._seed is not None:
            self._rng = random.Random(self._seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def total_bytes(self) -> int:
        """Total random bytes drawn since the last reset."""
        return self._bytes_used

    def get_bytes(self, count: int) -> bytes:
        """Get random bytes and track usage."""
        self._bytes_used += count
        if self._rng is None:
            return secrets.token_bytes(count)
        return bytes(self._rng.randint(0, 255) for _ in range(count))

    def key_hex(self, key_size: int = 8) -> str:
        """Random DES key as uppercase hex."""
        return bytes_to_hex(self.get_bytes(key_size))

    def plaintext_hex(self, blocks: int = 1, block_size: int = 8) -> str:
        """Random block-aligned plaintext as uppercase hex."""
        if blocks < 1:
            raise ValueError(f"blocks must be at least 1, got {blocks}")
        return bytes_to_hex(self.get_bytes(blocks * block_size))

    def vectors(self, count: int, blocks: int = 1) -> Iterator[tuple[str, str]]:
        """Yield count (key_hex, plaintext_hex) pairs."""
        for _ in range(count):
            yield self.key_hex(), self.plaintext_hex(blocks)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._seed!r})"
