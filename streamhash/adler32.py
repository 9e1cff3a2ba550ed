# Adler-32 checksum (RFC 1950)

from __future__ import annotations

from .bits import MASK16, MASK32
from .engine import HashAlgorithm, BytesLike
from .errors import ConfigurationError

MOD_ADLER = 65521  # largest prime smaller than 65536
# largest n such that 255n(n+1)/2 + (n+1)(MOD_ADLER-1) fits in 32 bits
NMAX = 5552


class Adler32(HashAlgorithm):
    name = "adler32"

    def __init__(self, seed: int = 1, data: BytesLike | None = None):
        super().__init__()
        if not 0 <= seed <= MASK32:
            raise ConfigurationError(f"adler32 seed must be a 32-bit value, got {seed!r}", parameter="seed")
        self._seed = seed
        self.initialize()
        if data:
            self.update(data)

    @property
    def hash_size(self) -> int:
        return 32

    @property
    def value(self) -> int:
        return self._hash

    def initialize(self) -> None:
        self._hash = self._seed

    def _hash_core(self, data: memoryview) -> None:
        a = self._hash & MASK16
        b = (self._hash >> 16) & MASK16
        pos = 0
        n = len(data)
        while pos < n:
            # reduction deferred to once per NMAX bytes
            for byte in data[pos:pos + NMAX]:
                a += byte
                b += a
            a %= MOD_ADLER
            b %= MOD_ADLER
            pos += NMAX
        self._hash = a | (b << 16)

    def _hash_final(self) -> bytes:
        return self._hash.to_bytes(4, "big")


def adler32(data: bytes, seed: int = 1) -> int:
    return Adler32(seed, data).value
