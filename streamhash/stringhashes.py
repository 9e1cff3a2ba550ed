# Classic 32-bit string hashes: DJB2, SDBM, BKDR, AP, JS, PJW and Jenkins one-at-a-time

from __future__ import annotations

from .bits import MASK32
from .engine import HashAlgorithm, BytesLike
from .errors import ConfigurationError


class _Hash32(HashAlgorithm):
    """One 32-bit register, updated byte by byte, emitted big-endian."""

    SEED = 0

    def __init__(self, seed: int | None = None, data: BytesLike | None = None):
        super().__init__()
        if seed is None:
            seed = self.SEED
        if not 0 <= seed <= MASK32:
            raise ConfigurationError(f"{self.name} seed must be a 32-bit value, got {seed!r}", parameter="seed")
        self._seed = seed
        self.initialize()
        if data:
            self.update(data)

    @property
    def hash_size(self) -> int:
        return 32

    @property
    def value(self) -> int:
        return int.from_bytes(self._hash_final(), "big")

    def initialize(self) -> None:
        self._hash = self._seed

    def _hash_final(self) -> bytes:
        return self._hash.to_bytes(4, "big")


class Djb2Hash32(_Hash32):
    """Bernstein: hash * 33 + c"""

    name = "djb2"
    SEED = 5381

    def _hash_core(self, data: memoryview) -> None:
        h = self._hash
        for c in data:
            h = ((h << 5) + h + c) & MASK32
        self._hash = h


class SdbmHash32(_Hash32):
    name = "sdbm"

    def _hash_core(self, data: memoryview) -> None:
        h = self._hash
        for c in data:
            h = (c + (h << 6) + (h << 16) - h) & MASK32
        self._hash = h


class BkdrHash32(_Hash32):
    """Kernighan & Ritchie multiplicative hash; the seed is the multiplier."""

    name = "bkdr"
    SEED = 131

    def initialize(self) -> None:
        self._hash = 0

    def _hash_core(self, data: memoryview) -> None:
        h, seed = self._hash, self._seed
        for c in data:
            h = (h * seed + c) & MASK32
        self._hash = h


class ApHash32(_Hash32):
    """Arash Partow's hash. Alternates on the byte's position in the whole stream."""

    name = "ap"
    SEED = 0xAAAAAAAA

    def initialize(self) -> None:
        super().initialize()
        self._count = 0

    def _hash_core(self, data: memoryview) -> None:
        h, i = self._hash, self._count
        for c in data:
            if i & 1 == 0:
                h ^= ((h << 7) ^ c ^ (h >> 3)) & MASK32
            else:
                h ^= ~((h << 11) ^ c ^ (h >> 5)) & MASK32
            i += 1
        self._hash, self._count = h, i


class JsHash32(_Hash32):
    """Justin Sobel's bitwise hash."""

    name = "js"
    SEED = 1315423911

    def _hash_core(self, data: memoryview) -> None:
        h = self._hash
        for c in data:
            h ^= ((h << 5) + c + (h >> 2)) & MASK32
        self._hash = h


class PjwHash32(_Hash32):
    """Peter J. Weinberger's hash, as used for ELF symbol tables."""

    name = "pjw"

    BITS = 32
    THREE_QUARTERS = BITS * 3 // 4
    ONE_EIGHTH = BITS // 8
    HIGH_BITS = (MASK32 << (BITS - ONE_EIGHTH)) & MASK32

    def _hash_core(self, data: memoryview) -> None:
        h = self._hash
        for c in data:
            h = ((h << self.ONE_EIGHTH) + c) & MASK32
            test = h & self.HIGH_BITS
            if test:
                h = (h ^ (test >> self.THREE_QUARTERS)) & ~self.HIGH_BITS & MASK32
        self._hash = h


class JoaatHash32(_Hash32):
    """Bob Jenkins' one-at-a-time hash; the final avalanche is applied only to the output."""

    name = "joaat"

    def _hash_core(self, data: memoryview) -> None:
        h = self._hash
        for c in data:
            h = (h + c) & MASK32
            h = (h + (h << 10)) & MASK32
            h ^= h >> 6
        self._hash = h

    def _hash_final(self) -> bytes:
        h = self._hash
        h = (h + (h << 3)) & MASK32
        h ^= h >> 11
        h = (h + (h << 15)) & MASK32
        return h.to_bytes(4, "big")
