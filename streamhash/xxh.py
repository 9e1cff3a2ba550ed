# xxHash32 / xxHash64: seeded 4-lane multiply-rotate mixers

from __future__ import annotations

import struct

from .bits import MASK32, MASK64, rotl32, rotl64
from .engine import BlockHashAlgorithm, BytesLike
from .errors import ConfigurationError

PRIME32_1 = 0x9E3779B1
PRIME32_2 = 0x85EBCA77
PRIME32_3 = 0xC2B2AE3D
PRIME32_4 = 0x27D4EB2F
PRIME32_5 = 0x165667B1

PRIME64_1 = 0x9E3779B185EBCA87
PRIME64_2 = 0xC2B2AE3D27D4EB4F
PRIME64_3 = 0x165667B19E3779F9
PRIME64_4 = 0x85EBCA77C2B2AE63
PRIME64_5 = 0x27D4EB2F165667C5


def _round64(acc: int, value: int) -> int:
    return (rotl64((acc + value * PRIME64_2) & MASK64, 31) * PRIME64_1) & MASK64


class _XxHash(BlockHashAlgorithm):
    """
    Shared lane bookkeeping. Up to block_size - 1 bytes wait in the buffer;
    lane 2 keeps the seed untouched until the first full block is consumed.
    """

    WIDTH = 0
    LANE_FORMAT = ""

    def __init__(self, seed: int = 0, data: BytesLike | None = None):
        mask = (1 << self.WIDTH) - 1
        if not 0 <= seed <= mask:
            raise ConfigurationError(
                f"{self.name} seed must be in 0..0x{mask:X}, got {seed!r}", parameter="seed"
            )
        self._seed = seed
        super().__init__(self.WIDTH // 2)
        self.initialize()
        if data:
            self.update(data)

    @property
    def hash_size(self) -> int:
        return self.WIDTH

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def total_length(self) -> int:
        return self._total_bytes + self._buffer_size

    @property
    def lanes(self) -> tuple:
        return tuple(self._lanes)


class XxHash32(_XxHash):
    name = "xxh32"
    WIDTH = 32
    LANE_FORMAT = "<4I"

    def initialize(self) -> None:
        seed = self._seed
        self._lanes = [
            (seed + PRIME32_1 + PRIME32_2) & MASK32,
            (seed + PRIME32_2) & MASK32,
            seed,
            (seed - PRIME32_1) & MASK32,
        ]
        self._reset_buffer()

    def _process_block(self, block: BytesLike) -> None:
        lanes = self._lanes
        for i, word in enumerate(struct.unpack_from(self.LANE_FORMAT, block)):
            lanes[i] = (rotl32((lanes[i] + word * PRIME32_2) & MASK32, 13) * PRIME32_1) & MASK32

    def _hash_final(self) -> bytes:
        s0, s1, s2, s3 = self._lanes
        total = self.total_length
        if total >= self._block_size:
            result = rotl32(s0, 1) + rotl32(s1, 7) + rotl32(s2, 12) + rotl32(s3, 18)
        else:
            # never entered the main loop, lane 2 still holds the seed
            result = s2 + PRIME32_5
        result = (result + total) & MASK32

        tail = self._pending()
        pos = 0
        while pos + 4 <= len(tail):
            word = int.from_bytes(tail[pos:pos + 4], "little")
            result = (rotl32((result + word * PRIME32_3) & MASK32, 17) * PRIME32_4) & MASK32
            pos += 4
        for byte in tail[pos:]:
            result = (rotl32((result + byte * PRIME32_5) & MASK32, 11) * PRIME32_1) & MASK32

        result ^= result >> 15
        result = (result * PRIME32_2) & MASK32
        result ^= result >> 13
        result = (result * PRIME32_3) & MASK32
        result ^= result >> 16
        return result.to_bytes(4, "big")


class XxHash64(_XxHash):
    name = "xxh64"
    WIDTH = 64
    LANE_FORMAT = "<4Q"

    def initialize(self) -> None:
        seed = self._seed
        self._lanes = [
            (seed + PRIME64_1 + PRIME64_2) & MASK64,
            (seed + PRIME64_2) & MASK64,
            seed,
            (seed - PRIME64_1) & MASK64,
        ]
        self._reset_buffer()

    def _process_block(self, block: BytesLike) -> None:
        lanes = self._lanes
        for i, word in enumerate(struct.unpack_from(self.LANE_FORMAT, block)):
            lanes[i] = _round64(lanes[i], word)

    def _hash_final(self) -> bytes:
        s0, s1, s2, s3 = self._lanes
        total = self.total_length
        if total >= self._block_size:
            result = (rotl64(s0, 1) + rotl64(s1, 7) + rotl64(s2, 12) + rotl64(s3, 18)) & MASK64
            for lane in (s0, s1, s2, s3):
                result = ((result ^ _round64(0, lane)) * PRIME64_1 + PRIME64_4) & MASK64
        else:
            result = (s2 + PRIME64_5) & MASK64
        result = (result + total) & MASK64

        tail = self._pending()
        pos = 0
        while pos + 8 <= len(tail):
            word = int.from_bytes(tail[pos:pos + 8], "little")
            result = (rotl64(result ^ _round64(0, word), 27) * PRIME64_1 + PRIME64_4) & MASK64
            pos += 8
        if pos + 4 <= len(tail):
            word = int.from_bytes(tail[pos:pos + 4], "little")
            result = (rotl64(result ^ ((word * PRIME64_1) & MASK64), 23) * PRIME64_2 + PRIME64_3) & MASK64
            pos += 4
        for byte in tail[pos:]:
            result = (rotl64(result ^ ((byte * PRIME64_5) & MASK64), 11) * PRIME64_1) & MASK64

        result ^= result >> 33
        result = (result * PRIME64_2) & MASK64
        result ^= result >> 29
        result = (result * PRIME64_3) & MASK64
        result ^= result >> 32
        return result.to_bytes(8, "big")


def xxh32(data: bytes, seed: int = 0) -> int:
    return int.from_bytes(XxHash32(seed, data).digest(), "big")


def xxh64(data: bytes, seed: int = 0) -> int:
    return int.from_bytes(XxHash64(seed, data).digest(), "big")
