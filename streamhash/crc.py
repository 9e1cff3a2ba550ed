"""
Table-driven CRC-32 / CRC-64 with slicing-by-16.

Both widths use the reflected (right-shifting) convention. A lookup table
holds MAX_SLICE levels of 256 partial remainders: level 0 is the classic
byte table, level s advances level s-1 by one more zero byte. Sixteen input
bytes are then folded with sixteen lookups XOR-ed together. Inputs are
consumed in 64-byte groups with a byte-at-a-time loop for the remainder.

Tables are immutable and cached per (width, polynomial), so concurrent
instances with the same polynomial share one table.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Tuple

from .engine import HashAlgorithm
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

MAX_SLICE = 16
SLICE_BYTES = 16
UNROLL = 4
BYTES_AT_ONCE = SLICE_BYTES * UNROLL

# Reflected polynomials
ZLIB_POLYNOMIAL = 0xEDB88320
CASTAGNOLI_POLYNOMIAL = 0x82F63B78
ECMA_182_POLYNOMIAL = 0xC96C5795D7870F42
CRC_64_ISO_POLYNOMIAL = 0xD800000000000000
JONES_POLYNOMIAL = 0x95AC9329AC4BC9B5

POLYNOMIAL_NAMES = {
    (32, ZLIB_POLYNOMIAL): "crc32",
    (32, CASTAGNOLI_POLYNOMIAL): "crc32c",
    (64, ECMA_182_POLYNOMIAL): "crc64",
    (64, CRC_64_ISO_POLYNOMIAL): "crc64-iso",
    (64, JONES_POLYNOMIAL): "crc64-jones",
}


class LookupTable:
    """Read-only MAX_SLICE x 256 table of partial remainders for one polynomial."""

    __slots__ = ("width", "polynomial", "slices")

    def __init__(self, width: int, polynomial: int):
        self.width = width
        self.polynomial = polynomial
        base = []
        for i in range(256):
            entry = i
            for _ in range(8):
                entry = (entry >> 1) ^ ((entry & 1) * polynomial)
            base.append(entry)
        slices = [tuple(base)]
        for _ in range(1, MAX_SLICE):
            prev = slices[-1]
            slices.append(tuple((prev[i] >> 8) ^ base[prev[i] & 0xFF] for i in range(256)))
        self.slices: Tuple[Tuple[int, ...], ...] = tuple(slices)

    def __getitem__(self, level: int) -> Tuple[int, ...]:
        return self.slices[level]

    def __deepcopy__(self, memo):
        return self

    def __repr__(self) -> str:
        return "LookupTable(width=%d, polynomial=0x%X)" % (self.width, self.polynomial)


@lru_cache(maxsize=None)
def lookup_table(width: int, polynomial: int) -> LookupTable:
    logger.debug("Building CRC-%d slicing-by-%d table for polynomial 0x%X", width, MAX_SLICE, polynomial)
    return LookupTable(width, polynomial)


class Crc(HashAlgorithm):
    """
    Reflected CRC of `width` bits.

    The seed is the CRC of whatever preceded this stream (0 for a fresh
    one), matching zlib.crc32(data, value).
    """

    WIDTH = 0
    DEFAULT_POLYNOMIAL = 0

    def __init__(self, polynomial: int | None = None, seed: int = 0):
        super().__init__()
        if polynomial is None:
            polynomial = self.DEFAULT_POLYNOMIAL
        mask = (1 << self.WIDTH) - 1
        if not 0 < polynomial <= mask:
            raise ConfigurationError(
                f"CRC-{self.WIDTH} polynomial must be in 1..0x{mask:X}, got {polynomial!r}",
                parameter="polynomial",
            )
        if not 0 <= seed <= mask:
            raise ConfigurationError(
                f"CRC-{self.WIDTH} seed must be in 0..0x{mask:X}, got {seed!r}",
                parameter="seed",
            )
        self._mask = mask
        self._polynomial = polynomial
        self._seed = seed
        self._table = lookup_table(self.WIDTH, polynomial)
        self.initialize()

    @property
    def name(self) -> str:
        key = (self.WIDTH, self._polynomial)
        return POLYNOMIAL_NAMES.get(key, "crc%d-0x%X" % key)

    @property
    def hash_size(self) -> int:
        return self.WIDTH

    @property
    def polynomial(self) -> int:
        return self._polynomial

    @property
    def table(self) -> LookupTable:
        return self._table

    @property
    def value(self) -> int:
        """Current CRC as an integer."""
        return self._hash

    def initialize(self) -> None:
        self._hash = self._seed

    def _hash_core(self, data: memoryview) -> None:
        mask = self._mask
        word_bytes = self.WIDTH // 8
        slices = self._table.slices
        base = slices[0]
        crc = ~self._hash & mask

        n = len(data)
        pos = 0
        while n - pos >= BYTES_AT_ONCE:
            for _ in range(UNROLL):
                # the running CRC overlaps the first word of each 16-byte slice
                head = int.from_bytes(data[pos:pos + word_bytes], "little") ^ crc
                group = head.to_bytes(word_bytes, "little") + bytes(data[pos + word_bytes:pos + SLICE_BYTES])
                crc = 0
                for k, byte in enumerate(group):
                    crc ^= slices[MAX_SLICE - 1 - k][byte]
                pos += SLICE_BYTES

        for byte in data[pos:]:
            crc = (crc >> 8) ^ base[(crc & 0xFF) ^ byte]

        self._hash = ~crc & mask

    def _hash_final(self) -> bytes:
        return self._hash.to_bytes(self.WIDTH // 8, "big")


class Crc32(Crc):
    WIDTH = 32
    DEFAULT_POLYNOMIAL = ZLIB_POLYNOMIAL


class Crc64(Crc):
    WIDTH = 64
    DEFAULT_POLYNOMIAL = ECMA_182_POLYNOMIAL


def crc32(data: bytes, seed: int = 0) -> int:
    return Crc32(seed=seed).update(data).value


def crc64(data: bytes, seed: int = 0) -> int:
    return Crc64(seed=seed).update(data).value

