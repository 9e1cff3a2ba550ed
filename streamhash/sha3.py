"""
SHA-3 (FIPS 202) on the Keccak-f[1600] sponge.

The state is 25 little-endian 64-bit lanes addressed linearly (lane x + 5y).
The rate depends on the digest width: 200 - 2 * (bits / 8) bytes. Every
supported digest is shorter than the rate, so one squeeze suffices.
"""
from __future__ import annotations

import enum
import struct
from typing import List

from .bits import MASK64, rotl64 as _rotl
from .engine import BlockHashAlgorithm, BytesLike
from .errors import ConfigurationError

ROUNDS = 24
STATE_LANES = 25

ROUND_CONSTANTS = (
    0x0000000000000001, 0x0000000000008082, 0x800000000000808A, 0x8000000080008000,
    0x000000000000808B, 0x0000000080000001, 0x8000000080008081, 0x8000000000008009,
    0x000000000000008A, 0x0000000000000088, 0x0000000080008009, 0x000000008000000A,
    0x000000008000808B, 0x800000000000008B, 0x8000000000008089, 0x8000000000008003,
    0x8000000000008002, 0x8000000000000080, 0x000000000000800A, 0x800000008000000A,
    0x8000000080008081, 0x8000000000008080, 0x0000000080000001, 0x8000000080008008,
)

# Rho and Pi folded into one walk: lane 1 moves to PI_LANES[0] rotated by
# RHO_OFFSETS[0], the lane it displaces moves on to PI_LANES[1], and so on.
PI_LANES = (
    10, 7, 11, 17, 18, 3, 5, 16, 8, 21, 24, 4,
    15, 23, 19, 13, 12, 2, 20, 14, 22, 9, 6, 1,
)
RHO_OFFSETS = (
    1, 3, 6, 10, 15, 21, 28, 36, 45, 55, 2, 14,
    27, 41, 56, 8, 25, 43, 62, 18, 39, 61, 20, 44,
)

# SHA-3 domain suffix 01 followed by the first pad bit
SHA3_SUFFIX = 0x06


class Sha3Bits(enum.IntEnum):
    BITS_224 = 224
    BITS_256 = 256
    BITS_384 = 384
    BITS_512 = 512


def keccak_f(a: List[int]) -> None:
    """Apply the 24-round Keccak-f[1600] permutation to `a` in place."""
    for rc in ROUND_CONSTANTS:
        # Theta
        c = [a[i] ^ a[i + 5] ^ a[i + 10] ^ a[i + 15] ^ a[i + 20] for i in range(5)]
        for i in range(5):
            d = c[(i + 4) % 5] ^ _rotl(c[(i + 1) % 5], 1)
            for j in range(i, STATE_LANES, 5):
                a[j] ^= d

        # Rho Pi
        last = a[1]
        for pos, rot in zip(PI_LANES, RHO_OFFSETS):
            a[pos], last = _rotl(last, rot), a[pos]

        # Chi
        for j in range(0, STATE_LANES, 5):
            b0, b1, b2, b3, b4 = a[j:j + 5]
            a[j] = b0 ^ (~b1 & b2)
            a[j + 1] = b1 ^ (~b2 & b3)
            a[j + 2] = b2 ^ (~b3 & b4)
            a[j + 3] = b3 ^ (~b4 & b0)
            a[j + 4] = b4 ^ (~b0 & b1)

        # Iota
        a[0] ^= rc


class Sha3(BlockHashAlgorithm):
    """
    SHA3-224/256/384/512.

    `permutations` counts Keccak-f calls on the stream state. finalize()
    permutes the padded last block on a copy, which is not counted.
    """

    def __init__(self, bits: int = Sha3Bits.BITS_256, data: BytesLike | None = None):
        try:
            self._bits = Sha3Bits(bits)
        except ValueError as e:
            raise ConfigurationError(
                f"SHA-3 digest width must be one of 224, 256, 384, 512; got {bits!r}",
                parameter="bits",
            ) from e
        super().__init__(200 - 2 * (self._bits // 8))
        self._lane_format = "<%dQ" % (self._block_size // 8)
        self.initialize()
        if data:
            self.update(data)

    @property
    def name(self) -> str:
        return "sha3-%d" % self._bits

    @property
    def hash_size(self) -> int:
        return int(self._bits)

    @property
    def lanes(self) -> tuple:
        return tuple(self._lanes)

    def initialize(self) -> None:
        self._lanes = [0] * STATE_LANES
        self.permutations = 0
        self._reset_buffer()

    def _absorb(self, lanes: List[int], block: BytesLike) -> None:
        for i, word in enumerate(struct.unpack_from(self._lane_format, block)):
            lanes[i] ^= word
        keccak_f(lanes)

    def _process_block(self, block: BytesLike) -> None:
        self._absorb(self._lanes, block)
        self.permutations += 1

    def _hash_final(self) -> bytes:
        # pad10*1 on a copy: suffix byte, zeros, then 0x80 OR-ed into the last byte
        block = bytearray(self._block_size)
        block[:self._buffer_size] = self._buffer[:self._buffer_size]
        block[self._buffer_size] = SHA3_SUFFIX
        block[-1] |= 0x80
        lanes = list(self._lanes)
        self._absorb(lanes, block)
        out = struct.pack("<%dQ" % STATE_LANES, *(x & MASK64 for x in lanes))
        return out[:self.digest_size]


def sha3_224(data: bytes) -> bytes:
    return Sha3(224, data).digest()


def sha3_256(data: bytes) -> bytes:
    return Sha3(256, data).digest()


def sha3_384(data: bytes) -> bytes:
    return Sha3(384, data).digest()


def sha3_512(data: bytes) -> bytes:
    return Sha3(512, data).digest()
