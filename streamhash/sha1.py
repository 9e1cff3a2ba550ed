# SHA-1 (FIPS 180-4)

from __future__ import annotations

from .bits import MASK32, rotl32 as _rotl
from .md import MerkleDamgardHash, State
from .engine import BytesLike

IV = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

K = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)


def _schedule(W: list) -> list:
    for t in range(16, 80):
        W.append(_rotl(W[t-3] ^ W[t-8] ^ W[t-14] ^ W[t-16], 1))
    return W


class Sha1(MerkleDamgardHash):
    name = "sha1"
    IV = IV
    DIGEST_SIZE = 20
    BYTEORDER = "big"

    @classmethod
    def compress(cls, state: State, block: BytesLike) -> State:
        W = _schedule(cls.words(block))
        a, b, c, d, e = state
        for t in range(80):
            if t < 20:
                f = d ^ (b & (c ^ d))
                k = K[0]
            elif t < 40:
                f = b ^ c ^ d
                k = K[1]
            elif t < 60:
                f = (b & c) | (b & d) | (c & d)
                k = K[2]
            else:
                f = b ^ c ^ d
                k = K[3]
            temp = (_rotl(a, 5) + f + e + k + W[t]) & MASK32
            e = d
            d = c
            c = _rotl(b, 30)
            b = a
            a = temp
        return tuple((x + y) & MASK32 for x, y in zip(state, (a, b, c, d, e)))


def sha1(data: bytes) -> bytes:
    return Sha1(data).digest()
