# SM3 (GB/T 32905-2016)

from __future__ import annotations

from typing import List, Tuple

from .bits import MASK32, rotl32 as _rotl
from .md import MerkleDamgardHash, State
from .engine import BytesLike

IV = (
    0x7380166F, 0x4914B2B9, 0x172442D7, 0xDA8A0600,
    0xA96F30BC, 0x163138AA, 0xE38DEE4D, 0xB0FB0E4E
)

T0 = 0x79CC4519
T1 = 0x7A879D8A

# rotl(Tj, j) for each round, computed once
_TJ = tuple(_rotl(T0 if j <= 15 else T1, j % 32) for j in range(64))


def _ff(x: int, y: int, z: int, j: int) -> int:
    if j <= 15:
        return x ^ y ^ z
    return (x & y) | (x & z) | (y & z)


def _gg(x: int, y: int, z: int, j: int) -> int:
    if j <= 15:
        return x ^ y ^ z
    return (x & y) | (~x & z)


def _p0(x: int) -> int:
    return x ^ _rotl(x, 9) ^ _rotl(x, 17)


def _p1(x: int) -> int:
    return x ^ _rotl(x, 15) ^ _rotl(x, 23)


def _expand(W: List[int]) -> Tuple[list, list]:
    for j in range(16, 68):
        x = W[j-16] ^ W[j-9] ^ _rotl(W[j-3], 15)
        W.append(_p1(x) ^ _rotl(W[j-13], 7) ^ W[j-6])
    Wp = [W[j] ^ W[j+4] for j in range(64)]
    return W, Wp


class Sm3(MerkleDamgardHash):
    name = "sm3"
    IV = IV
    DIGEST_SIZE = 32
    BYTEORDER = "big"

    @classmethod
    def compress(cls, V: State, B: BytesLike) -> State:
        A, Bv, C, D, E, F, G, H = V
        W, Wp = _expand(cls.words(B))
        for j in range(64):
            a12 = _rotl(A, 12)
            SS1 = _rotl((a12 + E + _TJ[j]) & MASK32, 7)
            SS2 = SS1 ^ a12
            TT1 = (_ff(A, Bv, C, j) + D + SS2 + Wp[j]) & MASK32
            TT2 = (_gg(E, F, G, j) + H + SS1 + W[j]) & MASK32
            D = C
            C = _rotl(Bv, 9)
            Bv = A
            A = TT1
            H = G
            G = _rotl(F, 19)
            F = E
            E = _p0(TT2)
        return (
            A ^ V[0], Bv ^ V[1], C ^ V[2], D ^ V[3],
            E ^ V[4], F ^ V[5], G ^ V[6], H ^ V[7]
        )


def sm3(data: bytes) -> bytes:
    return Sm3(data).digest()


def sm3_hex(data: bytes) -> str:
    return sm3(data).hex()
