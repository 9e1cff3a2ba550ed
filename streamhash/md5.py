# MD5 (RFC 1321)

from __future__ import annotations

from .bits import MASK32, rotl32 as _rotl
from .md import MerkleDamgardHash, State
from .engine import BytesLike

IV = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

K = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE, 0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE, 0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA, 0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED, 0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C, 0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05, 0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039, 0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1, 0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

SHIFTS = (7, 12, 17, 22) * 4 + (5, 9, 14, 20) * 4 + (4, 11, 16, 23) * 4 + (6, 10, 15, 21) * 4

# message word consumed by each of the 64 steps
WORD_INDEX = tuple(
    [i for i in range(16)]
    + [(5 * i + 1) % 16 for i in range(16, 32)]
    + [(3 * i + 5) % 16 for i in range(32, 48)]
    + [(7 * i) % 16 for i in range(48, 64)]
)


class Md5(MerkleDamgardHash):
    """MD5 reads words, writes the length field and emits registers little-endian."""

    name = "md5"
    IV = IV
    DIGEST_SIZE = 16
    BYTEORDER = "little"

    @classmethod
    def compress(cls, state: State, block: BytesLike) -> State:
        M = cls.words(block)
        a, b, c, d = state
        for i in range(64):
            if i < 16:
                f = d ^ (b & (c ^ d))
            elif i < 32:
                f = c ^ (d & (b ^ c))
            elif i < 48:
                f = b ^ c ^ d
            else:
                f = c ^ (b | (~d & MASK32))
            f = (f + a + K[i] + M[WORD_INDEX[i]]) & MASK32
            a, d, c = d, c, b
            b = (b + _rotl(f, SHIFTS[i])) & MASK32
        return (
            (state[0] + a) & MASK32,
            (state[1] + b) & MASK32,
            (state[2] + c) & MASK32,
            (state[3] + d) & MASK32,
        )


def md5(data: bytes) -> bytes:
    return Md5(data).digest()
