# FNV-1 / FNV-1a (Fowler-Noll-Vo), 32 to 512 bits

from __future__ import annotations

import enum

from .engine import HashAlgorithm, BytesLike
from .errors import ConfigurationError


class FnvBits(enum.IntEnum):
    BITS_32 = 32
    BITS_64 = 64
    BITS_128 = 128
    BITS_256 = 256
    BITS_512 = 512


# width -> (prime, offset basis)
FNV_PARAMETERS = {
    32: (0x01000193, 0x811C9DC5),
    64: (0x100000001B3, 0xCBF29CE484222325),
    128: ((1 << 88) + 0x13B, int(
        "6C62272E07BB014262B821756295C58D", 16)),
    256: ((1 << 168) + 0x163, int(
        "DD268DBCAAC550362D98C384C4E576CC"
        "C8B1536847B6BBB31023B4C8CAEE0535", 16)),
    512: ((1 << 344) + 0x157, int(
        "B86DB0B1171F4416DCA1E50F309990AC"
        "AC87D059C90000000000000000000D21"
        "E948F68A34C192F62EA79BC942DBE7CE"
        "182036415F56E34BAC982AAC4AFE9FD9", 16)),
}


class _Fnv(HashAlgorithm):
    VARIANT = ""

    def __init__(self, bits: int = FnvBits.BITS_32, data: BytesLike | None = None):
        super().__init__()
        try:
            self._bits = FnvBits(bits)
        except ValueError as e:
            raise ConfigurationError(
                f"FNV width must be one of {', '.join(str(int(b)) for b in FnvBits)}; got {bits!r}",
                parameter="bits",
            ) from e
        self._prime, self._offset_basis = FNV_PARAMETERS[self._bits]
        self._mask = (1 << self._bits) - 1
        self.initialize()
        if data:
            self.update(data)

    @property
    def name(self) -> str:
        return "%s-%d" % (self.VARIANT, self._bits)

    @property
    def hash_size(self) -> int:
        return int(self._bits)

    @property
    def value(self) -> int:
        return self._hash

    def initialize(self) -> None:
        self._hash = self._offset_basis

    def _hash_final(self) -> bytes:
        return self._hash.to_bytes(self._bits // 8, "big")


class Fnv1(_Fnv):
    """hash = (hash * prime) ^ byte"""

    VARIANT = "fnv1"

    def _hash_core(self, data: memoryview) -> None:
        h, prime, mask = self._hash, self._prime, self._mask
        for byte in data:
            h = ((h * prime) & mask) ^ byte
        self._hash = h


class Fnv1a(_Fnv):
    """hash = (hash ^ byte) * prime"""

    VARIANT = "fnv1a"

    def _hash_core(self, data: memoryview) -> None:
        h, prime, mask = self._hash, self._prime, self._mask
        for byte in data:
            h = ((h ^ byte) * prime) & mask
        self._hash = h
