# Merkle-Damgard skeleton: 64-byte blocks, 32-bit registers, length padding

from __future__ import annotations

import abc
from typing import Tuple

from .engine import BlockHashAlgorithm, BytesLike

BLOCK_SIZE = 64

State = Tuple[int, ...]


def md_padding(msg_len_bytes: int, byteorder: str) -> bytes:
    """0x80, zeros up to 56 mod 64, then the 64-bit message bit length."""
    bit_len = (msg_len_bytes * 8) & ((1 << 64) - 1)
    k = (56 - (msg_len_bytes + 1) % 64) % 64
    return b'\x80' + b'\x00' * k + bit_len.to_bytes(8, byteorder)


class MerkleDamgardHash(BlockHashAlgorithm):
    """
    Subclasses provide IV, the word byte order and a pure compress().

    compress() maps (registers, block) to new registers and never mutates,
    which lets finalize() pad a copy of the registers and leave the stream
    untouched.
    """

    IV: State = ()
    DIGEST_SIZE = 0
    # byte order of message words, the length field and the emitted registers
    BYTEORDER = "big"

    def __init__(self, data: BytesLike | None = None):
        super().__init__(BLOCK_SIZE)
        self.initialize()
        if data:
            self.update(data)

    @property
    def hash_size(self) -> int:
        return self.DIGEST_SIZE * 8

    @property
    def state(self) -> State:
        return self._state

    def initialize(self) -> None:
        self._state = tuple(self.IV)
        self._reset_buffer()

    @classmethod
    @abc.abstractmethod
    def compress(cls, state: State, block: BytesLike) -> State:
        """Fold one block into `state` and return the new registers."""

    def _process_block(self, block: BytesLike) -> None:
        self._state = self.compress(self._state, block)

    def _hash_final(self) -> bytes:
        length = self._total_bytes + self._buffer_size
        tail = self._pending() + md_padding(length, self.BYTEORDER)
        st = self._state
        for i in range(0, len(tail), BLOCK_SIZE):
            st = self.compress(st, tail[i:i + BLOCK_SIZE])
        return b''.join(x.to_bytes(4, self.BYTEORDER) for x in st)

    @classmethod
    def words(cls, block: BytesLike) -> list:
        order = cls.BYTEORDER
        return [int.from_bytes(block[i:i + 4], order) for i in range(0, BLOCK_SIZE, 4)]
