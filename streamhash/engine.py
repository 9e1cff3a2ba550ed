"""
Streaming engine contract shared by every algorithm.

A HashAlgorithm owns its register file and is driven through
initialize() -> update()* -> finalize(). Feeding a payload in any chunking
yields the same digest as feeding it in one call. finalize() works on a
copy of the registers, so it may be called for an intermediate digest and
the stream may keep growing afterwards.

BlockHashAlgorithm adds the fixed-size block buffer used by the
Merkle-Damgard, sponge and xxHash families.
"""
from __future__ import annotations

import abc
import copy
import logging
from typing import BinaryIO, Optional, Union

from .config import get_config
from .errors import ConfigurationError, InvalidInputError, StreamReadError

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def hex_string(digest: bytes, upper_case: bool = True, spaced: bool = False) -> str:
    """Format a digest as hex, optionally upper-case and space separated."""
    text = digest.hex(" ") if spaced else digest.hex()
    return text.upper() if upper_case else text


def _byte_range(data: BytesLike, length: Optional[int], offset: int) -> memoryview:
    if isinstance(data, str):
        raise InvalidInputError("update() takes bytes, not str; encode the text first")
    try:
        view = memoryview(data).cast("B")
    except TypeError as e:
        raise InvalidInputError(
            f"update() takes a bytes-like object, got {type(data).__name__}"
        ) from e
    size = len(view)
    if offset < 0 or offset > size:
        raise InvalidInputError(
            f"offset {offset} outside buffer of {size} bytes",
            details={"offset": offset, "size": size},
        )
    if length is None:
        length = size - offset
    if length < 0 or offset + length > size:
        raise InvalidInputError(
            f"range [{offset}, {offset}+{length}) outside buffer of {size} bytes",
            details={"offset": offset, "length": length, "size": size},
        )
    return view[offset:offset + length]


class HashAlgorithm(abc.ABC):
    """Base class of every streaming hash."""

    name: str = ""

    def __init__(self) -> None:
        self._hash_value = b""

    @property
    @abc.abstractmethod
    def hash_size(self) -> int:
        """Size of the digest in bits."""

    @property
    def digest_size(self) -> int:
        return self.hash_size // 8

    @property
    def hash_value(self) -> bytes:
        """The digest produced by the most recent finalize()."""
        return self._hash_value

    @abc.abstractmethod
    def initialize(self) -> None:
        """Reset all registers to the start-of-stream state."""

    @abc.abstractmethod
    def _hash_core(self, data: memoryview) -> None:
        """Fold a non-empty byte range into the registers."""

    @abc.abstractmethod
    def _hash_final(self) -> bytes:
        """Return the digest of everything fed so far without disturbing the stream."""

    def update(self, data: BytesLike, length: Optional[int] = None, offset: int = 0) -> "HashAlgorithm":
        view = _byte_range(data, length, offset)
        if len(view):
            self._hash_core(view)
        return self

    def finalize(self) -> bytes:
        self._hash_value = self._hash_final()
        return self._hash_value

    def compute_hash(self, data: BytesLike, length: Optional[int] = None, offset: int = 0) -> bytes:
        self.initialize()
        self.update(data, length, offset)
        return self.finalize()

    def compute_hash_stream(self, stream: BinaryIO, chunk_size: Optional[int] = None) -> bytes:
        """
        Hash everything readable from `stream`, starting at its current position.

        A failing read aborts the computation with StreamReadError; no digest
        over the partial input is produced.
        """
        if chunk_size is None:
            chunk_size = get_config().read_chunk_size
        if chunk_size <= 0:
            raise ConfigurationError(
                f"chunk_size must be positive, got {chunk_size}", parameter="chunk_size"
            )

        self.initialize()
        self._hash_value = b""
        total = 0
        chunks = 0
        while True:
            try:
                chunk = stream.read(chunk_size)
            except OSError as e:
                logger.error("%s: stream read failed after %d bytes: %s", self.name, total, e)
                self.initialize()
                raise StreamReadError(
                    f"Reading input for {self.name} failed after {total} bytes",
                    bytes_read=total,
                ) from e
            if not chunk:
                break
            self.update(chunk)
            total += len(chunk)
            chunks += 1

        logger.debug("%s: hashed %d bytes from stream in %d chunks", self.name, total, chunks)
        return self.finalize()

    def hex_string(self, upper_case: Optional[bool] = None, spaced: Optional[bool] = None) -> str:
        config = get_config()
        return hex_string(
            self._hash_value,
            config.hex_upper_case if upper_case is None else upper_case,
            config.hex_spaced if spaced is None else spaced,
        )

    def __call__(self, data: Union[BytesLike, str]) -> str:
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.compute_hash(data)
        return self.hex_string()

    # hashlib-style aliases

    def digest(self) -> bytes:
        return self.finalize()

    def hexdigest(self) -> str:
        return self.finalize().hex()

    def copy(self) -> "HashAlgorithm":
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name} {self.hash_size}-bit>"


class BlockHashAlgorithm(HashAlgorithm):
    """
    Buffers input into fixed-size blocks for _process_block().

    Incoming bytes first top up a partially filled buffer; once it holds a
    whole block it is processed and cleared. Remaining whole blocks are
    processed straight from the caller's data and only the tail is copied
    into the buffer. Between calls 0 <= buffer_size < block_size.
    """

    def __init__(self, block_size: int) -> None:
        if block_size <= 0:
            raise ConfigurationError(
                f"block size must be positive, got {block_size}", parameter="block_size"
            )
        super().__init__()
        self._block_size = block_size
        self._buffer = bytearray(block_size)
        self._buffer_size = 0
        self._total_bytes = 0

    @property
    def block_size(self) -> int:
        return self._block_size

    @property
    def buffer_size(self) -> int:
        return self._buffer_size

    @property
    def total_bytes_processed(self) -> int:
        """Bytes folded into the registers; buffered bytes are not counted."""
        return self._total_bytes

    def _reset_buffer(self) -> None:
        self._buffer_size = 0
        self._total_bytes = 0

    @abc.abstractmethod
    def _process_block(self, block: BytesLike) -> None:
        """Fold exactly one block into the registers."""

    def _hash_core(self, data: memoryview) -> None:
        block_size = self._block_size
        pos = 0
        remaining = len(data)

        if self._buffer_size > 0:
            take = min(remaining, block_size - self._buffer_size)
            self._buffer[self._buffer_size:self._buffer_size + take] = data[:take]
            self._buffer_size += take
            pos += take
            remaining -= take
            if self._buffer_size < block_size:
                return
            self._process_block(self._buffer)
            self._total_bytes += block_size
            self._buffer_size = 0

        while remaining >= block_size:
            self._process_block(data[pos:pos + block_size])
            pos += block_size
            remaining -= block_size
            self._total_bytes += block_size

        if remaining:
            self._buffer[:remaining] = data[pos:]
            self._buffer_size = remaining

    def _pending(self) -> bytes:
        return bytes(self._buffer[:self._buffer_size])


__all__ = [
    "BytesLike",
    "HashAlgorithm",
    "BlockHashAlgorithm",
    "hex_string",
]
