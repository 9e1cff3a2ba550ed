"""
Name-based construction of algorithms, hashlib style.

    >>> new("sha3-256").update(b"abc").hexdigest()[:8]
    '3a985da7'
"""
from __future__ import annotations

import logging
import os
from functools import partial
from typing import Any, Callable, Dict, List, Optional, Union

from .adler32 import Adler32
from .crc import (
    CASTAGNOLI_POLYNOMIAL,
    CRC_64_ISO_POLYNOMIAL,
    JONES_POLYNOMIAL,
    Crc32,
    Crc64,
)
from .engine import HashAlgorithm
from .errors import UnsupportedAlgorithmError
from .fnv import Fnv1, Fnv1a, FnvBits
from .md5 import Md5
from .sha1 import Sha1
from .sha256 import Sha256
from .sha3 import Sha3, Sha3Bits
from .sm3 import Sm3
from .stringhashes import (
    ApHash32,
    BkdrHash32,
    Djb2Hash32,
    JoaatHash32,
    JsHash32,
    PjwHash32,
    SdbmHash32,
)
from .xxh import XxHash32, XxHash64

logger = logging.getLogger(__name__)

Factory = Callable[..., HashAlgorithm]

_REGISTRY: Dict[str, Factory] = {
    "md5": Md5,
    "sha1": Sha1,
    "sha256": Sha256,
    "sm3": Sm3,
    "crc32": Crc32,
    "crc32c": partial(Crc32, CASTAGNOLI_POLYNOMIAL),
    "crc64": Crc64,
    "crc64-iso": partial(Crc64, CRC_64_ISO_POLYNOMIAL),
    "crc64-jones": partial(Crc64, JONES_POLYNOMIAL),
    "xxh32": XxHash32,
    "xxh64": XxHash64,
    "adler32": Adler32,
    "djb2": Djb2Hash32,
    "sdbm": SdbmHash32,
    "bkdr": BkdrHash32,
    "ap": ApHash32,
    "js": JsHash32,
    "pjw": PjwHash32,
    "joaat": JoaatHash32,
}
for _bits in Sha3Bits:
    _REGISTRY["sha3-%d" % _bits] = partial(Sha3, _bits)
for _bits in FnvBits:
    _REGISTRY["fnv1-%d" % _bits] = partial(Fnv1, _bits)
    _REGISTRY["fnv1a-%d" % _bits] = partial(Fnv1a, _bits)


def _normalize(name: str) -> str:
    return name.strip().lower().replace("_", "-")


def available_algorithms() -> List[str]:
    return sorted(_REGISTRY)


def register(name: str, factory: Factory) -> None:
    """Make `factory` constructible through new(name)."""
    _REGISTRY[_normalize(name)] = factory


def new(name: str, data: Optional[bytes] = None, **params: Any) -> HashAlgorithm:
    """
    Create the algorithm registered under `name`.

    Extra keyword arguments (seed, polynomial, ...) go to its constructor.
    Raises UnsupportedAlgorithmError for unknown names.
    """
    try:
        factory = _REGISTRY[_normalize(name)]
    except KeyError:
        raise UnsupportedAlgorithmError(name) from None
    logger.debug("Creating %s with %s", name, params or "defaults")
    algorithm = factory(**params)
    if data:
        algorithm.update(data)
    return algorithm


def file_digest(path: Union[str, "os.PathLike[str]"], name: Union[str, HashAlgorithm],
                chunk_size: Optional[int] = None, **params: Any) -> bytes:
    """Hash a file's contents by streaming it through the named algorithm."""
    algorithm = name if isinstance(name, HashAlgorithm) else new(name, **params)
    logger.debug("Hashing file %s with %s", path, algorithm.name)
    with open(path, "rb") as f:
        return algorithm.compute_hash_stream(f, chunk_size)
