"""
streamhash: incremental hashing over arbitrarily chunked byte streams.

Every algorithm follows one contract: initialize(), update() in any
chunking, finalize() -> fixed-length digest.
"""
from .adler32 import Adler32, adler32
from .config import HashingConfig, get_config, set_config
from .crc import (
    CASTAGNOLI_POLYNOMIAL,
    CRC_64_ISO_POLYNOMIAL,
    ECMA_182_POLYNOMIAL,
    JONES_POLYNOMIAL,
    ZLIB_POLYNOMIAL,
    Crc32,
    Crc64,
    LookupTable,
    crc32,
    crc64,
)
from .engine import BlockHashAlgorithm, HashAlgorithm, hex_string
from .errors import (
    ConfigurationError,
    ErrorCodes,
    HashErrorInfo,
    InvalidInputError,
    StreamHashException,
    StreamReadError,
    UnsupportedAlgorithmError,
)
from .fnv import Fnv1, Fnv1a, FnvBits
from .md5 import Md5, md5
from .registry import available_algorithms, file_digest, new, register
from .sha1 import Sha1, sha1
from .sha256 import Sha256, sha256
from .sha3 import Sha3, Sha3Bits, sha3_224, sha3_256, sha3_384, sha3_512
from .sm3 import Sm3, sm3, sm3_hex
from .stringhashes import (
    ApHash32,
    BkdrHash32,
    Djb2Hash32,
    JoaatHash32,
    JsHash32,
    PjwHash32,
    SdbmHash32,
)
from .xxh import XxHash32, XxHash64, xxh32, xxh64

__version__ = "0.1.0"

__all__ = [
    "HashAlgorithm",
    "BlockHashAlgorithm",
    "hex_string",
    "new",
    "register",
    "available_algorithms",
    "file_digest",
    "HashingConfig",
    "get_config",
    "set_config",
    "ErrorCodes",
    "HashErrorInfo",
    "StreamHashException",
    "ConfigurationError",
    "UnsupportedAlgorithmError",
    "InvalidInputError",
    "StreamReadError",
    "Md5",
    "Sha1",
    "Sha256",
    "Sm3",
    "Sha3",
    "Sha3Bits",
    "Crc32",
    "Crc64",
    "LookupTable",
    "ZLIB_POLYNOMIAL",
    "CASTAGNOLI_POLYNOMIAL",
    "ECMA_182_POLYNOMIAL",
    "CRC_64_ISO_POLYNOMIAL",
    "JONES_POLYNOMIAL",
    "XxHash32",
    "XxHash64",
    "Fnv1",
    "Fnv1a",
    "FnvBits",
    "Adler32",
    "Djb2Hash32",
    "SdbmHash32",
    "BkdrHash32",
    "ApHash32",
    "JsHash32",
    "PjwHash32",
    "JoaatHash32",
    "md5",
    "sha1",
    "sha256",
    "sm3",
    "sm3_hex",
    "sha3_224",
    "sha3_256",
    "sha3_384",
    "sha3_512",
    "crc32",
    "crc64",
    "xxh32",
    "xxh64",
    "adler32",
]
