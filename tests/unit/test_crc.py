"""
Tests for the slicing-by-16 CRC engine.

The bit-at-a-time CRC in helpers.py and zlib.crc32 serve as oracles, so
both the byte loop and the 64-byte sliced path are checked independently
of the lookup tables.
"""
import zlib

import pytest

from helpers import bytewise_crc, feed
from streamhash import (
    CASTAGNOLI_POLYNOMIAL,
    CRC_64_ISO_POLYNOMIAL,
    ECMA_182_POLYNOMIAL,
    JONES_POLYNOMIAL,
    ZLIB_POLYNOMIAL,
    ConfigurationError,
    Crc32,
    Crc64,
    crc32,
    crc64,
    new,
)
from streamhash.bits import MASK64
from streamhash.crc import MAX_SLICE, lookup_table

CHECK = b"123456789"

POLYNOMIALS = [
    (Crc32, ZLIB_POLYNOMIAL),
    (Crc32, CASTAGNOLI_POLYNOMIAL),
    (Crc64, ECMA_182_POLYNOMIAL),
    (Crc64, CRC_64_ISO_POLYNOMIAL),
    (Crc64, JONES_POLYNOMIAL),
]


class TestKnownVectors:
    def test_crc32(self):
        assert crc32(CHECK) == 0xCBF43926
        assert Crc32().compute_hash(CHECK).hex() == "cbf43926"

    def test_crc32c(self):
        assert new("crc32c").compute_hash(CHECK).hex() == "e3069283"

    def test_crc64_xz(self):
        assert crc64(CHECK) == 0x995DC9BBDF1939FA

    def test_crc64_iso(self):
        assert new("crc64-iso").compute_hash(CHECK).hex() == "b90956c775a41001"

    def test_crc64_jones_reflected_polynomial(self):
        """An all-ones seed starts the register at 0, giving the CRC-64/REDIS check value."""
        digest = Crc64(JONES_POLYNOMIAL, seed=MASK64).compute_hash(CHECK)
        assert int.from_bytes(digest, "big") ^ MASK64 == 0xE9C6D914C4B8D9CA
        assert JONES_POLYNOMIAL == 0x95AC9329AC4BC9B5

    def test_empty_input(self):
        assert crc32(b"") == 0
        assert crc64(b"") == 0
        assert Crc64().compute_hash(b"") == bytes(8)


class TestAgainstOracles:
    @pytest.mark.parametrize("length", [0, 1, 15, 16, 63, 64, 65, 127, 128, 129, 500, 701])
    def test_zlib_crc32(self, length, sample_data):
        data = sample_data[:length]
        assert crc32(data) == zlib.crc32(data)

    @pytest.mark.parametrize("seed", [0, 1, 0xDEADBEEF, 0xFFFFFFFF])
    def test_zlib_crc32_seeded(self, seed, sample_data):
        assert crc32(sample_data, seed) == zlib.crc32(sample_data, seed)

    def test_seed_continues_previous_crc(self, sample_data):
        head, tail = sample_data[:300], sample_data[300:]
        assert crc32(tail, crc32(head)) == crc32(sample_data)
        assert crc64(tail, crc64(head)) == crc64(sample_data)

    @pytest.mark.parametrize("cls,polynomial", POLYNOMIALS)
    @pytest.mark.parametrize("length", [3, 64, 200])
    def test_bitwise_reference(self, cls, polynomial, length, sample_data):
        data = sample_data[:length]
        h = cls(polynomial)
        h.update(data)
        assert h.value == bytewise_crc(data, polynomial, cls.WIDTH)

    @pytest.mark.parametrize("cls,polynomial", POLYNOMIALS)
    def test_unaligned_chunks(self, cls, polynomial, sample_data):
        expected = bytewise_crc(sample_data, polynomial, cls.WIDTH)
        digest = feed(cls(polynomial), sample_data, [1, 70, 3, 129])
        assert int.from_bytes(digest, "big") == expected


class TestLookupTable:
    def test_shared_between_instances(self):
        assert Crc32().table is Crc32().table
        assert Crc32().table is not Crc32(CASTAGNOLI_POLYNOMIAL).table
        assert lookup_table(64, ECMA_182_POLYNOMIAL) is Crc64().table

    def test_immutable_slices(self):
        table = Crc32().table
        assert len(table.slices) == MAX_SLICE
        assert all(isinstance(level, tuple) and len(level) == 256 for level in table.slices)
        with pytest.raises(TypeError):
            table[0][1] = 0

    def test_first_level_is_classic_table(self):
        table = Crc32().table
        assert table[0][1] == 0x77073096
        assert table[0][255] == 0x2D02EF8D

    def test_copy_keeps_table(self):
        h = Crc64()
        assert h.copy().table is h.table


class TestConfiguration:
    def test_names(self):
        assert Crc32().name == "crc32"
        assert Crc32(CASTAGNOLI_POLYNOMIAL).name == "crc32c"
        assert Crc64(JONES_POLYNOMIAL).name == "crc64-jones"
        assert Crc32(0x04C11DB7).name == "crc32-0x4C11DB7"

    @pytest.mark.parametrize("cls,polynomial", [(Crc32, 0), (Crc32, 1 << 32), (Crc64, -1), (Crc64, 1 << 64)])
    def test_invalid_polynomial(self, cls, polynomial):
        with pytest.raises(ConfigurationError) as exc_info:
            cls(polynomial)
        assert exc_info.value.details["parameter"] == "polynomial"

    @pytest.mark.parametrize("seed", [-1, 1 << 32])
    def test_invalid_seed(self, seed):
        with pytest.raises(ConfigurationError):
            Crc32(seed=seed)

    def test_digest_is_big_endian(self):
        h = Crc32()
        h.update(CHECK)
        assert h.finalize() == h.value.to_bytes(4, "big")
