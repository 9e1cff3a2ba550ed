"""
Tests for the SHA-3 sponge, with hashlib.sha3_* as the oracle.
"""
import hashlib

import pytest

from helpers import feed
from streamhash import ConfigurationError, Sha3, Sha3Bits, sha3_224, sha3_256, sha3_384, sha3_512
from streamhash.sha3 import keccak_f

ORACLES = {
    224: hashlib.sha3_224,
    256: hashlib.sha3_256,
    384: hashlib.sha3_384,
    512: hashlib.sha3_512,
}


class TestSha3:
    @pytest.mark.parametrize("bits", list(Sha3Bits))
    @pytest.mark.parametrize("length", [0, 1, 71, 72, 103, 104, 135, 136, 137, 143, 144, 145, 500])
    def test_matches_hashlib(self, bits, length, sample_data):
        data = sample_data[:length]
        assert Sha3(bits).compute_hash(data) == ORACLES[bits](data).digest()

    @pytest.mark.parametrize("bits", list(Sha3Bits))
    def test_rate(self, bits):
        assert Sha3(bits).block_size == 200 - 2 * (bits // 8)

    def test_chunked(self, sample_data):
        assert feed(Sha3(384), sample_data, [7, 130]) == hashlib.sha3_384(sample_data).digest()

    def test_helpers(self):
        assert sha3_224(b"abc") == hashlib.sha3_224(b"abc").digest()
        assert sha3_256(b"abc").hex() == \
            "3a985da74fe225b2045c172d6bd390bd855f086e3e9d525b46bfe24511431532"
        assert sha3_384(b"abc") == hashlib.sha3_384(b"abc").digest()
        assert sha3_512(b"abc") == hashlib.sha3_512(b"abc").digest()

    def test_name(self):
        assert Sha3(512).name == "sha3-512"

    @pytest.mark.parametrize("bits", [0, 160, 255, 1024])
    def test_invalid_width(self, bits):
        with pytest.raises(ConfigurationError) as exc_info:
            Sha3(bits)
        assert exc_info.value.details["parameter"] == "bits"


class TestPermutationCount:
    """One Keccak-f call per absorbed block; finalize() permutes a copy."""

    def test_short_message_never_permutes_stream_state(self):
        h = Sha3(256)
        h.update(b"abc")
        assert h.permutations == 0
        h.finalize()
        assert h.permutations == 0

    def test_full_rate_block(self):
        h = Sha3(256)
        h.update(bytes(136))
        assert h.permutations == 1
        assert h.buffer_size == 0
        h.finalize()
        assert h.permutations == 1

    def test_repeated_finalize_does_not_count(self):
        h = Sha3(256)
        h.update(bytes(300))
        for _ in range(3):
            h.finalize()
        assert h.permutations == 2

    def test_finalize_leaves_lanes(self):
        h = Sha3(256)
        h.update(bytes(200))
        lanes = h.lanes
        h.finalize()
        assert h.lanes == lanes

    def test_initialize_resets_counter(self):
        h = Sha3(256)
        h.update(bytes(300))
        h.initialize()
        assert h.permutations == 0
        assert h.lanes == (0,) * 25


class TestKeccakF:
    def test_zero_state(self):
        """First lane of Keccak-f[1600] applied to the all-zero state."""
        state = [0] * 25
        keccak_f(state)
        assert state[0] == 0xF1258F7940E1DDE7
        assert all(0 <= lane < 1 << 64 for lane in state)
