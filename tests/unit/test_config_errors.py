"""
Tests for runtime configuration and the error model.
"""
import pytest

from streamhash import (
    ConfigurationError,
    ErrorCodes,
    HashErrorInfo,
    HashingConfig,
    InvalidInputError,
    StreamHashException,
    StreamReadError,
    UnsupportedAlgorithmError,
    get_config,
    set_config,
)
from streamhash.config import DEFAULT_READ_CHUNK_SIZE

ENV_VARS = ("STREAMHASH_READ_CHUNK_SIZE", "STREAMHASH_HEX_UPPER_CASE", "STREAMHASH_HEX_SPACED")


@pytest.fixture
def clean_env(monkeypatch):
    # set-then-delete so that teardown also removes anything load_dotenv adds
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestHashingConfig:
    def test_defaults(self):
        config = HashingConfig()
        assert config.read_chunk_size == DEFAULT_READ_CHUNK_SIZE
        assert config.hex_upper_case is True
        assert config.hex_spaced is False

    def test_default_chunk_is_multiple_of_every_sha3_rate(self):
        for rate in (144, 136, 104, 72):
            assert DEFAULT_READ_CHUNK_SIZE % rate == 0

    @pytest.mark.parametrize("size", [0, -1, True, "4096", 1.5])
    def test_rejects_bad_chunk_size(self, size):
        with pytest.raises(ConfigurationError) as exc_info:
            HashingConfig(read_chunk_size=size)
        assert exc_info.value.details["parameter"] == "read_chunk_size"

    def test_from_dict_partial(self):
        config = HashingConfig.from_dict({"hex_spaced": True})
        assert config.hex_spaced is True
        assert config.read_chunk_size == DEFAULT_READ_CHUNK_SIZE

    def test_from_dict_unknown_key(self):
        with pytest.raises(ConfigurationError) as exc_info:
            HashingConfig.from_dict({"chunk": 1})
        assert exc_info.value.details["keys"] == ["chunk"]

    def test_to_dict_round_trip(self):
        config = HashingConfig(read_chunk_size=4096, hex_upper_case=False)
        assert HashingConfig.from_dict(config.to_dict()) == config

    def test_from_env(self, clean_env, tmp_path):
        clean_env.setenv("STREAMHASH_READ_CHUNK_SIZE", "8192")
        clean_env.setenv("STREAMHASH_HEX_UPPER_CASE", "no")
        config = HashingConfig.from_env(str(tmp_path / "absent.env"))
        assert config.read_chunk_size == 8192
        assert config.hex_upper_case is False
        assert config.hex_spaced is False

    def test_from_dotenv_file(self, clean_env, tmp_path):
        dotenv = tmp_path / ".env"
        dotenv.write_text("STREAMHASH_HEX_SPACED=true\nSTREAMHASH_READ_CHUNK_SIZE=512\n")
        config = HashingConfig.from_env(str(dotenv))
        assert config.hex_spaced is True
        assert config.read_chunk_size == 512

    def test_environment_wins_over_dotenv(self, clean_env, tmp_path):
        dotenv = tmp_path / ".env"
        dotenv.write_text("STREAMHASH_READ_CHUNK_SIZE=512\n")
        clean_env.setenv("STREAMHASH_READ_CHUNK_SIZE", "1024")
        assert HashingConfig.from_env(str(dotenv)).read_chunk_size == 1024

    @pytest.mark.parametrize("name,value", [
        ("STREAMHASH_READ_CHUNK_SIZE", "lots"),
        ("STREAMHASH_READ_CHUNK_SIZE", "-5"),
        ("STREAMHASH_HEX_SPACED", "maybe"),
    ])
    def test_from_env_invalid(self, clean_env, tmp_path, name, value):
        clean_env.setenv(name, value)
        with pytest.raises(ConfigurationError):
            HashingConfig.from_env(str(tmp_path / "absent.env"))

    def test_frozen(self):
        with pytest.raises(AttributeError):
            HashingConfig().hex_spaced = True


class TestGlobalConfig:
    def test_set_and_reset(self):
        custom = HashingConfig(read_chunk_size=64)
        set_config(custom)
        assert get_config() is custom
        set_config(None)
        assert get_config() == HashingConfig()


class TestErrorModel:
    def test_hierarchy(self):
        assert issubclass(ConfigurationError, StreamHashException)
        assert issubclass(ConfigurationError, ValueError)
        assert issubclass(UnsupportedAlgorithmError, ConfigurationError)
        assert issubclass(InvalidInputError, ValueError)
        assert issubclass(StreamReadError, OSError)

    def test_default_codes(self):
        assert ConfigurationError("x").code == ErrorCodes.INVALID_CONFIGURATION
        assert InvalidInputError("x").code == ErrorCodes.INVALID_INPUT
        assert StreamReadError("x").code == ErrorCodes.STREAM_READ_FAILED
        assert StreamHashException("x").code == "STREAMHASH_ERROR"

    def test_to_error_model(self):
        err = StreamReadError("read failed", bytes_read=42)
        info = err.to_error_model()
        assert isinstance(info, HashErrorInfo)
        assert info.code == ErrorCodes.STREAM_READ_FAILED
        assert info.details == {"bytes_read": 42}
        assert info.model_dump()["message"] == "read failed"

    def test_round_trip_through_json(self):
        info = ConfigurationError("bad", parameter="seed").to_error_model()
        restored = HashErrorInfo.model_validate_json(info.model_dump_json())
        exc = restored.to_exception()
        assert isinstance(exc, StreamHashException)
        assert exc.code == ErrorCodes.INVALID_CONFIGURATION
        assert exc.details == {"parameter": "seed"}
        assert str(exc) == "bad"

    def test_error_model_forbids_extra_fields(self):
        with pytest.raises(ValueError):
            HashErrorInfo(code="X", message="y", extra=1)

    def test_repr(self):
        assert repr(InvalidInputError("oops")) == "InvalidInputError(code='INVALID_INPUT', message='oops')"
