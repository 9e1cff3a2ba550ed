"""
Runtime Configuration

Process-wide defaults for stream hashing and digest formatting.
"""
from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from typing import Any, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

# 144 * 7 * 1024: about 1 MiB per read and divisible by every SHA-3 rate
DEFAULT_READ_CHUNK_SIZE = 1032192

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}", parameter=name)


@dataclass(frozen=True)
class HashingConfig:
    """Configuration for stream hashing and hex formatting."""
    read_chunk_size: int = DEFAULT_READ_CHUNK_SIZE
    hex_upper_case: bool = True
    hex_spaced: bool = False

    def __post_init__(self):
        size = self.read_chunk_size
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ConfigurationError(
                f"read_chunk_size must be a positive integer, got {self.read_chunk_size!r}",
                parameter="read_chunk_size",
            )

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Collect overrides from environment variables.

        Supported variables:
        - STREAMHASH_READ_CHUNK_SIZE: bytes pulled per stream read
        - STREAMHASH_HEX_UPPER_CASE: default hex case (true/false)
        - STREAMHASH_HEX_SPACED: separate hex bytes with spaces (true/false)
        """
        overrides: dict[str, Any] = {}

        chunk = os.getenv("STREAMHASH_READ_CHUNK_SIZE")
        if chunk:
            try:
                overrides["read_chunk_size"] = int(chunk)
            except ValueError as e:
                raise ConfigurationError(
                    f"STREAMHASH_READ_CHUNK_SIZE must be an integer, got {chunk!r}",
                    parameter="read_chunk_size",
                ) from e

        upper = os.getenv("STREAMHASH_HEX_UPPER_CASE")
        if upper:
            overrides["hex_upper_case"] = _parse_bool("STREAMHASH_HEX_UPPER_CASE", upper)

        spaced = os.getenv("STREAMHASH_HEX_SPACED")
        if spaced:
            overrides["hex_spaced"] = _parse_bool("STREAMHASH_HEX_SPACED", spaced)

        return overrides

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "HashingConfig":
        """Load configuration from the environment, reading a .env file first."""
        load_dotenv(dotenv_path)
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HashingConfig":
        """Build a configuration from partial data; missing keys keep their defaults."""
        unknown = set(data) - {"read_chunk_size", "hex_upper_case", "hex_spaced"}
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {', '.join(sorted(unknown))}",
                details={"keys": sorted(unknown)},
            )
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


_config: Optional[HashingConfig] = None


def get_config() -> HashingConfig:
    global _config
    if _config is None:
        _config = HashingConfig()
    return _config


def set_config(config: Optional[HashingConfig]) -> None:
    """Replace the process-wide configuration; None restores the defaults."""
    global _config
    _config = config


__all__ = [
    "DEFAULT_READ_CHUNK_SIZE",
    "HashingConfig",
    "get_config",
    "set_config",
]
