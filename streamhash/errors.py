"""
Error taxonomy for streamhash.

The transform layer itself never fails on well-formed byte ranges; these
exceptions cover construction-time misconfiguration, malformed update
ranges and failures of the external byte stream a digest is read from.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorCodes:
    """Stable machine-readable error codes."""

    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    UNSUPPORTED_ALGORITHM = "UNSUPPORTED_ALGORITHM"
    INVALID_INPUT = "INVALID_INPUT"
    STREAM_READ_FAILED = "STREAM_READ_FAILED"


class HashErrorInfo(BaseModel):
    """Structured form of a streamhash error, for reporting across boundaries."""

    model_config = ConfigDict(extra="forbid")

    code: str = Field(..., description="Stable machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] = Field(default_factory=dict)

    def to_exception(self) -> "StreamHashException":
        return StreamHashException(self.message, code=self.code, details=dict(self.details))


class StreamHashException(Exception):
    """Base exception for all streamhash errors."""

    default_code = "STREAMHASH_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code or self.default_code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> HashErrorInfo:
        return HashErrorInfo(code=self.code, message=self.message, details=self.details)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class ConfigurationError(StreamHashException, ValueError):
    """Raised at construction time for invalid parameters or settings."""

    default_code = ErrorCodes.INVALID_CONFIGURATION

    def __init__(self, message: str, parameter: str | None = None,
                 details: dict[str, Any] | None = None) -> None:
        full_details = details or {}
        if parameter:
            full_details["parameter"] = parameter
        super().__init__(message, details=full_details)


class UnsupportedAlgorithmError(ConfigurationError):
    """Raised when a registry name does not map to an algorithm."""

    default_code = ErrorCodes.UNSUPPORTED_ALGORITHM

    def __init__(self, name: str) -> None:
        super().__init__(f"Unsupported hash algorithm: {name!r}", details={"name": name})


class InvalidInputError(StreamHashException, ValueError):
    """Raised when update() is handed something that is not a valid byte range."""

    default_code = ErrorCodes.INVALID_INPUT


class StreamReadError(StreamHashException, OSError):
    """
    Raised when the byte stream being hashed fails mid-read.

    The computation is abandoned: no digest over the truncated input is
    returned and the algorithm must be re-initialized before reuse.
    """

    default_code = ErrorCodes.STREAM_READ_FAILED

    def __init__(self, message: str, bytes_read: int = 0,
                 details: dict[str, Any] | None = None) -> None:
        full_details = details or {}
        full_details["bytes_read"] = bytes_read
        super().__init__(message, details=full_details)
        self.bytes_read = bytes_read


__all__ = [
    "ErrorCodes",
    "HashErrorInfo",
    "StreamHashException",
    "ConfigurationError",
    "UnsupportedAlgorithmError",
    "InvalidInputError",
    "StreamReadError",
]
