"""
Schemas & Canonicalization
File: errors.py

Purpose: Standard error taxonomy for key loading, key identity and signatures.
Defines both a Pydantic model for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across keylib."""

    # I/O
    KEY_FILE_ERROR = "KEY_FILE_ERROR"

    # Input encoding errors (no PEM block, bad JSON, bad hex, wrong length)
    FORMAT_ERROR = "FORMAT_ERROR"

    # Wrong algorithm / keytype / scheme
    KEY_TYPE_ERROR = "KEY_TYPE_ERROR"

    # Well-formed container, invalid inner encoding (e.g. bad DER)
    PARSE_ERROR = "PARSE_ERROR"
    MISSING_PRIVATE_KEY = "MISSING_PRIVATE_KEY"

    # Cryptographic check failed
    SIGNATURE_VERIFICATION_FAILED = "SIGNATURE_VERIFICATION_FAILED"

    # Identity payload serialization failed
    CANONICALIZATION_ERROR = "CANONICALIZATION_ERROR"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class KeylibError(BaseModel):
    """
    Error model for structured error reporting.

    The CLI prints it for JSON output; exceptions convert to it via
    ``to_error_model``.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.FORMAT_ERROR],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class KeylibException(Exception):
    """
    Base exception for all keylib errors.

    This exception carries structured error information and can be
    converted to a KeylibError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "KEYLIB_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> KeylibError:
        """Convert this exception to a KeylibError model."""
        return KeylibError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class KeyFileError(KeylibException):
    """Raised when a key file is missing or cannot be read."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if path:
            full_details["path"] = path
        super().__init__(
            message=message,
            code=ErrorCodes.KEY_FILE_ERROR,
            details=full_details,
        )
        self.path = path


class FormatException(KeylibException):
    """Raised for malformed input: no PEM block, invalid JSON, bad hex."""

    def __init__(
        self,
        message: str,
        field_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_path:
            full_details["field_path"] = field_path
        super().__init__(
            message=message,
            code=ErrorCodes.FORMAT_ERROR,
            details=full_details,
        )


class KeyTypeException(KeylibException):
    """Raised when a key is not of the expected algorithm, keytype or scheme."""

    def __init__(
        self,
        message: str,
        expected: str | None = None,
        actual: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if expected is not None:
            full_details["expected"] = expected
        if actual is not None:
            full_details["actual"] = actual
        super().__init__(
            message=message,
            code=ErrorCodes.KEY_TYPE_ERROR,
            details=full_details,
        )


class ParseException(KeylibException):
    """Raised when a well-formed container holds an invalid inner encoding."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        code: str = ErrorCodes.PARSE_ERROR,
    ) -> None:
        super().__init__(
            message=message,
            code=code,
            details=details,
        )


class MissingPrivateKeyException(ParseException):
    """Raised when an operation needs a private key but the Key is public-only."""

    def __init__(
        self,
        key_id: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["keyid"] = key_id
        super().__init__(
            message=f"key '{key_id}' carries no private key material",
            details=full_details,
            code=ErrorCodes.MISSING_PRIVATE_KEY,
        )


class SignatureVerificationException(KeylibException):
    """Raised when a signature does not verify against a key and payload."""

    def __init__(
        self,
        message: str,
        key_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if key_id:
            full_details["keyid"] = key_id
        super().__init__(
            message=message,
            code=ErrorCodes.SIGNATURE_VERIFICATION_FAILED,
            details=full_details,
        )


class CanonicalizationException(KeylibException):
    """Exception raised when canonical serialization fails."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CANONICALIZATION_ERROR,
            details=details,
        )
