"""
Error types raised when (de)serializing queries and fingerprints.
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class DecodeErrorKind(str, Enum):
    """Stage at which decoding a fingerprint failed."""
    BASE64 = "base64"
    UNICODE = "unicode"
    JSON = "json"
    UNRECOGNIZED_VARIANT = "unrecognized_variant"


class MediaProxyError(Exception):
    """Base error class for the package."""

    def __init__(
        self,
        message: str,
        code: str = "MEDIAPROXY_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Render the error as a diagnostic payload."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }


class FingerprintDecodeError(MediaProxyError):
    """A fingerprint could not be turned back into a query."""

    kind: DecodeErrorKind

    def __init__(
        self,
        message: str,
        source: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        details = dict(details or {})
        details["stage"] = self.kind.value
        if source is not None:
            details["cause"] = str(source)
        super().__init__(message, code=f"{self.kind.name}_ERROR", details=details)
        self.source = source
        if source is not None:
            self.__cause__ = source


class Base64Error(FingerprintDecodeError):
    """Fingerprint is not valid unpadded URL-safe base64."""
    kind = DecodeErrorKind.BASE64

    def __init__(self, message: str = "Something went wrong when decoding Base64.", **kwargs):
        super().__init__(message, **kwargs)


class Utf8Error(FingerprintDecodeError):
    """Decoded fingerprint bytes are not valid UTF-8."""
    kind = DecodeErrorKind.UNICODE

    def __init__(self, message: str = "Could not convert byte array to string!", **kwargs):
        super().__init__(message, **kwargs)


class JsonError(FingerprintDecodeError):
    """Decoded text is not a well-formed query object."""
    kind = DecodeErrorKind.JSON

    def __init__(self, message: str = "Something went wrong when (de)serializing JSON.", **kwargs):
        super().__init__(message, **kwargs)


class UnrecognizedVariant(FingerprintDecodeError):
    """
    A token does not name any member of a closed enumeration.

    Raised by ``OutputFormat.parse`` and ``ResizeStrategy.parse`` directly,
    and surfaced unchanged by ``decode``.
    """
    kind = DecodeErrorKind.UNRECOGNIZED_VARIANT

    def __init__(self, token: str, enum_name: str):
        super().__init__(
            f"Unrecognized {enum_name} variant: {token!r}",
            details={"token": token, "enum": enum_name}
        )
        self.token = token
        self.enum_name = enum_name


def log_error(error: Exception, context: Optional[Dict[str, Any]] = None):
    """
    Log an error with its code and details.

    Args:
        error: The error to log
        context: Additional context information, e.g. the offending fingerprint
    """
    error_info: Dict[str, Any] = {
        "error_type": type(error).__name__,
        "error_message": str(error)
    }

    if context:
        error_info["context"] = context

    if isinstance(error, MediaProxyError):
        error_info["error_code"] = error.code
        error_info["error_details"] = error.details

    # Decode failures come from untrusted input and are expected.
    if isinstance(error, FingerprintDecodeError):
        logger.warning(f"{error.code}: {error.message}", extra=error_info)
    else:
        logger.error("Error occurred", extra=error_info, exc_info=error)
