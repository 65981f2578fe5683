"""
Shared request model and fingerprint codec for the media proxy.
"""

from .models import OutputFormat, Query, Request, ResizeStrategy
from .services import decode, encode
from .utils.error_handlers import (
    Base64Error,
    DecodeErrorKind,
    FingerprintDecodeError,
    JsonError,
    MediaProxyError,
    UnrecognizedVariant,
    Utf8Error,
)

__version__ = "0.1.0"

__all__ = [
    "OutputFormat",
    "ResizeStrategy",
    "Query",
    "Request",
    "encode",
    "decode",
    "MediaProxyError",
    "FingerprintDecodeError",
    "DecodeErrorKind",
    "Base64Error",
    "Utf8Error",
    "JsonError",
    "UnrecognizedVariant",
]
