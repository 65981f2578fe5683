"""
Fingerprint codec for media proxy queries.

A fingerprint is the query serialized to canonical JSON and encoded with
unpadded URL-safe base64, e.g.::

    {"source":"https://dummyimage.com/600x400/000/fff","width":null,"height":null,"format":"jpeg"}

becomes ``eyJzb3VyY2UiOiJodHRwczovL2R1bW15aW1hZ2UuY29tLzYwMHg0MDAvMDAwL2ZmZiIsIndpZHRoIjpudWxsLCJoZWlnaHQiOm51bGwsImZvcm1hdCI6ImpwZWcifQ``.

Both functions are pure and safe to call from any thread.
"""

import base64
import binascii
import re

from pydantic import ValidationError

from ..models.query import Query
from ..utils.error_handlers import Base64Error, JsonError, Utf8Error

INVALID_BASE64_CHAR = re.compile(r"[^A-Za-z0-9_-]")


def _b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64decode(fingerprint: str) -> bytes:
    if not isinstance(fingerprint, str):
        raise Base64Error(f"Fingerprint must be a string, not {type(fingerprint).__name__}")

    invalid = INVALID_BASE64_CHAR.search(fingerprint)
    if invalid:
        raise Base64Error(
            f"Invalid byte {invalid.group()!r}, offset {invalid.start()}.",
            details={"offset": invalid.start()}
        )

    if len(fingerprint) % 4 == 1:
        raise Base64Error(
            "Encoded text cannot have a 6-bit remainder.",
            details={"length": len(fingerprint)}
        )

    padded = fingerprint + "=" * (-len(fingerprint) % 4)
    try:
        data = base64.urlsafe_b64decode(padded)
    except binascii.Error as e:
        raise Base64Error(source=e) from e

    # Nonzero trailing bits would let two strings decode to the same bytes
    if _b64encode(data) != fingerprint:
        raise Base64Error(
            "Invalid last symbol, trailing bits are not zero.",
            details={"offset": len(fingerprint) - 1}
        )
    return data


def encode(query: Query) -> str:
    """
    Convert a query to a fingerprint.

    Args:
        query: Query to encode

    Returns:
        Unpadded URL-safe base64 of the query's canonical JSON
    """
    return _b64encode(query.model_dump_json().encode("utf-8"))


def decode(fingerprint: str) -> Query:
    """
    Create a query from a fingerprint.

    Args:
        fingerprint: Fingerprint produced by ``encode``

    Returns:
        The decoded query

    Raises:
        Base64Error: If the fingerprint is not unpadded URL-safe base64
        Utf8Error: If the decoded bytes are not UTF-8
        JsonError: If the text is not a well-formed query object
        UnrecognizedVariant: If the format is not a known output format
    """
    data = _b64decode(fingerprint)

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise Utf8Error(source=e) from e

    try:
        return Query.model_validate_json(text)
    except ValidationError as e:
        raise JsonError(source=e, details={"error_count": e.error_count()}) from e
