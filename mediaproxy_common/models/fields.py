"""
Fields used in media proxy queries
"""

from enum import Enum
from typing import Dict, Optional, Type, TypeVar

from ..utils.error_handlers import UnrecognizedVariant

E = TypeVar("E", bound=Enum)

# Accepted on input only; never produced.
OUTPUT_FORMAT_ALIASES: Dict[str, str] = {"jpg": "jpeg"}

MIME_TYPES: Dict[str, str] = {
    "jpeg": "image/jpeg",
    "png": "image/png",
    "webp": "image/webp",
    "gif": "image/gif",
}


def parse_variant(enum_cls: Type[E], text: str, aliases: Optional[Dict[str, str]] = None) -> E:
    """
    Look up the member of a closed enumeration named by a token.

    Args:
        enum_cls: Enumeration to parse into
        text: Token to look up, compared case-sensitively
        aliases: Extra tokens mapped onto canonical ones

    Returns:
        The matching member

    Raises:
        UnrecognizedVariant: If the token names no member
    """
    if isinstance(text, enum_cls):
        return text
    if not isinstance(text, str):
        raise UnrecognizedVariant(repr(text), enum_cls.__name__)

    token = (aliases or {}).get(text, text)
    try:
        return enum_cls(token)
    except ValueError:
        raise UnrecognizedVariant(text, enum_cls.__name__) from None


class OutputFormat(str, Enum):
    """Output format of the processed image."""
    JPEG = "jpeg"
    PNG = "png"
    WEBP = "webp"
    GIF = "gif"

    def __str__(self) -> str:
        return self.value

    @property
    def mime_type(self) -> str:
        """Media type to serve the processed image with."""
        return MIME_TYPES[self.value]

    @classmethod
    def parse(cls, text: str) -> "OutputFormat":
        """Parse a format token, accepting ``jpg`` for JPEG."""
        return parse_variant(cls, text, OUTPUT_FORMAT_ALIASES)

    @classmethod
    def default(cls) -> "OutputFormat":
        return cls.JPEG


class ResizeStrategy(str, Enum):
    """How to fit the media when the requested box has a different aspect ratio."""
    CONTAIN = "contain"  # largest size fitting inside the box, may letterbox
    CROP = "crop"  # fill the box exactly, cropping the overflow
    STRETCH = "stretch"  # fill the box exactly, ignoring aspect ratio

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "ResizeStrategy":
        """Parse a resize strategy token. No aliases are accepted."""
        return parse_variant(cls, text)

    @classmethod
    def default(cls) -> "ResizeStrategy":
        return cls.CROP
