"""
The media proxy query model
"""

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

from .fields import OutputFormat

U32_MAX = 2**32 - 1

# Dimensions travel as uint32; bools, floats and numeric strings are rejected.
Dimension = Annotated[StrictInt, Field(ge=0, le=U32_MAX)]


class Query(BaseModel):
    """
    The object clients use to make requests to the media proxy.

    Field order is part of the fingerprint format and must not change.
    """
    model_config = ConfigDict(frozen=True)

    source: StrictStr  # URL of the source media; any format the image engine can decode
    width: Optional[Dimension] = None  # None: derive from height and aspect ratio
    height: Optional[Dimension] = None  # None: derive from width and aspect ratio
    format: OutputFormat

    @field_validator("format", mode="before")
    @classmethod
    def parse_format(cls, v):
        # Non-strings fall through to the enum validator and fail there
        if isinstance(v, str):
            return OutputFormat.parse(v)
        return v

    @classmethod
    def build(
        cls,
        source: str,
        width: Optional[int] = None,
        height: Optional[int] = None,
        format: Optional[str] = None
    ) -> "Query":
        """
        Create a query from user-supplied parameters.

        A missing format falls back to ``OutputFormat.default()``; an
        unrecognized one raises ``UnrecognizedVariant``.
        """
        if format is None:
            format = OutputFormat.default()
        return cls(source=source, width=width, height=height, format=format)

    def to_fingerprint(self) -> str:
        """Convert the query to a fingerprint. See ``services.fingerprint.encode``."""
        from ..services.fingerprint import encode
        return encode(self)

    @classmethod
    def from_fingerprint(cls, fingerprint: str) -> "Query":
        """Create a query from a fingerprint made by ``to_fingerprint``."""
        from ..services.fingerprint import decode
        return decode(fingerprint)


# Name used by the proxy's request-handling layer
Request = Query
