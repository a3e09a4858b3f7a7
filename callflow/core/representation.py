# Payloads carried by a call, with their declared media type.

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class MediaType(str, Enum):
    """Media types used by the framework itself."""

    TEXT_HTML = "text/html"
    TEXT_PLAIN = "text/plain"
    APPLICATION_JSON = "application/json"
    APPLICATION_OCTET_STREAM = "application/octet-stream"
    APPLICATION_WWW_FORM = "application/x-www-form-urlencoded"


class Representation(BaseModel):
    """A typed payload.

    The base class describes a representation whose content is not held in
    process; subclasses that carry data report it as available.
    """

    media_type: str = Field(default=MediaType.APPLICATION_OCTET_STREAM.value)

    def is_content_available(self) -> bool:
        """Returns True if the content is actually present, not merely referenced."""
        return False

    def get_bytes(self) -> Optional[bytes]:
        return None

    def get_text(self) -> Optional[str]:
        return None


class StringRepresentation(Representation):
    """A representation holding text content."""

    text: str = Field()
    media_type: str = Field(default=MediaType.TEXT_PLAIN.value)
    encoding: str = Field(default="utf-8")

    def is_content_available(self) -> bool:
        return True

    def get_bytes(self) -> Optional[bytes]:
        return self.text.encode(self.encoding)

    def get_text(self) -> Optional[str]:
        return self.text


class BytesRepresentation(Representation):
    """A representation holding binary content."""

    content: bytes = Field()
    encoding: str = Field(default="utf-8")

    def is_content_available(self) -> bool:
        return True

    def get_bytes(self) -> Optional[bytes]:
        return self.content

    def get_text(self) -> Optional[str]:
        return self.content.decode(self.encoding, errors="replace")


class ReferenceRepresentation(Representation):
    """A representation only known by reference; its content is not available."""

    uri: str = Field()
