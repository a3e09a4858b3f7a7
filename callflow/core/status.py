# Outcome classification attached to a call.

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

RFC_2616_BASE = "http://www.w3.org/Protocols/rfc2616/rfc2616-sec10.html"


class StatusCategory(str, Enum):
    """Category of a status, derived from the first digit of its code."""

    INFORMATIONAL = "informational"
    SUCCESS = "success"
    REDIRECTION = "redirection"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    UNKNOWN = "unknown"


_CATEGORY_SECTIONS = {
    StatusCategory.INFORMATIONAL: "sec10.1",
    StatusCategory.SUCCESS: "sec10.2",
    StatusCategory.REDIRECTION: "sec10.3",
    StatusCategory.CLIENT_ERROR: "sec10.4",
    StatusCategory.SERVER_ERROR: "sec10.5",
}


class Status(BaseModel):
    """The outcome of a call.

    Statuses compare equal when their codes match, so a status built from a
    bare code equals the predefined constant of the same code.

    Attributes:
        code (int): The machine code, e.g. 404.
        name (Optional[str]): The reason phrase, e.g. "Not Found".
        description (Optional[str]): A human readable explanation.
        uri (Optional[str]): A reference to documentation about the status.
    """

    model_config = ConfigDict(frozen=True)

    code: int = Field()
    name: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    uri: Optional[str] = Field(default=None)

    @field_validator("code")
    @classmethod
    def validate_code(cls, value: int) -> int:
        if not 100 <= value <= 999:
            raise ValueError(f"Status code must be between 100 and 999, got {value}")
        return value

    @property
    def category(self) -> StatusCategory:
        return {
            1: StatusCategory.INFORMATIONAL,
            2: StatusCategory.SUCCESS,
            3: StatusCategory.REDIRECTION,
            4: StatusCategory.CLIENT_ERROR,
            5: StatusCategory.SERVER_ERROR,
        }.get(self.code // 100, StatusCategory.UNKNOWN)

    @property
    def is_success(self) -> bool:
        return self.category == StatusCategory.SUCCESS

    @property
    def is_redirection(self) -> bool:
        return self.category == StatusCategory.REDIRECTION

    @property
    def is_client_error(self) -> bool:
        return self.category == StatusCategory.CLIENT_ERROR

    @property
    def is_server_error(self) -> bool:
        return self.category == StatusCategory.SERVER_ERROR

    @property
    def is_error(self) -> bool:
        return self.is_client_error or self.is_server_error

    @property
    def reference_uri(self) -> str:
        """The documentation link for this status, falling back to its RFC 2616 category section."""
        if self.uri:
            return self.uri
        section = _CATEGORY_SECTIONS.get(self.category)
        return f"{RFC_2616_BASE}#{section}" if section else RFC_2616_BASE

    @classmethod
    def value_of(cls, code: int) -> "Status":
        """Returns the predefined status for `code`, or a bare status if the code is not a standard one."""
        return _STATUSES.get(code) or cls(code=code)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Status):
            return self.code == other.code
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.code)

    def __str__(self) -> str:
        return f"{self.code} {self.name}" if self.name else str(self.code)


_STATUSES: Dict[int, Status] = {}


def _define(code: int, name: str, description: str, section: str) -> Status:
    status = Status(code=code, name=name, description=description, uri=f"{RFC_2616_BASE}#{section}")
    _STATUSES[code] = status
    return status


INFO_CONTINUE = _define(100, "Continue", "The client should continue with its request", "sec10.1.1")
INFO_SWITCHING_PROTOCOL = _define(
    101, "Switching Protocols", "The server is switching protocols as requested", "sec10.1.2"
)

SUCCESS_OK = _define(200, "OK", "The request has succeeded", "sec10.2.1")
SUCCESS_CREATED = _define(
    201, "Created", "The request has been fulfilled and resulted in a new resource being created", "sec10.2.2"
)
SUCCESS_ACCEPTED = _define(
    202, "Accepted", "The request has been accepted for processing, but the processing has not been completed",
    "sec10.2.3",
)
SUCCESS_NON_AUTHORITATIVE = _define(
    203, "Non-Authoritative Information", "The returned metainformation is not the definitive set", "sec10.2.4"
)
SUCCESS_NO_CONTENT = _define(
    204, "No Content", "The request has been fulfilled but there is no new information to send back", "sec10.2.5"
)
SUCCESS_RESET_CONTENT = _define(
    205, "Reset Content", "The client should reset the document view which caused the request", "sec10.2.6"
)
SUCCESS_PARTIAL_CONTENT = _define(
    206, "Partial Content", "The server has fulfilled the partial GET request for the resource", "sec10.2.7"
)

REDIRECTION_MULTIPLE_CHOICES = _define(
    300, "Multiple Choices", "The requested resource corresponds to any one of a set of representations", "sec10.3.1"
)
REDIRECTION_MOVED_PERMANENTLY = _define(
    301, "Moved Permanently", "The requested resource has been assigned a new permanent URI", "sec10.3.2"
)
REDIRECTION_FOUND = _define(
    302, "Found", "The requested resource resides temporarily under a different URI", "sec10.3.3"
)
REDIRECTION_SEE_OTHER = _define(
    303, "See Other", "The response to the request can be found under a different URI", "sec10.3.4"
)
REDIRECTION_NOT_MODIFIED = _define(
    304, "Not Modified", "The requested resource has not been modified since the conditional request", "sec10.3.5"
)
REDIRECTION_USE_PROXY = _define(
    305, "Use Proxy", "The requested resource must be accessed through the proxy given by the location", "sec10.3.6"
)
REDIRECTION_TEMPORARY = _define(
    307, "Temporary Redirect", "The requested resource resides temporarily under a different URI", "sec10.3.8"
)

CLIENT_ERROR_BAD_REQUEST = _define(
    400, "Bad Request", "The request could not be understood by the server due to malformed syntax", "sec10.4.1"
)
CLIENT_ERROR_UNAUTHORIZED = _define(
    401, "Unauthorized", "The request requires user authentication", "sec10.4.2"
)
CLIENT_ERROR_PAYMENT_REQUIRED = _define(
    402, "Payment Required", "This code is reserved for future use", "sec10.4.3"
)
CLIENT_ERROR_FORBIDDEN = _define(
    403, "Forbidden", "The server understood the request, but is refusing to fulfill it", "sec10.4.4"
)
CLIENT_ERROR_NOT_FOUND = _define(
    404, "Not Found", "The server has not found anything matching the request URI", "sec10.4.5"
)
CLIENT_ERROR_METHOD_NOT_ALLOWED = _define(
    405, "Method Not Allowed", "The method specified in the request is not allowed for the resource", "sec10.4.6"
)
CLIENT_ERROR_NOT_ACCEPTABLE = _define(
    406, "Not Acceptable", "The resource cannot generate a representation acceptable to the client", "sec10.4.7"
)
CLIENT_ERROR_PROXY_AUTHENTIFICATION_REQUIRED = _define(
    407, "Proxy Authentication Required", "The client must first authenticate itself with the proxy", "sec10.4.8"
)
CLIENT_ERROR_REQUEST_TIMEOUT = _define(
    408, "Request Timeout", "The client did not produce a request within the time the server was prepared to wait",
    "sec10.4.9",
)
CLIENT_ERROR_CONFLICT = _define(
    409, "Conflict", "The request could not be completed due to a conflict with the state of the resource",
    "sec10.4.10",
)
CLIENT_ERROR_GONE = _define(
    410, "Gone", "The requested resource is no longer available at the server", "sec10.4.11"
)
CLIENT_ERROR_LENGTH_REQUIRED = _define(
    411, "Length Required", "The server refuses to accept the request without a defined content length",
    "sec10.4.12",
)
CLIENT_ERROR_PRECONDITION_FAILED = _define(
    412, "Precondition Failed", "A precondition given in the request evaluated to false on the server",
    "sec10.4.13",
)
CLIENT_ERROR_REQUEST_ENTITY_TOO_LARGE = _define(
    413, "Request Entity Too Large", "The request entity is larger than the server is able to process",
    "sec10.4.14",
)
CLIENT_ERROR_REQUEST_URI_TOO_LONG = _define(
    414, "Request-URI Too Long", "The request URI is longer than the server is willing to interpret", "sec10.4.15"
)
CLIENT_ERROR_UNSUPPORTED_MEDIA_TYPE = _define(
    415, "Unsupported Media Type", "The request entity is in a format not supported by the requested resource",
    "sec10.4.16",
)
CLIENT_ERROR_REQUESTED_RANGE_NOT_SATISFIABLE = _define(
    416, "Requested Range Not Satisfiable", "None of the requested range values overlap the current extent",
    "sec10.4.17",
)
CLIENT_ERROR_EXPECTATION_FAILED = _define(
    417, "Expectation Failed", "The expectation given in the Expect request-header could not be met", "sec10.4.18"
)

SERVER_ERROR_INTERNAL = _define(
    500, "Internal Server Error",
    "The server encountered an unexpected condition which prevented it from fulfilling the request", "sec10.5.1",
)
SERVER_ERROR_NOT_IMPLEMENTED = _define(
    501, "Not Implemented", "The server does not support the functionality required to fulfill the request",
    "sec10.5.2",
)
SERVER_ERROR_BAD_GATEWAY = _define(
    502, "Bad Gateway", "The server received an invalid response from the upstream server", "sec10.5.3"
)
SERVER_ERROR_SERVICE_UNAVAILABLE = _define(
    503, "Service Unavailable", "The server is currently unable to handle the request", "sec10.5.4"
)
SERVER_ERROR_GATEWAY_TIMEOUT = _define(
    504, "Gateway Timeout", "The server did not receive a timely response from the upstream server", "sec10.5.5"
)
SERVER_ERROR_VERSION_NOT_SUPPORTED = _define(
    505, "HTTP Version Not Supported", "The server does not support the HTTP protocol version used in the request",
    "sec10.5.6",
)
