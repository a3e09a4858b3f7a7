"""Method enum for Call objects."""

from enum import Enum


class Method(str, Enum):
    """The semantic operation requested by a call."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    CONNECT = "CONNECT"
    PATCH = "PATCH"
