"""Call-processing pipeline: filter chains and a uniform verb client over a shared Call."""

from callflow.client import Client, HttpxTransport, has_input
from callflow.core import (
    BytesRepresentation,
    Call,
    MediaType,
    Method,
    ReferenceRepresentation,
    Representation,
    Status,
    StringRepresentation,
)
from callflow.filter import CallLoggingFilter, FilterChain, StatusFilter, filter_stage

__all__ = [
    "BytesRepresentation",
    "Call",
    "CallLoggingFilter",
    "Client",
    "FilterChain",
    "HttpxTransport",
    "MediaType",
    "Method",
    "ReferenceRepresentation",
    "Representation",
    "Status",
    "StatusFilter",
    "StringRepresentation",
    "filter_stage",
    "has_input",
]
