from callflow.core.call import Call
from callflow.core.handler import Handler, Stage
from callflow.core.method import Method
from callflow.core.representation import (
    BytesRepresentation,
    MediaType,
    ReferenceRepresentation,
    Representation,
    StringRepresentation,
)
from callflow.core.status import Status, StatusCategory

__all__ = [
    "BytesRepresentation",
    "Call",
    "Handler",
    "MediaType",
    "Method",
    "ReferenceRepresentation",
    "Representation",
    "Stage",
    "Status",
    "StatusCategory",
    "StringRepresentation",
]
