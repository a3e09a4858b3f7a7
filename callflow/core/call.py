# Defines the Call exchanged between clients, filters and handlers.

from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from psygnal import EventedModel
from pydantic import ConfigDict, Field

from callflow.core.method import Method
from callflow.core.representation import Representation
from callflow.core.status import Status


class Call(EventedModel):
    """A single request/response exchange.

    A call is mutated by every stage it passes through. Each field assignment
    emits the matching signal on `call.events`, e.g. `call.events.status`.

    Attributes:
        call_id: A unique identifier for the call.
        resource_ref: The identifier of the target resource.
        method: The requested verb.
        input: The representation sent with the request, if any.
        output: The representation produced for the response, if any.
        status: The outcome; None until a stage determines it.
        attributes: A general-purpose dictionary for stages to share
            information related to this call.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    call_id: UUID = Field(default_factory=uuid4)
    resource_ref: Optional[str] = Field(default=None)
    method: Optional[Method] = Field(default=None)
    input: Optional[Representation] = Field(default=None)
    output: Optional[Representation] = Field(default=None)
    status: Optional[Status] = Field(default=None)
    attributes: Dict[str, Any] = Field(default_factory=dict)

    @property
    def has_output(self) -> bool:
        return self.output is not None

    def __repr__(self) -> str:
        method = self.method.value if self.method else None
        return f"<Call {self.call_id} {method} {self.resource_ref} status={self.status}>"
