# Uniform client: maps semantic verbs onto a single generic call.

import logging
from typing import Optional

from callflow.core.call import Call
from callflow.core.handler import Handler
from callflow.core.method import Method
from callflow.core.representation import Representation

# Verbs that never carry semantic content, even if an input is attached.
METHODS_WITHOUT_INPUT = frozenset({Method.GET, Method.HEAD, Method.DELETE})


def has_input(call: Call) -> bool:
    """
    Determines if a call has any concrete input.

    Transports should use this rather than a None check to decide whether to
    write a request body.

    Args:
        call: The call to analyze.

    Returns:
        False for GET, HEAD and DELETE. Otherwise True if the call has an input
        whose content is available.
    """
    if call.method in METHODS_WITHOUT_INPUT:
        return False
    return call.input is not None and call.input.is_content_available()


class Client:
    """
    Builds calls for semantic verbs and submits them through a single handler.

    Every builder constructs a fresh Call, sets its target, verb and optional
    input, hands it to `handle` and returns the same call once the handler
    returned. There is no retry or resubmission at this level.

    Attributes:
        handler (Handler): The transport hook performing the exchange. It can be a
            network transport, a FilterChain, or any callable taking a call.
    """

    def __init__(self, handler: Handler, logger: Optional[logging.Logger] = None):
        self.handler = handler
        self.logger = logger or logging.getLogger(__name__)

    def get(self, resource_ref: str) -> Call:
        """Gets the identified resource."""
        return self.call(Method.GET, resource_ref)

    def head(self, resource_ref: str) -> Call:
        """Gets the metadata of the identified resource."""
        return self.call(Method.HEAD, resource_ref)

    def options(self, resource_ref: str) -> Call:
        """Gets the communication options of the identified resource."""
        return self.call(Method.OPTIONS, resource_ref)

    def post(self, resource_ref: str, representation: Optional[Representation]) -> Call:
        """Posts a representation to the identified resource."""
        return self.call(Method.POST, resource_ref, representation)

    def put(self, resource_ref: str, representation: Optional[Representation]) -> Call:
        """Puts a representation in the identified resource."""
        return self.call(Method.PUT, resource_ref, representation)

    def delete(self, resource_ref: str) -> Call:
        """Deletes the identified resource."""
        return self.call(Method.DELETE, resource_ref)

    def call(self, method: Method, resource_ref: str, representation: Optional[Representation] = None) -> Call:
        """
        Builds a call and submits it.

        Args:
            method: The verb of the call.
            resource_ref: The URI of the target resource.
            representation: The input representation, if any.

        Returns:
            The submitted call, as mutated by the handler.
        """
        call = Call(resource_ref=resource_ref, method=method)
        if representation is not None:
            call.input = representation
        self.logger.debug(f"[{call.call_id}] Submitting {method.value} {resource_ref}")
        self.handle(call)
        return call

    def handle(self, call: Call) -> None:
        """Submits the call to the handler. Faults propagate to the caller."""
        self.handler(call)

    def has_input(self, call: Call) -> bool:
        return has_input(call)
