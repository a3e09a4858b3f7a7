# Exceptions raised by the call-processing framework.

from typing import Optional
from uuid import UUID


class CallflowError(Exception):
    """Base exception for all callflow errors."""

    def __init__(self, *args, status_code: int | None = None, detail: str | None = None):
        super().__init__(*args)
        self.status_code = status_code
        # Use the first arg as detail if detail kwarg is not provided and args exist
        self.detail = detail or (args[0] if args else None)


class TransportError(CallflowError):
    """Raised when a transport fails to complete the network exchange for a call.

    `status_code` is the gateway status describing the failure: 502 by default,
    504 for timeouts.
    """

    def __init__(
        self, *args, call_id: Optional[UUID] = None, status_code: int = 502, detail: str | None = None
    ):
        super().__init__(*args, status_code=status_code, detail=detail)
        self.call_id = call_id


class FilterLoadError(ValueError, CallflowError):
    """Raised when a filter chain description cannot be loaded."""

    def __init__(self, *args, filter_name: str | None = None, detail: str | None = None):
        CallflowError.__init__(self, *args, detail=detail)
        self.filter_name = filter_name
