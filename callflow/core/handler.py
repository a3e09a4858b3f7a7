"""Callable contracts shared by filters, chains, clients and transports."""

from typing import Callable

from callflow.core.call import Call

# A target handler, or the remainder of a chain.
Handler = Callable[[Call], None]

# A pipeline stage: runs around the `next_handler` it is given.
Stage = Callable[[Call, Handler], None]
