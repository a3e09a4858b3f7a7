# Filter that logs each call passing through the chain.

import time
from typing import Any, Optional

from pydantic import Field

from callflow.core.call import Call
from callflow.core.handler import Handler
from callflow.core.logging import log_call_state
from callflow.filter.call_filter import CallFilter


class CallLoggingFilter(CallFilter):
    """
    Logs method, target, final status and duration of every call.

    While the rest of the chain runs, status and output changes are logged at
    DEBUG as they happen. Faults are logged and re-raised.

    Attributes:
        log_mutations (bool): Whether to log status/output changes made downstream.
    """

    name: Optional[str] = Field(default="CallLoggingFilter")
    log_mutations: bool = Field(default=True)

    def __call__(self, call: Call, next_handler: Handler) -> None:
        method = call.method.value if call.method else None
        log_call_state(
            str(call.call_id),
            "received",
            {"method": method, "resource_ref": call.resource_ref, "has_input": call.input is not None},
        )

        def on_status(value: Any) -> None:
            self.logger.debug(f"[{call.call_id}] Status set to {value}")

        def on_output(value: Any) -> None:
            media_type = getattr(value, "media_type", None)
            self.logger.debug(f"[{call.call_id}] Output set ({media_type})")

        if self.log_mutations:
            call.events.status.connect(on_status)
            call.events.output.connect(on_output)

        start_time = time.time()
        try:
            next_handler(call)
        except Exception as e:
            self.logger.error(
                f"[{call.call_id}] {method} {call.resource_ref} failed after {time.time() - start_time:.3f}s: {e}"
            )
            raise
        finally:
            if self.log_mutations:
                call.events.status.disconnect(on_status)
                call.events.output.disconnect(on_output)

        status_code = call.status.code if call.status else None
        self.logger.info(
            f"[{call.call_id}] {method} {call.resource_ref} -> {status_code} in {time.time() - start_time:.3f}s"
        )
