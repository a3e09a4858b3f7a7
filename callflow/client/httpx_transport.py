import logging
from typing import Optional

import httpx

from callflow.client.client import has_input
from callflow.core.call import Call
from callflow.core.representation import BytesRepresentation, MediaType
from callflow.core.status import Status
from callflow.exceptions import TransportError
from callflow.settings import Settings

logger = logging.getLogger(__name__)


class HttpxTransport:
    """
    Handler performing the network exchange for a call with httpx.

    The request body is only written when the call has concrete input (see
    `has_input`). The response becomes the call's status and output.

    Attributes:
        base_url (Optional[str]): Prefix joined with relative resource references.
        client (httpx.Client): The underlying HTTP client.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        timeout: float = 30.0,
    ):
        self.base_url = base_url
        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "HttpxTransport":
        settings = settings or Settings()
        return cls(base_url=settings.get_backend_url(), timeout=settings.get_transport_timeout())

    def __call__(self, call: Call) -> None:
        self.handle(call)

    def handle(self, call: Call) -> None:
        """
        Sends the call and records the response on it.

        Raises:
            TransportError: If the exchange could not be completed.
        """
        if call.method is None or call.resource_ref is None:
            raise ValueError("Call must have a method and a resource reference before being sent")

        url = self._build_url(call.resource_ref)
        headers = {}
        content = None
        if has_input(call):
            content = call.input.get_bytes()
            headers["Content-Type"] = call.input.media_type

        logger.info(f"[{call.call_id}] Sending {call.method.value} request to {url}")

        try:
            response = self.client.request(method=call.method.value, url=url, headers=headers, content=content)
        except httpx.TimeoutException as e:
            logger.error(f"[{call.call_id}] Timeout error during request to {url}: {e}")
            raise TransportError(f"Timeout during request to {url}", call_id=call.call_id, status_code=504) from e
        except httpx.ConnectError as e:
            logger.error(f"[{call.call_id}] Connection error during request to {url}: {e}")
            raise TransportError(f"Could not connect to {url}", call_id=call.call_id) from e
        except httpx.HTTPError as e:
            logger.exception(f"[{call.call_id}] Unexpected error during request to {url}: {e}")
            raise TransportError(f"Request to {url} failed: {e}", call_id=call.call_id) from e

        call.status = Status.value_of(response.status_code)
        if response.content:
            media_type = response.headers.get("content-type", MediaType.APPLICATION_OCTET_STREAM.value)
            call.output = BytesRepresentation(
                content=response.content,
                media_type=media_type.split(";")[0].strip(),
                encoding=response.encoding or "utf-8",
            )

        logger.info(f"[{call.call_id}] Received response with status {response.status_code}")

    def _build_url(self, resource_ref: str) -> str:
        if self.base_url is None or httpx.URL(resource_ref).is_absolute_url:
            return resource_ref
        return f"{self.base_url.rstrip('/')}/{resource_ref.lstrip('/')}"

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
