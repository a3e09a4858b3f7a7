from callflow.client.client import METHODS_WITHOUT_INPUT, Client, has_input
from callflow.client.httpx_transport import HttpxTransport

__all__ = ["METHODS_WITHOUT_INPUT", "Client", "HttpxTransport", "has_input"]
