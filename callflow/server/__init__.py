from callflow.server.app import call_to_response, create_app, request_to_call

__all__ = ["call_to_response", "create_app", "request_to_call"]
