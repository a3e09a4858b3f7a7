# Filter guaranteeing a well-defined status and an output for error outcomes.

from typing import Optional

from pydantic import Field

from callflow.core.call import Call
from callflow.core.handler import Handler
from callflow.core.representation import Representation
from callflow.core.status import REDIRECTION_NOT_MODIFIED, SERVER_ERROR_INTERNAL, SUCCESS_OK, Status
from callflow.filter.call_filter import CallFilter
from callflow.filter.status_page import StatusRenderer, render_status_page
from callflow.settings import Settings


class StatusFilter(CallFilter):
    """
    Filter associating an output representation based on the call status.

    If any exception escapes the rest of the chain, the "server internal error"
    status is associated to the call and the exception is not propagated. If no
    status is set, the "success ok" status is assumed. For any other status than
    "success ok" or "not modified", a status page becomes the output unless an
    output already exists and `overwrite` is disabled.

    To customize the page, pass a `renderer` taking `(status, call)` and
    returning a Representation.

    Attributes:
        overwrite (bool): Whether an existing output should be replaced by the status page.
        email (Optional[str]): Email address of the administrator to contact in case of error.
        home_uri (Optional[str]): The home URI to suggest to the user.
        renderer (Optional[StatusRenderer]): Custom status page strategy. When it fails,
            the default page is used instead.
    """

    name: Optional[str] = Field(default="StatusFilter")
    overwrite: bool = Field(default=False)
    email: Optional[str] = Field(default=None)
    home_uri: Optional[str] = Field(default=None)
    renderer: Optional[StatusRenderer] = Field(default=None, exclude=True)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs) -> "StatusFilter":
        """Builds a filter configured from environment settings; keyword arguments take precedence."""
        settings = settings or Settings()
        config = {
            "overwrite": settings.get_status_overwrite(),
            "email": settings.get_admin_email(),
            "home_uri": settings.get_home_uri(),
        }
        config.update(kwargs)
        return cls(**config)

    def __call__(self, call: Call, next_handler: Handler) -> None:
        self.handle(call, next_handler)
        self.after_handle(call)

    def handle(self, call: Call, next_handler: Handler) -> None:
        """
        Hands the call to the rest of the chain, containing any fault.

        Args:
            call: The call to handle.
            next_handler: The rest of the chain.
        """
        try:
            next_handler(call)
        except Exception as e:
            self.logger.exception(f"[{call.call_id}] Unhandled error intercepted by {self.display_name}: {e}")
            call.status = SERVER_ERROR_INTERNAL

    def after_handle(self, call: Call) -> None:
        """
        Normalizes the status and sets a status page as output when needed.

        Args:
            call: The call that was handled.
        """
        if call.status is None:
            call.status = SUCCESS_OK

        if call.status not in (SUCCESS_OK, REDIRECTION_NOT_MODIFIED) and (call.output is None or self.overwrite):
            call.output = self.get_representation(call.status, call)

    def get_representation(self, status: Status, call: Call) -> Representation:
        """
        Returns a representation for the given status.

        Args:
            status: The status to represent.
            call: The related call that was handled. Not modified.

        Returns:
            The representation of the given status.
        """
        if self.renderer is not None:
            try:
                return self.renderer(status, call)
            except Exception as e:
                self.logger.exception(
                    f"[{call.call_id}] Status renderer failed for status {status.code} in {self.display_name}, "
                    f"using the default status page: {e}"
                )
        return render_status_page(status, call, email=self.email, home_uri=self.home_uri)
