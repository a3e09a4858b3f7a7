# Default HTML status page.

from typing import Callable, Optional

from jinja2 import Environment

from callflow.core.call import Call
from callflow.core.representation import MediaType, Representation, StringRepresentation
from callflow.core.status import Status

NO_DESCRIPTION = "No description available for this result status"

# Produces the output representation for a status; must not mutate the call.
StatusRenderer = Callable[[Status, Call], Representation]

_environment = Environment(autoescape=True, keep_trailing_newline=True)

_STATUS_PAGE = _environment.from_string(
    """<html>
<head>
   <title>Status page</title>
</head>
<body>
<h3>{{ description }}</h3><p>You can get technical details <a href="{{ reference_uri }}">here</a>.<br/>
{% if email %}For further assistance, you can contact the <a href="mailto:{{ email }}">administrator</a>.<br/>
{% endif %}{% if home_uri %}Please continue your visit at our <a href="{{ home_uri }}">home page</a>.
{% endif %}</p>
</body>
</html>
"""
)


def render_status_page(
    status: Status,
    call: Call,
    email: Optional[str] = None,
    home_uri: Optional[str] = None,
) -> Representation:
    """
    Returns an HTML representation describing the given status.

    Args:
        status: The status to represent.
        call: The related call. Not modified.
        email: Administrator address; adds a contact link when set.
        home_uri: Home page; adds a "continue your visit" link when set.

    Returns:
        A `text/html` StringRepresentation.
    """
    text = _STATUS_PAGE.render(
        description=status.description or NO_DESCRIPTION,
        reference_uri=status.reference_uri,
        email=email,
        home_uri=home_uri,
    )
    return StringRepresentation(text=text, media_type=MediaType.TEXT_HTML.value)
