# Filter registry mapping filter type names to classes.

from typing import Dict, Type

from .call_filter import CallFilter
from .call_logging import CallLoggingFilter
from .status_filter import StatusFilter

FILTER_NAME_TO_CLASS: Dict[str, Type["CallFilter"]] = {
    "CallLoggingFilter": CallLoggingFilter,
    "StatusFilter": StatusFilter,
}

FILTER_CLASS_TO_NAME: Dict[Type["CallFilter"], str] = {v: k for k, v in FILTER_NAME_TO_CLASS.items()}
