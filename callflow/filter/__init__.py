from callflow.filter.call_filter import CallFilter
from callflow.filter.call_logging import CallLoggingFilter
from callflow.filter.chain import FilterChain, filter_stage
from callflow.filter.loader import dump_filter, load_filter, load_filters, load_filters_from_file
from callflow.filter.status_filter import StatusFilter
from callflow.filter.status_page import NO_DESCRIPTION, StatusRenderer, render_status_page

__all__ = [
    "NO_DESCRIPTION",
    "CallFilter",
    "CallLoggingFilter",
    "FilterChain",
    "StatusFilter",
    "StatusRenderer",
    "dump_filter",
    "filter_stage",
    "load_filter",
    "load_filters",
    "load_filters_from_file",
    "render_status_page",
]
