# Loads filter stages from serialized chain descriptions.

import json
import logging
from pathlib import Path
from typing import Any, List, Union

from callflow.exceptions import FilterLoadError
from callflow.filter.call_filter import CallFilter
from callflow.filter.serialization import SerializedFilter

logger = logging.getLogger(__name__)


def load_filter(serialized_filter: Union[SerializedFilter, dict[str, Any]]) -> CallFilter:
    """
    Instantiates a filter from its serialized form.

    Args:
        serialized_filter: A SerializedFilter, or a dict with 'type' and 'config' keys.

    Returns:
        The instantiated filter.

    Raises:
        FilterLoadError: If the type is unknown, the data is malformed, or the
            filter rejects its configuration.
    """
    # Import the registry here to avoid circular import
    from callflow.filter.registry import FILTER_NAME_TO_CLASS

    if isinstance(serialized_filter, dict):
        filter_type = serialized_filter.get("type")
        filter_config = serialized_filter.get("config", {})
    else:
        filter_type = serialized_filter.type
        filter_config = serialized_filter.config

    if not isinstance(filter_type, str):
        raise FilterLoadError(f"Filter 'type' must be a string, got: {type(filter_type)}")
    if not isinstance(filter_config, dict):
        raise FilterLoadError(
            f"Filter 'config' must be a dictionary, got: {type(filter_config)}", filter_name=filter_type
        )

    filter_class = FILTER_NAME_TO_CLASS.get(filter_type)
    if filter_class is None:
        raise FilterLoadError(
            f"Unknown filter type: '{filter_type}'. Available filters: {list(FILTER_NAME_TO_CLASS.keys())}",
            filter_name=filter_type,
        )

    try:
        instance = filter_class.from_serialized(filter_config)
    except Exception as e:
        logger.error(f"Error instantiating filter '{filter_type}': {e}", exc_info=True)
        raise FilterLoadError(f"Error instantiating filter '{filter_type}': {e}", filter_name=filter_type) from e

    logger.info(f"Successfully loaded filter: {instance.display_name}")
    return instance


def load_filters(serialized_filters: Any) -> List[CallFilter]:
    """
    Instantiates an ordered list of filters.

    Args:
        serialized_filters: A list of filter descriptions, or a dict holding one under 'filters'.

    Raises:
        FilterLoadError: If the description is not a list or an entry fails to load.
    """
    if isinstance(serialized_filters, dict):
        serialized_filters = serialized_filters.get("filters")
    if not isinstance(serialized_filters, list):
        raise FilterLoadError(f"Filter chain description must be a list, got: {type(serialized_filters)}")

    filters = []
    for i, entry in enumerate(serialized_filters):
        if not isinstance(entry, dict):
            raise FilterLoadError(f"Item at index {i} in the filter chain is not a dictionary. Got {type(entry)}")
        filters.append(load_filter(entry))
    return filters


def load_filters_from_file(filepath: Union[str, Path]) -> List[CallFilter]:
    """
    Loads an ordered list of filters from a JSON file.

    Raises:
        FilterLoadError: If the file cannot be read or parsed, or its content is invalid.
    """
    try:
        with open(filepath, "r") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FilterLoadError(f"Could not read filter chain from '{filepath}': {e}") from e
    return load_filters(data)


def dump_filter(call_filter: CallFilter) -> dict[str, Any]:
    """Returns the serialized form of a filter, suitable for `load_filter`."""
    return {"type": call_filter.get_filter_type_name(), "config": call_filter.serialize()}
