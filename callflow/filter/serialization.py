# Serialization type definitions for filter chain descriptions.

from dataclasses import dataclass
from typing import Any, List, TypeAlias, TypeVar, Union

from pydantic import BaseModel, TypeAdapter

SerializablePrimitive = Union[str, float, int, bool]

SerializableDict: TypeAlias = dict[str, Union[SerializablePrimitive, List[Any], dict[str, Any], None]]

SerializableDictAdapter = TypeAdapter(SerializableDict)

T = TypeVar("T", bound=BaseModel)


def safe_model_validate(model_class: type[T], data: SerializableDict) -> T:
    """Safely validate data through SerializableDict before creating model."""
    validated_data = SerializableDictAdapter.validate_python(data)
    return model_class.model_validate(validated_data)


@dataclass
class SerializedFilter:
    """Represents the serialized form of a CallFilter.

    Attributes:
        type (str): The registered name of the filter type (e.g., "StatusFilter").
        config (SerializableDict): The parameters needed to reconstruct the filter instance.
    """

    type: str
    config: SerializableDict
