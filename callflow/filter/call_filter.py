# Base for configurable, serializable filter stages.

import abc
import logging
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from callflow.core.call import Call
from callflow.core.handler import Handler
from callflow.filter.serialization import SerializableDict, SerializableDictAdapter, safe_model_validate

FilterT = TypeVar("FilterT", bound="CallFilter")


class CallFilter(BaseModel, abc.ABC):
    """A pipeline stage whose configuration is fixed at construction.

    Instances are plain `Stage` callables: `stage(call, next_handler)`. Chains
    compose them by passing the rest of the pipeline as `next_handler`, so a
    filter never needs to know what comes after it.

    Attributes:
        name (Optional[str]): An optional name used for logging and identification.
        logger (logging.Logger): The logger this filter writes to. Injected so
            that callers can route diagnostics; defaults to the logger of the
            module defining the filter class.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: Optional[str] = Field(default=None)
    logger: logging.Logger = Field(default_factory=lambda: logging.getLogger(__name__), exclude=True)

    @model_validator(mode="before")
    @classmethod
    def default_logger(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("logger") is None:
            data = {**data, "logger": logging.getLogger(cls.__module__)}
        return data

    @abc.abstractmethod
    def __call__(self, call: Call, next_handler: Handler) -> None:
        """
        Process the call around the rest of the pipeline.

        Args:
            call: The call being processed.
            next_handler: Invokes the remaining stages and the target.
        """
        raise NotImplementedError

    @classmethod
    def get_filter_type_name(cls) -> str:
        """Get the registered type name used in chain descriptions.

        Raises:
            ValueError: If the class is not registered.
        """
        # Import here to avoid circular imports
        from callflow.filter.registry import FILTER_CLASS_TO_NAME

        filter_type = FILTER_CLASS_TO_NAME.get(cls)
        if filter_type is None:
            raise ValueError(f"{cls.__name__} is not registered in FILTER_CLASS_TO_NAME registry")
        return filter_type

    @property
    def display_name(self) -> str:
        return self.name or self.__class__.__name__

    def serialize(self) -> SerializableDict:
        """Serialize the filter configuration (injected collaborators are excluded)."""
        data = self.model_dump(mode="python", exclude_none=True)
        return SerializableDictAdapter.validate_python(data)

    @classmethod
    def from_serialized(cls: Type[FilterT], config: SerializableDict) -> FilterT:
        """Construct a filter of this class from its serialized configuration."""
        return safe_model_validate(cls, config)

    def __repr__(self) -> str:
        return f"<{self.display_name} <{self.__class__.__name__}>>"
