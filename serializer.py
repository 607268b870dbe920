# serializer.py
"""Conversion of raw OMS response bodies into typed models."""

import logging
from typing import Protocol, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class Serializer(Protocol):
    """Anything that turns response text into an instance of `target`."""

    def deserialize(self, target: type[T], data: str) -> T: ...


class PydanticSerializer:
    """Validates JSON text against a Pydantic model."""

    def deserialize(self, target: type[T], data: str) -> T:
        """
        Parse JSON text into an instance of the target model.

        Args:
            target: Pydantic model class to build.
            data: Raw JSON text.

        Returns:
            Validated model instance.

        Raises:
            pydantic.ValidationError: If the text is not valid JSON or does
                not match the model.
        """
        logger.debug("Deserializing %d bytes into %s", len(data), target.__name__)
        return target.model_validate_json(data)
