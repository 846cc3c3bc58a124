"""Base classes for value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, not identity.
    """

    model_config = ConfigDict(frozen=True)


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects that wrap a single primitive value.

    The wrapped value is available as ``.root`` and ``model_dump()`` returns
    the primitive itself, so Username or Email serialize as plain strings.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)
