"""Base class for single-value value objects."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one validated primitive.

    Compared by value. ``.root`` holds the primitive and ``str()`` renders it,
    so a Slug can go straight into a log attribute or a query.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
