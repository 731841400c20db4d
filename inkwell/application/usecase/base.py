"""Use case base class."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """One API operation: takes a request model, returns a response model.

    Use cases check who is calling and validate input, then delegate to the
    domain services. Domain errors propagate to the interface layer.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
