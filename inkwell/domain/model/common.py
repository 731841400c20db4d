"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable pydantic model. Changes go through ``model_copy``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
