"""Base DTO class."""

from pydantic import BaseModel, ConfigDict


class DTO(BaseModel):
    """Immutable base class for catalog DTOs; unknown fields are rejected."""

    model_config = ConfigDict(frozen=True, extra="forbid")
