"""Base model for Depot entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable snapshots of a row. Changing a field means
    asking the repository for a new snapshot, never mutating in place.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )
