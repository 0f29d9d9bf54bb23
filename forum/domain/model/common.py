"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Models are immutable. Tree operations build new nodes with
    ``model_copy`` instead of mutating existing ones. Wire aliases and
    Python field names are both accepted on input.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        populate_by_name=True,
    )
