"""
Base value model.

Defines the common configuration shared by every planning entity.
"""

from pydantic import BaseModel, ConfigDict


class ValueModel(BaseModel):
    """
    Base model for immutable planning entities.

    Entities are value objects: they are built once per request, passed
    by value between components and never mutated. Use ``model_copy``
    to derive an updated instance.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)
