"""Shared pydantic base model."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Immutable model serialized with camelCase keys for the frontend."""
    
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)
