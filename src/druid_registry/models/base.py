"""Base model configuration for all Pydantic models."""

from pydantic import BaseModel, ConfigDict


class RegistryBaseModel(BaseModel):
    """Base model with common configuration.

    Conventions:
    - Field names are lowercase snake_case
    - Input also accepts the camelCase aliases used by form payloads
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
    )
