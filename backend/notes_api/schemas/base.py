"""Base schema classes with camelCase alias generation.

Only the upload acknowledgement speaks camelCase on the wire; note and
file-listing payloads keep snake_case keys.
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for camelCase payloads. Accepts either form, outputs camelCase."""
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
