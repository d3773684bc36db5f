"""
Shared schema base with camelCase JSON keys
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """Base schema exposing snake_case attributes as camelCase JSON keys"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
