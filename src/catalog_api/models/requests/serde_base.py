from pydantic import BaseModel, ConfigDict


class SerdeBase(BaseModel):
    """Base for request and response bodies.

    Fields may be populated by name even when they carry a camelCase alias.
    """

    model_config = ConfigDict(populate_by_name=True)
