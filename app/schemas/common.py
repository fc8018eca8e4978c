from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelOut(BaseModel):
    """Response model with camelCase keys; constructible by field name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_record(cls, record):
        return cls(**{name: getattr(record, name) for name in cls.model_fields})


class MessageOut(BaseModel):
    message: str
