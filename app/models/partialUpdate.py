from pydantic import BaseModel, ConfigDict, model_validator
from typing import ClassVar, Tuple


class PartialUpdate(BaseModel):
    """
    Base for update bodies. Every field may be left out, but only the fields
    listed in `nullable_fields` may be cleared with an explicit null.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    nullable_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def reject_nulls(cls, data):
        if isinstance(data, dict):
            nulled = [
                key for key, value in data.items()
                if value is None and key in cls.model_fields and key not in cls.nullable_fields
            ]
            if nulled:
                raise ValueError(f"Field cannot be null: {', '.join(nulled)}")
        return data
