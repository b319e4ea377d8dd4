"""Shared base for wire data models."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, ValidationInfo, model_validator
from pydantic.alias_generators import to_camel


# Validation context marking input that came off the wire
WIRE_CONTEXT = {"wire": True}


class WireModel(BaseModel):
    """Immutable model serialized with lowerCamelCase field names.

    Keyword defaults only apply to Python construction. When validated with
    ``WIRE_CONTEXT`` every field must be present except those named in
    ``wire_optional``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    wire_optional: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def require_wire_fields(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict) or not (info.context or {}).get("wire"):
            return data
        missing = [
            to_camel(name)
            for name in cls.model_fields
            if name not in cls.wire_optional
            and to_camel(name) not in data
            and name not in data
        ]
        if missing:
            raise ValueError(f"missing field(s): {', '.join(missing)}")
        return data

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
