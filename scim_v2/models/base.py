"""Shared pydantic base for every SCIM model and the JSON boundary.

SCIM field names are camelCase on the wire (RFC 7643 §2.1) while the Python
attributes are snake_case. ``ScimBaseModel`` wires an alias generator so that
``display_name`` is read and written as ``displayName``; the few names that do
not follow the camelCase rule (``$ref``, ``schema``, ``Resources`` and the
extension URN keys) carry explicit aliases on their fields.

Several resources have fields with a Python default (so ``Group()`` is usable
as a starting point) that are nonetheless mandatory in incoming JSON. Those are
listed in ``wire_required_fields`` by their wire name and checked only when a
payload is parsed through ``from_json`` / ``from_dict``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from typing import ClassVar
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import ValidationError
from pydantic import ValidationInfo
from pydantic import model_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticSerializationError

from scim_v2.errors import DeserializationError
from scim_v2.errors import InvalidJsonFormat
from scim_v2.errors import SerializationError

ModelT = TypeVar("ModelT", bound="ScimBaseModel")

# Validation context flag set by every wire-facing entry point
WIRE_CONTEXT = {"scim_wire": True}


def is_wire_context(info: ValidationInfo) -> bool:
    return bool(info.context and info.context.get("scim_wire"))


def to_scim_error(err: ValidationError) -> DeserializationError:
    """Map a pydantic ``ValidationError`` onto the library's taxonomy.

    Text that is not JSON at all becomes ``InvalidJsonFormat``; anything that
    parsed but does not fit the model becomes ``DeserializationError``.
    """
    if any(detail["type"] == "json_invalid" for detail in err.errors()):
        return InvalidJsonFormat(str(err))
    return DeserializationError(str(err))


class ScimBaseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    # Wire names that must be present in parsed JSON even though the Python
    # attribute has a default.
    wire_required_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def check_wire_required_fields(cls, data: Any, info: ValidationInfo) -> Any:
        if not is_wire_context(info) or not isinstance(data, Mapping):
            return data
        for key in cls.wire_required_fields:
            if key not in data:
                raise ValueError(f"missing field `{key}`")
        return data

    @classmethod
    def from_json(cls: type[ModelT], data: str | bytes) -> ModelT:
        """Parse a JSON document into this model.

        Raises:
            InvalidJsonFormat: If ``data`` is not valid JSON.
            DeserializationError: If the JSON does not fit the model.
        """
        try:
            return cls.model_validate_json(data, context=WIRE_CONTEXT)
        except ValidationError as e:
            raise to_scim_error(e) from e

    @classmethod
    def deserialize(cls: type[ModelT], data: str | bytes) -> ModelT:
        return cls.from_json(data)

    @classmethod
    def from_dict(cls: type[ModelT], data: Mapping[str, Any]) -> ModelT:
        """Same as ``from_json`` for callers that already hold decoded JSON."""
        try:
            return cls.model_validate(data, context=WIRE_CONTEXT)
        except ValidationError as e:
            raise to_scim_error(e) from e

    def serialize(self) -> str:
        """Encode to a JSON string using wire names, omitting unset fields."""
        try:
            return self.model_dump_json(by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            raise SerializationError(str(e)) from e

    def to_dict(self) -> dict[str, Any]:
        try:
            return self.model_dump(mode="json", by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            raise SerializationError(str(e)) from e


class Meta(ScimBaseModel):
    """Resource metadata (RFC 7643 §3.1).

    Timestamps are kept as the strings the peer sent; no datetime parsing is
    applied so that a parse/serialize cycle reproduces them exactly.
    """

    resource_type: str | None = None
    created: str | None = None
    last_modified: str | None = None
    version: str | None = None
    location: str | None = None
