"""Schema metadata model (RFC 7643 §7).

A ``Schema`` describes the shape of a resource type as data: each attribute's
name, type tag, multiplicity, mutability and so on. Complex attributes carry
sub-attributes one level deep; SCIM does not nest them further.

``type`` is a tag such as "string", "boolean", "complex" or "reference", not a
Python type. Apart from ``name``, ``type`` and ``multiValued`` every field is
optional, and ``None`` means the document did not say (not "false").
"""

from __future__ import annotations

from pydantic import Field

from scim_v2.configs.constants import SCIM_SCHEMA_SCHEMA
from scim_v2.models.base import Meta
from scim_v2.models.base import ScimBaseModel


class SubAttributes(ScimBaseModel):
    name: str
    type: str
    multi_valued: bool
    description: str | None = None
    required: bool | None = None
    canonical_values: list[str] | None = None
    case_exact: bool | None = None
    mutability: str | None = None
    returned: str | None = None
    uniqueness: str | None = None
    reference_types: list[str] | None = None


class Attributes(SubAttributes):
    sub_attributes: list[SubAttributes] | None = None

    def get_sub_attribute(self, name: str) -> SubAttributes | None:
        """Case-insensitive lookup, as SCIM attribute names are (RFC 7643 §2.1)."""
        for sub_attribute in self.sub_attributes or []:
            if sub_attribute.name.lower() == name.lower():
                return sub_attribute
        return None


class Schema(ScimBaseModel):
    wire_required_fields = ("id", "name", "attributes")

    schemas: list[str] = Field(default_factory=lambda: [SCIM_SCHEMA_SCHEMA])
    id: str
    name: str
    description: str | None = None
    attributes: list[Attributes]
    meta: Meta | None = None

    def get_attribute(self, name: str) -> Attributes | None:
        for attribute in self.attributes:
            if attribute.name.lower() == name.lower():
                return attribute
        return None
