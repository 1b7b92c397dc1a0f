from pydantic import Field

from scim_v2.configs.constants import SCIM_RESOURCE_TYPE_SCHEMA
from scim_v2.configs.constants import SCIM_USER_SCHEMA
from scim_v2.models.base import Meta
from scim_v2.models.base import ScimBaseModel
from scim_v2.validation import require_non_empty


class SchemaExtension(ScimBaseModel):
    """Schema extension reference within ResourceType (RFC 7643 §6)."""

    schema_: str = Field(alias="schema")
    required: bool


class ResourceType(ScimBaseModel):
    """SCIM ResourceType resource (RFC 7643 §6).

    Describes one resource kind: the endpoint it lives at, its core schema and
    the extensions that may (or must) accompany it. The default instance
    describes the core User resource type.
    """

    wire_required_fields = ("name", "endpoint", "schema")

    schemas: list[str] = Field(default_factory=lambda: [SCIM_RESOURCE_TYPE_SCHEMA])
    id: str | None = None
    name: str = "User"
    description: str | None = None
    endpoint: str = "/Users"
    schema_: str = Field(default=SCIM_USER_SCHEMA, alias="schema")
    schema_extensions: list[SchemaExtension] | None = None
    meta: Meta | None = None

    def verify(self) -> None:
        """Raise ``MissingRequiredField`` for the first empty required field."""
        require_non_empty(self, "name", "endpoint", "schema_")
