from pydantic import Field

from scim_v2.configs.constants import SCIM_GROUP_SCHEMA
from scim_v2.models.base import Meta
from scim_v2.models.base import ScimBaseModel
from scim_v2.validation import require_non_empty


class Member(ScimBaseModel):
    """Group member reference (RFC 7643 §4.2).

    Every part is optional: a member may be identified by ``ref`` alone.
    ``value`` is the member's id in the service provider, never an object.
    """

    value: str | None = None
    ref: str | None = Field(default=None, alias="$ref")
    type: str | None = None
    display: str | None = None


class Group(ScimBaseModel):
    """SCIM Group resource representation (RFC 7643 §4.2)."""

    wire_required_fields = ("schemas", "id", "displayName")

    schemas: list[str] = Field(default_factory=lambda: [SCIM_GROUP_SCHEMA])
    id: str = "default_id"
    external_id: str | None = None
    display_name: str = "default_display_name"
    members: list[Member] | None = None
    meta: Meta | None = None

    def verify(self) -> None:
        """Raise ``MissingRequiredField`` for the first empty required field."""
        require_non_empty(self, "schemas", "id", "display_name")
