"""SCIM User resource (RFC 7643 §4.1) and its value objects.

This is the JSON shape identity providers send when creating or updating a
user, and the shape a service provider returns. Only ``userName`` is
mandatory in the protocol; everything else is optional and stays ``None``
when absent so "not sent" and "sent empty" remain distinguishable.
"""

from pydantic import Field

from scim_v2.configs.constants import SCIM_ENTERPRISE_USER_SCHEMA
from scim_v2.configs.constants import SCIM_USER_SCHEMA
from scim_v2.errors import InvalidFieldValue
from scim_v2.models.base import Meta
from scim_v2.models.base import ScimBaseModel
from scim_v2.models.enterprise_user import EnterpriseUser
from scim_v2.validation import require_non_empty


class Name(ScimBaseModel):
    """User name components (RFC 7643 §4.1.1)."""

    formatted: str | None = None
    family_name: str | None = None
    given_name: str | None = None
    middle_name: str | None = None
    honorific_prefix: str | None = None
    honorific_suffix: str | None = None


class MultiValuedAttribute(ScimBaseModel):
    """Common sub-attributes of multi-valued attributes (RFC 7643 §2.4)."""

    value: str | None = None
    display: str | None = None
    type: str | None = None
    primary: bool | None = None


class Email(MultiValuedAttribute):
    pass


class PhoneNumber(MultiValuedAttribute):
    pass


class Im(MultiValuedAttribute):
    pass


class Photo(MultiValuedAttribute):
    pass


class Entitlement(MultiValuedAttribute):
    pass


class Role(MultiValuedAttribute):
    pass


class X509Certificate(MultiValuedAttribute):
    """DER certificate, base64 encoded. Kept as text, never decoded."""


class Address(ScimBaseModel):
    """Physical mailing address (RFC 7643 §4.1.2)."""

    formatted: str | None = None
    street_address: str | None = None
    locality: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country: str | None = None
    type: str | None = None
    primary: bool | None = None


class GroupMembership(ScimBaseModel):
    """A group the user belongs to. Read-only for clients (RFC 7643 §4.1.2)."""

    value: str | None = None
    ref: str | None = Field(default=None, alias="$ref")
    display: str | None = None
    type: str | None = None  # "direct" or "indirect"


class User(ScimBaseModel):
    """SCIM User resource representation (RFC 7643 §4.1)."""

    wire_required_fields = ("userName",)

    schemas: list[str] = Field(default_factory=lambda: [SCIM_USER_SCHEMA])
    id: str | None = None
    external_id: str | None = None
    user_name: str = ""
    name: Name | None = None
    display_name: str | None = None
    nick_name: str | None = None
    profile_url: str | None = None
    title: str | None = None
    user_type: str | None = None
    preferred_language: str | None = None
    locale: str | None = None
    timezone: str | None = None
    active: bool | None = None
    password: str | None = None
    emails: list[Email] | None = None
    phone_numbers: list[PhoneNumber] | None = None
    ims: list[Im] | None = None
    photos: list[Photo] | None = None
    addresses: list[Address] | None = None
    groups: list[GroupMembership] | None = None
    entitlements: list[Entitlement] | None = None
    roles: list[Role] | None = None
    x509_certificates: list[X509Certificate] | None = None
    meta: Meta | None = None
    enterprise_user: EnterpriseUser | None = Field(
        default=None, alias=SCIM_ENTERPRISE_USER_SCHEMA
    )

    def extension_schemas(self) -> list[str]:
        """URNs of the extensions currently attached to this user."""
        urns = []
        if self.enterprise_user is not None:
            urns.append(SCIM_ENTERPRISE_USER_SCHEMA)
        return urns

    def attach_enterprise_user(self, enterprise_user: EnterpriseUser) -> None:
        """Set the enterprise extension and list its URN in ``schemas``."""
        self.enterprise_user = enterprise_user
        if SCIM_ENTERPRISE_USER_SCHEMA not in self.schemas:
            self.schemas.append(SCIM_ENTERPRISE_USER_SCHEMA)

    def verify(self) -> None:
        """Check required fields, then that every extension is declared.

        Raises:
            MissingRequiredField: ``schemas`` or ``user_name`` is empty.
            InvalidFieldValue: an attached extension's URN is not in
                ``schemas``.
        """
        require_non_empty(self, "schemas", "user_name")
        for urn in self.extension_schemas():
            if urn not in self.schemas:
                raise InvalidFieldValue("schemas", f"{urn} is not declared")
