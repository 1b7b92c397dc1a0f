from pydantic import Field

from scim_v2.configs.constants import SCIM_SERVICE_PROVIDER_CONFIG_SCHEMA
from scim_v2.models.base import Meta
from scim_v2.models.base import ScimBaseModel


class Supported(ScimBaseModel):
    """Generic supported/not-supported flag used in ServiceProviderConfig."""

    wire_required_fields = ("supported",)

    supported: bool = False


class Filter(ScimBaseModel):
    """Filter configuration within ServiceProviderConfig (RFC 7643 §5)."""

    wire_required_fields = ("supported", "maxResults")

    supported: bool = False
    max_results: int = 0


class Bulk(ScimBaseModel):
    """Bulk configuration within ServiceProviderConfig (RFC 7643 §5)."""

    wire_required_fields = ("supported", "maxOperations", "maxPayloadSize")

    supported: bool = False
    max_operations: int = 0
    max_payload_size: int = 0


class AuthenticationScheme(ScimBaseModel):
    """One supported authentication scheme (RFC 7643 §5)."""

    wire_required_fields = ("name", "description")

    type: str | None = None  # e.g. "oauthbearertoken", "httpbasic"
    name: str = ""
    description: str = ""
    spec_uri: str | None = None
    documentation_uri: str | None = None
    primary: bool | None = None


class ServiceProviderConfig(ScimBaseModel):
    """SCIM ServiceProviderConfig resource (RFC 7643 §5).

    Tells a client which optional protocol features the service provider
    implements. The default instance advertises nothing: every feature is
    unsupported, all limits are zero and no authentication scheme is listed.
    """

    wire_required_fields = (
        "patch",
        "bulk",
        "filter",
        "changePassword",
        "sort",
        "etag",
        "authenticationSchemes",
    )

    schemas: list[str] = Field(
        default_factory=lambda: [SCIM_SERVICE_PROVIDER_CONFIG_SCHEMA]
    )
    documentation_uri: str | None = None
    patch: Supported = Field(default_factory=Supported)
    bulk: Bulk = Field(default_factory=Bulk)
    filter: Filter = Field(default_factory=Filter)
    change_password: Supported = Field(default_factory=Supported)
    sort: Supported = Field(default_factory=Supported)
    etag: Supported = Field(default_factory=Supported)
    authentication_schemes: list[AuthenticationScheme] = Field(default_factory=list)
    meta: Meta | None = None
