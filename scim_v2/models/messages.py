"""SCIM protocol messages (RFC 7644 §3.4) and the polymorphic ``Resource``.

``ListResponse.Resources`` may mix resource kinds in one JSON array with no
discriminator field. ``parse_resource`` decides the kind of each element:

1. By tag: if the element's ``schemas`` names exactly one of the core User,
   Schema or Group URNs, that variant is used. Naming more than one of them
   is rejected as ambiguous.
2. By shape: otherwise each variant is tried in the fixed order
   User, Schema, Group. A variant is a candidate when all of its wire-required
   keys are present and the element validates against it. Exactly one
   candidate must remain; if several fit, the element is rejected as
   ambiguous instead of letting the order decide.

An object whose ``schemas`` names no core URN but which carries ``id``,
``userName`` and ``displayName`` therefore fails to resolve; peers should tag
every resource with its core schema, as the protocol requires.
"""

from __future__ import annotations

from collections.abc import Mapping
from collections.abc import Sequence
from typing import Any
from typing import Union

from pydantic import Field
from pydantic import field_validator
from pydantic import model_serializer
from pydantic import SerializerFunctionWrapHandler

from scim_v2.configs.app_configs import SCIM_DEFAULT_PAGE_SIZE
from scim_v2.configs.constants import SCIM_GROUP_SCHEMA
from scim_v2.configs.constants import SCIM_LIST_RESPONSE_SCHEMA
from scim_v2.configs.constants import SCIM_SCHEMA_SCHEMA
from scim_v2.configs.constants import SCIM_SEARCH_REQUEST_SCHEMA
from scim_v2.configs.constants import SCIM_USER_SCHEMA
from scim_v2.errors import DeserializationError
from scim_v2.models.base import ScimBaseModel
from scim_v2.models.group import Group
from scim_v2.models.schema import Schema
from scim_v2.models.user import User
from scim_v2.utils.logger import setup_logger

logger = setup_logger(name=__name__)

Resource = Union[User, Schema, Group]

# Resolution precedence, see module docstring
RESOURCE_VARIANTS: tuple[tuple[str, type[User] | type[Schema] | type[Group]], ...] = (
    (SCIM_USER_SCHEMA, User),
    (SCIM_SCHEMA_SCHEMA, Schema),
    (SCIM_GROUP_SCHEMA, Group),
)


def parse_resource(data: Any) -> Resource:
    """Resolve one ``Resources`` element to its variant.

    Raises:
        DeserializationError: If the element is not an object, matches no
            variant, or matches more than one.
    """
    if isinstance(data, (User, Schema, Group)):
        return data
    if not isinstance(data, Mapping):
        raise DeserializationError(
            f"resource must be a JSON object, got {type(data).__name__}"
        )

    declared = data.get("schemas")
    if not isinstance(declared, list):
        declared = []
    tagged = [(urn, model) for urn, model in RESOURCE_VARIANTS if urn in declared]

    if len(tagged) > 1:
        urns = ", ".join(urn for urn, _ in tagged)
        raise DeserializationError(f"ambiguous resource, schemas declares {urns}")
    if tagged:
        _, model = tagged[0]
        logger.debug(f"Resolved resource as {model.__name__} from its schemas tag")
        return model.from_dict(data)

    return _parse_resource_by_shape(data)


def _parse_resource_by_shape(data: Mapping[str, Any]) -> Resource:
    matches: list[Resource] = []
    failures: list[str] = []

    for _, model in RESOURCE_VARIANTS:
        missing = [key for key in model.wire_required_fields if key not in data]
        if missing:
            failures.append(f"{model.__name__}: missing {', '.join(missing)}")
            continue
        try:
            matches.append(model.from_dict(data))
        except DeserializationError as e:
            failures.append(f"{model.__name__}: {e.detail}")

    if len(matches) > 1:
        names = ", ".join(type(match).__name__ for match in matches)
        raise DeserializationError(
            f"ambiguous resource shape, matches {names}; add a schemas tag"
        )
    if not matches:
        raise DeserializationError(
            "resource matches no known variant (" + "; ".join(failures) + ")"
        )

    logger.debug(f"Resolved resource as {type(matches[0]).__name__} from its shape")
    return matches[0]


class ListResponse(ScimBaseModel):
    """Paginated list response (RFC 7644 §3.4.2).

    ``total_results`` counts every match on the server, so it may exceed
    ``len(resources)`` when the response is one page of a larger set.
    ``start_index`` is 1-based.
    """

    wire_required_fields = ("schemas", "totalResults")

    items_per_page: int = 0
    total_results: int = 0
    start_index: int = 1
    schemas: list[str] = Field(default_factory=lambda: [SCIM_LIST_RESPONSE_SCHEMA])
    resources: list[Resource] = Field(default_factory=list, alias="Resources")

    @field_validator("resources", mode="before")
    @classmethod
    def resolve_resources(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        try:
            return [parse_resource(item) for item in value]
        except DeserializationError as e:
            raise ValueError(e.detail) from e

    @classmethod
    def for_page(
        cls,
        resources: Sequence[Resource],
        total_results: int,
        start_index: int = 1,
    ) -> ListResponse:
        """Build a response for one page of a larger result set."""
        return cls(
            resources=list(resources),
            total_results=total_results,
            start_index=start_index,
            items_per_page=len(resources),
        )


class SearchRequest(ScimBaseModel):
    """Body of a ``POST .search`` request (RFC 7644 §3.4.3)."""

    wire_required_fields = ("schemas",)

    schemas: list[str] = Field(default_factory=lambda: [SCIM_SEARCH_REQUEST_SCHEMA])
    attributes: list[str] | None = None
    excluded_attributes: list[str] | None = None
    filter: str = ""
    sort_by: str | None = None
    sort_order: str | None = None  # "ascending" or "descending"
    start_index: int = 1
    count: int = SCIM_DEFAULT_PAGE_SIZE


class ListQuery(ScimBaseModel):
    """Query parameters of a list request (``GET /Users?filter=...``).

    ``count=None`` asks for no page size limit. It is written as
    ``"count": null`` so that it does not fall back to the default page size
    when read back; a missing ``count`` key still means the default.
    """

    wire_required_fields = ("filter", "startIndex")

    filter: str = ""
    start_index: int = 1
    count: int | None = SCIM_DEFAULT_PAGE_SIZE

    @model_serializer(mode="wrap")
    def keep_cleared_count(
        self, handler: SerializerFunctionWrapHandler
    ) -> dict[str, Any]:
        data = handler(self)
        data.setdefault("count", self.count)
        return data
