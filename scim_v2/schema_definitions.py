"""Bundled SCIM schema documents and resource types (RFC 7643 §6, §7, §8.7).

The canonical User, Group and Enterprise User schema documents ship as JSON
files inside the package. They are parsed on first use, cached for the life of
the process, and handed out as deep copies so the shared reference data can
never be mutated by a caller.

Lookups are all-or-nothing: the first unknown name raises and nothing is
returned for the names before it.
"""

from collections.abc import Iterable
from functools import lru_cache
from importlib.resources import files

from scim_v2.configs.constants import SCIM_ENTERPRISE_USER_SCHEMA
from scim_v2.configs.constants import SCIM_GROUP_SCHEMA
from scim_v2.configs.constants import SCIM_USER_SCHEMA
from scim_v2.errors import ResourceTypeNotFound
from scim_v2.errors import SchemaNotFound
from scim_v2.models.resource_type import ResourceType
from scim_v2.models.schema import Schema
from scim_v2.utils.logger import setup_logger

logger = setup_logger(name=__name__)

# Well-known name -> bundled document file
_SCHEMA_FILES = {
    "user": "user.json",
    "enterprise_user": "enterprise_user.json",
    "group": "group.json",
}

USER_RESOURCE_TYPE = ResourceType.model_validate(
    {
        "id": "User",
        "name": "User",
        "endpoint": "/Users",
        "description": "User Account",
        "schema": SCIM_USER_SCHEMA,
        "schemaExtensions": [
            {"schema": SCIM_ENTERPRISE_USER_SCHEMA, "required": False},
        ],
        "meta": {"resourceType": "ResourceType", "location": "/v2/ResourceTypes/User"},
    }
)

GROUP_RESOURCE_TYPE = ResourceType.model_validate(
    {
        "id": "Group",
        "name": "Group",
        "endpoint": "/Groups",
        "description": "Group",
        "schema": SCIM_GROUP_SCHEMA,
        "meta": {"resourceType": "ResourceType", "location": "/v2/ResourceTypes/Group"},
    }
)

_RESOURCE_TYPES = {
    "user": USER_RESOURCE_TYPE,
    "group": GROUP_RESOURCE_TYPE,
}


@lru_cache(maxsize=None)
def _load_bundled_schema(name: str) -> Schema:
    resource = files("scim_v2") / "schemas" / _SCHEMA_FILES[name]
    schema = Schema.from_json(resource.read_text(encoding="utf-8"))
    logger.debug(f"Loaded bundled schema '{name}' ({schema.id})")
    return schema


def get_schema(name: str) -> Schema:
    """Return the bundled schema registered under ``name``.

    Raises:
        SchemaNotFound: If ``name`` is not one of "user", "enterprise_user"
            or "group".
    """
    if name not in _SCHEMA_FILES:
        raise SchemaNotFound(name)
    return _load_bundled_schema(name).model_copy(deep=True)


def get_schemas(names: Iterable[str]) -> list[Schema]:
    """Resolve several well-known schema names, preserving request order."""
    return [get_schema(name) for name in names]


def get_resource_type(name: str) -> ResourceType:
    """Return the built-in resource type for "user" or "group"."""
    if name not in _RESOURCE_TYPES:
        raise ResourceTypeNotFound(name)
    return _RESOURCE_TYPES[name].model_copy(deep=True)


def get_resource_types(names: Iterable[str]) -> list[ResourceType]:
    return [get_resource_type(name) for name in names]
