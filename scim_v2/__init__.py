"""Models, validation and JSON mapping for SCIM 2.0 (RFC 7642, 7643, 7644).

Validation is deliberately light: SCIM's schema is flexible, so only the
presence of required fields is checked, never the format of their values.

Typical use::

    group = Group.from_json(payload)
    group.verify()
    body = group.serialize()

Value objects (``Name``, ``Email``, ``Member``...) live in ``scim_v2.models``.
"""

from scim_v2.errors import ConflictError
from scim_v2.errors import DeserializationError
from scim_v2.errors import InvalidFieldValue
from scim_v2.errors import InvalidJsonFormat
from scim_v2.errors import MissingRequiredField
from scim_v2.errors import OtherError
from scim_v2.errors import RequestError
from scim_v2.errors import ResourceTypeNotFound
from scim_v2.errors import SchemaNotFound
from scim_v2.errors import SCIMError
from scim_v2.errors import SerializationError
from scim_v2.models import EnterpriseUser
from scim_v2.models import Group
from scim_v2.models import ListQuery
from scim_v2.models import ListResponse
from scim_v2.models import parse_resource
from scim_v2.models import Resource
from scim_v2.models import ResourceType
from scim_v2.models import Schema
from scim_v2.models import SearchRequest
from scim_v2.models import ServiceProviderConfig
from scim_v2.models import User
from scim_v2.schema_definitions import get_resource_type
from scim_v2.schema_definitions import get_resource_types
from scim_v2.schema_definitions import get_schema
from scim_v2.schema_definitions import get_schemas
from scim_v2.validation import validate_enterprise_user
from scim_v2.validation import validate_group
from scim_v2.validation import validate_resource_type
from scim_v2.validation import validate_user

__all__ = [
    "ConflictError",
    "DeserializationError",
    "EnterpriseUser",
    "Group",
    "InvalidFieldValue",
    "InvalidJsonFormat",
    "ListQuery",
    "ListResponse",
    "MissingRequiredField",
    "OtherError",
    "RequestError",
    "Resource",
    "ResourceType",
    "ResourceTypeNotFound",
    "SCIMError",
    "Schema",
    "SchemaNotFound",
    "SearchRequest",
    "SerializationError",
    "ServiceProviderConfig",
    "User",
    "get_resource_type",
    "get_resource_types",
    "get_schema",
    "get_schemas",
    "parse_resource",
    "validate_enterprise_user",
    "validate_group",
    "validate_resource_type",
    "validate_user",
]
