"""
SCIM 2.0 resource models

Pydantic models for SCIM 2.0 resources and protocol messages (RFC 7643 / 7644).
"""

from scim_v2.models.base import Meta
from scim_v2.models.base import ScimBaseModel
from scim_v2.models.enterprise_user import EnterpriseUser
from scim_v2.models.enterprise_user import Manager
from scim_v2.models.group import Group
from scim_v2.models.group import Member
from scim_v2.models.messages import ListQuery
from scim_v2.models.messages import ListResponse
from scim_v2.models.messages import parse_resource
from scim_v2.models.messages import Resource
from scim_v2.models.messages import SearchRequest
from scim_v2.models.resource_type import ResourceType
from scim_v2.models.resource_type import SchemaExtension
from scim_v2.models.schema import Attributes
from scim_v2.models.schema import Schema
from scim_v2.models.schema import SubAttributes
from scim_v2.models.service_provider_config import AuthenticationScheme
from scim_v2.models.service_provider_config import Bulk
from scim_v2.models.service_provider_config import Filter
from scim_v2.models.service_provider_config import ServiceProviderConfig
from scim_v2.models.service_provider_config import Supported
from scim_v2.models.user import Address
from scim_v2.models.user import Email
from scim_v2.models.user import Entitlement
from scim_v2.models.user import GroupMembership
from scim_v2.models.user import Im
from scim_v2.models.user import MultiValuedAttribute
from scim_v2.models.user import Name
from scim_v2.models.user import PhoneNumber
from scim_v2.models.user import Photo
from scim_v2.models.user import Role
from scim_v2.models.user import User
from scim_v2.models.user import X509Certificate

__all__ = [
    "Address",
    "Attributes",
    "AuthenticationScheme",
    "Bulk",
    "Email",
    "EnterpriseUser",
    "Entitlement",
    "Filter",
    "Group",
    "GroupMembership",
    "Im",
    "ListQuery",
    "ListResponse",
    "Manager",
    "Member",
    "Meta",
    "MultiValuedAttribute",
    "Name",
    "PhoneNumber",
    "Photo",
    "Resource",
    "ResourceType",
    "Role",
    "Schema",
    "SchemaExtension",
    "ScimBaseModel",
    "SearchRequest",
    "ServiceProviderConfig",
    "SubAttributes",
    "Supported",
    "User",
    "X509Certificate",
    "parse_resource",
]
