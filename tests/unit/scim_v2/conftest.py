"""Shared builders and payloads for scim_v2 unit tests."""

from __future__ import annotations

from typing import Any

import pytest

from scim_v2.configs.constants import SCIM_ENTERPRISE_USER_SCHEMA
from scim_v2.configs.constants import SCIM_GROUP_SCHEMA
from scim_v2.configs.constants import SCIM_USER_SCHEMA
from scim_v2.models import EnterpriseUser
from scim_v2.models import Group
from scim_v2.models import Manager
from scim_v2.models import Member
from scim_v2.models import Name
from scim_v2.models import User


def make_scim_user(**kwargs: Any) -> User:
    """Build a User with sensible defaults."""
    defaults: dict[str, Any] = {
        "user_name": "bjensen@example.com",
        "external_id": "ext-default",
        "active": True,
        "name": Name(given_name="Barbara", family_name="Jensen"),
    }
    defaults.update(kwargs)
    return User(**defaults)


def make_scim_group(**kwargs: Any) -> Group:
    """Build a Group with sensible defaults."""
    defaults: dict[str, Any] = {
        "id": "e9e30dba-f08f-4109-8486-d5c6a331660a",
        "display_name": "Tour Guides",
        "members": [
            Member(value="2819c223-7f76-453a-919d-413861904646", display="Babs Jensen")
        ],
    }
    defaults.update(kwargs)
    return Group(**defaults)


def make_enterprise_user(**kwargs: Any) -> EnterpriseUser:
    """Build an EnterpriseUser with every attribute the validator requires."""
    defaults: dict[str, Any] = {
        "employee_number": "701984",
        "cost_center": "4130",
        "organization": "Universal Studios",
        "division": "Theme Park",
        "department": "Tour Operations",
        "manager": Manager(
            value="26118915-6090-4610-87e4-49d8ca9f808d",
            ref="../Users/26118915-6090-4610-87e4-49d8ca9f808d",
            display_name="John Smith",
        ),
    }
    defaults.update(kwargs)
    return EnterpriseUser(**defaults)


@pytest.fixture
def full_group_json() -> str:
    """RFC 7643 §8.4 group representation."""
    return """{
        "schemas": ["urn:ietf:params:scim:schemas:core:2.0:Group"],
        "id": "e9e30dba-f08f-4109-8486-d5c6a331660a",
        "displayName": "Tour Guides",
        "members": [
            {
                "value": "2819c223-7f76-453a-919d-413861904646",
                "$ref": "https://example.com/v2/Users/2819c223-7f76-453a-919d-413861904646",
                "display": "Babs Jensen"
            },
            {
                "value": "902c246b-6245-4190-8e05-00816be7344a",
                "$ref": "https://example.com/v2/Users/902c246b-6245-4190-8e05-00816be7344a",
                "display": "Mandy Pepperidge"
            }
        ],
        "meta": {
            "resourceType": "Group",
            "created": "2010-01-23T04:56:22Z",
            "lastModified": "2011-05-13T04:42:34Z",
            "version": "W\\/\\"3694e05e9dff592\\"",
            "location": "https://example.com/v2/Groups/e9e30dba-f08f-4109-8486-d5c6a331660a"
        }
    }"""


@pytest.fixture
def enterprise_user_json() -> str:
    """RFC 7643 §8.3 enterprise user representation (trimmed)."""
    return """{
        "schemas": [
            "urn:ietf:params:scim:schemas:core:2.0:User",
            "urn:ietf:params:scim:schemas:extension:enterprise:2.0:User"
        ],
        "id": "2819c223-7f76-453a-919d-413861904646",
        "externalId": "701984",
        "userName": "bjensen@example.com",
        "name": {
            "formatted": "Ms. Barbara J Jensen, III",
            "familyName": "Jensen",
            "givenName": "Barbara",
            "middleName": "Jane",
            "honorificPrefix": "Ms.",
            "honorificSuffix": "III"
        },
        "displayName": "Babs Jensen",
        "nickName": "Babs",
        "profileUrl": "https://login.example.com/bjensen",
        "emails": [
            {"value": "bjensen@example.com", "type": "work", "primary": true},
            {"value": "babs@jensen.org", "type": "home"}
        ],
        "addresses": [
            {
                "streetAddress": "100 Universal City Plaza",
                "locality": "Hollywood",
                "region": "CA",
                "postalCode": "91608",
                "country": "USA",
                "formatted": "100 Universal City Plaza\\nHollywood, CA 91608 USA",
                "type": "work",
                "primary": true
            }
        ],
        "phoneNumbers": [{"value": "555-555-5555", "type": "work"}],
        "userType": "Employee",
        "title": "Tour Guide",
        "preferredLanguage": "en-US",
        "locale": "en-US",
        "timezone": "America/Los_Angeles",
        "active": true,
        "groups": [
            {
                "value": "e9e30dba-f08f-4109-8486-d5c6a331660a",
                "$ref": "../Groups/e9e30dba-f08f-4109-8486-d5c6a331660a",
                "display": "Tour Guides"
            }
        ],
        "x509Certificates": [{"value": "MIIDQzCCAqygAwIBAgICEAAwDQYJKoZIhvcNAQEFBQAw"}],
        "urn:ietf:params:scim:schemas:extension:enterprise:2.0:User": {
            "employeeNumber": "701984",
            "costCenter": "4130",
            "organization": "Universal Studios",
            "division": "Theme Park",
            "department": "Tour Operations",
            "manager": {
                "value": "26118915-6090-4610-87e4-49d8ca9f808d",
                "$ref": "../Users/26118915-6090-4610-87e4-49d8ca9f808d",
                "displayName": "John Smith"
            }
        },
        "meta": {
            "resourceType": "User",
            "created": "2010-01-23T04:56:22Z",
            "lastModified": "2011-05-13T04:42:34Z",
            "version": "W\\/\\"3694e05e9dff591\\"",
            "location": "https://example.com/v2/Users/2819c223-7f76-453a-919d-413861904646"
        }
    }"""


@pytest.fixture
def tagged_user_payload() -> dict[str, Any]:
    return {
        "schemas": [SCIM_USER_SCHEMA],
        "id": "2819c223-7f76-453a-919d-413861904646",
        "userName": "bjensen",
        "displayName": "Babs Jensen",
    }


@pytest.fixture
def tagged_group_payload() -> dict[str, Any]:
    return {
        "schemas": [SCIM_GROUP_SCHEMA],
        "id": "e9e30dba-f08f-4109-8486-d5c6a331660a",
        "displayName": "Tour Guides",
    }


@pytest.fixture
def enterprise_schema_urn() -> str:
    return SCIM_ENTERPRISE_USER_SCHEMA
