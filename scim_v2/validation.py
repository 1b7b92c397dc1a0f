"""Presence validation for SCIM resources.

SCIM is loosely typed on purpose: the protocol says which attributes must be
present, not what their values must look like. The checks here follow that
and never look at value content (an email attribute holding "x" passes).

Checks run in field declaration order and stop at the first failure, raising
``MissingRequiredField`` with the Python attribute name.

Two flavours of "required" exist:

  - ``require_non_empty``: the field always has a value (it is a plain
    ``str`` / ``list``) so "missing" means empty.
  - ``require_present``: the field is optional-typed, so "missing" means
    ``None``. An empty string counts as present.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scim_v2.errors import MissingRequiredField

if TYPE_CHECKING:
    from scim_v2.models.enterprise_user import EnterpriseUser
    from scim_v2.models.group import Group
    from scim_v2.models.resource_type import ResourceType
    from scim_v2.models.user import User


def _reported_name(field: str) -> str:
    # attributes renamed to dodge BaseModel members (schema_) report their SCIM name
    return field.rstrip("_")


def require_non_empty(obj: object, *fields: str) -> None:
    for field in fields:
        if not getattr(obj, field):
            raise MissingRequiredField(_reported_name(field))


def require_present(obj: object, *fields: str) -> None:
    for field in fields:
        if getattr(obj, field) is None:
            raise MissingRequiredField(_reported_name(field))


def validate_user(user: User) -> None:
    user.verify()


def validate_group(group: Group) -> None:
    group.verify()


def validate_enterprise_user(enterprise_user: EnterpriseUser) -> None:
    enterprise_user.verify()


def validate_resource_type(resource_type: ResourceType) -> None:
    resource_type.verify()
