from pydantic import Field

from scim_v2.models.base import ScimBaseModel
from scim_v2.validation import require_present


class Manager(ScimBaseModel):
    """The user's manager, referenced by id and/or URI (RFC 7643 §4.3)."""

    value: str | None = None
    ref: str | None = Field(default=None, alias="$ref")
    display_name: str | None = None


class EnterpriseUser(ScimBaseModel):
    """Enterprise User extension (RFC 7643 §4.3).

    Attached to a ``User`` under the extension URN key rather than nested as
    a regular attribute. The protocol makes every attribute optional; this
    library's validation policy requires all six of them to be set.
    """

    employee_number: str | None = None
    cost_center: str | None = None
    organization: str | None = None
    division: str | None = None
    department: str | None = None
    manager: Manager | None = None

    def verify(self) -> None:
        """Raise ``MissingRequiredField`` for the first unset attribute.

        Only presence is checked: ``employee_number=""`` passes.
        """
        require_present(
            self,
            "employee_number",
            "cost_center",
            "organization",
            "division",
            "department",
            "manager",
        )
