import pytest

from scim_v2.errors import InvalidFieldValue
from scim_v2.errors import MissingRequiredField
from scim_v2.models import Email
from scim_v2.models import Group
from scim_v2.models import User
from scim_v2.validation import require_non_empty
from scim_v2.validation import require_present
from scim_v2.validation import validate_group
from scim_v2.validation import validate_user
from tests.unit.scim_v2.conftest import make_enterprise_user
from tests.unit.scim_v2.conftest import make_scim_group
from tests.unit.scim_v2.conftest import make_scim_user


class _Record:
    def __init__(self, **fields: object) -> None:
        self.__dict__.update(fields)


class TestPresenceHelpers:
    def test_require_non_empty_treats_empty_as_missing(self) -> None:
        record = _Record(tags=[], label="x")

        with pytest.raises(MissingRequiredField) as exc_info:
            require_non_empty(record, "label", "tags")

        assert exc_info.value.field == "tags"

    def test_require_present_accepts_empty(self) -> None:
        require_present(_Record(label="", tags=[]), "label", "tags")

    def test_require_present_rejects_none(self) -> None:
        with pytest.raises(MissingRequiredField) as exc_info:
            require_present(_Record(label=None), "label")

        assert exc_info.value.field == "label"

    def test_trailing_underscore_is_not_reported(self) -> None:
        with pytest.raises(MissingRequiredField) as exc_info:
            require_non_empty(_Record(schema_=""), "schema_")

        assert exc_info.value.field == "schema"


class TestModuleValidators:
    def test_validate_user(self) -> None:
        validate_user(make_scim_user())

        with pytest.raises(MissingRequiredField):
            validate_user(User())

    def test_validate_user_checks_extension_declaration(self) -> None:
        user = make_scim_user(enterprise_user=make_enterprise_user())

        with pytest.raises(InvalidFieldValue):
            validate_user(user)

    def test_validate_group(self) -> None:
        validate_group(Group())

        with pytest.raises(MissingRequiredField):
            validate_group(make_scim_group(display_name=""))

    def test_value_content_is_not_checked(self) -> None:
        validate_user(
            make_scim_user(user_name="x", emails=[Email(value="not-an-email")])
        )
