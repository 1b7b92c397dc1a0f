"""Error taxonomy shared by every part of the library.

All failures surface as subclasses of ``SCIMError`` so callers can catch the
whole family with one ``except`` clause, or a single kind when they care.
Errors coming from pydantic or the ``json`` module are chained with
``raise ... from err`` and their text is kept in ``detail``.
"""

from __future__ import annotations


class SCIMError(Exception):
    """Base class for every error raised by this library."""

    prefix = "SCIM error"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}" if detail else self.prefix)


class SerializationError(SCIMError):
    """Raised when a model cannot be encoded to JSON."""

    prefix = "Serialization error"


class DeserializationError(SCIMError):
    """Raised when JSON does not match the shape of the target model."""

    prefix = "Deserialization error"


class InvalidJsonFormat(DeserializationError):
    """Raised when the input is not parseable JSON at all."""

    prefix = "Invalid JSON format"


class MissingRequiredField(SCIMError):
    """Raised by presence validation. ``field`` is the Python attribute name."""

    prefix = "Missing required field"

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(field)


class InvalidFieldValue(SCIMError):
    """Raised when a field is present but its value breaks a model invariant."""

    prefix = "Invalid field value"

    def __init__(self, field: str, reason: str | None = None) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"{field} ({reason})" if reason else field)


class SchemaNotFound(SCIMError):
    prefix = "Schema not found"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)


class ResourceTypeNotFound(SCIMError):
    prefix = "Resource type not found"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)


class ConflictError(SCIMError):
    prefix = "Conflict error"


class RequestError(SCIMError):
    prefix = "Request error"


class OtherError(SCIMError):
    """Escape hatch for conditions reported by collaborating systems."""

    prefix = "Other Error"
