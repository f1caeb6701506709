"""Host Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - HostCreate.name: required, stripped, non-empty
    - HostUpdate: every field optional; only keys present in the body are applied
    - email (both): "" is treated as absent; anything else is stripped and
      must match local@domain.tld (whitespace-only is rejected)
    - documentId / phoneNumber: stripped; blank becomes null

Design Decisions:
    - model_fields_set as the present-vs-absent marker: an explicit null is
      "present" (clears optional fields, rejected for name), a missing key is not
    - Normalization delegated to core.host_records so seed data and API input
      follow the same rules
"""

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from hosts_api.core.host_records import (
    Host, clean_optional_text, clean_required_text, is_valid_email,
)


class CamelModel(BaseModel):
    """Base model exposing camelCase names on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _check_name(v: str | None) -> str:
    if v is None:
        raise ValueError("name must be a non-empty string")
    try:
        return clean_required_text(v)
    except ValueError:
        raise ValueError("name is required") from None


def _check_email(v: str | None) -> str | None:
    # Only "" counts as absent; a whitespace-only email is present and invalid
    if not v:
        return None
    v = v.strip()
    if not is_valid_email(v):
        raise ValueError("email is not valid")
    return v


class HostCreate(CamelModel):
    """Host creation — name required, the rest optional."""
    name: str
    document_id: str | None = None
    phone_number: str | None = None
    email: str | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _check_name(v)

    @field_validator("document_id", "phone_number")
    @classmethod
    def strip_optional(cls, v: str | None) -> str | None:
        return clean_optional_text(v)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str | None) -> str | None:
        return _check_email(v)


class HostUpdate(CamelModel):
    """Partial host update — absent keys keep their stored value."""
    name: str | None = None
    document_id: str | None = None
    phone_number: str | None = None
    email: str | None = None

    # Only runs for supplied keys (validate_default is off)
    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str:
        return _check_name(v)

    @field_validator("document_id", "phone_number")
    @classmethod
    def strip_optional(cls, v: str | None) -> str | None:
        return clean_optional_text(v)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str | None) -> str | None:
        return _check_email(v)

    def changes(self) -> dict:
        """Snake-case fields the client actually sent, with their cleaned values."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class HostResponse(CamelModel):
    """Host response — public-facing record."""
    id: str
    name: str
    document_id: str | None = None
    phone_number: str | None = None
    email: str | None = None

    @classmethod
    def from_host(cls, host: Host) -> "HostResponse":
        return cls(
            id=host.id,
            name=host.name,
            document_id=host.document_id,
            phone_number=host.phone_number,
            email=host.email,
        )


class HostPage(BaseModel):
    """One page of hosts; total counts the whole store, not the page."""
    page: int
    limit: int
    total: int
    items: list[HostResponse]
