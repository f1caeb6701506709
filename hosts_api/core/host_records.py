"""Host Records — the host entity and the pure rules that build and merge it.

Invariants:
    - Host is immutable; updates produce a new Host with the same id
    - name is never empty on a Host produced by new_host or merge_host
    - Optional text fields are trimmed; blank becomes None
    - merge_host only touches keys present in `changes` (absent ≠ None)

Design Decisions:
    - Frozen dataclass over dict: attribute typos fail loudly, no accidental
      in-place mutation of records shared with the store
    - Field normalization lives here, not in schemas: the same rules apply to
      create, update and the seed record
"""

import re
import uuid
from dataclasses import dataclass, replace

from hosts_api.core.domain_types import DEMO_HOST_ID, HostId

EMAIL_PATTERN = re.compile(r"^\S+@\S+\.\S+$")

# Fields a client may change through update
MUTABLE_FIELDS = ("name", "document_id", "phone_number", "email")


@dataclass(frozen=True)
class Host:
    """A guest/visitor record."""
    id: HostId
    name: str
    document_id: str | None = None
    phone_number: str | None = None
    email: str | None = None


def generate_host_id() -> HostId:
    return HostId(str(uuid.uuid4()))


def clean_required_text(value: str) -> str:
    """Trim a required text field. Raises ValueError when blank."""
    value = value.strip()
    if not value:
        raise ValueError("must not be empty")
    return value


def clean_optional_text(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value))


def new_host(
    name: str,
    document_id: str | None = None,
    phone_number: str | None = None,
    email: str | None = None,
    host_id: HostId | None = None,
) -> Host:
    """Build a fresh Host, generating an id unless one is given."""
    return Host(
        id=host_id or generate_host_id(),
        name=clean_required_text(name),
        document_id=clean_optional_text(document_id),
        phone_number=clean_optional_text(phone_number),
        email=clean_optional_text(email),
    )


def merge_host(current: Host, changes: dict) -> Host:
    """Apply supplied field changes over `current`.

    Keys missing from `changes` keep their prior value. Unknown keys raise
    KeyError so a misspelt field never silently drops an update.
    """
    unknown = set(changes) - set(MUTABLE_FIELDS)
    if unknown:
        raise KeyError(f"Unknown host fields: {', '.join(sorted(unknown))}")

    cleaned = {}
    for field, value in changes.items():
        if field == "name":
            cleaned[field] = clean_required_text(value)
        else:
            cleaned[field] = clean_optional_text(value)
    return replace(current, **cleaned)


def demo_host() -> Host:
    """The example record the store is seeded with at startup."""
    return new_host(
        name="Invitado Demo",
        document_id="123",
        phone_number="3000000000",
        email="demo@correo.com",
        host_id=DEMO_HOST_ID,
    )
