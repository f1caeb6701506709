"""Host schemas — body rules for create/update and camelCase wire format.

Invariants:
    - HostCreate requires a non-blank name; HostUpdate does not require any key
    - HostUpdate.changes() contains exactly the keys sent (explicit null included)
    - Both accept camelCase aliases and snake_case names
    - HostResponse dumps camelCase by alias
"""

import pytest
from pydantic import ValidationError

from hosts_api.core.host_records import demo_host
from hosts_api.schemas.host import HostCreate, HostResponse, HostUpdate


# --- HostCreate ---------------------------------------------------------------

def test_create_accepts_camel_case():
    body = HostCreate.model_validate({
        "name": "Ana", "documentId": "1", "phoneNumber": "300", "email": "a@b.com",
    })
    assert body.document_id == "1"
    assert body.phone_number == "300"


def test_create_accepts_snake_case():
    body = HostCreate(name="Ana", document_id="1")
    assert body.document_id == "1"


def test_create_strips_name():
    assert HostCreate(name="  Ana ").name == "Ana"


def test_create_blank_name_error_points_at_name():
    with pytest.raises(ValidationError) as info:
        HostCreate(name="   ")
    errors = info.value.errors()
    assert errors[0]["loc"] == ("name",)
    assert "name is required" in errors[0]["msg"]


def test_create_missing_name():
    with pytest.raises(ValidationError) as info:
        HostCreate.model_validate({})
    assert info.value.errors()[0]["type"] == "missing"


def test_create_email_trimmed():
    assert HostCreate(name="Ana", email=" a@b.com ").email == "a@b.com"


@pytest.mark.parametrize("email", ["a@b", "   "])
def test_create_rejects_bad_email(email):
    with pytest.raises(ValidationError) as info:
        HostCreate(name="Ana", email=email)
    assert info.value.errors()[0]["loc"] == ("email",)


def test_create_empty_email_becomes_none():
    assert HostCreate(name="Ana", email="").email is None


# --- HostUpdate ---------------------------------------------------------------

def test_update_changes_only_sent_keys():
    body = HostUpdate.model_validate({"phoneNumber": " 311 "})
    assert body.changes() == {"phone_number": "311"}


def test_update_explicit_null_is_a_change():
    body = HostUpdate.model_validate({"email": None})
    assert body.changes() == {"email": None}


def test_update_empty_body_has_no_changes():
    assert HostUpdate.model_validate({}).changes() == {}


def test_update_rejects_null_name():
    with pytest.raises(ValidationError) as info:
        HostUpdate.model_validate({"name": None})
    assert info.value.errors()[0]["loc"] == ("name",)


@pytest.mark.parametrize("email", ["nope", "   "])
def test_update_rejects_bad_email(email):
    with pytest.raises(ValidationError):
        HostUpdate.model_validate({"email": email})


# --- HostResponse -------------------------------------------------------------

def test_response_dumps_camel_case():
    dumped = HostResponse.from_host(demo_host()).model_dump(by_alias=True)
    assert dumped == {
        "id": "demo-1",
        "name": "Invitado Demo",
        "documentId": "123",
        "phoneNumber": "3000000000",
        "email": "demo@correo.com",
    }
