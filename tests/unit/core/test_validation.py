"""Pruebas del validador de credenciales y del formulario de login."""

from __future__ import annotations

import pytest

from unwind.core.errors import InvalidChoiceError
from unwind.core.validation import (
    EMAIL_INVALID,
    EMAIL_REQUIRED,
    GENERAL_LOGIN_FAILED,
    PASSWORD_REQUIRED,
    CredentialInput,
    LoginForm,
    validate_credentials,
)


def test_empty_input_reports_both_required_errors() -> None:
    errors = validate_credentials(CredentialInput(email="", password=""))

    assert errors == {"email": "Email is required", "password": "Password is required"}


def test_short_password_with_valid_email() -> None:
    errors = validate_credentials(CredentialInput(email="a@b.com", password="12345"))

    assert errors == {"password": "Password must be at least 6 characters"}


def test_valid_credentials_produce_no_errors() -> None:
    assert validate_credentials(CredentialInput("yogi@unwind.app", "123456")) == {}


def test_whitespace_only_fields_count_as_missing() -> None:
    errors = validate_credentials(CredentialInput("   ", " \t "))

    assert errors == {"email": EMAIL_REQUIRED, "password": PASSWORD_REQUIRED}


@pytest.mark.parametrize(
    "email",
    ["plainaddress", "missing@tld", "@domain.com", "user@.com", "two@@signs.com", "sp ace@x.com", "a@b.", " a@b.com"],
)
def test_malformed_emails_are_rejected(email: str) -> None:
    errors = validate_credentials(CredentialInput(email, "secret123"))

    assert errors == {"email": EMAIL_INVALID}


@pytest.mark.parametrize("email", ["a@b.co", "first.last@sub.domain.org", "x+tag@y.io"])
def test_well_formed_emails_are_accepted(email: str) -> None:
    assert validate_credentials(CredentialInput(email, "secret123")) == {}


def test_custom_minimum_password_length() -> None:
    errors = validate_credentials(CredentialInput("a@b.com", "1234567"), min_password_length=8)

    assert errors == {"password": "Password must be at least 8 characters"}


def test_editing_a_field_clears_only_its_error() -> None:
    form = LoginForm()
    assert form.submit() is False

    form.edit_field("email", "not-an-email")

    assert "email" not in form.errors
    assert form.errors == {"password": PASSWORD_REQUIRED}


def test_edit_does_not_revalidate_until_next_submit() -> None:
    form = LoginForm()
    form.submit()

    form.edit_field("password", "123")
    assert "password" not in form.errors

    assert form.submit() is False
    assert form.errors["password"] == "Password must be at least 6 characters"


def test_submit_recomputes_errors_wholesale() -> None:
    form = LoginForm()
    form.submit()
    form.set_general_error()

    assert form.submit(CredentialInput("a@b.com", "123456")) is True
    assert form.errors == {}
    assert form.credentials.email == "a@b.com"


def test_general_field_is_not_editable() -> None:
    form = LoginForm()
    form.set_general_error()

    with pytest.raises(InvalidChoiceError):
        form.edit_field("general", "x")

    assert form.errors == {"general": GENERAL_LOGIN_FAILED}
