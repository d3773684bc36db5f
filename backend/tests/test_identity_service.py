"""
Tests for signup, login and token binding.
"""

import pytest

from inventory_tracker.core.errors import (
    AuthenticationError,
    ConflictError,
    InvalidCredentialsError,
    ValidationError,
)
from inventory_tracker.models import Organization, User
from inventory_tracker.services.identity import IdentityService


@pytest.fixture
def identity(db_session, hasher, tokens):
    return IdentityService(db_session, hasher, tokens)


def test_signup_creates_organization_and_user(identity, db_session):
    token = identity.signup("owner@acme.test", "s3cret-pass", "Acme")

    organization = db_session.query(Organization).one()
    user = db_session.query(User).one()
    assert organization.name == "Acme"
    assert user.email == "owner@acme.test"
    assert user.organization_id == organization.id
    assert user.password_hash != "s3cret-pass"

    principal = identity.verify(token)
    assert principal.user_id == user.id
    assert principal.organization_id == organization.id


def test_each_signup_gets_its_own_organization(identity, db_session):
    first = identity.verify(identity.signup("a@acme.test", "pw-one", "Same Name"))
    second = identity.verify(identity.signup("b@acme.test", "pw-two", "Same Name"))

    assert first.organization_id != second.organization_id
    assert db_session.query(Organization).count() == 2


@pytest.mark.parametrize("email,password,organization", [
    (None, "pw", "Acme"),
    ("a@acme.test", None, "Acme"),
    ("a@acme.test", "pw", None),
    ("", "pw", "Acme"),
    ("a@acme.test", "", "Acme"),
    ("a@acme.test", "pw", "  "),
])
def test_signup_requires_all_fields(identity, db_session, email, password, organization):
    with pytest.raises(ValidationError):
        identity.signup(email, password, organization)
    assert db_session.query(Organization).count() == 0


def test_duplicate_email_has_no_side_effects(identity, db_session):
    identity.signup("owner@acme.test", "s3cret-pass", "Acme")

    with pytest.raises(ConflictError):
        identity.signup("owner@acme.test", "other-pass", "Another Org")

    assert db_session.query(Organization).count() == 1
    assert db_session.query(User).count() == 1


def test_login_binds_to_signup_organization(identity):
    signup_principal = identity.verify(identity.signup("owner@acme.test", "s3cret-pass", "Acme"))

    login_principal = identity.verify(identity.login("owner@acme.test", "s3cret-pass"))

    assert login_principal == signup_principal


def test_wrong_password_and_unknown_email_look_the_same(identity):
    identity.signup("owner@acme.test", "s3cret-pass", "Acme")

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        identity.login("owner@acme.test", "wrong-pass")
    with pytest.raises(InvalidCredentialsError) as unknown_email:
        identity.login("nobody@acme.test", "s3cret-pass")

    assert wrong_password.value.message == unknown_email.value.message == "Invalid credentials"
    assert wrong_password.value.status_code == unknown_email.value.status_code == 400


def test_login_requires_fields(identity):
    with pytest.raises(ValidationError):
        identity.login("owner@acme.test", None)


def test_invalid_credentials_is_an_authentication_error():
    assert issubclass(InvalidCredentialsError, AuthenticationError)
