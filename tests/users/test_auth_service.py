from __future__ import annotations

from datetime import datetime, timedelta

import pytest
from werkzeug.security import generate_password_hash

from src.khata.khata.core.constants import ADMIN_ACCESS_CODE_KEY
from src.khata.khata.core.enums import Role
from src.khata.khata.core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from src.khata.khata.users.memory_user_repository import InMemorySettingsRepository, InMemoryUserRepository
from src.khata.khata.users.service import AuthService

OWNER = "owner@example.com"


def _service(*, code=None, max_attempts=3):
    users = InMemoryUserRepository()
    initial = {ADMIN_ACCESS_CODE_KEY: code} if code is not None else None
    settings = InMemorySettingsRepository(initial)
    return AuthService(users, settings, admin_email=OWNER, max_attempts=max_attempts), users, settings


def test_first_sign_in_with_owner_email_bootstraps_admin():
    auth, users, _ = _service()

    s_user = auth.sign_in("Owner@Example.com", "secret1")
    assert s_user.role == Role.ADMIN
    assert users.get_by_email(OWNER).role == Role.ADMIN

    # second sign-in goes through the stored hash
    assert auth.sign_in(OWNER, "secret1").user_id == s_user.user_id
    with pytest.raises(AuthenticationError, match="Invalid email or password"):
        auth.sign_in(OWNER, "wrong-pass")


def test_bootstrap_requires_minimum_password_length():
    auth, users, _ = _service()
    with pytest.raises(ValidationError):
        auth.sign_in(OWNER, "abc")
    assert users.get_by_email(OWNER) is None


def test_unknown_email_is_rejected():
    auth, _, _ = _service()
    with pytest.raises(AuthenticationError, match="User not found"):
        auth.sign_in("stranger@example.com", "whatever")


class _Clock:
    def __init__(self, start):
        self.now = start

    def __call__(self):
        return self.now


def test_lockout_after_max_failures_and_reset_on_success():
    auth, users, _ = _service(max_attempts=3)
    users.create_user(email="viewer@example.com", password_hash=generate_password_hash("goodpass"), role=Role.VIEWER)

    with pytest.raises(AuthenticationError):
        auth.sign_in("viewer@example.com", "bad1")
    with pytest.raises(AuthenticationError):
        auth.sign_in("viewer@example.com", "bad2")
    assert auth.sign_in("viewer@example.com", "goodpass").role == Role.VIEWER

    # counter was reset, so two more failures still leave the account open
    for _ in range(2):
        with pytest.raises(AuthenticationError, match="Invalid email or password"):
            auth.sign_in("viewer@example.com", "bad")
    assert auth.sign_in("viewer@example.com", "goodpass").role == Role.VIEWER


def test_lock_lifts_after_lockout_window():
    clock = _Clock(datetime(2025, 10, 15, 10, 0))
    users = InMemoryUserRepository()
    auth = AuthService(
        users,
        InMemorySettingsRepository(),
        admin_email=OWNER,
        max_attempts=3,
        lockout_minutes=15,
        clock=clock,
    )
    auth.sign_in(OWNER, "secret1")

    for _ in range(3):
        with pytest.raises(AuthenticationError, match="Invalid email or password"):
            auth.sign_in(OWNER, "wrong-pass")
    with pytest.raises(AuthenticationError, match="Too many failed attempts"):
        auth.sign_in(OWNER, "secret1")

    clock.now += timedelta(minutes=14)
    with pytest.raises(AuthenticationError, match="Too many failed attempts"):
        auth.sign_in(OWNER, "secret1")

    clock.now += timedelta(minutes=1)
    assert auth.sign_in(OWNER, "secret1").role == Role.ADMIN


def test_unknown_emails_are_not_tracked():
    auth, _, _ = _service(max_attempts=3)
    for i in range(50):
        with pytest.raises(AuthenticationError, match="User not found"):
            auth.sign_in(f"stranger{i}@example.com", "whatever")
    assert auth._failures == {}

    # repeated misses on one unknown email never turn into a lockout message
    for _ in range(5):
        with pytest.raises(AuthenticationError, match="User not found"):
            auth.sign_in("stranger@example.com", "whatever")


def test_corrupt_hash_counts_as_wrong_password():
    auth, users, _ = _service()
    users.create_user(email="legacy@example.com", password_hash="CHANGE_ME", role=Role.VIEWER)
    with pytest.raises(AuthenticationError, match="Invalid email or password"):
        auth.sign_in("legacy@example.com", "anything")


def test_admin_access_code_defaults_to_empty_and_blocks_sign_up():
    auth, _, settings = _service()
    assert auth.admin_access_code() == ""
    assert settings.get(ADMIN_ACCESS_CODE_KEY) == ""

    with pytest.raises(ValidationError, match="disabled"):
        auth.create_viewer(email="a@b.com", password="secret1", confirm_password="secret1", access_code="")


def test_only_admin_sets_access_code():
    auth, _, settings = _service()
    with pytest.raises(AuthorizationError):
        auth.set_admin_access_code(current_role=Role.VIEWER, code="1234")
    auth.set_admin_access_code(current_role=Role.ADMIN, code=" 1234 ")
    assert settings.get(ADMIN_ACCESS_CODE_KEY) == "1234"


def test_create_viewer():
    auth, users, _ = _service(code="site-42")

    user_id = auth.create_viewer(
        email="Munshi@Example.com",
        password="secret1",
        confirm_password="secret1",
        access_code="site-42",
    )
    account = users.get_by_email("munshi@example.com")
    assert account.user_id == user_id
    assert account.role == Role.VIEWER
    assert auth.sign_in("munshi@example.com", "secret1").role == Role.VIEWER


@pytest.mark.parametrize(
    "email, password, confirm, code, message",
    [
        ("a@b.com", "secret1", "secret1", "nope", "Invalid admin access code"),
        ("not-an-email", "secret1", "secret1", "site-42", "valid email"),
        ("a@b.com", "abc", "abc", "site-42", "at least 6"),
        ("a@b.com", "secret1", "secret2", "site-42", "do not match"),
    ],
)
def test_create_viewer_validation(email, password, confirm, code, message):
    auth, _, _ = _service(code="site-42")
    with pytest.raises(ValidationError, match=message):
        auth.create_viewer(email=email, password=password, confirm_password=confirm, access_code=code)


def test_create_viewer_rejects_duplicate_email():
    auth, _, _ = _service(code="site-42")
    auth.create_viewer(email="a@b.com", password="secret1", confirm_password="secret1", access_code="site-42")
    with pytest.raises(ValidationError, match="already exists"):
        auth.create_viewer(email="a@b.com", password="secret1", confirm_password="secret1", access_code="site-42")
