from __future__ import annotations

import hmac
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common import datetime_utils
from ..common.validators import require_email, require_min_length, require_non_empty
from ..core.constants import (
    ADMIN_ACCESS_CODE_KEY,
    DEFAULT_LOCKOUT_MINUTES,
    DEFAULT_MAX_LOGIN_ATTEMPTS,
    MIN_PASSWORD_LENGTH,
)
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from .repository import SettingsRepository, UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: str
    email: str
    role: Role


@dataclass(frozen=True)
class _FailureWindow:
    count: int
    first_failure_at: datetime


class AuthService:
    """Use case: sign in, bootstrap the owner account, and self-serve viewer accounts.

    Failed sign-ins are counted per known account. Once ``max_attempts`` failures
    land within ``lockout_minutes`` of the first one, the account is locked until
    that window runs out.
    """

    def __init__(
        self,
        users: UserRepository,
        settings: SettingsRepository,
        *,
        admin_email: Optional[str] = None,
        max_attempts: int = DEFAULT_MAX_LOGIN_ATTEMPTS,
        lockout_minutes: int = DEFAULT_LOCKOUT_MINUTES,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._users = users
        self._settings = settings
        self._admin_email = (admin_email or "").strip().lower() or None
        self._max_attempts = int(max_attempts)
        self._lockout = timedelta(minutes=int(lockout_minutes))
        self._clock = clock
        self._failures: dict[str, _FailureWindow] = {}
        self._lock = threading.Lock()

    def _now(self) -> datetime:
        return self._clock() if self._clock else datetime_utils.now_local()

    def _active_failures(self, email: str, now: datetime) -> Optional[_FailureWindow]:
        with self._lock:
            expired = [k for k, w in self._failures.items() if now - w.first_failure_at >= self._lockout]
            for key in expired:
                del self._failures[key]
            return self._failures.get(email)

    def _fail(self, email: str, now: datetime) -> AuthenticationError:
        with self._lock:
            window = self._failures.get(email)
            if window is None:
                window = _FailureWindow(count=1, first_failure_at=now)
            else:
                window = _FailureWindow(count=window.count + 1, first_failure_at=window.first_failure_at)
            self._failures[email] = window
        logger.warning("Sign-in failed for %s (%d)", email, window.count)
        return AuthenticationError("Invalid email or password")

    def sign_in(self, email: str, password: str) -> SessionUser:
        email = (email or "").strip().lower()
        if not email or not password:
            raise AuthenticationError("Invalid email or password")

        now = self._now()
        window = self._active_failures(email, now)
        if window is not None and window.count >= self._max_attempts:
            raise AuthenticationError("Too many failed attempts. Please try again later.")

        user = self._users.get_by_email(email)
        if not user:
            if self._admin_email and email == self._admin_email:
                return self._bootstrap_admin(email, password)
            # unknown emails are not tracked
            logger.warning("Sign-in for unknown account %s", email)
            raise AuthenticationError("User not found. Please contact administrator.")

        try:
            ok = check_password_hash(user.password_hash, password)
        except (ValueError, TypeError):
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise self._fail(email, now)

        with self._lock:
            self._failures.pop(email, None)
        return SessionUser(user_id=user.user_id, email=user.email, role=user.role)

    def _bootstrap_admin(self, email: str, password: str) -> SessionUser:
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        user_id = self._users.create_user(
            email=email,
            password_hash=generate_password_hash(password),
            role=Role.ADMIN,
        )
        logger.info("Bootstrapped admin account %s", email)
        return SessionUser(user_id=user_id, email=email, role=Role.ADMIN)

    def admin_access_code(self) -> str:
        code = self._settings.get(ADMIN_ACCESS_CODE_KEY)
        if code is None:
            self._settings.set(ADMIN_ACCESS_CODE_KEY, "")
            return ""
        return code

    def set_admin_access_code(self, *, current_role: Role, code: str) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")
        code = require_non_empty(code, "Access code")
        self._settings.set(ADMIN_ACCESS_CODE_KEY, code)
        logger.info("Admin access code updated")

    def create_viewer(self, *, email: str, password: str, confirm_password: str, access_code: str) -> str:
        expected = self.admin_access_code()
        if not expected:
            raise ValidationError("Viewer sign-up is disabled until an access code is configured")
        if not hmac.compare_digest((access_code or "").encode(), expected.encode()):
            raise ValidationError("Invalid admin access code")

        email = require_email(email)
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        if password != confirm_password:
            raise ValidationError("Passwords do not match")
        if self._users.get_by_email(email):
            raise ValidationError("A viewer account with this email already exists")

        user_id = self._users.create_user(
            email=email,
            password_hash=generate_password_hash(password),
            role=Role.VIEWER,
        )
        logger.info("Created viewer account %s", email)
        return user_id
