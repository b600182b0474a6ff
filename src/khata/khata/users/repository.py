from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import Role
from .model import UserAccount


class UserRepository(Protocol):
    def get_by_email(self, email: str) -> Optional[UserAccount]:
        raise NotImplementedError

    def create_user(self, *, email: str, password_hash: str, role: Role) -> str:
        raise NotImplementedError


class SettingsRepository(Protocol):
    """Key/value app configuration (e.g. the viewer sign-up access code)."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError
