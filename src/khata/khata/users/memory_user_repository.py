from __future__ import annotations

from typing import Optional

from ..core.enums import Role
from ..store.memory import InMemoryCollection
from .model import UserAccount
from .repository import SettingsRepository, UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self, collection: InMemoryCollection[UserAccount] | None = None):
        self._items = collection or InMemoryCollection("users", id_field="user_id")

    def get_by_email(self, email: str) -> Optional[UserAccount]:
        return self._items.find(lambda u: u.email == email.lower())

    def create_user(self, *, email: str, password_hash: str, role: Role) -> str:
        return self._items.insert(
            UserAccount(
                user_id=self._items.next_id(),
                email=email.lower(),
                password_hash=password_hash,
                role=role,
                created_at=self._items.now(),
            )
        )


class InMemorySettingsRepository(SettingsRepository):
    def __init__(self, initial: dict[str, str] | None = None):
        self._values = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
