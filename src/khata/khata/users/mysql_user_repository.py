from __future__ import annotations

from typing import Optional

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import UserAccount
from .repository import SettingsRepository, UserRepository


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[UserAccount]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, email, password_hash, role, created_at
                FROM users
                WHERE email=%s
                """,
                (email.lower(),),
            )
            row = fetchone(cur)
            if not row:
                return None
            return UserAccount(
                user_id=str(row["user_id"]),
                email=row["email"],
                password_hash=row["password_hash"],
                role=Role(row["role"]),
                created_at=row["created_at"],
            )

    def create_user(self, *, email: str, password_hash: str, role: Role) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO users(email, password_hash, role) VALUES(%s,%s,%s)",
                (email.lower(), password_hash, role.value),
            )
            return str(cur.lastrowid)


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT setting_value FROM app_settings WHERE setting_key=%s", (key,))
            row = fetchone(cur)
            return row["setting_value"] if row else None

    def set(self, key: str, value: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO app_settings(setting_key, setting_value) VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE setting_value=VALUES(setting_value)
                """,
                (key, value),
            )
