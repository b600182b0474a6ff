from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import Role


@dataclass(frozen=True)
class UserAccount:
    """Domain entity: a login.

    Plain data object; password is stored as a werkzeug hash only.
    """

    user_id: str
    email: str
    password_hash: str
    role: Role
    created_at: datetime
