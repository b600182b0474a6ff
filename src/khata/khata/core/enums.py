from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for permission checks."""

    ADMIN = "admin"
    VIEWER = "viewer"


class DayStatus(str, Enum):
    """Closed set of states an (employee, date) attendance cell can be in.

    NOT_MARKED is never persisted; it stands for "no record yet".
    """

    NOT_MARKED = "NOT_MARKED"
    ABSENT = "ABSENT"
    PRESENT = "PRESENT"
    PRESENT_LATE = "PRESENT_LATE"
    OVERTIME = "OVERTIME"
    HALF_DAY = "HALF_DAY"
    CUSTOM = "CUSTOM"

    @property
    def is_present(self) -> bool:
        return self not in (DayStatus.NOT_MARKED, DayStatus.ABSENT)

    @property
    def custom_type(self) -> str | None:
        return {
            DayStatus.OVERTIME: "overtime",
            DayStatus.HALF_DAY: "half-day",
            DayStatus.CUSTOM: "custom",
        }.get(self)


class AttendanceAction(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    OVERTIME = "overtime"
    HALF_DAY = "half-day"
    CUSTOM = "custom"


class HalfDayPolicy(str, Enum):
    """How much base wage a half-day earns.

    FULL keeps the historical behaviour (full base wage plus any custom
    amount).
    """

    FULL = "full"
    HALF = "half"
    NONE = "none"


class EditWindow(str, Enum):
    """Which dates the attendance grid may change relative to the as-of date."""

    TODAY = "today"
    CURRENT_WEEK = "current-week"
    ANY = "any"


class BalanceStatus(str, Enum):
    FULLY_PAID = "FULLY_PAID"
    DUE = "DUE"
    OVERPAID = "OVERPAID"


class VehicleType(str, Enum):
    JCB = "JCB"
    TRUCK = "Truck"
    CRANE = "Crane"
    BULLDOZER = "Bulldozer"
    EXCAVATOR = "Excavator"
    LOADER = "Loader"
    OTHER = "Other"


class StorageBackend(str, Enum):
    MYSQL = "mysql"
    MEMORY = "memory"
