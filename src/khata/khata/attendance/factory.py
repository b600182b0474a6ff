from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceAction
from ..core.exceptions import ValidationError
from .transitions.base import AttendanceTransition
from .transitions.extras import CustomTransition, HalfDayTransition
from .transitions.overtime import OvertimeTransition
from .transitions.presence import AbsentTransition, LateTransition, PresentTransition


@dataclass
class AttendanceTransitionFactory:
    """Factory Pattern: choose the transition for a requested action."""

    def for_action(self, action: AttendanceAction | str) -> AttendanceTransition:
        try:
            action = AttendanceAction(action)
        except ValueError:
            raise ValidationError(f"Unknown attendance action: {action}")

        return {
            AttendanceAction.PRESENT: PresentTransition,
            AttendanceAction.ABSENT: AbsentTransition,
            AttendanceAction.LATE: LateTransition,
            AttendanceAction.OVERTIME: OvertimeTransition,
            AttendanceAction.HALF_DAY: HalfDayTransition,
            AttendanceAction.CUSTOM: CustomTransition,
        }[action]()
