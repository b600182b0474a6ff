from datetime import date, datetime, timedelta

import pytest

from src.khata.khata.common.datetime_utils import (
    current_week,
    format_date,
    month_bounds,
    month_label,
    week_days,
    week_end,
    week_start,
)
from src.khata.khata.common.money import format_currency, to_money


def test_week_start_is_monday_and_idempotent():
    d = date(2025, 1, 1)
    for i in range(60):
        day = d + timedelta(days=i)
        start = week_start(day)
        assert start.isoweekday() == 1
        assert week_start(start) == start
        assert start <= day <= week_end(start)


def test_sunday_belongs_to_previous_monday():
    # 2025-10-19 is a Sunday
    assert week_start(date(2025, 10, 19)) == date(2025, 10, 13)
    assert week_start(date(2025, 10, 20)) == date(2025, 10, 20)


def test_week_start_accepts_datetime():
    assert week_start(datetime(2025, 10, 15, 18, 30)) == date(2025, 10, 13)
    assert current_week(datetime(2025, 10, 15, 9, 0)) == date(2025, 10, 13)


def test_week_days_cover_seven_days():
    days = week_days(date(2025, 10, 13))
    assert len(days) == 7
    assert days[0] == date(2025, 10, 13)
    assert days[-1] == date(2025, 10, 19)


def test_month_bounds_handles_leap_february():
    assert month_bounds("2024-02") == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds("2025-02") == (date(2025, 2, 1), date(2025, 2, 28))


def test_month_bounds_rejects_garbage():
    with pytest.raises(ValueError):
        month_bounds("2025/02")


def test_labels():
    assert month_label("2025-10") == "October 2025"
    assert format_date(date(2025, 10, 13)) == "Mon, 13 Oct 2025"


def test_currency_formatting_uses_indian_grouping():
    assert format_currency(to_money("150000")) == "₹1,50,000.00"
    assert format_currency(to_money("1234567.5")) == "₹12,34,567.50"
    assert format_currency(to_money("-100")) == "-₹100.00"
    assert format_currency(to_money("999")) == "₹999.00"
