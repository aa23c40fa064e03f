"""Pruebas de la cuadrícula de 42 días y de la navegación entre meses."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from unwind.core.calendar_grid import (
    GRID_SIZE,
    WEEKDAY_HEADERS,
    DisplayedMonth,
    build_calendar_grid,
    days_in_month,
    first_weekday,
    grid_rows,
    week_row,
)
from unwind.core.errors import InvalidMonthError
from unwind.core.types import MonthDirection


def _true_month_length(year: int, month: int) -> int:
    first = date(year, month + 1, 1)
    following = date(year + (month == 11), (month + 1) % 12 + 1, 1)
    return (following - first).days


@pytest.mark.parametrize("year", [1999, 2000, 2024, 2025, 2028, 2100])
def test_grid_always_has_42_cells_and_true_month_length(year: int) -> None:
    for month in range(12):
        cells = build_calendar_grid(year, month, ())
        assert len(cells) == GRID_SIZE
        in_month = [cell for cell in cells if cell.belongs_to_displayed_month]
        assert len(in_month) == _true_month_length(year, month)
        assert [cell.day_number for cell in in_month] == list(range(1, len(in_month) + 1))


@pytest.mark.parametrize(
    "year, month, expected",
    [(2025, 1, 28), (2028, 1, 29), (2025, 0, 31), (2100, 1, 28), (2000, 1, 29), (2025, 8, 30)],
)
def test_days_in_month_handles_leap_years(year: int, month: int, expected: int) -> None:
    assert days_in_month(year, month) == expected


def test_leading_cells_match_weekday_of_first_day() -> None:
    for year in (2023, 2024, 2025, 2026):
        for month in range(12):
            expected = date(year, month + 1, 1).isoweekday() % 7
            cells = build_calendar_grid(year, month, ())
            leading = 0
            for cell in cells:
                if cell.belongs_to_displayed_month:
                    break
                leading += 1
            assert leading == expected == first_weekday(year, month)


def test_september_2025_starts_on_monday_with_august_31() -> None:
    cells = build_calendar_grid(2025, 8, [18, 19, 20, 21, 26, 28])

    assert cells[0].day_number == 31
    assert cells[0].belongs_to_displayed_month is False
    assert cells[1].day_number == 1 and cells[1].belongs_to_displayed_month
    trailing = [cell.day_number for cell in cells[31:]]
    assert trailing == list(range(1, 12))
    active = sorted(cell.day_number for cell in cells if cell.is_active_day)
    assert active == [18, 19, 20, 21, 26, 28]


def test_february_2025_leading_days_come_from_january() -> None:
    cells = build_calendar_grid(2025, 1, ())

    assert [cell.day_number for cell in cells[:6]] == [26, 27, 28, 29, 30, 31]
    assert [cell.day_number for cell in cells[34:]] == list(range(1, 9))


def test_january_leading_days_roll_back_to_previous_december() -> None:
    cells = build_calendar_grid(2025, 0, ())

    assert [cell.day_number for cell in cells[:3]] == [29, 30, 31]


def test_month_starting_on_sunday_has_no_leading_cells() -> None:
    cells = build_calendar_grid(2026, 1, ())

    assert cells[0].day_number == 1
    assert cells[0].belongs_to_displayed_month is True
    assert [cell.day_number for cell in cells[28:]] == list(range(1, 15))


def test_adjacent_month_cells_are_never_active() -> None:
    cells = build_calendar_grid(2025, 8, range(1, 32))

    assert all(cell.is_active_day for cell in cells if cell.belongs_to_displayed_month)
    assert not any(cell.is_active_day for cell in cells if not cell.belongs_to_displayed_month)


def test_active_day_beyond_month_length_is_ignored() -> None:
    cells = build_calendar_grid(2025, 1, [29, 30, 31])

    assert not any(cell.is_active_day for cell in cells)


def test_cells_are_consecutive_dates() -> None:
    cells = build_calendar_grid(2024, 1, ())
    start = date(2024, 2, 1) - timedelta(days=first_weekday(2024, 1))
    expected = [(start + timedelta(days=offset)).day for offset in range(GRID_SIZE)]

    assert [cell.day_number for cell in cells] == expected


def test_navigate_prev_from_january_wraps_year() -> None:
    assert DisplayedMonth(2025, 0).shift(MonthDirection.PREV) == DisplayedMonth(2024, 11)


def test_navigate_next_from_december_wraps_year() -> None:
    assert DisplayedMonth(2025, 11).shift("next") == DisplayedMonth(2026, 0)


def test_navigate_within_year_keeps_year() -> None:
    month = DisplayedMonth(2025, 8)

    assert month.shift("prev") == DisplayedMonth(2025, 7)
    assert month.shift("next") == DisplayedMonth(2025, 9)


def test_month_label_uses_english_month_names() -> None:
    assert DisplayedMonth(2025, 8).label == "September 2025"


@pytest.mark.parametrize("month", [-1, 12])
def test_invalid_month_is_rejected(month: int) -> None:
    with pytest.raises(InvalidMonthError):
        DisplayedMonth(2025, month)
    with pytest.raises(InvalidMonthError):
        build_calendar_grid(2025, month, ())


def test_rows_and_headers_are_sunday_first() -> None:
    rows = grid_rows(build_calendar_grid(2025, 8, ()))

    assert WEEKDAY_HEADERS == ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
    assert len(rows) == 6
    assert all(len(row) == 7 for row in rows)


def test_week_row_contains_requested_day() -> None:
    cells = build_calendar_grid(2025, 8, ())

    row = week_row(cells, 18)

    assert [cell.day_number for cell in row] == [14, 15, 16, 17, 18, 19, 20]


def test_week_row_falls_back_to_first_week_for_missing_day() -> None:
    cells = build_calendar_grid(2025, 1, ())

    row = week_row(cells, 31)

    assert [cell.day_number for cell in row] == [26, 27, 28, 29, 30, 31, 1]
