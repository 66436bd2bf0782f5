"""Tests for calendar month grids."""

from datetime import date

from fitness_tracker.services.calendar import month_matrix, month_view, year_view


def test_month_matrix_starts_on_sunday() -> None:
    weeks = month_matrix(2025, 7)

    # July 2025 starts on a Tuesday.
    assert weeks[0][:3] == [None, None, date(2025, 7, 1)]
    assert all(len(week) == 7 for week in weeks)
    assert weeks[-1][4] == date(2025, 7, 31)
    assert weeks[-1][5] is None


def test_month_view_flags_days_with_data() -> None:
    view = month_view(2025, 7, {"2025-07-01", "2025-08-01"})

    cells = [cell for week in view.weeks for cell in week if cell is not None]
    flagged = [cell.date for cell in cells if cell.has_data]
    assert view.title == "July 2025"
    assert len(cells) == 31
    assert flagged == ["2025-07-01"]


def test_year_view_has_twelve_months() -> None:
    months = year_view(2024, set())

    assert [view.month for view in months] == list(range(1, 13))
    feb = [cell for week in months[1].weeks for cell in week if cell is not None]
    assert len(feb) == 29
