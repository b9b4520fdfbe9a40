"""Calendar helpers for building a projection horizon.

Months are identified by their first day. Month addition is strict: the
day-of-month is kept, and a day that does not exist in the target month is
an error rather than being clamped to the month end.
"""

from datetime import date

from .exceptions import CalendarError


def _shift_month(year: int, month: int, months: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + months
    return index // 12, index % 12 + 1


def add_months(day: date, months: int) -> date:
    """
    Add whole calendar months to a date, keeping the day-of-month.

    Args:
        day: Starting date.
        months: Number of months to add (non-negative).

    Returns:
        The same day-of-month ``months`` months later.

    Raises:
        CalendarError: If ``months`` is negative or the resulting day does
            not exist (e.g. January 31 plus one month).
    """
    if months < 0:
        raise CalendarError(
            f"Cannot add a negative number of months: {months}",
            start=day,
            months=months,
        )
    year, month = _shift_month(day.year, day.month, months)
    try:
        return day.replace(year=year, month=month)
    except ValueError:
        raise CalendarError(
            f"Invalid date: {day.isoformat()} plus {months} months "
            f"has no day {day.day} in {year:04d}-{month:02d}",
            start=day,
            months=months,
        ) from None


def first_day_of_months_between(start_date: date, end_date: date) -> list[date]:
    """
    List the first day of every month from ``start_date``'s month through
    ``end_date``'s month, inclusive.

    The month of ``start_date`` is always the first entry, even when
    ``start_date`` is mid-month. Returns an empty list when ``start_date``
    is after ``end_date``.
    """
    if start_date > end_date:
        return []

    n_months = (end_date.year - start_date.year) * 12 + (end_date.month - start_date.month)
    dates = []
    for offset in range(n_months + 1):
        year, month = _shift_month(start_date.year, start_date.month, offset)
        dates.append(date(year, month, 1))
    return dates


def horizon(start_date: date, months: int) -> tuple[date, date]:
    """Return ``(start_date, end_date)`` spanning ``months`` calendar months."""
    return start_date, add_months(start_date, months)
