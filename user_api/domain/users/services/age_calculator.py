"""Age derivation from a date of birth."""

from datetime import date


def calculate_age(dob: date, today: date | None = None) -> int:
    """
    Compute age in whole years as of ``today`` (defaults to the current date).

    ``years = today.year - dob.year``, minus one when today's day-of-year is
    earlier than the birth day-of-year. Comparing day-of-year rather than
    (month, day) drifts by one day across leap years: someone born on
    1 March 2000 only gains a year on 2 March in common years, and someone
    born on 1 March 2001 already gains it on 29 February in leap years.
    That behaviour is kept as is.

    A birth date in the future yields 0.
    """
    if today is None:
        today = date.today()  # noqa: DTZ011

    years = today.year - dob.year
    if today.timetuple().tm_yday < dob.timetuple().tm_yday:
        years -= 1

    return max(years, 0)
