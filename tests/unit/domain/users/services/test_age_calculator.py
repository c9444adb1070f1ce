"""Tests for age calculation."""

from datetime import date

import pytest

from user_api.domain.users.services.age_calculator import calculate_age


class TestCalculateAge:
    """Test suite for calculate_age."""

    def test_birthday_already_passed(self) -> None:
        assert calculate_age(date(1990, 5, 10), today=date(2024, 6, 1)) == 34

    def test_birthday_not_yet_reached(self) -> None:
        assert calculate_age(date(1990, 5, 10), today=date(2024, 5, 1)) == 33

    def test_on_birthday(self) -> None:
        assert calculate_age(date(1990, 5, 10), today=date(2023, 5, 10)) == 33

    def test_born_today(self) -> None:
        assert calculate_age(date(2024, 6, 1), today=date(2024, 6, 1)) == 0

    @pytest.mark.parametrize("dob", [date(2025, 1, 1), date(2024, 6, 2), date(2100, 12, 31)])
    def test_future_birth_date_is_zero(self, dob: date) -> None:
        assert calculate_age(dob, today=date(2024, 6, 1)) == 0

    def test_day_of_year_drift_in_common_year(self) -> None:
        """Born after Feb 29 in a leap year: the birthday lands a day late."""
        assert calculate_age(date(2000, 3, 1), today=date(2023, 3, 1)) == 22
        assert calculate_age(date(2000, 3, 1), today=date(2023, 3, 2)) == 23

    def test_day_of_year_drift_in_leap_year(self) -> None:
        """Born after Feb in a common year: the birthday lands a day early."""
        assert calculate_age(date(2001, 3, 1), today=date(2024, 2, 29)) == 23

    def test_defaults_to_current_date(self) -> None:
        today = date.today()
        assert calculate_age(date(today.year - 10, 1, 1)) == 10
