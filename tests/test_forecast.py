"""Тесты прогноза: личный год, месяц, кварталы"""
from frequency_calculator.forecast import (
    calculate_personal_month, calculate_personal_year, calculate_quarterly_forecast, dominant_energy,
)


class TestPersonalYear:

    def test_personal_year(self):
        """3 + 6 + (2+0+2+6 → 1) = 10 → 1"""
        result = calculate_personal_year(3, 15, 2026)
        assert result.number == 1
        assert result.year == 2026
        assert result.calculation == "3→3 + 15→6 + 2026→1 = 10 → 1"

    def test_no_master_preservation(self):
        """11/11: 2 + 2 + (2025 → 9) = 13 → 4; мастер 11 не сохраняется"""
        assert calculate_personal_year(11, 11, 2025).number == 4
        # 9 + 1 + (2008 → 1) = 11 → 2
        assert calculate_personal_year(9, 1, 2008).number == 2

    def test_always_single_digit(self):
        for month in range(1, 13):
            for day in range(1, 32):
                assert 1 <= calculate_personal_year(month, day, 2026).number <= 9


class TestPersonalMonth:

    def test_personal_month(self):
        result = calculate_personal_month(1, 10)
        assert result.number == 2
        assert result.calculation == "PY1 + M10 = 11 → 2"

    def test_simple(self):
        assert calculate_personal_month(5, 3).number == 8


class TestQuarterlyForecast:

    def test_quarters_layout(self):
        forecast = calculate_quarterly_forecast(3, 15, 2026)
        assert forecast.personal_year == 1
        assert [q.quarter for q in forecast.quarters] == [1, 2, 3, 4]
        assert [q.months for q in forecast.quarters] == [(1, 2, 3), (4, 5, 6), (7, 8, 9), (10, 11, 12)]

    def test_energies(self):
        forecast = calculate_quarterly_forecast(3, 15, 2026)
        assert [q.energies for q in forecast.quarters] == [(2, 3, 4), (5, 6, 7), (8, 9, 1), (2, 3, 4)]

    def test_tie_breaks_to_lowest_energy(self):
        """Q3 = [8, 9, 1]: все по одному разу, побеждает 1, а не первое 8"""
        forecast = calculate_quarterly_forecast(3, 15, 2026)
        assert [q.dominant_energy for q in forecast.quarters] == [2, 5, 1, 2]


class TestDominantEnergy:

    def test_plurality_wins(self):
        assert dominant_energy([5, 5, 3]) == 5
        assert dominant_energy([7, 3, 3]) == 3

    def test_tie_lowest_wins(self):
        assert dominant_energy([9, 1, 2]) == 1
        assert dominant_energy([6, 4, 6, 4]) == 4
