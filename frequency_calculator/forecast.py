"""Прогноз: личный год, личный месяц и кварталы"""
from collections import Counter
from typing import List

from .models import PersonalMonth, PersonalYear, QuarterForecast, QuarterlyForecast
from .numbers import digit_sum, reduce_number


def calculate_personal_year(birth_month: int, birth_day: int, target_year: int) -> PersonalYear:
    """Личный год: мастер-числа здесь не сохраняются"""
    month = reduce_number(birth_month, preserve_masters=False)
    day = reduce_number(birth_day, preserve_masters=False)
    year = reduce_number(digit_sum(target_year), preserve_masters=False)
    total = month + day + year
    final = reduce_number(total, preserve_masters=False)

    return PersonalYear(
        number=final,
        year=target_year,
        calculation=f"{birth_month}→{month} + {birth_day}→{day} + {target_year}→{year} = {total} → {final}",
    )


def calculate_personal_month(personal_year: int, calendar_month: int) -> PersonalMonth:
    total = personal_year + calendar_month
    final = reduce_number(total, preserve_masters=False)
    return PersonalMonth(
        number=final,
        month=calendar_month,
        calculation=f"PY{personal_year} + M{calendar_month} = {total} → {final}",
    )


def dominant_energy(energies: List[int]) -> int:
    """
    Самая частая энергия квартала.

    При равенстве частот побеждает меньшее число.
    """
    counts = Counter(energies)
    return min(counts, key=lambda energy: (-counts[energy], energy))


def calculate_quarterly_forecast(birth_month: int, birth_day: int, target_year: int) -> QuarterlyForecast:
    personal_year = calculate_personal_year(birth_month, birth_day, target_year).number

    quarters = []
    for quarter in range(1, 5):
        months = [(quarter - 1) * 3 + offset for offset in (1, 2, 3)]
        energies = [calculate_personal_month(personal_year, month).number for month in months]
        quarters.append(QuarterForecast(
            quarter=quarter,
            months=months,
            energies=energies,
            dominant_energy=dominant_energy(energies),
        ))

    return QuarterlyForecast(personal_year=personal_year, year=target_year, quarters=quarters)
