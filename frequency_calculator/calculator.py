"""Калькулятор частотного профиля основателя"""
import logging
from datetime import date
from typing import Dict, List, Optional

from .dates import parse_date
from .exceptions import MissingRequiredField
from .forecast import calculate_personal_month, calculate_personal_year, calculate_quarterly_forecast
from .models import (
    BirthdayNumber, DateOfBirth, ExpressionNumber, ExtendedProfile, LifePath,
    LifePathComponents, NamePart, PersonalityNumber, Profile, ProfileInput, ProfileSummary, SoulUrge,
)
from .numbers import (
    KARMIC_DEBT_NUMBERS, VOWELS, digit_sum, is_master, letter_value, reduce_number,
)
from .zodiac import calculate_chinese_zodiac, calculate_western_zodiac

logger = logging.getLogger(__name__)


def require_fields(name: Optional[str], dob: Optional[str]) -> None:
    """Проверяет обязательные поля до начала расчета"""
    if not name or not name.strip():
        raise MissingRequiredField('name')
    if not dob or not dob.strip():
        raise MissingRequiredField('dob')


class FrequencyCalculator:
    """Класс для расчета частотного профиля по имени и дате рождения"""

    def calculate_life_path(self, month: int, day: int, year: int) -> LifePath:
        """Путь жизни (сумма редуцированных месяца, дня и года)"""
        m = reduce_number(month, preserve_masters=False)
        d = reduce_number(day, preserve_masters=False)
        y = reduce_number(digit_sum(year), preserve_masters=False)

        total = m + d + y
        number = reduce_number(total)

        return LifePath(
            number=number,
            reduced=reduce_number(total, preserve_masters=False),
            is_master=is_master(number),
            calculation=f"{month}→{m} | {day}→{d} | {year}→{y} | {m}+{d}+{y} = {total} → {number}",
            components=LifePathComponents(month=m, day=d, year=y, sum=total),
        )

    def calculate_birthday_number(self, day: int) -> BirthdayNumber:
        """Число дня рождения с проверкой кармического долга"""
        reduced = reduce_number(day)
        # Кармический долг определяется только по нередуцированному дню
        karmic_debt = f"{day}/{reduced}" if day in KARMIC_DEBT_NUMBERS else None
        calculation = f"Day {day} → {reduced}"
        if karmic_debt:
            calculation += f" (Karmic Debt {karmic_debt})"

        return BirthdayNumber(
            compound=day,
            reduced=reduced,
            is_master=is_master(day) or is_master(reduced),
            karmic_debt=karmic_debt,
            display=f"{day}/{reduced}" if day > 9 else str(day),
            calculation=calculation,
        )

    def calculate_expression_number(self, full_name: str) -> ExpressionNumber:
        """Число выражения: каждая часть имени редуцируется отдельно"""
        parts: List[NamePart] = []

        for part in full_name.upper().split():
            letter_values: Dict[str, int] = {}
            raw_sum = 0
            for char in part:
                value = letter_value(char)
                if not value:
                    continue
                letter_values[char] = value
                raw_sum += value

            reduced = reduce_number(raw_sum)
            parts.append(NamePart(
                name_part=part,
                letter_values=tuple(letter_values.items()),
                raw_sum=raw_sum,
                reduced=reduced,
                is_master=is_master(raw_sum) or is_master(reduced),
            ))

        total = sum(part.reduced for part in parts)
        number = reduce_number(total)
        calculation = ' + '.join(f"{part.name_part}({part.raw_sum}→{part.reduced})" for part in parts)

        return ExpressionNumber(
            number=number,
            reduced=reduce_number(total, preserve_masters=False),
            is_master=is_master(number),
            parts=tuple(parts),
            calculation=f"{calculation} = {total} → {number}",
            total_before_reduction=total,
        )

    def calculate_soul_urge(self, full_name: str) -> SoulUrge:
        """Число души (сумма гласных)"""
        vowels_used = tuple(char for char in full_name.upper() if char in VOWELS)
        raw = sum(letter_value(char) for char in vowels_used)
        number = reduce_number(raw)

        return SoulUrge(
            number=number,
            reduced=reduce_number(raw, preserve_masters=False),
            is_master=is_master(raw) or is_master(number),
            vowels_used=vowels_used,
        )

    def calculate_personality_number(self, full_name: str) -> PersonalityNumber:
        """Число личности (сумма согласных)"""
        raw = sum(
            letter_value(char)
            for char in full_name.upper()
            if char not in VOWELS
        )
        number = reduce_number(raw)

        return PersonalityNumber(
            number=number,
            reduced=reduce_number(raw, preserve_masters=False),
            is_master=is_master(raw) or is_master(number),
        )

    def _build_channels(self, full_name: str, dob: str) -> Dict[str, object]:
        """Считает все каналы профиля за один проход"""
        require_fields(full_name, dob)
        parsed: DateOfBirth = parse_date(dob)
        month, day, year = parsed.month, parsed.day, parsed.year

        life_path = self.calculate_life_path(month, day, year)
        birthday_number = self.calculate_birthday_number(day)
        expression = self.calculate_expression_number(full_name)
        soul_urge = self.calculate_soul_urge(full_name)
        personality = self.calculate_personality_number(full_name)
        western_zodiac = calculate_western_zodiac(month, day)
        chinese_zodiac = calculate_chinese_zodiac(year, month, day)

        summary = ProfileSummary(
            life_path=life_path.number,
            birthday=birthday_number.display,
            expression=expression.number,
            soul_urge=soul_urge.number,
            personality=personality.number,
            western=western_zodiac.display,
            chinese=chinese_zodiac.display,
        )

        logger.debug(f"Профиль рассчитан: {summary}")

        return {
            'input': ProfileInput(name=full_name, dob=dob, parsed=parsed),
            'life_path': life_path,
            'birthday_number': birthday_number,
            'expression': expression,
            'soul_urge': soul_urge,
            'personality': personality,
            'western_zodiac': western_zodiac,
            'chinese_zodiac': chinese_zodiac,
            'summary': summary,
        }

    def calculate_profile(self, full_name: str, dob: str) -> Profile:
        """Основной метод расчета профиля"""
        return Profile(**self._build_channels(full_name, dob))

    def calculate_extended_profile(self, full_name: str, dob: str,
                                   target_year: Optional[int] = None,
                                   target_month: Optional[int] = None) -> ExtendedProfile:
        """Профиль с прогнозом на целевой год (по умолчанию текущий)"""
        channels = self._build_channels(full_name, dob)
        parsed: DateOfBirth = channels['input'].parsed

        today = date.today()
        year = target_year if target_year is not None else today.year
        month = target_month if target_month is not None else today.month

        personal_year = calculate_personal_year(parsed.month, parsed.day, year)

        return ExtendedProfile(
            **channels,
            personal_year=personal_year,
            personal_month=calculate_personal_month(personal_year.number, month),
            quarterly_forecast=calculate_quarterly_forecast(parsed.month, parsed.day, year),
        )


calculator = FrequencyCalculator()


def calculate_profile(full_name: str, dob: str) -> Profile:
    return calculator.calculate_profile(full_name, dob)


def calculate_extended_profile(full_name: str, dob: str,
                               target_year: Optional[int] = None,
                               target_month: Optional[int] = None) -> ExtendedProfile:
    return calculator.calculate_extended_profile(full_name, dob, target_year, target_month)
