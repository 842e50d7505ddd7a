"""Тесты каналов профиля и сборки профиля"""
from itertools import permutations

import pytest
from pydantic import ValidationError

from frequency_calculator import (
    ExtendedProfile, MissingRequiredField, Profile,
    calculate_extended_profile, calculate_profile,
)
from frequency_calculator.numbers import reduce_number


class TestLifePath:

    def test_anthony_baker(self, anthony):
        """3 + 6 + 5 = 14 → 5"""
        life_path = anthony.life_path
        assert life_path.number == 5
        assert life_path.reduced == 5
        assert life_path.is_master is False
        assert life_path.components.month == 3
        assert life_path.components.day == 6
        assert life_path.components.year == 5
        assert life_path.components.sum == 14

    def test_master_total_reported_unreduced(self, ann):
        """11/29/1987: 2 + 2 + 7 = 11"""
        life_path = ann.life_path
        assert life_path.number == 11
        assert life_path.reduced == 2
        assert life_path.is_master is True

    def test_master_22(self, calculator):
        """9/9/1993: 9 + 9 + 4 = 22"""
        life_path = calculator.calculate_life_path(9, 9, 1993)
        assert life_path.number == 22
        assert life_path.reduced == 4
        assert life_path.is_master is True

    def test_components_not_master_preserving(self, calculator):
        """Месяц 11 и день 22 редуцируются полностью"""
        life_path = calculator.calculate_life_path(11, 22, 2000)
        assert life_path.components.month == 2
        assert life_path.components.day == 4
        assert life_path.components.year == 2
        assert life_path.number == 8

    def test_independent_of_component_order(self, calculator):
        for month, day, year in [(3, 15, 1985), (11, 29, 1987), (7, 4, 1776), (12, 31, 1999)]:
            life_path = calculator.calculate_life_path(month, day, year)
            c = life_path.components
            for ordered in permutations((c.month, c.day, c.year)):
                total = 0
                for value in ordered:
                    total += value
                assert reduce_number(total) == life_path.number


class TestBirthdayNumber:

    @pytest.mark.parametrize('day', range(1, 32))
    def test_karmic_debt(self, calculator, day):
        result = calculator.calculate_birthday_number(day)
        if day in (13, 14, 16, 19):
            assert result.karmic_debt == f"{day}/{reduce_number(day, True)}"
        else:
            assert result.karmic_debt is None

    def test_karmic_debt_values(self, calculator):
        assert calculator.calculate_birthday_number(16).karmic_debt == "16/7"
        assert calculator.calculate_birthday_number(19).karmic_debt == "19/1"

    def test_day_22_is_master(self, calculator):
        result = calculator.calculate_birthday_number(22)
        assert result.compound == 22
        assert result.reduced == 22
        assert result.is_master is True
        assert result.karmic_debt is None

    def test_day_29_reduces_to_master(self, calculator):
        result = calculator.calculate_birthday_number(29)
        assert result.reduced == 11
        assert result.is_master is True

    def test_display(self, calculator):
        assert calculator.calculate_birthday_number(15).display == "15/6"
        assert calculator.calculate_birthday_number(7).display == "7"
        assert "Karmic Debt 13/4" in calculator.calculate_birthday_number(13).calculation


class TestExpressionNumber:

    def test_ann_lee(self, calculator):
        """ANN = 11 (мастер), LEE = 13 → 4, итого 15 → 6"""
        result = calculator.calculate_expression_number("Ann Lee")
        assert result.number == 6
        assert result.reduced == 6
        assert result.total_before_reduction == 15
        ann_part, lee_part = result.parts
        assert ann_part.name_part == "ANN"
        assert ann_part.raw_sum == 11
        assert ann_part.reduced == 11
        assert ann_part.is_master is True
        assert lee_part.raw_sum == 13
        assert lee_part.reduced == 4
        assert result.is_master is False

    def test_anthony_baker(self, anthony):
        """ANTHONY = 34 → 7, BAKER = 19 → 1, итого 8"""
        assert [p.raw_sum for p in anthony.expression.parts] == [34, 19]
        assert anthony.expression.number == 8

    def test_letter_values_recorded(self, calculator):
        result = calculator.calculate_expression_number("Lee")
        assert result.parts[0].letter_values == (('L', 3), ('E', 5))

    def test_non_letters_ignored(self, calculator):
        plain = calculator.calculate_expression_number("Mary Ann")
        punctuated = calculator.calculate_expression_number("Mary-Ann  O'")
        assert calculator.calculate_expression_number("mary ann").number == plain.number
        assert punctuated.parts[0].raw_sum == plain.parts[0].raw_sum + plain.parts[1].raw_sum

    def test_master_total(self, calculator):
        """AAAAAAAAAAA: одиннадцать A = 11"""
        result = calculator.calculate_expression_number("A" * 11)
        assert result.number == 11
        assert result.reduced == 2
        assert result.is_master is True


class TestSoulUrgeAndPersonality:

    def test_anthony_soul_urge(self, anthony):
        """A, O, A, E = 13 → 4"""
        assert anthony.soul_urge.vowels_used == ('A', 'O', 'A', 'E')
        assert anthony.soul_urge.number == 4

    def test_anthony_personality(self, anthony):
        """Согласные: 27 + 13 = 40 → 4"""
        assert anthony.personality.number == 4
        assert anthony.personality.is_master is False

    def test_master_raw_sum_preserved(self, calculator):
        # A + I + A = 11
        result = calculator.calculate_soul_urge("Aia")
        assert result.number == 11
        assert result.reduced == 2
        assert result.is_master is True


class TestProfile:

    def test_summary(self, anthony):
        assert anthony.summary.model_dump() == {
            'life_path': 5,
            'birthday': "15/6",
            'expression': 8,
            'soul_urge': 4,
            'personality': 4,
            'western': "Pisces",
            'chinese': "Wood Ox (Yin)",
        }

    def test_input_recorded(self, anthony):
        assert anthony.input.name == "Anthony Baker"
        assert anthony.input.dob == "3/15/1985"
        assert anthony.input.parsed.year == 1985

    def test_profile_is_immutable(self, anthony):
        with pytest.raises(ValidationError):
            anthony.summary = {}
        with pytest.raises(ValidationError):
            anthony.life_path.number = 7

    def test_nested_values_are_immutable(self, anthony):
        with pytest.raises(ValidationError):
            anthony.summary.life_path = 99
        with pytest.raises(TypeError):
            anthony.summary['life_path'] = 99
        with pytest.raises(AttributeError):
            anthony.expression.parts.clear()
        with pytest.raises(AttributeError):
            anthony.soul_urge.vowels_used.append('Z')
        with pytest.raises(TypeError):
            anthony.expression.parts[0].letter_values[0] = ('A', 9)
        assert anthony.summary.life_path == 5
        assert len(anthony.expression.parts) == 2

    def test_forecast_is_immutable(self):
        extended = calculate_extended_profile("Anthony Baker", "3/15/1985", 2026, 6)
        with pytest.raises(AttributeError):
            extended.quarterly_forecast.quarters[0].energies.append(9)
        with pytest.raises(TypeError):
            extended.quarterly_forecast.quarters[0] = None

    def test_iso_and_us_dates_give_same_channels(self):
        us = calculate_profile("Ann Lee", "02/02/1984")
        iso = calculate_profile("Ann Lee", "1984-02-02")
        assert us.model_dump(exclude={'input'}) == iso.model_dump(exclude={'input'})

    @pytest.mark.parametrize('name, dob, field', [
        ("", "3/15/1985", 'name'),
        ("   ", "3/15/1985", 'name'),
        (None, "3/15/1985", 'name'),
        ("Anthony Baker", "", 'dob'),
        ("Anthony Baker", None, 'dob'),
    ])
    def test_missing_fields(self, name, dob, field):
        with pytest.raises(MissingRequiredField) as exc_info:
            calculate_profile(name, dob)
        assert exc_info.value.field == field


class TestExtendedProfile:

    def test_non_forecast_fields_match_standard_profile(self):
        base = calculate_profile("Anthony Baker", "3/15/1985")
        extended = calculate_extended_profile("Anthony Baker", "3/15/1985", 2026, 6)
        assert isinstance(extended, ExtendedProfile)
        assert isinstance(extended, Profile)
        assert extended.model_dump(include=set(Profile.model_fields)) == base.model_dump()

    def test_forecast_fields(self):
        extended = calculate_extended_profile("Anthony Baker", "3/15/1985", 2026, 10)
        assert extended.personal_year.number == 1
        assert extended.personal_year.year == 2026
        assert extended.personal_month.month == 10
        assert extended.personal_month.number == 2
        assert extended.quarterly_forecast.year == 2026

    def test_defaults_to_current_year(self):
        from datetime import date
        extended = calculate_extended_profile("Anthony Baker", "3/15/1985")
        assert extended.personal_year.year == date.today().year

    def test_standard_profile_has_no_forecast(self, anthony):
        assert not hasattr(anthony, 'personal_year')
