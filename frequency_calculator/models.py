"""Модели данных частотного профиля"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple


class FrozenModel(BaseModel):
    """Неизменяемая модель: после создания поля не меняются"""
    model_config = ConfigDict(frozen=True)


class DateOfBirth(FrozenModel):
    """Разобранная дата рождения"""
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    year: int


class LifePathComponents(FrozenModel):
    month: int
    day: int
    year: int
    sum: int


class LifePath(FrozenModel):
    """Число жизненного пути"""
    number: int     # Может быть мастер-числом
    reduced: int    # Всегда однозначное
    is_master: bool
    calculation: str
    components: LifePathComponents


class BirthdayNumber(FrozenModel):
    """Число дня рождения"""
    compound: int   # День месяца без редукции
    reduced: int
    is_master: bool
    karmic_debt: Optional[str] = None  # Например "16/7"
    display: str
    calculation: str


class NamePart(FrozenModel):
    """Часть имени с разбором по буквам"""
    name_part: str
    letter_values: Tuple[Tuple[str, int], ...]  # (буква, значение) в порядке первого появления
    raw_sum: int
    reduced: int
    is_master: bool


class ExpressionNumber(FrozenModel):
    """Число выражения"""
    number: int
    reduced: int
    is_master: bool
    parts: Tuple[NamePart, ...]
    calculation: str
    total_before_reduction: int


class SoulUrge(FrozenModel):
    """Число души (гласные)"""
    number: int
    reduced: int
    is_master: bool
    vowels_used: Tuple[str, ...]


class PersonalityNumber(FrozenModel):
    """Число личности (согласные)"""
    number: int
    reduced: int
    is_master: bool


class WesternZodiac(FrozenModel):
    sign: str
    element: str
    modality: str
    cusp: Optional[str] = None
    display: str


class ChineseZodiac(FrozenModel):
    animal: str
    element: str
    polarity: str
    effective_year: int
    display: str


class PersonalYear(FrozenModel):
    number: int
    year: int
    calculation: str


class PersonalMonth(FrozenModel):
    number: int
    month: int
    calculation: str


class QuarterForecast(FrozenModel):
    quarter: int
    months: Tuple[int, ...]
    energies: Tuple[int, ...]
    dominant_energy: int


class QuarterlyForecast(FrozenModel):
    personal_year: int
    year: int
    quarters: Tuple[QuarterForecast, ...]


class ProfileSummary(FrozenModel):
    """Плоская сводка каналов для отображения"""
    life_path: int
    birthday: str
    expression: int
    soul_urge: int
    personality: int
    western: str
    chinese: str


class ProfileInput(FrozenModel):
    """Исходные данные расчета"""
    name: str
    dob: str
    parsed: DateOfBirth


class Profile(FrozenModel):
    """Частотный профиль: все пять каналов плюс душа и личность"""
    input: ProfileInput
    life_path: LifePath
    birthday_number: BirthdayNumber
    expression: ExpressionNumber
    soul_urge: SoulUrge
    personality: PersonalityNumber
    western_zodiac: WesternZodiac
    chinese_zodiac: ChineseZodiac

    summary: ProfileSummary


class ExtendedProfile(Profile):
    """Профиль с прогнозом на год, месяц и кварталы"""
    personal_year: PersonalYear
    personal_month: PersonalMonth
    quarterly_forecast: QuarterlyForecast


class ProfileMetadata(FrozenModel):
    """Метаданные отчета для API"""
    summary: ProfileSummary
    tensions: Tuple[str, ...]
    amplifications: Tuple[str, ...]
    personal_year: PersonalYear
    quarterly_forecast: QuarterlyForecast
