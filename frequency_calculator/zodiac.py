"""Западный и китайский зодиак"""
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .models import ChineseZodiac, WesternZodiac

# Нижние границы знаков: (месяц, день, знак, стихия, модальность)
SIGN_RANGES: Tuple[Tuple[int, int, str, str, str], ...] = (
    (1, 20, 'Aquarius', 'Air', 'Fixed'),
    (2, 19, 'Pisces', 'Water', 'Mutable'),
    (3, 21, 'Aries', 'Fire', 'Cardinal'),
    (4, 20, 'Taurus', 'Earth', 'Fixed'),
    (5, 21, 'Gemini', 'Air', 'Mutable'),
    (6, 21, 'Cancer', 'Water', 'Cardinal'),
    (7, 23, 'Leo', 'Fire', 'Fixed'),
    (8, 23, 'Virgo', 'Earth', 'Mutable'),
    (9, 23, 'Libra', 'Air', 'Cardinal'),
    (10, 23, 'Scorpio', 'Water', 'Fixed'),
    (11, 22, 'Sagittarius', 'Fire', 'Mutable'),
    (12, 22, 'Capricorn', 'Earth', 'Cardinal'),
)

# Расстояние до границы, при котором дата считается куспидом
CUSP_WINDOW = 2

CHINESE_ANIMALS: Tuple[str, ...] = (
    'Rat', 'Ox', 'Tiger', 'Rabbit', 'Dragon', 'Snake',
    'Horse', 'Goat', 'Monkey', 'Rooster', 'Dog', 'Pig',
)
CHINESE_ELEMENTS: Tuple[str, ...] = ('Wood', 'Fire', 'Earth', 'Metal', 'Water')
CHINESE_POLARITIES: Tuple[str, ...] = ('Yang', 'Yin')

# Даты китайского Нового года (месяц, день), 1924-2044
LUNAR_NEW_YEAR: Mapping[int, Tuple[int, int]] = MappingProxyType({
    1924: (2, 5), 1925: (1, 25), 1926: (2, 13), 1927: (2, 2), 1928: (1, 23),
    1929: (2, 10), 1930: (1, 30), 1931: (2, 17), 1932: (2, 6), 1933: (1, 26),
    1934: (2, 14), 1935: (2, 4), 1936: (1, 24), 1937: (2, 11), 1938: (1, 31),
    1939: (2, 19), 1940: (2, 8), 1941: (1, 27), 1942: (2, 15), 1943: (2, 5),
    1944: (1, 25), 1945: (2, 13), 1946: (2, 2), 1947: (1, 22), 1948: (2, 10),
    1949: (1, 29), 1950: (2, 17), 1951: (2, 6), 1952: (1, 27), 1953: (2, 14),
    1954: (2, 3), 1955: (1, 24), 1956: (2, 12), 1957: (1, 31), 1958: (2, 18),
    1959: (2, 8), 1960: (1, 28), 1961: (2, 15), 1962: (2, 5), 1963: (1, 25),
    1964: (2, 13), 1965: (2, 2), 1966: (1, 21), 1967: (2, 9), 1968: (1, 30),
    1969: (2, 17), 1970: (2, 6), 1971: (1, 27), 1972: (2, 15), 1973: (2, 3),
    1974: (1, 23), 1975: (2, 11), 1976: (1, 31), 1977: (2, 18), 1978: (2, 7),
    1979: (1, 28), 1980: (2, 16), 1981: (2, 5), 1982: (1, 25), 1983: (2, 13),
    1984: (2, 2), 1985: (2, 20), 1986: (2, 9), 1987: (1, 29), 1988: (2, 17),
    1989: (2, 6), 1990: (1, 27), 1991: (2, 15), 1992: (2, 4), 1993: (1, 23),
    1994: (2, 10), 1995: (1, 31), 1996: (2, 19), 1997: (2, 7), 1998: (1, 28),
    1999: (2, 16), 2000: (2, 5), 2001: (1, 24), 2002: (2, 12), 2003: (2, 1),
    2004: (1, 22), 2005: (2, 9), 2006: (1, 29), 2007: (2, 18), 2008: (2, 7),
    2009: (1, 26), 2010: (2, 14), 2011: (2, 3), 2012: (1, 23), 2013: (2, 10),
    2014: (1, 31), 2015: (2, 19), 2016: (2, 8), 2017: (1, 28), 2018: (2, 16),
    2019: (2, 5), 2020: (1, 25), 2021: (2, 12), 2022: (2, 1), 2023: (1, 22),
    2024: (2, 10), 2025: (1, 29), 2026: (2, 17), 2027: (2, 6), 2028: (1, 26),
    2029: (2, 13), 2030: (2, 3), 2031: (1, 23), 2032: (2, 11), 2033: (1, 31),
    2034: (2, 19), 2035: (2, 8), 2036: (1, 28), 2037: (2, 15), 2038: (2, 4),
    2039: (1, 24), 2040: (2, 12), 2041: (2, 1), 2042: (1, 22), 2043: (2, 10),
    2044: (1, 30),
})

# Вне таблицы Новым годом считается 4 февраля
FALLBACK_NEW_YEAR = (2, 4)


def calculate_western_zodiac(month: int, day: int) -> WesternZodiac:
    """Знак западного зодиака по последней границе не позже даты"""
    # До 20 января действует последний знак года
    _, _, sign, element, modality = SIGN_RANGES[-1]
    for start_month, start_day, range_sign, range_element, range_modality in SIGN_RANGES:
        if (month, day) >= (start_month, start_day):
            sign, element, modality = range_sign, range_element, range_modality

    cusp = _find_cusp(month, day, sign)
    display = f"{sign} (cusp of {cusp})" if cusp else sign

    return WesternZodiac(
        sign=sign,
        element=element,
        modality=modality,
        cusp=cusp,
        display=display,
    )


def _find_cusp(month: int, day: int, sign: str) -> Optional[str]:
    """Соседний знак, если дата в пределах CUSP_WINDOW от его границы"""
    # Месяц считается за 30 дней: это не календарное расстояние
    for start_month, start_day, range_sign, _, _ in SIGN_RANGES:
        if range_sign == sign:
            continue
        distance = (month - start_month) * 30 + (day - start_day)
        if abs(distance) <= CUSP_WINDOW:
            return range_sign
    return None


def is_before_lunar_new_year(year: int, month: int, day: int) -> bool:
    new_year = LUNAR_NEW_YEAR.get(year, FALLBACK_NEW_YEAR)
    return (month, day) < new_year


def calculate_chinese_zodiac(year: int, month: int, day: int) -> ChineseZodiac:
    """Животное, стихия и полярность китайского года рождения"""
    effective_year = year - 1 if is_before_lunar_new_year(year, month, day) else year

    animal = CHINESE_ANIMALS[(effective_year - 4) % 12]
    # Каждая стихия держится два года подряд
    element = CHINESE_ELEMENTS[((effective_year - 4) % 10) // 2]
    polarity = CHINESE_POLARITIES[effective_year % 2]

    return ChineseZodiac(
        animal=animal,
        element=element,
        polarity=polarity,
        effective_year=effective_year,
        display=f"{element} {animal} ({polarity})",
    )
