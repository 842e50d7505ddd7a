"""Редукция чисел и нумерологические константы"""
from typing import Dict, FrozenSet

MASTER_NUMBERS: FrozenSet[int] = frozenset({11, 22, 33})
KARMIC_DEBT_NUMBERS: FrozenSet[int] = frozenset({13, 14, 16, 19})

# Пифагорова таблица: A=1 ... I=9, J=1 ... R=9, S=1 ... Z=8
LETTER_VALUES: Dict[str, int] = {
    chr(ord('A') + index): index % 9 + 1 for index in range(26)
}
VOWELS: FrozenSet[str] = frozenset('AEIOU')


def digit_sum(number: int) -> int:
    """Сумма десятичных цифр числа"""
    return sum(int(digit) for digit in str(abs(number)))


def reduce_number(number: int, preserve_masters: bool = True) -> int:
    """
    Редуцирует число до однозначного.

    При preserve_masters мастер-числа 11, 22, 33 возвращаются сразу,
    как только появляются на любом шаге редукции.
    """
    while number > 9:
        if preserve_masters and number in MASTER_NUMBERS:
            return number
        number = digit_sum(number)
    return number


def is_master(number: int) -> bool:
    return number in MASTER_NUMBERS


def letter_value(char: str) -> int:
    """Значение буквы по таблице, 0 для остальных символов"""
    return LETTER_VALUES.get(char.upper(), 0)
