"""Поиск напряжений и усилений между каналами профиля"""
from typing import FrozenSet, List, NamedTuple, Tuple

from .models import Profile


class TensionCheck(NamedTuple):
    """Правило напряжения: срабатывает, если совпали обе стороны"""
    name: str
    zodiac_a: FrozenSet[str]
    animals_a: FrozenSet[str]
    life_paths_a: FrozenSet[int]
    zodiac_b: FrozenSet[str]
    animals_b: FrozenSet[str]
    life_paths_b: FrozenSet[int]

    def side_a(self, sign: str, animal: str, life_path: int) -> bool:
        return sign in self.zodiac_a or animal in self.animals_a or life_path in self.life_paths_a

    def side_b(self, sign: str, animal: str, life_path: int) -> bool:
        return sign in self.zodiac_b or animal in self.animals_b or life_path in self.life_paths_b


class AmplificationCheck(NamedTuple):
    """Правило усиления по общей стихии"""
    name: str
    element: str
    life_paths: FrozenSet[int]


TENSION_CHECKS: Tuple[TensionCheck, ...] = (
    TensionCheck(
        name='speed_vs_depth',
        zodiac_a=frozenset({'Aries', 'Sagittarius', 'Gemini'}),
        animals_a=frozenset({'Horse', 'Tiger', 'Monkey'}),
        life_paths_a=frozenset({1, 3, 5}),
        zodiac_b=frozenset({'Virgo', 'Scorpio', 'Capricorn'}),
        animals_b=frozenset({'Snake', 'Ox', 'Rooster'}),
        life_paths_b=frozenset({4, 7, 22}),
    ),
    TensionCheck(
        name='security_vs_freedom',
        zodiac_a=frozenset({'Taurus', 'Cancer', 'Capricorn'}),
        animals_a=frozenset({'Ox', 'Rabbit', 'Dog'}),
        life_paths_a=frozenset({2, 4, 6}),
        zodiac_b=frozenset({'Gemini', 'Sagittarius', 'Aquarius'}),
        animals_b=frozenset({'Horse', 'Monkey', 'Tiger'}),
        life_paths_b=frozenset({1, 3, 5}),
    ),
    TensionCheck(
        name='solo_vs_collaborative',
        zodiac_a=frozenset({'Aries', 'Leo', 'Scorpio'}),
        animals_a=frozenset({'Tiger', 'Horse', 'Dragon'}),
        life_paths_a=frozenset({1, 7, 8}),
        zodiac_b=frozenset({'Libra', 'Pisces', 'Gemini'}),
        animals_b=frozenset({'Rabbit', 'Goat', 'Pig'}),
        life_paths_b=frozenset({2, 6, 9}),
    ),
    TensionCheck(
        name='spiritual_vs_material',
        zodiac_a=frozenset({'Pisces', 'Sagittarius', 'Aquarius'}),
        animals_a=frozenset({'Snake', 'Rabbit'}),
        life_paths_a=frozenset({7, 9, 11}),
        zodiac_b=frozenset({'Taurus', 'Capricorn', 'Leo'}),
        animals_b=frozenset({'Dragon', 'Ox', 'Rat'}),
        life_paths_b=frozenset({4, 8, 22}),
    ),
    TensionCheck(
        name='creative_vs_structural',
        zodiac_a=frozenset({'Leo', 'Pisces', 'Gemini'}),
        animals_a=frozenset({'Horse', 'Monkey', 'Goat'}),
        life_paths_a=frozenset({3, 5, 9}),
        zodiac_b=frozenset({'Virgo', 'Capricorn', 'Taurus'}),
        animals_b=frozenset({'Ox', 'Rooster', 'Dog'}),
        life_paths_b=frozenset({4, 8, 22}),
    ),
)

# Порядок важен: fire, water, earth
AMPLIFICATION_CHECKS: Tuple[AmplificationCheck, ...] = (
    AmplificationCheck('double_fire', 'Fire', frozenset({1, 3, 5})),
    AmplificationCheck('double_water', 'Water', frozenset({2, 7, 9})),
    AmplificationCheck('double_earth', 'Earth', frozenset({4, 8})),
)

MASTER_NUMBER_PRESENCE = 'master_number_presence'

# Сколько каналов должны совпасть по стихии
AMPLIFICATION_THRESHOLD = 2


def detect_tensions(profile: Profile) -> List[str]:
    """Имена сработавших напряжений в порядке таблицы"""
    sign = profile.western_zodiac.sign
    animal = profile.chinese_zodiac.animal
    life_path = profile.life_path.number

    return [
        check.name
        for check in TENSION_CHECKS
        if check.side_a(sign, animal, life_path) and check.side_b(sign, animal, life_path)
    ]


def detect_amplifications(profile: Profile) -> List[str]:
    """Имена сработавших усилений в фиксированном порядке"""
    western_element = profile.western_zodiac.element
    chinese_element = profile.chinese_zodiac.element
    life_path = profile.life_path.number

    amplifications = []
    for check in AMPLIFICATION_CHECKS:
        matches = sum((
            western_element == check.element,
            chinese_element == check.element,
            life_path in check.life_paths,
        ))
        if matches >= AMPLIFICATION_THRESHOLD:
            amplifications.append(check.name)

    if profile.life_path.is_master or profile.birthday_number.is_master or profile.expression.is_master:
        amplifications.append(MASTER_NUMBER_PRESENCE)

    return amplifications
