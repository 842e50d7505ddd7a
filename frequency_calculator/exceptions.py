"""Ошибки расчета частотного профиля"""
from typing import Optional


class FrequencyError(Exception):
    """Базовая ошибка ядра расчета"""


class InvalidDateFormat(FrequencyError, ValueError):
    """Дата рождения не распознана"""

    def __init__(self, raw: str, reason: Optional[str] = None):
        self.raw = raw
        message = f"Cannot parse date: {raw}. Use MM/DD/YYYY format."
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MissingRequiredField(FrequencyError, ValueError):
    """Не заполнено обязательное поле"""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Field '{field}' is required.")


class InvalidTier(FrequencyError, ValueError):
    """Неизвестный уровень отчета"""

    def __init__(self, tier: str):
        self.tier = tier
        super().__init__(f'Tier must be "insight" or "blueprint", got "{tier}".')


class ConfigurationError(FrequencyError):
    """Ошибка конфигурации сервера"""
