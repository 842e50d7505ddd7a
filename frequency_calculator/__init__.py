"""Модуль расчета частотного профиля основателя"""
from .calculator import (
    FrequencyCalculator, calculate_extended_profile, calculate_profile, require_fields,
)
from .dates import parse_date
from .exceptions import (
    ConfigurationError, FrequencyError, InvalidDateFormat, InvalidTier, MissingRequiredField,
)
from .models import ExtendedProfile, Profile, ProfileMetadata
from .numbers import reduce_number
from .patterns import detect_amplifications, detect_tensions

__all__ = [
    'FrequencyCalculator',
    'calculate_profile',
    'calculate_extended_profile',
    'require_fields',
    'parse_date',
    'reduce_number',
    'detect_tensions',
    'detect_amplifications',
    'Profile',
    'ExtendedProfile',
    'ProfileMetadata',
    'FrequencyError',
    'InvalidDateFormat',
    'MissingRequiredField',
    'InvalidTier',
    'ConfigurationError',
]
