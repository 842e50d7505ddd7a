"""Генерация промптов и отчетов"""
from .assembler import AssembledPrompts, PromptAssembler, build_teaser
from .generator import ReportGenerator, tier_config
from .matrix import MatrixTable, default_tables, load_matrix
from .text_client import (
    GenerationError, GenerationRejectedError, GenerationTransportError, TextGenerationClient,
)

__all__ = [
    'AssembledPrompts',
    'PromptAssembler',
    'build_teaser',
    'ReportGenerator',
    'tier_config',
    'MatrixTable',
    'default_tables',
    'load_matrix',
    'TextGenerationClient',
    'GenerationError',
    'GenerationTransportError',
    'GenerationRejectedError',
]
