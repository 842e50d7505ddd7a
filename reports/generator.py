"""Генератор отчетов через внешний сервис генерации текста"""
from typing import Any, Callable, Dict, Optional
import logging

from config import settings
from frequency_calculator import ConfigurationError, InvalidTier, require_fields

from .assembler import TIERS, PromptAssembler
from .text_client import TextGenerationClient

logger = logging.getLogger(__name__)


def tier_config(tier: str) -> Dict[str, Any]:
    """Модель и параметры генерации для уровня отчета"""
    if tier == 'insight':
        return {
            'model': settings.insight_model,
            'max_tokens': settings.insight_max_tokens,
            'temperature': settings.insight_temperature,
        }
    if tier == 'blueprint':
        return {
            'model': settings.blueprint_model,
            'max_tokens': settings.blueprint_max_tokens,
            'temperature': settings.blueprint_temperature,
        }
    raise InvalidTier(tier)


class ReportGenerator:
    """Генератор отчетов insight и blueprint"""

    def __init__(self, assembler: Optional[PromptAssembler] = None,
                 api_key: Optional[str] = None,
                 client_factory: Optional[Callable[[str], TextGenerationClient]] = None):
        """
        Инициализация генератора отчетов

        Args:
            assembler: Сборщик промптов (по умолчанию со встроенными таблицами)
            api_key: Ключ API генерации (по умолчанию из настроек)
            client_factory: Фабрика клиента генерации по ключу API
        """
        self.assembler = assembler or PromptAssembler()
        self.api_key = api_key if api_key is not None else settings.anthropic_api_key
        self.client_factory = client_factory or TextGenerationClient

    async def generate_report(self, full_name: str, dob: str, tier: str) -> Dict[str, Any]:
        """Собирает промпт, вызывает сервис генерации и возвращает отчет с метаданными"""
        require_fields(full_name, dob)
        if tier not in TIERS:
            raise InvalidTier(tier)
        if not self.api_key:
            raise ConfigurationError("Server configuration error: API key not set.")

        prompt = self.assembler.assemble_prompt(full_name, dob, tier)
        config = tier_config(tier)
        logger.info(f"Генерация отчета {tier}: модель {config['model']}, промпт {len(prompt)} символов")

        async with self.client_factory(self.api_key) as client:
            report_text = await client.generate(prompt, **config)

        metadata = self.assembler.get_metadata(full_name, dob).model_dump()
        metadata.update({
            'model': config['model'],
            'prompt_tokens': len(prompt) // 4,
            'report_length': len(report_text),
        })

        return {
            'report': report_text,
            'tier': tier,
            'metadata': metadata,
        }
