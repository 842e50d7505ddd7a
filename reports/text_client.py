"""Клиент внешнего сервиса генерации текста"""
import asyncio
import logging
from typing import Optional

import aiohttp

from config import settings

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Ошибка генерации текста"""

    def __init__(self, message: str, status: Optional[int] = None):
        self.status = status
        super().__init__(message)


class GenerationTransportError(GenerationError):
    """Сеть, таймаут или временная недоступность сервиса"""


class GenerationRejectedError(GenerationError):
    """Сервис отклонил запрос (например, неверный ключ API)"""


class TextGenerationClient:
    """Асинхронный клиент API сообщений"""

    def __init__(self, api_key: str, api_url: Optional[str] = None,
                 api_version: Optional[str] = None, timeout: Optional[float] = None):
        self.api_key = api_key
        self.api_url = api_url or settings.anthropic_api_url
        self.timeout = timeout or settings.generation_timeout
        self.session: Optional[aiohttp.ClientSession] = None
        self.headers = {
            'Content-Type': 'application/json',
            'x-api-key': api_key,
            'anthropic-version': api_version or settings.anthropic_version,
        }

    async def __aenter__(self):
        """Асинхронный контекстный менеджер - вход"""
        self.session = aiohttp.ClientSession(
            headers=self.headers,
            timeout=aiohttp.ClientTimeout(total=self.timeout)
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Асинхронный контекстный менеджер - выход"""
        if self.session:
            await self.session.close()
            self.session = None

    async def generate(self, prompt: str, model: str, max_tokens: int, temperature: float) -> str:
        """Отправляет промпт и возвращает текст ответа"""
        if self.session is None:
            raise RuntimeError("TextGenerationClient must be used as 'async with'")

        payload = {
            'model': model,
            'max_tokens': max_tokens,
            'temperature': temperature,
            'messages': [{'role': 'user', 'content': prompt}],
        }

        try:
            async with self.session.post(self.api_url, json=payload) as response:
                if response.status != 200:
                    body = await response.text()
                    logger.error(f"Ошибка API генерации: статус {response.status}, ответ {body[:500]}")
                    if response.status == 429 or response.status >= 500:
                        raise GenerationTransportError(
                            f"Generation service unavailable ({response.status})", response.status
                        )
                    raise GenerationRejectedError(
                        f"Generation request rejected ({response.status})", response.status
                    )
                data = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Ошибка соединения с API генерации: {e}")
            raise GenerationTransportError(f"Generation service unreachable: {e}") from e

        blocks = data.get('content') or []
        return '\n'.join(
            block.get('text', '')
            for block in blocks
            if block.get('type') == 'text'
        )
