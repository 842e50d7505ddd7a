"""Конфигурация приложения"""
from pydantic_settings import BaseSettings
from typing import Optional
import os


class Settings(BaseSettings):
    """Настройки приложения"""

    # Генерация текста
    anthropic_api_key: Optional[str] = None
    anthropic_api_url: str = "https://api.anthropic.com/v1/messages"
    anthropic_version: str = "2023-06-01"
    generation_timeout: float = 300.0

    # Уровни отчета
    insight_model: str = "claude-sonnet-4-5-20250929"
    insight_max_tokens: int = 8000
    insight_temperature: float = 0.7
    blueprint_model: str = "claude-opus-4-5-20250929"
    blueprint_max_tokens: int = 16000
    blueprint_temperature: float = 0.7

    # Таблицы интерпретаций (по умолчанию встроенные)
    matrix_path: Optional[str] = None
    matrix_extended_path: Optional[str] = None

    # Railway/Production (Railway устанавливает это как строку 'production')
    railway_environment: Optional[str] = None

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Application
    debug: bool = False
    log_level: str = "INFO"

    @property
    def is_railway(self) -> bool:
        """Проверяет, запущено ли на Railway"""
        return self.railway_environment is not None or os.getenv("RAILWAY_ENVIRONMENT") is not None

    class Config:
        # Для Railway используем переменные окружения напрямую
        env_file = ".env" if not os.getenv("RAILWAY_ENVIRONMENT") else None
        case_sensitive = False
        # Игнорируем неизвестные поля из окружения Railway
        extra = "ignore"


settings = Settings()
