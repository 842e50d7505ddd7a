"""FastAPI приложение"""
import logging
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel

from config import settings
from frequency_calculator import (
    ConfigurationError, FrequencyError, calculate_profile,
    detect_amplifications, detect_tensions, require_fields,
)
from reports import GenerationError, ReportGenerator, build_teaser
from reports.assembler import first_token

# Настройка логирования
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=getattr(logging, settings.log_level.upper(), logging.INFO)
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Founder Frequency API",
    description="API для расчета частотного профиля основателя",
    version="1.0.0"
)

_report_generator: Optional[ReportGenerator] = None


def get_report_generator() -> ReportGenerator:
    """Генератор отчетов создается при первом обращении"""
    global _report_generator
    if _report_generator is None:
        _report_generator = ReportGenerator()
    return _report_generator


@app.on_event("startup")
async def startup_event():
    environment = "Railway" if settings.is_railway else "local"
    logger.info(f"Founder Frequency API запущен ({environment})")


# Модели запросов. Поля необязательны: пропуски проверяет ядро и отвечает 400
class CalculateRequest(BaseModel):
    name: Optional[str] = None
    dob: Optional[str] = None


class GenerateRequest(BaseModel):
    name: Optional[str] = None
    dob: Optional[str] = None
    tier: Optional[str] = None


# API endpoints
@app.get("/")
async def root():
    """Корневой endpoint"""
    return {
        "message": "Founder Frequency API",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.post("/api/calculate")
async def calculate(request: CalculateRequest):
    """Бесплатный калькулятор: сводка профиля и тизер"""
    try:
        profile = calculate_profile(request.name, request.dob)
    except FrequencyError as e:
        logger.warning(f"Некорректный ввод: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    tensions = detect_tensions(profile)
    amplifications = detect_amplifications(profile)

    return {
        "first_name": first_token(profile.input.name),
        "summary": profile.summary,
        "teaser": build_teaser(profile, tensions, amplifications),
    }


@app.post("/api/generate")
async def generate(request: GenerateRequest,
                   generator: ReportGenerator = Depends(get_report_generator)):
    """Платный отчет: промпт уровня tier и вызов сервиса генерации"""
    try:
        require_fields(request.name, request.dob)
        if not request.tier:
            raise HTTPException(status_code=400, detail="Name, date of birth, and tier are required.")
        return await generator.generate_report(request.name, request.dob, request.tier)
    except ConfigurationError as e:
        logger.error(f"{e}")
        raise HTTPException(status_code=500, detail=str(e))
    except FrequencyError as e:
        logger.warning(f"Некорректный ввод: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except GenerationError as e:
        logger.error(f"Ошибка генерации отчета: {e}")
        raise HTTPException(status_code=502, detail="Report generation failed. Please try again.")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
