"""Таблицы интерпретаций (только чтение)"""
import json
import logging
import os
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from config import settings

logger = logging.getLogger(__name__)

DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')
MATRIX_FILE = os.path.join(DATA_DIR, 'matrix.json')
MATRIX_EXTENDED_FILE = os.path.join(DATA_DIR, 'matrix_extended.json')

_EMPTY: Mapping[str, Any] = MappingProxyType({})


class MatrixTable:
    """
    Обертка над JSON-таблицей интерпретаций.

    Любой отсутствующий ключ возвращает значение по умолчанию,
    исключения при поиске не выбрасываются.
    """

    def __init__(self, data: Mapping[str, Any], name: str = 'matrix'):
        self._data = data
        self.name = name

    def get(self, *keys: Any, default: Any = None) -> Any:
        """Ищет значение по цепочке ключей, числа приводятся к строке"""
        node: Any = self._data
        for key in keys:
            if not isinstance(node, Mapping):
                return default
            key = str(key)
            if key not in node:
                logger.debug(f"Нет записи {self.name}{list(keys)}")
                return default
            node = node[key]
        return node

    def section(self, *keys: Any) -> Mapping[str, Any]:
        """Вложенный словарь только для чтения (пустой, если нет)"""
        node = self.get(*keys)
        if isinstance(node, Mapping):
            return MappingProxyType(dict(node))
        return _EMPTY

    def text(self, *keys: Any, default: str = '') -> str:
        value = self.get(*keys, default=default)
        return value if isinstance(value, str) else default

    def dump(self, *keys: Any) -> str:
        """Запись в виде отформатированного JSON ('{}' если нет)"""
        return json.dumps(dict(self.section(*keys)), indent=2, ensure_ascii=False)


def load_matrix(path: str, name: Optional[str] = None) -> MatrixTable:
    """Загружает таблицу из JSON-файла"""
    with open(path, encoding='utf-8') as f:
        data = json.load(f)
    logger.info(f"Загружена таблица {path}")
    return MatrixTable(data, name=name or os.path.splitext(os.path.basename(path))[0])


@lru_cache(maxsize=1)
def default_tables() -> Tuple[MatrixTable, MatrixTable]:
    """Основная и расширенная таблицы, загружаются один раз на процесс"""
    matrix = load_matrix(settings.matrix_path or MATRIX_FILE, name='matrix')
    matrix_ext = load_matrix(settings.matrix_extended_path or MATRIX_EXTENDED_FILE, name='matrix_extended')
    return matrix, matrix_ext
