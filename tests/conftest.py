"""
tests/conftest.py - общие фикстуры

Тестовые профили:
- Anthony Baker, 3/15/1985: Life Path 5, Pisces, Wood Ox
- Ann Lee, 11/29/1987: Life Path 11 (мастер), Sagittarius, Fire Rabbit
"""
import pytest

from frequency_calculator import FrequencyCalculator, calculate_profile
from reports.matrix import MatrixTable


@pytest.fixture
def calculator():
    return FrequencyCalculator()


@pytest.fixture
def anthony():
    return calculate_profile("Anthony Baker", "3/15/1985")


@pytest.fixture
def ann():
    return calculate_profile("Ann Lee", "11/29/1987")


@pytest.fixture
def empty_tables():
    return MatrixTable({}, name='empty'), MatrixTable({}, name='empty_ext')


@pytest.fixture
def fake_client_factory():
    """Фабрика клиента генерации без сети: запоминает вызовы"""

    class FakeClient:
        calls = []
        reply = "GENERATED REPORT"
        error = None

        def __init__(self, api_key):
            self.api_key = api_key

        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc_val, exc_tb):
            return False

        async def generate(self, prompt, model, max_tokens, temperature):
            FakeClient.calls.append({
                'api_key': self.api_key,
                'prompt': prompt,
                'model': model,
                'max_tokens': max_tokens,
                'temperature': temperature,
            })
            if FakeClient.error is not None:
                raise FakeClient.error
            return FakeClient.reply

    return FakeClient
