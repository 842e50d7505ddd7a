"""Тесты клиента генерации на локальном aiohttp-сервере"""
import asyncio

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from reports.text_client import (
    GenerationRejectedError, GenerationTransportError, TextGenerationClient,
)


def run_against(handler, prompt="PROMPT"):
    """Поднимает сервер с обработчиком и выполняет один запрос генерации"""

    async def scenario():
        app = web.Application()
        app.router.add_post('/v1/messages', handler)
        server = TestServer(app)
        await server.start_server()
        try:
            url = str(server.make_url('/v1/messages'))
            async with TextGenerationClient('test-key', api_url=url, timeout=5) as client:
                return await client.generate(prompt, model='test-model', max_tokens=100, temperature=0.7)
        finally:
            await server.close()

    return asyncio.run(scenario())


class TestGenerate:

    def test_joins_text_blocks(self):
        received = {}

        async def handler(request):
            received['headers'] = dict(request.headers)
            received['payload'] = await request.json()
            return web.json_response({'content': [
                {'type': 'text', 'text': 'Hello'},
                {'type': 'tool_use', 'id': 'x'},
                {'type': 'text', 'text': 'World'},
            ]})

        assert run_against(handler) == "Hello\nWorld"
        assert received['headers']['x-api-key'] == 'test-key'
        assert 'anthropic-version' in received['headers']
        assert received['payload']['model'] == 'test-model'
        assert received['payload']['max_tokens'] == 100
        assert received['payload']['messages'] == [{'role': 'user', 'content': 'PROMPT'}]

    def test_empty_content(self):
        async def handler(request):
            return web.json_response({'content': []})

        assert run_against(handler) == ""

    def test_rejected(self):
        async def handler(request):
            return web.json_response({'error': 'invalid x-api-key'}, status=401)

        with pytest.raises(GenerationRejectedError) as exc_info:
            run_against(handler)
        assert exc_info.value.status == 401

    @pytest.mark.parametrize('status', [429, 503])
    def test_unavailable(self, status):
        async def handler(request):
            return web.json_response({'error': 'busy'}, status=status)

        with pytest.raises(GenerationTransportError) as exc_info:
            run_against(handler)
        assert exc_info.value.status == status

    def test_unreachable(self):
        async def scenario():
            async with TextGenerationClient('test-key', api_url='http://127.0.0.1:1/v1/messages',
                                            timeout=5) as client:
                await client.generate("PROMPT", model='m', max_tokens=10, temperature=0.7)

        with pytest.raises(GenerationTransportError):
            asyncio.run(scenario())

    def test_requires_context_manager(self):
        client = TextGenerationClient('test-key')
        with pytest.raises(RuntimeError):
            asyncio.run(client.generate("PROMPT", model='m', max_tokens=10, temperature=0.7))
