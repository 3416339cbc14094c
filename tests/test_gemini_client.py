"""
Tests for the generateContent round trip
"""
import httpx
import pytest

from core.gemini_client import generate_json, require_credential
from core.response_schemas import TAFSIR_SCHEMA
from util.errors import ConfigurationError, UpstreamError

from conftest import RecordingTransport


def _text_reply(text: str) -> httpx.Response:
    return httpx.Response(
        200, json={"candidates": [{"content": {"parts": [{"text": text}]}}]}
    )


async def _call(config, transport):
    return await generate_json(
        config, prompt="p", schema=TAFSIR_SCHEMA, op="test", transport=transport
    )


def test_require_credential_rejects_blank(keyless_config):
    with pytest.raises(ConfigurationError) as info:
        require_credential(keyless_config)
    assert info.value.context == {"setting": "GEMINI_API_KEY"}


@pytest.mark.asyncio
async def test_code_fences_are_stripped(config):
    transport = httpx.MockTransport(
        lambda r: _text_reply('```json\n{"text": "t", "keyPoints": ["a"]}\n```')
    )

    assert await _call(config, transport) == {"text": "t", "keyPoints": ["a"]}


@pytest.mark.asyncio
async def test_split_parts_are_joined(config):
    transport = httpx.MockTransport(
        lambda r: httpx.Response(
            200,
            json={
                "candidates": [
                    {"content": {"parts": [{"text": '{"text": '}, {"text": '"t"}'}]}}
                ]
            },
        )
    )

    assert await _call(config, transport) == {"text": "t"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, json={"candidates": []}),
        httpx.Response(200, json={"promptFeedback": {"blockReason": "SAFETY"}}),
        httpx.Response(200, text="<html>not json</html>"),
        _text_reply("Maaf, saya tidak bisa."),
        _text_reply('["not", "an", "object"]'),
    ],
)
async def test_malformed_replies_raise_upstream(config, response):
    transport = httpx.MockTransport(lambda r: response)

    with pytest.raises(UpstreamError):
        await _call(config, transport)


@pytest.mark.asyncio
async def test_model_name_in_url(config):
    transport = RecordingTransport(lambda r: _text_reply("{}"))

    await _call(config, transport)

    assert str(transport.requests[0].url) == (
        "https://example.test/v1beta/models/gemini-2.5-flash:generateContent"
    )
