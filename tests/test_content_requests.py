"""
Tests for the content request layer (surah, tafsir, thematic)
"""
import json

import httpx
import pytest

from core.content_requests import (
    fetch_surah_content,
    fetch_tafsir,
    generate_thematic_tafsir,
)
from model.tafsir import TafsirSource
from util.errors import ConfigurationError, UpstreamError

from conftest import RecordingTransport, gemini_reply


FATIHAH_VERSES = [
    {"number": n, "text": f"ayat {n}", "translation": f"terjemah {n}"}
    for n in range(1, 8)
]


@pytest.mark.asyncio
async def test_surah_meta_comes_from_local_table(config, replying):
    transport = replying({"verses": FATIHAH_VERSES})

    data = await fetch_surah_content(config, 1, "Al-Fatihah", 7, transport=transport)

    assert data.meta.number == 1
    assert data.meta.name == "Al-Fatihah"
    assert data.meta.englishName == "The Opening"
    assert data.meta.meaning == "Pembukaan"
    assert data.meta.verseCount == 7
    assert [v.number for v in data.verses] == list(range(1, 8))


@pytest.mark.asyncio
async def test_surah_request_shape(config, replying):
    transport = replying({"verses": FATIHAH_VERSES})

    await fetch_surah_content(config, 1, "Al-Fatihah", 7, transport=transport)

    assert len(transport.requests) == 1
    request = transport.requests[0]
    assert request.url.path.endswith("/gemini-2.5-flash:generateContent")
    assert request.headers["x-goog-api-key"] == "test-key"
    body = json.loads(request.content)
    assert "Surah 1 (Al-Fatihah)" in body["contents"][0]["parts"][0]["text"]
    gen = body["generationConfig"]
    assert gen["responseMimeType"] == "application/json"
    assert gen["responseSchema"]["required"] == ["verses"]


@pytest.mark.asyncio
async def test_surah_verses_are_sorted(config, replying):
    shuffled = [FATIHAH_VERSES[i] for i in (3, 0, 6, 1, 5, 2, 4)]
    transport = replying({"verses": shuffled})

    data = await fetch_surah_content(config, 1, "Al-Fatihah", 7, transport=transport)

    assert [v.number for v in data.verses] == list(range(1, 8))


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "numbers",
    [
        [1, 2, 4],  # gap
        [2, 3, 4],  # does not start at 1
        [1, 1, 2],  # duplicate
        [],  # nothing at all
    ],
)
async def test_surah_non_contiguous_verses_fail(config, replying, numbers):
    verses = [{"number": n, "text": "x", "translation": "y"} for n in numbers]
    transport = replying({"verses": verses})

    with pytest.raises(UpstreamError):
        await fetch_surah_content(config, 112, "Al-Ikhlas", 4, transport=transport)


@pytest.mark.asyncio
async def test_surah_missing_verses_key_fails(config, replying):
    with pytest.raises(UpstreamError):
        await fetch_surah_content(
            config, 112, "Al-Ikhlas", 4, transport=replying({"ayat": []})
        )


@pytest.mark.asyncio
async def test_surah_count_mismatch_is_tolerated(config, replying):
    verses = [{"number": n, "text": "x", "translation": "y"} for n in (1, 2, 3)]

    data = await fetch_surah_content(
        config, 112, "Al-Ikhlas", 4, transport=replying({"verses": verses})
    )

    assert len(data.verses) == 3


@pytest.mark.asyncio
async def test_tafsir_scenario(config, replying):
    transport = replying({"text": "...", "keyPoints": ["a", "b"]})

    result = await fetch_tafsir(
        config, "Al-Fatihah", 1, "...", TafsirSource.IBN_KATHIR, transport=transport
    )

    assert result.source == "Tafsir Ibn Kathir (Classic Sunni)"
    assert result.text == "..."
    assert result.keyPoints == ["a", "b"]


@pytest.mark.asyncio
async def test_tafsir_prompt_names_source_and_fallback(config, replying):
    transport = replying({"text": "t", "keyPoints": ["a"]})

    await fetch_tafsir(
        config, "Al-Baqarah", 255, "ayat kursi", TafsirSource.HAMKA, transport=transport
    )

    prompt = json.loads(transport.requests[0].content)["contents"][0]["parts"][0]["text"]
    assert "Surah: Al-Baqarah, Ayat: 255" in prompt
    assert "Buya Hamka (Tafsir Al-Azhar)" in prompt
    assert "sintetiskan" in prompt


@pytest.mark.asyncio
async def test_tafsir_key_points_are_bounded(config, replying):
    points = [f"p{i}" for i in range(8)]

    result = await fetch_tafsir(
        config,
        "Al-Fatihah",
        1,
        "...",
        TafsirSource.JALALAYN,
        transport=replying({"text": "t", "keyPoints": points}),
    )

    assert result.keyPoints == points[:5]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"keyPoints": ["a"]},  # text absent
        {"text": "   ", "keyPoints": ["a"]},  # text blank
        {"text": "t", "keyPoints": []},  # no points
        {"text": "t", "keyPoints": ["", "  "]},  # only blank points
        {"text": "t"},  # points absent
    ],
)
async def test_tafsir_missing_required_fields_fail(config, replying, body):
    with pytest.raises(UpstreamError):
        await fetch_tafsir(
            config, "Al-Fatihah", 1, "...", TafsirSource.AS_SADI, transport=replying(body)
        )


@pytest.mark.asyncio
async def test_thematic_without_verses_degrades_to_empty(config, replying):
    body = {
        "theme": "Kesabaran",
        "introduction": "intro",
        "explanation": "explain",
        "conclusion": "conclude",
    }

    result = await generate_thematic_tafsir(
        config, "Kesabaran", TafsirSource.QURAISH_SHIHAB, transport=replying(body)
    )

    assert result.verses == []
    assert result.source == TafsirSource.QURAISH_SHIHAB.value


@pytest.mark.asyncio
async def test_thematic_verse_normalization(config, replying):
    body = {
        "introduction": "intro",
        "verses": [
            {
                "surahName": "Al-Baqarah",
                "verseNumber": 153.0,
                "text": "x",
                "translation": "y",
                "relevance": "z",
            },
            {"surahName": "", "verseNumber": 1},  # unusable
            {"surahName": "Al-'Asr", "verseNumber": "3"},
        ],
        "explanation": "e",
        "conclusion": "c",
    }

    result = await generate_thematic_tafsir(
        config, "Kesabaran & Ujian", TafsirSource.SAYYID_QUTB, transport=replying(body)
    )

    assert result.theme == "Kesabaran & Ujian"  # fell back to the request
    assert [(v.surahName, v.verseNumber) for v in result.verses] == [
        ("Al-Baqarah", 153),
        ("Al-'Asr", 3),
    ]
    assert result.verses[1].relevance == ""


@pytest.mark.asyncio
async def test_thematic_without_any_body_fails(config, replying):
    with pytest.raises(UpstreamError):
        await generate_thematic_tafsir(
            config, "Waktu", TafsirSource.HAMKA, transport=replying({"theme": "Waktu"})
        )


@pytest.mark.asyncio
async def test_missing_credential_fails_before_network(keyless_config):
    transport = RecordingTransport(lambda request: gemini_reply({}))

    with pytest.raises(ConfigurationError):
        await fetch_surah_content(keyless_config, 1, "Al-Fatihah", 7, transport=transport)
    with pytest.raises(ConfigurationError):
        await fetch_tafsir(
            keyless_config, "Al-Fatihah", 1, "...", TafsirSource.IBN_KATHIR, transport=transport
        )
    with pytest.raises(ConfigurationError):
        await generate_thematic_tafsir(
            keyless_config, "Akhlak Mulia", TafsirSource.IBN_KATHIR, transport=transport
        )

    assert transport.requests == []


@pytest.mark.asyncio
async def test_credential_checked_before_argument_validation(keyless_config):
    with pytest.raises(ConfigurationError):
        await fetch_surah_content(keyless_config, 999, "", 0)


@pytest.mark.asyncio
async def test_upstream_status_error(config):
    transport = RecordingTransport(lambda request: httpx.Response(500, json={}))

    with pytest.raises(UpstreamError) as info:
        await fetch_tafsir(
            config, "Al-Fatihah", 1, "...", TafsirSource.IBN_KATHIR, transport=transport
        )
    assert info.value.context["status"] == 500
    assert len(transport.requests) == 1  # no retry


@pytest.mark.asyncio
async def test_upstream_transport_error(config):
    def _boom(request):
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(UpstreamError):
        await generate_thematic_tafsir(
            config, "Waktu", TafsirSource.HAMKA, transport=httpx.MockTransport(_boom)
        )
