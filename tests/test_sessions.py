"""
Tests for view sessions and request superseding
"""
import asyncio
import json

import httpx
import pytest

from core.entities import GeminiConfig
from core.request_tracker import RequestTracker
from model.quran import Verse
from model.tafsir import TafsirSource
from repository.surah_repository import SurahRepository
from service.content_service import ContentService
from service.session_service import (
    ReaderMode,
    ReaderSession,
    TafsirPanelSession,
    ThematicSession,
    ViewStatus,
)

from conftest import gemini_reply

VERSE = Verse(number=1, text="ayat", translation="terjemah")


def test_tracker_generations():
    tracker = RequestTracker()
    first = tracker.begin("panel")
    assert tracker.is_current(first)

    second = tracker.begin("panel")
    assert not tracker.is_current(first)
    assert tracker.is_current(second)

    other = tracker.begin("reader")
    assert tracker.is_current(second)  # surfaces are independent

    tracker.invalidate("reader")
    assert not tracker.is_current(other)


class GatedTransport(httpx.AsyncBaseTransport):
    """Holds each tafsir request until the test releases that source."""

    def __init__(self) -> None:
        self.gates: dict[str, asyncio.Event] = {}

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        prompt = json.loads(request.content)["contents"][0]["parts"][0]["text"]
        source = next(s for s in TafsirSource if s.value in prompt)
        gate = self.gates.setdefault(source.name, asyncio.Event())
        await gate.wait()
        return gemini_reply({"text": f"tafsir {source.name}", "keyPoints": ["p"]})

    def release(self, name: str) -> None:
        self.gates.setdefault(name, asyncio.Event()).set()


@pytest.mark.asyncio
async def test_switching_source_discards_late_response(config):
    transport = GatedTransport()
    panel = TafsirPanelSession(ContentService(config, transport), RequestTracker())
    panel.panel.is_open = True
    panel.panel.verse = VERSE
    panel.panel.surah_name = "Al-Fatihah"

    old = asyncio.create_task(panel.select_source(TafsirSource.IBN_KATHIR))
    await asyncio.sleep(0)
    new = asyncio.create_task(panel.select_source(TafsirSource.JALALAYN))
    await asyncio.sleep(0)

    transport.release("JALALAYN")
    await new
    assert panel.panel.view.result.text == "tafsir JALALAYN"

    transport.release("IBN_KATHIR")
    await old
    assert panel.panel.view.status is ViewStatus.SUCCESS
    assert panel.panel.view.result.text == "tafsir JALALAYN"
    assert panel.panel.view.result.source == TafsirSource.JALALAYN.value


@pytest.mark.asyncio
async def test_panel_open_uses_default_source(config, replying):
    transport = replying({"text": "t", "keyPoints": ["a"]})
    panel = TafsirPanelSession(ContentService(config, transport), RequestTracker())

    view = await panel.open(VERSE, "Al-Fatihah")

    assert panel.panel.is_open
    assert view.status is ViewStatus.SUCCESS
    assert view.result.source == TafsirSource.IBN_KATHIR.value


@pytest.mark.asyncio
async def test_panel_error_sets_flag_with_localized_message(config, replying):
    panel = TafsirPanelSession(
        ContentService(config, replying({"text": ""})), RequestTracker()
    )

    view = await panel.open(VERSE, "Al-Fatihah")

    assert view.status is ViewStatus.ERROR
    assert view.result is None
    assert view.error == "Gagal memuat tafsir. Silakan coba lagi."


@pytest.mark.asyncio
async def test_missing_key_surfaces_configuration_message(replying):
    keyless = GeminiConfig(api_key="", model="m", api_url="https://example.test")
    session = ThematicSession(ContentService(keyless, replying({})), RequestTracker())

    state = await session.generate("Akhlak Mulia")

    assert state.status is ViewStatus.ERROR
    assert state.error == "Kunci API belum dikonfigurasi."


@pytest.mark.asyncio
async def test_blank_theme_is_ignored(config, replying):
    transport = replying({})
    session = ThematicSession(ContentService(config, transport), RequestTracker())

    state = await session.generate("   ")

    assert state.status is ViewStatus.IDLE
    assert transport.requests == []


@pytest.mark.asyncio
async def test_reader_loads_and_toggles_mode(config, replying):
    verses = [{"number": n, "text": "x", "translation": "y"} for n in range(1, 8)]
    reader = ReaderSession(
        ContentService(config, replying({"verses": verses})), RequestTracker()
    )

    state = await reader.open(SurahRepository.get(1))

    assert state.status is ViewStatus.SUCCESS
    assert len(state.result.verses) == 7
    assert reader.shows_bismillah is False
    assert reader.toggle_mode() is ReaderMode.READING
    assert reader.toggle_mode() is ReaderMode.TRANSLATION


@pytest.mark.asyncio
async def test_reader_bismillah_rules(config, replying):
    reader = ReaderSession(ContentService(config, replying({})), RequestTracker())

    reader.surah = SurahRepository.get(9)
    assert reader.shows_bismillah is False
    reader.surah = SurahRepository.get(2)
    assert reader.shows_bismillah is True


@pytest.mark.asyncio
async def test_reader_navigation_discards_in_flight_result(config):
    release = asyncio.Event()
    verses = [{"number": n, "text": "x", "translation": "y"} for n in range(1, 8)]

    async def slow(request: httpx.Request) -> httpx.Response:
        await release.wait()
        return gemini_reply({"verses": verses})

    reader = ReaderSession(
        ContentService(config, httpx.MockTransport(slow)), RequestTracker()
    )
    task = asyncio.create_task(reader.open(SurahRepository.get(1)))
    await asyncio.sleep(0)

    reader.close()
    release.set()
    await task

    assert reader.surah is None
    assert reader.state.status is ViewStatus.IDLE
    assert reader.state.result is None
