# service/session_service.py
"""
In-process view state for the reader, tafsir panel and thematic screens.

Each surface owns at most one outstanding request. Issuing a new one (another
source, another surah, closing the view) bumps that surface's generation, so a
late response from the older request is dropped instead of overwriting newer state.
"""
import logging
from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar
from core import share
from core.request_tracker import RequestTracker, RequestToken
from core.share import HostClipboard, NativeShare, ShareAction
from model.api import (
    ClipboardView,
    ReaderView,
    TafsirPanelView,
    TafsirRequest,
    ThematicRequest,
    ThematicView,
)
from model.quran import SurahData, SurahMeta, Verse
from model.tafsir import TafsirResult, TafsirSource, ThematicResult
from service.content_service import ContentService
from util.constants import NO_BISMILLAH_SURAHS
from util.enums import ErrorMessage, ReaderMode, ViewStatus
from util.errors import AppError

logger = logging.getLogger(__name__)

T = TypeVar("T")

READER = "reader"
TAFSIR_PANEL = "tafsir_panel"
THEMATIC = "thematic"


@dataclass
class ViewState(Generic[T]):
    status: ViewStatus = ViewStatus.IDLE
    result: Optional[T] = None
    error: Optional[str] = None

    def start(self) -> None:
        self.status = ViewStatus.LOADING
        self.result = None
        self.error = None

    def succeed(self, result: T) -> None:
        self.status = ViewStatus.SUCCESS
        self.result = result
        self.error = None

    def fail(self, message: str) -> None:
        self.status = ViewStatus.ERROR
        self.error = message


class ReaderSession:
    def __init__(self, content: ContentService, tracker: RequestTracker) -> None:
        self._content = content
        self._tracker = tracker
        self.surah: Optional[SurahMeta] = None
        self.mode = ReaderMode.TRANSLATION
        self.state: ViewState[SurahData] = ViewState()

    @property
    def shows_bismillah(self) -> bool:
        return self.surah is not None and self.surah.number not in NO_BISMILLAH_SURAHS

    def toggle_mode(self) -> ReaderMode:
        self.mode = (
            ReaderMode.READING
            if self.mode is ReaderMode.TRANSLATION
            else ReaderMode.TRANSLATION
        )
        return self.mode

    async def open(self, surah: SurahMeta) -> ViewState[SurahData]:
        self.surah = surah
        token = self._tracker.begin(READER)
        self.state.start()
        try:
            data = await self._content.load_surah(surah.number)
        except AppError as e:
            return self._settle_error(token, e)
        if self._tracker.is_current(token):
            self.state.succeed(data)
        else:
            logger.debug("session.reader.stale surah=%d", surah.number)
        return self.state

    def close(self) -> None:
        self._tracker.invalidate(READER)
        self.surah = None
        self.state = ViewState()

    def view(self) -> ReaderView:
        return ReaderView(
            surah=self.surah,
            mode=self.mode,
            showsBismillah=self.shows_bismillah,
            status=self.state.status,
            data=self.state.result,
            error=self.state.error,
        )

    def _settle_error(self, token: RequestToken, e: AppError) -> ViewState[SurahData]:
        if self._tracker.is_current(token):
            self.state.fail(str(e.detail))
        return self.state


@dataclass
class PanelState:
    is_open: bool = False
    verse: Optional[Verse] = None
    surah_name: str = ""
    source: TafsirSource = TafsirSource.IBN_KATHIR
    view: ViewState[TafsirResult] = field(default_factory=ViewState)


class TafsirPanelSession:
    """Side panel: closed -> open. Source changes replace whatever result was held."""

    def __init__(self, content: ContentService, tracker: RequestTracker) -> None:
        self._content = content
        self._tracker = tracker
        self.panel = PanelState()

    async def open(self, verse: Verse, surah_name: str) -> ViewState[TafsirResult]:
        self.panel.is_open = True
        self.panel.verse = verse
        self.panel.surah_name = surah_name
        return await self.select_source(self.panel.source)

    async def select_source(self, source: TafsirSource) -> ViewState[TafsirResult]:
        self.panel.source = source
        verse = self.panel.verse
        if not self.panel.is_open or verse is None:
            return self.panel.view

        token = self._tracker.begin(TAFSIR_PANEL)
        view = self.panel.view
        view.start()
        req = TafsirRequest(
            surahName=self.panel.surah_name,
            verseNumber=verse.number,
            verseText=verse.text,
            source=source,
        )
        try:
            result = await self._content.tafsir(req)
        except AppError as e:
            if self._tracker.is_current(token):
                view.fail(str(e.detail))
            return view
        if self._tracker.is_current(token):
            view.succeed(result)
        else:
            logger.debug("session.tafsir.stale source=%s", source.name)
        return view

    def close(self) -> None:
        self._tracker.invalidate(TAFSIR_PANEL)
        self.panel.is_open = False

    def view(self) -> TafsirPanelView:
        p = self.panel
        return TafsirPanelView(
            isOpen=p.is_open,
            surahName=p.surah_name,
            verse=p.verse,
            source=p.source,
            status=p.view.status,
            result=p.view.result,
            error=p.view.error,
        )


class ThematicSession:
    def __init__(self, content: ContentService, tracker: RequestTracker) -> None:
        self._content = content
        self._tracker = tracker
        self.theme = ""
        self.source = TafsirSource.QURAISH_SHIHAB
        self.state: ViewState[ThematicResult] = ViewState()

    async def generate(
        self, theme: str, source: Optional[TafsirSource] = None
    ) -> ViewState[ThematicResult]:
        if not theme.strip():
            return self.state
        if source is not None:
            self.source = source
        self.theme = theme
        token = self._tracker.begin(THEMATIC)
        self.state.start()
        try:
            result = await self._content.thematic(
                ThematicRequest(theme=theme, source=self.source)
            )
        except AppError as e:
            if self._tracker.is_current(token):
                self.state.fail(str(e.detail))
            return self.state
        if self._tracker.is_current(token):
            self.state.succeed(result)
        return self.state

    def view(self) -> ThematicView:
        return ThematicView(
            theme=self.theme,
            source=self.source,
            status=self.state.status,
            result=self.state.result,
            error=self.state.error,
        )


def _nothing_to_share() -> AppError:
    return AppError(
        ErrorMessage.NOTHING_TO_SHARE.value.message,
        ErrorMessage.NOTHING_TO_SHARE.value.http_status,
    )


class SessionHub:
    """
    The one user's screens. Reader, panel and thematic share a tracker, and
    share actions go through the host clipboard unless a native share is given.
    """

    def __init__(
        self,
        content: ContentService,
        clipboard: Optional[HostClipboard] = None,
        native_share: Optional[NativeShare] = None,
        reset_after: Optional[float] = None,
    ) -> None:
        tracker = RequestTracker()
        self.reader = ReaderSession(content, tracker)
        self.panel = TafsirPanelSession(content, tracker)
        self.thematic = ThematicSession(content, tracker)
        self.clipboard = clipboard or HostClipboard()
        self.share_action = ShareAction(
            self.clipboard.write, native_share=native_share, reset_after=reset_after
        )

    async def open_surah(self, number: int) -> ReaderView:
        meta = ContentService.surah_meta(number)
        # a new surah takes the old verse's panel with it
        self.panel.close()
        await self.reader.open(meta)
        return self.reader.view()

    async def share_tafsir(self) -> ClipboardView:
        p = self.panel.panel
        if not p.is_open or p.verse is None or p.view.result is None:
            raise _nothing_to_share()
        await self.share_action.share(
            share.tafsir_share(p.surah_name, p.verse, p.view.result)
        )
        return self.clipboard_view()

    async def share_thematic(self) -> ClipboardView:
        result = self.thematic.state.result
        if result is None:
            raise _nothing_to_share()
        await self.share_action.share(share.thematic_share(result))
        return self.clipboard_view()

    def clipboard_view(self) -> ClipboardView:
        return ClipboardView(text=self.clipboard.text, copied=self.share_action.copied)
