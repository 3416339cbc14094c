# core/share.py
import asyncio
from typing import Awaitable, Callable, Optional
from config.settings import settings
from core.entities import SharePayload
from model.quran import Verse
from model.tafsir import TafsirResult, ThematicResult
from util import functions
import logging

logger = logging.getLogger(__name__)

NativeShare = Callable[[str, str], Awaitable[None]]
Clipboard = Callable[[str], None]


def tafsir_share(surah_name: str, verse: Verse, result: TafsirResult) -> SharePayload:
    """Plain-text summary with chat-style *bold* / _italic_ markers."""
    title = f"Tafsir {surah_name} Ayat {verse.number}"
    excerpt = functions.clip_chars(result.text, settings.SHARE_EXCERPT_CHARS)
    text = (
        f"*{settings.ATTRIBUTION_TEXT}*\n\n"
        f"*{title}*\n\n"
        f"{verse.text}\n"
        f'_"{verse.translation}"_\n\n'
        f"*Penjelasan ({result.source}):*\n"
        f"{excerpt}\n\n"
        "*Hikmah:*\n" + "\n".join(f"• {p}" for p in result.keyPoints)
    )
    return SharePayload(title=title, text=text)


def thematic_share(result: ThematicResult) -> SharePayload:
    title = f"Tafsir Tematik: {result.theme}"
    text = (
        f"*{settings.ATTRIBUTION_TEXT}*\n\n"
        f"*{title}*\n"
        f"Sumber: {result.source}\n\n"
        f"*Pengantar:*\n{result.introduction}\n\n"
        f"*Kesimpulan:*\n{result.conclusion}"
    )
    return SharePayload(title=title, text=text)


class HostClipboard:
    """Clipboard of a process with no desktop: the UI polls the last copied text."""

    def __init__(self) -> None:
        self.text = ""

    def write(self, text: str) -> None:
        self.text = text


class ShareAction:
    """
    Native share when the host offers one, clipboard otherwise. After a clipboard
    copy `copied` stays True for `reset_after` seconds, then flips back.
    """

    def __init__(
        self,
        clipboard: Clipboard,
        native_share: Optional[NativeShare] = None,
        reset_after: Optional[float] = None,
    ) -> None:
        self._clipboard = clipboard
        self._native_share = native_share
        self._reset_after = (
            settings.COPIED_RESET_SECONDS if reset_after is None else reset_after
        )
        self._reset_handle: Optional[asyncio.TimerHandle] = None
        self.copied = False

    async def share(self, payload: SharePayload) -> None:
        if self._native_share is not None:
            try:
                await self._native_share(payload.title, payload.text)
            except Exception as e:
                # dismissed share sheets land here too
                logger.info("share.native.aborted err=%s", type(e).__name__)
            return

        self._clipboard(payload.text)
        self.copied = True
        if self._reset_handle is not None:
            self._reset_handle.cancel()
        loop = asyncio.get_running_loop()
        self._reset_handle = loop.call_later(self._reset_after, self._reset)
        logger.debug("share.clipboard.copied chars=%d", len(payload.text))

    def _reset(self) -> None:
        self.copied = False
        self._reset_handle = None
