# service/content_service.py
import logging
from typing import Optional
import httpx
from config.settings import settings
from core import content_requests
from core.entities import GeminiConfig
from model.api import TafsirRequest, ThematicRequest
from model.quran import SurahData, SurahMeta
from model.tafsir import TafsirResult, ThematicResult
from repository.surah_repository import SurahRepository
from util.enums import ErrorInfo, ErrorMessage
from util.errors import AppError, ConfigurationError, ContentError

logger = logging.getLogger(__name__)


def default_config() -> GeminiConfig:
    return GeminiConfig(
        api_key=settings.GEMINI_API_KEY,
        model=settings.GEMINI_MODEL,
        api_url=settings.GEMINI_API_URL,
        timeout=settings.GEMINI_TIMEOUT_SECONDS,
    )


def _boundary_error(e: ContentError, failed: ErrorMessage, event: str) -> AppError:
    """
    Log the real cause, hand the caller only a localized message.
    """
    info: ErrorInfo = (
        ErrorMessage.API_KEY_MISSING.value
        if isinstance(e, ConfigurationError)
        else failed.value
    )
    logger.error("%s.error kind=%s cause=%s", event, type(e).__name__, e)
    return AppError(info.message, info.http_status)


class ContentService:
    """
    Call boundary of the content request layer: one round trip per call, no retry.
    """

    def __init__(
        self,
        config: Optional[GeminiConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = config or default_config()
        self._transport = transport

    @staticmethod
    def surah_meta(number: int) -> SurahMeta:
        meta = SurahRepository.get(number)
        if meta is None:
            raise AppError(
                ErrorMessage.SURAH_NOT_FOUND.value.message,
                ErrorMessage.SURAH_NOT_FOUND.value.http_status,
            )
        return meta

    async def load_surah(self, number: int) -> SurahData:
        meta = self.surah_meta(number)
        try:
            return await content_requests.fetch_surah_content(
                self._config,
                meta.number,
                meta.name,
                meta.verseCount,
                transport=self._transport,
            )
        except ContentError as e:
            raise _boundary_error(e, ErrorMessage.SURAH_FAILED, "surah.load") from e

    async def tafsir(self, req: TafsirRequest) -> TafsirResult:
        try:
            return await content_requests.fetch_tafsir(
                self._config,
                req.surahName,
                req.verseNumber,
                req.verseText,
                req.source,
                transport=self._transport,
            )
        except ContentError as e:
            raise _boundary_error(e, ErrorMessage.TAFSIR_FAILED, "tafsir.load") from e

    async def thematic(self, req: ThematicRequest) -> ThematicResult:
        try:
            return await content_requests.generate_thematic_tafsir(
                self._config, req.theme, req.source, transport=self._transport
            )
        except ContentError as e:
            raise _boundary_error(
                e, ErrorMessage.THEMATIC_FAILED, "thematic.load"
            ) from e
