# service/export_service.py
import logging
from datetime import datetime
from typing import Callable, Optional
from core import documents
from core.documents import PDF_CSS
from core.entities import GeneratedDocument
from core.pdf_render import render_pdf
from model.quran import Verse
from model.tafsir import TafsirResult, ThematicResult
from util import functions
from util.constants import MediaTypes
from util.enums import ErrorMessage
from util.errors import AppError, ExportError

logger = logging.getLogger(__name__)

# Word opens UTF-8 HTML reliably only with a BOM.
_BOM = "\ufeff"


def tafsir_filename(surah_name: str, verse_number: int, ext: str) -> str:
    return f"Materi_Ceramah_{functions.safe_filename(surah_name)}_Ayat_{verse_number}.{ext}"


def thematic_filename(theme: str, ext: str) -> str:
    return f"Tafsir_Tematik_{functions.safe_filename(theme)}.{ext}"


class ExportService:
    """
    Read-only consumer of finished results. Nothing here feeds back into content state.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._now = clock or datetime.now

    def tafsir_word(
        self, surah_name: str, verse: Verse, result: TafsirResult
    ) -> GeneratedDocument:
        html = documents.tafsir_word_html(surah_name, verse, result, self._now())
        logger.info("export.word.ok kind=tafsir verse=%d", verse.number)
        return GeneratedDocument(
            filename=tafsir_filename(surah_name, verse.number, "doc"),
            content=(_BOM + html).encode("utf-8"),
            media_type=MediaTypes.WORD,
        )

    def thematic_word(self, result: ThematicResult) -> GeneratedDocument:
        html = documents.thematic_word_html(result, self._now())
        logger.info("export.word.ok kind=thematic verses=%d", len(result.verses))
        return GeneratedDocument(
            filename=thematic_filename(result.theme, "doc"),
            content=(_BOM + html).encode("utf-8"),
            media_type=MediaTypes.WORD,
        )

    def tafsir_pdf(
        self, surah_name: str, verse: Verse, result: TafsirResult
    ) -> GeneratedDocument:
        html = documents.tafsir_pdf_html(surah_name, verse, result, self._now())
        return GeneratedDocument(
            filename=tafsir_filename(surah_name, verse.number, "pdf"),
            content=self._pdf(html),
            media_type=MediaTypes.PDF,
        )

    def thematic_pdf(self, result: ThematicResult) -> GeneratedDocument:
        html = documents.thematic_pdf_html(result, self._now())
        return GeneratedDocument(
            filename=thematic_filename(result.theme, "pdf"),
            content=self._pdf(html),
            media_type=MediaTypes.PDF,
        )

    @staticmethod
    def _pdf(html: str) -> bytes:
        try:
            return render_pdf(html, PDF_CSS)
        except ExportError as e:
            logger.error("export.pdf.failed cause=%s", e)
            raise AppError(
                ErrorMessage.PDF_EXPORT_FAILED.value.message,
                ErrorMessage.PDF_EXPORT_FAILED.value.http_status,
            ) from e
