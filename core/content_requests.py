# core/content_requests.py
from typing import Any, Dict, List, Optional
import httpx
from pydantic import ValidationError
from config.settings import settings
from core.entities import GeminiConfig
from core.gemini_client import generate_json, require_credential
from core.response_schemas import SURAH_SCHEMA, TAFSIR_SCHEMA, THEMATIC_SCHEMA
from model.quran import SurahData, Verse
from model.tafsir import (
    TafsirPayload,
    TafsirResult,
    TafsirSource,
    ThematicPayload,
    ThematicResult,
    ThematicVerseReference,
)
from repository.surah_repository import SurahRepository
from util.constants import KEY_POINTS_MIN
from util.errors import UpstreamError
import logging

logger = logging.getLogger(__name__)


def _surah_prompt(surah_number: int, surah_name: str, verse_count: int) -> str:
    return settings.SURAH_PROMPT.format(
        number=surah_number, name=surah_name, verse_count=verse_count
    )


def _tafsir_prompt(
    surah_name: str, verse_number: int, verse_text: str, source: TafsirSource
) -> str:
    return settings.TAFSIR_PROMPT.format(
        surah_name=surah_name,
        verse_number=verse_number,
        verse_text=verse_text,
        source=source.value,
        min_points=KEY_POINTS_MIN,
        max_points=settings.KEY_POINTS_MAX,
    )


def _thematic_prompt(theme: str, source: TafsirSource) -> str:
    return settings.THEMATIC_PROMPT.format(theme=theme, source=source.value)


def _as_int(value: Any) -> Optional[int]:
    """NUMBER fields may arrive as 3, 3.0 or "3"."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not number.is_integer():
        return None
    return int(number)


async def fetch_surah_content(
    config: GeminiConfig,
    surah_number: int,
    surah_name: str,
    verse_count: int,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> SurahData:
    """
    Ask the service for every verse of one surah (Arabic + Indonesian translation).
    englishName / meaning always come from the local table; the AI supplies verses only.
    Verses are returned sorted; a gap, duplicate or empty list is an UpstreamError.
    """
    require_credential(config)
    if not 1 <= surah_number <= 114:
        raise ValueError(f"surah_number out of range: {surah_number}")
    if not surah_name.strip():
        raise ValueError("surah_name must not be empty")
    if verse_count <= 0:
        raise ValueError("verse_count must be positive")

    data = await generate_json(
        config,
        prompt=_surah_prompt(surah_number, surah_name, verse_count),
        schema=SURAH_SCHEMA,
        op="surah",
        transport=transport,
    )

    raw_verses = data.get("verses")
    if not isinstance(raw_verses, list):
        raise UpstreamError("verses missing from response", {"surah": surah_number})

    local = SurahRepository.get(surah_number)
    try:
        verses = sorted(
            (Verse.model_validate(v) for v in raw_verses), key=lambda v: v.number
        )
        result = SurahData.model_validate(
            {
                "meta": {
                    "number": surah_number,
                    "name": surah_name,
                    "englishName": local.englishName if local else "",
                    "verseCount": verse_count,
                    "meaning": local.meaning if local else "",
                },
                "verses": verses,
            }
        )
    except ValidationError as e:
        raise UpstreamError(
            "verses break the response contract",
            {"surah": surah_number, "errors": e.error_count()},
        ) from e

    if len(result.verses) != verse_count:
        logger.warning(
            "ai.surah.count_mismatch surah=%d expected=%d got=%d",
            surah_number,
            verse_count,
            len(result.verses),
        )
    logger.info("ai.surah.ok surah=%d verses=%d", surah_number, len(result.verses))
    return result


async def fetch_tafsir(
    config: GeminiConfig,
    surah_name: str,
    verse_number: int,
    verse_text: str,
    source: TafsirSource,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> TafsirResult:
    """
    Exegesis of one verse through the lens of `source`. The prompt asks the model to
    synthesize the tradition's general stance when no direct commentary exists, so
    there is no "not found" outcome. Blank text or no key points is an UpstreamError.
    """
    require_credential(config)

    data = await generate_json(
        config,
        prompt=_tafsir_prompt(surah_name, verse_number, verse_text, source),
        schema=TAFSIR_SCHEMA,
        op="tafsir",
        transport=transport,
    )
    try:
        payload = TafsirPayload.model_validate(data)
    except ValidationError as e:
        raise UpstreamError(
            "tafsir breaks the response contract", {"errors": e.error_count()}
        ) from e

    text = payload.text.strip()
    points = [p.strip() for p in payload.keyPoints if p and p.strip()]
    if not text:
        raise UpstreamError("tafsir text missing", {"verse": verse_number})
    if not points:
        raise UpstreamError("tafsir key points missing", {"verse": verse_number})

    logger.info(
        "ai.tafsir.ok verse=%d source=%s points=%d",
        verse_number,
        source.name,
        len(points),
    )
    return TafsirResult(
        source=source.value, text=text, keyPoints=points[: settings.KEY_POINTS_MAX]
    )


def _thematic_verses(raw: Optional[List[Dict[str, Any]]]) -> List[ThematicVerseReference]:
    out: List[ThematicVerseReference] = []
    for item in raw or []:
        surah_name = str(item.get("surahName") or "").strip()
        verse_number = _as_int(item.get("verseNumber"))
        if not surah_name or verse_number is None:
            # unusable reference; keep the rest of the study
            continue
        out.append(
            ThematicVerseReference(
                surahName=surah_name,
                verseNumber=verse_number,
                text=str(item.get("text") or ""),
                translation=str(item.get("translation") or ""),
                relevance=str(item.get("relevance") or ""),
            )
        )
    return out


async def generate_thematic_tafsir(
    config: GeminiConfig,
    theme: str,
    source: TafsirSource,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ThematicResult:
    """
    Maudhu'i study: 3-5 verses from anywhere in the Qur'an woven around `theme`.
    Missing verses degrade to []; the verse count is requested, not enforced.
    """
    require_credential(config)
    if not theme.strip():
        raise ValueError("theme must not be empty")

    data = await generate_json(
        config,
        prompt=_thematic_prompt(theme, source),
        schema=THEMATIC_SCHEMA,
        op="thematic",
        transport=transport,
    )
    try:
        payload = ThematicPayload.model_validate(data)
    except ValidationError as e:
        raise UpstreamError(
            "thematic study breaks the response contract", {"errors": e.error_count()}
        ) from e

    introduction = (payload.introduction or "").strip()
    explanation = (payload.explanation or "").strip()
    conclusion = (payload.conclusion or "").strip()
    if not (introduction or explanation or conclusion):
        raise UpstreamError("thematic study has no body", {"theme": theme})

    verses = _thematic_verses(payload.verses)
    logger.info("ai.thematic.ok source=%s verses=%d", source.name, len(verses))
    return ThematicResult(
        theme=(payload.theme or "").strip() or theme.strip(),
        introduction=introduction,
        verses=verses,
        explanation=explanation,
        conclusion=conclusion,
        source=source.value,
    )
