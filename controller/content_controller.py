# controller/content_controller.py
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from controller.controller_dependencies import get_content_service
from model.api import SurahContentRequest, TafsirRequest, ThematicRequest
from model.quran import SurahData, SurahMeta
from model.tafsir import SourceOption, TafsirResult, TafsirSource, ThematicResult
from repository.surah_repository import SurahRepository
from service.content_service import ContentService
from util.constants import InternalURIs, PRESET_THEMES

content_router = APIRouter()


@content_router.get(InternalURIs.SURAHS, response_model=list[SurahMeta])
async def list_surahs(q: Optional[str] = Query(default=None, max_length=64)):
    return SurahRepository.search(q)


@content_router.post(
    InternalURIs.SURAH_CONTENT,
    response_model=SurahData,
    status_code=status.HTTP_200_OK,
)
async def surah_content(
    payload: SurahContentRequest,
    service: ContentService = Depends(get_content_service),
) -> SurahData:
    return await service.load_surah(payload.surahNumber)


@content_router.get(InternalURIs.TAFSIR_SOURCES, response_model=list[SourceOption])
async def tafsir_sources():
    return [SourceOption(key=s.name, label=s.value) for s in TafsirSource]


@content_router.post(InternalURIs.TAFSIR, response_model=TafsirResult)
async def tafsir(
    payload: TafsirRequest,
    service: ContentService = Depends(get_content_service),
) -> TafsirResult:
    return await service.tafsir(payload)


@content_router.get(InternalURIs.THEMES, response_model=list[str])
async def themes():
    return list(PRESET_THEMES)


@content_router.post(InternalURIs.THEMATIC_TAFSIR, response_model=ThematicResult)
async def thematic_tafsir(
    payload: ThematicRequest,
    service: ContentService = Depends(get_content_service),
) -> ThematicResult:
    return await service.thematic(payload)
