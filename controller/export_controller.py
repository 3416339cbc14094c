# controller/export_controller.py
from fastapi import APIRouter, Depends
from controller.controller_dependencies import document_response, get_export_service
from core import share
from model.api import ShareResponse, TafsirDocumentRequest, ThematicDocumentRequest
from service.export_service import ExportService
from util.constants import InternalURIs

export_router = APIRouter()


# PDF handlers are sync on purpose: rasterizing is CPU-bound, FastAPI runs them in its threadpool.
@export_router.post(InternalURIs.EXPORT_TAFSIR_WORD)
def export_tafsir_word(
    payload: TafsirDocumentRequest,
    service: ExportService = Depends(get_export_service),
):
    return document_response(
        service.tafsir_word(payload.surahName, payload.verse, payload.result)
    )


@export_router.post(InternalURIs.EXPORT_TAFSIR_PDF)
def export_tafsir_pdf(
    payload: TafsirDocumentRequest,
    service: ExportService = Depends(get_export_service),
):
    return document_response(
        service.tafsir_pdf(payload.surahName, payload.verse, payload.result)
    )


@export_router.post(InternalURIs.EXPORT_THEMATIC_WORD)
def export_thematic_word(
    payload: ThematicDocumentRequest,
    service: ExportService = Depends(get_export_service),
):
    return document_response(service.thematic_word(payload.result))


@export_router.post(InternalURIs.EXPORT_THEMATIC_PDF)
def export_thematic_pdf(
    payload: ThematicDocumentRequest,
    service: ExportService = Depends(get_export_service),
):
    return document_response(service.thematic_pdf(payload.result))


@export_router.post(InternalURIs.SHARE_TAFSIR, response_model=ShareResponse)
async def share_tafsir(payload: TafsirDocumentRequest) -> ShareResponse:
    p = share.tafsir_share(payload.surahName, payload.verse, payload.result)
    return ShareResponse(title=p.title, text=p.text)


@export_router.post(InternalURIs.SHARE_THEMATIC, response_model=ShareResponse)
async def share_thematic(payload: ThematicDocumentRequest) -> ShareResponse:
    p = share.thematic_share(payload.result)
    return ShareResponse(title=p.title, text=p.text)
