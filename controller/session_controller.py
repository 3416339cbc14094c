# controller/session_controller.py
from fastapi import APIRouter, Depends
from controller.controller_dependencies import get_session_hub
from model.api import (
    ClipboardView,
    ReaderView,
    SourceSelectRequest,
    SurahContentRequest,
    TafsirPanelOpenRequest,
    TafsirPanelView,
    ThematicSessionRequest,
    ThematicView,
)
from service.session_service import SessionHub
from util.constants import InternalURIs

session_router = APIRouter()


@session_router.get(InternalURIs.SESSION_READER, response_model=ReaderView)
async def reader(hub: SessionHub = Depends(get_session_hub)) -> ReaderView:
    return hub.reader.view()


@session_router.post(InternalURIs.SESSION_READER_OPEN, response_model=ReaderView)
async def open_surah(
    payload: SurahContentRequest, hub: SessionHub = Depends(get_session_hub)
) -> ReaderView:
    return await hub.open_surah(payload.surahNumber)


@session_router.post(InternalURIs.SESSION_READER_CLOSE, response_model=ReaderView)
async def close_surah(hub: SessionHub = Depends(get_session_hub)) -> ReaderView:
    hub.panel.close()
    hub.reader.close()
    return hub.reader.view()


@session_router.post(InternalURIs.SESSION_READER_MODE, response_model=ReaderView)
async def toggle_mode(hub: SessionHub = Depends(get_session_hub)) -> ReaderView:
    hub.reader.toggle_mode()
    return hub.reader.view()


@session_router.get(InternalURIs.SESSION_PANEL, response_model=TafsirPanelView)
async def panel(hub: SessionHub = Depends(get_session_hub)) -> TafsirPanelView:
    return hub.panel.view()


@session_router.post(InternalURIs.SESSION_PANEL_OPEN, response_model=TafsirPanelView)
async def open_panel(
    payload: TafsirPanelOpenRequest, hub: SessionHub = Depends(get_session_hub)
) -> TafsirPanelView:
    await hub.panel.open(payload.verse, payload.surahName)
    return hub.panel.view()


@session_router.post(InternalURIs.SESSION_PANEL_SOURCE, response_model=TafsirPanelView)
async def select_source(
    payload: SourceSelectRequest, hub: SessionHub = Depends(get_session_hub)
) -> TafsirPanelView:
    await hub.panel.select_source(payload.source)
    return hub.panel.view()


@session_router.post(InternalURIs.SESSION_PANEL_CLOSE, response_model=TafsirPanelView)
async def close_panel(hub: SessionHub = Depends(get_session_hub)) -> TafsirPanelView:
    hub.panel.close()
    return hub.panel.view()


@session_router.post(InternalURIs.SESSION_PANEL_SHARE, response_model=ClipboardView)
async def share_panel(hub: SessionHub = Depends(get_session_hub)) -> ClipboardView:
    return await hub.share_tafsir()


@session_router.get(InternalURIs.SESSION_THEMATIC, response_model=ThematicView)
async def thematic(hub: SessionHub = Depends(get_session_hub)) -> ThematicView:
    return hub.thematic.view()


@session_router.post(InternalURIs.SESSION_THEMATIC, response_model=ThematicView)
async def generate_thematic(
    payload: ThematicSessionRequest, hub: SessionHub = Depends(get_session_hub)
) -> ThematicView:
    await hub.thematic.generate(payload.theme, payload.source)
    return hub.thematic.view()


@session_router.post(InternalURIs.SESSION_THEMATIC_SHARE, response_model=ClipboardView)
async def share_thematic(hub: SessionHub = Depends(get_session_hub)) -> ClipboardView:
    return await hub.share_thematic()


@session_router.get(InternalURIs.SESSION_CLIPBOARD, response_model=ClipboardView)
async def clipboard(hub: SessionHub = Depends(get_session_hub)) -> ClipboardView:
    return hub.clipboard_view()
