# controller/controller_dependencies.py
from functools import lru_cache
from fastapi import Response
from core.entities import GeneratedDocument
from service.content_service import ContentService
from service.export_service import ExportService
from service.session_service import SessionHub


def get_content_service() -> ContentService:
    return ContentService()


def get_export_service() -> ExportService:
    return ExportService()


@lru_cache(maxsize=1)
def get_session_hub() -> SessionHub:
    # One user, one set of screens for the life of the process
    return SessionHub(get_content_service())


def document_response(doc: GeneratedDocument) -> Response:
    # Browser download: attachment + filename
    return Response(
        content=doc.content,
        media_type=doc.media_type,
        headers={"Content-Disposition": f'attachment; filename="{doc.filename}"'},
    )
