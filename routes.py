# routes.py
from fastapi import FastAPI
from controller.content_controller import content_router
from controller.export_controller import export_router
from controller.session_controller import session_router


def register_routes(app: FastAPI) -> None:
    """Register controllers here."""
    app.include_router(content_router)
    app.include_router(export_router)
    app.include_router(session_router)
