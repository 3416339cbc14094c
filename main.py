# main.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware
import routes
from config.settings import settings
from util.enums import Color, Environment
from util.errors import ContentError
from util.logger import init_logger, shutdown_logger


@asynccontextmanager
async def lifespan(fastApi: FastAPI):
    logger = init_logger()
    print(f"{Color.GREEN}Kajian Tafsir booting ({settings.APP_ENV})...{Color.RESET}")
    if not settings.GEMINI_API_KEY:
        # content routes answer 503 until a key is set
        logger.warning("config.api_key.missing model=%s", settings.GEMINI_MODEL)
    else:
        logger.info("config.ready model=%s", settings.GEMINI_MODEL)
    print(f"{Color.BLUE}Listening on {settings.HOST}:{settings.PORT}{Color.RESET}")
    try:
        yield
    finally:
        logger.info("app.shutdown")
        print(f"{Color.RED}Kajian Tafsir stopped{Color.RESET}")
        shutdown_logger()


app: FastAPI = FastAPI(title="Kajian Tafsir Al-Qur'an", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.ALLOWED_ORIGIN],
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Accept"],
    # the browser needs this to read the download filename
    expose_headers=["Content-Disposition"],
)


@app.get("/healthz")
async def healthz():
    return {"ok": True}


@app.exception_handler(ContentError)
async def content_error_handler(request: Request, exc: ContentError):
    # Services translate these; anything reaching here escaped a boundary.
    logging.getLogger(settings.LOGGER_NAME).error(
        "app.unhandled path=%s cause=%s", request.url.path, exc
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Terjadi kesalahan. Silakan coba lagi."},
    )


routes.register_routes(app)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.APP_ENV == Environment.DEV,
    )
