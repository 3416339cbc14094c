# util/enums.py
from enum import Enum
from typing import NamedTuple
from fastapi import status


class Color(str, Enum):
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    BLUE = "\033[34m"

    def __str__(self):
        return self.value


class Environment(str, Enum):
    DEV = "dev"
    PROD = "prod"


class ErrorInfo(NamedTuple):
    message: str
    http_status: int


class ErrorMessage(Enum):
    API_KEY_MISSING = ErrorInfo(
        "Kunci API belum dikonfigurasi.", status.HTTP_503_SERVICE_UNAVAILABLE
    )
    SURAH_NOT_FOUND = ErrorInfo("Surat tidak ditemukan.", status.HTTP_404_NOT_FOUND)
    SURAH_FAILED = ErrorInfo(
        "Gagal memuat surat. Silakan coba lagi.", status.HTTP_502_BAD_GATEWAY
    )
    TAFSIR_FAILED = ErrorInfo(
        "Gagal memuat tafsir. Silakan coba lagi.", status.HTTP_502_BAD_GATEWAY
    )
    THEMATIC_FAILED = ErrorInfo(
        "Gagal menghasilkan tafsir tematik. Silakan coba lagi.",
        status.HTTP_502_BAD_GATEWAY,
    )
    PDF_EXPORT_FAILED = ErrorInfo(
        "Gagal mengekspor PDF. Silakan coba lagi.",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    NOTHING_TO_SHARE = ErrorInfo(
        "Belum ada hasil untuk dibagikan.", status.HTTP_409_CONFLICT
    )


class ViewStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class ReaderMode(str, Enum):
    TRANSLATION = "translation"  # Arabic + translation + tafsir action
    READING = "reading"  # Arabic only
