# util/constants.py
from typing import Final


class InternalURIs:
    API = "/api"
    V1 = API + "/v1"
    SURAHS = V1 + "/surahs"
    SURAH_CONTENT = V1 + "/surah-content"
    TAFSIR_SOURCES = V1 + "/tafsir-sources"
    TAFSIR = V1 + "/tafsir"
    THEMES = V1 + "/themes"
    THEMATIC_TAFSIR = V1 + "/thematic-tafsir"
    EXPORT = V1 + "/export"
    EXPORT_TAFSIR_WORD = EXPORT + "/tafsir/word"
    EXPORT_TAFSIR_PDF = EXPORT + "/tafsir/pdf"
    EXPORT_THEMATIC_WORD = EXPORT + "/thematic/word"
    EXPORT_THEMATIC_PDF = EXPORT + "/thematic/pdf"
    SHARE_TAFSIR = V1 + "/share/tafsir"
    SHARE_THEMATIC = V1 + "/share/thematic"
    SESSION = V1 + "/session"
    SESSION_READER = SESSION + "/reader"
    SESSION_READER_OPEN = SESSION_READER + "/open"
    SESSION_READER_CLOSE = SESSION_READER + "/close"
    SESSION_READER_MODE = SESSION_READER + "/mode"
    SESSION_PANEL = SESSION + "/tafsir"
    SESSION_PANEL_OPEN = SESSION_PANEL + "/open"
    SESSION_PANEL_SOURCE = SESSION_PANEL + "/source"
    SESSION_PANEL_CLOSE = SESSION_PANEL + "/close"
    SESSION_PANEL_SHARE = SESSION_PANEL + "/share"
    SESSION_THEMATIC = SESSION + "/thematic"
    SESSION_THEMATIC_SHARE = SESSION_THEMATIC + "/share"
    SESSION_CLIPBOARD = SESSION + "/clipboard"


class MediaTypes:
    WORD = "application/msword"
    PDF = "application/pdf"


# Surahs that open without the Bismillah header.
NO_BISMILLAH_SURAHS: Final[frozenset[int]] = frozenset({1, 9})

BISMILLAH: Final[str] = "بِسْمِ ٱللَّهِ ٱلرَّحْمَٰنِ ٱلرَّحِيمِ"

PRESET_THEMES: Final[tuple[str, ...]] = (
    "Hari Kiamat (Eskatologi)",
    "Kebesaran Allah & Alam Semesta",
    "Surga dan Neraka",
    "Akhlak Mulia",
    "Anak Yatim & Fakir Miskin",
    "Kesabaran & Ujian",
    "Waktu & Masa",
    "Kisah Kaum Terdahulu",
)

KEY_POINTS_MIN: Final[int] = 3
