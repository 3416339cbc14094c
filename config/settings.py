# config/settings.py
import os
import sys
from typing import Optional
from dotenv import load_dotenv
from pydantic import AliasChoices, ValidationError, Field
from pydantic_settings import BaseSettings
from util.enums import Environment
import logging


if os.getenv("APP_ENV", Environment.DEV) == Environment.DEV:
    load_dotenv()

_log = logging.getLogger("config.settings")


class Settings(BaseSettings):
    # App
    APP_ENV: str = Field(default=Environment.DEV.value, validation_alias="APP_ENV")
    HOST: str = Field(default="127.0.0.1", validation_alias="HOST")
    PORT: int = Field(default=8000, validation_alias="PORT")
    ALLOWED_ORIGIN: str = Field(
        default="http://localhost:5173", validation_alias="ALLOWED_ORIGIN"
    )

    # Gemini Settings (empty key is allowed at boot; requests fail fast instead)
    GEMINI_API_KEY: str = Field(
        default="", validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY")
    )
    GEMINI_MODEL: str = Field(
        default="gemini-2.5-flash", validation_alias="GEMINI_MODEL"
    )
    GEMINI_API_URL: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/models",
        validation_alias="GEMINI_API_URL",
    )
    GEMINI_TIMEOUT_SECONDS: Optional[float] = Field(
        default=None, validation_alias="GEMINI_TIMEOUT_SECONDS"
    )

    # Result shaping
    KEY_POINTS_MAX: int = 5
    SHARE_EXCERPT_CHARS: int = 500
    COPIED_RESET_SECONDS: float = 2.0

    # Export
    PDF_RENDER_SCALE: float = Field(default=2.0, validation_alias="PDF_RENDER_SCALE")
    PDF_CANVAS_PAGES: int = Field(default=20, validation_alias="PDF_CANVAS_PAGES")
    ATTRIBUTION_TEXT: str = (
        "Digenerate oleh Kajian Tafsir Al-Qur'an AI yang dibuat dan digagas oleh "
        "Ustadz Liyas Syarifudin, M. Pd."
    )

    # Logging knobs
    LOGGER_NAME: str = "kajian-tafsir"
    LOG_LEVEL: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    LOG_TO_FILE: bool = Field(default=False, validation_alias="LOG_TO_FILE")
    LOG_DIR: str = Field(default="logs", validation_alias="LOG_DIR")
    LOG_FILE_NAME: str = Field(default="app.log", validation_alias="LOG_FILE_NAME")
    LOG_MAX_BYTES: int = Field(
        default=10 * 1024 * 1024, validation_alias="LOG_MAX_BYTES"
    )
    LOG_BACKUP_COUNT: int = Field(default=5, validation_alias="LOG_BACKUP_COUNT")

    # Prompts
    SURAH_PROMPT: str = (
        "Provide the full Arabic text and Indonesian translation for Surah {number} ({name}).\n"
        "It has approximately {verse_count} verses.\n"
        "Number the verses in order starting from 1.\n"
        "Ensure strict JSON format.\n"
    )

    TAFSIR_PROMPT: str = (
        "Bertindaklah sebagai ahli tafsir Al-Quran.\n"
        "Berikan penjelasan tafsir yang mendalam untuk:\n"
        "Surah: {surah_name}, Ayat: {verse_number}\n"
        'Bunyi Ayat: "{verse_text}"\n'
        "\n"
        "Sumber Tafsir yang diminta: {source}.\n"
        "\n"
        "Jika sumber spesifik tidak memiliki komentar langsung untuk ayat ini, sintetiskan "
        "pandangan umum dari mazhab pemikiran yang diwakili oleh sumber tersebut.\n"
        "Sertakan {min_points}-{max_points} poin hikmah yang ringkas.\n"
        "Bahasa: Indonesia.\n"
        "Format output: JSON.\n"
    )

    THEMATIC_PROMPT: str = (
        "Anda adalah asisten studi Al-Quran yang ahli.\n"
        'Tugas: Buatlah kajian Tafsir Tematik (Maudhu\'i) tentang tema: "{theme}".\n'
        "Batasan: Gunakan ayat-ayat dari seluruh Al-Qur'an (Surah 1 s.d. 114) yang paling relevan.\n"
        "Sumber Rujukan: {source}.\n"
        "\n"
        "Instruksi:\n"
        "1. Pilih 3-5 ayat paling relevan dari Al-Qur'an yang membahas tema ini.\n"
        "2. Jelaskan kaitan ayat tersebut dengan tema.\n"
        "3. Buat sintesis tafsir yang menghubungkan ayat-ayat tersebut menjadi satu pemahaman utuh.\n"
        "4. Bahasa: Indonesia yang akademis namun mudah dipahami untuk ceramah.\n"
        "\n"
        "Format JSON:\n"
        "- theme: Judul tema\n"
        "- introduction: Pengantar singkat tentang tema ini dalam konteks Al-Qur'an.\n"
        "- verses: Array berisi ayat-ayat relevan (surahName, verseNumber, text (Arabic), "
        "translation, relevance).\n"
        "- explanation: Penjelasan tafsir mendalam (paragraf panjang).\n"
        "- conclusion: Kesimpulan utama atau pesan moral.\n"
    )


try:
    settings = Settings()
except ValidationError as e:
    print("❌ Missing/invalid environment variables:", file=sys.stderr)
    for err in e.errors():
        loc = ".".join(str(x) for x in err.get("loc", []))
        msg = err.get("msg", "")
        print(f" - {loc}: {msg}", file=sys.stderr)
    sys.exit(1)
except Exception as e:
    print(f"❌ Settings initialization failed: {e}", file=sys.stderr)
    sys.exit(1)
