# model/tafsir.py
from enum import Enum
from typing import Any
from pydantic import BaseModel, Field, field_validator


class TafsirSource(str, Enum):
    IBN_KATHIR = "Tafsir Ibn Kathir (Classic Sunni)"
    JALALAYN = "Tafsir Al-Jalalayn (Concise)"
    AL_QURTUBI = "Tafsir Al-Qurtubi (Legal/Fiqh)"
    AS_SADI = "Tafsir As-Sa'di (Clear/Modern)"
    QURAISH_SHIHAB = "M. Quraish Shihab (Indonesian Context)"
    HAMKA = "Buya Hamka (Tafsir Al-Azhar)"
    SAYYID_QUTB = "Fi Zilal al-Quran (Literary/Social)"
    MAARIFUL_QURAN = "Ma'ariful Quran (Mufti Shafi Usmani)"

    @classmethod
    def coerce(cls, value: Any) -> Any:
        """Accept either the label ("Tafsir Al-Jalalayn (Concise)") or the key ("JALALAYN")."""
        if isinstance(value, str) and value in cls.__members__:
            return cls[value]
        return value


class TafsirResult(BaseModel):
    source: str
    text: str
    keyPoints: list[str]


class ThematicVerseReference(BaseModel):
    surahName: str
    verseNumber: int
    text: str = ""
    translation: str = ""
    relevance: str = ""


class ThematicResult(BaseModel):
    theme: str
    introduction: str
    verses: list[ThematicVerseReference] = Field(default_factory=list)
    explanation: str
    conclusion: str
    source: str


class SourceOption(BaseModel):
    key: str
    label: str


# Wire shapes as returned by the generative service. Optional fields are
# repaired here; required ones are checked by the content layer.
class TafsirPayload(BaseModel):
    text: str = ""
    keyPoints: list[str] = Field(default_factory=list)

    @field_validator("text", mode="before")
    @classmethod
    def _none_text(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("keyPoints", mode="before")
    @classmethod
    def _none_points(cls, v: Any) -> Any:
        return [] if v is None else v


class ThematicPayload(BaseModel):
    theme: str | None = None
    introduction: str | None = None
    verses: list[dict[str, Any]] | None = None
    explanation: str | None = None
    conclusion: str | None = None
