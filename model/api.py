# model/api.py
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from model.quran import SurahData, SurahMeta, Verse
from model.tafsir import TafsirResult, TafsirSource, ThematicResult
from util.enums import ReaderMode, ViewStatus


class SurahContentRequest(BaseModel):
    surahNumber: int = Field(ge=1, le=114)


class TafsirRequest(BaseModel):
    surahName: str = Field(min_length=1)
    verseNumber: int = Field(ge=1)
    verseText: str = Field(min_length=1)
    source: TafsirSource = TafsirSource.IBN_KATHIR

    @field_validator("source", mode="before")
    @classmethod
    def _source_key(cls, v):
        return TafsirSource.coerce(v)


class ThematicRequest(BaseModel):
    theme: str = Field(min_length=1)
    source: TafsirSource = TafsirSource.QURAISH_SHIHAB

    @field_validator("theme")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("theme must not be blank")
        return v.strip()

    @field_validator("source", mode="before")
    @classmethod
    def _source_key(cls, v):
        return TafsirSource.coerce(v)


class TafsirDocumentRequest(BaseModel):
    surahName: str = Field(min_length=1)
    verse: Verse
    result: TafsirResult


class ThematicDocumentRequest(BaseModel):
    result: ThematicResult


class ShareResponse(BaseModel):
    title: str
    text: str


class TafsirPanelOpenRequest(BaseModel):
    surahName: str = Field(min_length=1)
    verse: Verse


class SourceSelectRequest(BaseModel):
    source: TafsirSource

    @field_validator("source", mode="before")
    @classmethod
    def _source_key(cls, v):
        return TafsirSource.coerce(v)


class ThematicSessionRequest(BaseModel):
    theme: str
    source: Optional[TafsirSource] = None

    @field_validator("source", mode="before")
    @classmethod
    def _source_key(cls, v):
        return TafsirSource.coerce(v)


# Session snapshots: what the reader, panel and thematic screens render.
class ReaderView(BaseModel):
    surah: Optional[SurahMeta] = None
    mode: ReaderMode
    showsBismillah: bool
    status: ViewStatus
    data: Optional[SurahData] = None
    error: Optional[str] = None


class TafsirPanelView(BaseModel):
    isOpen: bool
    surahName: str
    verse: Optional[Verse] = None
    source: TafsirSource
    status: ViewStatus
    result: Optional[TafsirResult] = None
    error: Optional[str] = None


class ThematicView(BaseModel):
    theme: str
    source: TafsirSource
    status: ViewStatus
    result: Optional[ThematicResult] = None
    error: Optional[str] = None


class ClipboardView(BaseModel):
    text: str
    copied: bool
