# model/quran.py
from pydantic import BaseModel, ConfigDict, Field, model_validator


class SurahMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=1, le=114)
    name: str = Field(min_length=1)
    englishName: str
    verseCount: int = Field(gt=0)
    meaning: str


class Verse(BaseModel):
    number: int = Field(ge=1)
    text: str = Field(min_length=1)
    translation: str


class SurahData(BaseModel):
    meta: SurahMeta
    verses: list[Verse]

    # Reader contract: verses ascend contiguously from 1
    @model_validator(mode="after")
    def _contiguous(self) -> "SurahData":
        numbers = [v.number for v in self.verses]
        if not numbers:
            raise ValueError("surah has no verses")
        if numbers != list(range(1, len(numbers) + 1)):
            raise ValueError("verse numbers must ascend contiguously from 1")
        return self
