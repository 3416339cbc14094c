# core/entities.py
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GeminiConfig:
    """
    Everything a content request needs to reach the generative service.
    An empty api_key is representable; the content layer rejects it before any I/O.
    """

    api_key: str
    model: str
    api_url: str
    timeout: Optional[float] = None  # None = wait on the service's own liveness


@dataclass
class GeneratedDocument:
    filename: str
    content: bytes
    media_type: str


@dataclass(frozen=True)
class SharePayload:
    title: str
    text: str


@dataclass(frozen=True)
class PageSlice:
    top: float  # canvas y where the slice starts (pt)
    height: float  # slice height on canvas (pt), <= one A4 page
