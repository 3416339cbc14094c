# core/request_tracker.py
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class RequestToken:
    surface: str
    generation: int


class RequestTracker:
    """
    Per-surface generation counter. Every new request on a surface bumps the
    generation; a response is applied only if its token is still the latest.
    The underlying network call is never cancelled, only ignored.
    """

    def __init__(self) -> None:
        self._generations: Dict[str, int] = {}

    def begin(self, surface: str) -> RequestToken:
        generation = self._generations.get(surface, 0) + 1
        self._generations[surface] = generation
        return RequestToken(surface=surface, generation=generation)

    def invalidate(self, surface: str) -> None:
        """Make any in-flight token for `surface` stale (navigation, panel close)."""
        self._generations[surface] = self._generations.get(surface, 0) + 1

    def is_current(self, token: RequestToken) -> bool:
        return self._generations.get(token.surface, 0) == token.generation
