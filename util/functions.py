# util/functions.py
import re
from datetime import datetime

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")

_ID_WEEKDAYS = ("Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu")
_ID_MONTHS = (
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
)


def safe_filename(name: str) -> str:
    """
    - Replace every non-alphanumeric character with '_' and lower-case the result.
    - "Al-Baqarah" -> "al_baqarah"
    """
    return _NON_ALNUM.sub("_", name).lower()


def clip_chars(text: str, max_chars: int = 500) -> str:
    """
    - Trim `text` to at most `max_chars` characters.
    - Adds '...' when trimming occurs.
    """
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + "..."


def paragraphs(text: str) -> list[str]:
    return text.split("\n")


def format_id_date(moment: datetime, long: bool = False) -> str:
    """
    Indonesian calendar date.
      long=False -> "17/10/2026"
      long=True  -> "Sabtu, 17 Oktober 2026"
    """
    if not long:
        return f"{moment.day}/{moment.month}/{moment.year}"
    weekday = _ID_WEEKDAYS[moment.weekday()]
    month = _ID_MONTHS[moment.month - 1]
    return f"{weekday}, {moment.day} {month} {moment.year}"
