from datetime import datetime

import pytest

from service.export_service import tafsir_filename, thematic_filename
from util.functions import clip_chars, format_id_date, paragraphs, safe_filename


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Al-Baqarah", "al_baqarah"),
        ("Ali 'Imran", "ali__imran"),
        ("Kesabaran & Ujian", "kesabaran___ujian"),
        ("Yasin", "yasin"),
        ("Sabır", "sab_r"),
        ("Kesabaran \u017f", "kesabaran__"),
        ("\u212aisah", "_isah"),
        ("İman", "_man"),
    ],
)
def test_safe_filename(name, expected):
    assert safe_filename(name) == expected


def test_document_filenames():
    assert tafsir_filename("Al-Baqarah", 255, "doc") == "Materi_Ceramah_al_baqarah_Ayat_255.doc"
    assert thematic_filename("Waktu & Masa", "pdf") == "Tafsir_Tematik_waktu___masa.pdf"


def test_clip_chars():
    assert clip_chars("a" * 500) == "a" * 500
    assert clip_chars("a" * 501) == "a" * 500 + "..."


def test_paragraphs_keep_empty_lines():
    assert paragraphs("satu\n\ndua") == ["satu", "", "dua"]


def test_format_id_date():
    moment = datetime(2026, 10, 17, 9, 30)
    assert format_id_date(moment) == "17/10/2026"
    assert format_id_date(moment, long=True) == "Sabtu, 17 Oktober 2026"


def test_filenames_survive_header_encoding():
    name = thematic_filename("Sabır ſ K", "pdf")

    assert name.isascii()
    name.encode("latin-1")
