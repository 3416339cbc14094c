# core/documents.py
"""
HTML documents for the export layer.

Word export ships the HTML directly as an Office-compatible .doc. PDF export
feeds a separate, simpler stylesheet to the offscreen renderer in core.pdf_render.
All generated text is escaped before it lands in markup.
"""
from datetime import datetime
from html import escape
from typing import Final, Iterable
from config.settings import settings
from model.quran import Verse
from model.tafsir import TafsirResult, ThematicResult
from util import functions

OFFICE_HTML_OPEN: Final[str] = (
    "<html xmlns:o='urn:schemas-microsoft-com:office:office' "
    "xmlns:w='urn:schemas-microsoft-com:office:word' "
    "xmlns='http://www.w3.org/TR/REC-html40'>"
)

AI_NOTICE: Final[str] = "Dokumen ini dihasilkan oleh AI berdasarkan referensi kitab tafsir."

WORD_TAFSIR_CSS: Final[str] = """
body { font-family: 'Calibri', 'Arial', sans-serif; font-size: 11pt; line-height: 1.5; color: #000000; }
.header { text-align: center; margin-bottom: 20px; border-bottom: 3px solid #047857; padding-bottom: 15px; }
.attribution { font-size: 16pt; font-weight: bold; color: #047857; margin-bottom: 10px; text-transform: uppercase; }
.title { font-size: 14pt; font-weight: bold; color: #333; margin-bottom: 5px; }
.subtitle { font-size: 11pt; color: #555; }
.section { margin-bottom: 20px; }
.section-title { font-size: 13pt; font-weight: bold; color: #065f46; border-bottom: 1px solid #ddd; padding-bottom: 3px; margin-bottom: 10px; margin-top: 15px; }
.arabic-box { background-color: #f8fafc; padding: 15px; border: 1px solid #e2e8f0; text-align: right; margin-bottom: 10px; }
.arabic { font-family: 'Traditional Arabic', 'Amiri', sans-serif; font-size: 24pt; direction: rtl; color: #000; line-height: 2; }
.translation { font-style: italic; color: #334155; margin-bottom: 5px; display: block; }
.source-badge { background-color: #ecfdf5; color: #047857; padding: 2px 8px; font-size: 9pt; font-weight: bold; margin-bottom: 10px; border: 1px solid #a7f3d0; }
.content-text { text-align: justify; }
.hikmah-list { background-color: #fffbeb; border: 1px solid #fcd34d; padding: 15px; }
.timestamp { font-size: 9pt; color: #94a3b8; text-align: center; margin-top: 30px; border-top: 1px solid #eee; padding-top: 10px; }
"""

WORD_THEMATIC_CSS: Final[str] = """
body { font-family: 'Calibri', 'Arial', sans-serif; font-size: 11pt; line-height: 1.5; color: #000; }
.header { text-align: center; border-bottom: 3px solid #047857; padding-bottom: 15px; margin-bottom: 20px; }
.attribution { font-size: 16pt; font-weight: bold; color: #047857; margin-bottom: 10px; text-transform: uppercase; }
.title { font-size: 16pt; font-weight: bold; color: #333; margin-bottom: 5px; }
.meta { color: #555; font-size: 10pt; }
h2 { color: #065f46; font-size: 14pt; border-bottom: 1px solid #ddd; margin-top: 20px; }
.verse-box { background: #f8fafc; border: 1px solid #e2e8f0; padding: 10px; margin-bottom: 15px; }
.arabic { font-family: 'Traditional Arabic', serif; font-size: 18pt; text-align: right; margin-bottom: 5px; }
.translation { font-style: italic; color: #333; }
.relevance { font-size: 10pt; color: #047857; margin-top: 5px; font-weight: bold; }
.content { text-align: justify; }
.timestamp { margin-top: 30px; text-align: center; font-size: 9pt; color: #64748b; border-top: 1px solid #eee; padding-top: 10px; }
"""

# Story (MuPDF) supports a CSS subset: no flex, no border-radius.
PDF_CSS: Final[str] = """
body { font-family: sans-serif; color: #333333; font-size: 10.5pt; line-height: 1.5; }
h1 { color: #047857; font-size: 13pt; text-align: center; text-transform: uppercase; margin: 0 0 8pt 0; }
h2 { color: #065f46; font-size: 12pt; border-bottom: 1px solid #dddddd; padding-bottom: 4pt; margin: 14pt 0 8pt 0; }
.masthead { text-align: center; border-bottom: 2px solid #047857; padding-bottom: 10pt; margin-bottom: 14pt; }
.subtitle { color: #666666; text-align: center; }
.arabic { font-size: 20pt; text-align: right; line-height: 2; color: #000000; background-color: #f8fafc; padding: 10pt; }
.translation { font-style: italic; color: #475569; }
.ref { font-size: 9pt; color: #94a3b8; }
.badge { color: #047857; font-weight: bold; font-size: 9pt; }
.body-text { text-align: justify; color: #334155; }
.boxed { background-color: #fffbeb; padding: 10pt; color: #78350f; }
.relevance { font-size: 9pt; color: #64748b; }
.footer { margin-top: 28pt; text-align: center; font-size: 8pt; color: #94a3b8; }
"""


def _paras(text: str, css_class: str = "") -> str:
    attr = f' class="{css_class}"' if css_class else ""
    return "".join(f"<p{attr}>{escape(p)}</p>" for p in functions.paragraphs(text))


def _items(points: Iterable[str]) -> str:
    return "".join(f"<li>{escape(p)}</li>" for p in points)


def tafsir_word_html(
    surah_name: str, verse: Verse, result: TafsirResult, generated_at: datetime
) -> str:
    """Lecture handout ("Materi Ceramah") for one verse, as Office-flavoured HTML."""
    title = f"Materi Tafsir {escape(surah_name)} Ayat {verse.number}"
    hikmah = ""
    if result.keyPoints:
        hikmah = (
            '<div class="section">'
            '<div class="section-title">Poin Hikmah (Untuk Disampaikan)</div>'
            f'<div class="hikmah-list"><ul>{_items(result.keyPoints)}</ul></div>'
            "</div>"
        )
    return (
        f"{OFFICE_HTML_OPEN}<head><meta charset='utf-8'><title>{title}</title>"
        f"<style>{WORD_TAFSIR_CSS}</style></head><body>"
        '<div class="header">'
        f'<div class="attribution">{escape(settings.ATTRIBUTION_TEXT)}</div>'
        '<div class="title">Materi Tafsir &amp; Ceramah</div>'
        "<div class=\"subtitle\">Kajian Tafsir Al-Qur'an Global</div>"
        "</div>"
        '<div class="section">'
        '<div class="section-title">Ayat Pilihan</div>'
        f'<div class="arabic-box"><div class="arabic">{escape(verse.text)}</div></div>'
        f'<p class="translation"><strong>Artinya:</strong> "{escape(verse.translation)}"</p>'
        f'<p style="font-size: 10pt; color: #666;">({escape(surah_name)}: {verse.number})</p>'
        "</div>"
        '<div class="section">'
        '<div class="section-title">Penjelasan Tafsir</div>'
        f'<div class="source-badge">Sumber: {escape(result.source)}</div>'
        f'<div class="content-text">{_paras(result.text)}</div>'
        "</div>"
        f"{hikmah}"
        '<div class="timestamp">'
        f"{AI_NOTICE}<br>"
        f"Dibuat pada: {functions.format_id_date(generated_at, long=True)}"
        "</div>"
        "</body></html>"
    )


def thematic_word_html(result: ThematicResult, generated_at: datetime) -> str:
    verses = "".join(
        '<div class="verse-box">'
        f'<div class="arabic">{escape(v.text)}</div>'
        f'<div class="translation">"{escape(v.translation)}" '
        f"({escape(v.surahName)}: {v.verseNumber})</div>"
        f'<div class="relevance">Relevansi: {escape(v.relevance)}</div>'
        "</div>"
        for v in result.verses
    )
    return (
        f"{OFFICE_HTML_OPEN}<head><meta charset='utf-8'>"
        f"<title>Tafsir Tematik: {escape(result.theme)}</title>"
        f"<style>{WORD_THEMATIC_CSS}</style></head><body>"
        '<div class="header">'
        f'<div class="attribution">{escape(settings.ATTRIBUTION_TEXT)}</div>'
        "<div class=\"title\">Tafsir Tematik Al-Qur'an</div>"
        f'<div class="meta">Tema: {escape(result.theme)} | Sumber: {escape(result.source)}</div>'
        "</div>"
        f"<p><strong>Pengantar:</strong> {escape(result.introduction)}</p>"
        "<h2>Ayat-Ayat Pilihan</h2>"
        f"{verses}"
        "<h2>Penjelasan Tafsir</h2>"
        f'<div class="content">{_paras(result.explanation)}</div>'
        "<h2>Kesimpulan</h2>"
        f"<p>{escape(result.conclusion)}</p>"
        '<div class="timestamp">'
        f"Dibuat pada: {functions.format_id_date(generated_at)}"
        "</div>"
        "</body></html>"
    )


def tafsir_pdf_html(
    surah_name: str, verse: Verse, result: TafsirResult, generated_at: datetime
) -> str:
    hikmah = ""
    if result.keyPoints:
        hikmah = f'<h2>Poin Hikmah</h2><div class="boxed"><ul>{_items(result.keyPoints)}</ul></div>'
    return (
        "<body>"
        '<div class="masthead">'
        f"<h1>{escape(settings.ATTRIBUTION_TEXT)}</h1>"
        '<p class="subtitle"><b>Materi Tafsir &amp; Ceramah</b></p>'
        "<p class=\"subtitle\">Kajian Tafsir Al-Qur'an Global</p>"
        "</div>"
        "<h2>Ayat Pilihan</h2>"
        f'<p class="arabic" dir="rtl">{escape(verse.text)}</p>'
        f'<p class="translation">"{escape(verse.translation)}"</p>'
        f'<p class="ref">({escape(surah_name)}: {verse.number})</p>'
        "<h2>Penjelasan Tafsir</h2>"
        f'<p class="badge">Sumber: {escape(result.source)}</p>'
        f"{_paras(result.text, 'body-text')}"
        f"{hikmah}"
        '<div class="footer">'
        f"<p>{AI_NOTICE}<br/>Dibuat pada: {functions.format_id_date(generated_at)}</p>"
        "</div>"
        "</body>"
    )


def thematic_pdf_html(result: ThematicResult, generated_at: datetime) -> str:
    verses = "".join(
        f'<p class="arabic" dir="rtl">{escape(v.text)}</p>'
        f'<p class="translation">"{escape(v.translation)}"</p>'
        f'<p class="badge">QS. {escape(v.surahName)}: {v.verseNumber}</p>'
        f'<p class="relevance"><b>Relevansi:</b> {escape(v.relevance)}</p>'
        for v in result.verses
    )
    return (
        "<body>"
        '<div class="masthead">'
        f"<h1>{escape(settings.ATTRIBUTION_TEXT)}</h1>"
        "<p class=\"subtitle\"><b>Tafsir Tematik Al-Qur'an</b></p>"
        f'<p class="subtitle">Tema: <b>{escape(result.theme)}</b></p>'
        "</div>"
        "<h2>Pengantar</h2>"
        f'<p class="body-text">{escape(result.introduction)}</p>'
        "<h2>Ayat-Ayat Pilihan</h2>"
        f"{verses}"
        f"<h2>Penjelasan Mendalam ({escape(result.source)})</h2>"
        f"{_paras(result.explanation, 'body-text')}"
        f'<div class="boxed"><p><b>Kesimpulan</b></p><p>{escape(result.conclusion)}</p></div>'
        '<div class="footer">'
        f"<p>Dibuat pada: {functions.format_id_date(generated_at)}</p>"
        "</div>"
        "</body>"
    )
