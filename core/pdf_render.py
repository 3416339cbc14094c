# core/pdf_render.py
import io
from typing import List, Tuple
import fitz
from config.settings import settings
from core.entities import PageSlice
from util.errors import ExportError
from util.timing import timed
import logging

logger = logging.getLogger(__name__)

A4_WIDTH, A4_HEIGHT = fitz.paper_size("a4")  # points
PADDING = 20 * 72 / 25.4  # 20 mm


def page_slices(canvas_height: float, page_height: float = A4_HEIGHT) -> List[PageSlice]:
    """
    Cut a rendered canvas into consecutive page-sized bands, top to bottom.
    The final band keeps its natural height.
    """
    out: List[PageSlice] = []
    top = 0.0
    # sub-point remainders are rounding noise, not content
    while canvas_height - top > 0.5:
        out.append(PageSlice(top=top, height=min(page_height, canvas_height - top)))
        top += page_height
    return out


def _render_canvas(html: str, css: str) -> Tuple[fitz.Document, List[float]]:
    """
    Lay the HTML out offscreen on A4-wide canvases. Returns the canvas document and
    the used height of each canvas (never less than one A4 page).
    """
    story = fitz.Story(html=html, user_css=css)
    buffer = io.BytesIO()
    writer = fitz.DocumentWriter(buffer)
    canvas = fitz.Rect(0, 0, A4_WIDTH, A4_HEIGHT * max(1, settings.PDF_CANVAS_PAGES))
    where = canvas + (PADDING, PADDING, -PADDING, -PADDING)

    heights: List[float] = []
    more = 1
    while more:
        device = writer.begin_page(canvas)
        more, filled = story.place(where)
        story.draw(device)
        writer.end_page()
        heights.append(max(fitz.Rect(filled).y1 + PADDING, A4_HEIGHT))
    writer.close()
    return fitz.open("pdf", buffer.getvalue()), heights


def render_pdf(html: str, css: str, scale: float | None = None) -> bytes:
    """
    Offscreen render -> raster capture -> slice across A4 boundaries -> one image per page.
    Raises ExportError on any rendering failure.
    """
    zoom = scale or settings.PDF_RENDER_SCALE
    try:
        with timed(logger, "export.pdf.render", scale=zoom):
            canvas_doc, heights = _render_canvas(html, css)
            out = fitz.open()
            matrix = fitz.Matrix(zoom, zoom)
            with canvas_doc:
                for canvas_page, used in zip(canvas_doc, heights):
                    for band in page_slices(used):
                        clip = fitz.Rect(0, band.top, A4_WIDTH, band.top + band.height)
                        pix = canvas_page.get_pixmap(matrix=matrix, clip=clip, alpha=False)
                        page = out.new_page(width=A4_WIDTH, height=A4_HEIGHT)
                        page.insert_image(
                            fitz.Rect(0, 0, A4_WIDTH, band.height), pixmap=pix
                        )
            pages = out.page_count
            data = out.tobytes(garbage=3, deflate=True)
            out.close()
    except Exception as e:
        logger.error("export.pdf.error err=%s", type(e).__name__, exc_info=True)
        raise ExportError("PDF rendering failed", {"err": type(e).__name__}) from e

    logger.info("export.pdf.ok pages=%d bytes=%d", pages, len(data))
    return data
