"""PDF rendering for Column Press."""

from column_press.render.pdf_writer import FrameFiller, PDFWriter, RenderResult, make_frame

__all__ = [
    "FrameFiller",
    "PDFWriter",
    "RenderResult",
    "make_frame",
]
