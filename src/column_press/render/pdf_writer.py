"""PDF writer built on reportlab frames and canvas."""

import io
import logging
from dataclasses import dataclass
from typing import Optional

from reportlab.lib.colors import Color, HexColor
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT, TA_RIGHT
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfgen.canvas import Canvas
from reportlab.platypus import Flowable, Frame
from reportlab.platypus import Paragraph as RLParagraph

from column_press.config import DocumentJob, Settings, get_settings
from column_press.layout.flow import (
    FillReport,
    FlowResult,
    OversizedElementError,
    RegionFlowEngine,
)
from column_press.layout.regions import (
    PageGeometry,
    Rect,
    Region,
    header_layout,
    two_column_layout,
)
from column_press.markup.ir import (
    Alignment,
    Anchor,
    Inline,
    ListBlock,
    Paragraph,
    ParagraphKind,
    StyledDocument,
    TextRun,
)

logger = logging.getLogger(__name__)


HEADER_TEXT_COLOR = HexColor("#404040")  # Dark grey
FOOTER_TEXT_COLOR = HexColor("#808080")  # Grey
TITLE_SIZE = 16

ALIGNMENTS = {
    Alignment.LEFT: TA_LEFT,
    Alignment.CENTER: TA_CENTER,
    Alignment.RIGHT: TA_RIGHT,
    Alignment.JUSTIFY: TA_JUSTIFY,
}


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def make_frame(rect: Rect, show_boundary: bool = False) -> Frame:
    """Unpadded reportlab frame covering rect."""
    return Frame(
        rect.left,
        rect.bottom,
        rect.width,
        rect.height,
        leftPadding=0,
        bottomPadding=0,
        rightPadding=0,
        topPadding=0,
        showBoundary=int(show_boundary),
    )


class FrameFiller:
    """Fill primitive that draws flowables into one region at a time.

    The content list is consumed in place: placed flowables are removed
    and a flowable split across regions is replaced by its remainder.
    """

    def __init__(self, canvas: Canvas, show_boundary: bool = False) -> None:
        self.canvas = canvas
        self.show_boundary = show_boundary

    def fill(self, content: list[Flowable], region: Region) -> FillReport:
        """Place flowables from the front of content into region.

        Raises:
            OversizedElementError: If the empty region cannot take even
                part of the next flowable
        """
        frame = make_frame(region.rect, self.show_boundary)
        consumed = 0

        while content:
            head = content[0]
            if frame.add(head, self.canvas, trySplit=0):
                del content[0]
                consumed += 1
                continue

            parts = frame.split(head, self.canvas)
            if len(parts) < 2:
                break
            content[0:1] = parts
            if not frame.add(parts[0], self.canvas, trySplit=0):
                break
            del content[0]
            consumed += 1

        if content and consumed == 0:
            width, height = content[0].wrap(region.rect.width, region.rect.height)
            raise OversizedElementError(
                f"{type(content[0]).__name__} of {width:.0f}x{height:.0f}pt "
                f"does not fit a {region.rect.width:.0f}x{region.rect.height:.0f}pt region"
            )

        return FillReport(consumed=consumed, has_more=bool(content))


@dataclass(frozen=True)
class RenderResult:
    """Rendered PDF bytes and how they were paginated."""

    data: bytes
    flow: FlowResult

    @property
    def pages(self) -> int:
        return self.flow.pages


class PDFWriter:
    """Render styled documents into a paginated two-column PDF.

    Page 1 carries a header block (title, primary info line, info
    markup) above its two columns; later pages use two full-height
    columns. Each completed page gets the footer line.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        geometry: PageGeometry = PageGeometry(),
        show_boundary: bool = False,
    ) -> None:
        self.settings = settings or get_settings()
        self.geometry = geometry
        self.show_boundary = show_boundary
        self.layout = two_column_layout(geometry)
        self.header = header_layout(geometry)
        self.styles = self._create_styles()

    def _paragraph_style(
        self, name: str, size: float, space_before: float = 0, **kwargs
    ) -> ParagraphStyle:
        return ParagraphStyle(
            name,
            fontName=self.settings.font_name,
            fontSize=size,
            leading=size * 1.5,
            autoLeading="max",
            spaceBefore=space_before,
            **kwargs,
        )

    def _create_styles(self) -> dict[str, ParagraphStyle]:
        """Create all paragraph styles for the document."""
        s = self.settings
        bold = f"{s.font_name}-Bold"
        return {
            "body": self._paragraph_style("Body", s.body_size),
            "header": self._paragraph_style("Header", s.header_size, 20),
            "header_minor": self._paragraph_style(
                "HeaderMinor", s.header_minor_size, 10
            ),
            "list_item": self._paragraph_style(
                "ListItem",
                s.body_size,
                4,
                leftIndent=s.body_size * 1.5,
                bulletIndent=0,
            ),
            "title": ParagraphStyle(
                "Title",
                fontName=bold,
                fontSize=TITLE_SIZE,
                leading=TITLE_SIZE * 1.5,
                alignment=TA_CENTER,
                textColor=HEADER_TEXT_COLOR,
            ),
            "primary_info": ParagraphStyle(
                "PrimaryInfo",
                fontName=bold,
                fontSize=s.body_size,
                leading=s.body_size * 1.5,
                alignment=TA_CENTER,
                textColor=HEADER_TEXT_COLOR,
            ),
        }

    def _run_to_html(self, run: TextRun) -> str:
        text = "<br/>".join(_escape(line) for line in run.text.split("\n"))
        if run.bold:
            text = f"<b>{text}</b>"
        if run.italic:
            text = f"<i>{text}</i>"
        return f'<font size="{run.style.size:g}">{text}</font>'

    def _inline_to_html(self, children: list[Inline]) -> str:
        """Convert runs and anchors to reportlab paragraph markup."""
        parts: list[str] = []

        for child in children:
            if isinstance(child, Anchor):
                inner = "".join(self._run_to_html(run) for run in child.runs)
                if child.underline:
                    inner = f"<u>{inner}</u>"
                href = _escape(child.href).replace('"', "&quot;")
                parts.append(f'<a href="{href}">{inner}</a>')
            else:
                parts.append(self._run_to_html(child))

        return "".join(parts)

    def _paragraph_flowable(
        self, paragraph: Paragraph, text_color: Optional[Color] = None
    ) -> RLParagraph:
        key = {
            ParagraphKind.BODY: "body",
            ParagraphKind.HEADER: "header",
            ParagraphKind.HEADER_MINOR: "header_minor",
        }[paragraph.kind]
        style = self.styles[key]
        alignment = ALIGNMENTS[paragraph.alignment]
        if style.alignment != alignment or text_color is not None:
            style = ParagraphStyle(
                f"{style.name}-{paragraph.alignment.value}",
                parent=style,
                alignment=alignment,
                textColor=style.textColor if text_color is None else text_color,
            )
        return RLParagraph(self._inline_to_html(paragraph.children), style)

    def _list_flowables(
        self, block: ListBlock, text_color: Optional[Color] = None
    ) -> list[Flowable]:
        style = self.styles["list_item"]
        if text_color is not None:
            style = ParagraphStyle(
                f"{style.name}-colored", parent=style, textColor=text_color
            )
        flowables: list[Flowable] = []
        for number, item in enumerate(block.items, start=1):
            flowables.append(RLParagraph(
                self._inline_to_html(item.children),
                style,
                bulletText=f"{number}." if block.ordered else None,
            ))
        return flowables

    def to_flowables(
        self, document: StyledDocument, text_color: Optional[Color] = None
    ) -> list[Flowable]:
        """Convert the element sequence to reportlab flowables in order.

        Args:
            document: Element sequence to convert
            text_color: Optional colour overriding the style defaults
        """
        story: list[Flowable] = []
        for element in document.elements:
            if isinstance(element, ListBlock):
                story.extend(self._list_flowables(element, text_color))
            else:
                story.append(self._paragraph_flowable(element, text_color))
        return story

    def _set_metadata(self, canvas: Canvas, job: DocumentJob) -> None:
        canvas.setTitle(job.document_title)
        canvas.setAuthor(job.website)
        canvas.setSubject(job.title)
        canvas.setKeywords(job.keywords)
        canvas.setCreator(job.creator)

    def _draw_header(
        self, canvas: Canvas, job: DocumentJob, info: StyledDocument
    ) -> None:
        """Draw the page-1 header; text that does not fit is dropped."""
        title_story: list[Flowable] = []
        if job.title:
            title_story.append(RLParagraph(_escape(job.title), self.styles["title"]))
        if job.sub_header_1:
            title_story.append(
                RLParagraph(_escape(job.sub_header_1), self.styles["primary_info"])
            )

        for rect, story in (
            (self.header.title, title_story),
            (self.header.info, self.to_flowables(info, HEADER_TEXT_COLOR)),
        ):
            if not story:
                continue
            make_frame(rect, self.show_boundary).addFromList(story, canvas)
            if story:
                logger.warning(
                    "Header text overflowed its block; %d item(s) dropped",
                    len(story),
                )

    def _draw_footer(self, canvas: Canvas, text: str, x: float, y: float) -> None:
        canvas.saveState()
        canvas.setFont(self.settings.font_name, self.settings.footer_size)
        canvas.setFillColor(FOOTER_TEXT_COLOR)
        canvas.drawCentredString(x, y, text)
        canvas.restoreState()

    def render(
        self,
        job: DocumentJob,
        body: StyledDocument,
        info: Optional[StyledDocument] = None,
    ) -> RenderResult:
        """Render a job to PDF bytes.

        Args:
            job: Job with title, metadata and footer text
            body: Body element sequence to flow through the columns
            info: Optional element sequence for the header info block

        Returns:
            RenderResult with the PDF bytes and pagination summary

        Raises:
            LayoutError: If the body cannot be flowed into the regions
        """
        buffer = io.BytesIO()
        canvas = Canvas(buffer, pagesize=(self.geometry.width, self.geometry.height))
        self._set_metadata(canvas, job)
        self._draw_header(canvas, job, info or StyledDocument())

        engine = RegionFlowEngine(
            layout=self.layout,
            filler=FrameFiller(canvas, self.show_boundary),
            draw_footer=lambda text, x, y: self._draw_footer(canvas, text, x, y),
            new_page=canvas.showPage,
            footer_text=job.footer,
            footer_size=self.settings.footer_size,
        )
        flow = engine.run(self.to_flowables(body))

        if self.settings.footer_on_last_page:
            engine.stamp_footer()

        canvas.showPage()
        canvas.save()
        return RenderResult(data=buffer.getvalue(), flow=flow)
