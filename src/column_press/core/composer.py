"""Main document composition orchestrator."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from column_press.config import DocumentJob, Settings, get_settings
from column_press.layout.flow import LayoutError
from column_press.markup.builder import DocumentBuilder
from column_press.markup.ir import Alignment, StyledDocument
from column_press.render.pdf_writer import PDFWriter

logger = logging.getLogger(__name__)


class CompositionError(Exception):
    """Error while composing a document."""

    pass


@dataclass(frozen=True)
class ComposeResult:
    """Outcome of composing one job.

    Attributes:
        data: PDF bytes
        pages: Number of pages in the PDF
        elements: Number of top-level body blocks that were flowed
    """

    data: bytes
    pages: int
    elements: int


class DocumentComposer:
    """Orchestrates building one PDF from a job.

    Pipeline:
    1. Build the body markup into a styled element sequence
    2. Build the info markup with centered, uniform-size paragraphs
    3. Render the header and flow the body through the page columns
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        writer: Optional[PDFWriter] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.writer = writer or PDFWriter(settings=self.settings)
        self.body_builder = DocumentBuilder(
            body_size=self.settings.body_size,
            header_size=self.settings.header_size,
            header_minor_size=self.settings.header_minor_size,
        )
        # The info block renders every paragraph at body size, centered.
        self.info_builder = DocumentBuilder(
            body_size=self.settings.body_size,
            header_size=self.settings.body_size,
            header_minor_size=self.settings.body_size,
            alignment=Alignment.CENTER,
        )

    def build_body(self, job: DocumentJob) -> StyledDocument:
        return self.body_builder.build(job.body)

    def build_info(self, job: DocumentJob) -> StyledDocument:
        return self.info_builder.build(job.sub_header_2)

    def compose(self, job: DocumentJob) -> ComposeResult:
        """Compose a job into PDF bytes.

        Raises:
            CompositionError: If the body cannot be laid out
        """
        body = self.build_body(job)
        info = self.build_info(job)
        logger.info("Composing %r: %d body blocks", job.title, len(body))

        try:
            result = self.writer.render(job, body, info)
        except LayoutError as e:
            raise CompositionError(f"Cannot lay out {job.title!r}: {e}") from e

        logger.info("Composed %r into %d page(s)", job.title, result.pages)
        return ComposeResult(data=result.data, pages=result.pages, elements=len(body))

    def compose_file(
        self, job: DocumentJob, output_path: Optional[Path] = None
    ) -> ComposeResult:
        """Compose a job and write the PDF.

        Args:
            job: The job to compose
            output_path: Destination; defaults to the job's output file

        Raises:
            CompositionError: If no destination is known or layout fails
        """
        path = output_path or job.output_file
        if path is None:
            raise CompositionError("No output file given")

        result = self.compose(job)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(result.data)
        return result
