"""Tests for the document composer."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from column_press.config import DocumentJob, Settings
from column_press.core.composer import CompositionError, DocumentComposer
from column_press.layout.flow import LayoutError
from column_press.markup.ir import Alignment, ParagraphKind


class TestDocumentComposer:
    """Tests for the DocumentComposer class."""

    @pytest.fixture
    def composer(self, settings: Settings) -> DocumentComposer:
        return DocumentComposer(settings=settings)

    def test_compose_returns_pdf(self, composer: DocumentComposer, sample_job: DocumentJob):
        result = composer.compose(sample_job)

        assert result.data.startswith(b"%PDF")
        assert result.pages == 1
        assert result.elements == 4

    def test_long_body_paginates(self, composer: DocumentComposer, sample_job: DocumentJob, long_body: str):
        job = sample_job.model_copy(update={"body": long_body})

        result = composer.compose(job)

        assert result.pages == 3
        assert result.elements == 300

    def test_info_markup_centered_at_body_size(self, composer: DocumentComposer):
        job = DocumentJob(sub_header_2="<h1>Big</h1><p>Small</p>")

        info = composer.build_info(job)

        assert all(p.alignment == Alignment.CENTER for p in info.paragraphs)
        assert info.paragraphs[0].kind == ParagraphKind.HEADER
        assert info.paragraphs[0].runs[0].style.size == 8.0

    def test_body_uses_configured_sizes(self):
        settings = Settings(_env_file=None, header_size=14.0)
        composer = DocumentComposer(settings=settings)

        body = composer.build_body(DocumentJob(body="<h2>Head</h2>"))

        assert body.paragraphs[0].runs[0].style.size == 14.0

    def test_layout_error_wrapped(self, settings: Settings, sample_job: DocumentJob):
        writer = Mock()
        writer.render.side_effect = LayoutError("too big")
        composer = DocumentComposer(settings=settings, writer=writer)

        with pytest.raises(CompositionError, match="too big"):
            composer.compose(sample_job)

    def test_compose_file_writes_output(self, composer: DocumentComposer, sample_job: DocumentJob, tmp_path: Path):
        output = tmp_path / "nested" / "out.pdf"

        result = composer.compose_file(sample_job, output)

        assert output.exists()
        assert output.read_bytes() == result.data

    def test_compose_file_uses_job_output(self, composer: DocumentComposer, sample_job: DocumentJob, tmp_path: Path):
        job = sample_job.model_copy(update={"output_file": tmp_path / "job.pdf"})

        composer.compose_file(job)

        assert (tmp_path / "job.pdf").exists()

    def test_compose_file_without_destination(self, composer: DocumentComposer, sample_job: DocumentJob):
        with pytest.raises(CompositionError):
            composer.compose_file(sample_job)
