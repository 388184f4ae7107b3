"""Pytest fixtures for Column Press tests."""

import json
from pathlib import Path

import pytest

from column_press.config import DocumentJob, Settings
from column_press.markup.builder import DocumentBuilder


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the environment."""
    return Settings(_env_file=None)


@pytest.fixture
def builder() -> DocumentBuilder:
    """Builder with the default body/header sizes."""
    return DocumentBuilder(body_size=8.0, header_size=12.0, header_minor_size=10.0)


@pytest.fixture
def sample_body() -> str:
    """A short article using most of the supported tags."""
    return (
        "<h1>Keto Basics</h1>\n"
        "<p>Eat <strong>fewer</strong> carbs and <em>more</em> fat.</p>\n"
        "<ul>\n  <li>Eggs</li>\n  <li>Avocado</li>\n</ul>\n"
        '<p>Read the <a href="https://example.com/guide">full guide</a>.</p>'
    )


@pytest.fixture
def long_body() -> str:
    """Enough one-line paragraphs to spill onto a third page."""
    return "".join(f"<p>Paragraph number {n}.</p>" for n in range(300))


@pytest.fixture
def sample_job(sample_body: str) -> DocumentJob:
    return DocumentJob(
        title="Keto Basics",
        website="example.com",
        keywords="keto,diet",
        creator="column-press",
        sub_header_1="A starter guide",
        sub_header_2="<p>Serves <strong>2</strong></p>",
        body=sample_body,
        footer="FOOTER-MARK",
    )


@pytest.fixture
def tmp_job_file(tmp_path: Path, sample_body: str) -> Path:
    """Write a job file in the camelCase format job files use."""
    path = tmp_path / "article.json"
    path.write_text(
        json.dumps({
            "title": "Keto Basics",
            "website": "example.com",
            "keywords": "keto,diet",
            "creator": "column-press",
            "imageUrl": "https://example.com/cover.jpg",
            "subHeader1": "A starter guide",
            "subHeader2": "<p>Serves 2</p>",
            "body": sample_body,
            "footer": "FOOTER-MARK",
            "outputFile": str(tmp_path / "from-job.pdf"),
        }),
        encoding="utf-8",
    )
    return path
