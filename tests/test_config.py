"""Tests for settings and job loading."""

import json
from pathlib import Path

import pytest

from column_press import config
from column_press.config import (
    DocumentJob,
    JobError,
    Settings,
    get_settings,
    load_job,
    load_settings,
)


class TestSettings:
    def test_defaults(self, settings: Settings):
        assert settings.font_name == "Helvetica"
        assert settings.body_size == 8.0
        assert settings.header_size == 12.0
        assert settings.header_minor_size == 10.0
        assert settings.footer_size == 6.0
        assert settings.footer_on_last_page is False

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("COLUMN_PRESS_BODY_SIZE", "9.5")
        monkeypatch.setenv("COLUMN_PRESS_FOOTER_ON_LAST_PAGE", "true")

        settings = Settings(_env_file=None)

        assert settings.body_size == 9.5
        assert settings.footer_on_last_page is True

    def test_load_settings_from_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(config, "_settings", None)
        env_file = tmp_path / "press.env"
        env_file.write_text("COLUMN_PRESS_BODY_SIZE=11\n", encoding="utf-8")

        settings = load_settings(env_file)

        assert settings.body_size == 11.0
        assert get_settings() is settings


class TestLoadJob:
    def test_camel_case_keys(self, tmp_job_file: Path):
        job = load_job(tmp_job_file)

        assert job.title == "Keto Basics"
        assert job.sub_header_1 == "A starter guide"
        assert job.sub_header_2 == "<p>Serves 2</p>"
        assert job.output_file == tmp_job_file.parent / "from-job.pdf"

    def test_snake_case_keys(self, tmp_path: Path):
        path = tmp_path / "job.json"
        path.write_text(json.dumps({"title": "T", "sub_header_1": "S"}), encoding="utf-8")

        job = load_job(path)

        assert job.sub_header_1 == "S"
        assert job.output_file is None

    def test_unknown_keys_ignored(self, tmp_job_file: Path):
        job = load_job(tmp_job_file)

        assert not hasattr(job, "imageUrl")

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(JobError):
            load_job(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(JobError):
            load_job(path)

    def test_invalid_field(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"title": ["not", "a", "string"]}), encoding="utf-8")

        with pytest.raises(JobError):
            load_job(path)


class TestDocumentJob:
    def test_document_title(self):
        assert DocumentJob(title="T", website="w.com").document_title == "w.com - T"
        assert DocumentJob(title="T").document_title == "T"
