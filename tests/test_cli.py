"""Tests for the CLI interface."""

from pathlib import Path

from typer.testing import CliRunner

from column_press import config
from column_press.cli import app, generate_output_path


runner = CliRunner()


class TestGenerateOutputPath:
    """Tests for output path generation."""

    def test_pdf_beside_job(self):
        output = generate_output_path(Path("/jobs/article.json"))

        assert output == Path("/jobs/article.pdf")

    def test_custom_output_directory(self):
        output = generate_output_path(Path("/jobs/article.json"), Path("/out"))

        assert output == Path("/out/article.pdf")


class TestCLI:
    """Tests for CLI commands."""

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "Column Press" in result.stdout

    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "two-column" in result.stdout

    def test_missing_file_error(self, tmp_path: Path):
        result = runner.invoke(app, [str(tmp_path / "nonexistent.json")])

        assert result.exit_code != 0

    def test_build_with_output_option(self, tmp_job_file: Path, tmp_path: Path):
        output = tmp_path / "explicit.pdf"

        result = runner.invoke(app, [str(tmp_job_file), "--output", str(output)])

        assert result.exit_code == 0
        assert "Success" in result.stdout
        assert output.read_bytes().startswith(b"%PDF")

    def test_build_uses_job_output_file(self, tmp_job_file: Path):
        result = runner.invoke(app, [str(tmp_job_file)])

        assert result.exit_code == 0
        assert (tmp_job_file.parent / "from-job.pdf").exists()

    def test_invalid_job_file(self, tmp_path: Path):
        job = tmp_path / "broken.json"
        job.write_text("{", encoding="utf-8")

        result = runner.invoke(app, [str(job)])

        assert result.exit_code == 1
        assert "Error" in result.stdout

    def test_env_file_option(self, tmp_job_file: Path, tmp_path: Path, monkeypatch):
        monkeypatch.setattr(config, "_settings", None)
        env_file = tmp_path / "press.env"
        env_file.write_text("COLUMN_PRESS_FOOTER_SIZE=7\n", encoding="utf-8")

        result = runner.invoke(app, [str(tmp_job_file), "--env-file", str(env_file)])

        assert result.exit_code == 0
        assert config.get_settings().footer_size == 7.0
