"""Tests for the CLI interface."""

import json
import logging
from pathlib import Path

from typer.testing import CliRunner

from stylify.cli import app, configure_logging, read_input


runner = CliRunner()


class TestReadInput:
    """Tests for choosing the input source."""

    def test_argument_wins(self, tmp_path: Path):
        input_file = tmp_path / "in.txt"
        input_file.write_text("from file")

        assert read_input("from argument", input_file) == "from argument"

    def test_file_used_without_argument(self, tmp_path: Path):
        input_file = tmp_path / "in.txt"
        input_file.write_text("*from file*", encoding="utf-8")

        assert read_input(None, input_file) == "*from file*"


class TestConfigureLogging:
    """Tests for log setup."""

    def test_single_handler_at_level(self):
        configure_logging("debug")
        configure_logging("info")

        logger = logging.getLogger("stylify")
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO


class TestCLI:
    """Tests for CLI commands."""

    def test_version_flag(self):
        """Test --version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "Stylify" in result.stdout

    def test_help_flag(self):
        """Test --help flag."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "emphasis" in result.stdout

    def test_default_format_is_html(self):
        result = runner.invoke(app, ["*bold* and _italic_"])

        assert result.exit_code == 0
        assert result.stdout == "<strong>bold</strong> and <em>italic</em>\n"

    def test_format_option(self):
        result = runner.invoke(app, ["*bold text _with italic_ inside*", "--format", "text"])

        assert result.exit_code == 0
        assert result.stdout == "bold text with italic inside\n"

    def test_spans_format(self):
        result = runner.invoke(app, ["-f", "spans", "*_x_*"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [{"start": 0, "end": 4, "styles": ["*", "_"]}]

    def test_format_from_environment(self, monkeypatch):
        monkeypatch.setenv("STYLIFY_FORMAT", "text")

        result = runner.invoke(app, ["~gone~"])

        assert result.exit_code == 0
        assert result.stdout == "gone\n"

    def test_unknown_format(self):
        result = runner.invoke(app, ["*bold*", "--format", "docx"])

        assert result.exit_code == 1

    def test_reads_stdin(self):
        result = runner.invoke(app, ["-f", "text"], input="*a* b\n")

        assert result.exit_code == 0
        assert result.stdout == "a b\n"

    def test_reads_file(self, tmp_path: Path):
        input_file = tmp_path / "notes.txt"
        input_file.write_text("Before. *bold* After.", encoding="utf-8")

        result = runner.invoke(app, ["--file", str(input_file)])

        assert result.exit_code == 0
        assert result.stdout == "Before. <strong>bold</strong> After.\n"

    def test_missing_file_error(self, tmp_path: Path):
        """Test error when file doesn't exist."""
        result = runner.invoke(app, ["--file", str(tmp_path / "nonexistent.txt")])

        assert result.exit_code != 0

    def test_output_file(self, tmp_path: Path):
        output = tmp_path / "out.json"

        result = runner.invoke(app, ["*bold*", "-f", "delta", "-o", str(output)])

        assert result.exit_code == 0
        assert json.loads(output.read_text(encoding="utf-8")) == {
            "ops": [{"insert": "bold", "attributes": {"bold": True}}]
        }

    def test_duplicate_delimiter_configuration(self, monkeypatch):
        monkeypatch.setenv(
            "STYLIFY_STYLES",
            '[{"name": "bold", "char": "*"}, {"name": "italic", "char": "*"}]',
        )

        result = runner.invoke(app, ["*bold*"])

        assert result.exit_code == 2

    def test_invalid_style_configuration(self, monkeypatch):
        monkeypatch.setenv("STYLIFY_STYLES", '[{"name": "bold", "char": "**"}]')

        result = runner.invoke(app, ["*bold*"])

        assert result.exit_code == 2
