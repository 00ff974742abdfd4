"""Tests for the hmdoc command line."""

import logging

import pytest
from pydantic import ValidationError

from hmdoc.cli import main
from hmdoc.config import GenerateOptions, default_log_level
from hmdoc.generators import OutputFormat


def test_html_to_stdout(source_tree, capsys):
    assert main(["Demo", str(source_tree)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("<html>")
    assert "Module: <a href=\"#doc.module.hmdoc.Parser\">hmdoc.Parser</a>" in out
    assert out.index("doc.module.hmdoc.Parser") < out.index("doc.module.hmdoc.Read")


def test_markdown_to_file(source_tree, tmp_path, capsys):
    output = tmp_path / "README.md"
    assert main(["Demo", str(source_tree), "--format", "markdown", "-o", str(output)]) == 0
    assert capsys.readouterr().out == ""
    md = output.read_text()
    assert md.startswith("# Demo Documentation")
    assert "* [hmdoc.Parser](#hmdoc-parser)" in md
    assert "* [hmdoc.Read](#hmdoc-read)" in md


def test_single_file(source_tree, capsys):
    assert main(["Demo", str(source_tree / "lib" / "read.js"), "-f", "markdown"]) == 0
    out = capsys.readouterr().out
    assert "## hmdoc.Read" in out
    assert "hmdoc.Parser" not in out


def test_wrong_extension_is_fatal(source_tree, caplog):
    assert main(["Demo", str(source_tree / "notes.txt")]) == 1
    assert "Expected a .js file" in caplog.text


def test_extra_extension_accepts_file(source_tree, capsys):
    assert main(["Demo", str(source_tree / "notes.txt"), "--ext", "txt"]) == 0
    assert "<h1>Demo Documentation</h1>" in capsys.readouterr().out


def test_missing_source(tmp_path, caplog):
    assert main(["Demo", str(tmp_path / "missing")]) == 1
    assert "No such file or directory" in caplog.text


def test_skipped_file_warns(source_tree, caplog):
    with caplog.at_level(logging.WARNING):
        assert main(["Demo", str(source_tree)]) == 0
    assert "plain.js: skipped (no doc comments found)" in caplog.text


def test_strict_fails_on_skipped_file(source_tree, capsys):
    assert main(["Demo", str(source_tree), "--strict"]) == 1
    assert capsys.readouterr().out == ""


def test_blank_project_name(source_tree, capsys):
    assert main(["   ", str(source_tree)]) == 2
    assert "invalid arguments" in capsys.readouterr().err


def test_unknown_format_rejected_by_argparse(source_tree):
    with pytest.raises(SystemExit) as exc_info:
        main(["Demo", str(source_tree), "--format", "pdf"])
    assert exc_info.value.code == 2


class TestGenerateOptions:
    def test_defaults(self, tmp_path):
        options = GenerateOptions(project_name="Demo", source=tmp_path)
        assert options.output_format is OutputFormat.HTML
        assert options.extensions == (".js",)
        assert options.output is None

    def test_normalizes(self, tmp_path):
        options = GenerateOptions(
            project_name=" Demo ",
            source=str(tmp_path),
            output_format="MARKDOWN",
            extensions=["ts"],
        )
        assert options.project_name == "Demo"
        assert options.output_format is OutputFormat.MARKDOWN
        assert options.extensions == (".js", ".ts")

    def test_rejects_unknown_format(self, tmp_path):
        with pytest.raises(ValidationError):
            GenerateOptions(project_name="Demo", source=tmp_path, output_format="pdf")

    def test_log_level(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HMDOC_LOG_LEVEL", "info")
        assert default_log_level() == logging.INFO
        verbose = GenerateOptions(project_name="Demo", source=tmp_path, verbose=True)
        assert verbose.log_level == logging.DEBUG

    def test_bad_log_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("HMDOC_LOG_LEVEL", "chatty")
        assert default_log_level() == logging.WARNING
