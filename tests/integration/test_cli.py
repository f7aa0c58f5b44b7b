#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_cli.py
"""Integration tests for the adf2md command line interface."""

import io
import json

import pytest

from adf2md.cli import EXIT_ERROR, EXIT_SUCCESS, EXIT_VALIDATION_ERROR, main

SIMPLE_DOC = {
    "type": "doc",
    "version": 1,
    "content": [
        {"type": "heading", "attrs": {"level": 1}, "content": [{"type": "text", "text": "Title"}]},
        {
            "type": "bulletList",
            "content": [
                {
                    "type": "listItem",
                    "content": [
                        {"type": "paragraph", "content": [{"type": "text", "text": "a"}]},
                        {
                            "type": "bulletList",
                            "content": [
                                {
                                    "type": "listItem",
                                    "content": [{"type": "paragraph", "content": [{"type": "text", "text": "b"}]}],
                                }
                            ],
                        },
                    ],
                }
            ],
        },
        {"type": "mediaSingle", "content": [{"type": "media", "attrs": {"id": "m1", "type": "file"}}]},
    ],
}


@pytest.fixture
def adf_file(tmp_path):
    """Write the sample ADF document to a JSON file."""
    path = tmp_path / "doc.json"
    path.write_text(json.dumps(SIMPLE_DOC), encoding="utf-8")
    return path


@pytest.mark.integration
@pytest.mark.cli
class TestToMarkdown:
    """Test the to-markdown command."""

    def test_stdout(self, adf_file, capsys):
        """Test rendering to stdout."""
        assert main(["--no-config", "to-markdown", str(adf_file)]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert out == "# Title\n\n- a\n  - b\n\n[Media attachment]\n"

    def test_list_indent_flag(self, adf_file, capsys):
        """Test the --list-indent override."""
        assert main(["--no-config", "to-markdown", str(adf_file), "--list-indent", "4"]) == EXIT_SUCCESS
        assert "- a\n    - b" in capsys.readouterr().out

    def test_output_file(self, adf_file, tmp_path):
        """Test writing to an output file."""
        output = tmp_path / "out.md"

        assert main(["--no-config", "to-markdown", str(adf_file), "-o", str(output)]) == EXIT_SUCCESS
        assert output.read_text(encoding="utf-8").startswith("# Title")

    def test_stdin(self, monkeypatch, capsys):
        """Test reading the document from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps({"type": "doc", "content": [{"type": "rule"}]})))

        assert main(["--no-config", "to-markdown", "-"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "---\n"

    def test_invalid_json(self, tmp_path, capsys):
        """Test that invalid JSON input is an error."""
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        assert main(["--no-config", "to-markdown", str(path)]) == EXIT_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_non_doc_root(self, tmp_path, capsys):
        """Test that a non-doc root is an error."""
        path = tmp_path / "para.json"
        path.write_text(json.dumps({"type": "paragraph", "content": []}), encoding="utf-8")

        assert main(["--no-config", "to-markdown", str(path)]) == EXIT_ERROR
        assert "doc" in capsys.readouterr().err

    def test_missing_input(self, tmp_path):
        """Test that a missing input file is an error."""
        assert main(["--no-config", "to-markdown", str(tmp_path / "missing.json")]) == EXIT_ERROR

    def test_invalid_option_value(self, adf_file, capsys):
        """Test that an invalid option value is a validation error."""
        assert main(["--no-config", "to-markdown", str(adf_file), "--list-indent", "0"]) == EXIT_VALIDATION_ERROR
        assert "list_indent_width" in capsys.readouterr().err


@pytest.mark.integration
@pytest.mark.cli
class TestToHtml:
    """Test the to-html command."""

    def test_placeholder_without_media_map(self, adf_file, capsys):
        """Test that unresolved media render as a placeholder."""
        assert main(["--no-config", "to-html", str(adf_file)]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert "<h1>Title</h1>" in out
        assert 'class="media-placeholder"' in out

    def test_media_map(self, adf_file, tmp_path, capsys):
        """Test resolving media through a media map file."""
        media_map = tmp_path / "media.json"
        media_map.write_text(json.dumps({"m1": "https://example.com/m1.png"}), encoding="utf-8")

        assert main(["--no-config", "to-html", str(adf_file), "--media-map", str(media_map)]) == EXIT_SUCCESS
        assert '<img src="https://example.com/m1.png"' in capsys.readouterr().out

    @pytest.mark.parametrize("content", ["{oops", '["a"]', '{"m1": 3}'])
    def test_invalid_media_map(self, adf_file, tmp_path, content):
        """Test that malformed media maps are errors."""
        media_map = tmp_path / "media.json"
        media_map.write_text(content, encoding="utf-8")

        assert main(["--no-config", "to-html", str(adf_file), "--media-map", str(media_map)]) == EXIT_ERROR

    def test_standalone(self, adf_file, capsys):
        """Test the --standalone flag."""
        assert main(["--no-config", "to-html", str(adf_file), "--standalone"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.startswith("<!DOCTYPE html>")


@pytest.mark.integration
@pytest.mark.cli
class TestFromMarkdown:
    """Test the from-markdown command."""

    def test_json_output(self, tmp_path, capsys):
        """Test converting Markdown to ADF JSON."""
        path = tmp_path / "in.md"
        path.write_text("# Title\n\nHello **world**\n", encoding="utf-8")

        assert main(["--no-config", "from-markdown", str(path), "--indent", "2"]) == EXIT_SUCCESS

        data = json.loads(capsys.readouterr().out)
        assert data["type"] == "doc"
        assert data["content"][1]["content"][1] == {"type": "text", "text": "world", "marks": [{"type": "strong"}]}


@pytest.mark.integration
@pytest.mark.cli
class TestConfiguration:
    """Test configuration handling in the CLI."""

    def test_explicit_config(self, adf_file, tmp_path, capsys):
        """Test options from an explicit --config file."""
        config = tmp_path / "settings.toml"
        config.write_text('[markdown]\nbullet_marker = "*"\n', encoding="utf-8")

        assert main(["--config", str(config), "to-markdown", str(adf_file)]) == EXIT_SUCCESS
        assert "* a\n  * b" in capsys.readouterr().out

    def test_discovered_config(self, adf_file, tmp_path, monkeypatch, capsys):
        """Test options from a config file found in the working directory."""
        (tmp_path / ".adf2md.yaml").write_text("markdown:\n  list_indent_width: 3\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert main(["to-markdown", str(adf_file)]) == EXIT_SUCCESS
        assert "- a\n   - b" in capsys.readouterr().out

    def test_no_config_skips_discovery(self, adf_file, tmp_path, monkeypatch, capsys):
        """Test that --no-config ignores config files."""
        (tmp_path / ".adf2md.yaml").write_text("markdown:\n  list_indent_width: 3\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert main(["--no-config", "to-markdown", str(adf_file)]) == EXIT_SUCCESS
        assert "- a\n  - b" in capsys.readouterr().out

    def test_invalid_config(self, adf_file, tmp_path, capsys):
        """Test that an invalid config file is a validation error."""
        config = tmp_path / "bad.json"
        config.write_text('{"markdown": {"unknown_key": 1}}', encoding="utf-8")

        assert main(["--config", str(config), "to-markdown", str(adf_file)]) == EXIT_VALIDATION_ERROR
        assert "unknown_key" in capsys.readouterr().err

    def test_usage_error_exits_with_two(self):
        """Test that argparse usage errors exit with status 2."""
        with pytest.raises(SystemExit) as exc_info:
            main(["to-markdown"])
        assert exc_info.value.code == 2
