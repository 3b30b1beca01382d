#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the html-simple command line interface."""

from unittest.mock import patch

import pytest

from html_simple.cli import (
    EXIT_DEPENDENCY_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    build_demo_document,
    create_parser,
    main,
)
from html_simple.constants import VOID_ELEMENTS
from html_simple.generator import Generator


@pytest.fixture(autouse=True)
def _no_logging_setup():
    """Keep the CLI from replacing the root logger's handlers during tests."""
    with patch("html_simple.cli.configure_logging") as mock_configure:
        yield mock_configure


@pytest.mark.unit
@pytest.mark.cli
class TestParser:
    """Test argument parsing."""

    def test_command_required(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args([])

    def test_log_level_case_insensitive(self):
        args = create_parser().parse_args(["--log-level", "debug", "tags"])
        assert args.log_level == "DEBUG"

    def test_check_attr_custom_repeatable(self):
        args = create_parser().parse_args(["check-attr", "a", "b", "--custom", "x", "--custom", "y"])
        assert args.custom == ["x", "y"]


@pytest.mark.unit
@pytest.mark.cli
class TestCommands:
    """Test CLI command handlers."""

    def test_check_url(self, capsys):
        exit_code = main(["check-url", "javascript:alert(1)", "/a/b", "foo/bar"])
        assert exit_code == EXIT_SUCCESS
        lines = capsys.readouterr().out.splitlines()
        assert lines == ["javascript:alert(1)\t#", "/a/b\t/a/b", "foo/bar\t#"]

    def test_check_attr_demotes_unknown(self, capsys):
        assert main(["check-attr", "onclick", "alert('hi')"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.strip() == 'data-onclick="alert(&#x27;hi&#x27;)"'

    def test_check_attr_custom_attribute(self, capsys):
        assert main(["check-attr", "aria-label", "Close", "--custom", "aria-label"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.strip() == 'aria-label="Close"'

    def test_check_attr_breakout_name_ignored(self, capsys):
        assert main(["check-attr", "x onclick", "alert(1)"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == ""

    def test_check_attr_breakout_name_strict(self, capsys):
        """Test that --strict turns an invalid attribute name into a validation error."""
        assert main(["--strict", "check-attr", "x onclick", "alert(1)"]) == EXIT_VALIDATION_ERROR
        assert "Invalid attribute name" in capsys.readouterr().err

    def test_tags_void_only(self, capsys):
        assert main(["tags", "--void-only"]) == EXIT_SUCCESS
        names = [line.split("\t")[0] for line in capsys.readouterr().out.splitlines()]
        assert set(names) == VOID_ELEMENTS

    def test_tags_all(self, capsys):
        assert main(["tags"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "div\tnormal" in out
        assert "br\tvoid" in out

    def test_demo(self, capsys):
        assert main(["demo"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert 'data-onclick="alert(&#x27;Hello!&#x27;)"' in out
        assert '<a href="#">Don&#x27;t click me</a>' in out

    def test_rich_missing_dependency(self, capsys):
        """Test that --rich without Rich installed exits with a dependency error."""
        with patch("html_simple.cli.check_rich_available", return_value=False):
            exit_code = main(["demo", "--rich"])
        assert exit_code == EXIT_DEPENDENCY_ERROR
        assert "rich" in capsys.readouterr().err

    def test_rich_falls_back_without_tty(self, capsys):
        """Test that --rich prints plain output when stdout is not a TTY."""
        with patch("html_simple.cli.check_rich_available", return_value=True):
            assert main(["tags", "--void-only", "--rich"]) == EXIT_SUCCESS
        assert "br\tvoid" in capsys.readouterr().out

    def test_rich_forced(self, capsys):
        pytest.importorskip("rich")
        assert main(["tags", "--void-only", "--rich", "--force-rich"]) == EXIT_SUCCESS
        assert "HTML Tags" in capsys.readouterr().out

    def test_logging_configured_from_flags(self, _no_logging_setup, capsys):
        main(["--trace", "--log-file", "out.log", "check-url", "/"])
        _no_logging_setup.assert_called_once_with(10, log_file="out.log", trace_mode=True)


@pytest.mark.unit
@pytest.mark.cli
class TestDemoDocument:
    """Test the sample document builder."""

    def test_demo_document_contents(self):
        html = build_demo_document(Generator()).generate()
        assert html.startswith('<div class="container" id="main" style="color: red; background-color: #f0f0f0;"')
        assert '<br class="clearfix secondclass" />' in html
        assert 'href="https://example.com?param=value&amp;another=test"' in html
        assert "onclick=" not in html.replace("data-onclick=", "")
