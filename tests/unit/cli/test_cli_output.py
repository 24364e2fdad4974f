"""Unit tests for CLI output helpers and comparison processing."""

import argparse
import io

import pytest
from rich.console import Console

from textcompare.cli.output import (
    build_statistics_table,
    format_plain_statistics,
    render_rich_report,
    should_use_color,
    should_use_rich_output,
)
from textcompare.cli.processors import (
    OutputSettings,
    build_comparison_options,
    build_output_settings,
    emit_result,
    run_comparison,
)
from textcompare.diff.text_diff import compare_texts
from textcompare.exceptions import InputTooLargeError, InvalidOptionsError, UnsupportedFormatError
from textcompare.options import ComparisonOptions


class _TtyStream(io.StringIO):
    def isatty(self):
        return True


def _namespace(**overrides) -> argparse.Namespace:
    values = {
        "ignore_case": None,
        "ignore_whitespace": None,
        "ignore_line_breaks": None,
        "context_lines": None,
        "format": None,
        "output": None,
        "color": None,
        "rich": None,
        "force_rich": False,
        "stats_only": False,
        "max_input_size": None,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


@pytest.mark.unit
@pytest.mark.cli
class TestOutputDecisions:
    """Tests for rich and colour detection."""

    def test_rich_requires_request(self):
        assert not should_use_rich_output(False, stream=_TtyStream())

    def test_rich_on_terminal(self):
        assert should_use_rich_output(True, stream=_TtyStream())
        assert not should_use_rich_output(True, stream=io.StringIO())

    def test_force_rich(self):
        assert should_use_rich_output(True, force_rich=True, stream=io.StringIO())

    def test_color_modes(self):
        assert should_use_color("always", writing_to_file=False, stream=io.StringIO())
        assert not should_use_color("never", writing_to_file=False, stream=_TtyStream())
        assert should_use_color("auto", writing_to_file=False, stream=_TtyStream())
        assert not should_use_color("auto", writing_to_file=False, stream=io.StringIO())

    def test_files_never_colored(self):
        assert not should_use_color("always", writing_to_file=True)


@pytest.mark.unit
@pytest.mark.cli
class TestRichReport:
    """Tests for rich terminal rendering."""

    @staticmethod
    def _console() -> tuple[Console, io.StringIO]:
        buffer = io.StringIO()
        return Console(file=buffer, force_terminal=False, width=100), buffer

    def test_statistics_table(self, basic_texts):
        table = build_statistics_table(compare_texts(*basic_texts))
        assert table.row_count == 6

    def test_report_lists_changes(self, basic_texts):
        console, buffer = self._console()
        render_rich_report(compare_texts(*basic_texts), console)
        out = buffer.getvalue()
        assert "Similarity" in out
        assert "40%" in out
        assert "~ Line 1 -> 1:" in out
        assert "+ Line 5: and additional content" in out

    def test_stats_only(self, basic_texts):
        console, buffer = self._console()
        render_rich_report(compare_texts(*basic_texts), console, stats_only=True)
        assert "Line 5" not in buffer.getvalue()

    def test_no_differences(self):
        console, buffer = self._console()
        render_rich_report(compare_texts("same", "same"), console)
        assert "No differences found." in buffer.getvalue()

    def test_plain_statistics(self):
        text = format_plain_statistics(compare_texts("A\nX\nA", "X"))
        assert text.splitlines()[-1] == "Similarity: 33.33%"


@pytest.mark.unit
@pytest.mark.cli
class TestBuildSettings:
    """Tests for combining flags with configuration values."""

    def test_options_from_config(self):
        options = build_comparison_options(_namespace(), {"ignore_case": True, "format": "json"})
        assert options == ComparisonOptions(ignore_case=True)

    def test_flags_override_config(self):
        options = build_comparison_options(_namespace(context_lines=0), {"context_lines": 8})
        assert options.context_lines == 0

    def test_invalid_config_option(self):
        with pytest.raises(InvalidOptionsError):
            build_comparison_options(_namespace(), {"ignore_case": "sometimes"})

    def test_output_defaults(self):
        settings = build_output_settings(_namespace(), {})
        assert settings == OutputSettings()

    def test_output_from_config(self):
        settings = build_output_settings(_namespace(), {"format": "html", "max-input-size": 50, "rich": True})
        assert settings.format == "html"
        assert settings.max_input_size == 50
        assert settings.rich is True

    def test_output_flag_wins(self):
        settings = build_output_settings(_namespace(format="json"), {"format": "html"})
        assert settings.format == "json"

    def test_bad_format(self):
        with pytest.raises(UnsupportedFormatError):
            build_output_settings(_namespace(), {"format": "pdf"})

    @pytest.mark.parametrize("value", [0, -5, "big", True])
    def test_bad_max_size(self, value):
        with pytest.raises(InvalidOptionsError, match="max_input_size"):
            build_output_settings(_namespace(), {"max_input_size": value})

    def test_bad_color(self):
        with pytest.raises(InvalidOptionsError, match="color"):
            build_output_settings(_namespace(), {"color": "rainbow"})


@pytest.mark.unit
@pytest.mark.cli
class TestRunAndEmit:
    """Tests for running comparisons and emitting reports."""

    def test_run_comparison_guard(self):
        with pytest.raises(InputTooLargeError) as exc_info:
            run_comparison("ok", "too long", ComparisonOptions(), max_input_size=3)
        assert exc_info.value.side == "new"

    def test_run_comparison_without_guard(self):
        result = run_comparison("x" * 10, "x" * 10, ComparisonOptions(), max_input_size=None)
        assert not result.has_changes

    def test_emit_json(self, basic_texts, capsys):
        emit_result(compare_texts(*basic_texts), OutputSettings(format="json"))
        assert '"similarity": 40.0' in capsys.readouterr().out

    def test_emit_stats_only_ignores_format(self, basic_texts, capsys):
        emit_result(compare_texts(*basic_texts), OutputSettings(format="html", stats_only=True))
        out = capsys.readouterr().out
        assert out.startswith("Total Lines: 5")
        assert "<html" not in out

    def test_emit_to_file(self, basic_texts, temp_dir, capsys):
        output = temp_dir / "report.txt"
        emit_result(compare_texts(*basic_texts), OutputSettings(output=str(output), color="always"))
        assert "\033[" not in output.read_text(encoding="utf-8")
        assert "Report written to" in capsys.readouterr().err
