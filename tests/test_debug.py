"""Tests for the dev-time ASCII views in epochs.debug."""

from __future__ import annotations

from conftest import REFERENCE_DISPLAY


class TestShowInterpretations:

    def test_lists_every_format(self, capsys):
        from epochs.debug import show_interpretations
        from epochs.formats import FORMATS

        result = show_interpretations(1234567890)
        lines = result.splitlines()
        assert len(lines) == 2 + len(FORMATS)
        assert lines[0].startswith("Format")
        assert capsys.readouterr().out.strip() == result.strip()

    def test_shows_result_or_reason(self):
        from epochs.debug import show_interpretations

        rows = {
            line.split()[0]: line
            for line in show_interpretations(1234567890).splitlines()[2:]
        }
        assert rows["unix"].endswith(REFERENCE_DISPLAY)
        assert "(" in rows["symbian"]

    def test_float_marks_tick_formats_not_applicable(self):
        from epochs.debug import show_interpretations

        result = show_interpretations(39857.980209)
        assert "(not applicable)" in result
        assert "2009-02-13 23:31:30.057" in result

    def test_custom_catalog(self, custom_catalog):
        from epochs.debug import show_interpretations

        assert "1980-01-06 00:00:00" in show_interpretations(0, custom_catalog)


class TestShowMonth32:

    def test_reference_breakdown(self, capsys):
        from epochs.debug import show_month32

        result = show_month32(1297899090)
        assert "synthetic months: 469  (year 2009, month 2)" in result
        assert "day of month:     13" in result
        assert "seconds of day:   84690  (23:31:30)" in result
        assert "anchor + days:    1970-01-13" in result
        assert "1297899090" in capsys.readouterr().out
