"""Tests for letter pattern translation."""

from __future__ import annotations

import pytest

from epochtime.errors import PatternError
from epochtime.patterns import has_year_field, is_strftime_pattern, to_strftime


class TestToStrftime:
    """Tests for to_strftime."""

    @pytest.mark.parametrize(
        ("pattern", "expected"),
        [
            ("yyyy-MM-dd HH:mm:ss", "%Y-%m-%d %H:%M:%S"),
            ("yyyyMMdd", "%Y%m%d"),
            ("yyyyMMddHHmmss", "%Y%m%d%H%M%S"),
            ("yy/M/d H:m:s", "%y/%m/%d %H:%M:%S"),
            ("dd MMM yyyy", "%d %b %Y"),
            ("EEEE, MMMM d", "%A, %B %d"),
            ("EEE hh:mm a", "%a %I:%M %p"),
            ("yyyy DDD", "%Y %j"),
            ("HH:mm Z z", "%H:%M %z %Z"),
            ("HH:mm:ss.SSS", "%H:%M:%S.%f"),
            ("ss,S", "%S,%f"),
        ],
    )
    def test_fields(self, pattern: str, expected: str) -> None:
        assert to_strftime(pattern) == expected

    def test_quoted_literal(self) -> None:
        assert to_strftime("yyyy-MM-dd'T'HH:mm:ss") == "%Y-%m-%dT%H:%M:%S"
        assert to_strftime("'at' HH 'o''clock'") == "at %H o'clock"

    def test_escaped_quote(self) -> None:
        assert to_strftime("hh''mm") == "%I'%M"

    def test_strftime_pattern_passes_through(self) -> None:
        assert is_strftime_pattern("%Y/%m/%d")
        assert to_strftime("%Y/%m/%d") == "%Y/%m/%d"

    @pytest.mark.parametrize("pattern", ["yyyy-MM-dd Q", "yyyy-ww", "yyyy-W"])
    def test_unsupported_letter(self, pattern: str) -> None:
        with pytest.raises(PatternError, match="Unsupported pattern letter"):
            to_strftime(pattern)

    @pytest.mark.parametrize("pattern", ["HHH", "dddd", "DDDD", "MMMMM:ss", "ss.SSSS"])
    def test_invalid_run_length(self, pattern: str) -> None:
        with pytest.raises(PatternError, match="Invalid pattern"):
            to_strftime(pattern)

    def test_unterminated_quote(self) -> None:
        with pytest.raises(PatternError, match="Unterminated quote"):
            to_strftime("yyyy 'T")


class TestHasYearField:
    """Tests for year directive detection."""

    @pytest.mark.parametrize("pattern", ["%Y-%m-%d", "%d/%m/%y", "%c", "%D"])
    def test_with_year(self, pattern: str) -> None:
        assert has_year_field(pattern)

    @pytest.mark.parametrize("pattern", ["%H:%M:%S", "%m-%d", "%%Y", ""])
    def test_without_year(self, pattern: str) -> None:
        assert not has_year_field(pattern)
