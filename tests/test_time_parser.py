import pytest

from zeitsaldo.modules.time_parser import parse_work_time


class TestParseWorkTime:

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("8.00", 8.0),
            ("8.30", 8.5),
            ("0.00", 0),
            ("12.45", 12.75),
            ("  8.30  ", 8.5),
        ],
    )
    def test_valid_tokens(self, text, expected):
        assert parse_work_time(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "abc", "8.0", "8.300", "8:30", ".30", "8.", "-1.00", "8,30"])
    def test_invalid_tokens_are_absent(self, text):
        assert parse_work_time(text) is None

    def test_whitespace_padding_is_ignored(self):
        assert parse_work_time("\t12.45\n") == parse_work_time("12.45")

    def test_minutes_are_not_range_checked(self):
        # Minutenteil >= 60 wird unverändert übernommen
        assert parse_work_time("8.75") == 9.25

    def test_non_ascii_digits_are_rejected(self):
        assert parse_work_time("８.３０") is None
