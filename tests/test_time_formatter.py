import pytest

from zeitsaldo.modules.time_formatter import format_signed, format_unsigned


class TestFormatUnsigned:

    @pytest.mark.parametrize(
        "hours, expected",
        [
            (0, "0:00"),
            (8, "8:00"),
            (8.5, "8:30"),
            (-2.25, "2:15"),
            (0.9917, "1:00"),
            (2.9917, "3:00"),
            (2.991, "2:59"),
            (-2.9917, "3:00"),
            (99.9917, "100:00"),
            (123.25, "123:15"),
        ],
    )
    def test_format(self, hours, expected):
        assert format_unsigned(hours) == expected

    @pytest.mark.parametrize("hours", [0.9999, 5.99999, 47.995, 199.9999])
    def test_minutes_never_sixty(self, hours):
        assert not format_unsigned(hours).endswith(":60")

    def test_minutes_are_zero_padded(self):
        assert format_unsigned(1 + 5 / 60) == "1:05"


class TestFormatSigned:

    @pytest.mark.parametrize(
        "hours, expected",
        [
            (0, "+0:00"),
            (1.5, "+1:30"),
            (-0.5, "-0:30"),
            (2.9917, "+3:00"),
            (-2.9917, "-3:00"),
            (-10, "-10:00"),
            (-1e-15, "-0:00"),
        ],
    )
    def test_format(self, hours, expected):
        assert format_signed(hours) == expected

    @pytest.mark.parametrize("hours", [0, 0.25, 7.75, -0.25, -7.75])
    def test_sign_prefixes_unsigned(self, hours):
        sign = "+" if hours >= 0 else "-"
        assert format_signed(hours) == sign + format_unsigned(hours)
