import datetime as dt

import pytest

from frontdesk.records.parsing_helpers import parse_hhmm_time, parse_iso_date


class TestParseIsoDate:
    """Parses strict ``YYYY-MM-DD`` calendar dates."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2025-03-10", dt.date(2025, 3, 10)),
            ("2028-02-29", dt.date(2028, 2, 29)),
            (" 2025-12-31 ", dt.date(2025, 12, 31)),
        ],
        ids=["standard", "leap-day", "surrounding-whitespace"],
    )
    def test_valid_dates(self, text: str, expected: dt.date) -> None:
        assert parse_iso_date(text) == (expected, None)

    @pytest.mark.parametrize(
        "text",
        [
            "2024-13-40",
            "2025-02-29",
            "2025-3-10",
            "20250310",
            "10/03/2025",
            "",
            "tomorrow",
            "\uff12\uff10\uff12\uff15-\uff10\uff13-\uff11\uff10",
        ],
        ids=[
            "month-13",
            "not-a-leap-year",
            "single-digit-month",
            "basic-format",
            "slashes",
            "empty",
            "words",
            "fullwidth-digits",
        ],
    )
    def test_invalid_dates(self, text: str) -> None:
        value, err = parse_iso_date(text)

        assert value is None
        assert err is not None
        assert "YYYY-MM-DD" in err


class TestParseHhmmTime:
    """Parses 24-hour ``HH:MM`` times."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("09:30", dt.time(9, 30)),
            ("00:00", dt.time(0, 0)),
            ("23:59", dt.time(23, 59)),
        ],
        ids=["morning", "midnight", "before-midnight"],
    )
    def test_valid_times(self, text: str, expected: dt.time) -> None:
        assert parse_hhmm_time(text) == (expected, None)

    @pytest.mark.parametrize(
        "text",
        [
            "25:61",
            "24:00",
            "9:30",
            "09:30:00",
            "0930",
            "",
            "noon",
            "\u0660\u0669:\u0663\u0660",
            "\uff10\uff19:\uff13\uff10",
        ],
        ids=[
            "out-of-range",
            "hour-24",
            "single-digit-hour",
            "with-seconds",
            "no-colon",
            "empty",
            "words",
            "arabic-indic-digits",
            "fullwidth-digits",
        ],
    )
    def test_invalid_times(self, text: str) -> None:
        value, err = parse_hhmm_time(text)

        assert value is None
        assert err is not None
        assert "HH:MM" in err
