import unittest
from datetime import datetime, timedelta, timezone

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from recordbook.errors import ValidationError
from recordbook.timestamps import (
    DateString,
    format_timestamp,
    normalize_timestamp,
    parse_timestamp,
    time_now,
)


class DatedModel(BaseModel):
    when: DateString


class TimestampTests(unittest.TestCase):
    def test_parse_utc_and_offsets(self):
        self.assertEqual(
            parse_timestamp("2024-01-15T10:30:00Z"),
            datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
        )
        parsed = parse_timestamp("2024-01-15T10:30:00.5+02:00")
        self.assertEqual(parsed.utcoffset(), timedelta(hours=2))
        self.assertEqual(parsed.microsecond, 500000)

    def test_rejects_non_rfc3339(self):
        for value in (
            "01/15/2024",
            "2024-01-15",
            "2024-01-15 10:30:00Z",
            "2024-01-15T10:30:00",
            "2024-13-01T00:00:00Z",
            "2024-01-15T10:30:00.Z",
            "",
        ):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError):
                    parse_timestamp(value)

    def test_format_trims_fraction(self):
        value = datetime(2024, 1, 15, 10, 30, 0, 120000, tzinfo=timezone.utc)
        self.assertEqual(format_timestamp(value), "2024-01-15T10:30:00.12Z")
        self.assertEqual(
            format_timestamp(datetime(2024, 1, 15, 10, 30)), "2024-01-15T10:30:00Z"
        )

    def test_format_keeps_offset(self):
        tz = timezone(-timedelta(hours=5, minutes=30))
        value = datetime(2024, 1, 15, 10, 30, tzinfo=tz)
        self.assertEqual(format_timestamp(value), "2024-01-15T10:30:00-05:30")

    def test_normalize_keeps_nanoseconds(self):
        self.assertEqual(
            normalize_timestamp("2024-01-15T10:30:00.123456789Z"),
            "2024-01-15T10:30:00.123456789Z",
        )
        self.assertEqual(
            normalize_timestamp("2024-01-15T10:30:00.500+00:00"),
            "2024-01-15T10:30:00.5Z",
        )

    def test_time_now_round_trips(self):
        now = time_now()
        self.assertTrue(now.endswith("Z"))
        self.assertEqual(format_timestamp(parse_timestamp(now)), now)

    def test_date_string_field(self):
        self.assertEqual(
            DatedModel(when="2024-01-15T10:30:00+00:00").when, "2024-01-15T10:30:00Z"
        )
        with self.assertRaises(PydanticValidationError) as ctx:
            DatedModel(when="yesterday")
        self.assertEqual(ctx.exception.errors()[0]["type"], "bad_date")


if __name__ == "__main__":
    unittest.main()
