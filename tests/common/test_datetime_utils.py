from datetime import date, datetime, timezone, timedelta
from unittest.mock import patch

import pytest

from attendance_app.backend.common.datetime_utils import to_calendar_date


@pytest.mark.parametrize("value, expected", [
    ("2024-01-05", date(2024, 1, 5)),
    (" 2024-01-05 ", date(2024, 1, 5)),
    ("2024-01-05T10:00:00Z", date(2024, 1, 5)),
    ("2024-01-05T23:30:00-02:00", date(2024, 1, 6)),
    ("2024-01-05T00:30:00+03:00", date(2024, 1, 4)),
    ("2024-01-05T12:00:00", date(2024, 1, 5)),
    (date(2023, 12, 31), date(2023, 12, 31)),
    (datetime(2023, 12, 31, 23, 0, tzinfo=timezone(timedelta(hours=-5))), date(2024, 1, 1)),
])
def test_to_calendar_date(value, expected):
    assert to_calendar_date(value) == expected


@pytest.mark.parametrize("value", [None, ""])
@patch("attendance_app.backend.common.datetime_utils.utc_now")
def test_missing_value_means_today_in_utc(mock_now, value):
    mock_now.return_value = datetime(2025, 7, 1, 0, 5, tzinfo=timezone.utc)
    assert to_calendar_date(value) == date(2025, 7, 1)


@pytest.mark.parametrize("value", ["2024-13-01", "05/01/2024", "tomorrow", "2024-02-30"])
def test_unparseable_values_raise(value):
    with pytest.raises(ValueError):
        to_calendar_date(value)
