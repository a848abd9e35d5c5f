import pytest

from appointment.availability import normalize_time, to_minutes, weekday_label, within_window
from models.doctor import AvailabilityWindow


@pytest.mark.parametrize(
    "date, day",
    [
        ("2024-01-01", "Mon"),
        ("2024-01-03", "Wed"),
        ("2024-02-29", "Thu"),
        ("2025-06-01", "Sun"),
    ],
)
def test_weekday_label(date, day):
    assert weekday_label(date) == day


@pytest.mark.parametrize("date", ["2024-13-01", "2024-1-1", "2024-W01-1", "yesterday", ""])
def test_weekday_label_rejects_malformed_dates(date):
    with pytest.raises(ValueError):
        weekday_label(date)


def test_to_minutes():
    assert to_minutes("00:00") == 0
    assert to_minutes("9:05") == 545
    assert to_minutes("23:59") == 23 * 60 + 59


@pytest.mark.parametrize("time", ["24:00", "12:5", "12:60", "1200", "-1:00", ""])
def test_to_minutes_rejects_malformed_times(time):
    with pytest.raises(ValueError):
        to_minutes(time)


def test_normalize_time():
    assert normalize_time("9:00") == "09:00"
    assert normalize_time("14:30") == "14:30"


def test_within_window_compares_numerically():
    window = AvailabilityWindow(day="Sat", start_time="9:00", end_time="13:00")

    # "10:00" < "9:00" as strings, but not as times
    assert within_window("10:00", window)
    assert within_window("09:00", window)
    assert within_window("13:00", window)
    assert not within_window("08:59", window)
    assert not within_window("13:01", window)
