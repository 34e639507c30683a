import calendar
import datetime

from leatherman.timeutil import jump_to

UTC = datetime.timezone.utc


def test_sunday_to_friday():
    start = datetime.datetime(2018, 9, 23, tzinfo=UTC)
    assert jump_to(start, calendar.FRIDAY) == datetime.datetime(2018, 9, 28, tzinfo=UTC)


def test_saturday_to_friday():
    start = datetime.datetime(2018, 9, 22, tzinfo=UTC)
    assert jump_to(start, calendar.FRIDAY) == datetime.datetime(2018, 9, 28, tzinfo=UTC)


def test_same_weekday_stays_put():
    start = datetime.datetime(2018, 9, 28, 13, 30, tzinfo=UTC)
    assert jump_to(start, calendar.FRIDAY) == start


def test_plain_dates():
    assert jump_to(datetime.date(2018, 9, 23), calendar.MONDAY) == datetime.date(2018, 9, 24)


def test_result_is_within_a_week_and_on_target_day():
    start = datetime.date(2020, 2, 27)
    for day in range(7):
        result = jump_to(start, day)
        assert result.weekday() == day
        assert 0 <= (result - start).days < 7