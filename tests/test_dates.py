from datetime import date, datetime, time

from meeting_tracker.services.excel.dates import normalize_date


def test_canonical_string_is_unchanged():
    assert normalize_date('2024-01-15') == '2024-01-15'
    assert normalize_date(normalize_date('2024-01-15')) == '2024-01-15'


def test_empty_values():
    assert normalize_date(None) == ''
    assert normalize_date('') == ''
    assert normalize_date(0) == ''


def test_serial_number():
    assert normalize_date(45306) == '2024-01-15'
    assert normalize_date(45306.75) == '2024-01-15'


def test_serial_number_around_1900_leap_day():
    # The 1900 date system counts a 29 February 1900 that never existed
    assert normalize_date(1) == '1900-01-01'
    assert normalize_date(59) == '1900-02-28'
    assert normalize_date(61) == '1900-03-01'


def test_serial_fraction_is_not_a_date():
    assert normalize_date(0.5) == ''


def test_date_objects():
    assert normalize_date(datetime(2024, 3, 5, 17, 45)) == '2024-03-05'
    assert normalize_date(date(2023, 12, 31)) == '2023-12-31'


def test_time_and_bool_are_not_dates():
    assert normalize_date(time(10, 0)) == ''
    assert normalize_date(True) == ''


def test_free_text_formats():
    assert normalize_date('2024-01-15T10:30:00') == '2024-01-15'
    assert normalize_date('2024-01-15T10:30:00Z') == '2024-01-15'
    assert normalize_date('2024/01/15') == '2024-01-15'
    assert normalize_date('01/15/2024') == '2024-01-15'
    assert normalize_date('15-Jan-2024') == '2024-01-15'
    assert normalize_date('15 January 2024') == '2024-01-15'
    assert normalize_date('January 15, 2024') == '2024-01-15'
    assert normalize_date('Jan 5, 2024') == '2024-01-05'
    assert normalize_date('  2024-1-5 ') == '2024-01-05'


def test_unparseable_values_become_empty():
    assert normalize_date('next week') == ''
    assert normalize_date('2024-02-30T00:00') == ''
    assert normalize_date(float('nan')) == ''
    assert normalize_date(float('inf')) == ''
    assert normalize_date(10 ** 12) == ''
    assert normalize_date(['2024-01-15']) == ''


def test_offset_timestamps_are_dated_in_utc():
    assert normalize_date('2024-01-15T23:30:00-05:00') == '2024-01-16'
    assert normalize_date('2024-01-16T01:00:00+05:00') == '2024-01-15'
    assert normalize_date('2024-01-15T23:30:00Z') == '2024-01-15'
    assert normalize_date('2024-01-15T23:30:00+00:00') == '2024-01-15'
