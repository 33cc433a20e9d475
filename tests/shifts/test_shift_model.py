from datetime import date, time

from fakes import make_employee, make_shift


def test_duration_wraps_past_midnight():
    assert make_shift(time(8, 0), time(17, 0)).duration_minutes == 540
    assert make_shift(time(22, 0), time(6, 0)).duration_minutes == 480
    assert make_shift(time(8, 0), time(8, 0)).duration_minutes == 0


def test_overnight_compares_hours_only():
    assert make_shift(time(22, 0), time(6, 0)).is_overnight is True
    assert make_shift(time(23, 30), time(0, 5)).is_overnight is True
    assert make_shift(time(14, 0), time(14, 30)).is_overnight is False
    # Same hour, end minutes before start minutes: still not overnight.
    assert make_shift(time(23, 30), time(23, 5)).is_overnight is False


def test_covers_inclusive_window():
    shift = make_shift(time(8, 0), time(17, 0), active_date=date(2025, 1, 10), expiry_date=date(2025, 1, 20))

    assert not shift.covers(date(2025, 1, 9))
    assert shift.covers(date(2025, 1, 10))
    assert shift.covers(date(2025, 1, 20))
    assert not shift.covers(date(2025, 1, 21))


def test_open_ended_shift_covers_future():
    shift = make_shift(time(8, 0), time(17, 0), active_date=date(2025, 1, 10))

    assert shift.covers(date(2030, 1, 1))


def test_belongs_to_by_id_or_person_code():
    emp = make_employee(employee_id=5, person_code="G-17")

    assert make_shift(time(8, 0), time(17, 0), employee_id=5).belongs_to(emp)
    assert make_shift(time(8, 0), time(17, 0), employee_id=9, person_code="G-17").belongs_to(emp)
    assert not make_shift(time(8, 0), time(17, 0), employee_id=9).belongs_to(emp)
