"""Tests for slot arithmetic and availability resolution"""

from datetime import date, time

import pytest

from app.services.slots import (
    SERVICE_SLOTS,
    compute_end_time,
    format_slot_time,
    parse_slot_time,
    resolve_availability,
)


@pytest.mark.parametrize(
    "start, end",
    [
        (time(18, 0), time(20, 0)),
        (time(10, 15), time(12, 15)),
        (time(21, 59), time(23, 59)),
        (time(22, 0), time(0, 0)),
        (time(23, 0), time(1, 0)),
        (time(23, 30), time(1, 30)),
        (time(0, 0), time(2, 0)),
    ],
)
def test_compute_end_time(start, end):
    assert compute_end_time(start) == end


def test_end_time_wraps_for_every_late_start():
    """Every start from 22:00 onwards ends early the next morning"""
    for hour in (22, 23):
        for minute in range(60):
            end = compute_end_time(time(hour, minute))
            assert end == time(hour - 22, minute)


def test_parse_and_format_slot_time():
    assert parse_slot_time("07:05") == time(7, 5)
    assert format_slot_time(time(7, 5)) == "07:05"


def test_all_slots_free_without_bookings():
    for day in (date(2026, 1, 1), date(2026, 12, 31), date(2027, 6, 15)):
        slots = resolve_availability(1, day, [])

        assert len(slots) == len(SERVICE_SLOTS) == 6
        assert all(slot.available for slot in slots)


def test_service_slots_cover_the_day():
    slots = resolve_availability(1, date(2026, 12, 1), [])

    assert [(s.start_time, s.end_time) for s in slots] == [
        ("10:00", "12:00"),
        ("12:00", "14:00"),
        ("14:00", "16:00"),
        ("16:00", "18:00"),
        ("18:00", "20:00"),
        ("20:00", "22:00"),
    ]


def test_booked_slots_are_unavailable():
    slots = resolve_availability(1, date(2026, 12, 1), [time(12, 0), time(20, 0)])

    unavailable = [s.start_time for s in slots if not s.available]
    assert unavailable == ["12:00", "20:00"]


def test_off_grid_booking_blocks_nothing():
    """A booking that doesn't start on a service slot leaves every slot open"""
    slots = resolve_availability(1, date(2026, 12, 1), [time(19, 30)])

    assert all(slot.available for slot in slots)
