import pytest

from models.schemas import Reading
from services.storage import ReadingWindow


def reading(value, timestamp="12:00:00"):
    return Reading(timestamp=timestamp, value=value)


def test_add_prepends():
    window = ReadingWindow(capacity=3)
    window.add(reading(70.0))
    window.add(reading(71.0))

    assert [r.value for r in window] == [71.0, 70.0]
    assert len(window) == 2


def test_evicts_oldest_beyond_capacity():
    window = ReadingWindow(capacity=3)
    for value in [1.0, 2.0, 3.0, 4.0, 5.0]:
        window.add(reading(value))

    assert [r.value for r in window] == [5.0, 4.0, 3.0]


def test_snapshot_is_immutable_copy():
    window = ReadingWindow()
    window.add(reading(70.0))
    snapshot = window.snapshot()
    window.add(reading(80.0))

    assert isinstance(snapshot, tuple)
    assert [r.value for r in snapshot] == [70.0]
    assert [r.value for r in window] == [80.0, 70.0]


def test_default_capacity_is_twenty():
    assert ReadingWindow().capacity == 20


def test_invalid_capacity():
    with pytest.raises(ValueError):
        ReadingWindow(capacity=0)
