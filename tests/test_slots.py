"""Tests for slot usage in pyotoolkit classes."""

import pyotoolkit as pt


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(pt.Iter.from_(()))
    assert _check_slots(pt.Seq(()))
    assert _check_slots(pt.Vec([]))
    assert _check_slots(pt.Dict({}))
    assert _check_slots(pt.get_config())
