import gc

import pytest

from qor.switch import CompositeSwitch, Record, Switch, When


class _Counter:
    def __init__(self):
        self.count = 0

    def trigger(self):
        self.count += 1


def test_fresh_switch_is_released_and_empty():
    s = Switch()
    assert not s
    assert s.empty()
    assert s.pressed_now() is False
    assert s.history_capacity() == 1


def test_constructor_saturates():
    assert Switch(True).pressure() == 1.0
    assert Switch(5.0).pressure() == 1.0
    assert Switch(-3.0).pressure() == 0.0


def test_press_becomes_now_after_one_logic_step():
    s = Switch()
    s.set(True)
    assert s.pressed()
    assert s.record().when == When.NONE
    assert not s.pressed_now()
    s.logic(0.0)
    assert s.record().when == When.NOW
    assert s.pressed_now()
    s.logic(0.0)
    assert s.record().when == When.BEFORE
    assert not s.pressed_now()
    s.logic(0.0)
    assert s.record().when == When.BEFORE


def test_release_now():
    s = Switch(True)
    s.set(False)
    s.logic(0.0)
    assert s.released_now()
    assert not s.pressed_now()


def test_threshold_crossing_records():
    s = Switch()
    s.set_pressure(0.2)
    assert s.empty()
    assert not s
    s.set_pressure(0.3)
    assert not s.empty()
    assert s
    s.set_pressure(2.0)
    assert s.pressure() == 1.0


def test_logic_accumulates_time():
    s = Switch()
    s.set(True)
    s.logic(0.5)
    s.logic(0.25)
    assert s.time() == 0.75


def test_consume_releases_switch():
    s = Switch()
    s.set(True)
    s.logic(0.0)
    assert s.consume()
    assert s.pressure() == 0.0
    assert not s.consume()


def test_consume_now_keeps_pressure():
    s = Switch()
    s.set(True)
    s.logic(0.0)
    assert s.consume_now()
    assert s.pressed()
    assert not s.pressed_now()


def test_history_out_of_range():
    s = Switch()
    with pytest.raises(IndexError):
        s.history(0)
    with pytest.raises(IndexError):
        s.record()


def test_history_capacity_and_clear():
    s = Switch()
    s.set_history_capacity(3)
    for pressed in (True, False, True):
        s.set(pressed)
    assert s.history_capacity() == 3
    assert s.history(2).press()
    with pytest.raises(IndexError):
        s.history(3)
    s.clear_history()
    s.history(0)
    with pytest.raises(IndexError):
        s.history(1)


def test_clear_history_on_empty_adds_record():
    s = Switch()
    s.clear_history()
    assert not s.empty()
    assert s.record().when == When.NONE


def test_dummy_ignores_changes():
    s = Switch()
    s.make_dummy()
    s.set(True)
    assert not s.pressed()
    assert s.empty()


def test_plug_notifies_live_controllers_only():
    s = Switch()
    c = _Counter()
    s.plug(c)
    s.set(True)
    s.set(False)
    assert c.count == 2
    other = _Counter()
    s.plug(other)
    del other
    gc.collect()
    s.set(True)
    assert c.count == 3


def test_record_press_release():
    assert Record().press()
    assert not Record().release()
    assert Record(diff=-1.0).release()


def test_composite_any_pressed():
    a, b = Switch(), Switch()
    comp = CompositeSwitch([a, b])
    assert not comp
    assert comp.pressure() == 0.0
    b.set(True)
    assert comp.pressed()
    assert comp
    assert comp.pressure() == b.pressure()
    b.logic(0.0)
    assert comp.pressed_now()
    assert comp.now()


def test_composite_set_and_threshold():
    a, b = Switch(), Switch()
    comp = CompositeSwitch([a, b])
    assert comp.threshold() == a.threshold()
    comp.set(True)
    assert a.pressed() and b.pressed()
    comp.set(False)
    a.logic(0.0)
    assert comp.released_now()


def test_empty_composite():
    comp = CompositeSwitch()
    assert comp.threshold() == 0.5
    assert not comp
    assert not comp.pressed_now()