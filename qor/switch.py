"""Pressure-sensitive input switches with a short history of state changes."""

from __future__ import annotations

import enum
import weakref
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Iterable, List, Union

ACTIVATION_THRESHOLD = 0.25
DEFAULT_COMPOSITE_THRESHOLD = 0.5


def _saturate(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


class When(enum.IntEnum):
    """How long ago, in frames, a switch changed."""

    NONE = 0
    NOW = 1
    BEFORE = 2
    MAX = 3


@dataclass
class Record:
    """One change of a switch's state."""

    time: float = 0.0
    when: When = When.NONE
    diff: float = 1.0

    def release(self) -> bool:
        return self.diff < 0.0

    def press(self) -> bool:
        return self.diff > 0.0


class Switch:
    """A button, key or axis half whose pressure lies in [0, 1].

    Each change across the activation threshold is recorded; the records
    age by one frame step per call to :meth:`logic`.
    """

    def __init__(self, pressure: Union[bool, float] = False):
        if isinstance(pressure, bool):
            self._pressure = 1.0 if pressure else 0.0
        else:
            self._pressure = _saturate(pressure)
        self._records: Deque[Record] = deque(maxlen=1)
        self._controllers: List[weakref.ReferenceType] = []
        self._dummy = False

    @property
    def dummy(self) -> bool:
        return self._dummy

    def make_dummy(self) -> None:
        """Mark the switch as a stand-in that ignores changes."""
        self._dummy = True

    def set(self, pressed: bool) -> None:
        """Press or release the switch fully; dummies are left untouched."""
        if self._dummy:
            return
        self._pressure = 1.0 if pressed else 0.0
        self._trigger()

    def __bool__(self) -> bool:
        return self._pressure > ACTIVATION_THRESHOLD

    def __lt__(self, value: float) -> bool:
        return self._pressure < value

    def __le__(self, value: float) -> bool:
        return self._pressure <= value

    def __gt__(self, value: float) -> bool:
        return self._pressure > value

    def __ge__(self, value: float) -> bool:
        return self._pressure >= value

    def pressure(self) -> float:
        return self._pressure

    def set_pressure(self, value: float) -> None:
        """Set the pressure; crossing the threshold records a change."""
        old = self._pressure
        self._pressure = _saturate(value)
        crossed_up = old < ACTIVATION_THRESHOLD <= self._pressure
        crossed_down = self._pressure < ACTIVATION_THRESHOLD <= old
        if crossed_up or crossed_down:
            self._trigger()

    def threshold(self) -> float:
        return ACTIVATION_THRESHOLD

    def logic(self, t: float) -> None:
        """Age the newest record by a frame and add ``t`` to every record."""
        if self._dummy:
            return
        if self._records:
            current = self._records[0]
            if current.when < When.BEFORE:
                current.when = When(current.when + 1)
        for rec in self._records:
            rec.time += t

    def pressed(self) -> bool:
        return bool(self)

    def pressed_now(self) -> bool:
        return bool(self) and not self.empty() and self.record().when == When.NOW

    def released_now(self) -> bool:
        return not self and not self.empty() and self.record().when == When.NOW

    def now(self) -> bool:
        return self.record().when == When.NOW

    def consume_now(self) -> bool:
        """Silence a pending press so later ``pressed_now`` checks miss it."""
        hit = self.pressed_now()
        if hit:
            rec = self.record()
            rec.when = When(rec.when + 1)
        return hit

    def consume(self) -> bool:
        """Like :meth:`consume_now`, and also release the switch."""
        hit = self.pressed_now()
        if hit:
            rec = self.record()
            rec.when = When(rec.when + 1)
            self._pressure = 0.0
        return hit

    def time(self) -> float:
        return self.record().time

    def history(self, idx: int = 0) -> Record:
        if idx < 0 or idx >= len(self._records):
            raise IndexError("invalid time index")
        return self._records[idx]

    def plug(self, controller: Any) -> None:
        """Notify ``controller`` (held weakly) whenever the switch changes."""
        self._controllers.append(weakref.ref(controller))

    def history_capacity(self) -> int:
        return self._records.maxlen or 0

    def set_history_capacity(self, size: int) -> None:
        """Change how many records are kept, dropping the latest ones."""
        kept = list(self._records)[:size]
        self._records = deque(kept, maxlen=size)

    def clear_history(self) -> None:
        """Keep exactly one record, adding a blank one if there was none."""
        first = self._records[0] if self._records else Record()
        capacity = max(1, self.history_capacity())
        self._records = deque([first], maxlen=capacity)

    def empty(self) -> bool:
        return not self._records

    def record(self) -> Record:
        if not self._records:
            raise IndexError("switch has no records")
        return self._records[0]

    def _trigger(self) -> None:
        self._records.append(Record())
        alive = []
        for ref in self._controllers:
            controller = ref()
            if controller is not None:
                controller.trigger()
                alive.append(ref)
        self._controllers = alive


class CompositeSwitch:
    """Several switches read as one: active if any of them is."""

    def __init__(self, switches: Iterable[Switch] = ()):
        self._switches = list(switches)

    def set(self, pressed: bool) -> None:
        for s in self._switches:
            s.set(pressed)

    def __bool__(self) -> bool:
        return self.pressure() > self.threshold()

    def pressure(self) -> float:
        return max((s.pressure() for s in self._switches), default=0.0)

    def set_pressure(self, value: float) -> None:
        for s in self._switches:
            s.set_pressure(value)

    def threshold(self) -> float:
        if self._switches:
            return self._switches[0].threshold()
        return DEFAULT_COMPOSITE_THRESHOLD

    def pressed(self) -> bool:
        return any(s.pressed() for s in self._switches)

    def pressed_now(self) -> bool:
        return any(s.pressed_now() for s in self._switches)

    def released_now(self) -> bool:
        return any(s.released_now() for s in self._switches)

    def now(self) -> bool:
        return any(not s.empty() and s.now() for s in self._switches)