"""Keyboard, mouse and gamepad state driven by a stream of input events."""

from __future__ import annotations

import abc
import enum
import weakref
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from qor import headless
from qor.switch import Switch

ListenCallback = Callable[[bool, bool], Any]

KEY_UNKNOWN = 0
KEY_BACKSPACE = 8
KEY_TAB = 9
KEY_RETURN = 13
KEY_ESCAPE = 27
KEY_SPACE = 32
KEY_DELETE = 127

HAT_CENTERED = 0
HAT_UP = 1
HAT_RIGHT = 2
HAT_DOWN = 4
HAT_LEFT = 8

MOUSE_BUTTON_LEFT = 1
MOUSE_BUTTON_MIDDLE = 2
MOUSE_BUTTON_RIGHT = 3

_SCANCODE_MASK = 1 << 30
_ANALOG_BASE = 1 << 12
_HAT_BASE = 1 << 16


def _scan(code: int) -> int:
    return code | _SCANCODE_MASK


_NAMED_KEYS: Dict[str, int] = {
    "Backspace": KEY_BACKSPACE,
    "Tab": KEY_TAB,
    "Return": KEY_RETURN,
    "Escape": KEY_ESCAPE,
    "Space": KEY_SPACE,
    "Delete": KEY_DELETE,
    "CapsLock": _scan(57),
    **{f"F{n}": _scan(57 + n) for n in range(1, 13)},
    "PrintScreen": _scan(70),
    "ScrollLock": _scan(71),
    "Pause": _scan(72),
    "Insert": _scan(73),
    "Home": _scan(74),
    "PageUp": _scan(75),
    "End": _scan(77),
    "PageDown": _scan(78),
    "Right": _scan(79),
    "Left": _scan(80),
    "Down": _scan(81),
    "Up": _scan(82),
    "Left Ctrl": _scan(224),
    "Left Shift": _scan(225),
    "Left Alt": _scan(226),
    "Left GUI": _scan(227),
    "Right Ctrl": _scan(228),
    "Right Shift": _scan(229),
    "Right Alt": _scan(230),
    "Right GUI": _scan(231),
}
_KEYS_BY_LOWER = {name.lower(): code for name, code in _NAMED_KEYS.items()}
_NAMES_BY_KEY = {code: name for name, code in _NAMED_KEYS.items()}


def key_from_name(name: str) -> int:
    """Key code for a key name (case-insensitive), or ``KEY_UNKNOWN``."""
    if not name:
        return KEY_UNKNOWN
    code = _KEYS_BY_LOWER.get(name.lower())
    if code is not None:
        return code
    if len(name) == 1 and 32 < ord(name) < 127:
        return ord(name.lower())
    return KEY_UNKNOWN


def key_name(key: int) -> str:
    """Human-readable name of a key code; "" when unknown."""
    name = _NAMES_BY_KEY.get(key)
    if name is not None:
        return name
    if 32 < key < 127:
        return chr(key).upper()
    return ""


def gamepad_analog_id(button: int) -> int:
    """Switch id used for a gamepad analog axis half."""
    return _ANALOG_BASE + button


def gamepad_hat_id(button: int) -> int:
    """Switch id used for a gamepad hat direction."""
    return _HAT_BASE + button


class Device(enum.IntEnum):
    KEYBOARD = 0
    MOUSE = 1
    GAMEPAD = 2


class Listen(enum.IntEnum):
    """What the input system is capturing instead of normal play input."""

    NONE = 0
    TEXT = 1
    KEY = 2


@dataclass(frozen=True)
class Bind:
    """Location of a bound switch."""

    type: Device = Device.KEYBOARD
    device_id: int = 0
    id: int = 0


@dataclass
class TextField:
    """Text being typed while the input system listens; held weakly."""

    text: str = ""


@dataclass(frozen=True)
class QuitEvent:
    pass


@dataclass(frozen=True)
class KeyEvent:
    key: int
    down: bool
    repeat: bool = False


@dataclass(frozen=True)
class JoyHatEvent:
    which: int
    hat: int
    value: int


@dataclass(frozen=True)
class JoyAxisEvent:
    which: int
    axis: int
    value: int


@dataclass(frozen=True)
class JoyButtonEvent:
    which: int
    button: int
    down: bool


@dataclass(frozen=True)
class TextInputEvent:
    text: str


@dataclass(frozen=True)
class MouseMotionEvent:
    x: float
    y: float
    xrel: float = 0.0
    yrel: float = 0.0


@dataclass(frozen=True)
class MouseButtonEvent:
    button: int
    down: bool


@dataclass(frozen=True)
class MouseWheelEvent:
    x: int
    y: int


_MOUSE_BUTTONS = {MOUSE_BUTTON_LEFT: 0, MOUSE_BUTTON_RIGHT: 1, MOUSE_BUTTON_MIDDLE: 2}
_MOUSE_NAMES = {"left": 0, "right": 1, "middle": 2, "scrolldown": 3, "scrollup": 4}


class Input:
    """Switch state for every device, updated once per frame from events."""

    def __init__(self) -> None:
        self._devices: Dict[int, Dict[int, Dict[int, Switch]]] = {}
        self._binds: List[Bind] = []
        self._controllers: Dict[int, Controller] = {}
        self._dummy = Switch()
        self._dummy.make_dummy()
        self._relative_mouse = False
        self._listen = Listen.NONE
        self._listen_text: Optional[weakref.ReferenceType] = None
        self._listen_callback: Optional[ListenCallback] = None
        self._quit = False
        self._escape = False
        self._mouse_pos = (0.0, 0.0)
        self._mouse_rel = (0.0, 0.0)

    def _switch(self, device: int, device_id: int, button: int) -> Switch:
        switches = self._devices.setdefault(device, {}).setdefault(device_id, {})
        found = switches.get(button)
        if found is None:
            found = switches[button] = Switch()
        return found

    def _existing(self, device: int, device_id: int, button: int) -> Switch:
        return self._devices.get(device, {}).get(device_id, {}).get(button, self._dummy)

    def _text_field(self) -> Optional[TextField]:
        return self._listen_text() if self._listen_text is not None else None

    def _notify(self, done: bool, success: bool) -> None:
        if self._listen_callback is not None:
            self._listen_callback(done, success)

    def logic(self, t: float, events: Iterable[Any] = ()) -> None:
        """Apply a frame's events, then age every switch and run controllers."""
        if headless.enabled():
            return
        self._mouse_rel = (0.0, 0.0)

        if self._listen and self._text_field() is None:
            self._listen_callback = None
            self.abort_listen()

        for wheel in range(3, 7):
            self._switch(Device.MOUSE, 0, wheel).set(False)

        for event in events:
            self._handle(event)

        for device_map in self._devices.values():
            for switches in device_map.values():
                for switch in switches.values():
                    switch.logic(t)

        for controller in list(self._controllers.values()):
            if controller.triggered():
                controller.event()
                controller.untrigger()
            controller.logic(t)

    def _handle(self, event: Any) -> None:
        match event:
            case QuitEvent():
                self._quit = True
            case KeyEvent(down=True):
                self._key_down(event)
            case KeyEvent(down=False):
                if not self._listen and event.repeat:
                    return
                self._switch(Device.KEYBOARD, 0, event.key).set(False)
                if event.key == KEY_ESCAPE:
                    self._escape = False
            case JoyHatEvent():
                self._hat(event)
            case JoyAxisEvent():
                val = ((event.value + 32768) + 0.5) / 32767.0 - 1.0
                base = gamepad_analog_id(event.axis << 1)
                negative = self._switch(Device.GAMEPAD, event.which, base)
                positive = self._switch(Device.GAMEPAD, event.which, base + 1)
                if val >= 0.0:
                    negative.set(False)
                    positive.set_pressure(val)
                else:
                    negative.set_pressure(-val)
                    positive.set(False)
            case JoyButtonEvent():
                self._switch(Device.GAMEPAD, event.which, event.button).set(event.down)
            case TextInputEvent():
                field = self._text_field()
                if field is not None:
                    field.text += event.text
                    self._notify(False, False)
            case MouseMotionEvent():
                if self._relative_mouse:
                    rx, ry = self._mouse_rel
                    self._mouse_rel = (rx + event.xrel, ry + event.yrel)
                else:
                    self._mouse_rel = self._mouse_pos
                self._mouse_pos = (float(event.x), float(event.y))
                if not self._relative_mouse:
                    (px, py), (ox, oy) = self._mouse_pos, self._mouse_rel
                    self._mouse_rel = (px - ox, py - oy)
            case MouseButtonEvent():
                index = _MOUSE_BUTTONS.get(event.button)
                if index is not None:
                    self._switch(Device.MOUSE, 0, index).set(event.down)
            case MouseWheelEvent():
                if event.y < 0:
                    self._switch(Device.MOUSE, 0, 3).set(True)
                elif event.y > 0:
                    self._switch(Device.MOUSE, 0, 4).set(True)
                if event.x < 0:
                    self._switch(Device.MOUSE, 0, 5).set(True)
                elif event.x > 0:
                    self._switch(Device.MOUSE, 0, 6).set(True)

    def _key_down(self, event: KeyEvent) -> None:
        if not self._listen and event.repeat:
            return
        if not self._listen:
            self._switch(Device.KEYBOARD, 0, event.key).set(True)
        if event.key == KEY_ESCAPE:
            if self._listen:
                self.abort_listen()
            else:
                self._escape = True
        elif event.key == KEY_RETURN:
            if self._listen == Listen.TEXT:
                self.listen(Listen.NONE)
                self._switch(Device.KEYBOARD, 0, event.key).set(False)
        elif event.key == KEY_BACKSPACE:
            if self._listen == Listen.TEXT:
                field = self._text_field()
                if field is not None and field.text:
                    field.text = field.text[:-1]
                self._notify(False, False)
        elif self._listen == Listen.KEY:
            field = self._text_field()
            if field is not None:
                field.text = key_name(event.key)
            self.listen(Listen.NONE)
            self._switch(Device.KEYBOARD, 0, event.key).set(False)

    def _hat(self, event: JoyHatEvent) -> None:
        base = gamepad_hat_id(event.hat << 4)
        if self._listen == Listen.NONE:
            for offset, mask in enumerate((HAT_LEFT, HAT_RIGHT, HAT_UP, HAT_DOWN)):
                switch = self._switch(Device.GAMEPAD, event.which, base + offset)
                if event.value & mask:
                    switch.set(True)
                elif switch:
                    switch.set(False)
        elif self._listen == Listen.KEY:
            field = self._text_field()
            if field is not None:
                field.text = f"gamepad {event.which} hat {base}"
            self.listen(Listen.NONE)

    def bind(self, spec: str, controller: "Controller") -> int:
        """Bind a control described by ``spec`` to ``controller``; returns its index.

        ``spec`` is "mouse <button>", "gamepad[N] [analog|hat] <id>" or a key name.
        """
        numpt = next((i for i, ch in enumerate(spec) if ch in " 0123456789"), len(spec))
        device = spec[:numpt]
        try:
            device_idx = int(spec[numpt:numpt + 1])
        except ValueError:
            device_idx = 0

        if device == "mouse":
            button = spec[len(device) + 1:].split(" ", 1)[0]
            button_id = _MOUSE_NAMES.get(button)
            if button_id is None:
                button_id = int(button)
            self._binds.append(Bind(Device.MOUSE, 0, button_id))
            self._switch(Device.MOUSE, 0, button_id).plug(controller)
        elif device == "gamepad":
            button = spec[len(device) + 1:].strip()
            analog = hat = False
            if button.startswith("analog"):
                analog = True
                button = button[len("analog") + 1:]
            elif button.startswith("hat"):
                hat = True
                button = button[len("hat") + 1:]
            button_id = int(button)
            if analog:
                button_id = gamepad_analog_id(button_id)
            if hat:
                button_id = gamepad_hat_id(button_id)
            self._binds.append(Bind(Device.GAMEPAD, 0, button_id))
            self._switch(Device.GAMEPAD, device_idx, button_id).plug(controller)
        else:
            key = key_from_name(spec)
            if key == KEY_UNKNOWN:
                raise ValueError(f"bind key {spec}")
            self._binds.append(Bind(Device.KEYBOARD, 0, key))
            self._switch(Device.KEYBOARD, 0, key).plug(controller)
        return len(self._binds) - 1

    def mouse(self, idx: int) -> Switch:
        return self._existing(Device.MOUSE, 0, idx)

    def key(self, key: Union[int, str]) -> Switch:
        """Switch for a key code or key name; the dummy switch if unseen."""
        if isinstance(key, str):
            key = key_from_name(key)
            if key == KEY_UNKNOWN:
                return self._dummy
        return self._existing(Device.KEYBOARD, 0, key)

    def button(self, idx: int) -> Switch:
        """Switch for a bind index; the dummy switch if there is none."""
        if not 0 <= idx < len(self._binds):
            return self._dummy
        b = self._binds[idx]
        return self._existing(b.type, b.device_id, b.id)

    def plug(self, controller_id: int) -> "Controller":
        """Create a controller under ``controller_id``, replacing any other."""
        controller = Controller(controller_id, self)
        self._controllers[controller_id] = controller
        return controller

    def unplug(self, controller_id: Optional[int] = None) -> None:
        """Remove one controller, or all of them when no id is given."""
        if controller_id is None:
            self._controllers.clear()
        else:
            self._controllers.pop(controller_id, None)

    def dummy_switch(self) -> Switch:
        return self._dummy

    def listen(
        self,
        mode: Listen,
        text: Optional[TextField] = None,
        callback: Optional[ListenCallback] = None,
    ) -> None:
        """Start capturing text or a single key, or finish capturing."""
        if mode == self._listen:
            return
        if mode in (Listen.KEY, Listen.TEXT):
            self._listen_text = weakref.ref(text) if text is not None else None
            self._listen_callback = callback
        elif mode == Listen.NONE and self._listen in (Listen.TEXT, Listen.KEY):
            self._notify(True, True)
            self._listen_text = None
        self._listen = Listen(mode)

    def abort_listen(self) -> None:
        """Stop capturing and report the capture as unsuccessful."""
        self._notify(True, False)
        self._listen_text = None
        self._listen = Listen.NONE

    def quit(self) -> None:
        self._quit = True

    def quit_flag(self) -> bool:
        return self._quit

    def escape(self) -> bool:
        return self._escape

    def mouse_pos(self) -> tuple:
        return self._mouse_pos

    def mouse_rel(self) -> tuple:
        return self._mouse_rel

    def relative_mouse(self) -> bool:
        return self._relative_mouse

    def set_relative_mouse(self, value: bool) -> None:
        self._relative_mouse = bool(value)


class Interface(abc.ABC):
    """Something a controller drives; receives events when its switches change."""

    @abc.abstractmethod
    def event(self) -> None:
        """Called when one of the controller's switches changed this frame."""

    def logic(self, t: float) -> None:
        """Called every frame with the elapsed time."""


class Controller:
    """A player's set of named binds and the interfaces they drive."""

    def __init__(self, controller_id: int, input: Input):
        if input is None:
            raise ValueError("controller needs an input system")
        self._id = controller_id
        self._input = input
        self._triggered = False
        self._binds: List[int] = []
        self._bind_names: Dict[str, List[int]] = {}
        self._interfaces: List[Optional[weakref.ReferenceType]] = []

    @property
    def id(self) -> int:
        return self._id

    @property
    def input(self) -> Input:
        return self._input

    def button(self, key: Union[int, str]) -> Switch:
        """Switch for a local bind index or a bind name.

        Unknown names give the dummy switch; a bad index raises IndexError.
        """
        if isinstance(key, str):
            try:
                return self._input.button(self._binds[self.button_id(key)])
            except (KeyError, IndexError):
                return self._input.dummy_switch()
        return self._input.button(self._binds[key])

    def bind(self, key: str, name: str = "") -> int:
        """Bind ``key`` under ``name``; returns the local bind index."""
        self._binds.append(self._input.bind(key, self))
        index = len(self._binds) - 1
        self._bind_names.setdefault(name, []).append(index)
        return index

    def button_id(self, name: str) -> int:
        """First local bind index registered under ``name``."""
        ids = self._bind_names.get(name)
        if not ids:
            raise KeyError(f'button "{name}"')
        return ids[0]

    def clear_binds(self) -> None:
        self._binds.clear()

    def triggered(self) -> bool:
        return self._triggered

    def trigger(self) -> None:
        self._triggered = True

    def untrigger(self) -> None:
        self._triggered = False

    def event(self) -> None:
        """Forward an event to every live interface, dropping dead ones."""
        alive = []
        for ref in self._interfaces:
            interface = ref() if ref is not None else None
            if interface is None:
                continue
            alive.append(ref)
            interface.event()
        self._interfaces = alive

    def logic(self, t: float) -> None:
        for ref in list(self._interfaces):
            interface = ref() if ref is not None else None
            if interface is not None:
                interface.logic(t)

    def rumble(self, magnitude: float, t: float) -> None:
        """Force feedback is not supported; the request is ignored."""

    def add_interface(self, interface: Interface) -> int:
        """Attach an interface (held weakly); returns its slot index."""
        self._interfaces.append(weakref.ref(interface))
        return len(self._interfaces) - 1

    def remove_interface(self, idx: int) -> None:
        if not 0 <= idx < len(self._interfaces):
            raise IndexError("invalid interface index")
        self._interfaces[idx] = None