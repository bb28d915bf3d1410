"""Process-wide switches for running without a display or audio device."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class _State:
    headless: bool = False
    server: bool = False


_state = _State()


def enabled() -> bool:
    """Whether headless mode is on."""
    return _state.headless


def enable() -> None:
    """Turn headless mode on."""
    _state.headless = True


def server() -> bool:
    """Whether the server flag is set."""
    return _state.server


def set_server(value: bool) -> None:
    """Running as a server sets (or clears) the headless flag."""
    _state.headless = bool(value)