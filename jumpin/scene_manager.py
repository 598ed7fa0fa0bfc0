"""Scenes, the manager that switches between them, and keyboard edge tracking."""

from __future__ import annotations

import abc
import re
from dataclasses import dataclass, fields
from typing import Any, Callable

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class KeyboardState:
    """Which of the keys the game uses are held down."""

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    space: bool = False
    enter: bool = False


def _combine(
    now: KeyboardState,
    before: KeyboardState,
    rule: Callable[[bool, bool], bool],
) -> KeyboardState:
    return KeyboardState(
        **{f.name: rule(getattr(now, f.name), getattr(before, f.name)) for f in fields(now)}
    )


class KeyboardTracker:
    """Derives key presses and releases from successive keyboard states."""

    def __init__(self) -> None:
        self.last_state = KeyboardState()
        self.pressed = KeyboardState()
        self.released = KeyboardState()

    def update(self, state: KeyboardState) -> None:
        """Record ``state``; keys down now but not before count as pressed."""
        self.pressed = _combine(state, self.last_state, lambda now, was: now and not was)
        self.released = _combine(state, self.last_state, lambda now, was: was and not now)
        self.last_state = state

    def reset(self) -> None:
        """Forget all key history."""
        self.__init__()


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise OverflowError(f"integer out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    return float(match.group(1))


class Scene(abc.ABC):
    """Base class of a game screen managed by a :class:`SceneManager`."""

    def __init__(self, manager: SceneManager) -> None:
        self._manager = manager

    @property
    def manager(self) -> SceneManager:
        return self._manager

    @abc.abstractmethod
    def initialize(self) -> None:
        """Prepare the scene each time it becomes current."""

    @abc.abstractmethod
    def update(self, tracker: KeyboardTracker, elapsed_time: float) -> None:
        """Advance the scene by ``elapsed_time`` seconds."""

    @abc.abstractmethod
    def render(self, renderer: Any) -> None:
        """Draw the scene."""

    @abc.abstractmethod
    def finalize(self) -> None:
        """Release what the scene set up when it is left."""

    def change_scene(self, name: str) -> None:
        """Ask the manager to switch to the scene registered as ``name``."""
        self._manager.request_scene_change(name)

    def read_shared(self, key: str, kind: type = str) -> Any:
        """Read shared data as ``str``, ``int``, ``float`` or ``bool``."""
        raw = self._manager.get_shared_data(key)
        if kind is str:
            return raw
        if kind is bool:
            return _parse_int(raw) != 0
        if kind is int:
            return _parse_int(raw)
        if kind is float:
            return _parse_float(raw)
        raise TypeError(f"unsupported shared data type: {kind!r}")

    def write_shared(self, key: str, value: Any) -> None:
        """Store a ``str``, ``int``, ``float`` or ``bool`` as shared data."""
        if isinstance(value, bool):
            text = "1" if value else "0"
        elif isinstance(value, int):
            text = str(value)
        elif isinstance(value, float):
            text = f"{value:f}"
        elif isinstance(value, str):
            text = value
        else:
            raise TypeError(f"unsupported shared data type: {type(value)!r}")
        self._manager.set_shared_data(key, text)


class SceneManager:
    """Holds named scenes, runs the current one and switches on request."""

    def __init__(self) -> None:
        self._scenes: dict[str, Scene] = {}
        self._current: Scene | None = None
        self._requested: Scene | None = None
        self._shared: dict[str, str] = {}
        self.tracker = KeyboardTracker()

    @property
    def current_scene(self) -> Scene | None:
        return self._current

    def register(self, name: str, scene: Scene) -> None:
        """Register ``scene`` under ``name``; an existing entry is kept."""
        self._scenes.setdefault(name, scene)

    def update(self, key: KeyboardState, elapsed_time: float) -> None:
        """Track the keyboard, apply a pending switch and update the scene."""
        self.tracker.update(key)
        if self._requested is not None:
            self._change_scene()
        if self._current is not None:
            self._current.update(self.tracker, elapsed_time)

    def render(self, renderer: Any) -> None:
        """Draw the current scene, if any."""
        if self._current is not None:
            self._current.render(renderer)

    def set_start_scene(self, name: str) -> None:
        """Make ``name`` current and initialize it; unknown names are ignored."""
        scene = self._scenes.get(name)
        if scene is None:
            return
        self._current = scene
        scene.initialize()

    def request_scene_change(self, name: str) -> None:
        """Switch to ``name`` at the next update; unknown names are ignored."""
        scene = self._scenes.get(name)
        if scene is not None:
            self._requested = scene

    def get_shared_data(self, key: str) -> str:
        """Shared value for ``key``, or an empty string."""
        return self._shared.get(key, "")

    def set_shared_data(self, key: str, value: str) -> None:
        self._shared[key] = value

    def _change_scene(self) -> None:
        if self._requested is None:
            return
        if self._current is not None:
            self._current.finalize()
        self._current = self._requested
        self._current.initialize()
        self._requested = None