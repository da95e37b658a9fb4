"""Events of the music player and the input actions that raise them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .geometry import Rect


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def x(self) -> int:
        """Horizontal step: -1 for left, 1 for right, else 0."""
        return {Direction.LEFT: -1, Direction.RIGHT: 1}.get(self, 0)

    def y(self) -> int:
        """Vertical step: -1 for up, 1 for down, else 0."""
        return {Direction.UP: -1, Direction.DOWN: 1}.get(self, 0)


@dataclass(frozen=True)
class Quit:
    """Leave the application."""


@dataclass(frozen=True)
class MoveCursor:
    direction: Direction


@dataclass(frozen=True)
class ScrollBy:
    direction: Direction
    amount: int


@dataclass(frozen=True)
class ScrollByRelative:
    """Scroll by ``fraction`` of the visible area."""

    direction: Direction
    fraction: float


@dataclass(frozen=True)
class ScrollTo:
    """Scroll so that ``rect`` becomes visible."""

    rect: Rect


AppEvent = Union[Quit, MoveCursor, ScrollBy, ScrollByRelative, ScrollTo]


def is_quit(event: Any) -> bool:
    """Whether ``event`` asks the application to quit."""
    return event == Quit()


class InputAction(Enum):
    """Actions a key binding can name in the configuration."""

    QUIT = "quit"
    CURSOR_UP = "cursor-up"
    CURSOR_DOWN = "cursor-down"
    CURSOR_LEFT = "cursor-left"
    CURSOR_RIGHT = "cursor-right"
    SCROLL_DOWN = "scroll-down"
    SCROLL_UP = "scroll-up"
    SCROLL_HALF_PAGE_DOWN = "scroll-half-page-down"
    SCROLL_HALF_PAGE_UP = "scroll-half-page-up"
    SCROLL_FULL_PAGE_DOWN = "scroll-full-page-down"
    SCROLL_FULL_PAGE_UP = "scroll-full-page-up"

    def app_event(self) -> AppEvent:
        """Return the application event this action raises."""
        return _ACTION_EVENTS[self]


_ACTION_EVENTS: dict[InputAction, AppEvent] = {
    InputAction.QUIT: Quit(),
    InputAction.CURSOR_UP: MoveCursor(Direction.UP),
    InputAction.CURSOR_DOWN: MoveCursor(Direction.DOWN),
    InputAction.CURSOR_LEFT: MoveCursor(Direction.LEFT),
    InputAction.CURSOR_RIGHT: MoveCursor(Direction.RIGHT),
    InputAction.SCROLL_DOWN: ScrollBy(Direction.DOWN, 1),
    InputAction.SCROLL_UP: ScrollBy(Direction.UP, 1),
    InputAction.SCROLL_HALF_PAGE_DOWN: ScrollByRelative(Direction.DOWN, 0.5),
    InputAction.SCROLL_HALF_PAGE_UP: ScrollByRelative(Direction.UP, 0.5),
    InputAction.SCROLL_FULL_PAGE_DOWN: ScrollByRelative(Direction.DOWN, 1.0),
    InputAction.SCROLL_FULL_PAGE_UP: ScrollByRelative(Direction.UP, 1.0),
}