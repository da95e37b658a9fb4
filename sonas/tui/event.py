"""Events delivered to the interface, how they are dispatched, and the queues that carry them."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Generic, Optional, TypeVar, Union

from .key_chord import KeyEvent, KeyModifiers

E = TypeVar("E")


class EventError(RuntimeError):
    """Raised when the event machinery itself fails."""

    class Kind(Enum):
        DISCONNECTED = "event channel disconnected"
        ALREADY_RUNNING = "task is already running"
        ALREADY_STOPPED = "task is already stopped"
        JOIN_ERROR = "failed to join thread"
        SEND_ERROR = "failed to send event"

    def __init__(self, kind: EventError.Kind) -> None:
        super().__init__(kind.value)
        self.kind = kind


class MouseButton(Enum):
    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()


class MouseEventKind(Enum):
    DOWN = auto()
    UP = auto()
    DRAG = auto()
    MOVED = auto()
    SCROLL_DOWN = auto()
    SCROLL_UP = auto()
    SCROLL_LEFT = auto()
    SCROLL_RIGHT = auto()


@dataclass(frozen=True)
class MouseEvent:
    """A mouse action at a cell; ``button`` is set for down, up and drag."""

    kind: MouseEventKind
    column: int
    row: int
    button: Optional[MouseButton] = None
    modifiers: KeyModifiers = KeyModifiers.NONE


class DispatchKind(Enum):
    INPUT = auto()
    BROADCAST = auto()
    CURSOR = auto()
    TARGET = auto()


@dataclass(frozen=True)
class Dispatch:
    """Where an event should be delivered.

    Input goes to the focussed entity and bubbles up; broadcast goes to every
    entity; cursor goes to the entity under ``(x, y)``; target goes to
    ``entity`` and bubbles up.
    """

    kind: DispatchKind
    x: int = 0
    y: int = 0
    entity: Optional[Hashable] = None

    @classmethod
    def input(cls) -> Dispatch:
        return cls(DispatchKind.INPUT)

    @classmethod
    def broadcast(cls) -> Dispatch:
        return cls(DispatchKind.BROADCAST)

    @classmethod
    def cursor(cls, x: int, y: int) -> Dispatch:
        return cls(DispatchKind.CURSOR, x=x, y=y)

    @classmethod
    def target(cls, entity: Hashable) -> Dispatch:
        return cls(DispatchKind.TARGET, entity=entity)


@dataclass(frozen=True)
class Tick:
    """Periodic update; ``delta`` is the tick length in seconds."""

    delta: float


@dataclass(frozen=True)
class Render:
    """Request to redraw; ``delta`` is the frame length in seconds."""

    delta: float


@dataclass(frozen=True)
class App(Generic[E]):
    """An application-defined event."""

    event: E


@dataclass(frozen=True)
class FocusGained:
    """The terminal gained focus."""


@dataclass(frozen=True)
class FocusLost:
    """The terminal lost focus."""


@dataclass(frozen=True)
class Key:
    event: KeyEvent


@dataclass(frozen=True)
class Mouse:
    event: MouseEvent


@dataclass(frozen=True)
class Paste:
    text: str


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


Event = Union[Tick, Render, App, FocusGained, FocusLost, Key, Mouse, Paste, Resize]


@dataclass(frozen=True)
class EventDispatch:
    """An event together with how it is to be dispatched."""

    dispatch: Dispatch
    event: Event


class EventFlow(Enum):
    """What an update handler wants done with an event after handling it.

    Ignored for broadcast events.
    """

    CONSUME = auto()
    PROPAGATE = auto()


@dataclass
class Focus:
    """The currently focussed entity, or ``None`` when nothing has focus."""

    target: Optional[Hashable] = None


@dataclass
class CursorPos:
    """The last reported mouse position; starts far outside any area."""

    x: int = 0xFFFF
    y: int = 0xFFFF


@dataclass
class EventQueue(Generic[E]):
    """Application events raised while handling another event, in FIFO order."""

    _items: deque = field(default_factory=deque)

    def __len__(self) -> int:
        return len(self._items)

    def push(self, dispatch: Dispatch, app_event: E) -> None:
        """Queue ``app_event`` for delivery as given by ``dispatch``."""
        self._items.append(EventDispatch(dispatch, App(app_event)))

    def pop(self) -> Optional[EventDispatch]:
        """Take the oldest queued dispatch, or ``None`` if the queue is empty."""
        return self._items.popleft() if self._items else None


class AsyncSender(Generic[E]):
    """Sends application events into the main event channel from anywhere."""

    def __init__(self, channel: Any) -> None:
        self._channel = channel

    def send(self, dispatch: Dispatch, app_event: E) -> None:
        """Send ``app_event``; a closed or full channel drops it silently."""
        try:
            self._channel.put_nowait(EventDispatch(dispatch, App(app_event)))
        except Exception:  # noqa: BLE001 - a lost event is acceptable here
            pass


class AsyncEventQueue(Generic[E]):
    """Hands out senders into the main event channel.

    ``channel`` is any object with ``put_nowait``, such as ``asyncio.Queue``.
    """

    def __init__(self, channel: Any) -> None:
        self._channel = channel

    def sender(self) -> AsyncSender[E]:
        return AsyncSender(self._channel)