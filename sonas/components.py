"""Interface components of the player: scrolling, the album grid, the navbar and the control panel."""

from __future__ import annotations

import math
from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .app_event import Direction, MoveCursor, ScrollBy, ScrollByRelative, ScrollTo
from .geometry import U16_MAX, Position, Rect, Size, Viewport
from .tui.event import App, Dispatch, EventFlow, EventQueue, Focus, Mouse, MouseButton, MouseEventKind

CARD_WIDTH = 22
CARD_HEIGHT = 14
HORIZONTAL_GAP = 3
VERTICAL_GAP = 1

_I16_MIN = -0x8000
_I16_MAX = 0x7FFF


def _saturating_add(value: int, delta: int) -> int:
    return max(0, min(value + delta, U16_MAX))


def _truncate_i16(value: float) -> int:
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return _I16_MAX if value > 0 else _I16_MIN
    return max(_I16_MIN, min(int(value), _I16_MAX))


@dataclass
class Scrollable:
    """Shows a larger inner area through a scrollable viewport.

    ``size_fn`` gives the size of the inner area for the scrollable's own area.
    """

    inner: Hashable
    size_fn: Callable[[Rect], Size]
    viewport: Viewport = field(default_factory=Viewport)

    def scroll(self, x: int, y: int) -> None:
        """Move the viewport offset, saturating at the coordinate limits."""
        offset = self.viewport.offset
        self.viewport.offset = Position(_saturating_add(offset.x, x), _saturating_add(offset.y, y))

    def update(self, event: Any, area: Rect) -> EventFlow:
        """Handle scroll events for a scrollable occupying ``area``."""
        if not isinstance(event, App):
            return EventFlow.PROPAGATE
        app_event = event.event

        if isinstance(app_event, ScrollBy):
            direction = app_event.direction
            self.scroll(direction.x() * app_event.amount, direction.y() * app_event.amount)
            self.viewport.clamp_offset(area.as_size())
            return EventFlow.CONSUME

        if isinstance(app_event, ScrollByRelative):
            direction = app_event.direction
            size = area.as_size()
            self.scroll(
                direction.x() * _truncate_i16(size.width * app_event.fraction),
                direction.y() * _truncate_i16(size.height * app_event.fraction),
            )
            self.viewport.clamp_offset(size)
            return EventFlow.CONSUME

        if isinstance(app_event, ScrollTo):
            rect = app_event.rect
            view = area.reset_origin().offset(self.viewport.offset.into_offset())
            offset = self.viewport.offset
            x = offset.x - max(view.left - rect.left, 0) + max(rect.right - view.right, 0)
            y = offset.y - max(view.top - rect.top, 0) + max(rect.bottom - view.bottom, 0)
            self.viewport.offset = Position(x, y)
            self.viewport.clamp_offset(view.as_size())
            return EventFlow.CONSUME

        return EventFlow.PROPAGATE

    def layout(self, area: Rect) -> Rect:
        """Size the viewport for ``area`` and return the inner component's area."""
        self.viewport.size = self.size_fn(area)
        self.viewport.clamp_offset(area.as_size())
        return self.viewport.area()


def _row_rects(area: Rect, count: int) -> list[Rect]:
    """Rows of card height stacked from the top; the last one takes any excess."""
    if count <= 0:
        return []
    step = CARD_HEIGHT + VERTICAL_GAP
    rows = [Rect(area.x, area.y + i * step, area.width, CARD_HEIGHT) for i in range(count - 1)]
    last_y = area.y + (count - 1) * step
    rows.append(Rect(area.x, last_y, area.width, area.height - (count - 1) * step))
    return rows


def _column_xs(area: Rect, count: int) -> list[int]:
    """Left edges of card-width columns centred within ``area``."""
    if count <= 0:
        return []
    total = count * CARD_WIDTH + (count - 1) * HORIZONTAL_GAP
    start = area.x + (area.width - total + 1) // 2
    return [start + i * (CARD_WIDTH + HORIZONTAL_GAP) for i in range(count)]


@dataclass
class Library:
    """A grid of album cards with a selection cursor."""

    album_cards: list[Hashable] = field(default_factory=list)
    cards_per_row: int = 1
    selected_idx: int = 0
    card_areas: dict[Hashable, Rect] = field(default_factory=dict, repr=False)

    def move_cursor(self, direction: Direction) -> None:
        """Move the selection one card, staying inside the grid."""
        if not self.album_cards:
            return
        count = len(self.album_cards)
        per_row = self.cards_per_row
        height = (count - 1) // per_row + 1
        x = min(_saturating_add(self.selected_idx % per_row, direction.x()), per_row - 1)
        y = min(_saturating_add(self.selected_idx // per_row, direction.y()), height - 1)
        self.selected_idx = min(x + per_row * y, count - 1)

    def layout(self, area: Rect) -> dict[Hashable, Rect]:
        """Place the cards in ``area`` and return each card's rectangle.

        Cards that do not fit get an empty rectangle.
        """
        horizontal_fit = area.width // (CARD_WIDTH + HORIZONTAL_GAP)
        vertical_fit = area.height // (CARD_HEIGHT + VERTICAL_GAP)
        self.cards_per_row = horizontal_fit

        xs = _column_xs(area, horizontal_fit)
        slots = (
            Rect(x, row.y, CARD_WIDTH, row.height)
            for row in _row_rects(area, vertical_fit)
            for x in xs
        )
        areas: dict[Hashable, Rect] = {card: Rect() for card in self.album_cards}
        for card, rect in zip(self.album_cards, slots):
            areas[card] = rect
        self.card_areas = areas
        return dict(areas)

    def update(self, event: Any, focus: Focus, queue: EventQueue, entity: Hashable) -> EventFlow:
        """Move the cursor on cursor events, focus the selected card and ask to scroll to it."""
        if not (isinstance(event, App) and isinstance(event.event, MoveCursor)):
            return EventFlow.PROPAGATE
        self.move_cursor(event.event.direction)
        if 0 <= self.selected_idx < len(self.album_cards):
            target = self.album_cards[self.selected_idx]
            focus.target = target
            queue.push(Dispatch.target(entity), ScrollTo(self.card_areas.get(target, Rect())))
        return EventFlow.CONSUME


class NavbarButtonType(Enum):
    ALBUMS = "albums"
    ARTISTS = "artists"
    PLAYLISTS = "playlists"

    def icon(self) -> str:
        """Return the glyph shown before the button's label."""
        return _NAVBAR_ICONS[self]

    def text(self) -> str:
        """Return the button's label."""
        return _NAVBAR_TEXTS[self]


_NAVBAR_ICONS = {
    NavbarButtonType.ALBUMS: "\U000f0025",
    NavbarButtonType.ARTISTS: "",
    NavbarButtonType.PLAYLISTS: "\U000f0cb8",
}

_NAVBAR_TEXTS = {
    NavbarButtonType.ALBUMS: "Albums",
    NavbarButtonType.ARTISTS: "Artists",
    NavbarButtonType.PLAYLISTS: "Playlists",
}

PAUSE_ICON = "\U000f03e4"
PLAY_ICON = "\U000f040a"


@dataclass
class ControlPanel:
    """Playback controls; a left click toggles between playing and paused."""

    playing: bool = False

    def icon(self) -> str:
        """Return the pause glyph while playing, else the play glyph."""
        return PAUSE_ICON if self.playing else PLAY_ICON

    def update(self, event: Any) -> EventFlow:
        """Toggle playback on a left mouse press."""
        if (
            isinstance(event, Mouse)
            and event.event.kind is MouseEventKind.DOWN
            and event.event.button is MouseButton.LEFT
        ):
            self.playing = not self.playing
            return EventFlow.CONSUME
        return EventFlow.PROPAGATE