"""Terminal-cell geometry: positions, sizes, rectangles and scroll viewports."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

U16_MAX = 0xFFFF


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass(frozen=True)
class Offset:
    """A signed displacement in cells."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Position:
    """A cell position on the screen."""

    x: int = 0
    y: int = 0

    def into_offset(self) -> Offset:
        """Return the displacement from the origin to this position."""
        return Offset(self.x, self.y)


@dataclass(frozen=True)
class Size:
    """A width and height in cells."""

    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Rect:
    """A rectangle of cells with its top-left corner at ``(x, y)``."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @classmethod
    def from_parts(cls, position: Position, size: Size) -> Rect:
        """Build a rectangle from its top-left corner and its size."""
        return cls(position.x, position.y, size.width, size.height)

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return min(self.x + self.width, U16_MAX)

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return min(self.y + self.height, U16_MAX)

    def reset_origin(self) -> Rect:
        """Return the same size of rectangle placed at the origin."""
        return Rect(0, 0, self.width, self.height)

    def offset(self, offset: Offset) -> Rect:
        """Move the rectangle, keeping it within the drawable coordinate range."""
        return replace(
            self,
            x=_clamp(self.x + offset.x, 0, U16_MAX - self.width),
            y=_clamp(self.y + offset.y, 0, U16_MAX - self.height),
        )

    def contains(self, position: Position) -> bool:
        """Whether ``position`` lies inside the rectangle."""
        return self.left <= position.x < self.right and self.top <= position.y < self.bottom

    def intersection(self, other: Rect) -> Rect:
        """Return the overlap of two rectangles, empty if they do not meet."""
        x1 = max(self.x, other.x)
        y1 = max(self.y, other.y)
        x2 = min(self.right, other.right)
        y2 = min(self.bottom, other.bottom)
        return Rect(x1, y1, max(x2 - x1, 0), max(y2 - y1, 0))

    def as_size(self) -> Size:
        """Return the size of the rectangle."""
        return Size(self.width, self.height)


class ViewportError(ValueError):
    """Raised when a viewport cannot show its target area."""

    class Kind(Enum):
        OFFSET_OUT_OF_BOUNDS = "viewport offset out of bounds"
        TOO_SMALL = "viewport size too small for target area"
        MISSING = "viewport component no longer exists"

    def __init__(self, kind: ViewportError.Kind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass
class Viewport:
    """A scrollable virtual area of ``size`` seen from ``offset``."""

    offset: Position = field(default_factory=Position)
    size: Size = field(default_factory=Size)

    def area(self) -> Rect:
        """Return the whole virtual area, placed at the origin."""
        return Rect.from_parts(Position(0, 0), self.size)

    def clamp_offset(self, target_area_size: Size) -> None:
        """Keep the offset such that a window of ``target_area_size`` stays inside."""
        if (
            self.size.width < target_area_size.width
            or self.size.height < target_area_size.height
        ):
            raise ViewportError(ViewportError.Kind.TOO_SMALL)
        self.offset = Position(
            min(self.offset.x, self.size.width - target_area_size.width),
            min(self.offset.y, self.size.height - target_area_size.height),
        )