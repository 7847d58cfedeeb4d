"""Geometric value objects for handwriting samples."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple
import math

from .errors import SampleFormatError


@dataclass(frozen=True)
class DrawingPoint:
    """Immutable sampled pen position in canvas pixels.

    ``pressure`` is None when the input device did not report it.
    """
    x: float
    y: float
    pressure: Optional[float] = None

    def distance_to(self, other: DrawingPoint) -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to (x, y) tuple, dropping pressure."""
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, float]:
        """Convert to the stored ``{x, y, pressure}`` JSON object."""
        d = {'x': float(self.x), 'y': float(self.y)}
        if self.pressure is not None:
            d['pressure'] = float(self.pressure)
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> DrawingPoint:
        """Create from a ``{x, y, pressure?}`` mapping."""
        if not isinstance(d, dict):
            raise SampleFormatError(f"Point must be an object, got {type(d).__name__}")
        x, y = d.get('x'), d.get('y')
        if not _is_number(x) or not _is_number(y):
            raise SampleFormatError(f"Point requires numeric x and y: {d!r}")
        pressure = d.get('pressure')
        if pressure is not None and not _is_number(pressure):
            raise SampleFormatError(f"Point pressure must be numeric: {d!r}")
        return cls(float(x), float(y), None if pressure is None else float(pressure))


def _is_number(value: Any) -> bool:
    return (isinstance(value, (int, float)) and not isinstance(value, bool)
            and math.isfinite(value))


@dataclass(frozen=True)
class BBox:
    """Immutable axis-aligned bounding box."""
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def center(self) -> Tuple[float, float]:
        return (
            (self.x_min + self.x_max) / 2,
            (self.y_min + self.y_max) / 2
        )

    def contains(self, point: DrawingPoint) -> bool:
        """Check if point is inside bounding box (edges inclusive)."""
        return (self.x_min <= point.x <= self.x_max and
                self.y_min <= point.y <= self.y_max)

    def horizontal_overlap(self, other: BBox) -> float:
        """Length of the shared x-range, 0 when disjoint."""
        return max(0.0, min(self.x_max, other.x_max) - max(self.x_min, other.x_min))

    def vertical_overlap(self, other: BBox) -> float:
        """Length of the shared y-range, 0 when disjoint."""
        return max(0.0, min(self.y_max, other.y_max) - max(self.y_min, other.y_min))

    def horizontal_distance(self, other: BBox) -> float:
        """Gap between nearest vertical edges, 0 if the x-ranges overlap."""
        if self.horizontal_overlap(other) > 0:
            return 0.0
        return min(abs(self.x_max - other.x_min), abs(self.x_min - other.x_max))

    def distance_to(self, other: BBox) -> float:
        """Center-to-center distance, 0 if the boxes intersect on both axes."""
        if self.horizontal_overlap(other) > 0 and self.vertical_overlap(other) > 0:
            return 0.0
        cx1, cy1 = self.center
        cx2, cy2 = other.center
        return math.sqrt((cx2 - cx1) ** 2 + (cy2 - cy1) ** 2)

    def union(self, other: BBox) -> BBox:
        """Smallest box enclosing both boxes."""
        return BBox(
            min(self.x_min, other.x_min),
            min(self.y_min, other.y_min),
            max(self.x_max, other.x_max),
            max(self.y_max, other.y_max),
        )

    def split_horizontally(self, count: int) -> List[BBox]:
        """Split into ``count`` equal-width boxes sharing this box's y-range.

        The last piece ends exactly at ``x_max`` so rounding never loses
        the right edge.
        """
        piece_width = self.width / count
        pieces = []
        for i in range(count):
            x_min = self.x_min + i * piece_width
            x_max = self.x_max if i == count - 1 else x_min + piece_width
            pieces.append(BBox(x_min, self.y_min, x_max, self.y_max))
        return pieces

    @classmethod
    def from_points(cls, points: Iterable[DrawingPoint]) -> BBox:
        """Create bounding box containing all points."""
        points = list(points)
        if not points:
            return cls(0, 0, 0, 0)
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))


@dataclass
class Stroke:
    """One continuous pen-down gesture."""
    points: List[DrawingPoint] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[DrawingPoint]:
        return iter(self.points)

    @property
    def bbox(self) -> BBox:
        """Bounding box of stroke."""
        return BBox.from_points(self.points)

    def length(self) -> float:
        """Total arc length of stroke."""
        total = 0.0
        for i in range(1, len(self.points)):
            total += self.points[i].distance_to(self.points[i - 1])
        return total


@dataclass(frozen=True)
class DrawingData:
    """A complete freehand capture on a ``width`` x ``height`` canvas.

    Points are kept in drawing order, not spatial order.
    """
    points: Tuple[DrawingPoint, ...]
    width: int
    height: int

    def __post_init__(self):
        object.__setattr__(self, 'points', tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    @property
    def is_empty(self) -> bool:
        return not self.points

    def with_points(self, points: Iterable[DrawingPoint]) -> DrawingData:
        """Same canvas, different points."""
        return DrawingData(points, self.width, self.height)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            'points': [p.to_dict() for p in self.points],
            'width': self.width,
            'height': self.height,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> DrawingData:
        """Create from a ``{points, width, height}`` mapping."""
        if not isinstance(d, dict):
            raise SampleFormatError("Drawing must be an object")
        points = d.get('points')
        if not isinstance(points, list):
            raise SampleFormatError("Drawing requires a 'points' list")
        width, height = d.get('width'), d.get('height')
        if not _is_number(width) or not _is_number(height):
            raise SampleFormatError("Drawing requires numeric width and height")
        width, height = int(width), int(height)
        if width < 1 or height < 1:
            raise SampleFormatError("Drawing width and height must be at least 1")
        return cls([DrawingPoint.from_dict(p) for p in points], width, height)
