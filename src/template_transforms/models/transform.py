"""Geometry data structures shared by every transform module."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Point:
    """2D point in page coordinate space."""
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = point"""
        return iter((self.x, self.y))


@dataclass(frozen=True)
class BBox:
    """Axis-aligned rectangle.

    Used both as a standalone box (canvas bounds, selection bounds) and as
    the rotated bounding box projection of a Frame.
    """
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Frame:
    """Element rectangle before rotation, plus optional rotation.

    - x, y, width, height: unrotated rectangle in page coordinates
    - rotation: degrees, clockwise, about the frame's own center
      (None means 0)
    """
    x: float
    y: float
    width: float
    height: float
    rotation: Optional[float] = None

    @property
    def angle(self) -> float:
        """Rotation with None treated as 0"""
        return self.rotation or 0

    def to_bbox(self) -> BBox:
        """Unrotated rectangle as a BBox"""
        return BBox(self.x, self.y, self.width, self.height)
