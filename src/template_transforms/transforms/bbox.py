"""
Bounding box utilities for transform operations.

Handles union bboxes, rotated bboxes, containment and intersection tests.
All boxes are axis-aligned; rotation only enters through get_rotated_bbox.
"""

import math
from typing import List, Sequence

import numpy as np

from ..constants import IDENTITY_ROTATIONS
from ..models.transform import BBox, Frame, Point


def get_union_bbox(frames: Sequence[Frame]) -> BBox:
    """Calculate the union bounding box of several frames

    Each frame contributes its own rotated bbox; the result is the
    axis-aligned envelope of those boxes (not a tight rotated union).

    Args:
        frames: Frames to combine

    Returns:
        BBox(0, 0, 0, 0) for no frames, otherwise the envelope
    """
    if not frames:
        return BBox(0, 0, 0, 0)

    if len(frames) == 1:
        return get_rotated_bbox(frames[0])

    bboxes = [get_rotated_bbox(frame) for frame in frames]
    mins = np.array([(b.x, b.y) for b in bboxes]).min(axis=0)
    maxs = np.array([(b.x + b.width, b.y + b.height) for b in bboxes]).max(axis=0)

    return BBox(
        float(mins[0]),
        float(mins[1]),
        float(maxs[0] - mins[0]),
        float(maxs[1] - mins[1]),
    )


def get_rotated_bbox(frame: Frame) -> BBox:
    """Calculate the axis-aligned box containing a rotated frame

    The four corners are rotated clockwise about the frame center:
        x' = cx + dx*cos - dy*sin
        y' = cy + dx*sin + dy*cos

    Args:
        frame: Frame to project

    Returns:
        Envelope of the rotated corners (the frame itself if unrotated)
    """
    rotation = frame.angle
    if rotation in IDENTITY_ROTATIONS:
        return frame.to_bbox()

    corners = np.array([tuple(c) for c in get_bbox_corners(frame.to_bbox())], dtype=float)
    center = np.array([frame.x + frame.width / 2, frame.y + frame.height / 2])

    radians = math.radians(rotation)
    cos_angle = math.cos(radians)
    sin_angle = math.sin(radians)
    rotation_matrix = np.array([
        [cos_angle, -sin_angle],
        [sin_angle, cos_angle],
    ])

    rotated = (corners - center) @ rotation_matrix.T + center
    min_x, min_y = rotated.min(axis=0)
    max_x, max_y = rotated.max(axis=0)

    return BBox(float(min_x), float(min_y), float(max_x - min_x), float(max_y - min_y))


def contains_point(bbox: BBox, point: Point) -> bool:
    """Check if point lies inside bbox (edges included)"""
    return (
        bbox.x <= point.x <= bbox.x + bbox.width
        and bbox.y <= point.y <= bbox.y + bbox.height
    )


def get_bbox_corners(bbox: BBox) -> List[Point]:
    """Get corners clockwise: top-left, top-right, bottom-right, bottom-left"""
    x, y, width, height = bbox.x, bbox.y, bbox.width, bbox.height
    return [
        Point(x, y),
        Point(x + width, y),
        Point(x + width, y + height),
        Point(x, y + height),
    ]


def bboxes_intersect(a: BBox, b: BBox) -> bool:
    """Check if two boxes overlap; boxes sharing an edge count as intersecting"""
    return not (
        a.x + a.width < b.x
        or b.x + b.width < a.x
        or a.y + a.height < b.y
        or b.y + b.height < a.y
    )


def get_bbox_center(bbox: BBox) -> Point:
    return Point(bbox.x + bbox.width / 2, bbox.y + bbox.height / 2)


def expand_bbox(bbox: BBox, padding: float) -> BBox:
    """Grow bbox by padding on every side (negative padding shrinks, no floor)"""
    return BBox(
        bbox.x - padding,
        bbox.y - padding,
        bbox.width + padding * 2,
        bbox.height + padding * 2,
    )


def clamp_bbox(bbox: BBox, container: BBox) -> BBox:
    """Clamp bbox inside container

    Position is pulled inside the container; width/height are capped to the
    container's size and never grown.
    """
    x = max(container.x, min(container.x + container.width - bbox.width, bbox.x))
    y = max(container.y, min(container.y + container.height - bbox.height, bbox.y))

    return BBox(
        x,
        y,
        min(bbox.width, container.width),
        min(bbox.height, container.height),
    )
