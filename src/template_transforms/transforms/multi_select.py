"""
Multi-select transform operations for groups of slots.

Handles group move, scale, rotate and resize while preserving relative
positions. Every operation:
- Filters the selection to unlocked slots with a frame
- Returns {} when nothing is left
- Pivots on the group's union bbox (built from each member's rotated bbox)
"""

import logging
import math
from typing import Dict, List, Tuple

from ..constants import FULL_ROTATION, RESIZE_GROUP_POLICY
from ..models.context import TransformContext, unlocked_frames
from ..models.transform import Frame
from .aspect_ratio import get_aspect_ratio
from .bbox import get_bbox_center, get_union_bbox
from .operations import FrameUpdates

logger = logging.getLogger(__name__)


def _rotate_point_around(point_x: float, point_y: float, center_x: float, center_y: float,
                         degrees: float) -> Tuple[float, float]:
    """Rotate a point around a center by degrees (clockwise in Y-down space)

    Returns:
        Tuple of (new_x, new_y)
    """
    radians = math.radians(degrees)

    # Translate to origin
    dx = point_x - center_x
    dy = point_y - center_y

    cos_angle = math.cos(radians)
    sin_angle = math.sin(radians)

    new_dx = dx * cos_angle - dy * sin_angle
    new_dy = dx * sin_angle + dy * cos_angle

    return (new_dx + center_x, new_dy + center_y)


def move_group(slot_names: List[str], dx: float, dy: float,
               context: TransformContext) -> FrameUpdates:
    """Translate selected slots by (dx, dy)

    Returns:
        Partial {'x', 'y'} updates per unlocked slot
    """
    updates = {}
    for name, frame in unlocked_frames(slot_names, context):
        updates[name] = {'x': frame.x + dx, 'y': frame.y + dy}

    logger.debug(f"Moved group of {len(updates)} slots: ({dx:.2f}, {dy:.2f})")
    return updates


def transform_group(slot_names: List[str], dx: float, dy: float, scale_x: float, scale_y: float,
                    context: TransformContext) -> Dict[str, Frame]:
    """Scale and translate selected slots relative to the union bbox origin

    Each member's raw x/y offset from the union origin is scaled by
    (scale_x, scale_y), its size is scaled the same way, and the result is
    translated by (dx, dy). Rotation is kept.

    Args:
        slot_names: Selected slot names
        dx, dy: Translation
        scale_x, scale_y: Per-axis scale factors
        context: Page snapshot

    Returns:
        Full replacement frames per unlocked slot
    """
    members = unlocked_frames(slot_names, context)
    if not members:
        return {}

    union = get_union_bbox([frame for _, frame in members])

    updates = {}
    for name, frame in members:
        offset_x = (frame.x - union.x) * scale_x
        offset_y = (frame.y - union.y) * scale_y
        updates[name] = Frame(
            x=union.x + dx + offset_x,
            y=union.y + dy + offset_y,
            width=frame.width * scale_x,
            height=frame.height * scale_y,
            rotation=frame.rotation,
        )

    logger.debug(f"Transformed group of {len(updates)} slots: "
                 f"d=({dx:.2f}, {dy:.2f}) s=({scale_x:.4f}, {scale_y:.4f})")
    return updates


def resize_group(slot_names: List[str], new_width: float, new_height: float,
                 context: TransformContext) -> Dict[str, Frame]:
    """Resize the group towards new_width x new_height without distorting members

    Member offsets from the union origin scale per axis, but member sizes
    scale uniformly by min(scale_x, scale_y) with the height re-derived from
    the member's own aspect ratio (RESIZE_GROUP_POLICY). The group may
    therefore under- or over-fill the requested box.

    Returns:
        Full replacement frames per unlocked slot
    """
    members = unlocked_frames(slot_names, context)
    if not members:
        return {}

    union = get_union_bbox([frame for _, frame in members])
    scale_x = new_width / union.width
    scale_y = new_height / union.height
    member_scale = min(scale_x, scale_y)

    updates = {}
    for name, frame in members:
        ratio = get_aspect_ratio(frame)
        width = frame.width * member_scale
        updates[name] = Frame(
            x=union.x + (frame.x - union.x) * scale_x,
            y=union.y + (frame.y - union.y) * scale_y,
            width=width,
            height=width / ratio,
            rotation=frame.rotation,
        )

    logger.debug(f"Resized group of {len(updates)} slots to {new_width:.2f}x{new_height:.2f} "
                 f"({RESIZE_GROUP_POLICY}, member scale {member_scale:.4f})")
    return updates


def scale_group(slot_names: List[str], factor: float, context: TransformContext) -> Dict[str, Frame]:
    """Scale selected slots uniformly about the union bbox center

    Each member's size and its center offset from the group center are
    multiplied by factor; x/y are recomputed from the new center.
    """
    members = unlocked_frames(slot_names, context)
    if not members:
        return {}

    center_x, center_y = get_bbox_center(get_union_bbox([frame for _, frame in members]))

    updates = {}
    for name, frame in members:
        frame_center_x = frame.x + frame.width / 2
        frame_center_y = frame.y + frame.height / 2

        width = frame.width * factor
        height = frame.height * factor
        new_center_x = center_x + (frame_center_x - center_x) * factor
        new_center_y = center_y + (frame_center_y - center_y) * factor

        updates[name] = Frame(
            x=new_center_x - width / 2,
            y=new_center_y - height / 2,
            width=width,
            height=height,
            rotation=frame.rotation,
        )

    logger.debug(f"Scaled group of {len(updates)} slots: {factor:.4f}x")
    return updates


def rotate_group(slot_names: List[str], angle_delta: float, context: TransformContext) -> Dict[str, Frame]:
    """Rotate selected slots around the union bbox center

    Member centers orbit the group center (ferris wheel); sizes are kept.
    Each rotation accumulates as (old + delta) % 360 using a sign-preserving
    remainder and is NOT normalized to (-180, 180], unlike numeric input.
    """
    members = unlocked_frames(slot_names, context)
    if not members:
        return {}

    center_x, center_y = get_bbox_center(get_union_bbox([frame for _, frame in members]))

    updates = {}
    for name, frame in members:
        new_center_x, new_center_y = _rotate_point_around(
            frame.x + frame.width / 2, frame.y + frame.height / 2,
            center_x, center_y,
            angle_delta
        )
        updates[name] = Frame(
            x=new_center_x - frame.width / 2,
            y=new_center_y - frame.height / 2,
            width=frame.width,
            height=frame.height,
            rotation=math.fmod(frame.angle + angle_delta, FULL_ROTATION),
        )

    logger.debug(f"Rotated group of {len(updates)} slots: {angle_delta:+.2f}°")
    return updates
