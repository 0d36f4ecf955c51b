"""
Transform operations for z-order, alignment, and distribution.

Works with all slot types (text, image, shape, button). Every function takes
a TransformContext snapshot and returns replacement values:
- Z-order functions return the full slot list (the same list object when
  nothing changes)
- Alignment and distribution return partial frame updates keyed by slot name

Alignment and distribution measure elements by their rotated bounding box
but write into the frame's raw x/y. This is exact for unrotated frames and
an approximation for rotated ones.
"""

import logging
from dataclasses import replace
from typing import Dict, List

from ..constants import (
    ALIGN_MODES,
    DISTRIBUTE_MODES,
    MIN_ALIGN_SELECTION,
    MIN_DISTRIBUTE_SELECTION,
)
from ..models.context import Slot, TransformContext, unlocked_frames
from ..models.transform import BBox
from .bbox import get_rotated_bbox

logger = logging.getLogger(__name__)

FrameUpdates = Dict[str, Dict[str, float]]


# ========================================
# Z-Order Operations
# ========================================

def _with_z(slots: List[Slot], slot_name: str, z: int) -> List[Slot]:
    return [replace(s, z=z) if s.name == slot_name else s for s in slots]


def bring_to_front(slot_name: str, context: TransformContext) -> List[Slot]:
    """Bring slot to front (max z + 1)

    Returns:
        New slot list, or context.slots itself if the slot is missing,
        locked or already frontmost
    """
    slots = context.slots
    slot = context.get_slot(slot_name)
    if slot is None or slot.locked:
        return slots

    max_z = max(s.z for s in slots)
    if slot.z == max_z:
        return slots

    logger.debug(f"Bring to front: {slot_name} z {slot.z} -> {max_z + 1}")
    return _with_z(slots, slot_name, max_z + 1)


def send_to_back(slot_name: str, context: TransformContext) -> List[Slot]:
    """Send slot to back (min z - 1)

    Returns:
        New slot list, or context.slots itself if the slot is missing,
        locked or already backmost
    """
    slots = context.slots
    slot = context.get_slot(slot_name)
    if slot is None or slot.locked:
        return slots

    min_z = min(s.z for s in slots)
    if slot.z == min_z:
        return slots

    logger.debug(f"Send to back: {slot_name} z {slot.z} -> {min_z - 1}")
    return _with_z(slots, slot_name, min_z - 1)


def bring_forward(slot_name: str, context: TransformContext) -> List[Slot]:
    """Bring slot forward one level

    The slot is nudged to (nearest z above) + 1. Other slots keep their z,
    so ties are possible; this is a relative nudge, not a reindex.
    """
    slots = context.slots
    slot = context.get_slot(slot_name)
    if slot is None or slot.locked:
        return slots

    higher = [s.z for s in slots if s.z > slot.z]
    if not higher:
        return slots

    next_z = min(higher)
    logger.debug(f"Bring forward: {slot_name} z {slot.z} -> {next_z + 1}")
    return _with_z(slots, slot_name, next_z + 1)


def send_backward(slot_name: str, context: TransformContext) -> List[Slot]:
    """Send slot backward one level ((nearest z below) - 1)"""
    slots = context.slots
    slot = context.get_slot(slot_name)
    if slot is None or slot.locked:
        return slots

    lower = [s.z for s in slots if s.z < slot.z]
    if not lower:
        return slots

    next_z = max(lower)
    logger.debug(f"Send backward: {slot_name} z {slot.z} -> {next_z - 1}")
    return _with_z(slots, slot_name, next_z - 1)


# ========================================
# Alignment Operations
# ========================================

def _validate_align_mode(mode: str):
    if mode not in ALIGN_MODES:
        raise ValueError(f"mode must be one of {list(ALIGN_MODES)}, got '{mode}'")


def _aligned_update(mode: str, container: BBox, element: BBox) -> Dict[str, float]:
    """Compute the single-axis update aligning element inside container"""
    if mode == 'left':
        return {'x': container.x}
    if mode == 'center':
        return {'x': container.x + (container.width - element.width) / 2}
    if mode == 'right':
        return {'x': container.x + container.width - element.width}
    if mode == 'top':
        return {'y': container.y}
    if mode == 'middle':
        return {'y': container.y + (container.height - element.height) / 2}
    # bottom
    return {'y': container.y + container.height - element.height}


def align_to_page(slot_names: List[str], mode: str, context: TransformContext) -> FrameUpdates:
    """Align slots to the page/canvas bounds

    Args:
        slot_names: Selected slot names
        mode: One of 'left', 'center', 'right', 'top', 'middle', 'bottom'
        context: Page snapshot

    Returns:
        Partial updates ({'x': ...} or {'y': ...}) for each unlocked slot

    Raises:
        ValueError: If mode is not a valid alignment
    """
    _validate_align_mode(mode)

    updates = {}
    for name, frame in unlocked_frames(slot_names, context):
        updates[name] = _aligned_update(mode, context.canvas_bounds, get_rotated_bbox(frame))

    logger.debug(f"Aligned {len(updates)} slots to page: {mode}")
    return updates


def align_to_selection(slot_names: List[str], mode: str, context: TransformContext) -> FrameUpdates:
    """Align slots to the first selected slot (not to the canvas)

    The first unlocked slot is the reference and is never updated.
    Fewer than two unlocked slots gives no updates.

    Raises:
        ValueError: If mode is not a valid alignment
    """
    _validate_align_mode(mode)

    members = unlocked_frames(slot_names, context)
    if len(members) < MIN_ALIGN_SELECTION:
        return {}

    reference = get_rotated_bbox(members[0][1])

    updates = {}
    for name, frame in members[1:]:
        updates[name] = _aligned_update(mode, reference, get_rotated_bbox(frame))

    logger.debug(f"Aligned {len(updates)} slots to '{members[0][0]}': {mode}")
    return updates


# ========================================
# Distribution Operations
# ========================================

def distribute(slot_names: List[str], mode: str, context: TransformContext) -> FrameUpdates:
    """Distribute slot centers evenly between the outermost two

    Slots are sorted by rotated-bbox position along the axis. The first and
    last never move; the rest get their centers evenly spaced and the center
    delta added to their raw x (horizontal) or y (vertical).

    Args:
        slot_names: Selected slot names (at least 3 unlocked needed)
        mode: 'horizontal' or 'vertical'
        context: Page snapshot

    Returns:
        Partial updates for the middle slots only

    Raises:
        ValueError: If mode is not a valid distribution
    """
    if mode not in DISTRIBUTE_MODES:
        raise ValueError(f"mode must be one of {list(DISTRIBUTE_MODES)}, got '{mode}'")

    members = unlocked_frames(slot_names, context)
    if len(members) < MIN_DISTRIBUTE_SELECTION:
        return {}

    if mode == 'horizontal':
        axis, size = 'x', 'width'
    else:
        axis, size = 'y', 'height'

    def start(bbox):
        return getattr(bbox, axis)

    def center(bbox):
        return getattr(bbox, axis) + getattr(bbox, size) / 2

    items = [(name, frame, get_rotated_bbox(frame)) for name, frame in members]
    items.sort(key=lambda item: start(item[2]))

    first_center = center(items[0][2])
    last_center = center(items[-1][2])
    spacing = (last_center - first_center) / (len(items) - 1)

    updates = {}
    for index, (name, frame, bbox) in enumerate(items[1:-1], start=1):
        target_center = first_center + spacing * index
        offset = target_center - center(bbox)
        updates[name] = {axis: getattr(frame, axis) + offset}

    logger.debug(f"Distributed {len(items)} slots {mode}ly ({len(updates)} moved)")
    return updates
