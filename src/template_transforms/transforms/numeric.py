"""
Numeric transform inputs for precise positioning and sizing.

Backs the numeric property fields (x, y, width, height, rotation) and the
grid snapping / canvas clamping building blocks used by the snapping UI.
"""

from dataclasses import dataclass, replace
from typing import Optional

import numpy as np

from ..constants import (
    DEFAULT_FRAME_ROUND_DECIMALS,
    DEFAULT_ROUND_DECIMALS,
    FULL_ROTATION,
    HALF_ROTATION,
    MIN_FRAME_SIZE,
)
from ..models.transform import BBox, Frame
from .aspect_ratio import lock_aspect_ratio


@dataclass(frozen=True)
class NumericTransform:
    """Explicit values typed into the numeric inputs (None = unchanged)"""
    x: Optional[float] = None
    y: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    rotation: Optional[float] = None


def apply_numeric_transform(frame: Frame, transform: NumericTransform, lock_ratio: bool) -> Frame:
    """Apply numeric input values to a frame

    Position and rotation are applied first, independent of ratio locking.
    With lock_ratio, sizing goes through lock_aspect_ratio on the
    position-updated frame (width wins when both are given). Without it,
    width and height are set independently, each floored at MIN_FRAME_SIZE.

    Args:
        frame: Current frame
        transform: Values to apply
        lock_ratio: Keep the frame's aspect ratio when resizing

    Returns:
        New frame
    """
    changes = {}
    if transform.x is not None:
        changes['x'] = transform.x
    if transform.y is not None:
        changes['y'] = transform.y
    if transform.rotation is not None:
        changes['rotation'] = normalize_rotation(transform.rotation)

    result = replace(frame, **changes)

    if lock_ratio:
        if transform.width is not None or transform.height is not None:
            result = lock_aspect_ratio(result, transform.width, transform.height)
        return result

    sizes = {}
    if transform.width is not None:
        sizes['width'] = max(MIN_FRAME_SIZE, transform.width)
    if transform.height is not None:
        sizes['height'] = max(MIN_FRAME_SIZE, transform.height)

    return replace(result, **sizes)


def constrain_to_canvas(frame: Frame, canvas_bounds: BBox) -> Frame:
    """Keep a frame fully inside the canvas

    Width/height are clamped into [MIN_FRAME_SIZE, canvas size] first, then
    x/y are clamped using the (possibly shrunk) size.
    """
    width = max(MIN_FRAME_SIZE, min(frame.width, canvas_bounds.width))
    height = max(MIN_FRAME_SIZE, min(frame.height, canvas_bounds.height))

    x = max(canvas_bounds.x, min(canvas_bounds.x + canvas_bounds.width - width, frame.x))
    y = max(canvas_bounds.y, min(canvas_bounds.y + canvas_bounds.height - height, frame.y))

    return replace(frame, x=x, y=y, width=width, height=height)


def normalize_rotation(rotation: float) -> float:
    """Normalize rotation to the (-180, 180] range

    Example:
        normalize_rotation(270)  -> -90
        normalize_rotation(-270) -> 90
    """
    # Python's % already lands in [0, 360)
    normalized = rotation % FULL_ROTATION
    if normalized > HALF_ROTATION:
        normalized -= FULL_ROTATION
    return normalized


def snap_to_grid(value: float, grid_size: float) -> float:
    if grid_size <= 0:
        return value
    return round_to(value / grid_size) * grid_size


def snap_frame_to_grid(frame: Frame, grid_size: float) -> Frame:
    """Snap position and size to the grid; size never snaps below one cell"""
    if grid_size <= 0:
        return frame

    return replace(
        frame,
        x=snap_to_grid(frame.x, grid_size),
        y=snap_to_grid(frame.y, grid_size),
        width=max(grid_size, snap_to_grid(frame.width, grid_size)),
        height=max(grid_size, snap_to_grid(frame.height, grid_size)),
    )


def clamp(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(max_value, value))


def round_to(value: float, decimals: int = DEFAULT_ROUND_DECIMALS) -> float:
    """Round to decimal places, halves rounding up (2.5 -> 3, -2.5 -> -2)"""
    multiplier = 10 ** decimals
    # np.floor lets NaN and infinities propagate instead of raising
    return float(np.floor(value * multiplier + 0.5) / multiplier)


def round_frame(frame: Frame, decimals: int = DEFAULT_FRAME_ROUND_DECIMALS) -> Frame:
    """Round every frame value; rotation only if present"""
    return Frame(
        x=round_to(frame.x, decimals),
        y=round_to(frame.y, decimals),
        width=round_to(frame.width, decimals),
        height=round_to(frame.height, decimals),
        rotation=round_to(frame.rotation, decimals) if frame.rotation is not None else None,
    )
