"""Aspect ratio locking utilities for maintaining proportions during resize."""

from dataclasses import replace
from typing import Optional

from ..constants import ASPECT_RATIO_TOLERANCE, FALLBACK_ASPECT_RATIO
from ..models.transform import Frame


def get_aspect_ratio(frame: Frame) -> float:
    """Get aspect ratio (width / height), or 1 when height is 0"""
    if frame.height == 0:
        return FALLBACK_ASPECT_RATIO
    return frame.width / frame.height


def lock_aspect_ratio(frame: Frame, new_width: Optional[float] = None,
                      new_height: Optional[float] = None) -> Frame:
    """Resize frame while keeping its aspect ratio

    If both new_width and new_height are given, width takes precedence and
    the passed height is ignored.

    Args:
        frame: Frame to resize
        new_width: Target width (optional)
        new_height: Target height (optional)

    Returns:
        Resized frame with position and rotation preserved, or the same
        frame if neither dimension is given
    """
    ratio = get_aspect_ratio(frame)

    if new_width is not None:
        return replace(frame, width=new_width, height=new_width / ratio)

    if new_height is not None:
        return replace(frame, width=new_height * ratio, height=new_height)

    return frame


def fit_to_max_size(frame: Frame, max_width: float, max_height: float) -> Frame:
    """Shrink frame uniformly so it fits within max_width x max_height"""
    if frame.width <= max_width and frame.height <= max_height:
        return frame

    scale = min(max_width / frame.width, max_height / frame.height)
    return replace(frame, width=frame.width * scale, height=frame.height * scale)


def fill_min_size(frame: Frame, min_width: float, min_height: float) -> Frame:
    """Grow frame uniformly so it covers at least min_width x min_height"""
    if frame.width >= min_width and frame.height >= min_height:
        return frame

    scale = max(min_width / frame.width, min_height / frame.height)
    return replace(frame, width=frame.width * scale, height=frame.height * scale)


def has_same_aspect_ratio(frame_a: Frame, frame_b: Frame,
                          tolerance: float = ASPECT_RATIO_TOLERANCE) -> bool:
    return abs(get_aspect_ratio(frame_a) - get_aspect_ratio(frame_b)) < tolerance
