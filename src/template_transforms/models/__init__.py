"""Data model for the transform engine."""
from .transform import Point, BBox, Frame
from .context import Slot, TransformContext, unlocked_frames

__all__ = ['Point', 'BBox', 'Frame', 'Slot', 'TransformContext', 'unlocked_frames']
