"""
Template Transforms - 2D transform and alignment engine

Pure geometry layer for a multi-page template editor:
- Bounding boxes of rotated frames, unions, hit tests
- Aspect-ratio locked resizing
- Numeric input, canvas clamping, grid snapping
- Z-order nudges, alignment, distribution
- Multi-select group move / scale / rotate / resize

The engine is INDEPENDENT of UI and state:
- No rendering
- No selection state
- No undo stack (callers store the command records built here)

Every function takes a Frame or a TransformContext snapshot and returns new
values; nothing is mutated in place.

Usage:
    context = TransformContext(slots, frames, BBox(0, 0, 1000, 1000))
    updates = align_to_page(['title', 'logo'], 'center', context)
    frames = merge_frame_updates(context.frames, updates)
"""

import logging

from .models import Point, BBox, Frame, Slot, TransformContext, unlocked_frames
from .transforms import *  # noqa: F401,F403
from .transforms import __all__ as _transforms_all
from .commands import CommandMerger, TransformCommand, BatchTransformCommand
from .services import merge_frame_updates, apply_to_context, build_batch_command
from .actions import TransformActions, ActionResult

__version__ = "0.1.0"

__all__ = [
    'Point', 'BBox', 'Frame', 'Slot', 'TransformContext', 'unlocked_frames',
    'CommandMerger', 'TransformCommand', 'BatchTransformCommand',
    'merge_frame_updates', 'apply_to_context', 'build_batch_command',
    'TransformActions', 'ActionResult',
] + list(_transforms_all)

# Library logging: no output unless the host configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())
