"""
Store-side helpers for committing engine results.

Engine operations return either full replacement frames or partial dicts
({'x': ...}). These helpers merge such a result into a frames map as one
step and build the matching undo record.
"""

from dataclasses import replace
from typing import Dict, List, Mapping, Optional, Union

from ..commands.transform_command import BatchTransformCommand, create_batch_transform_command, frames_equal
from ..models.context import Slot, TransformContext
from ..models.transform import Frame

FrameUpdate = Union[Frame, Mapping[str, float]]


def merge_frame_updates(frames: Mapping[str, Frame], updates: Mapping[str, FrameUpdate]) -> Dict[str, Frame]:
    """Apply engine updates to a frames map

    Args:
        frames: Current frames keyed by slot name
        updates: Full Frames or partial field dicts keyed by slot name

    Returns:
        New frames dict (input untouched). Names without a current frame
        are ignored.
    """
    merged = dict(frames)
    for name, update in updates.items():
        current = merged.get(name)
        if current is None:
            continue
        if isinstance(update, Frame):
            merged[name] = update
        else:
            merged[name] = replace(current, **update)
    return merged


def apply_to_context(context: TransformContext, frames: Optional[Mapping[str, Frame]] = None,
                     slots: Optional[List[Slot]] = None) -> TransformContext:
    """Return a new snapshot with frames and/or slots swapped in"""
    return TransformContext(
        slots=context.slots if slots is None else slots,
        frames=dict(context.frames) if frames is None else dict(frames),
        canvas_bounds=context.canvas_bounds,
    )


def build_batch_command(frames: Mapping[str, Frame],
                        updates: Mapping[str, FrameUpdate]) -> Optional[BatchTransformCommand]:
    """Build the undo record for an update map

    Slots whose frame does not actually change are left out.

    Returns:
        BatchTransformCommand, or None when nothing changes
    """
    merged = merge_frame_updates(frames, updates)
    transforms = []
    for name in updates:
        before = frames.get(name)
        if before is None:
            continue
        after = merged[name]
        if not frames_equal(before, after):
            transforms.append((name, before, after))

    if not transforms:
        return None
    return create_batch_transform_command(transforms)
