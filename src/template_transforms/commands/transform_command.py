"""
Command records for transform operations (undo/redo support).

A command captures a slot's frame before and after an operation. The
history stack that stores them belongs to the caller; this module only
builds, applies, compares and merges records.
"""

import time
from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, List, Optional, Tuple

from ..constants import FRAME_EQUAL_TOLERANCE
from ..models.transform import Frame

ApplyFn = Callable[[str, Frame], None]


@dataclass(frozen=True)
class TransformCommand:
    """Before/after frames for a single slot"""
    slot_name: str
    before: Frame
    after: Frame
    timestamp: Optional[float] = None


@dataclass(frozen=True)
class BatchTransformCommand:
    """Several single-slot commands applied and undone as one step"""
    commands: Tuple[TransformCommand, ...] = field(default_factory=tuple)
    timestamp: Optional[float] = None


def create_transform_command(slot_name: str, before: Frame, after: Frame) -> TransformCommand:
    return TransformCommand(slot_name, before, after, timestamp=time.time())


def create_batch_transform_command(transforms: Iterable[Tuple[str, Frame, Frame]]) -> BatchTransformCommand:
    """Build a batch command

    Args:
        transforms: (slot_name, before, after) triples

    Returns:
        BatchTransformCommand with one command per triple, in order
    """
    commands = tuple(create_transform_command(name, before, after) for name, before, after in transforms)
    return BatchTransformCommand(commands, timestamp=time.time())


def execute_transform_command(command: TransformCommand, apply_fn: ApplyFn):
    apply_fn(command.slot_name, command.after)


def undo_transform_command(command: TransformCommand, apply_fn: ApplyFn):
    apply_fn(command.slot_name, command.before)


def execute_batch_transform_command(command: BatchTransformCommand, apply_fn: ApplyFn):
    for sub_command in command.commands:
        execute_transform_command(sub_command, apply_fn)


def undo_batch_transform_command(command: BatchTransformCommand, apply_fn: ApplyFn):
    """Undo a batch command, last sub-command first"""
    for sub_command in reversed(command.commands):
        undo_transform_command(sub_command, apply_fn)


def frames_equal(a: Frame, b: Frame, tolerance: float = FRAME_EQUAL_TOLERANCE) -> bool:
    """Compare two frames within tolerance (missing rotation counts as 0)"""
    return (
        abs(a.x - b.x) < tolerance
        and abs(a.y - b.y) < tolerance
        and abs(a.width - b.width) < tolerance
        and abs(a.height - b.height) < tolerance
        and abs(a.angle - b.angle) < tolerance
    )


def merge_transform_commands(commands: List[TransformCommand]) -> List[TransformCommand]:
    """Collapse consecutive commands for the same slot

    A run of commands for one slot becomes a single command keeping the
    first 'before' and the last 'after' (and the last timestamp).
    """
    if not commands:
        return []

    merged = []
    current = commands[0]

    for next_command in commands[1:]:
        if next_command.slot_name == current.slot_name:
            current = replace(current, after=next_command.after, timestamp=next_command.timestamp)
        else:
            merged.append(current)
            current = next_command

    merged.append(current)
    return merged
