"""
Slot and context model for multi-element operations.

A TransformContext is an immutable snapshot of one page for the active
canvas ratio: every slot, every frame (keyed by slot name) and the canvas
bounds. Operations never mutate it; they return replacement values which
the caller's store merges.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .transform import BBox, Frame


@dataclass(frozen=True)
class Slot:
    """Named, z-ordered, lockable design element

    Properties:
        name: Unique key (also the key into TransformContext.frames)
        z: Stacking value, not required to be contiguous or unique
        locked: Locked slots are excluded from every mutating operation
        data: Element-specific fields the engine never touches
    """
    name: str
    z: int
    locked: bool = False
    data: Dict[str, Any] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class TransformContext:
    """Snapshot of a page passed to alignment, z-order and group operations"""
    slots: List[Slot]
    frames: Dict[str, Frame]
    canvas_bounds: BBox

    def get_slot(self, name: str) -> Optional[Slot]:
        """Return the slot with the given name, or None"""
        for slot in self.slots:
            if slot.name == name:
                return slot
        return None


def unlocked_frames(names: List[str], context: TransformContext) -> List[Tuple[str, Frame]]:
    """Filter a selection down to the slots an operation may change

    A name survives only if its slot exists, is not locked and has a frame.
    Input order is preserved (alignment uses the first survivor as reference).

    Args:
        names: Selected slot names
        context: Page snapshot

    Returns:
        List of (name, frame) pairs
    """
    slot_map = {slot.name: slot for slot in context.slots}
    result = []
    for name in names:
        slot = slot_map.get(name)
        if slot is None or slot.locked:
            continue
        frame = context.frames.get(name)
        if frame is None:
            continue
        result.append((name, frame))
    return result
