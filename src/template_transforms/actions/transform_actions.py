"""Toolbar and gesture actions - route UI commands to the transform engine"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from ..commands.transform_command import BatchTransformCommand
from ..models.context import TransformContext, unlocked_frames
from ..services.frame_updates import apply_to_context, build_batch_command, merge_frame_updates
from ..transforms import multi_select, numeric, operations
from ..utils.logger import loggerRaise


@dataclass(frozen=True)
class ActionResult:
    """Outcome of one action

    Properties:
        context: New page snapshot (the input snapshot if nothing changed)
        command: Undo record for frame changes (None for z-order or no-ops)
        reordered: True when a z-order action changed the slot list
    """
    context: TransformContext
    command: Optional[BatchTransformCommand] = None
    reordered: bool = False

    @property
    def changed(self) -> bool:
        return self.command is not None or self.reordered


class TransformActions:
    """Handles transform actions requested by the UI

    Each action name maps to one engine call. Z-order actions replace the
    slot list; every other action produces frame updates which are merged
    into a new snapshot together with the matching undo command.
    """

    Z_ORDER_ACTIONS = {
        'bring_to_front': operations.bring_to_front,
        'send_to_back': operations.send_to_back,
        'bring_forward': operations.bring_forward,
        'send_backward': operations.send_backward,
    }

    FRAME_ACTIONS = {
        'align_to_page': operations.align_to_page,
        'align_to_selection': operations.align_to_selection,
        'distribute': operations.distribute,
        'move_group': multi_select.move_group,
        'transform_group': multi_select.transform_group,
        'resize_group': multi_select.resize_group,
        'scale_group': multi_select.scale_group,
        'rotate_group': multi_select.rotate_group,
    }

    # (frame, context, **params) -> Frame, applied to each unlocked frame
    PER_FRAME_ACTIONS = {
        'numeric': lambda frame, context, transform, lock_ratio=False:
            numeric.apply_numeric_transform(frame, transform, lock_ratio),
        'snap_to_grid': lambda frame, context, grid_size:
            numeric.snap_frame_to_grid(frame, grid_size),
        'constrain_to_canvas': lambda frame, context:
            numeric.constrain_to_canvas(frame, context.canvas_bounds),
    }

    def __init__(self):
        self._logger = logging.getLogger('TransformActions')

    @classmethod
    def available_actions(cls) -> List[str]:
        return sorted({**cls.Z_ORDER_ACTIONS, **cls.FRAME_ACTIONS, **cls.PER_FRAME_ACTIONS})

    def run(self, action: str, context: TransformContext, slot_names: List[str], **params) -> ActionResult:
        """Run a named action on the selection

        Args:
            action: Action name (see available_actions())
            context: Current page snapshot
            slot_names: Selected slot names (z-order actions use the first)
            **params: Keyword arguments for the engine call
                      (mode, dx, dy, factor, angle_delta, transform, ...)

        Returns:
            ActionResult with the new snapshot and undo command

        Raises:
            ValueError: Unknown action, empty selection for z-order, bad mode
            TypeError: Missing or unexpected parameters
        """
        try:
            if action in self.Z_ORDER_ACTIONS:
                return self._run_z_order(action, context, slot_names)
            if action in self.FRAME_ACTIONS:
                updates = self.FRAME_ACTIONS[action](slot_names, context=context, **params)
            elif action in self.PER_FRAME_ACTIONS:
                updates = self._run_per_frame(action, context, slot_names, **params)
            else:
                raise ValueError(f"action must be one of {self.available_actions()}, got '{action}'")
        except (ValueError, TypeError) as e:
            loggerRaise(e, f"Transform action '{action}' failed")

        command = build_batch_command(context.frames, updates)
        if command is None:
            self._logger.debug(f"{action}: no frame changes")
            return ActionResult(context)

        frames = merge_frame_updates(context.frames, updates)
        self._logger.debug(f"{action}: updated {len(command.commands)} frame(s)")
        return ActionResult(apply_to_context(context, frames=frames), command)

    def _run_z_order(self, action: str, context: TransformContext, slot_names: List[str]) -> ActionResult:
        if not slot_names:
            raise ValueError(f"{action} needs a slot name")

        slots = self.Z_ORDER_ACTIONS[action](slot_names[0], context)
        if slots is context.slots:
            return ActionResult(context)
        return ActionResult(apply_to_context(context, slots=slots), reordered=True)

    def _run_per_frame(self, action: str, context: TransformContext, slot_names: List[str], **params):
        """Apply a single-frame function to every unlocked selected frame"""
        apply_fn = self.PER_FRAME_ACTIONS[action]
        return {
            name: apply_fn(frame, context, **params)
            for name, frame in unlocked_frames(slot_names, context)
        }
