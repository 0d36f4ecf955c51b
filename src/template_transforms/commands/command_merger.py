"""
Merges sequential commands during drag operations to reduce undo/redo stack noise.

Usage:
    merger = CommandMerger()
    merger.start(command)        # drag start / mousedown
    merger.update(command)       # every drag tick
    final = merger.commit()      # drag end / mouseup
    merger.cancel()              # Escape: discard without committing

The merger has no timer of its own. Callers that may miss the drag-end
event call poll() from their event loop; it commits the pending command
once it has been idle for COMMAND_MERGE_DELAY seconds.
"""

import logging
import time
from dataclasses import replace
from typing import Callable, Optional, Union

from ..constants import COMMAND_MERGE_DELAY
from .transform_command import BatchTransformCommand, TransformCommand

Command = Union[TransformCommand, BatchTransformCommand]


class CommandMerger:
    """Collapses a stream of commands into one before/after record

    The first command's 'before' is kept; every update replaces 'after'.
    """

    def __init__(self, merge_delay: float = COMMAND_MERGE_DELAY,
                 clock: Callable[[], float] = time.monotonic):
        self._logger = logging.getLogger('CommandMerger')
        self._pending: Optional[Command] = None
        self._last_update: Optional[float] = None
        self._merge_delay = merge_delay
        self._clock = clock

    def start(self, command: Command):
        """Start a new sequence, dropping any previous pending command"""
        self._pending = command
        self._last_update = self._clock()

    def update(self, command: Command):
        """Merge a new command into the pending one

        Single commands for the same slot keep the original 'before'.
        Batch commands merge per slot; slots missing from the update keep
        their pending state. Anything else replaces the pending command.
        """
        if self._pending is None:
            self.start(command)
            return

        pending = self._pending
        if isinstance(pending, TransformCommand) and isinstance(command, TransformCommand):
            if pending.slot_name == command.slot_name:
                self._pending = replace(pending, after=command.after, timestamp=command.timestamp)
            else:
                self._logger.warning("Cannot merge commands for different slots")
                self._pending = command
        elif isinstance(pending, BatchTransformCommand) and isinstance(command, BatchTransformCommand):
            latest = {cmd.slot_name: cmd for cmd in command.commands}
            merged = []
            for pending_cmd in pending.commands:
                match = latest.get(pending_cmd.slot_name)
                if match is not None:
                    pending_cmd = replace(pending_cmd, after=match.after, timestamp=match.timestamp)
                merged.append(pending_cmd)
            self._pending = replace(pending, commands=tuple(merged), timestamp=command.timestamp)
        else:
            self._logger.warning("Replacing command due to type mismatch")
            self._pending = command

        self._last_update = self._clock()

    def commit(self) -> Optional[Command]:
        """Return the merged command and clear state"""
        command = self._pending
        self._pending = None
        self._last_update = None
        return command

    def cancel(self):
        """Discard the pending command without committing"""
        self._pending = None
        self._last_update = None

    def get_pending(self) -> Optional[Command]:
        return self._pending

    def has_pending(self) -> bool:
        return self._pending is not None

    def poll(self) -> Optional[Command]:
        """Auto-commit if the pending command has been idle too long

        Returns:
            The committed command, or None if nothing was due
        """
        if self._pending is None:
            return None
        if self._clock() - self._last_update < self._merge_delay:
            return None
        self._logger.warning("Auto-committing due to inactivity")
        return self.commit()
