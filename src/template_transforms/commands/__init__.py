"""Undo/redo command records and drag merging."""
from .transform_command import (
    TransformCommand, BatchTransformCommand,
    create_transform_command, create_batch_transform_command,
    execute_transform_command, undo_transform_command,
    execute_batch_transform_command, undo_batch_transform_command,
    frames_equal, merge_transform_commands,
)
from .command_merger import CommandMerger
