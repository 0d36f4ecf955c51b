"""
Tests for committing engine results into a frames map.
"""
from template_transforms.models import Frame
from template_transforms.services import apply_to_context, build_batch_command, merge_frame_updates


FRAMES = {
    'a': Frame(0, 0, 100, 100),
    'b': Frame(200, 0, 50, 50, 10),
}


class TestMergeFrameUpdates:

    def test_partial_update(self):
        merged = merge_frame_updates(FRAMES, {'a': {'x': 40}})
        assert merged['a'] == Frame(40, 0, 100, 100)
        assert merged['b'] is FRAMES['b']

    def test_full_frame_replaces(self):
        replacement = Frame(1, 2, 3, 4)
        assert merge_frame_updates(FRAMES, {'b': replacement})['b'] is replacement

    def test_unknown_names_ignored(self):
        merged = merge_frame_updates(FRAMES, {'ghost': {'x': 1}})
        assert merged == FRAMES

    def test_input_untouched(self):
        merge_frame_updates(FRAMES, {'a': {'x': 40}})
        assert FRAMES['a'].x == 0


class TestApplyToContext:

    def test_swaps_frames(self, pair_context):
        frames = {'a': Frame(9, 9, 9, 9)}
        context = apply_to_context(pair_context, frames=frames)
        assert context.frames == frames
        assert context.slots is pair_context.slots
        assert context.canvas_bounds == pair_context.canvas_bounds

    def test_swaps_slots(self, pair_context):
        context = apply_to_context(pair_context, slots=[])
        assert context.slots == []
        assert context.frames == pair_context.frames


class TestBuildBatchCommand:

    def test_changed_frames_only(self):
        command = build_batch_command(FRAMES, {'a': {'x': 0}, 'b': {'y': 30}})
        assert len(command.commands) == 1
        sub = command.commands[0]
        assert (sub.slot_name, sub.before, sub.after) == ('b', FRAMES['b'], Frame(200, 30, 50, 50, 10))

    def test_nothing_changed(self):
        assert build_batch_command(FRAMES, {'a': {'x': 0.0001}}) is None

    def test_empty_updates(self):
        assert build_batch_command(FRAMES, {}) is None

    def test_unknown_names_ignored(self):
        assert build_batch_command(FRAMES, {'ghost': Frame(0, 0, 1, 1)}) is None
