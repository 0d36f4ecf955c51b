"""
Tests for numeric transform inputs.

Verifies:
- apply_numeric_transform ordering, ratio locking and size floor
- Canvas constraint (size first, then position)
- Rotation normalization to (-180, 180]
- Grid snapping and rounding helpers
"""
import math

import pytest

from template_transforms.models import BBox, Frame
from template_transforms.transforms.numeric import (
    NumericTransform,
    apply_numeric_transform,
    clamp,
    constrain_to_canvas,
    normalize_rotation,
    round_frame,
    round_to,
    snap_frame_to_grid,
    snap_to_grid,
)


# ══════════════════════════════════════════════════════════════════════════
# apply_numeric_transform
# ══════════════════════════════════════════════════════════════════════════

class TestApplyNumericTransform:
    frame = Frame(10, 20, 200, 100)

    def test_position_only(self):
        result = apply_numeric_transform(self.frame, NumericTransform(x=50, y=60), lock_ratio=False)
        assert result == Frame(50, 60, 200, 100)

    def test_empty_transform_keeps_values(self):
        assert apply_numeric_transform(self.frame, NumericTransform(), lock_ratio=True) == self.frame

    def test_rotation_is_normalized(self):
        result = apply_numeric_transform(self.frame, NumericTransform(rotation=270), lock_ratio=False)
        assert result.rotation == -90

    def test_independent_sizes(self):
        result = apply_numeric_transform(self.frame, NumericTransform(width=50, height=300), lock_ratio=False)
        assert (result.width, result.height) == (50, 300)

    def test_size_floor(self):
        result = apply_numeric_transform(self.frame, NumericTransform(width=0, height=-20), lock_ratio=False)
        assert (result.width, result.height) == (1, 1)

    def test_locked_width(self):
        result = apply_numeric_transform(self.frame, NumericTransform(width=400), lock_ratio=True)
        assert (result.width, result.height) == (400, 200)

    def test_locked_height(self):
        result = apply_numeric_transform(self.frame, NumericTransform(height=50), lock_ratio=True)
        assert (result.width, result.height) == (100, 50)

    def test_locked_width_wins(self):
        result = apply_numeric_transform(self.frame, NumericTransform(width=300, height=10), lock_ratio=True)
        assert (result.width, result.height) == (300, 150)

    def test_locked_resize_keeps_new_position_and_rotation(self):
        transform = NumericTransform(x=5, y=6, width=100, rotation=400)
        result = apply_numeric_transform(self.frame, transform, lock_ratio=True)
        assert (result.x, result.y) == (5, 6)
        assert result.rotation == 40
        assert result.height == 50

    def test_input_frame_untouched(self):
        apply_numeric_transform(self.frame, NumericTransform(x=0, width=5), lock_ratio=False)
        assert self.frame == Frame(10, 20, 200, 100)


# ══════════════════════════════════════════════════════════════════════════
# constrain_to_canvas
# ══════════════════════════════════════════════════════════════════════════

class TestConstrainToCanvas:
    canvas = BBox(0, 0, 500, 400)

    def test_inside_unchanged(self):
        frame = Frame(10, 10, 100, 100)
        assert constrain_to_canvas(frame, self.canvas) == frame

    def test_pulls_back_inside(self):
        result = constrain_to_canvas(Frame(450, -20, 100, 100), self.canvas)
        assert (result.x, result.y) == (400, 0)

    def test_oversize_is_shrunk_then_positioned(self):
        result = constrain_to_canvas(Frame(100, 100, 800, 900), self.canvas)
        assert result == Frame(0, 0, 500, 400)

    def test_min_size(self):
        result = constrain_to_canvas(Frame(10, 10, 0, 0.5), self.canvas)
        assert (result.width, result.height) == (1, 1)

    def test_offset_canvas(self):
        result = constrain_to_canvas(Frame(0, 0, 10, 10), BBox(100, 200, 50, 50))
        assert (result.x, result.y) == (100, 200)

    def test_rotation_kept(self):
        assert constrain_to_canvas(Frame(0, 0, 10, 10, 30), self.canvas).rotation == 30


# ══════════════════════════════════════════════════════════════════════════
# normalize_rotation
# ══════════════════════════════════════════════════════════════════════════

class TestNormalizeRotation:

    @pytest.mark.parametrize("value,expected", [
        (0, 0),
        (90, 90),
        (180, 180),
        (-180, 180),
        (181, -179),
        (270, -90),
        (-270, 90),
        (360, 0),
        (720 + 45, 45),
        (-45, -45),
    ])
    def test_values(self, value, expected):
        assert normalize_rotation(value) == pytest.approx(expected)

    def test_range(self):
        for value in range(-1000, 1000, 7):
            result = normalize_rotation(value)
            assert -180 < result <= 180


# ══════════════════════════════════════════════════════════════════════════
# Grid snapping
# ══════════════════════════════════════════════════════════════════════════

class TestSnapToGrid:

    @pytest.mark.parametrize("value,grid,expected", [
        (12, 10, 10),
        (15, 10, 20),
        (-12, 10, -10),
        (33, 8, 32),
    ])
    def test_snaps(self, value, grid, expected):
        assert snap_to_grid(value, grid) == expected

    @pytest.mark.parametrize("grid", [0, -5])
    def test_non_positive_grid_is_identity(self, grid):
        assert snap_to_grid(12.3, grid) == 12.3

    def test_frame(self):
        result = snap_frame_to_grid(Frame(12, 27, 44, 96, 15), 10)
        assert result == Frame(10, 30, 40, 100, 15)

    def test_frame_size_never_snaps_to_zero(self):
        result = snap_frame_to_grid(Frame(0, 0, 3, 4), 10)
        assert (result.width, result.height) == (10, 10)

    def test_frame_non_positive_grid(self):
        frame = Frame(1.5, 2.5, 3.5, 4.5)
        assert snap_frame_to_grid(frame, 0) is frame

    @pytest.mark.parametrize("frame,grid", [
        (Frame(13, 27, 41, 99), 5),
        (Frame(0, 0, 1, 1), 3),
        (Frame(-17, 250, 333, 12, 90), 25),
    ])
    def test_round_after_snap_is_idempotent(self, frame, grid):
        once = round_frame(snap_frame_to_grid(frame, grid), 0)
        twice = round_frame(snap_frame_to_grid(once, grid), 0)
        assert once == twice


# ══════════════════════════════════════════════════════════════════════════
# Numeric helpers
# ══════════════════════════════════════════════════════════════════════════

class TestHelpers:

    @pytest.mark.parametrize("value,expected", [(-5, 0), (5, 5), (15, 10)])
    def test_clamp(self, value, expected):
        assert clamp(value, 0, 10) == expected

    def test_round_to(self):
        assert round_to(3.14159, 2) == 3.14
        assert round_to(2.5) == 3
        assert round_to(-2.5) == -2
        assert round_to(1234.5678, -2) == pytest.approx(1200)

    def test_round_to_propagates_nan(self):
        assert math.isnan(round_to(float('nan'), 2))

    def test_round_frame(self):
        result = round_frame(Frame(1.234, 2.346, 3.456, 4.567, 12.3456))
        assert result == Frame(1.23, 2.35, 3.46, 4.57, 12.35)

    def test_round_frame_without_rotation(self):
        assert round_frame(Frame(1.1, 2.2, 3.3, 4.4), 0).rotation is None
