"""Pure geometry operations: bbox math, aspect ratio, numeric input, alignment, groups."""
from .bbox import (
    get_union_bbox, get_rotated_bbox, contains_point, get_bbox_corners,
    bboxes_intersect, get_bbox_center, expand_bbox, clamp_bbox,
)
from .aspect_ratio import (
    get_aspect_ratio, lock_aspect_ratio, fit_to_max_size, fill_min_size, has_same_aspect_ratio,
)
from .numeric import (
    NumericTransform, apply_numeric_transform, constrain_to_canvas, normalize_rotation,
    snap_to_grid, snap_frame_to_grid, clamp, round_to, round_frame,
)
from .operations import (
    bring_to_front, send_to_back, bring_forward, send_backward,
    align_to_page, align_to_selection, distribute,
)
from .multi_select import move_group, transform_group, resize_group, scale_group, rotate_group

__all__ = [
    'get_union_bbox', 'get_rotated_bbox', 'contains_point', 'get_bbox_corners',
    'bboxes_intersect', 'get_bbox_center', 'expand_bbox', 'clamp_bbox',
    'get_aspect_ratio', 'lock_aspect_ratio', 'fit_to_max_size', 'fill_min_size',
    'has_same_aspect_ratio',
    'NumericTransform', 'apply_numeric_transform', 'constrain_to_canvas', 'normalize_rotation',
    'snap_to_grid', 'snap_frame_to_grid', 'clamp', 'round_to', 'round_frame',
    'bring_to_front', 'send_to_back', 'bring_forward', 'send_backward',
    'align_to_page', 'align_to_selection', 'distribute',
    'move_group', 'transform_group', 'resize_group', 'scale_group', 'rotate_group',
]
