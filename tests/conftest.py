"""
Shared fixtures for template transform engine tests.

Provides reusable slots, frames and TransformContext snapshots.
"""
import sys
import os
import pytest

# Ensure src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from template_transforms.models import BBox, Frame, Slot, TransformContext


CANVAS = BBox(0, 0, 1000, 1000)


def make_context(frames, locked=(), z=None, canvas=CANVAS):
    """Build a context with one slot per frame name

    Args:
        frames: Dict of name -> Frame
        locked: Names of locked slots
        z: Optional dict of name -> z (defaults to insertion order 1..n)
    """
    slots = []
    for index, name in enumerate(frames, start=1):
        slot_z = z[name] if z and name in z else index
        slots.append(Slot(name=name, z=slot_z, locked=name in locked))
    return TransformContext(slots=slots, frames=dict(frames), canvas_bounds=canvas)


@pytest.fixture
def canvas():
    """1000x1000 canvas at origin"""
    return CANVAS


@pytest.fixture
def row_context():
    """Three 100x50 frames in a row at y=100"""
    return make_context({
        'a': Frame(0, 100, 100, 50),
        'b': Frame(300, 100, 100, 50),
        'c': Frame(600, 100, 100, 50),
    })


@pytest.fixture
def pair_context():
    """Two 100x100 squares side by side at the origin"""
    return make_context({
        'a': Frame(0, 0, 100, 100),
        'b': Frame(100, 0, 100, 100),
    })


@pytest.fixture
def stack_context():
    """Four slots with z 1..4 (d locked)"""
    frames = {name: Frame(0, 0, 10, 10) for name in 'abcd'}
    return make_context(frames, locked=('d',), z={'a': 1, 'b': 2, 'c': 3, 'd': 4})
