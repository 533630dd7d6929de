"""
Unit tests for canvas data models (colors and blocks).
"""

import pytest

from BP_Libs.CanvasLib.canvas_models import (
    BLACK,
    WHITE,
    Color,
    CompositeBlock,
    LeafBlock,
    round_half_up,
)
from BP_Libs.CanvasLib.errors import MalformedPictureError
from BP_Libs.GeometryLib.rectangle import Rect


class TestColor:
    """Tests for Color."""

    def test_default_alpha_is_opaque(self):
        assert Color(1, 2, 3).a == 255

    def test_distance_ignores_alpha(self):
        assert Color(0, 0, 0, 0).distance((3, 4, 0, 255)) == 5.0

    def test_distance_is_symmetric(self):
        assert WHITE.distance(BLACK) == BLACK.distance(WHITE)

    def test_from_sequence(self):
        assert Color.from_sequence(["1", "2", "3", "4"]) == Color(1, 2, 3, 4)

    def test_from_sequence_wrong_length(self):
        with pytest.raises(ValueError):
            Color.from_sequence([1, 2, 3])

    def test_from_sequence_out_of_range(self):
        with pytest.raises(ValueError):
            Color.from_sequence([0, 0, 0, 256])
        with pytest.raises(ValueError):
            Color.from_sequence([-1, 0, 0, 255])


class TestBlocks:
    """Tests for leaf and composite blocks."""

    def test_leaf_with_shape_keeps_color(self):
        leaf = LeafBlock(Rect(0, 0, 5, 5), BLACK)
        moved = leaf.with_shape(Rect(5, 5, 10, 10))

        assert moved.color == BLACK
        assert moved.shape == Rect(5, 5, 10, 10)
        assert leaf.shape == Rect(0, 0, 5, 5)

    def test_composite_children_become_tuple(self):
        block = CompositeBlock(Rect(0, 0, 10, 10), [LeafBlock(Rect(0, 0, 10, 10), WHITE)])

        assert isinstance(block.children, tuple)

    def test_nested_composite_rejected(self):
        inner = CompositeBlock(Rect(0, 0, 10, 10), (LeafBlock(Rect(0, 0, 10, 10), WHITE),))

        with pytest.raises(MalformedPictureError):
            CompositeBlock(Rect(0, 0, 10, 10), (inner,))

    def test_composite_with_shape_translates_children(self):
        block = CompositeBlock(Rect(0, 0, 10, 10), (
            LeafBlock(Rect(0, 0, 5, 10), BLACK),
            LeafBlock(Rect(5, 0, 10, 10), WHITE),
        ))

        moved = block.with_shape(Rect(20, 0, 30, 10))

        assert [child.shape for child in moved.children] == [
            Rect(20, 0, 25, 10),
            Rect(25, 0, 30, 10),
        ]
        assert moved.color_at((21, 3)) == BLACK
        assert moved.color_at((29, 3)) == WHITE

    def test_composite_color_at_uncovered_point(self):
        block = CompositeBlock(Rect(0, 0, 10, 10), (LeafBlock(Rect(0, 0, 5, 10), BLACK),))

        with pytest.raises(MalformedPictureError):
            block.color_at((7, 7))


@pytest.mark.parametrize("value, expected", [
    (0.4, 0),
    (0.5, 1),
    (2.4, 2),
    (12.5, 13),
    (17.5, 18),
    (8.75, 9),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
