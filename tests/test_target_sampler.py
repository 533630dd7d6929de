"""
Unit tests for the target sampler and target image loading.
"""

import numpy as np
import pytest
from PIL import Image

from BP_Libs.CanvasLib.canvas_models import BLACK, WHITE, Color, CompositeBlock, LeafBlock, round_half_up
from BP_Libs.CanvasLib.errors import MalformedPictureError
from BP_Libs.CanvasLib.operations import Recolor, VerticalCut
from BP_Libs.CanvasLib.picture import Picture
from BP_Libs.GeometryLib.rectangle import Rect
from BP_Libs.SamplerLib.image_import import (
    get_supported_formats,
    is_supported_format,
    load_target_image,
    load_target_sampler,
)
from BP_Libs.SamplerLib.target_sampler import TargetSampler
from BP_Libs.constants import SAMPLE_METHOD_MEAN, SIMILARITY_SCALE

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)


@pytest.fixture
def halves_sampler(canvas_sampler):
    """Factory for 10x10 samplers whose left half (x < 5) is one color and right half another."""
    def make(left, right):
        return canvas_sampler([[left if x < 5 else right for x in range(10)] for _ in range(10)])
    return make


def pixelwise_similarity(sampler, picture):
    """Similarity computed one color_at lookup at a time."""
    total = sum(
        picture.color_at((x, y)).distance(sampler.color_at((x, y)))
        for x in range(sampler.width)
        for y in range(sampler.height)
    )
    return round_half_up(total * SIMILARITY_SCALE)


class TestOrientation:
    """Tests for canvas versus storage orientation."""

    def test_bottom_row_is_last_image_row(self):
        image = Image.new("RGBA", (4, 2), RED)
        for x in range(4):
            image.putpixel((x, 1), BLUE)

        sampler = TargetSampler.from_image(image)

        assert sampler.color_at((0, 0)) == Color(*BLUE)
        assert sampler.color_at((3, 1)) == Color(*RED)

    def test_size(self, solid_sampler):
        sampler = solid_sampler(30, 20, RED)

        assert sampler.width == 30
        assert sampler.height == 20
        assert sampler.bounds == Rect(0, 0, 30, 20)

    def test_color_outside_raises_error(self, solid_sampler):
        sampler = solid_sampler(5, 5, RED)

        with pytest.raises(ValueError):
            sampler.color_at((5, 0))

    def test_rgb_image_converted(self):
        sampler = TargetSampler.from_image(Image.new("RGB", (3, 3), (1, 2, 3)))

        assert sampler.color_at((1, 1)) == Color(1, 2, 3, 255)

    def test_non_image_raises_error(self):
        with pytest.raises(TypeError):
            TargetSampler.from_image("not an image")

    def test_wrong_array_shape_raises_error(self):
        with pytest.raises(ValueError):
            TargetSampler(np.zeros((4, 4, 3), dtype=np.uint8))


class TestRepresentativeColor:
    """Tests for region color selection."""

    def test_most_frequent_of_uniform_region(self, halves_sampler):
        sampler = halves_sampler(RED, GREEN)

        assert sampler.most_frequent_color(Rect(5, 0, 10, 10)) == Color(*GREEN)
        assert sampler.most_frequent_color(Rect(0, 0, 5, 10), stride=1) == Color(*RED)

    def test_most_frequent_tie_goes_to_first_column_scan(self, canvas_sampler):
        d, b, c, e = (10, 10, 10, 255), BLUE, GREEN, RED
        # Columns read bottom to top: x=0 -> d, b, b and x=1 -> c, c, e
        grid = [
            [d, c],
            [b, c],
            [b, e],
        ]
        sampler = canvas_sampler(grid)

        assert sampler.most_frequent_color(Rect(0, 0, 2, 3), stride=1) == Color(*b)

    def test_average_color(self, halves_sampler):
        sampler = halves_sampler(RED, BLUE)

        assert sampler.average_color(Rect(0, 0, 10, 10), stride=1) == Color(127, 0, 127, 255)

    def test_average_color_is_opaque(self, canvas_sampler):
        sampler = canvas_sampler([[(100, 100, 100, 0)] * 4] * 4)

        assert sampler.average_color(Rect(0, 0, 4, 4)) == Color(100, 100, 100, 255)

    def test_representative_color_methods(self, halves_sampler):
        sampler = halves_sampler(RED, BLUE)
        rect = Rect(0, 0, 10, 10)

        assert sampler.representative_color(rect) == Color(*RED)
        assert sampler.representative_color(rect, SAMPLE_METHOD_MEAN, stride=1) == Color(127, 0, 127, 255)

    def test_unknown_method_raises_error(self, solid_sampler):
        with pytest.raises(ValueError):
            solid_sampler(10, 10, RED).representative_color(Rect(0, 0, 10, 10), "median")

    def test_region_outside_image_raises_error(self, solid_sampler):
        with pytest.raises(ValueError):
            solid_sampler(10, 10, RED).most_frequent_color(Rect(0, 0, 20, 10))

    def test_invalid_stride_raises_error(self, solid_sampler):
        with pytest.raises(ValueError):
            solid_sampler(10, 10, RED).most_frequent_color(Rect(0, 0, 10, 10), stride=0)


class TestSimilarity:
    """Tests for picture similarity."""

    def test_identical_picture_scores_zero(self, solid_sampler):
        sampler = solid_sampler(20, 20, WHITE)

        assert sampler.similarity(Picture.initial(20, 20)) == 0

    def test_black_target_against_white_picture(self, solid_sampler):
        sampler = solid_sampler(20, 20, BLACK)

        # 400 pixels * 255 * sqrt(3) * 0.005 = 883.35
        assert sampler.similarity(Picture.initial(20, 20)) == 883

    def test_alpha_is_ignored(self, solid_sampler):
        sampler = solid_sampler(20, 20, (255, 255, 255, 0))

        assert sampler.similarity(Picture.initial(20, 20)) == 0

    def test_matching_halves(self, halves_sampler):
        sampler = halves_sampler(BLACK, WHITE)
        picture = Picture.initial(10, 10)
        picture.apply(VerticalCut("0", 5))
        picture.apply(Recolor("0.0", BLACK))

        assert sampler.similarity(picture) == 0

    def test_uncovered_picture_raises_error(self, solid_sampler):
        sampler = solid_sampler(20, 20, WHITE)

        with pytest.raises(MalformedPictureError):
            sampler.similarity(Picture.initial(10, 20))

    def test_block_off_canvas_paints_nothing(self, solid_sampler):
        sampler = solid_sampler(10, 10, WHITE)
        picture = Picture.from_data({
            "width": 10,
            "height": 10,
            "blocks": [
                {"blockId": "0", "bottomLeft": [0, 0], "topRight": [10, 10], "color": [255, 255, 255, 255]},
                {"blockId": "1", "bottomLeft": [-20, -20], "topRight": [-5, -5], "color": [0, 0, 0, 255]},
            ],
        })

        assert sampler.similarity(picture) == pixelwise_similarity(sampler, picture) == 0

    def test_matches_pixelwise_color_at(self, halves_sampler):
        sampler = halves_sampler(RED, GREEN)
        picture = Picture(10, 10, {
            "0": CompositeBlock(Rect(0, 0, 10, 6), (
                LeafBlock(Rect(0, 0, 3, 6), BLACK),
                LeafBlock(Rect(3, 0, 10, 6), Color(*RED)),
            )),
            "1": LeafBlock(Rect(0, 6, 7, 10), Color(*BLUE)),
            "2": LeafBlock(Rect(7, 6, 10, 10), Color(20, 200, 40, 255)),
        })

        assert sampler.similarity(picture) == pixelwise_similarity(sampler, picture)


class TestImageImport:
    """Tests for loading target images from disk."""

    def test_supported_formats(self):
        assert ".png" in get_supported_formats()
        assert is_supported_format("1.PNG")
        assert not is_supported_format("1.jpg")

    def test_load_target_image(self, temp_problem_dir):
        path = temp_problem_dir / "1.png"
        Image.new("RGB", (8, 6), (0, 74, 173)).save(path)

        image = load_target_image(path)

        assert image.mode == "RGBA"
        assert image.size == (8, 6)

    def test_load_target_sampler(self, temp_problem_dir):
        path = temp_problem_dir / "1.png"
        Image.new("RGBA", (8, 6), RED).save(path)

        sampler = load_target_sampler(path)

        assert sampler.width == 8
        assert sampler.color_at((7, 5)) == Color(*RED)

    def test_missing_file_raises_error(self, temp_problem_dir):
        with pytest.raises(FileNotFoundError):
            load_target_image(temp_problem_dir / "missing.png")

    def test_directory_raises_error(self, temp_problem_dir):
        with pytest.raises(ValueError):
            load_target_image(temp_problem_dir)

    def test_unsupported_format_raises_error(self, temp_problem_dir):
        path = temp_problem_dir / "1.jpg"
        Image.new("RGB", (4, 4)).save(path)

        with pytest.raises(ValueError, match="Unsupported"):
            load_target_image(path)
