"""
Pytest configuration and shared fixtures for Block Painter tests.

This module provides shared test fixtures and helpers for building
target images and samplers used across multiple test modules.
"""

import numpy as np
import pytest
from PIL import Image

from BP_Libs.SamplerLib.target_sampler import TargetSampler


def sampler_from_canvas(grid):
    """
    Build a sampler from pixel colors given in canvas orientation.

    Args:
        grid: Nested list indexed [y][x] with y = 0 at the bottom, each entry
            an (R, G, B, A) tuple

    Returns:
        TargetSampler over the equivalent top-down image
    """
    pixels = np.array(grid, dtype=np.uint8)
    return TargetSampler(np.flipud(pixels))


@pytest.fixture
def canvas_sampler():
    """Provide sampler_from_canvas to tests."""
    return sampler_from_canvas


@pytest.fixture
def temp_problem_dir(tmp_path):
    """
    Provide a temporary directory for target images and solutions.

    Args:
        tmp_path: Pytest's built-in temporary directory fixture

    Returns:
        Path object pointing to a temporary directory
    """
    return tmp_path


@pytest.fixture
def solid_image():
    """Factory for solid RGBA images: solid_image(width, height, color)."""
    def make(width, height, color):
        return Image.new("RGBA", (width, height), tuple(color))
    return make


@pytest.fixture
def solid_sampler(solid_image):
    """Factory for samplers over solid images: solid_sampler(width, height, color)."""
    def make(width, height, color):
        return TargetSampler.from_image(solid_image(width, height, color))
    return make


@pytest.fixture
def striped_sampler():
    """60x60 target made of six 10-pixel vertical stripes of different colors."""
    colors = [
        (255, 0, 0, 255),
        (0, 255, 0, 255),
        (0, 0, 255, 255),
        (255, 255, 0, 255),
        (0, 255, 255, 255),
        (255, 0, 255, 255),
    ]
    grid = [[colors[x // 10] for x in range(60)] for _ in range(60)]
    return sampler_from_canvas(grid)
