"""
Target image sampling and similarity scoring.

The target image is stored with row 0 at the top, while canvas coordinates
have their origin at the bottom-left. The sampler flips the rows once on
construction so every query can index it as ``[y, x]`` in canvas space.

Classes:
    TargetSampler: Point/region color queries and picture similarity
"""

from collections import Counter
from typing import Any, Tuple

import numpy as np

from BP_Libs.CanvasLib.canvas_models import Color, round_half_up
from BP_Libs.GeometryLib.rectangle import Rect
from BP_Libs.constants import (
    DEFAULT_SAMPLE_METHOD,
    SAMPLE_METHOD_MEAN,
    SAMPLE_METHOD_MOST_FREQUENT,
    SAMPLE_STRIDE,
    SIMILARITY_SCALE,
)


class TargetSampler:
    """
    Read-only view of the target image.

    Example:
        >>> sampler = TargetSampler.from_image(Image.open("1.png"))
        >>> sampler.color_at((10, 10))
        >>> sampler.representative_color(Rect(0, 0, 200, 400))
        >>> sampler.similarity(picture)

    Args:
        pixels: uint8 array of shape (height, width, 4) in storage order
            (row 0 is the top of the image)
    """

    def __init__(self, pixels: np.ndarray):
        pixels = np.asarray(pixels, dtype=np.uint8)
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(f"Expected an RGBA pixel array, got shape {pixels.shape}")
        self._pixels = np.ascontiguousarray(np.flipud(pixels))
        self._rgb = self._pixels[:, :, :3].astype(np.float64)

    @classmethod
    def from_image(cls, image: Any) -> "TargetSampler":
        """Build a sampler from a PIL Image (converted to RGBA)."""
        if not hasattr(image, "mode"):
            raise TypeError(f"Expected PIL Image, got {type(image)}")
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return cls(np.asarray(image))

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def bounds(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def color_at(self, point: Tuple[int, int]) -> Color:
        x, y = point
        if not self.bounds.contains((x, y)):
            raise ValueError(f"Point ({x}, {y}) outside of {self.width}x{self.height} image")
        return Color(*(int(channel) for channel in self._pixels[y, x]))

    def _samples(self, rect: Rect, stride: int) -> np.ndarray:
        """Stride samples of a region as an (n, 4) array, x-major like a column scan."""
        if rect.intersect(self.bounds) != rect:
            raise ValueError(f"Region {rect} outside of {self.width}x{self.height} image")
        if stride <= 0:
            raise ValueError(f"stride must be positive, got {stride}")
        region = self._pixels[rect.bottom:rect.top:stride, rect.left:rect.right:stride]
        return region.transpose(1, 0, 2).reshape(-1, 4)

    def most_frequent_color(self, rect: Rect, stride: int = SAMPLE_STRIDE) -> Color:
        """
        Most frequent color among the stride samples of a region.

        Ties go to the color encountered first while scanning columns left
        to right, each from bottom to top.
        """
        counts = Counter(map(tuple, self._samples(rect, stride).tolist()))

        best_color, best_count = None, 0
        for color, count in counts.items():
            if count > best_count:
                best_color, best_count = color, count
        return Color(*best_color)

    def average_color(self, rect: Rect, stride: int = SAMPLE_STRIDE) -> Color:
        """Per-channel integer mean of the stride samples, fully opaque."""
        samples = self._samples(rect, stride).astype(np.int64)
        r, g, b = (int(value) for value in samples[:, :3].sum(axis=0) // len(samples))
        return Color(r, g, b, 255)

    def representative_color(
        self,
        rect: Rect,
        method: str = DEFAULT_SAMPLE_METHOD,
        stride: int = SAMPLE_STRIDE,
    ) -> Color:
        """
        Pick the color a search engine paints a region with.

        Args:
            rect: Region in canvas coordinates
            method: 'most_frequent' (default) or 'mean'
            stride: Sampling step along both axes

        Returns:
            The representative color of the region

        Raises:
            ValueError: If the method is unknown or the region leaves the image
        """
        if method == SAMPLE_METHOD_MOST_FREQUENT:
            return self.most_frequent_color(rect, stride)
        if method == SAMPLE_METHOD_MEAN:
            return self.average_color(rect, stride)
        raise ValueError(f"Unsupported sample method: {method}")

    def similarity(self, picture: Any) -> int:
        """
        Dissimilarity between the target and a picture.

        Sums the RGB Euclidean distance between every image pixel and the
        picture's color at the same point, scales by SIMILARITY_SCALE and
        rounds.

        Raises:
            MalformedPictureError: If the picture leaves an image pixel uncovered
        """
        rendered = picture.render(self.width, self.height)
        diff = rendered[:, :, :3].astype(np.float64) - self._rgb
        total = float(np.sqrt((diff * diff).sum(axis=2)).sum())
        return round_half_up(total * SIMILARITY_SCALE)
