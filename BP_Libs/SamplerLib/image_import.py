"""
Target image import for Block Painter.

Functions:
    is_supported_format: Check whether a path has a supported image extension
    get_supported_formats: Sorted list of supported extensions
    load_target_image: Load an image from disk as an RGBA PIL Image
    load_target_sampler: Load an image from disk straight into a TargetSampler
"""

import logging
from pathlib import Path
from typing import List

from PIL import Image

from BP_Libs.SamplerLib.target_sampler import TargetSampler
from BP_Libs.constants import SUPPORTED_TARGET_FORMATS

logger = logging.getLogger(__name__)


def get_supported_formats() -> List[str]:
    return sorted(SUPPORTED_TARGET_FORMATS)


def is_supported_format(file_path: Path) -> bool:
    return Path(file_path).suffix.lower() in SUPPORTED_TARGET_FORMATS


def load_target_image(file_path: Path) -> "Image.Image":
    """
    Load a target image and convert it to RGBA.

    Args:
        file_path: Path to a lossless image file

    Returns:
        RGBA PIL Image fully loaded into memory

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the path is not a file or has an unsupported extension
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Target image not found: {file_path}")

    if not file_path.is_file():
        raise ValueError(f"Target image path is not a file: {file_path}")

    if not is_supported_format(file_path):
        raise ValueError(
            f"Unsupported target image format: {file_path.suffix}. "
            f"Supported: {', '.join(get_supported_formats())}"
        )

    with Image.open(file_path) as image:
        image.load()
        rgba = image.convert("RGBA")

    logger.info(f"Loaded target image {file_path.name} ({rgba.width}x{rgba.height})")
    return rgba


def load_target_sampler(file_path: Path) -> TargetSampler:
    return TargetSampler.from_image(load_target_image(file_path))
