"""
SamplerLib - Target image sampling

This module provides the target sampler used to pick region colors and to
score pictures against the target image, and the image loader feeding it.
"""

from BP_Libs.SamplerLib.target_sampler import TargetSampler
from BP_Libs.SamplerLib.image_import import (
    get_supported_formats,
    is_supported_format,
    load_target_image,
    load_target_sampler,
)

__all__ = [
    "TargetSampler",
    "get_supported_formats",
    "is_supported_format",
    "load_target_image",
    "load_target_sampler",
]
