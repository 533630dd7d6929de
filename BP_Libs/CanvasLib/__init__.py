"""
CanvasLib - Canvas model

This module provides colors, leaf and composite blocks, the editing
operations, and the picture they are applied to together with its cost
model and error taxonomy.
"""

from BP_Libs.CanvasLib.canvas_models import (
    BLACK,
    WHITE,
    Block,
    Color,
    CompositeBlock,
    LeafBlock,
    RgbaColor,
    round_half_up,
)
from BP_Libs.CanvasLib.errors import (
    InvalidCutError,
    MalformedPictureError,
    MissingBlockError,
    OperationError,
    PictureError,
    ShapeMismatchError,
    UnsupportedOperationError,
)
from BP_Libs.CanvasLib.operations import (
    HorizontalCut,
    Merge,
    Operation,
    OperationLog,
    PointCut,
    Recolor,
    Swap,
    VerticalCut,
    parse_log,
    parse_operation,
    serialize_log,
)
from BP_Libs.CanvasLib.picture import Picture

__all__ = [
    "BLACK",
    "WHITE",
    "Block",
    "Color",
    "CompositeBlock",
    "LeafBlock",
    "RgbaColor",
    "round_half_up",
    "InvalidCutError",
    "MalformedPictureError",
    "MissingBlockError",
    "OperationError",
    "PictureError",
    "ShapeMismatchError",
    "UnsupportedOperationError",
    "HorizontalCut",
    "Merge",
    "Operation",
    "OperationLog",
    "PointCut",
    "Recolor",
    "Swap",
    "VerticalCut",
    "parse_log",
    "parse_operation",
    "serialize_log",
    "Picture",
]
