"""
Constants and configuration values for Block Painter.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the search.
"""

# Canvas constants
CANVAS_SIZE = 400
INITIAL_BLOCK_ID = "0"
BLOCK_ID_SEPARATOR = "."

# Operation cost bases (cost = base * canvas area / block area)
RECOLOR_COST = 5
POINT_CUT_COST = 10
VERTICAL_CUT_COST = 7
HORIZONTAL_CUT_COST = 7
SWAP_COST = 3
MERGE_COST = 1

# Target sampling
SAMPLE_STRIDE = 5
SIMILARITY_SCALE = 0.005
SAMPLE_METHOD_MOST_FREQUENT = "most_frequent"
SAMPLE_METHOD_MEAN = "mean"
DEFAULT_SAMPLE_METHOD = SAMPLE_METHOD_MOST_FREQUENT

# Search engine step sizes
XCUT_STEP = 10
YCUT_STEP = 10
RECT_STEP = 16
X3Y2_STEP = 40
X3Y3_STEP = 50

# Engine names
ENGINE_XCUT = "xcut"
ENGINE_YCUT = "ycut"
ENGINE_RECT = "rect"
ENGINE_X3Y2 = "x3y2"
ENGINE_X3Y3 = "x3y3"

# Output formatting
LOG_SEPARATOR = "|"

# File naming
DEFAULT_RESOURCES_DIR = "resources"
DEFAULT_INITIAL_DIR = "."
TARGET_IMAGE_SUFFIX = ".png"
INITIAL_PICTURE_SUFFIX = ".initial.json"
SUPPORTED_TARGET_FORMATS = {".png", ".bmp", ".gif", ".tiff", ".webp"}

# Initial picture field names
FIELD_WIDTH = "width"
FIELD_HEIGHT = "height"
FIELD_BLOCKS = "blocks"
FIELD_BLOCK_ID = "blockId"
FIELD_BOTTOM_LEFT = "bottomLeft"
FIELD_TOP_RIGHT = "topRight"
FIELD_COLOR = "color"

# snake_case aliases accepted when loading
FIELD_ALIASES = {
    "block_id": FIELD_BLOCK_ID,
    "bottom_left": FIELD_BOTTOM_LEFT,
    "top_right": FIELD_TOP_RIGHT,
}
