"""
Picture (canvas) model for Block Painter.

A picture maps block ids to blocks. Together the block shapes tile the
canvas rectangle. Cutting a block replaces it with children whose ids
append ``.0``, ``.1``, ... to the parent id, so an id spells out the cut
history that produced it.

Classes:
    Picture: Block map with operation application, cost model and rendering
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np
from PIL import Image

from BP_Libs.CanvasLib.canvas_models import (
    WHITE,
    Block,
    Color,
    CompositeBlock,
    LeafBlock,
    round_half_up,
)
from BP_Libs.CanvasLib.errors import (
    InvalidCutError,
    MalformedPictureError,
    MissingBlockError,
    ShapeMismatchError,
    UnsupportedOperationError,
)
from BP_Libs.CanvasLib.operations import (
    HorizontalCut,
    Merge,
    Operation,
    PointCut,
    Recolor,
    Swap,
    VerticalCut,
)
from BP_Libs.GeometryLib.rectangle import GeometryError, Rect
from BP_Libs.constants import (
    BLOCK_ID_SEPARATOR,
    FIELD_ALIASES,
    FIELD_BLOCK_ID,
    FIELD_BLOCKS,
    FIELD_BOTTOM_LEFT,
    FIELD_COLOR,
    FIELD_HEIGHT,
    FIELD_TOP_RIGHT,
    FIELD_WIDTH,
    HORIZONTAL_CUT_COST,
    INITIAL_BLOCK_ID,
    MERGE_COST,
    POINT_CUT_COST,
    RECOLOR_COST,
    SWAP_COST,
    VERTICAL_CUT_COST,
)

_BASE_COSTS = {
    Recolor: RECOLOR_COST,
    PointCut: POINT_CUT_COST,
    VerticalCut: VERTICAL_CUT_COST,
    HorizontalCut: HORIZONTAL_CUT_COST,
    Swap: SWAP_COST,
    Merge: MERGE_COST,
}


def _normalize_block_data(block: Dict[str, Any]) -> Dict[str, Any]:
    """Map snake_case aliases onto the canonical camelCase field names."""
    return {FIELD_ALIASES.get(key, key): value for key, value in block.items()}


@dataclass
class Picture:
    """Mutable mapping from block id to block.

    Attributes:
        width: Canvas width in pixels
        height: Canvas height in pixels
        blocks: Block id -> LeafBlock or CompositeBlock
        counter: Id counter kept for compatibility; no operation uses it
    """
    width: int
    height: int
    blocks: Dict[str, Block] = field(default_factory=dict)
    counter: int = 0

    @classmethod
    def initial(cls, width: int, height: int) -> "Picture":
        """Single white leaf covering the whole canvas under id ``"0"``."""
        shape = Rect(0, 0, width, height)
        return cls(width, height, {INITIAL_BLOCK_ID: LeafBlock(shape, WHITE)})

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "Picture":
        """
        Build a picture from an initial canvas description.

        Args:
            data: Dictionary with width, height and a list of blocks, each
                holding blockId, bottomLeft, topRight and color

        Returns:
            Picture made of leaf blocks

        Raises:
            ValueError: If a field is missing or malformed, or an id repeats
        """
        try:
            width = int(data[FIELD_WIDTH])
            height = int(data[FIELD_HEIGHT])
            raw_blocks = list(data[FIELD_BLOCKS])
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid picture description: {e}") from e

        if width <= 0 or height <= 0:
            raise ValueError(f"Picture size must be positive, got {width}x{height}")

        blocks: Dict[str, Block] = {}
        for raw_block in raw_blocks:
            if not isinstance(raw_block, dict):
                raise ValueError(f"Block description must be an object, got {raw_block!r}")
            block = _normalize_block_data(raw_block)
            try:
                block_id = str(block[FIELD_BLOCK_ID])
                left, bottom = (int(value) for value in block[FIELD_BOTTOM_LEFT])
                right, top = (int(value) for value in block[FIELD_TOP_RIGHT])
                color = Color.from_sequence(block[FIELD_COLOR])
                shape = Rect(left, bottom, right, top)
            except (KeyError, TypeError) as e:
                raise ValueError(f"Invalid block description {raw_block!r}: {e}") from e

            if block_id in blocks:
                raise ValueError(f"Duplicate block id: {block_id}")
            blocks[block_id] = LeafBlock(shape, color)

        return cls(width, height, blocks)

    def to_data(self) -> Dict[str, Any]:
        """Describe the picture in the initial canvas format (leaf blocks only)."""
        blocks: List[Dict[str, Any]] = []
        for block_id, block in self.blocks.items():
            if not isinstance(block, LeafBlock):
                raise UnsupportedOperationError(
                    f"Cannot describe composite block {block_id}"
                )
            blocks.append({
                FIELD_BLOCK_ID: block_id,
                FIELD_BOTTOM_LEFT: list(block.shape.bottom_left),
                FIELD_TOP_RIGHT: list(block.shape.top_right),
                FIELD_COLOR: list(block.color),
            })
        return {FIELD_WIDTH: self.width, FIELD_HEIGHT: self.height, FIELD_BLOCKS: blocks}

    def copy(self) -> "Picture":
        # Blocks are immutable, so sharing them between copies is safe
        return Picture(self.width, self.height, dict(self.blocks), self.counter)

    def get_block(self, block_id: str, operation: Optional[Operation] = None) -> Block:
        try:
            return self.blocks[block_id]
        except KeyError:
            raise MissingBlockError(operation, f"No block with id {block_id}") from None

    # Operation application

    def apply(self, operation: Operation) -> None:
        """
        Apply one operation in place.

        The picture is left untouched when the operation fails.

        Args:
            operation: Operation to apply

        Raises:
            MissingBlockError: If a referenced block id does not exist
            InvalidCutError: If a cut does not lie strictly inside the block
            ShapeMismatchError: If swapped blocks differ in size
            UnsupportedOperationError: For merge
        """
        if isinstance(operation, Recolor):
            self._apply_recolor(operation)
        elif isinstance(operation, PointCut):
            self._apply_cut(operation, lambda shape: shape.point_cut(operation.point))
        elif isinstance(operation, VerticalCut):
            self._apply_cut(operation, lambda shape: shape.vertical_cut(operation.x))
        elif isinstance(operation, HorizontalCut):
            self._apply_cut(operation, lambda shape: shape.horizontal_cut(operation.y))
        elif isinstance(operation, Swap):
            self._apply_swap(operation)
        elif isinstance(operation, Merge):
            self._apply_merge(operation)
        else:
            raise TypeError(f"Unknown operation type: {type(operation).__name__}")

    def _apply_recolor(self, operation: Recolor) -> None:
        block = self.get_block(operation.block_id, operation)
        # A composite collapses into a plain leaf
        self.blocks[operation.block_id] = LeafBlock(block.shape, Color(*operation.color))

    def _apply_cut(self, operation: Operation, cut_shape: Callable[[Rect], List[Rect]]) -> None:
        block_id = operation.block_id
        block = self.get_block(block_id, operation)

        try:
            new_shapes = cut_shape(block.shape)
        except GeometryError as e:
            raise InvalidCutError(operation, str(e)) from e

        if isinstance(block, LeafBlock):
            new_blocks: List[Block] = [LeafBlock(shape, block.color) for shape in new_shapes]
        else:
            new_blocks = []
            for shape in new_shapes:
                children = []
                for child in block.children:
                    overlap = shape.intersect(child.shape)
                    if overlap is not None:
                        children.append(LeafBlock(overlap, child.color))
                new_blocks.append(CompositeBlock(shape, tuple(children)))

        del self.blocks[block_id]
        for index, new_block in enumerate(new_blocks):
            self.blocks[f"{block_id}{BLOCK_ID_SEPARATOR}{index}"] = new_block

    def _apply_swap(self, operation: Swap) -> None:
        first = self.get_block(operation.block_id1, operation)
        second = self.get_block(operation.block_id2, operation)

        if not first.shape.is_same_size(second.shape):
            raise ShapeMismatchError(
                operation,
                f"Blocks have different shapes: {first.shape} and {second.shape}",
            )

        self.blocks[operation.block_id1] = first.with_shape(second.shape)
        self.blocks[operation.block_id2] = second.with_shape(first.shape)

    def _apply_merge(self, operation: Merge) -> None:
        self.get_block(operation.block_id1, operation)
        self.get_block(operation.block_id2, operation)
        raise UnsupportedOperationError(f"Merge is not supported: {operation.serialize()}")

    # Cost model

    def cost(self, operation: Operation) -> int:
        """
        Cost of applying an operation to this picture.

        cost = round(base * canvas area / block area); merge uses the summed
        area of both operands and swap the area of its first operand.

        Raises:
            MissingBlockError: If a referenced block id does not exist
        """
        base = _BASE_COSTS.get(type(operation))
        if base is None:
            raise TypeError(f"Unknown operation type: {type(operation).__name__}")

        if isinstance(operation, Merge):
            area = (
                self.get_block(operation.block_id1, operation).shape.area
                + self.get_block(operation.block_id2, operation).shape.area
            )
        elif isinstance(operation, Swap):
            area = self.get_block(operation.block_id1, operation).shape.area
        else:
            area = self.get_block(operation.block_id, operation).shape.area

        return round_half_up(base * self.width * self.height / area)

    # Color lookup

    def color_at(self, point: Tuple[int, int]) -> Color:
        """
        Color of the picture at a canvas point.

        Raises:
            MalformedPictureError: If no block (or composite child) contains the point
        """
        for block in self.blocks.values():
            if not block.shape.contains(point):
                continue
            if isinstance(block, LeafBlock):
                return block.color
            return block.color_at(point)
        raise MalformedPictureError(f"Malformed picture: no block contains {tuple(point)}")

    def render(self, width: Optional[int] = None, height: Optional[int] = None) -> np.ndarray:
        """
        Rasterize the picture.

        Args:
            width: Number of columns to render (default: picture width)
            height: Number of rows to render (default: picture height)

        Returns:
            uint8 array of shape (height, width, 4) indexed [y, x] in canvas
            orientation (row 0 is the bottom of the canvas)

        Raises:
            MalformedPictureError: If any rendered pixel is covered by no block
        """
        width = self.width if width is None else width
        height = self.height if height is None else height

        pixels = np.zeros((height, width, 4), dtype=np.uint8)
        covered = np.zeros((height, width), dtype=bool)

        for block in self.blocks.values():
            if isinstance(block, LeafBlock):
                _paint(pixels, covered, block.shape, block.color)
                continue
            for child in block.children:
                region = child.shape.intersect(block.shape)
                if region is not None:
                    _paint(pixels, covered, region, child.color)

        if not covered.all():
            y, x = np.argwhere(~covered)[0]
            raise MalformedPictureError(f"Malformed picture: no block contains ({x}, {y})")

        return pixels

    def to_image(self) -> "Image.Image":
        """Render into an RGBA Pillow image (row 0 is the top of the canvas)."""
        return Image.fromarray(np.ascontiguousarray(np.flipud(self.render())))


def _paint(pixels: np.ndarray, covered: np.ndarray, shape: Rect, color: Color) -> None:
    height, width = covered.shape
    region = shape.intersect(Rect(0, 0, width, height))
    if region is None:
        return
    rows = slice(region.bottom, region.top)
    cols = slice(region.left, region.right)
    # The first block holding a pixel owns it, as in color_at
    fresh = ~covered[rows, cols]
    pixels[rows, cols][fresh] = color
    covered[rows, cols] = True
