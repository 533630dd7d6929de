"""
Brute-force search engines.

Each engine enumerates one family of partitions of a square canvas, at a
fixed step, and yields for every partition the operation log that carves it
out of the initial block and paints every region with the sampler's
representative color. Engines are lazy and restartable; the enumeration
order only affects the order in which improving scores are discovered.

Successive cut coordinates on the same axis always differ by at least one
step, so no region is ever empty.

Functions:
    xcut_logs: Four vertical cuts, five columns
    ycut_logs: Four horizontal cuts, five rows
    rect_logs: A point cut followed by a point cut of the top-right quadrant
    x3y2_logs: Three columns, each split once horizontally
    x3y3_logs: Three columns, each split twice horizontally
    strip_outer_values / grid_outer_values: Outermost coordinate ranges
"""

from typing import Callable, Iterable, Iterator, List, Optional, Sequence

from BP_Libs.CanvasLib.operations import (
    HorizontalCut,
    Operation,
    OperationLog,
    PointCut,
    Recolor,
    VerticalCut,
)
from BP_Libs.GeometryLib.rectangle import Point, Rect
from BP_Libs.SamplerLib.target_sampler import TargetSampler
from BP_Libs.constants import (
    BLOCK_ID_SEPARATOR,
    CANVAS_SIZE,
    DEFAULT_SAMPLE_METHOD,
    INITIAL_BLOCK_ID,
    RECT_STEP,
    X3Y2_STEP,
    X3Y3_STEP,
    XCUT_STEP,
    YCUT_STEP,
)

SearchEngine = Callable[..., Iterator[OperationLog]]


def block_id(*indices: int) -> str:
    """Id of the block reached from the initial block through child indices."""
    return BLOCK_ID_SEPARATOR.join([INITIAL_BLOCK_ID, *(str(index) for index in indices)])


def strip_outer_values(size: int, step: int) -> range:
    """First coordinate of a strip engine, leaving room for three more cuts."""
    return range(step, size - 3 * step, step)


def grid_outer_values(size: int, step: int) -> range:
    return range(step, size - step, step)


def _restrict(values: Iterable[int], outer: Optional[Sequence[int]]) -> Iterable[int]:
    if outer is None:
        return values
    allowed = set(outer)
    return [value for value in values if value in allowed]


def _strip_log(
    cut_type: Callable[[str, int], Operation],
    coords: Sequence[int],
    colors: Sequence,
) -> OperationLog:
    """Paint then cut the remaining strip, always continuing in the high child."""
    log: OperationLog = []
    current = INITIAL_BLOCK_ID
    for coord, color in zip(coords, colors):
        log.append(Recolor(current, color))
        log.append(cut_type(current, coord))
        current = f"{current}{BLOCK_ID_SEPARATOR}1"
    log.append(Recolor(current, colors[-1]))
    return log


def xcut_logs(
    sampler: TargetSampler,
    size: int = CANVAS_SIZE,
    step: int = XCUT_STEP,
    outer: Optional[Sequence[int]] = None,
    method: str = DEFAULT_SAMPLE_METHOD,
) -> Iterator[OperationLog]:
    """
    Enumerate four vertical cuts x1 < x2 < x3 < x4.

    Args:
        sampler: Target sampler used to color each column
        size: Canvas side length
        step: Coordinate step
        outer: Optional subset of x1 values to enumerate
        method: Representative color method

    Yields:
        Logs of nine operations producing five colored columns
    """
    def color(left: int, right: int):
        return sampler.representative_color(Rect(left, 0, right, size), method)

    for x1 in _restrict(strip_outer_values(size, step), outer):
        for x2 in range(x1 + step, size - 2 * step, step):
            for x3 in range(x2 + step, size - step, step):
                for x4 in range(x3 + step, size, step):
                    xs = [x1, x2, x3, x4]
                    bounds = [0, *xs, size]
                    colors = [color(low, high) for low, high in zip(bounds, bounds[1:])]
                    yield _strip_log(VerticalCut, xs, colors)


def ycut_logs(
    sampler: TargetSampler,
    size: int = CANVAS_SIZE,
    step: int = YCUT_STEP,
    outer: Optional[Sequence[int]] = None,
    method: str = DEFAULT_SAMPLE_METHOD,
) -> Iterator[OperationLog]:
    """Enumerate four horizontal cuts y1 < y2 < y3 < y4; five colored rows."""
    def color(bottom: int, top: int):
        return sampler.representative_color(Rect(0, bottom, size, top), method)

    for y1 in _restrict(strip_outer_values(size, step), outer):
        for y2 in range(y1 + step, size - 2 * step, step):
            for y3 in range(y2 + step, size - step, step):
                for y4 in range(y3 + step, size, step):
                    ys = [y1, y2, y3, y4]
                    bounds = [0, *ys, size]
                    colors = [color(low, high) for low, high in zip(bounds, bounds[1:])]
                    yield _strip_log(HorizontalCut, ys, colors)


def rect_logs(
    sampler: TargetSampler,
    size: int = CANVAS_SIZE,
    step: int = RECT_STEP,
    outer: Optional[Sequence[int]] = None,
    method: str = DEFAULT_SAMPLE_METHOD,
) -> Iterator[OperationLog]:
    """
    Enumerate an inner rectangle [l, r) x [b, t).

    The canvas is point-cut at (l, b) and its top-right quadrant is
    point-cut again at (r, t), giving seven regions.
    """
    def color(left: int, bottom: int, right: int, top: int):
        return sampler.representative_color(Rect(left, bottom, right, top), method)

    for left in _restrict(grid_outer_values(size, step), outer):
        for right in range(left + step, size, step):
            for bottom in range(step, size - step, step):
                for top in range(bottom + step, size, step):
                    yield [
                        Recolor(block_id(), color(0, 0, left, bottom)),
                        PointCut(block_id(), Point(left, bottom)),
                        Recolor(block_id(2), color(left, bottom, right, top)),
                        PointCut(block_id(2), Point(right, top)),
                        Recolor(block_id(1), color(left, 0, size, bottom)),
                        Recolor(block_id(2, 1), color(right, bottom, size, top)),
                        Recolor(block_id(2, 2), color(right, top, size, size)),
                        Recolor(block_id(2, 3), color(left, top, right, size)),
                        Recolor(block_id(3), color(0, bottom, left, size)),
                    ]


def x3y2_logs(
    sampler: TargetSampler,
    size: int = CANVAS_SIZE,
    step: int = X3Y2_STEP,
    outer: Optional[Sequence[int]] = None,
    method: str = DEFAULT_SAMPLE_METHOD,
) -> Iterator[OperationLog]:
    """
    Enumerate three columns x1 < x2, each split once at its own height.

    The three row cuts are independent of each other because they live in
    different columns.
    """
    def color(left: int, bottom: int, right: int, top: int):
        return sampler.representative_color(Rect(left, bottom, right, top), method)

    for x1 in _restrict(grid_outer_values(size, step), outer):
        for x2 in range(x1 + step, size, step):
            for y1 in range(step, size, step):
                for y2 in range(step, size, step):
                    for y3 in range(step, size, step):
                        yield [
                            Recolor(block_id(), color(0, 0, x1, y1)),
                            VerticalCut(block_id(), x1),
                            Recolor(block_id(1), color(x1, 0, x2, y2)),
                            VerticalCut(block_id(1), x2),
                            Recolor(block_id(1, 1), color(x2, 0, size, y3)),
                            HorizontalCut(block_id(0), y1),
                            Recolor(block_id(0, 1), color(0, y1, x1, size)),
                            HorizontalCut(block_id(1, 0), y2),
                            Recolor(block_id(1, 0, 1), color(x1, y2, x2, size)),
                            HorizontalCut(block_id(1, 1), y3),
                            Recolor(block_id(1, 1, 1), color(x2, y3, size, size)),
                        ]


def x3y3_logs(
    sampler: TargetSampler,
    size: int = CANVAS_SIZE,
    step: int = X3Y3_STEP,
    outer: Optional[Sequence[int]] = None,
    method: str = DEFAULT_SAMPLE_METHOD,
) -> Iterator[OperationLog]:
    """
    Enumerate three columns x1 < x2, each split into three rows.

    Column i is split at its own pair of heights (y1 < y2, y3 < y4,
    y5 < y6), the densest family with eight nested coordinates.
    """
    def color(left: int, bottom: int, right: int, top: int):
        return sampler.representative_color(Rect(left, bottom, right, top), method)

    for x1 in _restrict(grid_outer_values(size, step), outer):
        for x2 in range(x1 + step, size, step):
            for y1 in range(step, size - step, step):
                for y2 in range(y1 + step, size, step):
                    for y3 in range(step, size - step, step):
                        for y4 in range(y3 + step, size, step):
                            for y5 in range(step, size - step, step):
                                for y6 in range(y5 + step, size, step):
                                    yield _x3y3_log(color, size, x1, x2, (y1, y2, y3, y4, y5, y6))


def _x3y3_log(color, size: int, x1: int, x2: int, ys: Sequence[int]) -> List[Operation]:
    y1, y2, y3, y4, y5, y6 = ys
    return [
        Recolor(block_id(), color(0, 0, x1, y1)),
        VerticalCut(block_id(), x1),
        Recolor(block_id(1), color(x1, 0, x2, y3)),
        VerticalCut(block_id(1), x2),
        Recolor(block_id(1, 1), color(x2, 0, size, y5)),

        HorizontalCut(block_id(0), y1),
        Recolor(block_id(0, 1), color(0, y1, x1, y2)),
        HorizontalCut(block_id(0, 1), y2),
        Recolor(block_id(0, 1, 1), color(0, y2, x1, size)),

        HorizontalCut(block_id(1, 0), y3),
        Recolor(block_id(1, 0, 1), color(x1, y3, x2, y4)),
        HorizontalCut(block_id(1, 0, 1), y4),
        Recolor(block_id(1, 0, 1, 1), color(x1, y4, x2, size)),

        HorizontalCut(block_id(1, 1), y5),
        Recolor(block_id(1, 1, 1), color(x2, y5, size, y6)),
        HorizontalCut(block_id(1, 1, 1), y6),
        Recolor(block_id(1, 1, 1, 1), color(x2, y6, size, size)),
    ]
