"""
Picture editing operations and their textual form.

Every operation is an immutable dataclass with a ``serialize()`` method
producing the canonical text grammar:

- ``color [<id>] [<r>, <g>, <b>, <a>]``
- ``cut [<id>] [<x>, <y>]``
- ``cut [<id>] [X] [<x>]``
- ``cut [<id>] [Y] [<y>]``
- ``swap [<id1>] [<id2>]``
- ``merge [<id1>] [<id2>]``

Classes:
    Recolor, PointCut, VerticalCut, HorizontalCut, Swap, Merge

Functions:
    serialize_log: Join a log into a single line
    parse_operation: Parse one operation from its text form
    parse_log: Parse a pipe-delimited line, with an optional leading score
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from BP_Libs.CanvasLib.canvas_models import Color
from BP_Libs.GeometryLib.rectangle import Point
from BP_Libs.constants import LOG_SEPARATOR


@dataclass(frozen=True)
class Recolor:
    block_id: str
    color: Color

    def serialize(self) -> str:
        r, g, b, a = self.color
        return f"color [{self.block_id}] [{r}, {g}, {b}, {a}]"


@dataclass(frozen=True)
class PointCut:
    block_id: str
    point: Point

    def serialize(self) -> str:
        return f"cut [{self.block_id}] [{self.point[0]}, {self.point[1]}]"


@dataclass(frozen=True)
class VerticalCut:
    block_id: str
    x: int

    def serialize(self) -> str:
        return f"cut [{self.block_id}] [X] [{self.x}]"


@dataclass(frozen=True)
class HorizontalCut:
    block_id: str
    y: int

    def serialize(self) -> str:
        return f"cut [{self.block_id}] [Y] [{self.y}]"


@dataclass(frozen=True)
class Swap:
    block_id1: str
    block_id2: str

    def serialize(self) -> str:
        return f"swap [{self.block_id1}] [{self.block_id2}]"


@dataclass(frozen=True)
class Merge:
    block_id1: str
    block_id2: str

    def serialize(self) -> str:
        return f"merge [{self.block_id1}] [{self.block_id2}]"


Operation = Union[Recolor, PointCut, VerticalCut, HorizontalCut, Swap, Merge]
OperationLog = List[Operation]


def serialize_log(log: Sequence[Operation], score: Optional[int] = None) -> str:
    """
    Serialize a log as one pipe-delimited line.

    Args:
        log: Operations in application order
        score: Optional score written as the first field

    Returns:
        ``<score>|<op>|<op>...`` or ``<op>|<op>...`` without a score
    """
    parts = [op.serialize() for op in log]
    if score is not None:
        parts.insert(0, str(score))
    return LOG_SEPARATOR.join(parts)


_ID = r"\[\s*([^\[\]\s]+)\s*\]"
_INT = r"(-?\d+)"

_COLOR_RE = re.compile(
    rf"^color\s*{_ID}\s*\[\s*{_INT}\s*,\s*{_INT}\s*,\s*{_INT}\s*,\s*{_INT}\s*\]$"
)
_POINT_CUT_RE = re.compile(rf"^cut\s*{_ID}\s*\[\s*{_INT}\s*,\s*{_INT}\s*\]$")
_LINE_CUT_RE = re.compile(rf"^cut\s*{_ID}\s*\[\s*([XxYy])\s*\]\s*\[\s*{_INT}\s*\]$")
_PAIR_RE = re.compile(rf"^(swap|merge)\s*{_ID}\s*{_ID}$")


def parse_operation(text: str) -> Operation:
    """
    Parse one serialized operation.

    Args:
        text: Operation in the canonical grammar

    Returns:
        The matching operation instance

    Raises:
        ValueError: If the text does not match any operation
    """
    text = text.strip()

    match = _COLOR_RE.match(text)
    if match:
        block_id, *channels = match.groups()
        return Recolor(block_id, Color.from_sequence(channels))

    match = _POINT_CUT_RE.match(text)
    if match:
        block_id, x, y = match.groups()
        return PointCut(block_id, Point(int(x), int(y)))

    match = _LINE_CUT_RE.match(text)
    if match:
        block_id, axis, value = match.groups()
        if axis.upper() == "X":
            return VerticalCut(block_id, int(value))
        return HorizontalCut(block_id, int(value))

    match = _PAIR_RE.match(text)
    if match:
        kind, first, second = match.groups()
        if kind == "swap":
            return Swap(first, second)
        return Merge(first, second)

    raise ValueError(f"Unrecognized operation: {text!r}")


def parse_log(line: str) -> Tuple[Optional[int], OperationLog]:
    """
    Parse a pipe-delimited log line as printed by the search.

    A leading integer field is taken as the score.

    Returns:
        Tuple of (score or None, operations)
    """
    fields = [field.strip() for field in line.strip().split(LOG_SEPARATOR)]
    fields = [field for field in fields if field]

    score = None
    if fields and re.fullmatch(r"\d+", fields[0]):
        score = int(fields.pop(0))

    return score, [parse_operation(field) for field in fields]
