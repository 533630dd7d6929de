"""
Problem loading and solution storage for Block Painter.

A problem is identified by a number. Its target image lives at
``<resources_dir>/<id>.png``; an optional starting canvas lives at
``<initial_dir>/<id>.initial.json`` in the format::

    {"width": 400, "height": 400,
     "blocks": [{"blockId": "0", "bottomLeft": [0, 0], "topRight": [20, 20],
                 "color": [0, 74, 173, 255]}]}

Classes:
    Problem: Target sampler plus the picture every candidate starts from

Functions:
    get_target_image_path: Path of a problem's target image
    get_initial_picture_path: Path of a problem's starting canvas description
    load_initial_picture: Load a starting canvas description
    save_initial_picture: Save a picture as a starting canvas description
    load_problem: Load the target image and starting picture of a problem
    save_solution: Save a scored log to disk
    load_solution: Load a saved log back
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from BP_Libs.CanvasLib.operations import OperationLog, parse_log
from BP_Libs.CanvasLib.picture import Picture
from BP_Libs.SamplerLib.image_import import load_target_sampler
from BP_Libs.SamplerLib.target_sampler import TargetSampler
from BP_Libs.constants import INITIAL_PICTURE_SUFFIX, TARGET_IMAGE_SUFFIX

logger = logging.getLogger(__name__)


@dataclass
class Problem:
    problem_id: int
    sampler: TargetSampler
    initial: Picture
    image_path: Optional[Path] = None


def get_target_image_path(resources_dir: Path, problem_id: int) -> Path:
    return Path(resources_dir) / f"{problem_id}{TARGET_IMAGE_SUFFIX}"


def get_initial_picture_path(initial_dir: Path, problem_id: int) -> Path:
    return Path(initial_dir) / f"{problem_id}{INITIAL_PICTURE_SUFFIX}"


def load_initial_picture(picture_path: Path) -> Picture:
    """
    Load a starting canvas description.

    Args:
        picture_path: Path to the JSON description

    Returns:
        Picture made of the described leaf blocks

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON or not a valid description
    """
    picture_path = Path(picture_path)
    try:
        payload = json.loads(picture_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {picture_path}: {e}") from e

    if not isinstance(payload, dict):
        raise ValueError(f"Picture description must be a JSON object: {picture_path}")

    return Picture.from_data(payload)


def save_initial_picture(picture_path: Path, picture: Picture) -> None:
    Path(picture_path).write_text(json.dumps(picture.to_data(), indent=2), encoding="utf-8")


def load_problem(
    problem_id: int,
    resources_dir: Path,
    initial_dir: Optional[Path] = None,
) -> Problem:
    """
    Load a problem's target image and starting picture.

    When no starting canvas description exists the picture is a single
    white block covering the whole image.

    Args:
        problem_id: Numeric problem identifier
        resources_dir: Directory holding ``<id>.png``
        initial_dir: Directory holding ``<id>.initial.json`` (default: resources_dir)

    Returns:
        The loaded Problem

    Raises:
        FileNotFoundError: If the target image does not exist
        ValueError: If the image or the starting canvas description is invalid
    """
    image_path = get_target_image_path(resources_dir, problem_id)
    sampler = load_target_sampler(image_path)

    initial_path = get_initial_picture_path(initial_dir or resources_dir, problem_id)
    if initial_path.exists():
        initial = load_initial_picture(initial_path)
        logger.info(f"Loaded starting canvas {initial_path.name} with {len(initial.blocks)} blocks")
    else:
        initial = Picture.initial(sampler.width, sampler.height)

    return Problem(problem_id, sampler, initial, image_path)


def save_solution(solution_path: Path, scored) -> Path:
    """
    Save a scored log: the score line first, then one operation per line.

    Args:
        solution_path: Destination file; parent directories are created
        scored: ScoredLog to save

    Returns:
        The path written
    """
    solution_path = Path(solution_path)
    solution_path.parent.mkdir(parents=True, exist_ok=True)

    lines = [f"# {scored.serialize()}"]
    lines.extend(operation.serialize() for operation in scored.log)
    solution_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return solution_path


def load_solution(solution_path: Path) -> Tuple[Optional[int], OperationLog]:
    """
    Load a log saved by save_solution or a single pipe-delimited result line.

    Returns:
        Tuple of (score if recorded, operations)

    Raises:
        ValueError: If an operation line cannot be parsed
    """
    text = Path(solution_path).read_text(encoding="utf-8")
    score = None
    operations: OperationLog = []

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        if line.startswith("#"):
            score, _ = parse_log(line.lstrip("#"))
            continue
        line_score, line_operations = parse_log(line)
        if line_score is not None:
            score = line_score
        operations.extend(line_operations)

    return score, operations
