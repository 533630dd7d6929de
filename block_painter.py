"""
Block Painter command line entry point.

Runs one brute-force search engine on one problem and prints every log that
improves on the best score found so far, one per line:

    <score>|<operation>|<operation>|...

Usage:
    python block_painter.py <problem_id> <algorithm> [options]
    python block_painter.py --list
    python block_painter.py <problem_id> --replay <solution file>
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from BP_Libs.CanvasLib.errors import PictureError
from BP_Libs.ProblemStoreLib.problem_store import load_problem, load_solution, save_solution
from BP_Libs.ProblemStoreLib.search_config import SearchConfig
from BP_Libs.SearchLib.engine_registry import get_default_registry
from BP_Libs.SearchLib.evaluator import SearchStats, evaluate_log
from BP_Libs.SearchLib.parallel_search import run_parallel
from BP_Libs.constants import (
    CANVAS_SIZE,
    DEFAULT_INITIAL_DIR,
    DEFAULT_RESOURCES_DIR,
    SAMPLE_METHOD_MEAN,
    SAMPLE_METHOD_MOST_FREQUENT,
)

logger = logging.getLogger("block_painter")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="block_painter",
        description="Brute-force search for block painting operation logs",
    )
    parser.add_argument("problem_id", nargs="?", type=int, help="Numeric problem identifier")
    parser.add_argument("algorithm", nargs="?", help="Search engine name (see --list)")
    parser.add_argument("--resources", default=DEFAULT_RESOURCES_DIR,
                        help="Directory holding <id>.png target images")
    parser.add_argument("--initial-dir", default=DEFAULT_INITIAL_DIR,
                        help="Directory holding optional <id>.initial.json starting canvases")
    parser.add_argument("--size", type=int, default=None,
                        help="Canvas side length used for the coordinate ranges (default: image size)")
    parser.add_argument("--step", type=int, default=None,
                        help="Coordinate step (default: the engine's own step)")
    parser.add_argument("--mean", action="store_true",
                        help="Paint regions with their mean color instead of the most frequent one")
    parser.add_argument("--threads", type=int, default=None, metavar="N",
                        help="Split the search across N worker threads")
    parser.add_argument("--render", default=None, metavar="PATH",
                        help="Save the best picture as a PNG")
    parser.add_argument("--output", default=None, metavar="PATH",
                        help="Save the best log to a file")
    parser.add_argument("--replay", default=None, metavar="PATH",
                        help="Score a saved log instead of searching")
    parser.add_argument("--list", action="store_true", help="List the available algorithms")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _print_engines() -> None:
    registry = get_default_registry()
    for name, meta in sorted(registry.get_all_metadata().items()):
        print(f"{name:<6} step={meta['step']:<3} regions={meta['regions']:<2} {meta['description']}")


def _replay(problem, replay_path: Path) -> int:
    _, log = load_solution(replay_path)
    try:
        scored = evaluate_log(log, problem.sampler, problem.initial)
    except PictureError as e:
        print(f"Error: cannot replay {replay_path}: {e}", file=sys.stderr)
        return 1
    print(scored.serialize())
    print(f"cost={scored.cost} similarity={scored.similarity}", file=sys.stderr)
    return 0


def _finish(config: SearchConfig, problem, best) -> None:
    if config.output_path:
        path = save_solution(Path(config.output_path), best)
        logger.info(f"Saved best log to {path}")

    if config.render_path:
        picture = problem.initial.copy()
        for operation in best.log:
            picture.apply(operation)
        picture.to_image().save(config.render_path, format="PNG")
        logger.info(f"Rendered best picture to {config.render_path}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.list:
        _print_engines()
        return 0

    if args.problem_id is None or (args.algorithm is None and args.replay is None):
        parser.print_usage(sys.stderr)
        print("Error: problem_id and algorithm are required", file=sys.stderr)
        return 2

    config = SearchConfig(
        problem_id=args.problem_id,
        algorithm=args.algorithm or "replay",
        resources_dir=args.resources,
        initial_dir=args.initial_dir,
        size=args.size if args.size is not None else CANVAS_SIZE,
        step=args.step,
        sample_method=SAMPLE_METHOD_MEAN if args.mean else SAMPLE_METHOD_MOST_FREQUENT,
        use_threading=args.threads is not None,
        max_workers=args.threads,
        render_path=args.render,
        output_path=args.output,
    )

    try:
        config.validate()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    registry = get_default_registry()
    if args.replay is None and not registry.has_engine(config.algorithm):
        print(f"Error: Unknown algorithm {config.algorithm}. "
              f"Available: {', '.join(registry.list_engines())}", file=sys.stderr)
        return 2

    try:
        problem = load_problem(config.problem_id, Path(config.resources_dir), Path(config.initial_dir))
    except (OSError, ValueError) as e:
        print(f"Error: cannot load problem {config.problem_id}: {e}", file=sys.stderr)
        return 1

    if args.size is None:
        config.size = min(problem.sampler.width, problem.sampler.height)

    try:
        config.validate_image_size(problem.sampler.width, problem.sampler.height)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.replay is not None:
        try:
            return _replay(problem, Path(args.replay))
        except (OSError, ValueError) as e:
            print(f"Error: cannot read {args.replay}: {e}", file=sys.stderr)
            return 1

    stats = SearchStats()
    best = None
    logger.info(f"Running {config.algorithm} on problem {config.problem_id}")

    if config.use_threading:
        improvements = run_parallel(
            config.algorithm,
            problem.sampler,
            problem.initial,
            registry=registry,
            size=config.size,
            step=config.step,
            method=config.sample_method,
            max_workers=config.max_workers,
            stats=stats,
        )
    else:
        improvements = registry.run(
            config.algorithm,
            problem.sampler,
            problem.initial,
            size=config.size,
            step=config.step,
            method=config.sample_method,
            stats=stats,
        )

    for best in improvements:
        print(best.serialize(), flush=True)

    logger.info(f"Evaluated {stats.evaluated} candidates, discarded {stats.discarded}")

    if best is None:
        logger.warning(f"{config.algorithm} produced no valid candidate")
        return 1

    _finish(config, problem, best)
    return 0


if __name__ == "__main__":
    sys.exit(main())
