"""
Parallel execution of a search engine.

The outermost enumerated coordinate of every engine splits the search into
independent parts. Each part runs with its own watermark; the improvement
lists are then merged in outer-coordinate order through one global
watermark. A candidate that beats the global best also beats the best of
its own part, so the merged list is exactly what a sequential run reports.

Functions:
    run_parallel: Run an engine across worker threads
"""

import concurrent.futures
import logging
from typing import Dict, List, Optional

from BP_Libs.CanvasLib.picture import Picture
from BP_Libs.SamplerLib.target_sampler import TargetSampler
from BP_Libs.SearchLib.engine_registry import SearchEngineRegistry, get_default_registry
from BP_Libs.SearchLib.evaluator import ScoredLog, SearchStats, Watermark, search
from BP_Libs.constants import CANVAS_SIZE, DEFAULT_SAMPLE_METHOD

logger = logging.getLogger(__name__)


def run_parallel(
    name: str,
    sampler: TargetSampler,
    initial: Optional[Picture] = None,
    registry: Optional[SearchEngineRegistry] = None,
    size: int = CANVAS_SIZE,
    step: Optional[int] = None,
    method: str = DEFAULT_SAMPLE_METHOD,
    use_threading: bool = True,
    max_workers: Optional[int] = None,
    stats: Optional[SearchStats] = None,
) -> List[ScoredLog]:
    """
    Run a search engine split on its outermost coordinate.

    Args:
        name: Registered algorithm name
        sampler: Target sampler
        initial: Starting picture (default: one white block of the image size)
        registry: Engine registry (default: the global registry)
        size: Canvas side length used for the coordinate ranges
        step: Coordinate step (default: the engine's registered step)
        method: Representative color method
        use_threading: Run parts on a ThreadPoolExecutor (default: True)
        max_workers: Maximum number of threads (default: None = executor default)
        stats: Optional counters summed over all parts

    Returns:
        Improving scored logs in the order a sequential run reports them

    Raises:
        KeyError: If the algorithm name is not registered
        RuntimeError: If a part fails with an unexpected error
    """
    registry = registry or get_default_registry()
    if initial is None:
        initial = Picture.initial(sampler.width, sampler.height)

    outer_values = list(registry.outer_values(name, size, step))
    part_stats = {value: SearchStats() for value in outer_values}

    def run_part(value: int) -> List[ScoredLog]:
        logs = registry.generate(name, sampler, size=size, step=step, outer=[value], method=method)
        return list(search(logs, sampler, initial, part_stats[value]))

    part_results: Dict[int, List[ScoredLog]] = {}

    if use_threading and len(outer_values) > 1:
        with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures: Dict[concurrent.futures.Future, int] = {
                executor.submit(run_part, value): value for value in outer_values
            }

            for future in concurrent.futures.as_completed(futures):
                value = futures[future]
                try:
                    part_results[value] = future.result()
                except Exception as e:
                    # Re-raise with part context
                    raise RuntimeError(f"Error searching {name} at outer coordinate {value}: {e}") from e
    else:
        for value in outer_values:
            try:
                part_results[value] = run_part(value)
            except Exception as e:
                raise RuntimeError(f"Error searching {name} at outer coordinate {value}: {e}") from e

    watermark = Watermark()
    merged: List[ScoredLog] = []
    for value in outer_values:
        for scored in part_results[value]:
            if watermark.offer(scored):
                merged.append(scored)

    if stats is not None:
        for value in outer_values:
            stats.evaluated += part_stats[value].evaluated
            stats.discarded += part_stats[value].discarded
        stats.improvements += len(merged)

    logger.info(f"Parallel search {name}: {len(outer_values)} parts, {len(merged)} improvements")
    return merged
