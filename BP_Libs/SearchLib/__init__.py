"""
SearchLib - Brute-force search

This module provides the search engines that enumerate candidate
operation logs, the evaluator that scores them against the target, the
engine registry used for dispatch by algorithm name, and the parallel
runner.
"""

from BP_Libs.SearchLib.search_engines import (
    block_id,
    grid_outer_values,
    rect_logs,
    strip_outer_values,
    x3y2_logs,
    x3y3_logs,
    xcut_logs,
    ycut_logs,
)
from BP_Libs.SearchLib.evaluator import (
    ScoredLog,
    SearchStats,
    Watermark,
    best_log,
    evaluate_log,
    search,
)
from BP_Libs.SearchLib.engine_registry import (
    SearchEngineRegistry,
    get_default_registry,
    register_default_engines,
)
from BP_Libs.SearchLib.parallel_search import run_parallel

__all__ = [
    "block_id",
    "grid_outer_values",
    "rect_logs",
    "strip_outer_values",
    "x3y2_logs",
    "x3y3_logs",
    "xcut_logs",
    "ycut_logs",
    "ScoredLog",
    "SearchStats",
    "Watermark",
    "best_log",
    "evaluate_log",
    "search",
    "SearchEngineRegistry",
    "get_default_registry",
    "register_default_engines",
    "run_parallel",
]
