"""
ProblemStoreLib - Problem loading and solution storage

This module handles the file side of a search run: loading the target
image and optional starting canvas of a problem, run configuration, and
persisting the best log found.
"""

from BP_Libs.ProblemStoreLib.problem_store import (
    Problem,
    get_initial_picture_path,
    get_target_image_path,
    load_initial_picture,
    load_problem,
    load_solution,
    save_initial_picture,
    save_solution,
)
from BP_Libs.ProblemStoreLib.search_config import SearchConfig

__all__ = [
    "Problem",
    "get_initial_picture_path",
    "get_target_image_path",
    "load_initial_picture",
    "load_problem",
    "load_solution",
    "save_initial_picture",
    "save_solution",
    "SearchConfig",
]
