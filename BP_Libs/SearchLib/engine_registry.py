"""
Search Engine Registry.

This module provides a centralized registry for search engines. It enables
registration, lookup by algorithm name, and execution of the brute-force
enumerators.

Classes:
    SearchEngineRegistry: Registry for search engines

Functions:
    get_default_registry: Get the global default registry (singleton)
    register_default_engines: Register all built-in search engines
"""

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional

from BP_Libs.CanvasLib.picture import Picture
from BP_Libs.SamplerLib.target_sampler import TargetSampler
from BP_Libs.SearchLib.evaluator import ScoredLog, SearchStats, search
from BP_Libs.SearchLib.search_engines import SearchEngine
from BP_Libs.constants import CANVAS_SIZE, DEFAULT_SAMPLE_METHOD

logger = logging.getLogger(__name__)

# (size, step) -> values of the outermost enumerated coordinate
OuterValues = Callable[[int, int], range]


class SearchEngineRegistry:
    """
    Registry for search engines.

    Example:
        >>> registry = SearchEngineRegistry()
        >>> registry.register("xcut", xcut_logs, strip_outer_values, step=10)
        >>> for scored in registry.run("xcut", sampler):
        ...     print(scored.serialize())
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._engines: Dict[str, SearchEngine] = {}
        self._outer_values: Dict[str, OuterValues] = {}
        self._metadata: Dict[str, Dict[str, Any]] = {}

    def register(
        self,
        name: str,
        engine: SearchEngine,
        outer_values: OuterValues,
        step: int,
        description: str = "",
        regions: int = 0,
    ) -> None:
        """
        Register a search engine.

        Args:
            name: Algorithm name used to select the engine (e.g., "xcut")
            engine: Callable (sampler, size=, step=, outer=, method=) -> logs
            outer_values: Callable (size, step) -> outermost coordinate values
            step: Default coordinate step
            description: Human-readable description of the partition family
            regions: Number of regions every generated partition has

        Raises:
            ValueError: If name is empty, engine is not callable or step is not positive
            RuntimeError: If name is already registered
        """
        name = str(name).strip()

        if not name:
            raise ValueError("name cannot be empty")

        if not callable(engine):
            raise ValueError(f"engine must be callable, got {type(engine)}")

        if int(step) <= 0:
            raise ValueError(f"step must be positive, got {step}")

        if name in self._engines:
            raise RuntimeError(
                f"Search engine '{name}' is already registered"
            )

        self._engines[name] = engine
        self._outer_values[name] = outer_values
        self._metadata[name] = {
            "description": str(description),
            "step": int(step),
            "regions": int(regions),
        }

        logger.debug(f"Registered search engine: {name}")

    def get_engine(self, name: str) -> SearchEngine:
        """
        Get the engine registered under an algorithm name.

        Raises:
            KeyError: If name is not registered
        """
        name = str(name).strip()

        if name not in self._engines:
            available = ", ".join(self.list_engines())
            raise KeyError(
                f"Unknown algorithm '{name}'. "
                f"Available algorithms: {available}"
            )

        return self._engines[name]

    def has_engine(self, name: str) -> bool:
        return str(name).strip() in self._engines

    def outer_values(self, name: str, size: int = CANVAS_SIZE, step: Optional[int] = None) -> range:
        self.get_engine(name)
        name = str(name).strip()
        if step is None:
            step = self._metadata[name]["step"]
        return self._outer_values[name](size, step)

    def generate(
        self,
        name: str,
        sampler: TargetSampler,
        size: int = CANVAS_SIZE,
        step: Optional[int] = None,
        outer: Optional[List[int]] = None,
        method: str = DEFAULT_SAMPLE_METHOD,
    ) -> Iterator:
        """Candidate logs of an engine with its registered default step."""
        engine = self.get_engine(name)
        if step is None:
            step = self._metadata[str(name).strip()]["step"]
        return engine(sampler, size=size, step=step, outer=outer, method=method)

    def run(
        self,
        name: str,
        sampler: TargetSampler,
        initial: Optional[Picture] = None,
        size: int = CANVAS_SIZE,
        step: Optional[int] = None,
        method: str = DEFAULT_SAMPLE_METHOD,
        stats: Optional[SearchStats] = None,
    ) -> Iterator[ScoredLog]:
        """
        Run an engine and yield every improving scored log.

        Raises:
            KeyError: If name is not registered
        """
        logs = self.generate(name, sampler, size=size, step=step, method=method)
        return search(logs, sampler, initial, stats)

    def list_engines(self) -> List[str]:
        return sorted(self._engines.keys())

    def get_all_metadata(self) -> Dict[str, Dict[str, Any]]:
        return {
            name: dict(meta)
            for name, meta in self._metadata.items()
        }


# Global singleton registry
_default_registry: Optional[SearchEngineRegistry] = None


def get_default_registry() -> SearchEngineRegistry:
    """
    Get the global default registry (singleton).

    Creates the registry on first call and registers default engines.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = SearchEngineRegistry()
        register_default_engines(_default_registry)

    return _default_registry


def register_default_engines(registry: SearchEngineRegistry) -> None:
    """
    Register all built-in search engines.

    This function registers:
    - xcut: four vertical cuts
    - ycut: four horizontal cuts
    - rect: nested point cuts around an inner rectangle
    - x3y2: three columns of two rows
    - x3y3: three columns of three rows

    Args:
        registry: The registry to register engines with
    """
    from BP_Libs.SearchLib.search_engines import (
        grid_outer_values,
        rect_logs,
        strip_outer_values,
        x3y2_logs,
        x3y3_logs,
        xcut_logs,
        ycut_logs,
    )
    from BP_Libs.constants import (
        ENGINE_RECT,
        ENGINE_X3Y2,
        ENGINE_X3Y3,
        ENGINE_XCUT,
        ENGINE_YCUT,
        RECT_STEP,
        X3Y2_STEP,
        X3Y3_STEP,
        XCUT_STEP,
        YCUT_STEP,
    )

    registry.register(
        name=ENGINE_XCUT,
        engine=xcut_logs,
        outer_values=strip_outer_values,
        step=XCUT_STEP,
        description="Four sequential vertical cuts (five columns)",
        regions=5,
    )

    registry.register(
        name=ENGINE_YCUT,
        engine=ycut_logs,
        outer_values=strip_outer_values,
        step=YCUT_STEP,
        description="Four sequential horizontal cuts (five rows)",
        regions=5,
    )

    registry.register(
        name=ENGINE_RECT,
        engine=rect_logs,
        outer_values=grid_outer_values,
        step=RECT_STEP,
        description="Point cut, then a point cut of the top-right quadrant",
        regions=7,
    )

    registry.register(
        name=ENGINE_X3Y2,
        engine=x3y2_logs,
        outer_values=grid_outer_values,
        step=X3Y2_STEP,
        description="Three columns, each split into two rows",
        regions=6,
    )

    registry.register(
        name=ENGINE_X3Y3,
        engine=x3y3_logs,
        outer_values=grid_outer_values,
        step=X3Y3_STEP,
        description="Three columns, each split into three rows",
        regions=9,
    )

    logger.info("Registered default search engines")
