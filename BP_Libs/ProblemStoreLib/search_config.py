"""
Search run configuration.

Classes:
    SearchConfig: Everything needed to run one engine on one problem
"""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from BP_Libs.ProblemStoreLib.problem_store import get_initial_picture_path, get_target_image_path
from BP_Libs.constants import (
    CANVAS_SIZE,
    DEFAULT_INITIAL_DIR,
    DEFAULT_RESOURCES_DIR,
    DEFAULT_SAMPLE_METHOD,
    SAMPLE_METHOD_MEAN,
    SAMPLE_METHOD_MOST_FREQUENT,
)


@dataclass
class SearchConfig:
    """Configuration for one search run.

    Attributes:
        problem_id: Numeric problem identifier
        algorithm: Registered search engine name (e.g., 'xcut')
        resources_dir: Directory holding the target images
        initial_dir: Directory holding optional starting canvas descriptions
        size: Canvas side length for the coordinate ranges
        step: Coordinate step override (None = engine default)
        sample_method: 'most_frequent' or 'mean'
        use_threading: Split the search across worker threads
        max_workers: Maximum number of threads (None = executor default)
        render_path: Optional PNG path for the best picture
        output_path: Optional path the best log is saved to
    """
    problem_id: int = 1
    algorithm: str = "xcut"
    resources_dir: str = DEFAULT_RESOURCES_DIR
    initial_dir: str = DEFAULT_INITIAL_DIR
    size: int = CANVAS_SIZE
    step: Optional[int] = None
    sample_method: str = DEFAULT_SAMPLE_METHOD
    use_threading: bool = False
    max_workers: Optional[int] = None
    render_path: Optional[str] = None
    output_path: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchConfig":
        """Create from dictionary, ignoring unknown keys."""
        normalized = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**normalized)

    def validate(self) -> None:
        """
        Check the configuration values.

        Raises:
            ValueError: If any value is out of range
        """
        if int(self.problem_id) < 0:
            raise ValueError(f"problem_id must be >= 0, got {self.problem_id}")
        if not str(self.algorithm).strip():
            raise ValueError("algorithm is required")
        if self.size <= 0:
            raise ValueError(f"size must be positive, got {self.size}")
        if self.step is not None and self.step <= 0:
            raise ValueError(f"step must be positive, got {self.step}")
        if self.sample_method not in (SAMPLE_METHOD_MOST_FREQUENT, SAMPLE_METHOD_MEAN):
            raise ValueError(f"Unsupported sample method: {self.sample_method}")
        if self.max_workers is not None and self.max_workers <= 0:
            raise ValueError(f"max_workers must be positive, got {self.max_workers}")

    def validate_image_size(self, width: int, height: int) -> None:
        """
        Check that the coordinate ranges fit inside a target image.

        Raises:
            ValueError: If size exceeds the image's smaller side
        """
        if self.size > min(width, height):
            raise ValueError(
                f"size {self.size} does not fit the {width}x{height} target image"
            )

    def get_target_image_path(self) -> Path:
        return get_target_image_path(Path(self.resources_dir), self.problem_id)

    def get_initial_picture_path(self) -> Path:
        return get_initial_picture_path(Path(self.initial_dir), self.problem_id)
