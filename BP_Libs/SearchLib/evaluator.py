"""
Operation log evaluation and best-score tracking.

A log is scored by replaying it on a private copy of the initial picture,
summing the cost of every operation (computed before the operation is
applied) and adding the sampler's similarity for the resulting picture.

Classes:
    ScoredLog: A log together with its score breakdown
    Watermark: Running best score over a sequence of candidates
    SearchStats: Counters filled in while a search runs

Functions:
    evaluate_log: Score a single log
    search: Score a sequence of logs, yielding every new best
    best_log: Run a search to exhaustion and return the final best
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from BP_Libs.CanvasLib.errors import PictureError
from BP_Libs.CanvasLib.operations import Operation, serialize_log
from BP_Libs.CanvasLib.picture import Picture
from BP_Libs.SamplerLib.target_sampler import TargetSampler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredLog:
    """Scored operation log.

    Attributes:
        score: cost + similarity
        log: Operations in application order
        cost: Sum of operation costs
        similarity: Scaled distance between the final picture and the target
    """
    score: int
    log: Tuple[Operation, ...]
    cost: int = 0
    similarity: int = 0

    def serialize(self) -> str:
        return serialize_log(self.log, self.score)


class Watermark:
    """Lowest score seen so far; only strictly lower scores replace it."""

    def __init__(self) -> None:
        self.best: Optional[ScoredLog] = None

    @property
    def score(self) -> Optional[int]:
        return None if self.best is None else self.best.score

    def offer(self, candidate: ScoredLog) -> bool:
        if self.best is None or candidate.score < self.best.score:
            self.best = candidate
            return True
        return False


@dataclass
class SearchStats:
    evaluated: int = 0
    discarded: int = 0
    improvements: int = 0


def evaluate_log(
    log: Sequence[Operation],
    sampler: TargetSampler,
    initial: Picture,
) -> ScoredLog:
    """
    Replay a log on a copy of the initial picture and score it.

    Args:
        log: Operations to replay
        sampler: Target sampler for the similarity term
        initial: Starting picture (never modified)

    Returns:
        ScoredLog with the cost and similarity breakdown

    Raises:
        PictureError: If any operation fails or the final picture is malformed
    """
    picture = initial.copy()
    cost = 0
    for operation in log:
        cost += picture.cost(operation)
        picture.apply(operation)
    similarity = sampler.similarity(picture)
    return ScoredLog(cost + similarity, tuple(log), cost, similarity)


def search(
    logs: Iterable[Sequence[Operation]],
    sampler: TargetSampler,
    initial: Optional[Picture] = None,
    stats: Optional[SearchStats] = None,
) -> Iterator[ScoredLog]:
    """
    Evaluate candidate logs in order and yield every one that sets a new best.

    Candidates whose replay fails are skipped; the search itself continues.

    Args:
        logs: Candidate logs, usually produced lazily by a search engine
        sampler: Target sampler
        initial: Starting picture (default: one white block of the image size)
        stats: Optional counters updated as the search proceeds

    Yields:
        ScoredLog for each strict improvement, in generation order
    """
    if initial is None:
        initial = Picture.initial(sampler.width, sampler.height)
    if stats is None:
        stats = SearchStats()

    watermark = Watermark()
    for log in logs:
        stats.evaluated += 1
        try:
            scored = evaluate_log(log, sampler, initial)
        except PictureError as e:
            stats.discarded += 1
            logger.debug(f"Discarded candidate: {e}")
            continue

        if watermark.offer(scored):
            stats.improvements += 1
            logger.debug(f"New best score {scored.score} (cost {scored.cost}, similarity {scored.similarity})")
            yield scored


def best_log(
    logs: Iterable[Sequence[Operation]],
    sampler: TargetSampler,
    initial: Optional[Picture] = None,
) -> Optional[ScoredLog]:
    best = None
    for best in search(logs, sampler, initial):
        pass
    return best
