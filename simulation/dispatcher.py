"""Parallel evaluation of many candidates against one opponent panel.

Candidates are split into contiguous slices, one per worker. Workers push
one EvaluationResult per candidate into a shared queue and finish with a
slice-done marker; the caller drains the queue until every slice has
reported done. A shared counter tracks matches completed; whenever it
reaches a multiple of the progress interval the worker that got there also
queues the count, and the caller reports it.
"""

from __future__ import annotations

import logging
import math
import multiprocessing
import queue
import time
from concurrent.futures import Future, ProcessPoolExecutor, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Sequence, TypeVar

from simulation.evaluator import EvaluationResult, evaluate_candidate

logger = logging.getLogger(__name__)

DEFAULT_NUM_WORKERS = 16
DEFAULT_PROGRESS_INTERVAL = 10_000_000

_SLICE_DONE = None
_POLL_SECONDS = 1.0

T = TypeVar("T")


def partition(items: Sequence[T], num_slices: int) -> list[list[T]]:
    """Split items into num_slices contiguous, near-equal slices.

    Every slice except possibly the last ones has ceil(len / num_slices)
    items; trailing slices may be empty.
    """
    if num_slices < 1:
        raise ValueError(f"num_slices must be positive, got {num_slices}")
    size = math.ceil(len(items) / num_slices)
    return [list(items[i * size:(i + 1) * size]) for i in range(num_slices)]


class ProgressCounter:
    """Comparisons completed across all workers.

    Backed by a shared-memory integer so increments from worker threads and
    worker processes are never lost. The value is advisory only.
    """

    def __init__(self, ctx=None):
        ctx = ctx or multiprocessing.get_context()
        self._value = ctx.Value("q", 0)

    def add(self, n: int = 1) -> int:
        """Add n and return the new total."""
        with self._value.get_lock():
            self._value.value += n
            return self._value.value

    @property
    def value(self) -> int:
        with self._value.get_lock():
            return self._value.value


@dataclass
class BatchProgress:
    """Progress information for a dispatch run."""

    completed: int
    total: int
    elapsed_seconds: float
    results_received: int

    @property
    def completion_rate(self) -> float:
        return self.completed / self.total if self.total > 0 else 0.0

    @property
    def comparisons_per_second(self) -> float:
        return self.completed / self.elapsed_seconds if self.elapsed_seconds > 0 else 0.0


@dataclass
class DispatchResult:
    """Everything collected from a dispatch run.

    Attributes:
        results: One result per candidate, in arrival order.
        total_comparisons: Candidates times opponents.
        completed_comparisons: Valid matches actually played.
        duration_seconds: Wall-clock time of the run.
    """

    results: list[EvaluationResult] = field(default_factory=list)
    total_comparisons: int = 0
    completed_comparisons: int = 0
    duration_seconds: float = 0.0


def _evaluate_slice_with(
    batch: list[str],
    opponents: Sequence[str],
    sink,
    counter: ProgressCounter,
    progress_interval: int,
) -> int:
    def count_match(opponent: str, scores: tuple[int, int]) -> None:
        completed = counter.add()
        if completed % progress_interval == 0:
            sink.put(completed)

    try:
        for candidate in batch:
            sink.put(evaluate_candidate(candidate, opponents, on_match_done=count_match))
        return len(batch)
    finally:
        sink.put(_SLICE_DONE)


# Per-process state, set once by the pool initializer.
_worker_opponents: tuple[str, ...] = ()
_worker_sink = None
_worker_counter: ProgressCounter | None = None
_worker_interval = DEFAULT_PROGRESS_INTERVAL


def _init_worker(
    opponents: tuple[str, ...],
    sink,
    counter: ProgressCounter,
    progress_interval: int,
) -> None:
    global _worker_opponents, _worker_sink, _worker_counter, _worker_interval
    _worker_opponents = opponents
    _worker_sink = sink
    _worker_counter = counter
    _worker_interval = progress_interval


def _evaluate_slice(batch: list[str]) -> int:
    """Evaluate one slice in a worker process.

    This is a standalone function for pickling compatibility.
    """
    return _evaluate_slice_with(
        batch, _worker_opponents, _worker_sink, _worker_counter, _worker_interval
    )


def log_progress(progress: BatchProgress) -> None:
    """Default progress reporter."""
    speed = progress.comparisons_per_second / 1000
    logger.info(
        f"Progress: {progress.completed} / {progress.total} matches "
        f"({progress.completion_rate * 100:.2f}%), speed: {speed:.1f}k matches/s"
    )


class ParallelEvaluator:
    """Evaluate candidates against a panel across a fixed pool of workers.

    Uses ProcessPoolExecutor by default so evaluation runs on all cores;
    set use_processes=False to run the workers as threads instead.
    """

    def __init__(
        self,
        num_workers: int = DEFAULT_NUM_WORKERS,
        use_processes: bool = True,
        progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
    ):
        """Initialize the evaluator.

        Args:
            num_workers: Number of candidate slices (and at most that many
                workers). Independent of input size.
            use_processes: Run workers as processes rather than threads.
            progress_interval: Report progress each time this many more
                comparisons have completed.
        """
        if num_workers < 1:
            raise ValueError(f"num_workers must be positive, got {num_workers}")
        if progress_interval < 1:
            raise ValueError(f"progress_interval must be positive, got {progress_interval}")
        self.num_workers = num_workers
        self.use_processes = use_processes
        self.progress_interval = progress_interval

    def run(
        self,
        candidates: Sequence[str],
        opponents: Sequence[str],
        callback: Callable[[BatchProgress], None] | None = None,
    ) -> DispatchResult:
        """Evaluate every candidate against every opponent.

        Args:
            candidates: Validated candidate engine codes.
            opponents: Validated opponent panel.
            callback: Called with a BatchProgress each time the completed
                comparison count crosses a multiple of progress_interval.
                Defaults to logging the progress line.

        Returns:
            DispatchResult with one EvaluationResult per candidate.
        """
        opponents = tuple(opponents)
        total = len(candidates) * len(opponents)
        start_time = time.perf_counter()

        slices = [s for s in partition(candidates, self.num_workers) if s]
        if not slices:
            return DispatchResult(total_comparisons=total)

        logger.debug(
            f"Dispatching {len(candidates)} candidates x {len(opponents)} opponents "
            f"over {len(slices)} {'processes' if self.use_processes else 'threads'}"
        )

        ctx = multiprocessing.get_context()
        counter = ProgressCounter(ctx)
        results: list[EvaluationResult] = []

        if self.use_processes:
            sink = ctx.Queue()
            executor = ProcessPoolExecutor(
                max_workers=len(slices),
                mp_context=ctx,
                initializer=_init_worker,
                initargs=(opponents, sink, counter, self.progress_interval),
            )
            with executor:
                futures = [executor.submit(_evaluate_slice, batch) for batch in slices]
                self._drain(sink, futures, total, start_time, callback, results)
        else:
            sink = queue.Queue()
            with ThreadPoolExecutor(max_workers=len(slices)) as executor:
                futures = [
                    executor.submit(
                        _evaluate_slice_with, batch, opponents, sink, counter, self.progress_interval
                    )
                    for batch in slices
                ]
                self._drain(sink, futures, total, start_time, callback, results)

        return DispatchResult(
            results=results,
            total_comparisons=total,
            completed_comparisons=counter.value,
            duration_seconds=time.perf_counter() - start_time,
        )

    def _drain(
        self,
        sink,
        futures: list[Future],
        total: int,
        start_time: float,
        callback: Callable[[BatchProgress], None] | None,
        results: list[EvaluationResult],
    ) -> None:
        report = callback or log_progress
        pending = len(futures)
        last_reported = 0

        while pending:
            try:
                item = sink.get(timeout=_POLL_SECONDS)
            except queue.Empty:
                # A worker that died outright never sends its done marker.
                _raise_first_failure(futures)
                continue

            if item is _SLICE_DONE:
                pending -= 1
                continue

            if isinstance(item, int):
                # Ticks from different workers can arrive out of order.
                if item > last_reported:
                    last_reported = item
                    report(
                        BatchProgress(
                            completed=item,
                            total=total,
                            elapsed_seconds=time.perf_counter() - start_time,
                            results_received=len(results),
                        )
                    )
                continue

            results.append(item)

        for future in futures:
            future.result()


def _raise_first_failure(futures: list[Future]) -> None:
    for future in futures:
        if future.done() and future.exception() is not None:
            raise future.exception()
