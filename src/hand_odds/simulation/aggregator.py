"""
Parallel simulation runs.

The requested trials are split evenly across a fixed number of logical
workers, and each worker's share is cut into chunks so progress can be
reported while the run is going. Every chunk runs in the pool with its own
seeded :class:`TrialEngine` and returns a private :class:`Tally`. Only the
calling thread merges tallies, one completed chunk at a time, so no lock is
ever taken on the per-trial path.
"""
import logging
import random
import time
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Callable, List, NamedTuple, Optional

from hand_odds.config import SimulationConfig
from hand_odds.evaluation.categories import Category, expected_probability
from hand_odds.simulation.tally import Tally
from hand_odds.simulation.trial import TrialEngine

logger = logging.getLogger(__name__)

SEED_BITS = 64


class SimulationError(RuntimeError):
    """A simulation run that cannot produce a trustworthy result."""


class WorkerError(SimulationError):
    """
    A worker chunk failed or returned an incomplete tally.

    Attributes:
        worker: Index of the logical worker that owned the chunk
        chunk: Index of the chunk within that worker's share
    """

    def __init__(self, worker: int, chunk: int, reason: str):
        self.worker = worker
        self.chunk = chunk
        super().__init__(f"Worker {worker} failed on chunk {chunk}: {reason}")


@dataclass(frozen=True)
class TrialTask:
    """One chunk of a worker's share of trials."""
    worker: int
    chunk: int
    trials: int
    seed: int
    sample_limit: int = 0


class CategoryRow(NamedTuple):
    """A line of the final report."""
    category: Category
    count: int
    percentage: float
    expected_percentage: float


@dataclass
class SimulationResult:
    """
    Merged outcome of a completed run.

    Attributes:
        tally: Counts for all trials of the run
        elapsed: Wall clock duration of the run in seconds
        trials: Number of trials requested (and recorded)
        workers: Number of logical workers used
    """
    tally: Tally
    elapsed: float
    trials: int
    workers: int

    def rows(self) -> List[CategoryRow]:
        """One row per category, strongest first."""
        return [
            CategoryRow(
                category=category,
                count=self.tally[category],
                percentage=self.tally.percentage(category),
                expected_percentage=expected_probability(category) * 100,
            )
            for category in Category.ranked()
        ]


def partition_trials(trials: int, workers: int) -> List[int]:
    """
    Split ``trials`` across ``workers``.

    Shares differ by at most one and always add up to ``trials``; the first
    ``trials % workers`` workers take the extra trial.
    """
    if trials <= 0:
        raise ValueError(f"trials must be > 0, got {trials}")
    if workers <= 0:
        raise ValueError(f"workers must be > 0, got {workers}")
    base, extra = divmod(trials, workers)
    return [base + (1 if i < extra else 0) for i in range(workers)]


def plan_tasks(
    trials: int,
    workers: int,
    chunk_size: int,
    seed: Optional[int] = None,
    sample_limit: int = 0,
) -> List[TrialTask]:
    """
    Cut each worker's share into chunks, each with an independent seed.

    Args:
        trials: Total trials of the run
        workers: Number of logical workers
        chunk_size: Largest number of trials in a single task
        seed: Run seed; chunk seeds are drawn from OS entropy when None
        sample_limit: Example hands each task keeps per category

    Returns:
        Tasks ordered by worker then chunk
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be > 0, got {chunk_size}")

    seeder = random.Random(seed)
    tasks = []
    for worker, share in enumerate(partition_trials(trials, workers)):
        chunk = 0
        while share > 0:
            size = min(chunk_size, share)
            tasks.append(TrialTask(
                worker=worker,
                chunk=chunk,
                trials=size,
                seed=seeder.getrandbits(SEED_BITS),
                sample_limit=sample_limit,
            ))
            share -= size
            chunk += 1
    return tasks


def run_task(task: TrialTask) -> Tally:
    """Run one chunk in a fresh engine. Executed inside the pool."""
    engine = TrialEngine(seed=task.seed, sample_limit=task.sample_limit)
    return engine.run_batch(task.trials)


def _make_executor(kind: str, workers: int) -> Executor:
    if kind == "thread":
        return ThreadPoolExecutor(max_workers=workers, thread_name_prefix="hand-odds")
    if kind == "process":
        return ProcessPoolExecutor(max_workers=workers)
    raise ValueError(f"Unknown executor: {kind}")


def run_simulation(
    config: SimulationConfig,
    progress: Optional[Callable[[int], None]] = None,
    task_runner: Callable[[TrialTask], Tally] = run_task,
) -> SimulationResult:
    """
    Run a full simulation and merge the per-worker tallies.

    Args:
        config: Run settings
        progress: Called in the calling thread with the trial count of each
                  finished chunk
        task_runner: Function executed in the pool for every task; must be
                     picklable for the process executor

    Returns:
        The merged result, only once every chunk has completed

    Raises:
        WorkerError: If any chunk raises or returns the wrong number of trials.
            Remaining chunks are cancelled and no partial result is returned.
        SimulationError: If the merged total does not match the request
    """
    tasks = plan_tasks(config.trials, config.workers, config.chunk_size, config.seed, config.samples)
    logger.info(
        f"Starting simulation: {config.trials} trials, {config.workers} {config.executor} workers, "
        f"{len(tasks)} chunks"
    )

    total = Tally(sample_limit=config.samples)
    # Example hands are folded in plan order after the join, not completion order
    finished = {}
    start = time.perf_counter()
    executor = _make_executor(config.executor, config.workers)
    try:
        futures = {executor.submit(task_runner, task): task for task in tasks}
        for future in as_completed(futures):
            task = futures[future]
            try:
                tally = future.result()
            except Exception as e:
                logger.error(f"Worker {task.worker} chunk {task.chunk} raised {type(e).__name__}: {e}")
                raise WorkerError(task.worker, task.chunk, f"{type(e).__name__}: {e}") from e

            if tally.total != task.trials:
                logger.error(
                    f"Worker {task.worker} chunk {task.chunk} recorded {tally.total} of {task.trials} trials"
                )
                raise WorkerError(
                    task.worker, task.chunk, f"recorded {tally.total} of {task.trials} trials"
                )

            total.merge_counts(tally)
            finished[(task.worker, task.chunk)] = tally
            logger.debug(f"Worker {task.worker} chunk {task.chunk} done ({task.trials} trials)")
            if progress is not None:
                progress(task.trials)
    except BaseException:
        executor.shutdown(wait=True, cancel_futures=True)
        raise
    executor.shutdown(wait=True)
    elapsed = time.perf_counter() - start

    if config.samples:
        for task in tasks:
            total.merge_samples(finished[(task.worker, task.chunk)])

    if total.total != config.trials:
        raise SimulationError(f"Merged {total.total} trials, expected {config.trials}")

    logger.info(f"Finished simulation of {config.trials} trials in {elapsed:.3f}s")
    return SimulationResult(tally=total, elapsed=elapsed, trials=config.trials, workers=config.workers)
