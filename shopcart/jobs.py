"""
Background Jobs Demo

Launches independent jobs that sleep and then report. Jobs share no state and
there is no ordering contract between them; the only guarantee is that
run_jobs returns after every job has signalled completion.
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from shopcart.logging import get_logger

logger = get_logger(__name__)

OutputFn = Callable[[str], None]


@dataclass(frozen=True)
class JobSpec:
    """Name and sleep duration (seconds) of a demo job."""
    name: str
    delay: float


@dataclass(frozen=True)
class JobResult:
    """Completion record for a finished job."""
    name: str
    delay: float
    finished_at: float  # time.monotonic() at completion


DEFAULT_JOBS: tuple[JobSpec, ...] = (
    JobSpec("Task 1", 2.0),
    JobSpec("Task 2", 1.0),
    JobSpec("Task 3", 3.0),
    JobSpec("Task 4", 1.5),
)


async def run_job(name: str, delay: float, output_fn: OutputFn = print) -> JobResult:
    """Sleep for `delay` seconds, report, and return a completion record."""
    if delay < 0:
        raise ValueError(f"delay must be non-negative, got {delay}")
    output_fn(f"{name} started")
    await asyncio.sleep(delay)
    output_fn(f"{name} completed after {delay:g}s")
    return JobResult(name=name, delay=delay, finished_at=time.monotonic())


async def run_jobs(
    specs: Sequence[JobSpec] = DEFAULT_JOBS,
    output_fn: OutputFn = print,
    scale: float = 1.0,
) -> List[JobResult]:
    """
    Run every job concurrently and wait for all of them.

    Args:
        specs: Jobs to launch
        output_fn: Where job progress lines go
        scale: Multiplier applied to every delay (0 makes the demo instant)

    Returns:
        Results in completion order

    Raises:
        The first job exception, after all other jobs have finished
    """
    tasks = [
        asyncio.create_task(run_job(spec.name, spec.delay * scale, output_fn), name=spec.name)
        for spec in specs
    ]

    results: List[JobResult] = []
    first_error: Optional[BaseException] = None
    for next_done in asyncio.as_completed(tasks):
        try:
            results.append(await next_done)
        except Exception as e:
            logger.error(f"Background job failed: {e}")
            if first_error is None:
                first_error = e

    if first_error is not None:
        raise first_error

    logger.info(f"All {len(results)} background jobs completed")
    return results
