"""Simulated task execution, one at a time or with a concurrency cap.

Tasks do no real work: each one sleeps for its ``duration`` (milliseconds) and
reports when it started and finished. Both runners return results in the order
the tasks were given, whatever order they finish in.
"""

from __future__ import annotations

import asyncio
import numbers
import time
from collections.abc import Awaitable, Hashable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from interview_drills.errors import InvalidConfigurationError
from interview_drills.log import get_logger

logger = get_logger("task_runner")


def now_ms() -> float:
    return time.monotonic() * 1000


@dataclass(frozen=True)
class Task:
    id: Hashable
    duration: float

    def __post_init__(self) -> None:
        if isinstance(self.duration, bool) or not isinstance(
            self.duration, numbers.Real
        ):
            raise InvalidConfigurationError(
                f"Task {self.id!r} duration must be a number, "
                f"got {self.duration!r}"
            )
        # NaN fails this comparison too
        if not self.duration >= 0:
            raise InvalidConfigurationError(
                f"Task {self.id!r} duration must be >= 0, got {self.duration}"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Task:
        return cls(id=data["id"], duration=data["duration"])


@dataclass(frozen=True)
class TaskResult:
    id: Hashable
    started_at: float
    completed_at: float


async def execute_task(task: Task) -> TaskResult:
    started_at = now_ms()
    logger.debug("task_started", task_id=task.id, duration_ms=task.duration)
    await asyncio.sleep(task.duration / 1000)
    result = TaskResult(id=task.id, started_at=started_at, completed_at=now_ms())
    logger.debug(
        "task_completed",
        task_id=task.id,
        elapsed_ms=round(result.completed_at - started_at, 2),
    )
    return result


async def execute_tasks_sequentially(tasks: Sequence[Task]) -> list[TaskResult]:
    start = now_ms()
    results: list[TaskResult] = []
    for task in tasks:
        results.append(await execute_task(task))
    logger.info(
        "tasks_executed",
        mode="sequential",
        task_count=len(tasks),
        elapsed_ms=round(now_ms() - start, 2),
    )
    return results


def execute_tasks_with_concurrency(
    tasks: Sequence[Task], concurrency_limit: int
) -> Awaitable[list[TaskResult]]:
    """Run ``tasks`` with at most ``concurrency_limit`` in flight.

    The limit is checked here, before any coroutine exists, so a bad value
    raises InvalidConfigurationError at call time and no task is started.

    Raises:
        InvalidConfigurationError: if concurrency_limit is not an int >= 1.
    """
    if (
        isinstance(concurrency_limit, bool)
        or not isinstance(concurrency_limit, int)
        or concurrency_limit < 1
    ):
        raise InvalidConfigurationError(
            f"concurrency_limit must be an integer >= 1, got {concurrency_limit!r}"
        )
    return _run_pool(list(tasks), concurrency_limit)


async def _run_pool(tasks: list[Task], concurrency_limit: int) -> list[TaskResult]:
    start = now_ms()
    results: list[TaskResult | None] = [None] * len(tasks)
    cursor: Iterator[tuple[int, Task]] = enumerate(tasks)

    # Workers share one cursor; a worker pulls the next task as soon as its
    # previous one finishes, so at most concurrency_limit are ever running.
    async def worker() -> None:
        for index, task in cursor:
            results[index] = await execute_task(task)

    workers = min(concurrency_limit, len(tasks))
    await asyncio.gather(*(worker() for _ in range(workers)))

    logger.info(
        "tasks_executed",
        mode="concurrent",
        task_count=len(tasks),
        concurrency_limit=concurrency_limit,
        elapsed_ms=round(now_ms() - start, 2),
    )
    return [r for r in results if r is not None]
