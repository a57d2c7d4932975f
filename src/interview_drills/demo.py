"""interview-drills: run each exercise once and log what happened."""

from __future__ import annotations

import asyncio
from typing import Any

from dotenv import load_dotenv

from interview_drills.config import Settings, get_settings
from interview_drills.counter import create_increment
from interview_drills.log import get_logger, setup_logging
from interview_drills.rate_limiter import create_rate_limiter
from interview_drills.task_runner import (
    Task,
    execute_tasks_sequentially,
    execute_tasks_with_concurrency,
)

SAMPLE_TASKS = [
    {"id": 1, "duration": 300},
    {"id": 2, "duration": 200},
    {"id": 3, "duration": 100},
]


async def run_demo(
    settings: Settings, sample_tasks: list[dict[str, Any]] | None = None
) -> dict[str, Any]:
    logger = get_logger("demo")

    called: list[int] = []
    limited = create_rate_limiter(
        called.append,
        settings.rate_limit_max_calls,
        settings.rate_limit_window_ms,
    )
    for i in range(10):
        limited(i)
    logger.info(
        "rate_limiter_demo",
        attempted=10,
        admitted=len(called),
        max_calls=settings.rate_limit_max_calls,
    )

    increment = create_increment()
    counts = [increment() for _ in range(5)]
    logger.info("counter_demo", values=counts)

    if sample_tasks is None:
        sample_tasks = SAMPLE_TASKS
    tasks = [Task.from_mapping(t) for t in sample_tasks]
    sequential = await execute_tasks_sequentially(tasks)
    concurrent = await execute_tasks_with_concurrency(
        tasks, settings.concurrency_limit
    )
    logger.info(
        "task_runner_demo",
        sequential_order=[r.id for r in sequential],
        concurrent_order=[r.id for r in concurrent],
        concurrency_limit=settings.concurrency_limit,
    )

    return {
        "rate_limited_calls": called,
        "counter": counts,
        "sequential": sequential,
        "concurrent": concurrent,
    }


def main() -> None:
    """Entry point for the interview-drills console script."""
    load_dotenv()
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_dir, settings.max_log_size_mb)
    asyncio.run(run_demo(settings))


if __name__ == "__main__":
    main()
