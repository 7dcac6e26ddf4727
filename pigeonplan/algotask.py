"""A counting work item and a thread pool to run a batch of them."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable

logger = logging.getLogger(__name__)


@dataclass
class AlgoTask:
    """Counts the cells of an i_max by j_max grid, accumulating over runs."""

    i_max: int = 500
    j_max: int = 500
    count: int = 0

    def run(self) -> int:
        """Add one to the count for every grid cell and return the new count."""
        self.count += max(self.i_max, 0) * max(self.j_max, 0)
        logger.debug("%s  =>  %d", threading.get_ident(), self.count)
        return self.count


def run_tasks(tasks: Iterable[AlgoTask], max_workers: int) -> list[int]:
    """Run all tasks on a pool of at most max_workers threads; return their counts."""
    if max_workers < 1:
        raise ValueError("max_workers must be at least 1")
    tasks = list(tasks)
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(task.run) for task in tasks]
        return [future.result() for future in futures]