"""Concurrency drills: sums over shared data and a job counter shared by threads."""

from __future__ import annotations

import threading
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field


def offset_sum(numbers: Sequence[int], offset: int, step: int) -> int:
    """Sum every ``step``-th number, starting at index ``offset``."""
    if step <= 0:
        raise ValueError("step must be positive")
    if offset < 0:
        raise ValueError("offset must not be negative")
    return sum(numbers[offset::step])


def shared_offset_sums(
    numbers: Sequence[int], workers: int = 8, step: int = 5
) -> list[int]:
    """Compute ``offset_sum`` for offsets 0..workers-1, one thread per offset.

    All threads read the same sequence; nothing is copied per thread.
    """
    if workers < 0:
        raise ValueError("workers must not be negative")
    if step <= 0:
        raise ValueError("step must be positive")
    if workers == 0:
        return []
    shared = numbers
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [
            pool.submit(offset_sum, shared, offset, step) for offset in range(workers)
        ]
        return [future.result() for future in futures]


@dataclass
class JobStatus:
    """A count of completed jobs that several threads may update."""

    jobs_completed: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def complete(self) -> int:
        """Record one finished job; return the new count."""
        with self._lock:
            self.jobs_completed += 1
            return self.jobs_completed


def run_jobs(
    count: int = 10, interval: float = 0.25, poll_interval: float = 0.5
) -> JobStatus:
    """Complete ``count`` jobs on a worker thread while this one waits.

    Prints a waiting line on every poll until all jobs are done.
    """
    status = JobStatus()

    def worker() -> None:
        for _ in range(count):
            time.sleep(interval)
            status.complete()

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    while status.jobs_completed < count:
        print("waiting... ")
        time.sleep(poll_interval)
    thread.join()
    return status