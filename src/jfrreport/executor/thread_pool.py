"""
Thread pool for window aggregation passes.

Windows are independent of each other, so their passes may run concurrently
when the reader supports concurrent reads. Results are always consumed in
window order by the caller.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, Future
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Set

from ..models.config import ExecutionConfig
from ..validation import handle_error, ErrorSeverity

logger = logging.getLogger(__name__)


@dataclass
class ThreadPoolConfig:
    """Configuration for the window worker pool."""

    max_workers: int = 4
    thread_name_prefix: str = "WindowWorker"
    shutdown_timeout: float = 10.0

    @classmethod
    def from_execution_config(cls, execution: ExecutionConfig) -> "ThreadPoolConfig":
        return cls(
            max_workers=execution.max_parallel_windows,
            thread_name_prefix=execution.thread_name_prefix,
        )


class ManagedThreadPoolExecutor:
    """
    ThreadPoolExecutor wrapper with lifecycle checks and task statistics.

    Tracks submitted, completed and failed tasks and cancels pending work
    on request when shutting down.
    """

    def __init__(self, config: ThreadPoolConfig):
        self.config = config
        self.executor: Optional[ThreadPoolExecutor] = None
        self.active_futures: Set[Future] = set()
        self.is_shutdown = False
        self._lock = threading.Lock()

        self.stats = {
            "tasks_submitted": 0,
            "tasks_completed": 0,
            "tasks_failed": 0,
        }

    def start(self) -> None:
        """
        Start the thread pool executor.

        Raises:
            RuntimeError: If already started
        """
        if self.executor is not None:
            raise RuntimeError("Thread pool already started")

        try:
            self.executor = ThreadPoolExecutor(
                max_workers=self.config.max_workers,
                thread_name_prefix=self.config.thread_name_prefix,
            )
            self.is_shutdown = False
            logger.info(f"Started thread pool with {self.config.max_workers} workers")
        except Exception as e:
            handle_error(
                error=e,
                context="starting window thread pool",
                severity=ErrorSeverity.ERROR,
                reraise=True,
                logger=logger,
            )

    def submit(self, fn: Callable, *args, **kwargs) -> Future:
        """
        Submit a task to the thread pool.

        Raises:
            RuntimeError: If executor is not started or is shutdown
        """
        if self.executor is None:
            raise RuntimeError("Thread pool not started")
        if self.is_shutdown:
            raise RuntimeError("Thread pool is shutdown")

        with self._lock:
            self.stats["tasks_submitted"] += 1
        future = self.executor.submit(fn, *args, **kwargs)
        with self._lock:
            self.active_futures.add(future)
        future.add_done_callback(self._task_completed)
        return future

    def shutdown(self, wait: bool = True, cancel_futures: bool = False) -> None:
        """
        Shutdown the thread pool executor.

        Args:
            wait: Whether to wait for running tasks
            cancel_futures: Whether to cancel pending tasks
        """
        if self.executor is None or self.is_shutdown:
            return

        try:
            self.is_shutdown = True
            if cancel_futures:
                # cancel() runs the done callback, which takes the lock
                with self._lock:
                    pending = list(self.active_futures)
                for future in pending:
                    future.cancel()
            self.executor.shutdown(wait=wait)
            logger.debug("Thread pool shutdown completed")
        except Exception as e:
            handle_error(
                error=e,
                context="shutting down window thread pool",
                severity=ErrorSeverity.WARNING,
                reraise=False,
                logger=logger,
            )
        finally:
            self.executor = None
            self.active_futures.clear()

    def get_stats(self) -> Dict[str, Any]:
        with self._lock:
            stats = self.stats.copy()
            stats["active_futures"] = len(self.active_futures)
        stats["is_shutdown"] = self.is_shutdown
        stats["success_rate"] = (
            stats["tasks_completed"] / max(1, stats["tasks_submitted"]) * 100
        )
        return stats

    def _task_completed(self, future: Future) -> None:
        with self._lock:
            self.active_futures.discard(future)
            if future.cancelled():
                return
            if future.exception() is not None:
                self.stats["tasks_failed"] += 1
            else:
                self.stats["tasks_completed"] += 1

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown(wait=True, cancel_futures=exc_type is not None)
