"""
Fixed-size worker pool shared by all analyses.

The pool is created at application startup and shut down at teardown. It is
handed to the dispatcher explicitly rather than constructed per request.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import structlog

logger = structlog.get_logger(__name__)


class WorkerPool:
    """
    Owned thread pool with an explicit lifecycle.

    The number of workers is fixed at construction and does not grow with
    the number of records submitted; excess tasks wait in the executor's
    queue.

    Usage:
        pool = WorkerPool(size=10)
        pool.start()
        ...
        pool.shutdown()

    or as a context manager:
        with WorkerPool(size=4) as pool:
            ...
    """

    def __init__(self, size: int = 10, thread_name_prefix: str = "section-classifier"):
        if size < 1:
            raise ValueError(f"Worker pool size must be >= 1, got {size}")
        self.size = size
        self.thread_name_prefix = thread_name_prefix
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def is_running(self) -> bool:
        return self._executor is not None

    @property
    def executor(self) -> ThreadPoolExecutor:
        """The underlying executor. Raises RuntimeError if the pool is not started."""
        if self._executor is None:
            raise RuntimeError("Worker pool is not running; call start() first")
        return self._executor

    def start(self) -> "WorkerPool":
        """Create the executor. Calling start() on a running pool is a no-op."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.size,
                thread_name_prefix=self.thread_name_prefix,
            )
            logger.info("Worker pool started", size=self.size)
        return self

    def shutdown(self, wait: bool = True) -> None:
        """
        Stop the executor.

        Queued tasks that have not started are cancelled; running tasks are
        allowed to finish when wait is True.
        """
        if self._executor is None:
            return
        self._executor.shutdown(wait=wait, cancel_futures=True)
        self._executor = None
        logger.info("Worker pool shut down", size=self.size)

    def __enter__(self) -> "WorkerPool":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def __repr__(self) -> str:
        state = "running" if self.is_running else "stopped"
        return f"{self.__class__.__name__}(size={self.size}, {state})"
