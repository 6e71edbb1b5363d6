"""A fixed-size pool of worker threads fed from a shared task queue."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any


class ThreadPool:
    """Runs submitted callables on a fixed number of worker threads.

    On shutdown the workers finish every task already queued, then exit.
    """

    def __init__(self, threads: int) -> None:
        if threads <= 0:
            raise ValueError("a thread pool needs at least one thread")
        self._condition = threading.Condition()
        self._tasks: deque[tuple[Callable[[], Any], Future]] = deque()
        self._stopping = False
        self._workers = [
            threading.Thread(target=self._work, name=f"pool-worker-{n}", daemon=True)
            for n in range(threads)
        ]
        for worker in self._workers:
            worker.start()

    def _work(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._tasks or self._stopping)
                if not self._tasks:
                    return
                task, future = self._tasks.popleft()
            if not future.set_running_or_notify_cancel():
                continue
            try:
                result = task()
            except BaseException as exc:  # reported through the future
                future.set_exception(exc)
            else:
                future.set_result(result)

    def submit(self, task: Callable[[], Any]) -> Future:
        """Queue ``task`` and return a future for its result.

        Raises RuntimeError once the pool has been shut down.
        """
        future: Future = Future()
        with self._condition:
            if self._stopping:
                raise RuntimeError("cannot submit to a pool that has shut down")
            self._tasks.append((task, future))
            self._condition.notify()
        return future

    def shutdown(self) -> None:
        """Stop accepting tasks, run the queued ones and join the workers."""
        with self._condition:
            self._stopping = True
            self._condition.notify_all()
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.shutdown()