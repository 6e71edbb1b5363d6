"""Thread-safe queues, a producer/consumer pair and an atomic counter."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable
from typing import Any

DEFAULT_MAXSIZE = 200


class QueueClosed(Exception):
    """The queue is closed: no more puts, and nothing left to get."""


class BoundedQueue:
    """A FIFO queue whose ``put`` blocks while full and ``get`` while empty.

    ``maxsize`` of ``None`` makes the queue unbounded. After ``close`` the
    items still queued can be taken; then ``get`` raises QueueClosed.
    """

    def __init__(self, maxsize: int | None = DEFAULT_MAXSIZE) -> None:
        if maxsize is not None and maxsize <= 0:
            raise ValueError("maxsize must be positive or None")
        self.maxsize = maxsize
        self._items: deque[Any] = deque()
        self._closed = False
        self._condition = threading.Condition()

    def _full(self) -> bool:
        return self.maxsize is not None and len(self._items) >= self.maxsize

    def put(self, item: Any) -> None:
        """Append ``item``, waiting for room; raise QueueClosed if closed."""
        with self._condition:
            self._condition.wait_for(lambda: self._closed or not self._full())
            if self._closed:
                raise QueueClosed("put on a closed queue")
            self._items.append(item)
            self._condition.notify_all()

    def get(self) -> Any:
        """Take the oldest item, waiting for one; raise QueueClosed when drained."""
        with self._condition:
            self._condition.wait_for(lambda: self._items or self._closed)
            if not self._items:
                raise QueueClosed("queue is closed and empty")
            item = self._items.popleft()
            self._condition.notify_all()
            return item

    def close(self) -> None:
        """Refuse further puts and wake every waiting thread."""
        with self._condition:
            self._closed = True
            self._condition.notify_all()

    def __len__(self) -> int:
        with self._condition:
            return len(self._items)


class ProducerConsumer:
    """Produces the integers ``0 .. count - 1`` through a shared queue."""

    def __init__(self, count: int = 10, maxsize: int | None = DEFAULT_MAXSIZE) -> None:
        if count < 0:
            raise ValueError("count must not be negative")
        self.count = count
        self.queue = BoundedQueue(maxsize)

    def produce(self, callback: Callable[[int], Any]) -> None:
        """Queue each value and report it to ``callback``; close the queue at the end."""
        try:
            for value in range(self.count):
                self.queue.put(value)
                callback(value)
        finally:
            self.queue.close()

    def consume(self, callback: Callable[[int], Any]) -> int:
        """Hand each queued value to ``callback`` until the producer is done.

        Returns how many values were consumed.
        """
        consumed = 0
        while True:
            try:
                value = self.queue.get()
            except QueueClosed:
                return consumed
            callback(value)
            consumed += 1


class AtomicCounter:
    """An integer that many threads may increment safely."""

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Add one and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    def value(self) -> int:
        """The current value."""
        with self._lock:
            return self._value


def run_pipeline(
    count: int,
    producer_callback: Callable[[int], Any] | None = None,
    consumer_callback: Callable[[int], Any] | None = None,
) -> list[int]:
    """Run one producer and one consumer thread over ``count`` values.

    Returns the values in the order the consumer received them. An
    exception raised in either thread is raised again here.
    """
    pipeline = ProducerConsumer(count)
    received: list[int] = []
    errors: list[BaseException] = []

    def produced(value: int) -> None:
        if producer_callback is not None:
            producer_callback(value)

    def consumed(value: int) -> None:
        received.append(value)
        if consumer_callback is not None:
            consumer_callback(value)

    def guarded(target: Callable[[], Any]) -> Callable[[], None]:
        def run() -> None:
            try:
                target()
            except BaseException as exc:
                errors.append(exc)
                pipeline.queue.close()
        return run

    threads = [
        threading.Thread(target=guarded(lambda: pipeline.produce(produced))),
        threading.Thread(target=guarded(lambda: pipeline.consume(consumed))),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    if errors:
        raise errors[0]
    return received