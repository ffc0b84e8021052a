"""A fixed-size pool of worker threads fed from a FIFO queue."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable
from concurrent.futures import Future
from types import TracebackType
from typing import Any


class ThreadPool:
    """Runs queued callables on a set of worker threads.

    Killing the pool discards queued work (its futures are cancelled) and
    waits for running tasks to finish.
    """

    def __init__(self, num_threads: int) -> None:
        self._tasks: deque[tuple[Future[Any], Callable[[], Any]]] = deque()
        self._condition = threading.Condition()
        self._stop = False
        self._workers: list[threading.Thread] = []
        self._spawn(num_threads)

    def _spawn(self, num_threads: int) -> None:
        for _ in range(num_threads):
            worker = threading.Thread(target=self._work, daemon=True)
            worker.start()
            self._workers.append(worker)

    def enqueue(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Future[Any]:
        """Queue ``func(*args, **kwargs)``; return a future for its result."""
        future: Future[Any] = Future()
        with self._condition:
            if self._stop:
                raise RuntimeError("Error; enqueue on stopped ThreadPool")
            self._tasks.append((future, lambda: func(*args, **kwargs)))
            self._condition.notify()
        return future

    def resize(self, num_threads: int) -> None:
        """Restart the pool with ``num_threads`` workers, dropping queued work."""
        if num_threads == 0:
            raise ValueError("Error; ThreadPool.resize() - num_threads cannot be 0")
        if num_threads == len(self._workers):
            return

        self.kill()
        with self._condition:
            self._stop = False
        self._spawn(num_threads)

    def kill(self) -> None:
        """Stop the pool, cancel queued tasks and join the workers."""
        with self._condition:
            if self._stop:
                return
            pending = list(self._tasks)
            self._tasks.clear()
            self._stop = True
            self._condition.notify_all()

        for future, _ in pending:
            future.cancel()

        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()
        self._workers.clear()

    def queue_size(self) -> int:
        """Return the number of tasks waiting to run."""
        with self._condition:
            return len(self._tasks)

    def stopped(self) -> bool:
        return self._stop

    def num_threads(self) -> int:
        return len(self._workers)

    def _work(self) -> None:
        while not self._stop:
            with self._condition:
                self._condition.wait_for(lambda: self._stop or bool(self._tasks))
                if self._stop and not self._tasks:
                    return
                future, task = self._tasks.popleft()

            if not future.set_running_or_notify_cancel():
                continue
            try:
                result = task()
            except BaseException as exc:  # noqa: BLE001 - handed to the future
                future.set_exception(exc)
            else:
                future.set_result(result)

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        self.kill()