"""A fixed-size pool of worker threads fed through a shared queue."""

import queue
import sys
import threading
import traceback

_TERMINATE = object()


class _Worker:
    def __init__(self, worker_id, jobs, stdout):
        self.id = worker_id
        self._jobs = jobs
        self._stdout = stdout
        self.thread = threading.Thread(
            target=self._loop, name=f"worker-{worker_id}", daemon=True
        )
        self.thread.start()

    def _loop(self):
        while True:
            job = self._jobs.get()
            if job is _TERMINATE:
                print(f"Worker {self.id} was told to terminate.", file=self._stdout)
                return
            print(f"Worker {self.id} got a job, executing.", file=self._stdout)
            try:
                job()
            except Exception:
                traceback.print_exc(file=sys.stderr)


class ThreadPool:
    """Run callables on a fixed number of threads."""

    def __init__(self, size, stdout=None):
        if size <= 0:
            raise ValueError("thread pool size must be greater than zero")
        self._stdout = stdout
        self._jobs = queue.SimpleQueue()
        self._lock = threading.Lock()
        self._closed = False
        self._workers = [_Worker(i, self._jobs, stdout) for i in range(size)]

    @property
    def size(self):
        return len(self._workers)

    def execute(self, job):
        """Queue a callable taking no arguments."""
        with self._lock:
            if self._closed:
                raise RuntimeError("thread pool has been shut down")
            self._jobs.put(job)

    def shutdown(self):
        """Let queued jobs finish, then stop and join every worker."""
        with self._lock:
            if self._closed:
                return
            self._closed = True

        print("Sending terminate message to all workers.", file=self._stdout)
        for _ in self._workers:
            self._jobs.put(_TERMINATE)

        print("Shutting down all workers.", file=self._stdout)
        for worker in self._workers:
            print(f"Shutting down worker {worker.id}", file=self._stdout)
            worker.thread.join()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown()
        return False