import io
import threading
from functools import partial

import pytest

from bookexamples.thread_pool import ThreadPool


def test_zero_size_is_rejected():
    with pytest.raises(ValueError):
        ThreadPool(0)


def test_all_jobs_run_before_shutdown_returns():
    results = []
    out = io.StringIO()
    with ThreadPool(4, stdout=out) as pool:
        for i in range(20):
            pool.execute(partial(results.append, i))
    assert sorted(results) == list(range(20))
    text = out.getvalue()
    assert text.count("got a job, executing.") == 20
    assert text.count("was told to terminate.") == 4


def test_shutdown_messages_name_each_worker():
    out = io.StringIO()
    pool = ThreadPool(3, stdout=out)
    pool.shutdown()
    text = out.getvalue()
    assert "Sending terminate message to all workers." in text
    assert "Shutting down all workers." in text
    for worker_id in range(3):
        assert f"Shutting down worker {worker_id}" in text


def test_execute_after_shutdown_raises():
    pool = ThreadPool(1, stdout=io.StringIO())
    pool.shutdown()
    with pytest.raises(RuntimeError):
        pool.execute(lambda: None)


def test_shutdown_twice_is_harmless():
    out = io.StringIO()
    pool = ThreadPool(2, stdout=out)
    pool.shutdown()
    pool.shutdown()
    assert out.getvalue().count("Shutting down all workers.") == 1


def test_failing_job_does_not_stop_worker(capsys):
    done = threading.Event()

    def fail():
        raise RuntimeError("boom")

    with ThreadPool(1, stdout=io.StringIO()) as pool:
        pool.execute(fail)
        pool.execute(done.set)
    assert done.is_set()
    assert "boom" in capsys.readouterr().err


def test_size_reports_worker_count():
    with ThreadPool(5, stdout=io.StringIO()) as pool:
        assert pool.size == 5