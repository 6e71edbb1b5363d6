import threading

import pytest

from drills.thread_pool import ThreadPool


def test_runs_every_task_before_shutdown_returns():
    seen = []
    lock = threading.Lock()

    def make_task(i):
        def task():
            with lock:
                seen.append(i)
            return i
        return task

    pool = ThreadPool(2)
    futures = [pool.submit(make_task(i)) for i in range(8)]
    pool.shutdown()
    assert [f.result(timeout=0) for f in futures] == list(range(8))
    assert sorted(seen) == list(range(8))


def test_submit_returns_future_with_result():
    with ThreadPool(3) as pool:
        futures = [pool.submit(lambda i=i: i * i) for i in range(5)]
        results = [f.result(timeout=5) for f in futures]
    assert results == [0, 1, 4, 9, 16]


def test_task_exception_is_reported_through_future():
    with ThreadPool(1) as pool:
        failing = pool.submit(lambda: 1 / 0)
        following = pool.submit(lambda: "still running")
        with pytest.raises(ZeroDivisionError):
            failing.result(timeout=5)
        assert following.result(timeout=5) == "still running"


def test_submit_after_shutdown_raises():
    pool = ThreadPool(1)
    pool.shutdown()
    with pytest.raises(RuntimeError):
        pool.submit(lambda: None)


def test_context_manager_drains_queue():
    done = []
    with ThreadPool(2) as pool:
        for i in range(20):
            pool.submit(lambda i=i: done.append(i))
    assert sorted(done) == list(range(20))


@pytest.mark.parametrize("threads", [0, -1])
def test_rejects_non_positive_thread_count(threads):
    with pytest.raises(ValueError):
        ThreadPool(threads)


def test_tasks_run_on_worker_threads():
    main = threading.get_ident()
    with ThreadPool(2) as pool:
        idents = [pool.submit(threading.get_ident) for _ in range(4)]
        values = {f.result(timeout=5) for f in idents}
    assert main not in values