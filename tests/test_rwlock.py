import threading
import time

import pytest

from graph_registry.graph import ReadWriteLock


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    both_inside = threading.Barrier(2, timeout=5)

    def reader():
        with lock.read_locked():
            both_inside.wait()

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)

    assert not any(t.is_alive() for t in threads)
    assert lock.readers == 0


def test_writer_excludes_readers():
    lock = ReadWriteLock()
    events = []

    lock.acquire_write()

    def reader():
        with lock.read_locked():
            events.append("read")

    t = threading.Thread(target=reader)
    t.start()
    time.sleep(0.05)
    events.append("write-done")
    lock.release_write()
    t.join(timeout=5)

    assert events == ["write-done", "read"]


def test_writer_waits_for_readers():
    lock = ReadWriteLock()
    events = []

    lock.acquire_read()

    def writer():
        with lock.write_locked():
            events.append("write")

    t = threading.Thread(target=writer)
    t.start()
    time.sleep(0.05)
    events.append("read-done")
    lock.release_read()
    t.join(timeout=5)

    assert events == ["read-done", "write"]


def test_release_without_acquire_raises():
    lock = ReadWriteLock()

    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()


def test_interrupted_writer_wakes_waiting_readers(monkeypatch):
    lock = ReadWriteLock()
    lock.acquire_read()
    notified = []
    real_notify_all = lock._cond.notify_all

    def interrupted_wait(timeout=None):
        raise KeyboardInterrupt

    def tracking_notify_all():
        notified.append(True)
        real_notify_all()

    monkeypatch.setattr(lock._cond, "wait", interrupted_wait)
    monkeypatch.setattr(lock._cond, "notify_all", tracking_notify_all)

    with pytest.raises(KeyboardInterrupt):
        lock.acquire_write()

    assert notified == [True]
    assert lock._writers_waiting == 0
    assert lock._writer is False
    lock.acquire_read()
    assert lock.readers == 2
