"""Unit tests for the reader/writer lock."""

import threading
import time

import pytest

from facet_search.concurrency import ReadWriteLock


pytestmark = pytest.mark.unit


def _wait_for(predicate, timeout: float = 2.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return False


class TestReadWriteLock:
    """Tests for ReadWriteLock."""

    def test_readers_share_the_lock(self):
        lock = ReadWriteLock()

        with lock.read_locked(), lock.read_locked():
            assert lock.readers == 2

        assert lock.readers == 0

    def test_writer_is_exclusive(self):
        lock = ReadWriteLock()
        acquired = threading.Event()

        def reader():
            with lock.read_locked():
                acquired.set()

        with lock.write_locked():
            assert lock.write_held
            thread = threading.Thread(target=reader)
            thread.start()
            assert not acquired.wait(0.05)

        thread.join(timeout=2)
        assert acquired.is_set()
        assert not lock.write_held

    def test_writer_waits_for_readers(self):
        lock = ReadWriteLock()
        written = threading.Event()

        def writer():
            with lock.write_locked():
                written.set()

        lock.acquire_read()
        thread = threading.Thread(target=writer)
        thread.start()
        assert not written.wait(0.05)

        lock.release_read()
        thread.join(timeout=2)
        assert written.is_set()

    def test_waiting_writer_blocks_new_readers(self):
        lock = ReadWriteLock()
        order: list[str] = []

        def writer():
            with lock.write_locked():
                order.append("writer")

        def late_reader():
            with lock.read_locked():
                order.append("reader")

        lock.acquire_read()
        writer_thread = threading.Thread(target=writer)
        writer_thread.start()
        assert _wait_for(lambda: lock._waiting_writers == 1)

        reader_thread = threading.Thread(target=late_reader)
        reader_thread.start()
        time.sleep(0.05)
        assert order == []

        lock.release_read()
        writer_thread.join(timeout=2)
        reader_thread.join(timeout=2)
        assert order == ["writer", "reader"]

    def test_lock_released_on_exception(self):
        lock = ReadWriteLock()

        with pytest.raises(RuntimeError), lock.write_locked():
            raise RuntimeError("boom")

        with lock.read_locked():
            assert lock.readers == 1
