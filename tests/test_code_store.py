"""Tests for the in-memory code store and its readers/writer lock."""

import threading
from concurrent.futures import ThreadPoolExecutor

from shortie.core.rwlock import ReadWriteLock
from shortie.services.code_store import CodeStore


class TestCodeStore:
    """Test code store operations."""

    def test_empty_store(self, store):
        assert len(store) == 0
        assert not store.exists("abcdefg")
        assert store.get("abcdefg") is None

    def test_save_and_lookup(self, store):
        store.save("abcdefg", "https://example.com")

        assert store.exists("abcdefg")
        assert store.get("abcdefg") == "https://example.com"
        assert len(store) == 1

    def test_save_overwrites(self, store):
        """save replaces the mapping for an existing code."""
        store.save("abcdefg", "https://example.com/one")
        store.save("abcdefg", "https://example.com/two")

        assert store.get("abcdefg") == "https://example.com/two"
        assert len(store) == 1

    def test_save_is_idempotent(self, store):
        for _ in range(3):
            store.save("abcdefg", "https://example.com")
        assert len(store) == 1
        assert store.exists("abcdefg")

    def test_insert_if_absent(self, store):
        """insert_if_absent only claims free codes and never overwrites."""
        assert store.insert_if_absent("abcdefg", "https://example.com/one")
        assert not store.insert_if_absent("abcdefg", "https://example.com/two")

        assert store.get("abcdefg") == "https://example.com/one"
        assert len(store) == 1

    def test_same_target_under_many_codes(self, store):
        """Targets are not unique; only codes are."""
        assert store.insert_if_absent("aaaaaaa", "https://example.com")
        assert store.insert_if_absent("bbbbbbb", "https://example.com")
        assert len(store) == 2

    def test_codes_are_case_sensitive(self, store):
        store.save("AbCdEfG", "https://example.com")
        assert store.exists("AbCdEfG")
        assert not store.exists("abcdefg")

    def test_concurrent_insert_same_code(self):
        """Exactly one of many racing inserts for one code wins."""
        store = CodeStore()
        barrier = threading.Barrier(16)

        def claim(i):
            barrier.wait()
            return store.insert_if_absent("racecar", f"https://example.com/{i}")

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(claim, range(16)))

        assert results.count(True) == 1
        assert len(store) == 1

    def test_concurrent_writers_and_readers(self):
        """Parallel inserts and lookups do not lose or corrupt entries."""
        store = CodeStore()
        codes = [f"{i:07d}" for i in range(2000)]

        def write(code):
            store.save(code, f"https://example.com/{code}")

        def read(code):
            store.exists(code)
            store.get(code)

        with ThreadPoolExecutor(max_workers=8) as pool:
            for code in codes:
                pool.submit(write, code)
                pool.submit(read, code)

        assert len(store) == len(codes)
        assert all(store.get(code) == f"https://example.com/{code}" for code in codes)


class TestReadWriteLock:
    """Test readers/writer lock behaviour."""

    def test_readers_share_the_lock(self):
        lock = ReadWriteLock()
        second_reader_in = threading.Event()

        def reader():
            with lock.read_locked():
                second_reader_in.set()

        with lock.read_locked():
            thread = threading.Thread(target=reader)
            thread.start()
            assert second_reader_in.wait(timeout=2)
        thread.join(timeout=2)

    def test_writer_waits_for_readers(self):
        lock = ReadWriteLock()
        writer_in = threading.Event()

        def writer():
            with lock.write_locked():
                writer_in.set()

        lock.acquire_read()
        thread = threading.Thread(target=writer)
        thread.start()
        assert not writer_in.wait(timeout=0.1)

        lock.release_read()
        assert writer_in.wait(timeout=2)
        thread.join(timeout=2)

    def test_writer_excludes_readers(self):
        lock = ReadWriteLock()
        reader_in = threading.Event()

        def reader():
            with lock.read_locked():
                reader_in.set()

        lock.acquire_write()
        thread = threading.Thread(target=reader)
        thread.start()
        assert not reader_in.wait(timeout=0.1)

        lock.release_write()
        assert reader_in.wait(timeout=2)
        thread.join(timeout=2)

    def test_lock_released_on_error(self):
        lock = ReadWriteLock()
        try:
            with lock.write_locked():
                raise RuntimeError("boom")
        except RuntimeError:
            pass

        acquired = threading.Event()

        def reader():
            with lock.read_locked():
                acquired.set()

        thread = threading.Thread(target=reader)
        thread.start()
        assert acquired.wait(timeout=2)
        thread.join(timeout=2)
