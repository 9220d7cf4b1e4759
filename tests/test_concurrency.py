"""Tests for table/rwlock.py and table/shared.py.

Verifies that:
- Readers proceed concurrently; the read lock is reentrant
- Writers are exclusive; upgrade, downgrade and write reentrancy fail fast
- Timeouts raise TimeoutError
- SharedLanguage switches are seen by every thread

Python 3.13+.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from localfmt import SharedLanguage
from localfmt.table import RWLock
from tests.helpers.catalog import Lang


class TestRWLockReaders:
    """Shared side of the lock."""

    def test_read_is_reentrant(self) -> None:
        lock = RWLock()

        with lock.read(), lock.read():
            assert lock.reader_count == 1
        assert lock.reader_count == 0

    def test_concurrent_readers(self) -> None:
        lock = RWLock()
        inside = threading.Barrier(3, timeout=5)

        def reader() -> None:
            with lock.read(timeout=5):
                # Every thread must be inside at once to pass the barrier
                inside.wait()

        threads = [threading.Thread(target=reader) for _ in range(3)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)

        assert not inside.broken
        assert lock.reader_count == 0

    def test_release_without_acquire(self) -> None:
        lock = RWLock()

        with pytest.raises(RuntimeError, match="does not hold the read lock"):
            lock._release_read()


class TestRWLockWriters:
    """Exclusive side of the lock."""

    def test_write_flag(self) -> None:
        lock = RWLock()

        with lock.write():
            assert lock.writer_active
        assert not lock.writer_active

    def test_write_not_reentrant(self) -> None:
        lock = RWLock()

        with lock.write(), pytest.raises(RuntimeError, match="not reentrant"):
            with lock.write():
                pass

    def test_no_upgrade(self) -> None:
        lock = RWLock()

        with lock.read(), pytest.raises(RuntimeError, match="upgrade"):
            with lock.write():
                pass

    def test_no_downgrade(self) -> None:
        lock = RWLock()

        with lock.write(), pytest.raises(RuntimeError, match="holding the write lock"):
            with lock.read():
                pass

    def test_writer_waits_for_reader(self) -> None:
        lock = RWLock()
        acquired = threading.Event()
        release = threading.Event()

        def reader() -> None:
            with lock.read():
                acquired.set()
                release.wait(timeout=5)

        thread = threading.Thread(target=reader)
        thread.start()
        acquired.wait(timeout=5)
        try:
            with pytest.raises(TimeoutError):
                with lock.write(timeout=0.05):
                    pass
        finally:
            release.set()
            thread.join(timeout=5)

        with lock.write(timeout=5):
            assert lock.writer_active

    def test_reader_waits_for_writer(self) -> None:
        lock = RWLock()
        result: list[BaseException] = []

        def reader() -> None:
            try:
                with lock.read(timeout=0.05):
                    pass
            except TimeoutError as e:
                result.append(e)

        with lock.write():
            thread = threading.Thread(target=reader)
            thread.start()
            thread.join(timeout=5)

        assert len(result) == 1

    def test_timed_out_writer_does_not_block_readers(self) -> None:
        lock = RWLock()
        acquired = threading.Event()
        release = threading.Event()

        def holder() -> None:
            with lock.read():
                acquired.set()
                release.wait(timeout=5)

        thread = threading.Thread(target=holder)
        thread.start()
        acquired.wait(timeout=5)
        try:
            with pytest.raises(TimeoutError):
                with lock.write(timeout=0.05):
                    pass
            with lock.read(timeout=1):
                assert lock.reader_count == 2
        finally:
            release.set()
            thread.join(timeout=5)

    def test_negative_timeout(self) -> None:
        lock = RWLock()

        with pytest.raises(ValueError, match="non-negative"):
            with lock.read(timeout=-1):
                pass


class TestSharedLanguage:
    """Thread-safe current-language cell."""

    def test_get_and_set(self) -> None:
        current = SharedLanguage(Lang.EN)

        current.set(Lang.JA)

        assert current.get() is Lang.JA

    def test_wrong_enum_rejected(self) -> None:
        current = SharedLanguage(Lang.EN)

        with pytest.raises(TypeError, match="Lang member"):
            current.set("JA")  # type: ignore[arg-type]

    def test_selector_follows_cell(self) -> None:
        current = SharedLanguage(Lang.EN)
        selector = current.selector()

        assert selector.is_dynamic
        assert selector.current() is Lang.EN
        current.set(Lang.JA)
        assert selector.current() is Lang.JA

    def test_repr(self) -> None:
        assert repr(SharedLanguage(Lang.EN)) == "SharedLanguage(<Lang.EN: 'en'>)"

    def test_concurrent_reads_and_switches(self) -> None:
        current = SharedLanguage(Lang.EN, timeout=5)

        def read_many() -> set[Lang]:
            return {current.get() for _ in range(200)}

        def switch_many() -> None:
            for i in range(50):
                current.set(Lang.JA if i % 2 else Lang.EN)

        with ThreadPoolExecutor(max_workers=8) as executor:
            readers = [executor.submit(read_many) for _ in range(6)]
            writers = [executor.submit(switch_many) for _ in range(2)]
            for future in writers:
                future.result()
            seen = set().union(*(future.result() for future in readers))

        assert seen <= {Lang.EN, Lang.JA}
