import threading
import time

from linda.infra.locks import ReadWriteLock


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    inside = threading.Barrier(3, timeout=2)

    def _reader():
        with lock.read():
            # All three readers must be inside at once for the barrier to release.
            inside.wait()

    threads = [threading.Thread(target=_reader) for _ in range(3)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=3)
    assert not any(thread.is_alive() for thread in threads)


def test_writer_excludes_readers():
    lock = ReadWriteLock()
    events = []
    writer_in = threading.Event()

    def _writer():
        with lock.write():
            writer_in.set()
            time.sleep(0.05)
            events.append("write_done")

    def _reader():
        writer_in.wait()
        with lock.read():
            events.append("read")

    writer = threading.Thread(target=_writer)
    reader = threading.Thread(target=_reader)
    writer.start()
    reader.start()
    writer.join()
    reader.join()
    assert events == ["write_done", "read"]


def test_lock_is_released_after_exception():
    lock = ReadWriteLock()
    try:
        with lock.write():
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    with lock.read():
        pass
    with lock.write():
        pass
