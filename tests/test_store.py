import threading
from concurrent.futures import ThreadPoolExecutor

from country_lookup.models import Country
from country_lookup.store import MemoryStore, ReadWriteLock


def test_set_then_get():
    s = MemoryStore()
    s.set("India", "TestValue")
    value, found = s.get("India")
    assert found
    assert value == "TestValue"

def test_get_missing_key():
    s = MemoryStore()
    value, found = s.get("Atlantis")
    assert found is False
    assert value is None

def test_keys_are_exact():
    s = MemoryStore()
    s.set("India", 1)
    assert s.get("india") == (None, False)
    assert s.get(" India") == (None, False)
    assert s.get("India") == (1, True)

def test_falsy_values_are_still_present():
    s = MemoryStore()
    s.set("empty", "")
    s.set("none", None)
    assert s.get("empty") == ("", True)
    assert s.get("none") == (None, True)

def test_overwrite():
    s = MemoryStore()
    s.set("k", "a")
    s.set("k", "b")
    assert s.get("k") == ("b", True)

def test_repeated_gets_return_same_record():
    s = MemoryStore()
    rec = Country(name="India", capital="New Delhi", currency_symbol="₹", population=123)
    s.set("India", rec)
    first, _ = s.get("India")
    for _ in range(10):
        again, found = s.get("India")
        assert found
        assert again == first
        assert again.model_dump_json() == first.model_dump_json()

def test_concurrent_writers_and_readers():
    s = MemoryStore()
    keys = [f"key-{i}" for i in range(200)]

    def writer(k):
        s.set(k, k.upper())
        # other threads are hammering other keys meanwhile
        return s.get(k)

    def reader(k):
        for _ in range(20):
            s.get(k)

    with ThreadPoolExecutor(max_workers=16) as pool:
        reads = [pool.submit(reader, k) for k in keys]
        results = list(pool.map(writer, keys))
        for f in reads:
            f.result()

    assert results == [(k.upper(), True) for k in keys]
    for k in keys:
        assert s.get(k) == (k.upper(), True)


# --- ReadWriteLock ---

def test_readers_share_the_lock():
    lock = ReadWriteLock()
    both_inside = threading.Barrier(2, timeout=5)

    def read():
        with lock.read():
            both_inside.wait()  # would time out if readers excluded each other

    threads = [threading.Thread(target=read) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)
    assert not both_inside.broken

def test_writer_excludes_readers():
    lock = ReadWriteLock()
    events = []
    writer_in = threading.Event()
    release_writer = threading.Event()

    def write():
        with lock.write():
            writer_in.set()
            release_writer.wait(timeout=5)
            events.append("write-done")

    def read():
        with lock.read():
            events.append("read")

    w = threading.Thread(target=write)
    w.start()
    assert writer_in.wait(timeout=5)
    r = threading.Thread(target=read)
    r.start()
    r.join(timeout=0.2)
    assert events == []  # reader is still blocked
    release_writer.set()
    w.join(timeout=5)
    r.join(timeout=5)
    assert events == ["write-done", "read"]
