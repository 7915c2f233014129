import threading

import pytest

from config import Settings
from repositories import FileStore, MemoryStore, StoreProtocol, build_store


@pytest.fixture(params=["file", "memory"])
def store(request, tmp_path):
    if request.param == "file":
        return FileStore(tmp_path / "data")
    return MemoryStore()


def test_backends_satisfy_protocol(store):
    assert isinstance(store, StoreProtocol)


def test_write_then_read(store):
    store.write("schema", "k1", b'{"id": "k1"}')
    assert store.read("schema", "k1") == b'{"id": "k1"}'


def test_read_missing_key_returns_none(store):
    assert store.read("schema", "nope") is None


def test_write_overwrites(store):
    store.write("schema", "k", b"one")
    store.write("schema", "k", b"two")
    assert store.read("schema", "k") == b"two"
    assert store.read_all("schema") == [b"two"]


def test_namespaces_are_isolated(store):
    store.write("schema", "k", b"s")
    store.write("credential", "k", b"c")
    assert store.read("schema", "k") == b"s"
    assert store.read_all("credential") == [b"c"]


def test_read_all_unknown_namespace_is_empty(store):
    assert store.read_all("schema") == []


def test_delete_removes_and_ignores_missing(store):
    store.write("schema", "k", b"v")
    store.delete("schema", "k")
    store.delete("schema", "k")
    assert store.read("schema", "k") is None
    assert store.read_all("schema") == []


def test_timeout_when_lock_is_held(store):
    store._lock.acquire()
    try:
        with pytest.raises(TimeoutError):
            store.read("schema", "k", timeout=0.01)
        with pytest.raises(TimeoutError):
            store.write("schema", "k", b"v", timeout=0.01)
    finally:
        store._lock.release()
    store.write("schema", "k", b"v", timeout=1.0)
    assert store.read("schema", "k", timeout=1.0) == b"v"


def test_concurrent_writes_all_land(store):
    def _write(i):
        store.write("schema", f"k{i}", str(i).encode())

    threads = [threading.Thread(target=_write, args=(i,)) for i in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert sorted(store.read_all("schema")) == sorted(str(i).encode() for i in range(20))


def test_memory_store_scans_in_insertion_order():
    store = MemoryStore()
    for key in ("c", "a", "b"):
        store.write("schema", key, key.encode())
    assert store.read_all("schema") == [b"c", b"a", b"b"]


def test_file_store_scans_in_filename_order(tmp_path):
    store = FileStore(tmp_path)
    for key in ("c", "a", "b"):
        store.write("schema", key, key.encode())
    assert store.read_all("schema") == [b"a", b"b", b"c"]


def test_file_store_survives_reopen(tmp_path):
    FileStore(tmp_path).write("schema", "kept", b"data")
    assert FileStore(tmp_path).read("schema", "kept") == b"data"


@pytest.mark.parametrize("key", ["../escape", "a/b", ".", "..", "urn:uuid:1234", "https://example.com/s.json"])
def test_file_store_keeps_odd_keys_inside_namespace(tmp_path, key):
    store = FileStore(tmp_path / "data")
    store.write("schema", key, b"v")
    assert store.read("schema", key) == b"v"
    files = list((tmp_path / "data" / "schema").iterdir())
    assert len(files) == 1
    assert files[0].parent == tmp_path / "data" / "schema"
    assert not (tmp_path / "escape.json").exists()


def test_file_store_ignores_leftover_tmp_files(tmp_path):
    store = FileStore(tmp_path)
    store.write("schema", "a", b"a")
    (tmp_path / "schema" / "b.tmp").write_bytes(b"partial")
    assert store.read_all("schema") == [b"a"]


def test_file_store_rejects_empty_key(tmp_path):
    with pytest.raises(ValueError):
        FileStore(tmp_path).write("schema", "", b"v")


def test_build_store_follows_settings(monkeypatch, tmp_path):
    monkeypatch.setenv("SCHEMA_STORAGE", "memory")
    assert isinstance(build_store(Settings()), MemoryStore)

    monkeypatch.setenv("SCHEMA_STORAGE", "file")
    monkeypatch.setenv("SCHEMA_DATA_DIR", str(tmp_path / "store"))
    store = build_store(Settings())
    assert isinstance(store, FileStore)
    assert store.data_dir == tmp_path / "store"


def test_unknown_storage_falls_back_to_file(monkeypatch, tmp_path):
    monkeypatch.setenv("SCHEMA_STORAGE", "postgres")
    monkeypatch.setenv("SCHEMA_DATA_DIR", str(tmp_path))
    assert Settings().SCHEMA_STORAGE == "file"


def test_file_store_empty_key_reads_as_absent(tmp_path):
    store = FileStore(tmp_path)
    assert store.read("schema", "") is None
    store.delete("schema", "")


def test_file_store_overlong_key_reads_as_absent(tmp_path):
    store = FileStore(tmp_path)
    key = "k" * 400
    assert store.read("schema", key) is None
    store.delete("schema", key)
    with pytest.raises(OSError):
        store.write("schema", key, b"v")
