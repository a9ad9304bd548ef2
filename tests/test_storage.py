# buffer store tests against in-memory and host-backed stores
import logging
import threading

import numpy as np
import pytest

from DynamicBuffer.config import BufferConfig
from DynamicBuffer.encoding.constants import MAX_PAYLOAD_LENGTH
from DynamicBuffer.storage.adapter import PropertyHostAdapter, PropertyStore, as_property_store
from DynamicBuffer.storage.buffer import BufferStore, set_dynamic_buffer, get_dynamic_buffer
from DynamicBuffer.storage.memory import MemoryStorage
from DynamicBuffer.utils.logging import get_logger


class FakeEntity:
    """Host exposing dynamic properties only."""

    def __init__(self):
        self.properties = {}

    def set_dynamic_property(self, identifier, value=None):
        if value is None:
            self.properties.pop(identifier, None)
        else:
            self.properties[identifier] = value

    def get_dynamic_property(self, identifier):
        return self.properties.get(identifier)


class RecordingStorage(MemoryStorage):
    def __init__(self):
        super().__init__()
        self.calls = 0

    def store(self, key, value):
        self.calls += 1
        super().store(key, value)

    def load(self, key):
        self.calls += 1
        return super().load(key)


def test_roundtrip_memory() -> None:
    storage = MemoryStorage()
    store = BufferStore(storage)
    store.set_buffer("data", b"\x00\x01\xfe\xff")
    assert isinstance(storage.load("data"), str)
    assert store.get_buffer("data") == b"\x00\x01\xfe\xff"


def test_roundtrip_host_object() -> None:
    entity = FakeEntity()
    set_dynamic_buffer(entity, "inventory", [1, 2, 3])
    assert isinstance(entity.properties["inventory"], str)
    assert get_dynamic_buffer(entity, "inventory") == b"\x01\x02\x03"


def test_numpy_source() -> None:
    store = BufferStore(MemoryStorage())
    store.set_buffer("grid", np.arange(6, dtype=np.uint8))
    assert store.get_buffer("grid") == bytes(range(6))


def test_absent_values() -> None:
    storage = MemoryStorage()
    store = BufferStore(storage)
    assert store.get_buffer("missing") is None
    storage.store("number", 3.5)
    storage.store("flag", True)
    storage.store("vector", {"x": 0, "y": 1, "z": 2})
    assert store.get_buffer("number") is None
    assert store.get_buffer("flag") is None
    assert store.get_buffer("vector") is None


def test_none_clears_and_reads_absent() -> None:
    storage = MemoryStorage()
    store = BufferStore(storage)
    store.set_buffer("data", b"x")
    store.set_buffer("data", None)
    assert "data" not in storage
    assert store.get_buffer("data") is None


def test_delete_buffer() -> None:
    entity = FakeEntity()
    store = BufferStore(entity)
    store.set_buffer("data", b"x")
    store.delete_buffer("data")
    assert entity.properties == {}


def test_boundaries() -> None:
    store = BufferStore(MemoryStorage())
    store.set_buffer("max", b"\xab" * MAX_PAYLOAD_LENGTH)
    assert store.get_buffer("max") == b"\xab" * MAX_PAYLOAD_LENGTH
    with pytest.raises(ValueError):
        store.set_buffer("big", b"\xab" * (MAX_PAYLOAD_LENGTH + 1))
    with pytest.raises(ValueError):
        store.set_buffer("empty", b"")
    with pytest.raises(ValueError):
        store.set_buffer("empty", [])


@pytest.mark.parametrize("identifier", ["", None, 5])
def test_identifier_checked_before_storage(identifier) -> None:
    storage = RecordingStorage()
    store = BufferStore(storage)
    with pytest.raises(TypeError):
        store.set_buffer(identifier, b"x")
    with pytest.raises(TypeError):
        store.get_buffer(identifier)
    assert storage.calls == 0


def test_bad_buffer_not_stored() -> None:
    storage = RecordingStorage()
    with pytest.raises(TypeError):
        BufferStore(storage).set_buffer("data", "not bytes")
    assert storage.calls == 0


def test_rejects_oversized_declared_length() -> None:
    storage = MemoryStorage()
    storage.store("data", chr(0xFFFF) + chr(0x8000))
    with pytest.raises(ValueError):
        BufferStore(storage).get_buffer("data")


def test_lowered_ceiling() -> None:
    storage = MemoryStorage()
    BufferStore(storage).set_buffer("data", b"\x00" * 100)
    small = BufferStore(storage, BufferConfig(max_payload_length=10))
    with pytest.raises(ValueError):
        small.set_buffer("other", b"\x00" * 11)
    with pytest.raises(ValueError):
        small.get_buffer("data")


def test_strict_decode() -> None:
    storage = MemoryStorage()
    storage.store("data", chr(2) + chr(0x7FFF))
    assert len(BufferStore(storage).get_buffer("data")) == 2
    with pytest.raises(ValueError):
        BufferStore(storage, BufferConfig(strict_decode=True)).get_buffer("data")


def test_empty_text_decodes_to_empty_bytes() -> None:
    storage = MemoryStorage()
    storage.store("data", "")
    assert BufferStore(storage).get_buffer("data") == b""


def test_as_property_store() -> None:
    storage = MemoryStorage()
    assert as_property_store(storage) is storage
    assert isinstance(storage, PropertyStore)
    assert isinstance(as_property_store(FakeEntity()), PropertyHostAdapter)
    with pytest.raises(TypeError):
        as_property_store(object())


def test_serialised_read_modify_write() -> None:
    storage = MemoryStorage()
    store = BufferStore(storage)
    store.set_buffer("counter", [0])

    def bump():
        for _ in range(50):
            with storage.lock:
                value = store.get_buffer("counter")[0]
                store.set_buffer("counter", [value + 1])

    threads = [threading.Thread(target=bump) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert store.get_buffer("counter") == bytes([200])


def test_store_config_leaves_package_logger_level() -> None:
    logger = get_logger().logger
    level = logger.level
    BufferStore(MemoryStorage(), BufferConfig(log_level=logging.DEBUG))
    set_dynamic_buffer(MemoryStorage(), "data", b"x")
    assert logger.level == level


def test_store_log_level_filters_per_store(caplog) -> None:
    storage = MemoryStorage()
    verbose = BufferStore(storage, BufferConfig(log_level=logging.DEBUG))
    quiet = BufferStore(storage)

    with caplog.at_level(logging.DEBUG, logger="DynamicBuffer"):
        quiet.set_buffer("quiet", b"x")
        assert not caplog.records
        verbose.set_buffer("verbose", b"x")
        quiet.get_buffer("quiet")

    messages = [record.getMessage() for record in caplog.records]
    assert len(messages) == 1
    assert "verbose" in messages[0]


def test_memory_len_and_contains() -> None:
    storage = MemoryStorage()
    storage.store("a", "x")
    with storage.lock:
        assert len(storage) == 1
        assert "a" in storage
    storage.store("a", None)
    assert len(storage) == 0
