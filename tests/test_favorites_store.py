from __future__ import annotations

import json
import time

import pytest

from favmedia.config import FAVORITES_KEY, MAX_FAVORITES
from favmedia.favorites import FavoritesStore
from favmedia.models.types import AddResult, MediaType, RemoveResult
from favmedia.storage.memory import MemoryStorage


def test_load_without_payload_is_empty(store: FavoritesStore) -> None:
    assert store.load() == []
    assert store.list() == []
    assert len(store) == 0


def test_add_prepends_newest_first(store: FavoritesStore) -> None:
    assert store.add("https://a.example/1.png", MediaType.IMAGE) is AddResult.ADDED
    assert store.add("https://a.example/2.gif", "gif") is AddResult.ADDED
    urls = [entry.url for entry in store.list()]
    assert urls == ["https://a.example/2.gif", "https://a.example/1.png"]


def test_add_defaults_to_gif(store: FavoritesStore) -> None:
    store.add("https://tenor.com/view/x")
    assert store.list()[0].media_type is MediaType.GIF


def test_duplicate_add_is_rejected_without_write(
    store: FavoritesStore, storage: MemoryStorage
) -> None:
    store.add("https://a.example/1.png", MediaType.IMAGE)
    writes = storage.write_count
    assert store.add("https://a.example/1.png", MediaType.GIF) is AddResult.ALREADY_EXISTS
    assert storage.write_count == writes
    entries = store.list()
    assert len(entries) == 1
    assert entries[0].media_type is MediaType.IMAGE


def test_url_equality_is_exact(store: FavoritesStore) -> None:
    assert store.add("https://a.example/1.png") is AddResult.ADDED
    assert store.add("https://A.example/1.png") is AddResult.ADDED
    assert store.add("https://a.example/1.png?x=1") is AddResult.ADDED
    assert len(store) == 3


def test_capacity_bound(store: FavoritesStore, storage: MemoryStorage) -> None:
    for index in range(MAX_FAVORITES):
        assert store.add(f"https://a.example/{index}.png") is AddResult.ADDED
    before = store.list()
    writes = storage.write_count

    assert store.add("https://a.example/overflow.png") is AddResult.LIMIT_REACHED
    assert storage.write_count == writes
    assert store.list() == before
    assert len(store) == MAX_FAVORITES


def test_duplicate_is_reported_before_limit(storage: MemoryStorage, clock) -> None:
    store = FavoritesStore(storage, max_entries=2, clock=clock)
    store.add("https://a.example/1.png")
    store.add("https://a.example/2.png")
    assert store.add("https://a.example/1.png") is AddResult.ALREADY_EXISTS
    assert store.add("https://a.example/3.png") is AddResult.LIMIT_REACHED


def test_round_trip_through_fresh_store(storage: MemoryStorage) -> None:
    before = time.time_ns() // 1_000_000
    assert FavoritesStore(storage).add("https://x.com/img.png", MediaType.IMAGE) is AddResult.ADDED
    after = time.time_ns() // 1_000_000

    entry = FavoritesStore(storage).load()[0]
    assert entry.url == "https://x.com/img.png"
    assert entry.media_type is MediaType.IMAGE
    assert before <= entry.created_at <= after


def test_payload_uses_record_keys(store: FavoritesStore, storage: MemoryStorage, clock) -> None:
    store.add("https://x.com/ñandú.gif", MediaType.GIF)
    raw = storage.get(FAVORITES_KEY)
    assert "ñandú" in raw
    assert json.loads(raw) == [
        {"url": "https://x.com/ñandú.gif", "type": "gif", "timestamp": clock.value}
    ]


def test_remove_filters_entry(store: FavoritesStore) -> None:
    store.add("https://a.example/1.png")
    store.add("https://a.example/2.png")
    assert store.remove("https://a.example/1.png") is RemoveResult.REMOVED
    assert [entry.url for entry in store.list()] == ["https://a.example/2.png"]
    assert not store.contains("https://a.example/1.png")
    assert store.contains("https://a.example/2.png")


def test_remove_absent_url_is_idempotent(store: FavoritesStore) -> None:
    store.add("https://a.example/1.png")
    before = store.list()
    assert store.remove("https://a.example/missing.png") is RemoveResult.REMOVED
    assert store.list() == before


def test_remove_on_empty_storage_succeeds(store: FavoritesStore) -> None:
    assert store.remove("https://a.example/1.png") is RemoveResult.REMOVED
    assert store.list() == []


def test_add_persist_failure_leaves_state_unchanged(
    store: FavoritesStore, storage: MemoryStorage
) -> None:
    store.add("https://a.example/1.png")
    before = store.list()
    storage.fail_writes = True
    writes = storage.write_count

    assert store.add("https://a.example/2.png") is AddResult.PERSIST_FAILED
    assert storage.write_count == writes + 1
    assert store.list() == before


def test_remove_persist_failure(store: FavoritesStore, storage: MemoryStorage) -> None:
    store.add("https://a.example/1.png")
    storage.fail_writes = True
    assert store.remove("https://a.example/1.png") is RemoveResult.PERSIST_FAILED
    assert store.contains("https://a.example/1.png")


def test_os_errors_from_backend_are_contained(store: FavoritesStore) -> None:
    class BrokenStorage:
        def get(self, key: str):
            raise OSError("disk gone")

        def set(self, key: str, value: str) -> None:
            raise OSError("disk gone")

    broken = FavoritesStore(BrokenStorage())
    assert broken.load() == []
    assert broken.add("https://a.example/1.png") is AddResult.PERSIST_FAILED
    assert broken.remove("https://a.example/1.png") is RemoveResult.PERSIST_FAILED


@pytest.mark.parametrize(
    "payload",
    [
        "not json",
        "[" * 200_000 + "]" * 200_000,
        "{broken",
        '{"url": "x"}',
        '[{"url": "https://a.example/1.png"}]',
        '[{"url": "", "type": "gif", "timestamp": 1}]',
        '[{"url": "https://a.example/1.png", "type": "video", "timestamp": 1}]',
        '[{"url": "https://a.example/1.png", "type": "gif", "timestamp": "yesterday"}]',
    ],
)
def test_malformed_payload_fails_open(payload: str, caplog: pytest.LogCaptureFixture) -> None:
    storage = MemoryStorage({FAVORITES_KEY: payload})
    store = FavoritesStore(storage)
    with caplog.at_level("WARNING", logger="favmedia.favorites"):
        assert store.load() == []
    assert "malformed favorites payload" in caplog.text


def test_add_after_corruption_replaces_payload() -> None:
    storage = MemoryStorage({FAVORITES_KEY: "garbage"})
    store = FavoritesStore(storage)
    assert store.add("https://a.example/1.png") is AddResult.ADDED
    assert [entry.url for entry in store.list()] == ["https://a.example/1.png"]


def test_legacy_payload_with_extra_fields_loads() -> None:
    payload = json.dumps(
        [
            {"url": "https://tenor.com/view/x", "type": "gif", "timestamp": 1700000000123, "x": 1},
            {"url": "https://x.com/a.png", "type": "image", "timestamp": 1699999999000},
        ]
    )
    entries = FavoritesStore(MemoryStorage({FAVORITES_KEY: payload})).load()
    assert [entry.url for entry in entries] == ["https://tenor.com/view/x", "https://x.com/a.png"]
    assert entries[0].created_at == 1700000000123
    assert entries[0].created_datetime.year == 2023


def test_load_repairs_duplicates_and_overflow(caplog: pytest.LogCaptureFixture) -> None:
    records = [{"url": f"https://a.example/{i}.png", "type": "image", "timestamp": i} for i in range(4)]
    records.insert(1, {"url": "https://a.example/0.png", "type": "gif", "timestamp": 99})
    storage = MemoryStorage({FAVORITES_KEY: json.dumps(records)})
    store = FavoritesStore(storage, max_entries=3)

    with caplog.at_level("WARNING", logger="favmedia.favorites"):
        entries = store.load()
    assert [entry.url for entry in entries] == [
        "https://a.example/0.png",
        "https://a.example/1.png",
        "https://a.example/2.png",
    ]
    assert entries[0].media_type is MediaType.IMAGE
    assert "duplicate" in caplog.text
    assert store.add("https://a.example/new.png") is AddResult.LIMIT_REACHED


def test_custom_key_isolates_lists(storage: MemoryStorage) -> None:
    first = FavoritesStore(storage, key="one")
    second = FavoritesStore(storage, key="two")
    first.add("https://a.example/1.png")
    assert second.list() == []
    assert "one" in storage and "two" not in storage


@pytest.mark.parametrize("url", ["", None])
def test_add_requires_url(store: FavoritesStore, url) -> None:
    with pytest.raises(ValueError):
        store.add(url)


def test_add_rejects_unknown_media_type(store: FavoritesStore, storage: MemoryStorage) -> None:
    with pytest.raises(ValueError):
        store.add("https://a.example/1.mp4", "video")
    assert storage.write_count == 0


def test_max_entries_must_be_positive(storage: MemoryStorage) -> None:
    with pytest.raises(ValueError):
        FavoritesStore(storage, max_entries=0)


def test_package_logger_is_silent_by_default() -> None:
    import logging

    import favmedia  # noqa: F401

    handlers = logging.getLogger("favmedia").handlers
    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)
