"""Tests for custom registry persistence."""

import json
from pathlib import Path

from change_source.core.config_store import (
    FilesystemRegistryStore,
    InMemoryRegistryStore,
    custom_registries_path,
)


def _store(tmp_path: Path) -> FilesystemRegistryStore:
    return FilesystemRegistryStore(tmp_path / "config" / "change-source" / "custom-registries.json")


def test_load_missing_file_returns_empty_list(tmp_path: Path) -> None:
    store = _store(tmp_path)

    assert store.load() == []


def test_load_tolerates_empty_and_malformed_files(tmp_path: Path) -> None:
    """Empty files, invalid JSON and non-array JSON all read as an empty list."""
    store = _store(tmp_path)
    store.path().parent.mkdir(parents=True)

    for content in ["", "{not json", '"not an array"', '{"url": "https://a/"}', "42"]:
        store.path().write_text(content, encoding="utf-8")
        assert store.load() == [], content


def test_load_skips_non_strings_and_repeated_urls(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.path().parent.mkdir(parents=True)
    store.path().write_text(
        json.dumps(["https://a/", 3, None, "https://b/", "https://a/"]), encoding="utf-8"
    )

    assert store.load() == ["https://a/", "https://b/"]


def test_save_creates_directory_and_pretty_prints(tmp_path: Path) -> None:
    store = _store(tmp_path)

    store.save(["https://my.private.registry/"])

    content = store.path().read_text(encoding="utf-8")
    assert content == '[\n  "https://my.private.registry/"\n]\n'
    assert json.loads(content) == ["https://my.private.registry/"]


def test_add_appends_and_deduplicates(tmp_path: Path) -> None:
    store = _store(tmp_path)

    store.add("https://a/")
    store.add("https://b/")
    store.add("https://a/")

    assert store.load() == ["https://a/", "https://b/"]


def test_add_empty_url_is_a_no_op(tmp_path: Path) -> None:
    store = _store(tmp_path)

    store.add("")

    assert not store.path().exists()


def test_add_then_remove_preserves_order(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.save(["https://a/", "https://b/"])

    store.add("https://c/")
    assert store.load() == ["https://a/", "https://b/", "https://c/"]

    store.remove({"https://b/"})
    assert store.load() == ["https://a/", "https://c/"]


def test_remove_unknown_url_keeps_list_but_rewrites_file(tmp_path: Path) -> None:
    """Removal always rewrites, even when nothing matched."""
    store = _store(tmp_path)
    store.path().parent.mkdir(parents=True)
    store.path().write_text('["https://a/"]', encoding="utf-8")

    store.remove({"https://missing/"})

    assert store.load() == ["https://a/"]
    assert store.path().read_text(encoding="utf-8") == '[\n  "https://a/"\n]\n'


def test_remove_on_missing_file_creates_empty_list(tmp_path: Path) -> None:
    store = _store(tmp_path)

    store.remove({"https://a/"})

    assert store.path().exists()
    assert store.load() == []


def test_save_load_round_trip(tmp_path: Path) -> None:
    store = _store(tmp_path)
    original = ["https://a/", "https://镜像.example/", "https://c/"]
    store.save(original)

    store.save(store.load())
    store.save(store.load())

    assert store.load() == original


def test_path_uses_xdg_config_home(tmp_path: Path) -> None:
    env = {"XDG_CONFIG_HOME": str(tmp_path / "xdg")}

    path = custom_registries_path(env, home=tmp_path / "home")

    assert path == tmp_path / "xdg" / "change-source" / "custom-registries.json"


def test_path_falls_back_to_dot_config(tmp_path: Path) -> None:
    for env in [{}, {"XDG_CONFIG_HOME": ""}]:
        path = custom_registries_path(env, home=tmp_path / "home")
        assert path == tmp_path / "home" / ".config" / "change-source" / "custom-registries.json"


def test_in_memory_store_shares_add_and_remove_rules() -> None:
    store = InMemoryRegistryStore(["https://a/"])

    store.add("https://a/")
    store.add("https://b/")
    store.remove(["https://zzz/"])

    assert store.urls == ["https://a/", "https://b/"]
    # add("https://a/") found a duplicate and did not save
    assert store.save_count == 2
