"""Tests for the built-in registry catalog and command builders."""

import pytest

from change_source.core.catalog import (
    RegistryCatalog,
    UnsupportedManagerError,
    build_get_command,
    build_switch_command,
    default_catalog,
)


def test_npm_catalog_has_english_labels() -> None:
    entries = default_catalog().list("npm", "en")

    assert [e.key for e in entries] == ["official", "taobao", "cnpm"]
    assert all(e.url for e in entries)
    assert [e.label for e in entries] == ["Official", "Taobao", "CNPM"]


def test_yarn_catalog_has_chinese_labels() -> None:
    entries = default_catalog().list("yarn", "zh")

    assert [e.key for e in entries] == ["official", "taobao"]
    assert [e.label for e in entries] == ["官方", "淘宝"]
    assert entries[0].url == "https://registry.yarnpkg.com/"


def test_pnpm_catalog_keys() -> None:
    entries = default_catalog().list("pnpm", "en")

    assert [e.key for e in entries] == ["official", "taobao"]


def test_unknown_manager_has_empty_catalog() -> None:
    assert default_catalog().list("bogus", "en") == []


def test_unlabelled_key_is_its_own_label() -> None:
    catalog = RegistryCatalog(
        {"npm": {"internal": "https://internal/"}},
        {"en": {"official": "Official"}},
    )

    assert catalog.list("npm", "en")[0].label == "internal"


def test_find_returns_entry_or_none() -> None:
    catalog = default_catalog()

    entry = catalog.find("npm", "cnpm")
    assert entry is not None
    assert entry.url == "https://r.cnpmjs.org/"
    assert catalog.find("yarn", "cnpm") is None


def test_build_switch_command() -> None:
    assert build_switch_command("npm", "https://x/") == "npm config set registry https://x/"
    assert build_switch_command("pnpm", "https://x/") == "pnpm config set registry https://x/"


def test_build_switch_command_quotes_shell_metacharacters() -> None:
    assert (
        build_switch_command("yarn", "https://x/; rm -rf ~")
        == "yarn config set registry 'https://x/; rm -rf ~'"
    )


def test_build_switch_command_rejects_unknown_manager() -> None:
    with pytest.raises(UnsupportedManagerError, match="bogus") as exc_info:
        build_switch_command("bogus", "https://x/")

    assert exc_info.value.manager == "bogus"


def test_build_get_command() -> None:
    assert build_get_command("yarn") == "yarn config get registry"
    with pytest.raises(UnsupportedManagerError):
        build_get_command("bun")
