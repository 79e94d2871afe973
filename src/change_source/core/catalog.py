"""Built-in registries per package manager and the commands that switch them.

The catalog is pure data: it is built once at the CLI entry point and passed
around in ChangeSourceContext. Nothing here touches the filesystem or spawns
processes.
"""

import shlex
from collections.abc import Mapping
from dataclasses import dataclass

SUPPORTED_MANAGERS = ("npm", "yarn", "pnpm")

# Sentinel manager meaning "every supported manager"
ALL_MANAGERS = "all"

DEFAULT_REGISTRIES: dict[str, dict[str, str]] = {
    "npm": {
        "official": "https://registry.npmjs.org/",
        "taobao": "https://registry.npmmirror.com/",
        "cnpm": "https://r.cnpmjs.org/",
    },
    "yarn": {
        "official": "https://registry.yarnpkg.com/",
        "taobao": "https://registry.npmmirror.com/",
    },
    "pnpm": {
        "official": "https://registry.npmjs.org/",
        "taobao": "https://registry.npmmirror.com/",
    },
}

DEFAULT_LABELS: dict[str, dict[str, str]] = {
    "en": {
        "official": "Official",
        "taobao": "Taobao",
        "cnpm": "CNPM",
    },
    "zh": {
        "official": "官方",
        "taobao": "淘宝",
        "cnpm": "CNPM（中国）",
    },
}


class UnsupportedManagerError(ValueError):
    """Raised when a package manager outside SUPPORTED_MANAGERS is requested."""

    def __init__(self, manager: str) -> None:
        super().__init__(
            f"Unknown package manager: {manager} (expected one of: {', '.join(SUPPORTED_MANAGERS)})"
        )
        self.manager = manager


@dataclass(frozen=True)
class RegistryCatalogEntry:
    """A well-known registry offered for a package manager."""

    key: str
    url: str
    label: str


class RegistryCatalog:
    """Read-only lookup of built-in registries.

    Labels are chosen by language; a key without a label in that language is
    displayed as the key itself.
    """

    def __init__(
        self,
        registries: Mapping[str, Mapping[str, str]],
        labels: Mapping[str, Mapping[str, str]],
    ) -> None:
        self._registries = registries
        self._labels = labels

    def list(self, manager: str, lang: str) -> list[RegistryCatalogEntry]:
        """Return the catalog entries for a manager, in display order.

        Unknown managers yield an empty list.
        """
        registries = self._registries.get(manager, {})
        labels = self._labels.get(lang, self._labels.get("en", {}))
        return [
            RegistryCatalogEntry(key=key, url=url, label=labels.get(key, key))
            for key, url in registries.items()
        ]

    def find(self, manager: str, key: str) -> RegistryCatalogEntry | None:
        """Find a catalog entry by key, or None if the manager has no such key."""
        for entry in self.list(manager, "en"):
            if entry.key == key:
                return entry
        return None


def default_catalog() -> RegistryCatalog:
    """Create the catalog of built-in registries."""
    return RegistryCatalog(DEFAULT_REGISTRIES, DEFAULT_LABELS)


def build_switch_command(manager: str, url: str) -> str:
    """Build the shell command that points a manager at a registry.

    Raises:
        UnsupportedManagerError: If manager is not npm, yarn or pnpm
    """
    if manager not in SUPPORTED_MANAGERS:
        raise UnsupportedManagerError(manager)
    return f"{manager} config set registry {shlex.quote(url)}"


def build_get_command(manager: str) -> str:
    """Build the shell command that prints a manager's configured registry."""
    if manager not in SUPPORTED_MANAGERS:
        raise UnsupportedManagerError(manager)
    return f"{manager} config get registry"
