"""Persistence of user-supplied custom registry URLs.

The list lives in <config-home>/change-source/custom-registries.json as a
pretty-printed JSON array of strings. Reads never fail: a missing, unreadable
or malformed file is treated as an empty list. Every mutation is a full
read-modify-write of the file.
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = "change-source"
CONFIG_FILE_NAME = "custom-registries.json"


def config_home(env: Mapping[str, str], home: Path | None = None) -> Path:
    """Return $XDG_CONFIG_HOME, or ~/.config when it is unset or empty."""
    xdg = env.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return (home if home is not None else Path.home()) / ".config"


def custom_registries_path(env: Mapping[str, str], home: Path | None = None) -> Path:
    """Return the location of the custom registries file."""
    return config_home(env, home) / CONFIG_DIR_NAME / CONFIG_FILE_NAME


class RegistryStore(ABC):
    """Owns reading and writing the custom registry list.

    Subclasses implement load() and save(); add() and remove() are built on
    top of them so every implementation shares the same dedup and ordering
    rules.
    """

    @abstractmethod
    def load(self) -> list[str]:
        """Load the saved custom registry URLs in insertion order.

        Returns:
            The saved URLs, or an empty list if nothing usable is stored
        """
        ...

    @abstractmethod
    def save(self, urls: Iterable[str]) -> None:
        """Overwrite the stored list with urls.

        Args:
            urls: Complete list of URLs to persist, in display order
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path of the backing file (for messages and debugging)."""
        ...

    def add(self, url: str) -> None:
        """Append url unless it is empty or already saved."""
        if not url:
            return
        urls = self.load()
        if url in urls:
            logger.debug("Custom registry already saved: %s", url)
            return
        urls.append(url)
        self.save(urls)

    def remove(self, urls: Iterable[str]) -> None:
        """Drop every saved URL contained in urls and rewrite the list.

        The list is rewritten even when nothing matched.
        """
        doomed = set(urls)
        self.save([url for url in self.load() if url not in doomed])


class FilesystemRegistryStore(RegistryStore):
    """Production store backed by a JSON file."""

    def __init__(self, config_path: Path) -> None:
        self._config_path = config_path

    def path(self) -> Path:
        return self._config_path

    def load(self) -> list[str]:
        config_path = self._config_path
        if not config_path.exists():
            return []

        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.debug("Ignoring unreadable custom registries file %s: %s", config_path, e)
            return []

        if not isinstance(data, list):
            logger.debug("Ignoring custom registries file %s: not a JSON array", config_path)
            return []

        # Keep first occurrence of each string entry
        urls: list[str] = []
        for item in data:
            if isinstance(item, str) and item not in urls:
                urls.append(item)
        return urls

    def save(self, urls: Iterable[str]) -> None:
        """Write urls as a pretty-printed JSON array.

        Raises:
            PermissionError: If the directory or file cannot be written
        """
        config_path = self._config_path
        parent = config_path.parent

        try:
            parent.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            raise PermissionError(
                f"Cannot create directory: {parent}\n"
                f"Check permissions on your config directory.\n\n"
                f"To fix this manually:\n"
                f"  1. Create the directory: mkdir -p {parent}\n"
                f"  2. Ensure it's writable: chmod 755 {parent}"
            ) from None

        if config_path.exists() and not os.access(config_path, os.W_OK):
            raise PermissionError(
                f"Cannot write to file: {config_path}\n"
                f"The file exists but is not writable.\n\n"
                f"To fix this manually:\n"
                f"  1. Make it writable: chmod 644 {config_path}"
            )

        content = json.dumps(list(urls), indent=2, ensure_ascii=False)
        config_path.write_text(content + "\n", encoding="utf-8")
        logger.debug("Saved custom registries to %s", config_path)


class InMemoryRegistryStore(RegistryStore):
    """Test implementation that keeps the list in memory without touching filesystem."""

    def __init__(self, urls: list[str] | None = None) -> None:
        """Initialize in-memory store.

        Args:
            urls: Initial saved URLs (None = nothing saved)
        """
        self._urls = list(urls) if urls is not None else []
        self._save_count = 0

    def load(self) -> list[str]:
        return list(self._urls)

    def save(self, urls: Iterable[str]) -> None:
        self._urls = list(urls)
        self._save_count += 1

    def path(self) -> Path:
        return Path("/fake/change-source/custom-registries.json")

    @property
    def urls(self) -> list[str]:
        """Currently stored URLs, for test assertions."""
        return list(self._urls)

    @property
    def save_count(self) -> int:
        """Number of save() calls, for test assertions."""
        return self._save_count
