"""Abstract interface for talking to npm, yarn and pnpm."""

from abc import ABC, abstractmethod

from change_source.core.package_managers.types import SwitchResult


class PackageManagers(ABC):
    """Runs package manager config commands.

    Implementations never raise for a failed command: failures are reported
    through the returned value so one broken manager does not stop the rest.
    """

    @abstractmethod
    def set_registry(self, manager: str, url: str) -> SwitchResult:
        """Point a package manager at a registry URL.

        Args:
            manager: One of npm, yarn or pnpm
            url: Registry URL to configure

        Returns:
            SwitchResult describing success or the captured failure detail

        Raises:
            UnsupportedManagerError: If manager is not supported
        """
        ...

    @abstractmethod
    def get_registry(self, manager: str) -> str | None:
        """Read a package manager's configured registry.

        Returns:
            The registry URL, or None if the command is unavailable or fails
        """
        ...
