"""Fake package managers for testing.

Records every command it would have run instead of spawning processes.
"""

from change_source.core.catalog import build_switch_command
from change_source.core.package_managers.abc import PackageManagers
from change_source.core.package_managers.types import SwitchResult


class FakePackageManagers(PackageManagers):
    """In-memory fake implementation of package manager commands.

    Constructor Injection:
    - Current registries and failures are provided via constructor parameters
    - set_registry() updates the in-memory registries so get_registry()
      reflects successful switches

    Examples:
        >>> managers = FakePackageManagers(failures={"yarn": "yarn: not found"})
        >>> managers.set_registry("yarn", "https://r/").ok
        False
        >>> managers.set_registry("npm", "https://r/").ok
        True
        >>> managers.get_registry("npm")
        'https://r/'
    """

    def __init__(
        self,
        *,
        registries: dict[str, str] | None = None,
        failures: dict[str, str] | None = None,
    ) -> None:
        """Initialize fake with predetermined state.

        Args:
            registries: Mapping of manager to its current registry URL. Managers
                missing from this mapping report None from get_registry()
            failures: Mapping of manager to the failure detail set_registry()
                should report for it
        """
        self._registries = dict(registries) if registries is not None else {}
        self._failures = failures or {}
        self._commands: list[str] = []

    def set_registry(self, manager: str, url: str) -> SwitchResult:
        command = build_switch_command(manager, url)
        self._commands.append(command)
        if manager in self._failures:
            return SwitchResult(manager=manager, ok=False, detail=self._failures[manager])
        self._registries[manager] = url
        return SwitchResult(manager=manager, ok=True)

    def get_registry(self, manager: str) -> str | None:
        return self._registries.get(manager)

    @property
    def commands(self) -> list[str]:
        """Commands passed to set_registry(), in call order.

        This property is for test assertions only.
        """
        return self._commands.copy()
