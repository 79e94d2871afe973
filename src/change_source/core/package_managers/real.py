"""Production implementation that shells out to the package managers."""

import logging
import shlex
import subprocess

from change_source.core.catalog import build_get_command, build_switch_command
from change_source.core.package_managers.abc import PackageManagers
from change_source.core.package_managers.types import SwitchResult

logger = logging.getLogger(__name__)


class RealPackageManagers(PackageManagers):
    """Runs `<manager> config ...` commands with subprocess."""

    def set_registry(self, manager: str, url: str) -> SwitchResult:
        command = build_switch_command(manager, url)
        logger.debug("Running: %s", command)
        try:
            subprocess.run(
                shlex.split(command),
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=True,
            )
        except subprocess.CalledProcessError as e:
            detail = e.stderr.strip() if e.stderr else ""
            if not detail:
                detail = f"Command '{command}' exited with code {e.returncode}"
            logger.debug("Command failed: %s", detail)
            return SwitchResult(manager=manager, ok=False, detail=detail)
        except FileNotFoundError:
            logger.debug("Command not found: %s", manager)
            return SwitchResult(manager=manager, ok=False, detail=f"Command not found: {manager}")
        return SwitchResult(manager=manager, ok=True)

    def get_registry(self, manager: str) -> str | None:
        command = build_get_command(manager)
        logger.debug("Running: %s", command)
        try:
            result = subprocess.run(
                shlex.split(command),
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=True,
            )
        except (subprocess.CalledProcessError, FileNotFoundError) as e:
            logger.debug("Could not read %s registry: %s", manager, e)
            return None
        return result.stdout.strip()
