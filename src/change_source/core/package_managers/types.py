"""Result types for package manager operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SwitchResult:
    """Outcome of pointing one package manager at a registry.

    detail carries the captured stderr (or a generic failure message) when
    ok is False and is empty on success.
    """

    manager: str
    ok: bool
    detail: str = ""
