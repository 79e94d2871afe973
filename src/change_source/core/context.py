"""Application context with dependency injection."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from change_source.core.catalog import RegistryCatalog, default_catalog
from change_source.core.config_store import (
    FilesystemRegistryStore,
    RegistryStore,
    custom_registries_path,
)
from change_source.core.package_managers.abc import PackageManagers
from change_source.core.package_managers.real import RealPackageManagers
from change_source.core.prompter.abc import Prompter
from change_source.core.prompter.real import QuestionaryPrompter
from change_source.core.user_feedback import InteractiveFeedback, UserFeedback


@dataclass(frozen=True)
class ChangeSourceContext:
    """Immutable context holding all dependencies for change-source operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    registry_store: RegistryStore
    catalog: RegistryCatalog
    package_managers: PackageManagers
    prompter: Prompter
    feedback: UserFeedback
    env: Mapping[str, str]  # Environment snapshot taken at CLI invocation

    @staticmethod
    def for_test(
        registry_store: RegistryStore | None = None,
        catalog: RegistryCatalog | None = None,
        package_managers: PackageManagers | None = None,
        prompter: Prompter | None = None,
        feedback: UserFeedback | None = None,
        env: Mapping[str, str] | None = None,
    ) -> "ChangeSourceContext":
        """Create test context with optional pre-configured collaborators.

        Args:
            registry_store: If None, creates an empty InMemoryRegistryStore.
            catalog: If None, uses the built-in catalog.
            package_managers: If None, creates FakePackageManagers that succeed.
            prompter: If None, creates a FakePrompter with no scripted answers.
            feedback: If None, creates FakeUserFeedback.
            env: If None, uses an English locale environment.

        Example:
            >>> store = InMemoryRegistryStore(["https://my.registry/"])
            >>> prompter = FakePrompter(answers=[ManualInputChoice(), "https://x/"])
            >>> ctx = ChangeSourceContext.for_test(registry_store=store, prompter=prompter)
        """
        from tests.fakes.prompter import FakePrompter
        from tests.fakes.user_feedback import FakeUserFeedback

        from change_source.core.config_store import InMemoryRegistryStore
        from change_source.core.package_managers.fake import FakePackageManagers

        return ChangeSourceContext(
            registry_store=(
                registry_store if registry_store is not None else InMemoryRegistryStore()
            ),
            catalog=catalog if catalog is not None else default_catalog(),
            package_managers=(
                package_managers if package_managers is not None else FakePackageManagers()
            ),
            prompter=prompter if prompter is not None else FakePrompter(),
            feedback=feedback if feedback is not None else FakeUserFeedback(),
            env=env if env is not None else {"LANG": "en_US.UTF-8"},
        )


def create_context() -> ChangeSourceContext:
    """Create production context with real implementations.

    Called at CLI entry point. The config path and the built-in catalog are
    resolved here once and injected, so nothing below reads module state.
    """
    env = dict(os.environ)
    return ChangeSourceContext(
        registry_store=FilesystemRegistryStore(custom_registries_path(env)),
        catalog=default_catalog(),
        package_managers=RealPackageManagers(),
        prompter=QuestionaryPrompter(),
        feedback=InteractiveFeedback(),
        env=env,
    )
