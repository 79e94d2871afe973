"""Choosing target managers and applying a registry to them."""

from change_source.core.catalog import ALL_MANAGERS, SUPPORTED_MANAGERS
from change_source.core.context import ChangeSourceContext
from change_source.core.i18n import translate
from change_source.core.package_managers.types import SwitchResult
from change_source.core.prompter.types import PromptChoice
from change_source.core.selection import choose_registry


def managers_from_flags(*, all_: bool, npm: bool, yarn: bool, pnpm: bool) -> list[str]:
    """Collect the managers named on the command line, without duplicates."""
    managers: list[str] = []
    if all_:
        managers.extend(SUPPORTED_MANAGERS)
    for name, flag in (("npm", npm), ("yarn", yarn), ("pnpm", pnpm)):
        if flag and name not in managers:
            managers.append(name)
    return managers


def choose_managers(ctx: ChangeSourceContext, lang: str) -> list[str]:
    """Ask which package managers to switch; "all" wins over individual picks."""
    choices = [
        PromptChoice(display=translate(name, lang), value=name) for name in SUPPORTED_MANAGERS
    ]
    choices.append(PromptChoice(display=translate(ALL_MANAGERS, lang), value=ALL_MANAGERS))
    selected = ctx.prompter.checkbox(
        translate("select_manager", lang),
        choices,
        required_message=translate("select_at_least_one", lang),
    )
    if ALL_MANAGERS in selected:
        return list(SUPPORTED_MANAGERS)
    return [name for name in SUPPORTED_MANAGERS if name in selected]


def resolve_target(ctx: ChangeSourceContext, managers: list[str], target: str) -> str:
    """Resolve a --to value: a catalog key (case-insensitive) or a literal URL.

    Keys are looked up in the catalog of the single target manager, or in
    npm's when several managers are switched together.
    """
    lookup_manager = managers[0] if len(managers) == 1 else "npm"
    entry = ctx.catalog.find(lookup_manager, target.lower())
    if entry is not None:
        return entry.url
    return target


def pick_registry(ctx: ChangeSourceContext, managers: list[str], lang: str) -> str:
    """Run the registry menu once, for one manager or for all of them."""
    if len(managers) == 1:
        return choose_registry(ctx, managers[0], lang)
    return choose_registry(ctx, ALL_MANAGERS, lang)


def switch_registries(
    ctx: ChangeSourceContext, managers: list[str], url: str, lang: str
) -> list[SwitchResult]:
    """Point every manager at url and report each outcome.

    All commands run before anything is reported; a failing manager does not
    prevent the others from being switched.
    """
    ctx.feedback.warning(translate("switching", lang))
    results = [ctx.package_managers.set_registry(manager, url) for manager in managers]

    for result in results:
        if result.ok:
            ctx.feedback.info(f"[{result.manager}] {translate('success', lang)}")
        else:
            ctx.feedback.error(
                f"[{result.manager}] {translate('error_occurred', lang)} {result.detail}"
            )

    ctx.feedback.success("\n" + translate("done", lang))
    return results
