"""Interactive registry selection.

The menu merges the built-in catalog with the saved custom registries and two
escape hatches: typing a URL by hand, and deleting saved entries. Deleting
returns to the menu; every other choice ends the flow with a URL.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto

from change_source.core.catalog import ALL_MANAGERS, RegistryCatalogEntry
from change_source.core.context import ChangeSourceContext
from change_source.core.i18n import translate
from change_source.core.prompter.types import PromptChoice, PromptSeparator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuiltInChoice:
    """A catalog registry, identified by its key."""

    key: str


@dataclass(frozen=True)
class CustomChoice:
    """A saved custom registry; the URL is the value."""

    url: str


@dataclass(frozen=True)
class ManualInputChoice:
    """Type a registry URL by hand."""


@dataclass(frozen=True)
class DeleteCustomChoice:
    """Remove saved custom registries, then show the menu again."""


SelectionChoice = BuiltInChoice | CustomChoice | ManualInputChoice | DeleteCustomChoice

MenuItem = PromptChoice[SelectionChoice] | PromptSeparator


class _FlowState(Enum):
    SHOW_MENU = auto()
    DELETE_CUSTOM = auto()
    MANUAL_INPUT = auto()


def catalog_manager(manager: str) -> str:
    """Map the "all" sentinel onto the catalog shown for it (npm's)."""
    return "npm" if manager == ALL_MANAGERS else manager


def manager_label(manager: str, lang: str) -> str:
    """Display name for a manager, or for the "all" sentinel."""
    return translate(manager, lang)


def build_registry_menu(
    entries: list[RegistryCatalogEntry],
    custom_urls: list[str],
    lang: str,
) -> list[MenuItem]:
    """Build the single-select menu in display order.

    Layout: catalog entries, then (only when something is saved) a separator,
    one entry per custom URL and the delete entry, and finally manual input.
    """
    items: list[MenuItem] = [
        PromptChoice(display=f"{entry.label} ({entry.url})", value=BuiltInChoice(entry.key))
        for entry in entries
    ]
    if custom_urls:
        items.append(PromptSeparator(f"--- {translate('custom_registries', lang)} ---"))
        items.extend(PromptChoice(display=url, value=CustomChoice(url)) for url in custom_urls)
        items.append(
            PromptChoice(display=translate("delete_custom", lang), value=DeleteCustomChoice())
        )
    items.append(PromptChoice(display=translate("manual_input", lang), value=ManualInputChoice()))
    return items


def resolve_choice(choice: SelectionChoice, entries: list[RegistryCatalogEntry]) -> str | None:
    """Turn a terminal menu choice into a URL.

    Returns None for the choices that lead to another step instead of a URL.
    A key that no catalog entry has is taken as a literal URL.
    """
    match choice:
        case BuiltInChoice(key=key):
            for entry in entries:
                if entry.key == key:
                    return entry.url
            return key
        case CustomChoice(url=url):
            return url
        case ManualInputChoice() | DeleteCustomChoice():
            return None


def delete_custom_registries(ctx: ChangeSourceContext, lang: str) -> None:
    """Let the user check saved registries and remove the checked ones."""
    custom_urls = ctx.registry_store.load()
    if not custom_urls:
        ctx.feedback.info(translate("nothing_to_delete", lang))
        return

    selected = ctx.prompter.checkbox(
        translate("select_to_delete", lang),
        [PromptChoice(display=url, value=url) for url in custom_urls],
    )
    if not selected:
        ctx.feedback.info(translate("none_selected", lang))
        return

    ctx.registry_store.remove(selected)
    logger.debug("Removed custom registries: %s", selected)
    ctx.feedback.success(f"{translate('deleted', lang)} {', '.join(selected)}")


def choose_registry(ctx: ChangeSourceContext, manager: str, lang: str) -> str:
    """Show the registry menu until the user settles on a URL.

    Args:
        ctx: Application context
        manager: Target manager, or "all" when several are switched at once
        lang: Interface language

    Returns:
        The registry URL to switch to
    """
    entries = ctx.catalog.list(catalog_manager(manager), lang)
    message = f"{translate('choose_target', lang)} ({manager_label(manager, lang)})"

    state = _FlowState.SHOW_MENU
    while True:
        match state:
            case _FlowState.SHOW_MENU:
                custom_urls = ctx.registry_store.load()
                menu = build_registry_menu(entries, custom_urls, lang)
                choice = ctx.prompter.select(message, menu)
                logger.debug("Registry menu choice: %s", choice)
                if isinstance(choice, DeleteCustomChoice):
                    state = _FlowState.DELETE_CUSTOM
                    continue
                if isinstance(choice, ManualInputChoice):
                    state = _FlowState.MANUAL_INPUT
                    continue
                url = resolve_choice(choice, entries)
                if url is not None:
                    return url
            case _FlowState.DELETE_CUSTOM:
                delete_custom_registries(ctx, lang)
                state = _FlowState.SHOW_MENU
            case _FlowState.MANUAL_INPUT:
                url = ctx.prompter.text(
                    translate("enter_custom", lang),
                    required_message=translate("url_required", lang),
                )
                ctx.registry_store.add(url)
                return url
