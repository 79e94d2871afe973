"""Read-only views: the registry catalog and each manager's current registry."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from change_source.cli.output import user_output
from change_source.core.catalog import SUPPORTED_MANAGERS
from change_source.core.context import ChangeSourceContext
from change_source.core.i18n import translate


def show_registry_list(ctx: ChangeSourceContext, lang: str) -> None:
    """Print the built-in registries per manager, then the saved custom ones."""
    console = Console(stderr=True, width=200, highlight=False)

    for manager in SUPPORTED_MANAGERS:
        table = Table(
            title=Text(f"{translate('list_registries', lang)} [{manager}]"),
            title_justify="left",
            show_header=True,
            header_style="bold",
        )
        table.add_column(translate("name", lang), no_wrap=True)
        table.add_column(translate("url", lang), style="green", no_wrap=True)
        for entry in ctx.catalog.list(manager, lang):
            table.add_row(entry.label, entry.url)
        console.print(table)

    custom_urls = ctx.registry_store.load()
    if not custom_urls:
        user_output(translate("no_custom_registries", lang))
        return

    table = Table(
        title=translate("custom_registries", lang),
        title_justify="left",
        show_header=False,
    )
    table.add_column(translate("url", lang), style="cyan", no_wrap=True)
    for url in custom_urls:
        table.add_row(Text(url))
    console.print(table)


def show_current_registries(ctx: ChangeSourceContext, lang: str) -> None:
    """Print the registry each manager is configured with right now."""
    user_output(translate("current_registries", lang))
    for manager in SUPPORTED_MANAGERS:
        registry = ctx.package_managers.get_registry(manager)
        user_output(f"{manager}: {registry if registry else translate('not_available', lang)}")
