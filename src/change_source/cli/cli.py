import logging
import os

import click

from change_source.cli.display import show_current_registries, show_registry_list
from change_source.cli.output import user_output
from change_source.core.context import ChangeSourceContext, create_context
from change_source.core.deletion import run_delete_flow
from change_source.core.i18n import LOCALES, detect_language
from change_source.core.switching import (
    choose_managers,
    managers_from_flags,
    pick_registry,
    resolve_target,
    switch_registries,
)

logger = logging.getLogger(__name__)

# Enable debug logging if CHANGE_SOURCE_DEBUG environment variable is set
if os.environ.get("CHANGE_SOURCE_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

EPILOG = """\b
Examples:
  $ change-source
  $ change-source --npm
  $ change-source --all --to taobao
  $ change-source --yarn --to https://my.private.registry/
  $ change-source --list
  $ change-source --show
  $ change-source --delete
  $ change-source --lang zh
"""


@click.command("change-source", context_settings=CONTEXT_SETTINGS, epilog=EPILOG)
@click.version_option(package_name="change-source")
@click.option("--all", "all_", is_flag=True, help="Switch all package manager registries.")
@click.option("--npm", is_flag=True, help="Switch the npm registry.")
@click.option("--yarn", is_flag=True, help="Switch the yarn registry.")
@click.option("--pnpm", is_flag=True, help="Switch the pnpm registry.")
@click.option(
    "--to",
    "target",
    metavar="REGISTRY",
    help="Target registry: official, taobao, cnpm or a full URL.",
)
@click.option("--list", "list_", is_flag=True, help="List available and custom registries.")
@click.option("--show", is_flag=True, help="Show the current registry of each package manager.")
@click.option("--delete", is_flag=True, help="Delete saved custom registries.")
@click.option(
    "--lang",
    type=click.Choice(LOCALES),
    default=None,
    help="Interface language (auto-detected by default).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    all_: bool,
    npm: bool,
    yarn: bool,
    pnpm: bool,
    target: str | None,
    list_: bool,
    show: bool,
    delete: bool,
    lang: str | None,
) -> None:
    """Easily switch registries for npm, yarn and pnpm."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    app: ChangeSourceContext = ctx.obj

    language = detect_language(app.env, lang)
    logger.debug("Interface language: %s", language)

    if show:
        show_current_registries(app, language)
        return

    if list_:
        show_registry_list(app, language)
        return

    if delete:
        run_delete_flow(app, language)
        return

    managers = managers_from_flags(all_=all_, npm=npm, yarn=yarn, pnpm=pnpm)
    if not managers:
        managers = choose_managers(app, language)
    logger.debug("Target managers: %s", managers)

    if target:
        url = resolve_target(app, managers, target)
    else:
        url = pick_registry(app, managers, language)

    if not url:
        user_output(click.style("Error: ", fg="red") + "No registry URL given")
        raise SystemExit(1)

    switch_registries(app, managers, url, language)


def main() -> None:
    """CLI entry point used by the `change-source` console script."""
    cli()
