"""Standalone removal of saved custom registries (the --delete mode)."""

import logging
from typing import Literal

from change_source.core.context import ChangeSourceContext
from change_source.core.i18n import translate
from change_source.core.prompter.types import PromptChoice

logger = logging.getLogger(__name__)

DeleteAction = Literal["all", "selected"]


def run_delete_flow(ctx: ChangeSourceContext, lang: str) -> None:
    """Delete all or some saved custom registries, then stop.

    Unlike the delete entry of the registry menu, this never leads back to a
    registry selection.
    """
    custom_urls = ctx.registry_store.load()
    if not custom_urls:
        ctx.feedback.info(translate("nothing_to_delete", lang))
        return

    actions: list[PromptChoice[DeleteAction]] = [
        PromptChoice(display=translate("delete_all", lang), value="all"),
        PromptChoice(display=translate("delete_selected", lang), value="selected"),
    ]
    action = ctx.prompter.select(translate("delete_action", lang), actions)

    if action == "all":
        ctx.registry_store.remove(custom_urls)
        logger.debug("Removed all %d custom registries", len(custom_urls))
        ctx.feedback.success(translate("deleted_all", lang))
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
