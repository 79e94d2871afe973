"""Interface strings for the two supported locales.

All user-facing text is looked up through translate() so commands never
hard-code a language.
"""

from collections.abc import Mapping

LOCALES = ("en", "zh")

DEFAULT_LANGUAGE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "select_manager": "Which registries do you want to change?",
        "select_at_least_one": "Select at least one package manager",
        "choose_target": "Choose the target registry",
        "all": "All",
        "npm": "npm",
        "yarn": "yarn",
        "pnpm": "pnpm",
        "manual_input": "Manual input",
        "enter_custom": "Enter a custom registry URL",
        "url_required": "Registry URL cannot be empty",
        "custom_registries": "Custom registries",
        "no_custom_registries": "No custom registries saved.",
        "delete_custom": "Delete custom registries",
        "nothing_to_delete": "There are no custom registries to delete.",
        "delete_action": "What do you want to delete?",
        "delete_all": "Delete all custom registries",
        "delete_selected": "Select registries to delete",
        "select_to_delete": "Select the custom registries to delete",
        "deleted": "Deleted custom registries:",
        "deleted_all": "All custom registries have been deleted.",
        "none_selected": "Nothing selected, nothing deleted.",
        "list_registries": "Available registries for",
        "current_registries": "Current registries:",
        "not_available": "not available",
        "switching": "Switching registries...",
        "success": "Success",
        "error_occurred": "An error occurred:",
        "done": "Registry has been switched!",
        "name": "Name",
        "url": "URL",
    },
    "zh": {
        "select_manager": "请选择要切换的包管理器",
        "select_at_least_one": "请至少选择一个包管理器",
        "choose_target": "选择目标源",
        "all": "全部",
        "npm": "npm",
        "yarn": "yarn",
        "pnpm": "pnpm",
        "manual_input": "手动输入",
        "enter_custom": "请输入自定义源地址",
        "url_required": "源地址不能为空",
        "custom_registries": "自定义源",
        "no_custom_registries": "暂无已保存的自定义源。",
        "delete_custom": "删除自定义源",
        "nothing_to_delete": "没有可删除的自定义源。",
        "delete_action": "请选择删除方式",
        "delete_all": "删除全部自定义源",
        "delete_selected": "选择要删除的源",
        "select_to_delete": "请选择要删除的自定义源",
        "deleted": "已删除自定义源：",
        "deleted_all": "已删除全部自定义源。",
        "none_selected": "未选择任何源，未删除。",
        "list_registries": "可用源列表：",
        "current_registries": "当前各包管理器源：",
        "not_available": "不可用",
        "switching": "正在切换源...",
        "success": "成功",
        "error_occurred": "发生错误：",
        "done": "源已切换完成！",
        "name": "名称",
        "url": "地址",
    },
}


def translate(key: str, lang: str) -> str:
    """Look up a message, falling back to English and then to the key itself."""
    messages = MESSAGES.get(lang, {})
    if key in messages:
        return messages[key]
    return MESSAGES[DEFAULT_LANGUAGE].get(key, key)


def detect_language(env: Mapping[str, str], forced: str | None = None) -> str:
    """Pick the interface language.

    Order: an explicit choice, then CHANGE_SOURCE_LANG / NODE_LANG, then the
    system locale from LANG or LC_ALL. Anything that does not start with "zh"
    is English.
    """
    if forced is not None and forced in LOCALES:
        return forced
    for var in ("CHANGE_SOURCE_LANG", "NODE_LANG"):
        value = env.get(var)
        if value is not None and value in LOCALES:
            return value

    locale = env.get("LANG") or env.get("LC_ALL") or ""
    letters = "".join(ch for ch in locale.lower() if "a" <= ch <= "z")
    if letters.startswith("zh"):
        return "zh"
    return DEFAULT_LANGUAGE
