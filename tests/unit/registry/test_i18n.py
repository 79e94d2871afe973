"""Tests for message lookup and language detection."""

from change_source.core.i18n import MESSAGES, detect_language, translate


def test_every_key_is_translated() -> None:
    assert set(MESSAGES["en"]) == set(MESSAGES["zh"])


def test_translate_falls_back_to_english_then_key() -> None:
    assert translate("manual_input", "zh") == "手动输入"
    assert translate("manual_input", "fr") == "Manual input"
    assert translate("no_such_key", "en") == "no_such_key"


def test_forced_language_wins() -> None:
    assert detect_language({"LANG": "zh_CN.UTF-8"}, "en") == "en"


def test_language_from_env_override() -> None:
    assert detect_language({"CHANGE_SOURCE_LANG": "zh", "LANG": "en_US.UTF-8"}) == "zh"
    assert detect_language({"NODE_LANG": "zh"}) == "zh"
    assert detect_language({"CHANGE_SOURCE_LANG": "de", "LANG": "en_US"}) == "en"


def test_language_from_locale() -> None:
    assert detect_language({"LANG": "zh_CN.UTF-8"}) == "zh"
    assert detect_language({"LC_ALL": "zh_TW"}) == "zh"
    assert detect_language({"LANG": "C.UTF-8"}) == "en"
    assert detect_language({}) == "en"
