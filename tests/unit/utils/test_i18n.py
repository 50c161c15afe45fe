from __future__ import annotations

"""
Unit tests for the I18n resource manager.
"""

import json
from pathlib import Path

from dirspace.utils.i18n import I18n, i18n


def test_bundled_locale_is_loaded() -> None:
    assert i18n.is_loaded is True
    assert i18n.locale == "en"
    assert "Commands" in i18n.t("cli.status.shell_banner", backend="local namespace")


def test_interpolation() -> None:
    text = i18n.t("cli.status.backend_remote", url="http://host:1")
    assert text == "remote namespace at http://host:1"


def test_missing_key_returns_key_or_default() -> None:
    assert i18n.t("cli.nope.missing") == "cli.nope.missing"
    assert i18n.t("cli.nope.missing", default="fallback") == "fallback"


def test_non_leaf_key_returns_key() -> None:
    assert i18n.t("cli.status") == "cli.status"


def test_interpolation_error_returns_template() -> None:
    template = i18n.t("cli.status.backend_remote")
    assert i18n.t("cli.status.backend_remote", wrong="x") == template


def test_custom_locales_path(tmp_path: Path) -> None:
    (tmp_path / "es.json").write_text(
        json.dumps({"greeting": {"hello": "Hola {name}"}}), encoding="utf-8"
    )
    manager = I18n("es", locales_path=str(tmp_path))

    assert manager.is_loaded is True
    assert manager.locale == "es"
    assert manager.t("greeting.hello", name="Ana") == "Hola Ana"


def test_missing_locale_file(tmp_path: Path) -> None:
    manager = I18n("fr", locales_path=str(tmp_path))
    assert manager.is_loaded is False
    assert manager.t("cli.status.bye") == "cli.status.bye"


def test_corrupted_locale_file(tmp_path: Path) -> None:
    (tmp_path / "en.json").write_text("{broken", encoding="utf-8")
    manager = I18n("en", locales_path=str(tmp_path))
    assert manager.is_loaded is False
