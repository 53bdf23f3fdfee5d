"""Tests for localekit.i18n.translator module."""

from unittest.mock import patch

import pytest

from localekit.i18n import new_bundle, t
from localekit.i18n.models import PluralForm


class TestT:
    """Tests for the t() lookup helper."""

    def test_translates_message(self, bundle):
        localizer = bundle.get_localizer("es")
        text = t(localizer, "WelcomeMessage", {"Name": "Carlos"})
        assert text == "¡Bienvenido, Carlos!"

    def test_default_language_messages_resolve_exactly(self, bundle):
        """Every plain default-language message resolves to its template."""
        localizer = bundle.get_localizer()
        for message_id, template in bundle.catalog.get_language("en").items():
            if template.is_plural or "{{" in template.get_form(PluralForm.OTHER):
                continue
            assert t(localizer, message_id) == template.get_form(PluralForm.OTHER)

    def test_unknown_message_returns_id(self, bundle):
        assert t(bundle.get_localizer("es"), "does.not.exist") == "does.not.exist"

    def test_unknown_language_falls_through(self, bundle):
        assert t(bundle.get_localizer("xx", "es"), "menu.open") == "Abrir"

    def test_missing_template_data_returns_id(self, bundle):
        assert t(bundle.get_localizer("es"), "WelcomeMessage") == "WelcomeMessage"

    @pytest.mark.parametrize("count,expected", [(1, "1 gato"), (5, "5 gatos")])
    def test_plural_count(self, bundle, count, expected):
        assert t(bundle.get_localizer("es"), "Cats", plural_count=count) == expected

    def test_plural_without_rule_returns_id(self, tmp_path):
        (tmp_path / "active.xx.yaml").write_text(
            "Cats:\n  one: 'one cat'\n  other: 'cats'\n", encoding="utf-8"
        )
        localizer = new_bundle(tmp_path, "xx").get_localizer()
        assert t(localizer, "Cats", plural_count=1) == "Cats"
        assert t(localizer, "Cats", plural_count=5) == "Cats"

    @pytest.mark.parametrize(
        "count", [float("inf"), float("-inf"), float("nan"), "inf", "-Infinity", "NaN"]
    )
    def test_non_finite_plural_count_returns_id(self, bundle, count):
        assert t(bundle.get_localizer("es"), "Cats", plural_count=count) == "Cats"

    def test_malformed_files_do_not_break_lookup(self, broken_translations_dir):
        localizer = new_bundle(broken_translations_dir, "en").get_localizer("es")
        assert t(localizer, "Cats", plural_count=2) == "2 gatos"

    def test_fallback_is_logged_at_debug(self, bundle):
        with patch("localekit.i18n.translator.logger") as mock_logger:
            t(bundle.get_localizer("es"), "Nope")

        mock_logger.debug.assert_called_once()
        args, kwargs = mock_logger.debug.call_args
        assert args[0] == "translation_fell_back_to_message_id"
        assert kwargs["message_id"] == "Nope"
        assert kwargs["candidates"] == ["es", "en"]

    def test_success_is_not_logged(self, bundle):
        with patch("localekit.i18n.translator.logger") as mock_logger:
            t(bundle.get_localizer("es"), "menu.open")

        mock_logger.debug.assert_not_called()
