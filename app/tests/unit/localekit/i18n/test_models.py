"""Tests for localekit.i18n.models module."""

import pytest

from localekit.i18n import Catalog, MessageTemplate, PluralForm
from tests.factories.i18n import make_catalog, make_message_template


class TestPluralForm:
    """Tests for PluralForm enum."""

    def test_from_string(self):
        assert PluralForm.from_string("one") is PluralForm.ONE
        assert PluralForm.from_string("OTHER") is PluralForm.OTHER

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            PluralForm.from_string("several")


class TestMessageTemplate:
    """Tests for MessageTemplate."""

    def test_from_string_value(self):
        """A plain string becomes the OTHER form."""
        template = MessageTemplate.from_value("Goodbye", "Bye")
        assert template.id == "Goodbye"
        assert template.get_form(PluralForm.OTHER) == "Bye"
        assert not template.is_plural

    def test_from_mapping_value(self):
        """A mapping of reserved keys becomes a plural message."""
        template = MessageTemplate.from_value(
            "Cats",
            {
                "description": "Cat counter",
                "One": "{{.PluralCount}} cat",
                "other": "{{.PluralCount}} cats",
                "hash": "sha1-abc",
            },
        )
        assert template.is_plural
        assert template.get_form(PluralForm.ONE) == "{{.PluralCount}} cat"
        assert template.get_form(PluralForm.OTHER) == "{{.PluralCount}} cats"
        assert template.get_form(PluralForm.FEW) is None
        assert template.description == "Cat counter"
        assert template.hash == "sha1-abc"

    def test_custom_delimiters(self):
        template = MessageTemplate.from_value(
            "Hi", {"leftdelim": "<<", "rightdelim": ">>", "other": "Hi <<.Name>>"}
        )
        assert template.left_delim == "<<"
        assert template.right_delim == ">>"

    def test_default_delimiters(self):
        template = make_message_template()
        assert template.left_delim == "{{"
        assert template.right_delim == "}}"

    def test_unknown_keys_are_ignored(self):
        template = MessageTemplate.from_value("Hi", {"other": "Hi", "comment": 3})
        assert dict(template.forms) == {PluralForm.OTHER: "Hi"}

    def test_non_string_form_raises(self):
        with pytest.raises(ValueError):
            MessageTemplate.from_value("Cats", {"one": 1, "other": "cats"})

    def test_invalid_value_raises(self):
        with pytest.raises(ValueError):
            MessageTemplate.from_value("Cats", 42)

    def test_template_is_immutable(self):
        template = make_message_template()
        with pytest.raises(AttributeError):
            template.id = "Other"
        with pytest.raises(TypeError):
            template.forms[PluralForm.ONE] = "x"


class TestCatalog:
    """Tests for Catalog."""

    def test_get_message(self):
        catalog = make_catalog()
        template = catalog.get_message("es", "WelcomeMessage")
        assert template.get_form(PluralForm.OTHER) == "¡Bienvenido, {{.Name}}!"

    def test_get_message_missing(self):
        catalog = make_catalog()
        assert catalog.get_message("es", "Goodbye") is None
        assert catalog.get_message("de", "Goodbye") is None

    def test_has_message(self):
        catalog = make_catalog()
        assert catalog.has_message("en", "Goodbye")
        assert not catalog.has_message("es", "Goodbye")

    def test_languages_lists_default_first(self):
        catalog = make_catalog(
            default_language="es",
            messages={"en": {"a": "a"}, "es": {"a": "a"}, "de": {"a": "a"}},
        )
        assert catalog.languages == ("es", "de", "en")

    def test_default_language_always_present(self):
        catalog = Catalog(default_language="pt", messages={})
        assert catalog.languages == ("pt",)
        assert dict(catalog.get_language("pt")) == {}

    def test_message_count(self):
        assert make_catalog().message_count == 3

    def test_catalog_is_read_only(self):
        catalog = make_catalog()
        with pytest.raises(TypeError):
            catalog.messages["de"] = {}
        with pytest.raises(TypeError):
            catalog.messages["en"]["New"] = make_message_template("New")
        with pytest.raises(AttributeError):
            catalog.default_language = "es"

    def test_catalog_does_not_share_source_dicts(self):
        source = {"en": {"Hi": make_message_template("Hi", "Hi")}}
        catalog = Catalog(default_language="en", messages=source)
        source["en"]["Bye"] = make_message_template("Bye", "Bye")
        assert not catalog.has_message("en", "Bye")
