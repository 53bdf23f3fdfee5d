"""Feature-level fixtures for i18n system tests.

Provides message directories, loaders and bundles built from them.
"""

import pytest
import yaml

from localekit.i18n import MessageFileLoader, new_bundle
from tests.factories.i18n import make_message_file_data


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample message files.

    Returns a directory structure like:
    - active.en.yaml
    - active.es.yaml
    - active.fr.toml
    """
    data = make_message_file_data()
    for language in ("en", "es"):
        with open(tmp_path / f"active.{language}.yaml", "w", encoding="utf-8") as f:
            yaml.dump(data[language], f, allow_unicode=True)

    (tmp_path / "active.fr.toml").write_text(
        'WelcomeMessage = "Bienvenue, {{.Name}} !"\n'
        "\n"
        "[Cats]\n"
        'one = "{{.PluralCount}} chat"\n'
        'other = "{{.PluralCount}} chats"\n',
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def broken_translations_dir(temp_translations_dir):
    """Sample directory plus files that cannot be loaded."""
    (temp_translations_dir / "broken.de.yaml").write_text(
        "Hello: [unclosed\n", encoding="utf-8"
    )
    (temp_translations_dir / "broken.it.toml").write_text(
        "Hello = \n", encoding="utf-8"
    )
    (temp_translations_dir / "notes.txt").write_text("not messages", encoding="utf-8")
    (temp_translations_dir / "README.md").write_text("# Translations", encoding="utf-8")
    return temp_translations_dir


@pytest.fixture
def loader(temp_translations_dir):
    """Create MessageFileLoader for the temporary translations directory."""
    return MessageFileLoader(temp_translations_dir, "en")


@pytest.fixture
def bundle(temp_translations_dir):
    """Bundle loaded from the temporary translations directory."""
    return new_bundle(temp_translations_dir, "en")


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language values for testing."""
    return {
        "simple_es": "es",
        "specific_es_co": "es-CO",
        "with_quality": "es-CO,es;q=0.9,en;q=0.8",
        "reordered": "en;q=0.5,es;q=0.9",
        "wildcard": "es-CO,*;q=0.8",
        "invalid_quality": "es;q=invalid,fr",
        "extra_params": "es;q=0.5;level=1,en;q=0.8",
    }
