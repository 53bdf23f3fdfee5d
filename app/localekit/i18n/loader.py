"""Catalog builder: discovers message files and loads them into a Catalog.

Sources are either a filesystem directory or a Traversable from
importlib.resources (message files shipped inside a package). Discovery
is shallow: only files directly inside the source are read.
"""

import os
from datetime import datetime, timezone
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Dict, List, Union

from localekit.i18n.errors import MessageFileError, TranslationSourceError
from localekit.i18n.formats import Decoder, default_decoders, parse_message_file
from localekit.i18n.models import Catalog, MessageTemplate
from localekit.i18n.tags import normalize_tag
from localekit.logging import get_module_logger

logger = get_module_logger()

TranslationSource = Union[str, os.PathLike, Traversable]


class MessageFileLoader:
    """Loader for YAML, TOML and JSON message files.

    Expects files named "<prefix>.<language tag>.<format>" (for example
    "active.es.yaml") directly inside the source directory.

    Attributes:
        source: Directory (Path or Traversable) holding message files.
        default_language: Normalized default language tag.
        decoders: Format -> decoder registry used by this loader.
    """

    def __init__(self, source: TranslationSource, default_language: str):
        """Initialize message file loader.

        Args:
            source: Directory path or Traversable with message files.
            default_language: Language served when no preference matches.

        Raises:
            InvalidLanguageTagError: If default_language is not a language tag.
        """
        if isinstance(source, (str, os.PathLike)):
            source = Path(source)
        self.source: Traversable = source
        self.default_language = normalize_tag(default_language)
        self.decoders: Dict[str, Decoder] = default_decoders()

        logger.info(
            "initialized_message_file_loader",
            source=str(self.source),
            default_language=self.default_language,
        )

    def register_format(self, file_format: str, decoder: Decoder) -> None:
        """Register a decoder for a file extension.

        Args:
            file_format: Extension without the dot (e.g., "yaml").
            decoder: Callable turning raw bytes into decoded content.
        """
        self.decoders[file_format.lower().lstrip(".")] = decoder

    def list_files(self) -> List[Traversable]:
        """List message files directly inside the source, sorted by name.

        Raises:
            TranslationSourceError: If the source cannot be enumerated.
        """
        try:
            if not self.source.is_dir():
                raise TranslationSourceError(
                    str(self.source), "not found or not a directory"
                )
            entries = sorted(self.source.iterdir(), key=lambda entry: entry.name)
        except OSError as e:
            raise TranslationSourceError(str(self.source), str(e)) from e

        return [entry for entry in entries if entry.is_file()]

    def load(self) -> Catalog:
        """Load every message file into an immutable catalog.

        Files that fail to read or parse are logged and skipped. Messages
        registered twice for a language keep the last definition.

        Returns:
            Catalog with the loaded messages.

        Raises:
            TranslationSourceError: If the source cannot be enumerated.
        """
        files = self.list_files()
        messages: Dict[str, Dict[str, MessageTemplate]] = {}
        skipped = 0

        for entry in files:
            logger.debug("loading_message_file", file=entry.name)
            try:
                language, templates = parse_message_file(
                    entry.name, entry.read_bytes(), self.decoders
                )
            except (MessageFileError, OSError) as e:
                skipped += 1
                logger.warning(
                    "message_file_load_failed",
                    file=entry.name,
                    error=str(e),
                )
                continue

            language_messages = messages.setdefault(language, {})
            for template in templates:
                language_messages[template.id] = template

        catalog = Catalog(
            default_language=self.default_language,
            messages=messages,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )

        logger.info(
            "loaded_translations",
            source=str(self.source),
            file_count=len(files),
            skipped_count=skipped,
            languages=list(catalog.languages),
            message_count=catalog.message_count,
        )
        if self.default_language not in messages:
            logger.warning(
                "default_language_has_no_messages",
                default_language=self.default_language,
            )

        return catalog
