"""String tables for the user interface."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

LANGUAGES: list[tuple[str, str]] = [
    ("en", "English"),
    ("ru", "Русский"),
]


class Translator:
    """Looks up UI strings in ``<language>.json`` next to this module.

    Unknown languages fall back to English; unknown keys are returned as-is.
    """

    _strings: dict[str, str] = {}
    _fallback: dict[str, str] = {}
    _language: str = ""

    @staticmethod
    def _read_table(language: str) -> dict[str, str]:
        table_file = Path(__file__).parent / f"{language}.json"
        if not table_file.exists():
            logger.warning(f"Translation file not found: {table_file}")
            return {}
        try:
            with open(table_file, "r", encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error(f"Failed to load translations for '{language}': {e}")
            return {}

    @classmethod
    def initialize(cls, language: str) -> None:
        """Switch to a language.

        Args:
            language: Language code, e.g. "en"
        """
        if language == cls._language:
            return

        if not cls._fallback:
            cls._fallback = cls._read_table(DEFAULT_LANGUAGE)

        strings = cls._read_table(language) if language != DEFAULT_LANGUAGE else cls._fallback
        if not strings:
            language = DEFAULT_LANGUAGE
            strings = cls._fallback

        cls._language = language
        cls._strings = strings
        logger.info(f"Loaded translations for '{language}'")

    @classmethod
    def get(cls, key: str, **kwargs) -> str:
        """Get a translated string, formatted with kwargs."""
        text = cls._strings.get(key) or cls._fallback.get(key) or key
        if kwargs:
            try:
                text = text.format(**kwargs)
            except (KeyError, ValueError):
                logger.debug(f"Could not format '{key}' with {kwargs}")
        return text

    @classmethod
    def language(cls) -> str:
        return cls._language


def _(key: str, **kwargs) -> str:
    """Shortcut for Translator.get."""
    return Translator.get(key, **kwargs)


def init_translator(language: str) -> None:
    Translator.initialize(language)


def get_language() -> str:
    return Translator.language()


def get_available_languages() -> list[tuple[str, str]]:
    """Get (code, name) pairs of the bundled languages."""
    return list(LANGUAGES)
