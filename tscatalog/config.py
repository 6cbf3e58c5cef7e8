"""Configuration management for the catalog engine."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from rich.logging import RichHandler

load_dotenv()


def _split_env(name: str, default: str = "") -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass
class Config:
    """Application configuration."""

    # Catalog locations
    translations_dir: str = field(
        default_factory=lambda: os.getenv("TSCATALOG_TRANSLATIONS_DIR", "translations")
    )
    extra_dirs: List[str] = field(default_factory=lambda: _split_env("TSCATALOG_EXTRA_DIRS"))
    catalog_names: List[str] = field(
        default_factory=lambda: _split_env("TSCATALOG_CATALOGS", "app")
    )

    # Active language; empty means the system locale
    language: str = field(default_factory=lambda: os.getenv("TSCATALOG_LANGUAGE", ""))

    log_level: str = field(default_factory=lambda: os.getenv("TSCATALOG_LOG_LEVEL", "INFO"))

    # Language display names
    LANGUAGE_NAMES: dict = field(default_factory=lambda: {
        "ar": "Arabic",
        "cs": "Czech",
        "de": "German",
        "en": "English",
        "es": "Spanish",
        "fi": "Finnish",
        "fr": "French",
        "it": "Italian",
        "ja": "Japanese",
        "nl": "Dutch",
        "pl": "Polish",
        "pt": "Portuguese",
        "pt_BR": "Portuguese - Brazil",
        "ro": "Romanian",
        "ru": "Russian",
        "sk": "Slovak",
        "uk": "Ukrainian",
        "zh_CN": "Simplified-Chinese",
    })

    @property
    def search_dirs(self) -> List[Path]:
        """Directories searched for catalogs, application directory first."""
        return [Path(self.translations_dir), *(Path(d) for d in self.extra_dirs)]

    def language_name(self, language_tag: str) -> str:
        """Return a display name for a tag, falling back to the tag itself."""
        if language_tag in self.LANGUAGE_NAMES:
            return self.LANGUAGE_NAMES[language_tag]
        return self.LANGUAGE_NAMES.get(language_tag.split("_")[0], language_tag)

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if not Path(self.translations_dir).is_dir():
            errors.append(f"TSCATALOG_TRANSLATIONS_DIR does not exist: {self.translations_dir}")
        if not self.catalog_names:
            errors.append("TSCATALOG_CATALOGS is empty")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            errors.append(f"TSCATALOG_LOG_LEVEL is not a log level: {self.log_level}")
        return errors


def configure_logging(level: Optional[str] = None) -> None:
    """Send log records to the console through rich."""
    level_name = (level or config.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


# Global config instance
config = Config()
