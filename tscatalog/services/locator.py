"""Locate catalog files for a language on disk."""

import logging
from pathlib import Path
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)


def candidate_tags(language_tag: str) -> List[str]:
    """
    Return file-name tags to try, most specific first.

    ``pt-BR.UTF-8`` gives ``["pt_BR", "pt"]``.
    """
    tag = language_tag.strip().split(".")[0].split("@")[0].replace("-", "_")
    if not tag:
        return []

    parts = tag.split("_")
    return ["_".join(parts[:i]) for i in range(len(parts), 0, -1)]


class CatalogLocator:
    """Finds ``<name>_<language>.ts`` files in an ordered list of directories."""

    def __init__(self, search_dirs: Sequence[Path]):
        """
        Initialize the locator.

        Args:
            search_dirs: Directories to search; earlier ones take precedence
                (an application directory holding updated translations
                before the system-wide one)
        """
        self.search_dirs = [Path(d) for d in search_dirs]

    def locate(self, name: str, language_tag: str) -> Optional[Path]:
        """Return the best catalog file for ``name`` and ``language_tag``."""
        tags = candidate_tags(language_tag)
        for directory in self.search_dirs:
            for tag in tags:
                path = directory / f"{name}_{tag}.ts"
                if path.is_file():
                    logger.info("Found catalog %s_%s in %s", name, tag, directory)
                    return path
                logger.debug("No catalog %s in %s", path.name, directory)
        return None

    def find_languages(self, name: str) -> List[str]:
        """List language tags that have a catalog for ``name``."""
        prefix = f"{name}_"
        languages = set()
        for directory in self.search_dirs:
            if not directory.is_dir():
                continue
            for path in directory.glob(f"{prefix}*.ts"):
                languages.add(path.stem[len(prefix):])
        return sorted(languages)
