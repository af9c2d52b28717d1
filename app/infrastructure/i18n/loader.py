"""Translation loading interface and implementations.

Defines the contract for loading translation tables and provides the
YAML-based loader used for the bundled surface tables.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml

from core.logging import get_module_logger
from infrastructure.i18n.models import Locale, TranslationCatalog, TranslationEntry

logger = get_module_logger()

_LOCALE_CODES = frozenset(locale.value for locale in Locale)


class TranslationLoader(ABC):
    """Abstract base for translation loaders."""

    @abstractmethod
    def load(self, name: str) -> TranslationCatalog:
        """Load the translation table called ``name``.

        Args:
            name: Table name (e.g., "admin", "lms").

        Returns:
            TranslationCatalog with loaded entries.

        Raises:
            FileNotFoundError: If the table does not exist.
            ValueError: If the table format is invalid.
        """

    @abstractmethod
    def load_all(self) -> Dict[str, TranslationCatalog]:
        """Load every available table, keyed by name."""


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML translation tables.

    A table named ``lms`` is read from ``lms.yml`` plus any ``lms.<part>.yml``
    files, merged in sorted filename order. Files contain nested sections
    whose leaves map locale codes to text:

        common:
          save:
            az: Saxla
            ru: Сохранить
            en: Save

    Leaves are flattened into dot-separated keys ("common.save").

    Attributes:
        translations_dir: Path to directory containing YAML files.
        cache: Loaded catalogs by table name.
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML translation files.
            use_cache: Whether to cache loaded catalogs in memory.

        Raises:
            ValueError: If translations_dir does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, TranslationCatalog] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def _files_for(self, name: str) -> List[Path]:
        files = []
        main_file = self.translations_dir / f"{name}.yml"
        if main_file.exists():
            files.append(main_file)
        files.extend(sorted(self.translations_dir.glob(f"{name}.*.yml")))
        return files

    def load(self, name: str) -> TranslationCatalog:
        """Load and merge all YAML files of one table.

        Raises:
            FileNotFoundError: If no YAML file exists for ``name``.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and name in self.cache:
            logger.debug("loaded_from_cache", table=name)
            return self.cache[name]

        yaml_files = self._files_for(name)
        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for table {name} in {self.translations_dir}"
            )

        catalog = TranslationCatalog(name=name)
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

            if data:
                file_catalog = TranslationCatalog(name=name)
                self._merge_yaml_data(file_catalog, data, yaml_file)
                catalog.merge(file_catalog)

        catalog.loaded_at = datetime.now(timezone.utc).isoformat()

        logger.info(
            "loaded_translations",
            table=name,
            file_count=len(yaml_files),
            key_count=len(catalog.entries),
        )

        if self.use_cache:
            self.cache[name] = catalog

        return catalog

    def load_all(self) -> Dict[str, TranslationCatalog]:
        """Load every table found in the translations directory.

        Raises:
            ValueError: If no translation files are found at all.
        """
        names = {path.name.split(".")[0] for path in self.translations_dir.glob("*.yml")}
        if not names:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        return {name: self.load(name) for name in sorted(names)}

    def _merge_yaml_data(
        self,
        catalog: TranslationCatalog,
        data: Any,
        source_file: Path,
        prefix: str = "",
    ) -> None:
        """Flatten nested YAML sections into catalog entries."""
        if not isinstance(data, Mapping):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return

        for name, value in data.items():
            key = f"{prefix}{name}"
            if _is_entry(value):
                entry = TranslationEntry.from_mapping(value)
                if entry.text_for(Locale.EN) is None:
                    logger.warning(
                        "translation_missing_fallback",
                        key=key,
                        file=str(source_file),
                        fallback_locale=Locale.EN.value,
                    )
                catalog.set_entry(key, entry)
            elif isinstance(value, Mapping):
                self._merge_yaml_data(catalog, value, source_file, prefix=f"{key}.")
            else:
                logger.warning(
                    "invalid_translation_entry",
                    key=key,
                    file=str(source_file),
                    expected="mapping of locale to text",
                )

    def clear_cache(self) -> None:
        """Clear all cached translations."""
        self.cache.clear()
        logger.info("cleared_translation_cache")


def _is_entry(value: Any) -> bool:
    """A leaf entry is a non-empty mapping keyed only by locale codes."""
    return (
        isinstance(value, Mapping)
        and bool(value)
        and all(str(k) in _LOCALE_CODES for k in value.keys())
        and not any(isinstance(v, Mapping) for v in value.values())
    )
