# Copyright 2025 Vijaykumar Singh <singhvjd@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Resource-backed string localizers.

Resources are flat name -> text tables, one per (base name, culture).
A base name is either a type's ``"module.QualName"`` or a shared bundle's
``"<module>.<bundle>"``. Tables come from a ``ResourceSource``:

    YamlResourceSource   - <root>/<base_name>.<culture>.yaml files
    DictResourceSource   - in-memory dictionaries

Example layout for ``app.models.Invoice`` with German resources:

    resources/
        app.models.Invoice.yaml        # invariant culture
        app.models.Invoice.de.yaml
        app._Shared.yaml

Culture suffixes are matched as "de-AT", "de-at", "de_AT" or "de_at".
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Protocol, Set, Tuple, Union

import yaml

from victor_localization.ancestry import resource_base_name
from victor_localization.config import LocalizationOptions
from victor_localization.culture import culture_chain, get_current_culture, normalize_culture
from victor_localization.errors import ResourceFileError
from victor_localization.protocol import Culture, LocalizedString

logger = logging.getLogger(__name__)

ResourceTable = Dict[str, str]


class ResourceSource(Protocol):
    """Loads raw resource tables."""

    def load(self, base_name: str, culture: Culture) -> Optional[Dict[str, Any]]:
        """Load the table for a base name and a single culture.

        Returns:
            Raw mapping, or None if no resources exist for this culture
        """
        ...


class YamlResourceSource:
    """Reads resource tables from YAML files in a directory."""

    def __init__(
        self,
        root: Union[str, Path],
        file_extensions: Optional[List[str]] = None,
    ):
        """Initialize YAML source.

        Args:
            root: Directory holding resource files
            file_extensions: Extensions tried in order (default: .yaml, .yml)
        """
        self.root = Path(root)
        self.file_extensions = file_extensions or [".yaml", ".yml"]

    def find_file(self, base_name: str, culture: Culture) -> Optional[Path]:
        """Find the resource file for a base name and culture.

        The culture suffix may be spelled "de-AT", "de-at", "de_AT" or "de_at".
        """
        if not culture:
            stems = [base_name]
        else:
            spellings = dict.fromkeys(
                [culture, culture.lower(), culture.replace("-", "_"), culture.lower().replace("-", "_")]
            )
            stems = [f"{base_name}.{spelling}" for spelling in spellings]

        for stem in stems:
            for ext in self.file_extensions:
                path = self.root / f"{stem}{ext}"
                if path.is_file():
                    return path
        return None

    def load(self, base_name: str, culture: Culture) -> Optional[Dict[str, Any]]:
        path = self.find_file(base_name, culture)
        if path is None:
            return None

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse resource file {path}: {e}")
            raise ResourceFileError(path, str(e)) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.error(f"Resource file {path} does not contain a mapping")
            raise ResourceFileError(path, "expected a mapping of names to strings")
        return data


class DictResourceSource:
    """Serves resource tables from memory.

    Usage:
        source = DictResourceSource({
            "app.models.Invoice": {"": {"Total": "Total"}, "de": {"Total": "Summe"}},
        })
    """

    def __init__(self, tables: Optional[Dict[str, Dict[Culture, Dict[str, Any]]]] = None):
        self._tables: Dict[str, Dict[Culture, Dict[str, Any]]] = {}
        for base_name, cultures in (tables or {}).items():
            for culture, entries in cultures.items():
                self.add(base_name, culture, entries)

    def add(self, base_name: str, culture: Culture, entries: Dict[str, Any]) -> None:
        """Add or extend the table for a base name and culture."""
        table = self._tables.setdefault(base_name, {}).setdefault(normalize_culture(culture), {})
        table.update(entries)

    def load(self, base_name: str, culture: Culture) -> Optional[Dict[str, Any]]:
        table = self._tables.get(base_name, {}).get(culture)
        return dict(table) if table is not None else None


def _coerce_table(base_name: str, culture: Culture, data: Dict[str, Any]) -> ResourceTable:
    """Keep scalar entries as text; drop nested values."""
    table: ResourceTable = {}
    for name, value in data.items():
        if value is None:
            table[str(name)] = ""
        elif isinstance(value, (str, int, float, bool)):
            table[str(name)] = str(value)
        else:
            logger.warning(
                f"Skipping non-scalar resource '{name}' in {base_name} [{culture or 'invariant'}]"
            )
    return table


class ResourceStringLocalizer:
    """Flat localizer over one resource bundle.

    Lookups walk the culture chain ("de-AT" -> "de" -> invariant). Without
    a bound culture the ambient culture is read at call time.
    """

    def __init__(
        self,
        factory: "ResourceStringLocalizerFactory",
        base_name: str,
        culture: Optional[Culture] = None,
    ):
        self._factory = factory
        self.base_name = base_name
        self.culture = normalize_culture(culture) if culture is not None else None

    @property
    def effective_culture(self) -> Culture:
        """Culture used for the next lookup."""
        if self.culture is not None:
            return self.culture
        return get_current_culture() or self._factory.options.default_culture

    def get(self, name: str, *arguments: Any) -> LocalizedString:
        for culture in culture_chain(self.effective_culture):
            table = self._factory.get_table(self.base_name, culture)
            if name in table:
                value = table[name]
                if arguments:
                    value = value.format(*arguments)
                return LocalizedString(name, value, search_location=self.base_name)

        return LocalizedString(
            name, name, resource_not_found=True, search_location=self.base_name
        )

    def __getitem__(self, name: str) -> LocalizedString:
        return self.get(name)

    def get_all_strings(self, include_parent_cultures: bool = True) -> Iterator[LocalizedString]:
        culture = self.effective_culture
        cultures = culture_chain(culture) if include_parent_cultures else [culture]
        seen: Set[str] = set()
        for c in cultures:
            for name, value in self._factory.get_table(self.base_name, c).items():
                if name not in seen:
                    seen.add(name)
                    yield LocalizedString(name, value, search_location=self.base_name)

    def with_culture(self, culture: Culture) -> "ResourceStringLocalizer":
        return ResourceStringLocalizer(self._factory, self.base_name, culture)

    def __repr__(self) -> str:
        return f"ResourceStringLocalizer({self.base_name!r}, culture={self.culture!r})"


class ResourceStringLocalizerFactory:
    """Creates resource-backed localizers and caches parsed tables.

    Usage:
        factory = ResourceStringLocalizerFactory.from_options(
            LocalizationOptions(resources_path="locales")
        )
        localizer = factory.create(Invoice)
        shared = factory.create_for_bundle("_Shared", "app")
    """

    def __init__(
        self,
        source: ResourceSource,
        options: Optional[LocalizationOptions] = None,
    ):
        """Initialize factory.

        Args:
            source: Where resource tables come from
            options: Localization options (defaults if None)
        """
        self.source = source
        self.options = options or LocalizationOptions()
        self._tables: Dict[Tuple[str, Culture], ResourceTable] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_options(cls, options: LocalizationOptions) -> "ResourceStringLocalizerFactory":
        """Create a factory reading YAML files from ``options.resources_path``."""
        source = YamlResourceSource(options.resources_path, options.file_extensions)
        return cls(source, options)

    def create(self, subject: Any) -> ResourceStringLocalizer:
        return ResourceStringLocalizer(self, resource_base_name(subject))

    def create_for_bundle(self, base_name: str, location: str) -> ResourceStringLocalizer:
        full_name = f"{location}.{base_name}" if location else base_name
        return ResourceStringLocalizer(self, full_name)

    def get_table(self, base_name: str, culture: Culture) -> ResourceTable:
        """Get the parsed table for a base name and a single culture.

        Returns:
            Name -> text mapping (empty if the culture has no resources)

        Raises:
            ResourceFileError: If the underlying resource file is invalid
        """
        key = (base_name, culture)
        if self.options.cache_resources:
            with self._lock:
                cached = self._tables.get(key)
            if cached is not None:
                return cached

        data = self.source.load(base_name, culture)
        table = _coerce_table(base_name, culture, data) if data else {}

        if self.options.cache_resources:
            with self._lock:
                table = self._tables.setdefault(key, table)
            logger.debug(
                f"Cached {len(table)} resources for {base_name} [{culture or 'invariant'}]"
            )
        return table

    def clear_cache(self) -> None:
        """Drop all cached resource tables."""
        with self._lock:
            self._tables.clear()
