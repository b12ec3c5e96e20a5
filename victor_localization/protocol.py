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

"""Localization protocol types.

Defines the string localizer interfaces shared by resource-backed
localizers and the inheriting localizer, plus the value type they return.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Protocol, runtime_checkable

# Locale code such as "de-AT"; "" is the invariant culture
Culture = str


@dataclass(frozen=True)
class LocalizedString:
    """Result of a string lookup.

    A miss is not an error: it comes back as an instance with
    ``resource_not_found`` set and the requested name as its value.

    Attributes:
        name: Name of the requested resource
        value: Resolved (and formatted) text
        resource_not_found: True when no resource with this name was located
        search_location: Bundle that was searched, for diagnostics
    """

    name: str
    value: str
    resource_not_found: bool = False
    search_location: Optional[str] = None

    def __str__(self) -> str:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.value == other
        if isinstance(other, LocalizedString):
            return (
                self.name == other.name
                and self.value == other.value
                and self.resource_not_found == other.resource_not_found
                and self.search_location == other.search_location
            )
        return NotImplemented

    def __hash__(self) -> int:
        # Equal to plain str by value, so hash like one
        return hash(self.value)


@runtime_checkable
class StringLocalizer(Protocol):
    """Flat lookup of localized strings for one bundle."""

    def get(self, name: str, *arguments: Any) -> LocalizedString:
        """Get the string resource with the given name.

        Args:
            name: Resource name
            *arguments: Values to format the string with

        Returns:
            The (formatted) string, or a not-found entry
        """
        ...

    def __getitem__(self, name: str) -> LocalizedString:
        ...

    def get_all_strings(self, include_parent_cultures: bool = True) -> Iterable[LocalizedString]:
        """Enumerate every string this localizer can provide.

        Args:
            include_parent_cultures: Also include strings from parent cultures

        Returns:
            Iterable of located strings
        """
        ...

    def with_culture(self, culture: Culture) -> "StringLocalizer":
        """Create a localizer bound to a specific culture."""
        ...


@runtime_checkable
class StringLocalizerFactory(Protocol):
    """Creates flat localizers for types and for named bundles."""

    def create(self, subject: Any) -> StringLocalizer:
        """Create a localizer for the resources of a type."""
        ...

    def create_for_bundle(self, base_name: str, location: str) -> StringLocalizer:
        """Create a localizer for a named bundle within a module.

        Args:
            base_name: Bundle name (e.g., "_Shared")
            location: Module identity the bundle belongs to
        """
        ...
