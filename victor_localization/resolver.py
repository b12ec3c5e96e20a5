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

"""Inheriting string localizer.

Searches for string resources in the class hierarchy of the requesting
type. Given ``class B(A)``, a lookup on B's localizer tries B's resources,
then A's, and so on up to (but excluding) ``object``. Only after the whole
hierarchy misses is the module's shared bundle consulted.

Example:
    localizer = InheritingLocalizer(B, factory)
    localizer["Title"]            # B, then A, then shared
    localizer.parent["Title"]     # A, then shared
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Iterator, Optional, Set

from victor_localization.ancestry import TypeAncestry, get_default_ancestry
from victor_localization.config import SHARED_RESOURCE_NAME
from victor_localization.protocol import (
    Culture,
    LocalizedString,
    StringLocalizer,
    StringLocalizerFactory,
)

logger = logging.getLogger(__name__)

_UNSET = object()


def _discard_not_found(result: Optional[LocalizedString]) -> Optional[LocalizedString]:
    if result is None or result.resource_not_found:
        return None
    return result


class InheritingLocalizer:
    """String localizer that walks the ancestry of its subject.

    Implements ``StringLocalizer``, so it can stand in wherever a flat
    localizer is expected.
    """

    def __init__(
        self,
        subject: Any,
        factory: StringLocalizerFactory,
        culture: Optional[Culture] = None,
        *,
        ancestry: Optional[TypeAncestry] = None,
        shared_resource_name: str = SHARED_RESOURCE_NAME,
    ):
        """Initialize localizer.

        Args:
            subject: Type for which localization is requested
            factory: Provides the flat per-type and shared localizers
            culture: Optional forced culture of the localized strings
            ancestry: Ancestry introspection (Python classes if None)
            shared_resource_name: Bundle name of the module's shared resources
        """
        self.subject = subject
        self.factory = factory
        self.culture = culture
        self.ancestry = ancestry or get_default_ancestry()
        self.shared_resource_name = shared_resource_name

        localizer = factory.create(subject)
        if culture is not None:
            localizer = localizer.with_culture(culture)
        self.localizer: StringLocalizer = localizer

        self._parent: Any = _UNSET
        self._shared: Optional[StringLocalizer] = None
        self._lock = threading.Lock()

    @property
    def parent(self) -> Optional["InheritingLocalizer"]:
        """Localizer for the ancestor of the subject.

        Returns:
            Cached ancestor localizer, or None at the end of the hierarchy
        """
        if self._parent is _UNSET:
            with self._lock:
                if self._parent is _UNSET:
                    self._parent = self._create_parent()
        return self._parent

    def _create_parent(self) -> Optional["InheritingLocalizer"]:
        ancestor = self.ancestry.ancestor_of(self.subject)
        if ancestor is None or self.ancestry.is_root(ancestor):
            return None

        logger.debug(f"Creating ancestor localizer for {ancestor!r} (from {self.subject!r})")
        return InheritingLocalizer(
            ancestor,
            self.factory,
            self.culture,
            ancestry=self.ancestry,
            shared_resource_name=self.shared_resource_name,
        )

    @property
    def shared(self) -> StringLocalizer:
        """Localizer for the resources shared by the subject's module."""
        if self._shared is None:
            with self._lock:
                if self._shared is None:
                    location = self.ancestry.module_of(self.subject)
                    shared = self.factory.create_for_bundle(self.shared_resource_name, location)
                    if self.culture is not None:
                        shared = shared.with_culture(self.culture)
                    logger.debug(f"Created shared localizer for module '{location}'")
                    self._shared = shared
        return self._shared

    def get(self, name: str, *arguments: Any) -> LocalizedString:
        """Get the string resource with the given name.

        Args:
            name: Resource name
            *arguments: Values to format the string with

        Returns:
            The most specific string found in the hierarchy, the shared
            string, or the local not-found result
        """
        result = self.localizer.get(name, *arguments)
        if not result.resource_not_found:
            return result

        parent = self.parent
        found = parent._get_from_hierarchy(name, arguments) if parent else None
        if found is None:
            found = _discard_not_found(self.shared.get(name, *arguments))
        return found if found is not None else result

    def _get_from_hierarchy(self, name: str, arguments: tuple) -> Optional[LocalizedString]:
        # Shared bundles are consulted once, by the node the lookup started on
        node: Optional[InheritingLocalizer] = self
        while node is not None:
            result = node.localizer.get(name, *arguments)
            if not result.resource_not_found:
                return result
            node = node.parent
        return None

    def __getitem__(self, name: str) -> LocalizedString:
        return self.get(name)

    def get_all_strings(self, include_parent_cultures: bool = True) -> Iterator[LocalizedString]:
        """Get all the string resources defined in the hierarchy.

        For strings defined on multiple levels only the most specific one
        is returned. Shared strings are not returned.

        Args:
            include_parent_cultures: Also include strings from parent cultures
        """
        names: Set[str] = set()
        node: Optional[InheritingLocalizer] = self
        while node is not None:
            for string in node.localizer.get_all_strings(include_parent_cultures):
                if string.name not in names:
                    names.add(string.name)
                    yield string
            node = node.parent

    def with_culture(self, culture: Culture) -> "InheritingLocalizer":
        """Create a new localizer for the same subject bound to a culture."""
        return InheritingLocalizer(
            self.subject,
            self.factory,
            culture,
            ancestry=self.ancestry,
            shared_resource_name=self.shared_resource_name,
        )

    def __repr__(self) -> str:
        return f"InheritingLocalizer({self.subject!r}, culture={self.culture!r})"
