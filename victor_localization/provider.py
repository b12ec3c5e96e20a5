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

"""Localizer provider hooks.

Frameworks that localize validation messages or form labels typically
accept a ``(type, factory) -> localizer`` callable. Registering
``inheriting_localizer_provider`` there makes every lookup fall back
through the model's base classes.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from victor_localization.config import SHARED_RESOURCE_NAME, LocalizationOptions
from victor_localization.protocol import Culture, StringLocalizer, StringLocalizerFactory
from victor_localization.resolver import InheritingLocalizer
from victor_localization.resources import ResourceStringLocalizerFactory

logger = logging.getLogger(__name__)

# Type alias for framework localizer provider hooks
LocalizerProvider = Callable[[Any, StringLocalizerFactory], StringLocalizer]


def _shared_resource_name(factory: StringLocalizerFactory) -> str:
    """Get the shared bundle name configured on a factory, if it has options."""
    options = getattr(factory, "options", None)
    return getattr(options, "shared_resource_name", None) or SHARED_RESOURCE_NAME


def inheriting_localizer_provider(
    subject: Any, factory: StringLocalizerFactory
) -> StringLocalizer:
    """Create an inheriting localizer for a framework provider hook."""
    return InheritingLocalizer(
        subject, factory, shared_resource_name=_shared_resource_name(factory)
    )


# Global default factory
_default_factory: Optional[StringLocalizerFactory] = None


def configure(factory: Optional[StringLocalizerFactory] = None, **options: Any) -> StringLocalizerFactory:
    """Set the default factory used by ``get_localizer``.

    Args:
        factory: Factory to install; built from ``options`` if None
        **options: ``LocalizationOptions`` fields

    Returns:
        The installed factory
    """
    global _default_factory
    if factory is None:
        factory = ResourceStringLocalizerFactory.from_options(LocalizationOptions(**options))
    _default_factory = factory
    logger.info(f"Configured default localizer factory: {type(factory).__name__}")
    return factory


def get_default_factory() -> StringLocalizerFactory:
    """Get the default factory (creates one from default options if needed)."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ResourceStringLocalizerFactory.from_options(LocalizationOptions())
    return _default_factory


def get_localizer(subject: Any, culture: Optional[Culture] = None) -> InheritingLocalizer:
    """Get an inheriting localizer from the default factory.

    Args:
        subject: Type for which localization is requested
        culture: Optional forced culture

    Returns:
        Inheriting localizer for ``subject``
    """
    factory = get_default_factory()
    return InheritingLocalizer(
        subject, factory, culture, shared_resource_name=_shared_resource_name(factory)
    )
