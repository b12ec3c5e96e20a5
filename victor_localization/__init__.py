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

"""Inheriting Localization Package.

Resolves localized strings for a type by searching the resources of the
type itself, then those of its base classes, then the resources shared
by its module.

Package Structure:
    protocol.py   - LocalizedString and the localizer protocols
    ancestry.py   - Type ancestry introspection (classes, static tables)
    culture.py    - Ambient culture and parent-culture chains
    resolver.py   - InheritingLocalizer
    resources.py  - YAML / in-memory resource localizers
    config.py     - LocalizationOptions
    provider.py   - Provider hook and default factory
    errors.py     - Exceptions

Usage:
    from victor_localization import (
        InheritingLocalizer,
        LocalizationOptions,
        ResourceStringLocalizerFactory,
    )

    factory = ResourceStringLocalizerFactory.from_options(
        LocalizationOptions(resources_path="locales")
    )
    localizer = InheritingLocalizer(Invoice, factory)
    localizer["Total"]
    localizer.with_culture("de")["Total"]
"""

from victor_localization.ancestry import (
    ClassAncestry,
    StaticAncestry,
    TypeAncestry,
    resource_base_name,
)
from victor_localization.config import SHARED_RESOURCE_NAME, LocalizationOptions
from victor_localization.culture import (
    culture_chain,
    culture_scope,
    get_current_culture,
    normalize_culture,
    reset_current_culture,
    set_current_culture,
)
from victor_localization.errors import LocalizationError, ResourceFileError
from victor_localization.protocol import (
    Culture,
    LocalizedString,
    StringLocalizer,
    StringLocalizerFactory,
)
from victor_localization.provider import (
    configure,
    get_default_factory,
    get_localizer,
    inheriting_localizer_provider,
)
from victor_localization.resolver import InheritingLocalizer
from victor_localization.resources import (
    DictResourceSource,
    ResourceSource,
    ResourceStringLocalizer,
    ResourceStringLocalizerFactory,
    YamlResourceSource,
)

__all__ = [
    # Core
    "InheritingLocalizer",
    "LocalizedString",
    "StringLocalizer",
    "StringLocalizerFactory",
    "Culture",
    # Ancestry
    "TypeAncestry",
    "ClassAncestry",
    "StaticAncestry",
    "resource_base_name",
    # Culture
    "culture_chain",
    "culture_scope",
    "get_current_culture",
    "set_current_culture",
    "reset_current_culture",
    "normalize_culture",
    # Resources
    "ResourceSource",
    "YamlResourceSource",
    "DictResourceSource",
    "ResourceStringLocalizer",
    "ResourceStringLocalizerFactory",
    # Configuration
    "LocalizationOptions",
    "SHARED_RESOURCE_NAME",
    # Provider
    "inheriting_localizer_provider",
    "configure",
    "get_default_factory",
    "get_localizer",
    # Errors
    "LocalizationError",
    "ResourceFileError",
]

__version__ = "0.1.0"
