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

"""Ambient culture and culture fallback chains."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Iterator, List

from victor_localization.protocol import Culture

INVARIANT_CULTURE: Culture = ""

_current_culture: ContextVar[Culture] = ContextVar("victor_localization_culture", default="")


def normalize_culture(culture: Culture) -> Culture:
    """Normalize a locale code.

    Accepts "_" or "-" separators; lower-cases the language and
    upper-cases two-letter regions ("de_at" -> "de-AT").

    Args:
        culture: Locale code

    Returns:
        Normalized locale code ("" for the invariant culture)
    """
    parts = [p for p in culture.strip().replace("_", "-").split("-") if p]
    if not parts:
        return INVARIANT_CULTURE

    normalized = [parts[0].lower()]
    for part in parts[1:]:
        if len(part) == 2:
            normalized.append(part.upper())
        elif len(part) == 4:
            normalized.append(part.title())  # script subtag, e.g. Latn
        else:
            normalized.append(part)
    return "-".join(normalized)


def culture_chain(culture: Culture) -> List[Culture]:
    """Get a culture followed by its parent cultures.

    Example:
        culture_chain("sr-Latn-RS")
        # Returns: ["sr-Latn-RS", "sr-Latn", "sr", ""]

    Args:
        culture: Locale code

    Returns:
        Cultures from most to least specific, ending with the invariant culture
    """
    culture = normalize_culture(culture)
    chain: List[Culture] = []
    while culture:
        chain.append(culture)
        culture = culture.rpartition("-")[0]
    chain.append(INVARIANT_CULTURE)
    return chain


def get_current_culture() -> Culture:
    """Get the ambient culture of the current context."""
    return _current_culture.get()


def set_current_culture(culture: Culture) -> Token:
    """Set the ambient culture of the current context.

    Returns:
        Token that restores the previous culture via ``reset_current_culture``
    """
    return _current_culture.set(normalize_culture(culture))


def reset_current_culture(token: Token) -> None:
    """Restore the culture that was active before ``set_current_culture``."""
    _current_culture.reset(token)


@contextmanager
def culture_scope(culture: Culture) -> Iterator[Culture]:
    """Temporarily switch the ambient culture.

    Usage:
        with culture_scope("de-AT"):
            localizer["Title"]
    """
    token = set_current_culture(culture)
    try:
        yield get_current_culture()
    finally:
        reset_current_culture(token)
