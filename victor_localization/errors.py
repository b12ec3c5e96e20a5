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

"""Localization errors.

A missing resource is never an error: lookups return a
``LocalizedString`` with ``resource_not_found`` set instead.
"""

from pathlib import Path
from typing import Union


class LocalizationError(Exception):
    """Base class for localization errors."""


class ResourceFileError(LocalizationError):
    """A resource file exists but cannot be used."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Invalid resource file {self.path}: {reason}")
