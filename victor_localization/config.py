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

"""Localization options."""

import logging
from pathlib import Path
from typing import List, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from victor_localization.culture import normalize_culture
from victor_localization.errors import ResourceFileError

logger = logging.getLogger(__name__)

SHARED_RESOURCE_NAME = "_Shared"


class LocalizationOptions(BaseModel):
    """Configuration for resource-backed localization."""

    resources_path: str = Field(
        default="resources",
        description="Directory holding resource files (<base_name>.<culture>.yaml)",
    )
    shared_resource_name: str = Field(
        default=SHARED_RESOURCE_NAME,
        description="Bundle name of the resources shared by all types of a module",
    )
    default_culture: str = Field(
        default="",
        description="Culture used when none is bound or ambient ('' = invariant)",
    )
    file_extensions: List[str] = Field(
        default_factory=lambda: [".yaml", ".yml"],
        description="Resource file extensions, tried in order",
    )
    cache_resources: bool = Field(
        default=True, description="Keep parsed resource tables in memory"
    )

    @field_validator("default_culture")
    @classmethod
    def _normalize_default_culture(cls, value: str) -> str:
        return normalize_culture(value)

    @field_validator("file_extensions")
    @classmethod
    def _normalize_extensions(cls, value: List[str]) -> List[str]:
        return [ext if ext.startswith(".") else "." + ext for ext in value]

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "LocalizationOptions":
        """Load options from a YAML file.

        Expected format:
        ```yaml
        resources_path: locales
        default_culture: en-US
        shared_resource_name: _Shared
        ```

        Args:
            path: Path to YAML file

        Returns:
            Parsed options

        Raises:
            ResourceFileError: If the file is not a YAML mapping
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Failed to load localization options from {path}: {e}")
            raise ResourceFileError(path, str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ResourceFileError(path, "expected a mapping of option names to values")
        return cls(**data)
