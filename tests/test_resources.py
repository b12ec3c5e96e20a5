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

"""Tests for resource-backed localizers."""

import logging

import pytest

from victor_localization import (
    ClassAncestry,
    DictResourceSource,
    InheritingLocalizer,
    LocalizationOptions,
    ResourceFileError,
    ResourceStringLocalizerFactory,
    StringLocalizer,
    YamlResourceSource,
    culture_scope,
    resource_base_name,
)


class Animal:
    pass


class Dog(Animal):
    pass


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def resources_dir(tmp_path):
    """Resource files for the Animal <- Dog hierarchy."""
    animal = resource_base_name(Animal)
    dog = resource_base_name(Dog)
    shared = f"{ClassAncestry().module_of(Dog)}._Shared"

    _write(tmp_path / f"{animal}.yaml", 'Name: "Animal"\nLegs: "Legs: {0}"\nSound: "..."\n')
    _write(tmp_path / f"{animal}.de.yaml", 'Name: "Tier"\n')
    _write(tmp_path / f"{dog}.yaml", 'Sound: "Woof"\n')
    _write(tmp_path / f"{dog}.de-AT.yml", 'Sound: "Wuff"\n')
    _write(tmp_path / f"{shared}.yaml", 'Cancel: "Cancel"\n')
    _write(tmp_path / f"{shared}.de.yaml", 'Cancel: "Abbrechen"\n')
    return tmp_path


@pytest.fixture
def factory(resources_dir):
    return ResourceStringLocalizerFactory.from_options(
        LocalizationOptions(resources_path=str(resources_dir))
    )


class TestYamlResourceSource:
    """Tests for YAML resource files."""

    def test_invariant_file(self, resources_dir):
        source = YamlResourceSource(resources_dir)

        assert source.load(resource_base_name(Dog), "") == {"Sound": "Woof"}

    def test_missing_file(self, resources_dir):
        source = YamlResourceSource(resources_dir)

        assert source.load(resource_base_name(Dog), "fr") is None

    def test_alternate_extension(self, resources_dir):
        source = YamlResourceSource(resources_dir)

        path = source.find_file(resource_base_name(Dog), "de-AT")
        assert path is not None
        assert path.suffix == ".yml"

    @pytest.mark.parametrize("suffix", ["de-at", "de_AT", "de_at"])
    def test_culture_suffix_spellings(self, tmp_path, suffix):
        """Test that lower-case and underscore culture suffixes are found."""
        _write(tmp_path / f"things.{suffix}.yaml", 'Ok: "Passt"\n')
        source = YamlResourceSource(tmp_path)

        assert source.load("things", "de-AT") == {"Ok": "Passt"}

    def test_empty_file(self, tmp_path):
        _write(tmp_path / "empty.yaml", "")

        assert YamlResourceSource(tmp_path).load("empty", "") == {}

    def test_invalid_yaml_raises(self, tmp_path):
        """Test that a broken file is reported, not silently ignored."""
        _write(tmp_path / "broken.yaml", "Name: [unclosed\n")

        with pytest.raises(ResourceFileError) as exc_info:
            YamlResourceSource(tmp_path).load("broken", "")
        assert exc_info.value.path.name == "broken.yaml"

    def test_non_mapping_raises(self, tmp_path):
        _write(tmp_path / "list.yaml", "- one\n- two\n")

        with pytest.raises(ResourceFileError, match="mapping"):
            YamlResourceSource(tmp_path).load("list", "")


class TestResourceStringLocalizer:
    """Tests for flat resource localizers."""

    def test_satisfies_protocol(self, factory):
        assert isinstance(factory.create(Dog), StringLocalizer)

    def test_lookup(self, factory):
        localizer = factory.create(Dog)

        assert localizer["Sound"] == "Woof"
        assert localizer["Sound"].search_location == resource_base_name(Dog)

    def test_not_found(self, factory):
        result = factory.create(Dog)["Name"]

        assert result.resource_not_found
        assert result.value == "Name"

    def test_parent_culture_fallback(self, factory):
        """Test that de-AT falls back to de and then to the invariant culture."""
        localizer = factory.create(Animal).with_culture("de_at")

        assert localizer.culture == "de-AT"
        assert localizer["Name"] == "Tier"
        assert localizer["Sound"] == "..."

    def test_format(self, factory):
        assert factory.create(Animal).get("Legs", 4) == "Legs: 4"

    def test_ambient_culture(self, factory):
        """Test that an unbound localizer follows the ambient culture."""
        localizer = factory.create(Animal)

        with culture_scope("de"):
            assert localizer["Name"] == "Tier"
        assert localizer["Name"] == "Animal"

    def test_bound_culture_ignores_ambient(self, factory):
        localizer = factory.create(Animal).with_culture("")

        with culture_scope("de"):
            assert localizer["Name"] == "Animal"

    def test_default_culture(self, resources_dir):
        factory = ResourceStringLocalizerFactory.from_options(
            LocalizationOptions(resources_path=str(resources_dir), default_culture="de")
        )

        assert factory.create(Animal)["Name"] == "Tier"

    def test_get_all_strings(self, factory):
        localizer = factory.create(Animal).with_culture("de")

        exact = {s.name: s.value for s in localizer.get_all_strings(False)}
        merged = {s.name: s.value for s in localizer.get_all_strings(True)}

        assert exact == {"Name": "Tier"}
        assert merged == {"Name": "Tier", "Legs": "Legs: {0}", "Sound": "..."}

    def test_scalar_coercion(self, caplog):
        source = DictResourceSource(
            {"things": {"": {"Count": 3, "Flag": True, "Blank": None, "Nested": {"a": "b"}}}}
        )
        localizer = ResourceStringLocalizerFactory(source).create_for_bundle("things", "")

        with caplog.at_level(logging.WARNING):
            strings = {s.name: s.value for s in localizer.get_all_strings()}

        assert strings == {"Count": "3", "Flag": "True", "Blank": ""}
        assert "Nested" in caplog.text


class TestResourceStringLocalizerFactory:
    """Tests for the factory and its cache."""

    def test_bundle_base_name(self):
        source = DictResourceSource({"app._Shared": {"": {"Ok": "OK"}}})
        factory = ResourceStringLocalizerFactory(source)

        localizer = factory.create_for_bundle("_Shared", "app")

        assert localizer.base_name == "app._Shared"
        assert localizer["Ok"] == "OK"

    def test_tables_are_cached(self):
        calls = []

        class _Source:
            def load(self, base_name, culture):
                calls.append((base_name, culture))
                return {"Ok": "OK"}

        factory = ResourceStringLocalizerFactory(_Source())
        localizer = factory.create_for_bundle("_Shared", "app")

        localizer["Ok"]
        localizer["Ok"]
        assert calls == [("app._Shared", "")]

        factory.clear_cache()
        localizer["Ok"]
        assert len(calls) == 2

    def test_cache_disabled(self):
        calls = []

        class _Source:
            def load(self, base_name, culture):
                calls.append((base_name, culture))
                return None

        factory = ResourceStringLocalizerFactory(
            _Source(), LocalizationOptions(cache_resources=False)
        )
        localizer = factory.create("thing")

        localizer["Ok"]
        localizer["Ok"]
        assert len(calls) == 2


class TestEndToEnd:
    """Inheriting localizer over YAML resources."""

    def test_hierarchy_and_shared(self, factory):
        localizer = InheritingLocalizer(Dog, factory)

        assert localizer["Sound"] == "Woof"
        assert localizer["Name"] == "Animal"
        assert localizer.parent["Sound"] == "..."
        assert localizer["Cancel"] == "Cancel"
        assert localizer["Missing"].resource_not_found

    def test_with_culture(self, factory):
        localizer = InheritingLocalizer(Dog, factory).with_culture("de-AT")

        assert localizer["Sound"] == "Wuff"
        assert localizer["Name"] == "Tier"
        assert localizer["Cancel"] == "Abbrechen"

    def test_get_all_strings(self, factory):
        localizer = InheritingLocalizer(Dog, factory, "de-AT")

        strings = {s.name: s.value for s in localizer.get_all_strings(True)}

        assert strings == {"Sound": "Wuff", "Name": "Tier", "Legs": "Legs: {0}"}
