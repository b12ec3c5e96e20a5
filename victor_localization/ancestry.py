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

"""Type ancestry introspection.

The inheriting localizer only needs three questions answered about a
subject: what its immediate ancestor is, whether that ancestor is the
universal root, and which module owns it. ``ClassAncestry`` answers them
for Python classes; ``StaticAncestry`` answers them from explicit tables.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class TypeAncestry(Protocol):
    """Ancestry and module lookup for localization subjects."""

    def ancestor_of(self, subject: Any) -> Optional[Any]:
        """Get the immediate ancestor of a subject, or None."""
        ...

    def is_root(self, subject: Any) -> bool:
        """Check whether a subject is the universal root of the hierarchy."""
        ...

    def module_of(self, subject: Any) -> str:
        """Get the identity of the module that owns a subject."""
        ...


class ClassAncestry:
    """Ancestry of Python classes.

    The ancestor is the first base class, so with multiple inheritance
    only the primary base participates in resource lookup. ``object`` is
    the root and is never returned as an ancestor worth localizing.
    """

    root: type = object

    def ancestor_of(self, subject: Any) -> Optional[type]:
        bases = getattr(subject, "__bases__", ())
        return bases[0] if bases else None

    def is_root(self, subject: Any) -> bool:
        return subject is self.root

    def module_of(self, subject: Any) -> str:
        # Top-level package plays the role of the owning assembly
        module = getattr(subject, "__module__", None) or ""
        return module.split(".", 1)[0]


class StaticAncestry:
    """Ancestry supplied as explicit tables.

    Useful for subjects that are not Python classes (string identifiers,
    model names loaded from configuration, and so on).

    Example:
        ancestry = StaticAncestry(
            parents={"B": "A", "A": "object"},
            modules={"A": "app", "B": "app"},
        )
    """

    def __init__(
        self,
        parents: Dict[Any, Any],
        modules: Optional[Dict[Any, str]] = None,
        root: Any = "object",
        default_module: str = "",
    ):
        """Initialize static ancestry.

        Args:
            parents: Maps each subject to its immediate ancestor
            modules: Maps each subject to its module identity
            root: Sentinel for the universal root
            default_module: Module identity for subjects missing from ``modules``
        """
        self._parents = dict(parents)
        self._modules = dict(modules or {})
        self.root = root
        self.default_module = default_module

    def ancestor_of(self, subject: Any) -> Optional[Any]:
        return self._parents.get(subject)

    def is_root(self, subject: Any) -> bool:
        return subject == self.root

    def module_of(self, subject: Any) -> str:
        return self._modules.get(subject, self.default_module)


def resource_base_name(subject: Any) -> str:
    """Get the resource base name for a subject.

    Classes map to ``"module.QualName"``; anything else to ``str(subject)``.

    Args:
        subject: Class or other identifier

    Returns:
        Base name used to locate the subject's resource bundle
    """
    if isinstance(subject, type):
        return f"{subject.__module__}.{subject.__qualname__}"
    return str(subject)


_default_ancestry: Optional[ClassAncestry] = None


def get_default_ancestry() -> ClassAncestry:
    """Get the shared class ancestry instance."""
    global _default_ancestry
    if _default_ancestry is None:
        _default_ancestry = ClassAncestry()
    return _default_ancestry
