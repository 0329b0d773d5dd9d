"""Application discovery data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NamespacedName:
    """Reference to a namespaced Kubernetes object, e.g. a Flux Kustomization."""

    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"


@dataclass
class Application:
    """A discovered application.

    Produced by ApplicationParser.applications().  ``parents`` holds the views
    of the parent applications; a parent shared by several children is the
    same object in each of their ``parents`` lists.  Every list is
    sorted so that two scans of the same cluster compare equal.
    """

    name: str
    instances: list[str] = field(default_factory=list)
    components: list[str] = field(default_factory=list)
    parents: list[Application] = field(default_factory=list)
    kustomizations: list[NamespacedName] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return not self.parents

    def has_parent(self, name: str) -> bool:
        return any(p.name == name for p in self.parents)
