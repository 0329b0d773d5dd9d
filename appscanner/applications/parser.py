"""Entity aggregator for application discovery.

Every observed resource contributes to the application named by its
``app.kubernetes.io/name`` label.  Applications live in an arena keyed by
name and refer to their parents by name only; the parent graph is resolved
when ``applications()`` builds the result, so a child may name a parent
before (or without) the parent ever being observed itself.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from appscanner.labels import each_list_item, labels_of, resource_ref
from appscanner.models.applications import Application, NamespacedName
from appscanner.observability.logging import get_logger
from appscanner.sets import NamespacedNames, insert_present, stable_list

# Kubernetes recommended label indicating that a component is part of an application.
APP_LABEL = "app.kubernetes.io/part-of"

PART_OF_LABEL = APP_LABEL
NAME_LABEL = "app.kubernetes.io/name"
INSTANCE_LABEL = "app.kubernetes.io/instance"
COMPONENT_LABEL = "app.kubernetes.io/component"

KUSTOMIZATION_NAME_LABEL = "kustomize.toolkit.fluxcd.io/name"
KUSTOMIZATION_NAMESPACE_LABEL = "kustomize.toolkit.fluxcd.io/namespace"

_log = get_logger("applications.parser")


@dataclass
class _DiscoveredApplication:
    """Mutable accumulator for one application name."""

    name: str
    instances: set[str] = field(default_factory=set)
    components: set[str] = field(default_factory=set)
    parents: set[str] = field(default_factory=set)
    kustomizations: NamespacedNames = field(default_factory=NamespacedNames)


def kustomization_ref_from_labels(labels: dict[str, str]) -> NamespacedName | None:
    """Return the Flux Kustomization that applied a resource, if both labels are set."""
    name = labels.get(KUSTOMIZATION_NAME_LABEL)
    namespace = labels.get(KUSTOMIZATION_NAMESPACE_LABEL)
    if name is None or namespace is None:
        return None
    return NamespacedName(namespace=namespace, name=name)


class ApplicationParser:
    """Discovers Applications from the labels on Kubernetes resources.

    Not safe for concurrent use; give each batch its own parser.
    """

    def __init__(self) -> None:
        self._apps: dict[str, _DiscoveredApplication] = {}

    def __len__(self) -> int:
        return len(self._apps)

    def _get_or_create(self, name: str) -> _DiscoveredApplication:
        app = self._apps.get(name)
        if app is None:
            app = _DiscoveredApplication(name=name)
            self._apps[name] = app
        return app

    def observe(self, resource: Any) -> None:
        """Fold one resource into the discovered applications.

        Resources without a name label are ignored.  Raises
        LabelExtractionError if the resource labels cannot be read.
        """
        labels = labels_of(resource)
        app_name = labels.get(NAME_LABEL, "")
        if not app_name:
            _log.debug("resource_ignored", resource=resource_ref(resource), reason="no name label")
            return

        app = self._get_or_create(app_name)
        insert_present(app.instances, labels.get(INSTANCE_LABEL))
        insert_present(app.components, labels.get(COMPONENT_LABEL))

        parent = labels.get(PART_OF_LABEL, "")
        if parent:
            app.parents.add(parent)
            self._get_or_create(parent)

        ref = kustomization_ref_from_labels(labels)
        if ref is not None:
            app.kustomizations.add(ref)

    def add(self, resource_list: Any) -> None:
        """Observe every item of a List object (e.g. a DeploymentList)."""
        for resource in each_list_item(resource_list):
            self.observe(resource)

    def add_all(self, resource_lists: Iterable[Any]) -> None:
        for resource_list in resource_lists:
            self.add(resource_list)

    def applications(self) -> list[Application]:
        """Return the discovered Applications sorted by name.

        Applications referenced only as a parent are included with empty
        attributes.  Each name gets exactly one view, shared by every child
        that lists it as a parent.  Views are built depth-first from the
        parents down; a parent that is still being built when it is reached
        again closes a ``part-of`` cycle and is referenced by a view without
        parents instead.
        """
        views: dict[str, Application] = {}
        leaves: dict[str, Application] = {}
        for name in sorted(self._apps):
            if name not in views:
                self._build_views(name, views, leaves)
        return [views[name] for name in sorted(self._apps)]

    def _sorted_parents(self, name: str) -> Iterator[str]:
        return iter(sorted(self._apps[name].parents))

    def _build_views(
        self,
        start: str,
        views: dict[str, Application],
        leaves: dict[str, Application],
    ) -> None:
        # Iterative post-order so that long part-of chains never hit the recursion limit.
        visiting = {start}
        stack = [(start, self._sorted_parents(start))]
        while stack:
            name, pending = stack[-1]
            for parent in pending:
                if parent not in views and parent not in visiting:
                    visiting.add(parent)
                    stack.append((parent, self._sorted_parents(parent)))
                    break
            else:
                stack.pop()
                visiting.discard(name)
                views[name] = self._make_view(name, views, leaves)

    def _make_view(
        self,
        name: str,
        views: dict[str, Application],
        leaves: dict[str, Application],
    ) -> Application:
        app = self._apps[name]
        parents: list[Application] = []
        for parent in sorted(app.parents):
            view = views.get(parent)
            if view is None:
                # Still on the DFS stack (or the app itself): a part-of cycle.
                _log.warning("application_cycle", application=name, parent=parent)
                view = leaves.get(parent)
                if view is None:
                    view = self._leaf_view(parent)
                    leaves[parent] = view
            parents.append(view)
        return Application(
            name=app.name,
            instances=stable_list(app.instances),
            components=stable_list(app.components),
            parents=parents,
            kustomizations=app.kustomizations.sorted(),
        )

    def _leaf_view(self, name: str) -> Application:
        app = self._apps[name]
        return Application(
            name=app.name,
            instances=stable_list(app.instances),
            components=stable_list(app.components),
            kustomizations=app.kustomizations.sorted(),
        )
