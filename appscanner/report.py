"""Plain-text reports for discovered applications and pipelines."""

from __future__ import annotations

from appscanner.models.applications import Application
from appscanner.models.pipelines import PipelineDiscovery


def root_applications(apps: list[Application]) -> list[Application]:
    return [app for app in apps if app.is_root]


def child_applications(apps: list[Application], parent: str) -> list[Application]:
    return [app for app in apps if app.has_parent(parent)]


def render_applications(apps: list[Application]) -> str:
    """Render every root application followed by its direct children."""
    lines: list[str] = []
    for parent in root_applications(apps):
        lines.append(f"application {parent.name}")
        for app in child_applications(apps, parent.name):
            lines.append(f"  child app: {app.name}")
            lines.append("     instances:")
            lines.extend(f"         {instance}" for instance in app.instances)
            lines.append("     components:")
            lines.extend(f"         {component}" for component in app.components)
            lines.append("     kustomizations:")
            lines.extend(f"         {ref}" for ref in app.kustomizations)
    return "\n".join(lines)


def render_pipelines(discovery: PipelineDiscovery) -> str:
    """Render one line per pipeline, including pipelines that failed to order."""
    lines = [
        f"pipeline {pipeline.name} has stages: {','.join(pipeline.environments)}"
        for pipeline in discovery.pipelines
    ]
    for name in sorted(discovery.errors):
        lines.append(f"pipeline {name} could not be ordered: {discovery.errors[name]}")
    return "\n".join(lines)
