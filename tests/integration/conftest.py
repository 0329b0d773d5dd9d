"""Shared fixtures for appscanner integration tests.

Provides realistic Deployment and Flux Kustomization objects, in the JSON
shape the Kubernetes API returns, plus a patched cluster so the scans in
appscanner.scanner run end to end without a real cluster.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from appscanner.applications import (
    COMPONENT_LABEL,
    INSTANCE_LABEL,
    KUSTOMIZATION_NAME_LABEL,
    KUSTOMIZATION_NAMESPACE_LABEL,
    NAME_LABEL,
    PART_OF_LABEL,
)
from appscanner.models.config import (
    DEFAULT_PIPELINE_AFTER_LABEL,
    DEFAULT_PIPELINE_ENVIRONMENT_LABEL,
    DEFAULT_PIPELINE_NAME_LABEL,
)

# ---------------------------------------------------------------------------
# Object factory helpers
# ---------------------------------------------------------------------------


def make_deployment(
    name: str,
    namespace: str = "default",
    app: str | None = None,
    instance: str | None = None,
    component: str | None = None,
    part_of: str | None = None,
    kustomization: tuple[str, str] | None = None,
) -> dict[str, Any]:
    """Create a Deployment as returned by the API, labelled for discovery."""
    labels: dict[str, str] = {}
    if app is not None:
        labels[NAME_LABEL] = app
    if instance is not None:
        labels[INSTANCE_LABEL] = instance
    if component is not None:
        labels[COMPONENT_LABEL] = component
    if part_of is not None:
        labels[PART_OF_LABEL] = part_of
    if kustomization is not None:
        labels[KUSTOMIZATION_NAMESPACE_LABEL], labels[KUSTOMIZATION_NAME_LABEL] = kustomization
    return {
        "apiVersion": "apps/v1",
        "kind": "Deployment",
        "metadata": {"name": name, "namespace": namespace, "labels": labels},
        "spec": {"replicas": 1},
    }


def make_kustomization(
    name: str,
    pipeline: str,
    environment: str | None = None,
    after: str | None = None,
    namespace: str = "flux-system",
) -> dict[str, Any]:
    """Create a Flux Kustomization labelled as a pipeline stage."""
    labels = {DEFAULT_PIPELINE_NAME_LABEL: pipeline}
    if environment is not None:
        labels[DEFAULT_PIPELINE_ENVIRONMENT_LABEL] = environment
    if after is not None:
        labels[DEFAULT_PIPELINE_AFTER_LABEL] = after
    return {
        "apiVersion": "kustomize.toolkit.fluxcd.io/v1beta2",
        "kind": "Kustomization",
        "metadata": {"name": name, "namespace": namespace, "labels": labels},
        "spec": {"interval": "5m", "path": f"./{environment or name}", "prune": True},
    }


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def wordpress_deployments() -> list[dict[str, Any]]:
    return [
        make_deployment(
            "mysql",
            app="mysql",
            instance="mysql-abcxzy",
            component="database",
            part_of="wordpress",
            kustomization=("flux-system", "wordpress"),
        ),
        make_deployment("php", app="php", instance="php-deftuv", component="web", part_of="wordpress"),
        make_deployment("php-canary", app="php", instance="php-canary", component="web", part_of="wordpress"),
        make_deployment("sidecar"),
    ]


@pytest.fixture
def billing_kustomizations() -> list[dict[str, Any]]:
    return [
        make_kustomization("billing-prod", "billing", "production", after="staging"),
        make_kustomization("billing-dev", "billing", "dev"),
        make_kustomization("billing-staging", "billing", "staging", after="dev"),
        make_kustomization("shipping-test", "shipping", "test"),
        make_kustomization("broken-prod", "broken", "production", after="qa"),
    ]


@dataclass
class FakeCluster:
    """Handles on the patched listing functions."""

    load_kube_config: AsyncMock
    list_deployments: AsyncMock
    list_kustomizations: AsyncMock


@pytest.fixture
def fake_cluster(
    wordpress_deployments: list[dict[str, Any]],
    billing_kustomizations: list[dict[str, Any]],
) -> Iterator[FakeCluster]:
    """Patch appscanner.scanner so scans read the fixture objects."""
    api_client = MagicMock()
    cluster = FakeCluster(
        load_kube_config=AsyncMock(),
        list_deployments=AsyncMock(return_value=wordpress_deployments),
        list_kustomizations=AsyncMock(return_value=billing_kustomizations),
    )
    with (
        patch("appscanner.scanner.load_kube_config", cluster.load_kube_config),
        patch("appscanner.scanner.list_deployments", cluster.list_deployments),
        patch("appscanner.scanner.list_kustomizations", cluster.list_kustomizations),
        patch("appscanner.scanner.k8s_client.ApiClient", return_value=api_client),
    ):
        yield cluster
