"""Cluster scans: list labelled resources, then run the discovery parsers.

Each scan builds its own parser, so independent scans never share state.
"""

from __future__ import annotations

from kubernetes_asyncio import client as k8s_client  # type: ignore[import-untyped]

from appscanner.applications import NAME_LABEL, ApplicationParser
from appscanner.collector.lister import has_labels, list_deployments, list_kustomizations, load_kube_config
from appscanner.models.applications import Application
from appscanner.models.config import ScannerConfig
from appscanner.models.pipelines import PipelineDiscovery
from appscanner.observability.logging import get_logger
from appscanner.pipelines import PipelineParser

_log = get_logger("scanner")


async def scan_applications(config: ScannerConfig) -> list[Application]:
    """Discover Applications from the Deployments in the cluster."""
    await load_kube_config()
    async with k8s_client.ApiClient() as api_client:
        deployments = await list_deployments(
            api_client,
            has_labels(NAME_LABEL),
            namespace=config.kubernetes.namespace,
        )

    parser = ApplicationParser()
    parser.add(deployments)
    apps = parser.applications()
    _log.info("applications discovered", count=len(apps))
    return apps


async def scan_pipelines(config: ScannerConfig) -> PipelineDiscovery:
    """Discover Pipelines from the Flux Kustomizations in the cluster."""
    await load_kube_config()
    async with k8s_client.ApiClient() as api_client:
        kustomizations = await list_kustomizations(
            api_client,
            has_labels(config.pipeline_labels.name),
            config=config.kubernetes,
        )

    parser = PipelineParser(config.pipeline_labels)
    parser.add(kustomizations)
    discovery = parser.resolve()
    _log.info(
        "pipelines discovered",
        count=len(discovery.pipelines),
        failed=len(discovery.errors),
    )
    return discovery
