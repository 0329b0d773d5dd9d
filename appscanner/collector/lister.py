"""Resource listing via kubernetes-asyncio.

Every function returns plain JSON objects (``dict``) so the parsers see the
same shape regardless of whether an object came from a typed API or the
custom-objects API.
"""

from __future__ import annotations

from typing import Any

from kubernetes_asyncio import client as k8s_client  # type: ignore[import-untyped]
from kubernetes_asyncio import config as k8s_config  # type: ignore[import-untyped]
from kubernetes_asyncio.client.exceptions import ApiException  # type: ignore[import-untyped]

from appscanner.errors import ResourceListError
from appscanner.models.config import KubernetesConfig
from appscanner.observability.logging import get_logger

_log = get_logger("collector.lister")


async def load_kube_config() -> None:
    """Configure the client from the in-cluster service account, else kubeconfig."""
    try:
        # load_incluster_config() is synchronous in kubernetes-asyncio
        k8s_config.load_incluster_config()
        _log.info("k8s client configured from in-cluster service account")
    except k8s_config.ConfigException:
        await k8s_config.load_kube_config()
        _log.info("k8s client configured from kubeconfig")


def has_labels(*keys: str) -> str:
    """Return a label selector matching objects that carry every one of *keys*."""
    return ",".join(keys)


async def list_deployments(
    api_client: Any,
    label_selector: str,
    namespace: str = "",
) -> list[dict[str, Any]]:
    """List apps/v1 Deployments matching *label_selector*."""
    apps_v1 = k8s_client.AppsV1Api(api_client)
    try:
        if namespace:
            result = await apps_v1.list_namespaced_deployment(namespace, label_selector=label_selector)
        else:
            result = await apps_v1.list_deployment_for_all_namespaces(label_selector=label_selector)
    except (ApiException, OSError) as exc:
        raise ResourceListError("deployments", exc) from exc

    items = [api_client.sanitize_for_serialization(item) for item in result.items or []]
    _log.info("deployments listed", count=len(items), namespace=namespace or "*")
    return items


async def list_kustomizations(
    api_client: Any,
    label_selector: str,
    config: KubernetesConfig | None = None,
) -> list[dict[str, Any]]:
    """List Flux Kustomizations matching *label_selector*."""
    cfg = config or KubernetesConfig()
    custom = k8s_client.CustomObjectsApi(api_client)
    try:
        if cfg.namespace:
            result = await custom.list_namespaced_custom_object(
                cfg.kustomization_group,
                cfg.kustomization_version,
                cfg.namespace,
                cfg.kustomization_plural,
                label_selector=label_selector,
            )
        else:
            result = await custom.list_cluster_custom_object(
                cfg.kustomization_group,
                cfg.kustomization_version,
                cfg.kustomization_plural,
                label_selector=label_selector,
            )
    except (ApiException, OSError) as exc:
        raise ResourceListError("kustomizations", exc) from exc

    items = list(result.get("items") or [])
    _log.info("kustomizations listed", count=len(items), namespace=cfg.namespace or "*")
    return items
