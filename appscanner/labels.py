"""Label extraction from Kubernetes resources.

Resources reach the parsers in two shapes: raw JSON objects (``dict``) as
returned by the custom-objects API or loaded from a file, and
kubernetes-asyncio model objects exposing ``metadata.labels``.  Both are
normalised to a ``dict[str, str]`` here so the parsers never need to care.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from appscanner.errors import LabelExtractionError


def _metadata(resource: Any) -> Any:
    if isinstance(resource, Mapping):
        if "metadata" not in resource:
            raise LabelExtractionError(resource_ref(resource), "object has no metadata")
        return resource["metadata"]
    if hasattr(resource, "metadata"):
        return resource.metadata
    raise LabelExtractionError(resource_ref(resource), f"unsupported object type {type(resource).__name__}")


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def resource_ref(resource: Any) -> str:
    """Return a ``Kind namespace/name`` description of *resource* for messages."""
    metadata = _field(resource, "metadata")
    kind = _field(resource, "kind") or type(resource).__name__
    if metadata is None or isinstance(metadata, str):
        return str(kind)
    namespace = _field(metadata, "namespace") or ""
    name = _field(metadata, "name") or "<unnamed>"
    return f"{kind} {namespace}/{name}" if namespace else f"{kind} {name}"


def labels_of(resource: Any) -> dict[str, str]:
    """Return the labels of *resource*.

    A resource without labels yields an empty dict.  Raises
    LabelExtractionError when the metadata or label mapping is malformed.
    """
    metadata = _metadata(resource)
    if metadata is None:
        raise LabelExtractionError(resource_ref(resource), "metadata is empty")
    if not isinstance(metadata, Mapping) and not hasattr(metadata, "labels"):
        raise LabelExtractionError(resource_ref(resource), f"unsupported metadata type {type(metadata).__name__}")

    labels = _field(metadata, "labels")
    if labels is None:
        return {}
    if not isinstance(labels, Mapping):
        raise LabelExtractionError(resource_ref(resource), f"labels are a {type(labels).__name__}, not a mapping")

    result: dict[str, str] = {}
    for key, value in labels.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise LabelExtractionError(resource_ref(resource), f"label {key!r} is not a string pair")
        result[key] = value
    return result


def each_list_item(resource_list: Any) -> Iterator[Any]:
    """Yield the items of a List object (e.g. a DeploymentList).

    Accepts a raw JSON list object (``{"items": [...]}``), a kubernetes-asyncio
    list model with ``.items``, or any plain sequence of resources.
    """
    if isinstance(resource_list, Mapping):
        items = resource_list.get("items")
        if items is None:
            raise LabelExtractionError(resource_ref(resource_list), "list object has no items")
    elif isinstance(resource_list, (list, tuple)):
        items = resource_list
    elif hasattr(resource_list, "items") and not callable(resource_list.items):
        items = resource_list.items or []
    else:
        raise LabelExtractionError(repr(resource_list), "not a list of resources")
    yield from items
