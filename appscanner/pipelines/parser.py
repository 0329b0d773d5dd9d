"""Pipeline discovery from pipeline labels.

Resources are grouped by the pipeline-name label; each distinct
(environment, after) pair becomes an Environment of that pipeline.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from appscanner.errors import ScannerError
from appscanner.labels import each_list_item, labels_of, resource_ref
from appscanner.models.config import PipelineLabelsConfig
from appscanner.models.pipelines import Environment, Pipeline, PipelineDiscovery
from appscanner.observability.logging import get_logger
from appscanner.pipelines.ordering import PipelineOrderingError, order_environments

_log = get_logger("pipelines.parser")


class PipelineResolutionError(ScannerError):
    """Raised by PipelineParser.pipelines() when a pipeline cannot be ordered."""

    def __init__(self, pipeline: str, cause: PipelineOrderingError) -> None:
        super().__init__(f"failed parsing pipeline {pipeline!r}: {cause}")
        self.pipeline = pipeline
        self.cause = cause


@dataclass
class _DiscoveredPipeline:
    name: str
    environments: set[Environment] = field(default_factory=set)

    def sorted_environments(self) -> list[Environment]:
        return sorted(self.environments, key=lambda e: (e.name, e.after))


class PipelineParser:
    """Discovers Pipelines from the labels on Kubernetes resources."""

    def __init__(self, labels: PipelineLabelsConfig | None = None) -> None:
        self.labels = labels or PipelineLabelsConfig()
        self._discovery: dict[str, _DiscoveredPipeline] = {}

    def __len__(self) -> int:
        return len(self._discovery)

    def observe(self, resource: Any) -> None:
        """Record one resource.  Resources without a pipeline label are ignored."""
        labels = labels_of(resource)
        pipeline_name = labels.get(self.labels.name, "")
        if not pipeline_name:
            _log.debug("resource_ignored", resource=resource_ref(resource), reason="no pipeline label")
            return

        pipeline = self._discovery.get(pipeline_name)
        if pipeline is None:
            pipeline = _DiscoveredPipeline(name=pipeline_name)
            self._discovery[pipeline_name] = pipeline

        if self.labels.environment in labels:
            pipeline.environments.add(
                Environment(
                    name=labels[self.labels.environment],
                    after=labels.get(self.labels.after, ""),
                )
            )

    def add(self, resource_list: Any) -> None:
        """Observe every item of a List object (e.g. a KustomizationList)."""
        for resource in each_list_item(resource_list):
            self.observe(resource)

    def add_all(self, resource_lists: Iterable[Any]) -> None:
        for resource_list in resource_lists:
            self.add(resource_list)

    def resolve(self) -> PipelineDiscovery:
        """Order every discovered pipeline independently.

        Pipelines whose environments cannot be ordered are reported in
        ``errors`` instead of the result list.
        """
        discovery = PipelineDiscovery()
        for name in sorted(self._discovery):
            pipeline = self._discovery[name]
            try:
                ordered = order_environments(pipeline.sorted_environments())
            except PipelineOrderingError as exc:
                _log.warning("pipeline_unordered", pipeline=name, error=str(exc))
                discovery.errors[name] = exc
                continue
            discovery.pipelines.append(Pipeline(name=name, environments=ordered))
        return discovery

    def pipelines(self) -> list[Pipeline]:
        """Return the discovered pipelines sorted by name.

        Raises PipelineResolutionError for the first pipeline (by name) that
        cannot be ordered.
        """
        result: list[Pipeline] = []
        for name in sorted(self._discovery):
            try:
                ordered = order_environments(self._discovery[name].sorted_environments())
            except PipelineOrderingError as exc:
                raise PipelineResolutionError(name, exc) from exc
            result.append(Pipeline(name=name, environments=ordered))
        return result
