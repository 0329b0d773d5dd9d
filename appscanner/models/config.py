"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_PIPELINE_NAME_LABEL = "gitops.pro/pipeline"
DEFAULT_PIPELINE_ENVIRONMENT_LABEL = "gitops.pro/pipeline-environment"
DEFAULT_PIPELINE_AFTER_LABEL = "gitops.pro/pipeline-after"


@dataclass
class PipelineLabelsConfig:
    """Label keys used to group resources into pipelines and environments."""

    name: str = DEFAULT_PIPELINE_NAME_LABEL
    environment: str = DEFAULT_PIPELINE_ENVIRONMENT_LABEL
    after: str = DEFAULT_PIPELINE_AFTER_LABEL


@dataclass
class KubernetesConfig:
    """Cluster listing configuration."""

    namespace: str = ""  # empty lists across all namespaces
    kustomization_group: str = "kustomize.toolkit.fluxcd.io"
    kustomization_version: str = "v1beta2"
    kustomization_plural: str = "kustomizations"


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    format: str = "json"  # json | console


@dataclass
class ScannerConfig:
    """Top-level appscanner configuration."""

    pipeline_labels: PipelineLabelsConfig = field(default_factory=PipelineLabelsConfig)
    kubernetes: KubernetesConfig = field(default_factory=KubernetesConfig)
    log: LogConfig = field(default_factory=LogConfig)
