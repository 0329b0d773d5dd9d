"""Core data structures for appscanner."""

from appscanner.models.applications import Application, NamespacedName
from appscanner.models.config import (
    KubernetesConfig,
    LogConfig,
    PipelineLabelsConfig,
    ScannerConfig,
)
from appscanner.models.pipelines import Environment, Pipeline, PipelineDiscovery

__all__ = [
    "Application",
    "Environment",
    "KubernetesConfig",
    "LogConfig",
    "NamespacedName",
    "Pipeline",
    "PipelineDiscovery",
    "PipelineLabelsConfig",
    "ScannerConfig",
]
