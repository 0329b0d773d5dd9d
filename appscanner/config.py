"""Configuration loading from environment variables."""

from __future__ import annotations

import os
import re

from appscanner.models.config import (
    DEFAULT_PIPELINE_AFTER_LABEL,
    DEFAULT_PIPELINE_ENVIRONMENT_LABEL,
    DEFAULT_PIPELINE_NAME_LABEL,
    KubernetesConfig,
    LogConfig,
    PipelineLabelsConfig,
    ScannerConfig,
)
from appscanner.observability.logging import LOG_FORMATS

# Optional DNS-subdomain prefix, then a name segment of at most 63 characters.
_LABEL_KEY_RE = re.compile(
    r"^(?:[a-z0-9](?:[-a-z0-9.]{0,251}[a-z0-9])?/)?"
    r"[A-Za-z0-9](?:[-A-Za-z0-9_.]{0,61}[A-Za-z0-9])?$"
)


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"APPSCANNER_{key}", default)


def validate_label_key(value: str) -> str:
    """Return *value* if it is a valid Kubernetes label key, else raise ValueError."""
    if not _LABEL_KEY_RE.match(value):
        raise ValueError(f"Invalid label key: {value!r}")
    return value


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def _validate_log_format(value: str) -> str:
    if value.lower() not in LOG_FORMATS:
        raise ValueError(f"Invalid log format: {value}. Must be one of {LOG_FORMATS}")
    return value.lower()


def _validate_api_version(value: str) -> str:
    if not re.match(r"^v[0-9]+((alpha|beta)[0-9]+)?$", value):
        raise ValueError(f"Invalid API version: {value}")
    return value


def load_config() -> ScannerConfig:
    """Load configuration from APPSCANNER_* environment variables."""
    return ScannerConfig(
        pipeline_labels=PipelineLabelsConfig(
            name=validate_label_key(_env("PIPELINE_NAME_LABEL", DEFAULT_PIPELINE_NAME_LABEL)),
            environment=validate_label_key(
                _env("PIPELINE_ENVIRONMENT_LABEL", DEFAULT_PIPELINE_ENVIRONMENT_LABEL)
            ),
            after=validate_label_key(_env("PIPELINE_AFTER_LABEL", DEFAULT_PIPELINE_AFTER_LABEL)),
        ),
        kubernetes=KubernetesConfig(
            namespace=_env("NAMESPACE", ""),
            kustomization_version=_validate_api_version(_env("KUSTOMIZATION_API_VERSION", "v1beta2")),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
            format=_validate_log_format(_env("LOG_FORMAT", "json")),
        ),
    )
