"""Application discovery from ``app.kubernetes.io`` labels.

Exposes:
    ApplicationParser -- folds labelled resources into deduplicated Applications.
    APP_LABEL         -- the recommended label marking a component's parent app.
"""

from appscanner.applications.parser import (
    APP_LABEL,
    COMPONENT_LABEL,
    INSTANCE_LABEL,
    KUSTOMIZATION_NAME_LABEL,
    KUSTOMIZATION_NAMESPACE_LABEL,
    NAME_LABEL,
    PART_OF_LABEL,
    ApplicationParser,
)

__all__ = [
    "APP_LABEL",
    "COMPONENT_LABEL",
    "INSTANCE_LABEL",
    "KUSTOMIZATION_NAME_LABEL",
    "KUSTOMIZATION_NAMESPACE_LABEL",
    "NAME_LABEL",
    "PART_OF_LABEL",
    "ApplicationParser",
]
