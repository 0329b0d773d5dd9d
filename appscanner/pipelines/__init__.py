"""Pipeline discovery and environment ordering."""

from appscanner.pipelines.ordering import (
    CyclicDependencyError,
    DuplicateNodeError,
    PipelineOrderingError,
    UnknownPredecessorError,
    order_environments,
)
from appscanner.pipelines.parser import PipelineParser, PipelineResolutionError

__all__ = [
    "CyclicDependencyError",
    "DuplicateNodeError",
    "PipelineOrderingError",
    "PipelineParser",
    "PipelineResolutionError",
    "UnknownPredecessorError",
    "order_environments",
]
