"""Pipeline discovery data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Environment:
    """One stage of a pipeline.

    ``after`` names the environment that must precede this one; an empty
    string means the environment has no required predecessor.
    """

    name: str
    after: str = ""


@dataclass
class Pipeline:
    """A Continuous-Delivery pipeline and its ordered environments."""

    name: str
    environments: list[str] = field(default_factory=list)


@dataclass
class PipelineDiscovery:
    """Result of resolving every discovered pipeline independently.

    ``errors`` maps a pipeline name to the error that stopped it from being
    ordered.  A failing pipeline never prevents the others from resolving.
    """

    pipelines: list[Pipeline] = field(default_factory=list)
    errors: dict[str, Exception] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors
