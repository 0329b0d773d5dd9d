"""Ordering of pipeline environments from their ``after`` declarations.

Each environment names at most one predecessor, so the environments of a
valid pipeline form a forest.  The resulting order lists each root followed
by all of its descendants in dependency order; independent roots are
emitted in name order.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from appscanner.errors import ScannerError
from appscanner.models.pipelines import Environment


class PipelineOrderingError(ScannerError):
    """Base class for errors detected while ordering environments."""


class DuplicateNodeError(PipelineOrderingError):
    """Raised when two environments in one pipeline share a name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"environment {name!r} is already known")
        self.name = name


class UnknownPredecessorError(PipelineOrderingError):
    """Raised when an environment declares an ``after`` that does not exist."""

    def __init__(self, name: str, after: str) -> None:
        super().__init__(f"reference to unknown environment {after!r} from {name!r}")
        self.name = name
        self.after = after


class CyclicDependencyError(PipelineOrderingError):
    """Raised when ``after`` declarations form a cycle."""

    def __init__(self, names: list[str]) -> None:
        super().__init__(f"environments {', '.join(names)} depend on each other in a cycle")
        self.names = names


def order_environments(environments: Iterable[Environment]) -> list[str]:
    """Return the environment names ordered by their ``after`` declarations.

    Raises DuplicateNodeError, UnknownPredecessorError or
    CyclicDependencyError; no partial ordering is returned on failure.
    """
    predecessors: dict[str, str] = {}
    for env in environments:
        if env.name in predecessors:
            raise DuplicateNodeError(env.name)
        predecessors[env.name] = env.after

    children: dict[str, list[str]] = {name: [] for name in predecessors}
    for name, after in predecessors.items():
        if not after:
            continue
        if after not in children:
            raise UnknownPredecessorError(name, after)
        children[after].append(name)

    roots = sorted(name for name, after in predecessors.items() if not after)
    result: list[str] = []
    for root in roots:
        result.append(root)
        result.extend(_ordered_descendants(root, children))

    if len(result) != len(predecessors):
        emitted = set(result)
        raise CyclicDependencyError(sorted(name for name in predecessors if name not in emitted))
    return result


def _ordered_descendants(root: str, children: dict[str, list[str]]) -> list[str]:
    # Breadth-first from the root is a valid topological order on a tree.
    ordered: list[str] = []
    queue = deque(sorted(children[root]))
    while queue:
        name = queue.popleft()
        ordered.append(name)
        queue.extend(sorted(children[name]))
    return ordered
