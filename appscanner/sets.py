"""Deduplicating containers shared by the discovery engines.

Attributes are accumulated in plain sets while resources are observed and
only sorted when a result is produced, so observation order never leaks
into the output.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import Any, TypeVar

from appscanner.models.applications import NamespacedName

T = TypeVar("T", bound=Hashable)


def insert_present(target: set[str], value: str | None) -> None:
    """Add *value* to *target* unless it is missing or empty."""
    if value:
        target.add(value)


def stable_list(items: Iterable[T], key: Callable[[T], Any] | None = None) -> list[T]:
    """Return the distinct *items* as a sorted list.

    ``None`` and empty strings are dropped.  *key* defaults to the natural
    ordering of the items.
    """
    unique = {item for item in items if item is not None and item != ""}
    return sorted(unique, key=key)  # type: ignore[type-var]


class NamespacedNames(set[NamespacedName]):
    """A set of NamespacedName references."""

    def sorted(self) -> list[NamespacedName]:
        """Return the contents sorted by their ``namespace/name`` form."""
        return stable_list(self, key=str)
