"""Exception hierarchy shared by the discovery engines."""

from __future__ import annotations


class ScannerError(Exception):
    """Base class for every error raised by appscanner."""


class LabelExtractionError(ScannerError):
    """Raised when the label mapping of a resource cannot be read."""

    def __init__(self, resource: str, reason: str) -> None:
        super().__init__(f"failed to get labels from {resource}: {reason}")
        self.resource = resource
        self.reason = reason


class ResourceListError(ScannerError):
    """Raised when listing resources from the cluster fails."""

    def __init__(self, kind: str, cause: Exception) -> None:
        super().__init__(f"failed to list {kind}: {cause}")
        self.kind = kind
        self.cause = cause
