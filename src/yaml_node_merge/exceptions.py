"""
Merge exception hierarchy.

All exceptions inherit from ``MergeError``, record the key path at which the
merge was rejected, and provide ``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from typing import Any


class MergeError(Exception):
    """Base exception for all merge errors."""

    code = "MERGE_ERROR"

    def __init__(self, message: str, path: list[str] | None = None) -> None:
        self.message = message
        self.path: list[str] = list(path) if path else []
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        message = f"yaml: {self.message}"
        if self.path:
            message += f" at '{'.'.join(self.path)}'"
        return message

    def at(self, key: str) -> MergeError:
        """Prefix *key* to the recorded path and refresh the message."""
        self.path.insert(0, key)
        self.args = (self._build_message(),)
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "path": list(self.path),
        }


class InvalidNodeKindsError(MergeError):
    """Two comparable, non-null nodes have different kinds."""

    code = "INVALID_NODE_KINDS"

    def __init__(
        self,
        dst_kind: str | None,
        src_kind: str | None,
        path: list[str] | None = None,
    ) -> None:
        self.dst_kind = dst_kind
        self.src_kind = src_kind
        super().__init__(f"invalid node kinds ({dst_kind} <- {src_kind})", path)

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "dst_kind": self.dst_kind,
            "src_kind": self.src_kind,
        }


class UnmergeableError(MergeError):
    """
    Conflicting tag or anchor on two mapping nodes.

    Retyping an already-typed mapping, or renaming an anchor that aliases
    elsewhere in the tree may still point at, is rejected.
    """

    code = "UNMERGEABLE"

    def __init__(self, reason: str, path: list[str] | None = None) -> None:
        self.reason = reason
        super().__init__(f"unmergable error: {reason}", path)

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "reason": self.reason}


class TooManyDocumentsError(MergeError):
    """A document node, or a parsed stream, holds more than one document."""

    code = "TOO_MANY_DOCUMENTS"

    def __init__(self, count: int, path: list[str] | None = None) -> None:
        self.count = count
        super().__init__(f"too many documents ({count})", path)

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "count": self.count}


class UnknownNodeKindError(MergeError):
    """Node kind outside the five known kinds."""

    code = "UNKNOWN_NODE_KIND"

    def __init__(self, kind: object, path: list[str] | None = None) -> None:
        self.kind = kind
        super().__init__(f"unknown error: node kind {kind!r}", path)

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "kind": repr(self.kind)}
