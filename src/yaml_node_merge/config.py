"""PruneConfig and EmitConfig: immutable settings for pruning and emitting.

PruneConfig selects which null representations NullPruner removes.
EmitConfig holds the presentation options TreeEmitter passes to PyYAML.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["EmitConfig", "PruneConfig"]


@dataclass(frozen=True, slots=True)
class PruneConfig:
    """Null-pruning policy.

    Attributes:
        explicit: Remove explicit nulls (``key: null``, ``key: ~``).
        implicit: Remove implicit nulls (``key:`` with nothing after it).
    """

    explicit: bool = True
    implicit: bool = True

    @property
    def enabled(self) -> bool:
        return self.explicit or self.implicit


@dataclass(frozen=True, slots=True)
class EmitConfig:
    """Immutable presentation options for YAML output.

    Attributes:
        indent: Block indentation width, in [2, 9].
        width: Preferred line width.  Must be greater than ``indent``.
        allow_unicode: Write non-ASCII characters as-is instead of escaping.
        explicit_start: Start every document with ``---``.
    """

    indent: int = 4
    width: int = 80
    allow_unicode: bool = True
    explicit_start: bool = False

    def __post_init__(self) -> None:
        if not 2 <= self.indent <= 9:
            msg = f"indent must be in [2, 9], got {self.indent}"
            raise ValueError(msg)
        if self.width <= self.indent:
            msg = f"width must be greater than indent, got {self.width}"
            raise ValueError(msg)
