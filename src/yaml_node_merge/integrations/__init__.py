"""Integrations subpackage for yaml-node-merge.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_yaml_merge`` fixture
"""

from __future__ import annotations

__all__: list[str] = []
