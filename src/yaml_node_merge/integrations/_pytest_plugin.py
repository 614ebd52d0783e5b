"""pytest plugin for yaml-node-merge.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from yaml_node_merge import EmitConfig, PruneConfig, dump, load, merge_yaml


def check_yaml_merge(
    dst: str,
    src: str,
    expected: str,
    prune_config: PruneConfig | None = None,
    emit_config: EmitConfig | None = None,
) -> None:
    """Assert that merging *src* onto *dst* yields *expected*.

    Both sides are compared after emission, so formatting differences that
    the emitter normalises (indentation, quoting of plain scalars, document
    markers) do not matter.

    Raises:
        AssertionError: When the merged text differs from the expected text,
            with both renderings in the message.
    """
    actual = merge_yaml(dst, src, prune_config=prune_config, emit_config=emit_config)
    wanted = dump(load(expected), emit_config)
    if actual != wanted:
        raise AssertionError(
            f"YAML merge result differs from expected:\n"
            f"--- expected\n{wanted}"
            f"--- actual\n{actual}"
        )


@pytest.fixture(scope="session")
def assert_yaml_merge() -> Any:
    """Fixture that returns a callable YAML merge asserter.

    Usage in tests::

        def test_override(assert_yaml_merge):
            assert_yaml_merge("a: 1\\nb: 2\\n", "b: 3\\n", "a: 1\\nb: 3\\n")

    Returns:
        ``check_yaml_merge(dst, src, expected, prune_config=None,
        emit_config=None) -> None``.
    """
    return check_yaml_merge
