"""Tag helpers: long/short tag conversion and implicit scalar resolution.

YAML core-schema tags live under the ``tag:yaml.org,2002:`` namespace and are
conventionally written with the ``!!`` handle, e.g. ``!!null`` or ``!!map``.

Implicit scalar tags are resolved with PyYAML's ``Resolver`` so that the
decision "is this scalar null?" matches what ``yaml.safe_load`` would produce:
``~``, ``null``, ``Null``, ``NULL`` and the empty plain scalar are all
``!!null``.  Quoted and block scalars never resolve implicitly and are
``!!str``.
"""

from __future__ import annotations

from yaml.nodes import ScalarNode
from yaml.resolver import Resolver

CORE_PREFIX = "tag:yaml.org,2002:"
SHORT_PREFIX = "!!"

NULL_TAG = "!!null"
STR_TAG = "!!str"
MAP_TAG = "!!map"
SEQ_TAG = "!!seq"

# Stateless for implicit resolution: no path resolvers are ever registered.
_resolver = Resolver()


def shorten_tag(tag: str) -> str:
    """Return *tag* in short form (``tag:yaml.org,2002:int`` -> ``!!int``).

    Tags outside the core namespace are returned unchanged.
    """
    if tag.startswith(CORE_PREFIX):
        return SHORT_PREFIX + tag[len(CORE_PREFIX) :]
    return tag


def expand_tag(tag: str) -> str:
    """Inverse of :func:`shorten_tag` (``!!int`` -> ``tag:yaml.org,2002:int``)."""
    if tag.startswith(SHORT_PREFIX):
        return CORE_PREFIX + tag[len(SHORT_PREFIX) :]
    return tag


def resolve_scalar_tag(value: str, plain: bool) -> str:
    """Resolve the implicit short tag of an untagged scalar.

    Args:
        value: The scalar text as written in the source.
        plain: True for plain (unquoted, non-block) scalars.  Only plain
               scalars are subject to implicit resolution.

    Returns:
        The short tag, e.g. ``"!!null"``, ``"!!int"`` or ``"!!str"``.
    """
    return shorten_tag(_resolver.resolve(ScalarNode, value, (plain, False)))
