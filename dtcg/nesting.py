"""Nest flat token sets into token trees."""

from typing import Any, Dict, Iterable, Mapping, Optional, Sequence

from dtcg.exceptions import TokenPathCollisionError
from dtcg.paths import to_token_path
from dtcg.tokens import is_color_token


def set_nested(tree: Dict[str, Any], path: Sequence[str], value: Dict[str, Any], name: str = ""):
    """
    Place `value` at `path`, creating intermediate groups on demand.

    Raises TokenPathCollisionError when the path runs through an existing token,
    or when a group already occupies the final segment.
    """
    cur = tree
    for key in path[:-1]:
        node = cur.setdefault(key, {})
        if is_color_token(node):
            raise TokenPathCollisionError(name, path)
        cur = node

    last = path[-1]
    existing = cur.get(last)
    if existing is not None and not is_color_token(existing):
        raise TokenPathCollisionError(name, path)

    cur[last] = value


def nest_tokens(
    flat: Mapping[str, Dict[str, Any]], key_order: Optional[Iterable[str]] = None
) -> Dict[str, Any]:
    """
    Build a nested token tree from a flat token set.

    Names are visited in `key_order` when given, else in `flat` order.
    Names listed in `key_order` but missing from `flat` are skipped.
    """
    tree: Dict[str, Any] = {}
    keys = flat.keys() if key_order is None else key_order

    for name in keys:
        token = flat.get(name)
        if not token:
            continue
        set_nested(tree, to_token_path(name), token, name)

    return tree
