"""
Union of token sets across themes.

Every theme gets a tree with the same keys: variables a theme lacks are filled
with a transparent placeholder and listed in the missing report.
"""

from typing import Any, Dict, Iterable, List, Mapping, NamedTuple, Sequence, Tuple

from dtcg.exceptions import DuplicateSourceNameError
from dtcg.nesting import nest_tokens
from dtcg.tokens import transparent_token

FlatTokens = Mapping[str, Dict[str, Any]]


class UnionResult(NamedTuple):
    """Per-source union trees and the shared missing report."""

    trees: Dict[str, Dict[str, Any]]
    report: Dict[str, Any]


def union_keys(flat_sets: Iterable[FlatTokens]) -> List[str]:
    """Sorted union of variable names across all flat token sets."""
    keys = set()
    for flat in flat_sets:
        keys.update(flat.keys())
    return sorted(keys)


def merge_union(sources: Sequence[Tuple[str, FlatTokens]]) -> UnionResult:
    """
    Compute union trees for at least two (source_name, flat_tokens) pairs.
    Source names must be unique.

    Report shape:
        {"totalUnionKeys": n, "report": {name: {"missing": [...], "present": k}}}
    with present + len(missing) == n for every source.
    """
    if len(sources) < 2:
        msg = f"Union needs at least 2 sources, got {len(sources)}"
        raise ValueError(msg)

    names = [name for name, _ in sources]
    for name in names:
        if names.count(name) > 1:
            raise DuplicateSourceNameError(name)

    keys = union_keys(flat for _, flat in sources)

    trees = {}
    report = {}

    for name, flat in sources:
        missing = []
        union_flat = {}

        for key in keys:
            token = flat.get(key)
            if token:
                union_flat[key] = token
            else:
                union_flat[key] = transparent_token()
                missing.append(key)

        trees[name] = nest_tokens(union_flat, keys)
        report[name] = {"missing": missing, "present": len(keys) - len(missing)}

    return UnionResult(trees=trees, report={"totalUnionKeys": len(keys), "report": report})
