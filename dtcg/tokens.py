"""DTCG color tokens and extraction of tokens from CSS variable maps."""

from typing import Any, Dict, Mapping, Union

from dtcg.colors import TRANSPARENT, NormalizedColor, parse_color

VSCODE_PREFIX = "--vscode-"


def _json_number(x: float) -> Union[int, float]:
    """Emit 0.0 and 1.0 as 0 and 1 so output matches JSON written by other tools."""
    if float(x).is_integer():
        return int(x)
    return x


def build_color_token(color: NormalizedColor) -> Dict[str, Any]:
    """
    Wrap a normalized color in the DTCG token shape.

    {"$type": "color", "$value": {"colorSpace": "srgb", "components": [r, g, b],
     "alpha": a, "hex": "#RRGGBB"}}
    """
    return {
        "$type": "color",
        "$value": {
            "colorSpace": "srgb",
            "components": [_json_number(color.r), _json_number(color.g), _json_number(color.b)],
            "alpha": _json_number(color.a),
            "hex": color.hex,
        },
    }


def transparent_token() -> Dict[str, Any]:
    """Placeholder token used for variables a theme does not define."""
    return build_color_token(TRANSPARENT)


def is_color_token(node: Any) -> bool:
    """
    True for a color token leaf.
    A group whose children happen to be named $type and $value is not a leaf.
    """
    return (
        isinstance(node, Mapping)
        and node.get("$type") == "color"
        and isinstance(node.get("$value"), Mapping)
    )


def count_leaf_tokens(tree: Any) -> int:
    """Count token leaves in a nested token tree."""
    if not isinstance(tree, Mapping):
        return 0
    if is_color_token(tree):
        return 1
    return sum(count_leaf_tokens(child) for child in tree.values())


def extract_color_tokens(variables: Mapping[str, str]) -> Dict[str, Dict[str, Any]]:
    """
    Build the flat token set for one source.

    Keeps only names starting with --vscode- whose value parses as a color.
    Returns a dict keyed by the original variable name, in input order.
    """
    flat = {}

    for name, value in variables.items():
        if not name.startswith(VSCODE_PREFIX):
            continue

        color = parse_color(value)
        if color is None:
            continue

        flat[name] = build_color_token(color)

    return flat


def count_dropped_values(variables: Mapping[str, str], flat: Mapping[str, Any]) -> int:
    """Number of --vscode- variables left out of `flat` because they are not colors."""
    candidates = sum(1 for name in variables if name.startswith(VSCODE_PREFIX))
    return candidates - len(flat)
