"""Map CSS variable names to token paths."""

from typing import Tuple

ROOT_GROUP = "vscode"


def to_token_path(name: str) -> Tuple[str, ...]:
    """
    Convert a CSS variable name into a token path.

    --vscode-editor-background                 -> ("vscode", "editor", "background")
    --vscode-foreground                        -> ("vscode", "foreground")
    --vscode-editor-inactiveSelection-background
                                               -> ("vscode", "editor", "inactiveSelection-background")

    Only one level of grouping is produced below the root.
    """
    n = name.strip()
    n = n.removeprefix("--")
    n = n.removeprefix("vscode-")

    parts = n.split("-")
    if len(parts) == 1:
        return (ROOT_GROUP, parts[0])

    return (ROOT_GROUP, parts[0], "-".join(parts[1:]))
