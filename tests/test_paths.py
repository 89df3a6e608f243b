"""Tests for variable name to token path mapping."""

from dtcg.paths import to_token_path


def test_grouped_name() -> None:
    assert to_token_path("--vscode-editor-background") == ("vscode", "editor", "background")


def test_single_segment_name() -> None:
    assert to_token_path("--vscode-foreground") == ("vscode", "foreground")


def test_leaf_keeps_remaining_hyphens() -> None:
    assert to_token_path("--vscode-editor-inactiveSelection-background") == (
        "vscode",
        "editor",
        "inactiveSelection-background",
    )


def test_prefixes_are_optional() -> None:
    assert to_token_path("vscode-editor-foreground") == ("vscode", "editor", "foreground")
    assert to_token_path("editor-foreground") == ("vscode", "editor", "foreground")


def test_vscode_prefix_is_stripped_once_and_case_sensitive() -> None:
    assert to_token_path("--vscode-vscode-x") == ("vscode", "vscode", "x")
    assert to_token_path("--VSCODE-x") == ("vscode", "VSCODE", "x")


def test_empty_name() -> None:
    assert to_token_path("--") == ("vscode", "")
