"""Tests for input discovery, reading and writing."""

import json
from pathlib import Path

import pytest

from dtcg.exceptions import DuplicateSourceNameError, InputNotFoundError, NoSupportedInputError
from dtcg.files import (
    check_unique_source_names,
    collect_input_files,
    parse_css_declarations,
    read_variable_map,
    source_name,
    theme_key_to_variable,
    write_json,
)

CSS_TEXT = """\
/* exported from devtools */
.monaco-workbench {
  --vscode-foreground: #cccccc;
  --vscode-editor-background:   #1e1e1e ;

  --vscode-font-family: -apple-system, "Segoe UI", sans-serif;
  this is not a declaration
}
"""


def test_parse_css_declarations_counts_skipped_lines() -> None:
    parsed = parse_css_declarations(CSS_TEXT)

    assert parsed.kind == "css"
    assert parsed.variables == {
        "--vscode-foreground": "#cccccc",
        "--vscode-editor-background": "#1e1e1e",
        "--vscode-font-family": '-apple-system, "Segoe UI", sans-serif',
    }
    # comment, selector, garbage line, closing brace
    assert parsed.skipped == 4


def test_parse_css_declarations_later_duplicate_wins() -> None:
    parsed = parse_css_declarations("--vscode-a: #111;\n--vscode-a: #222;\n")
    assert parsed.variables == {"--vscode-a": "#222"}


def test_read_variable_map_json(tmp_path: Path) -> None:
    path = tmp_path / "dark.json"
    path.write_text(json.dumps({"--vscode-foreground": "#cccccc", "count": 3}), encoding="utf-8")

    parsed = read_variable_map(path)
    assert parsed == ({"--vscode-foreground": "#cccccc"}, 0, "json")


def test_read_variable_map_vscode_theme(tmp_path: Path) -> None:
    path = tmp_path / "theme.json"
    theme = {"name": "Dark", "colors": {"editor.background": "#1e1e1e", "foreground": "#ccc"}}
    path.write_text(json.dumps(theme), encoding="utf-8")

    parsed = read_variable_map(path)
    assert parsed.kind == "theme"
    assert parsed.variables == {
        "--vscode-editor-background": "#1e1e1e",
        "--vscode-foreground": "#ccc",
    }


def test_read_variable_map_falls_back_to_css(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{\n--vscode-foreground: #cccccc;\n}\n", encoding="utf-8")

    parsed = read_variable_map(path)
    assert parsed.kind == "css"
    assert parsed.variables == {"--vscode-foreground": "#cccccc"}
    assert parsed.skipped == 2


def test_theme_key_to_variable() -> None:
    assert theme_key_to_variable("editorGroupHeader.tabsBackground") == (
        "--vscode-editorGroupHeader-tabsBackground"
    )


def test_collect_input_files_from_directory(tmp_path: Path) -> None:
    for name in ("b.css", "a.JSON", "c.txt", "notes.md"):
        (tmp_path / name).write_text("", encoding="utf-8")
    (tmp_path / "nested").mkdir()

    files = collect_input_files(tmp_path)
    assert [p.name for p in files] == ["a.JSON", "b.css", "c.txt"]


def test_collect_input_files_single_file(tmp_path: Path) -> None:
    path = tmp_path / "light.css"
    path.write_text("", encoding="utf-8")
    assert collect_input_files(path) == [path]


def test_collect_input_files_errors(tmp_path: Path) -> None:
    with pytest.raises(InputNotFoundError):
        collect_input_files(tmp_path / "missing")

    (tmp_path / "readme.md").write_text("", encoding="utf-8")
    with pytest.raises(NoSupportedInputError):
        collect_input_files(tmp_path)


def test_source_name() -> None:
    assert source_name(Path("themes/dark_modern.json")) == "dark_modern"
    assert source_name(Path("light.theme.css")) == "light.theme"


def test_write_json_creates_parents(tmp_path: Path) -> None:
    path = tmp_path / "a" / "b" / "out.json"
    write_json(path, {"name": "Überschrift"})
    assert path.read_text(encoding="utf-8") == '{\n  "name": "Überschrift"\n}'


def test_read_variable_map_json_with_byte_order_mark(tmp_path: Path) -> None:
    path = tmp_path / "bom.json"
    path.write_bytes(b"\xef\xbb\xbf" + json.dumps({"--vscode-foreground": "#cccccc"}).encode())

    parsed = read_variable_map(path)
    assert parsed == ({"--vscode-foreground": "#cccccc"}, 0, "json")


def test_read_variable_map_replaces_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "latin.css"
    path.write_bytes(b"/* caf\xe9 */\n--vscode-foreground: #cccccc;\n")

    parsed = read_variable_map(path)
    assert parsed.variables == {"--vscode-foreground": "#cccccc"}
    assert parsed.skipped == 1


def test_check_unique_source_names(tmp_path: Path) -> None:
    check_unique_source_names([tmp_path / "dark.json", tmp_path / "light.css"])

    with pytest.raises(DuplicateSourceNameError) as excinfo:
        check_unique_source_names([tmp_path / "dark.json", tmp_path / "dark.css"])
    assert excinfo.value.name == "dark"
