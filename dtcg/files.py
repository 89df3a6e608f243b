"""
Input discovery, reading and JSON output.

Inputs are either:
    - CSS declaration text ("--vscode-foreground: #cccccc;" one per line)
    - a JSON object of variable names to values ({"--vscode-foreground": "#ccc"})
    - a VS Code color theme JSON ({"colors": {"editor.background": "#1e1e1e"}})
"""

import json
import re
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Sequence

from dtcg.exceptions import DuplicateSourceNameError, InputNotFoundError, NoSupportedInputError

SUPPORTED_INPUT_EXTS = {".json", ".css", ".txt"}

CSS_PATTERN = re.compile(r"^\s*([_A-Za-z][\w-]*|--[\w-]+)\s*:\s*(.+?)\s*;\s*$")


class ParsedInput(NamedTuple):
    """Variables read from one input file."""

    variables: Dict[str, str]
    skipped: int
    kind: str


def _is_ignorable_line(line: str) -> bool:
    """Braces, selector lines and comment lines."""
    if line in ("{", "}"):
        return True
    if line.endswith("{") or line.startswith("."):
        return True
    return line.startswith(("/*", "*", "//"))


def parse_css_declarations(content: str) -> ParsedInput:
    """
    Parse `name: value;` lines.

    Selector lines, braces and comment lines are tolerated but counted as skipped,
    as is every line that is not a declaration. Blank lines are not counted.
    """
    variables = {}
    skipped = 0

    for raw in content.splitlines():
        line = raw.strip()
        if not line:
            continue

        if _is_ignorable_line(line):
            skipped += 1
            continue

        match = CSS_PATTERN.match(raw)
        if not match:
            skipped += 1
            continue

        variables[match.group(1).strip()] = match.group(2).strip()

    return ParsedInput(variables, skipped, "css")


def theme_key_to_variable(key: str) -> str:
    """
    Map a VS Code theme color id to the CSS variable VS Code exposes for it.
    E.g. "editor.background" -> "--vscode-editor-background"
    """
    return "--vscode-" + key.replace(".", "-")


def _variables_from_json(data: Dict[str, Any]) -> ParsedInput:
    colors = data.get("colors")
    if isinstance(colors, dict):
        variables = {
            theme_key_to_variable(key): value
            for key, value in colors.items()
            if isinstance(value, str)
        }
        return ParsedInput(variables, 0, "theme")

    variables = {key: value for key, value in data.items() if isinstance(value, str)}
    return ParsedInput(variables, 0, "json")


def read_variable_map(path: Path) -> ParsedInput:
    """
    Read one input file into a variable map, trying JSON before CSS declarations.

    A leading byte-order mark is dropped and undecodable bytes become U+FFFD.
    """
    with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
        content = f.read()

    trimmed = content.strip()
    if trimmed.startswith(("{", "[")):
        try:
            data = json.loads(trimmed)
        except json.JSONDecodeError:
            data = None
        if isinstance(data, dict):
            return _variables_from_json(data)

    return parse_css_declarations(content)


def has_supported_files(directory: Path) -> bool:
    """True when `directory` directly holds a file with a supported extension."""
    return any(
        p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTS for p in directory.iterdir()
    )


def collect_input_files(input_path: Path) -> List[Path]:
    """
    Resolve an input argument into the files to convert.

    A file is returned as-is; a directory yields its direct children with a
    supported extension, sorted by path.
    """
    if not input_path.exists():
        raise InputNotFoundError(input_path)

    if input_path.is_file():
        return [input_path]

    files = sorted(
        p
        for p in input_path.iterdir()
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTS
    )
    if not files:
        raise NoSupportedInputError(input_path, SUPPORTED_INPUT_EXTS)

    return files


def source_name(path: Path) -> str:
    """File name without its last extension: dark_modern.json -> dark_modern."""
    return path.stem


def check_unique_source_names(files: Sequence[Path]):
    """Raise DuplicateSourceNameError when two files map to the same source name."""
    seen: Dict[str, Path] = {}
    for path in files:
        name = source_name(path)
        if name in seen:
            raise DuplicateSourceNameError(name, [seen[name], path])
        seen[name] = path


def write_json(output_path: Path, data: Any, indent: int = 2):
    """Write data as JSON, creating parent directories."""
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(json.dumps(data, indent=indent, ensure_ascii=False))
