#!/usr/bin/env python3
"""
VS Code CSS Variables to DTCG Design Tokens

Converts VS Code theme color variables (--vscode-*) into Design Token Community
Group JSON. With two or more inputs, also writes "union" token files in which
every theme carries the same keys, filling missing ones with transparent black,
plus a report of what each theme was missing.

Usage:
    uv run main.py red.json dark_modern.json
    uv run main.py ./css_declarations
    uv run main.py --no-union light.css dark.css out/
    uv run main.py --config dtcg.yml themes/

Inputs:
    - CSS declarations text: one "--vscode-foreground: #cccccc;" per line
    - JSON object: {"--vscode-foreground": "#cccccc"}
    - VS Code color theme JSON: {"colors": {"foreground": "#cccccc"}}
    - Directory: every .json/.css/.txt file directly inside it

Output:
    <output-dir>/tokens/<name>.tokens.json
    <output-dir>/union/<name>.union.tokens.json
    <output-dir>/reports/union.missing_report.json

The last positional argument is taken as the output directory when it does not
exist yet, or is a directory without any supported input files.
Default output directory: output/
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Optional, Sequence, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from dtcg.config import ConverterConfig, load_config
from dtcg.exceptions import (
    ConfigError,
    DuplicateSourceNameError,
    InputNotFoundError,
    NoSupportedInputError,
    TokenPathCollisionError,
)
from dtcg.files import (
    check_unique_source_names,
    collect_input_files,
    has_supported_files,
    read_variable_map,
    source_name,
    write_json,
)
from dtcg.nesting import nest_tokens
from dtcg.tokens import count_dropped_values, count_leaf_tokens, extract_color_tokens
from dtcg.union import merge_union

console = Console()

REPORT_NAME = "union.missing_report.json"


class ConvertedSource(NamedTuple):
    """One converted input file."""

    input_path: Path
    name: str
    flat: Dict[str, Dict[str, Any]]
    nested: Dict[str, Any]
    skipped: int
    dropped: int
    kind: str


def split_output_dir(paths: Sequence[str]) -> Tuple[List[str], Optional[Path]]:
    """
    Separate an optional trailing output directory from the input paths.

    Returns (inputs, output_dir) where output_dir is None when the last argument
    is an input.
    """
    rest = list(paths)
    if not rest:
        return rest, None

    last = Path(rest[-1])
    if last.exists():
        if last.is_dir() and not has_supported_files(last):
            rest.pop()
            return rest, last
        return rest, None

    rest.pop()
    return rest, last


def convert_file(input_path: Path, output_dir: Path, indent: int) -> ConvertedSource:
    """Convert one input file and write its tokens file."""
    name = source_name(input_path)
    parsed = read_variable_map(input_path)

    flat = extract_color_tokens(parsed.variables)
    nested = nest_tokens(flat)

    write_json(output_dir / "tokens" / f"{name}.tokens.json", nested, indent=indent)

    return ConvertedSource(
        input_path=input_path,
        name=name,
        flat=flat,
        nested=nested,
        skipped=parsed.skipped,
        dropped=count_dropped_values(parsed.variables, flat),
        kind=parsed.kind,
    )


def write_union(items: Sequence[ConvertedSource], output_dir: Path, indent: int) -> Table:
    """Write union token files and the missing report, returning the summary table."""
    result = merge_union([(item.name, item.flat) for item in items])

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("File", style="cyan", no_wrap=True)
    table.add_column("Output Path", style="white")
    table.add_column("Tokens", justify="right")
    table.add_column("Missing Filled", justify="right", style="yellow")

    for item in items:
        tree = result.trees[item.name]
        relative = f"union/{item.name}.union.tokens.json"
        write_json(output_dir / relative, tree, indent=indent)

        missing = result.report["report"][item.name]["missing"]
        table.add_row(item.name, relative, str(count_leaf_tokens(tree)), str(len(missing)))

    write_json(output_dir / "reports" / REPORT_NAME, result.report, indent=indent)
    console.print(
        f"[green]✓[/green] Missing report: reports/{REPORT_NAME} "
        f"({result.report['totalUnionKeys']} total keys)"
    )

    return table


def run(inputs: Sequence[str], config: ConverterConfig):
    """Convert every input, then build union outputs when enabled."""
    all_files: List[Path] = []
    for input_path in inputs:
        all_files.extend(collect_input_files(Path(input_path)))
    check_unique_source_names(all_files)

    output_dir = config.output_dir

    console.print("\n")
    console.print(Panel.fit(
        "[bold cyan]VS Code -> DTCG Token Conversion[/bold cyan]",
        border_style="cyan"
    ))
    console.print(f"[dim]Output directory: {output_dir}[/dim]")
    console.print(
        f"[dim]Input files ({len(all_files)}): {', '.join(p.name for p in all_files)}[/dim]\n"
    )
    output_dir.mkdir(parents=True, exist_ok=True)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Input File", style="cyan", no_wrap=True)
    table.add_column("Output Path", style="white")
    table.add_column("Tokens", justify="right")
    table.add_column("Skipped", justify="right", style="dim")
    table.add_column("Not Colors", justify="right", style="dim")
    table.add_column("Kind", style="dim")

    items = []
    for input_path in all_files:
        console.print(f"[dim]Converting: {input_path.name}[/dim]")
        item = convert_file(input_path, output_dir, config.indent)
        items.append(item)
        table.add_row(
            input_path.name,
            f"tokens/{item.name}.tokens.json",
            str(count_leaf_tokens(item.nested)),
            str(item.skipped),
            str(item.dropped),
            item.kind,
        )

    console.print(table)

    if config.union and len(items) >= 2:
        console.print("[dim]Building union tokens...[/dim]")
        console.print(write_union(items, output_dir, config.indent))
    elif not config.union:
        console.print("[dim](Union disabled: --no-union)[/dim]")
    else:
        console.print("[dim](Less than 2 input files, skip union generation)[/dim]")

    console.print("\n[green]✓[/green] Conversion complete!")
    console.print(f"[cyan]Output:[/cyan] {output_dir}\n")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Convert VS Code theme CSS variables into DTCG design tokens.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "paths",
        nargs="+",
        metavar="PATH",
        help="Input files or directories, optionally followed by an output directory",
    )

    parser.add_argument(
        "--no-union",
        action="store_true",
        help="Skip union token files and the missing report",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML config file (output_dir, union, indent)",
    )

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None):
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args.config) if args.config else ConverterConfig()
    except ConfigError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        sys.exit(1)

    inputs, output_dir = split_output_dir(args.paths)
    if not inputs:
        console.print("[red]Error: No input files or directories.[/red]")
        sys.exit(1)

    if output_dir is not None:
        config.output_dir = output_dir
    if args.no_union:
        config.union = False

    try:
        run(inputs, config)
    except (
        InputNotFoundError,
        NoSupportedInputError,
        DuplicateSourceNameError,
        TokenPathCollisionError,
    ) as exc:
        console.print(f"[red]Error: {exc}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
