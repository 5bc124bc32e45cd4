"""Report command: scan a directory of scripts and export corrections to CSV."""

from pathlib import Path

import click
from rich.console import Console

from snfix.analysis.code_corrector import CodeCorrector
from snfix.analysis.correction_report import (
    display_tier_summary,
    scan_files,
    summarize_by_tier,
)
from snfix.commands.options import settings_options
from snfix.core.pipeline import load_settings
from snfix.error.cmd import handle_command_errors

console = Console()


@click.command()
@click.argument("input_dir", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="Output CSV file",
)
@click.option(
    "--pattern",
    default="*.js",
    show_default=True,
    help="Glob pattern for script files (searched recursively)",
)
@settings_options
@handle_command_errors
def report(
    input_dir: Path,
    output: Path,
    pattern: str,
    dictionary_path: Path | None,
    config_path: Path | None,
):
    """Scan all scripts under a directory and report typos as CSV.

    INPUT_DIR: Directory containing script files

    Writes one row per correction or suggestion and prints the number of
    findings per confidence tier.
    """
    console.print(f"[bold blue]Scanning:[/bold blue] {input_dir} ({pattern})")

    paths = sorted(path for path in input_dir.rglob(pattern) if path.is_file())
    if not paths:
        console.print(f"[yellow]Warning:[/yellow] No files matching '{pattern}' found")

    dictionary, matcher_config = load_settings(config_path, dictionary_path)
    corrector = CodeCorrector(dictionary, matcher_config)
    df = scan_files(paths, corrector, root=input_dir)

    output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output, index=False)

    display_tier_summary(summarize_by_tier(df), console)
    console.print(f"[dim]Files scanned: {len(paths)}[/dim]")
    console.print(f"[green]Report saved to:[/green] {output}")
