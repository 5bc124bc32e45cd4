"""Check command: report typos without modifying the script."""

from pathlib import Path

import click
from rich.console import Console

from snfix.analysis.code_corrector import CodeCorrector
from snfix.analysis.correction_report import analysis_to_dataframe, display_corrections_table
from snfix.commands.options import settings_options
from snfix.core.pipeline import load_settings
from snfix.error.cmd import handle_command_errors

console = Console()


@click.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@settings_options
@handle_command_errors
def check(input_file: Path, dictionary_path: Path | None, config_path: Path | None):
    """Check a ServiceNow script for likely typos.

    INPUT_FILE: Script file to analyze (left unchanged)
    """
    console.print(f"[bold blue]Checking:[/bold blue] {input_file}")

    dictionary, matcher_config = load_settings(config_path, dictionary_path)
    code = input_file.read_text(encoding="utf-8")
    analysis = CodeCorrector(dictionary, matcher_config).analyze_code(code)

    df = analysis_to_dataframe(code, analysis, file=str(input_file))
    if df.empty:
        console.print("[bold green]✓[/bold green] No typos found")
        return

    display_corrections_table(df, console, title=f"Typos in {input_file.name}")
    console.print(
        f"[dim]{len(analysis.corrections)} auto-fixable, "
        f"{len(analysis.suggestions)} suggestion(s)[/dim]"
    )
