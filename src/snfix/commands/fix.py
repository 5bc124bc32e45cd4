"""Fix command: apply rewrite rules and fuzzy typo correction to a script."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from snfix.commands.options import settings_options
from snfix.core.pipeline import correct_script, load_settings
from snfix.error.cmd import handle_command_errors
from snfix.rules import get_rules

console = Console(stderr=True, highlight=False)


@click.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: print corrected script to stdout)",
)
@click.option(
    "--rules",
    "rule_names",
    help="Comma-separated rewrite rules to apply (default: all, see 'snfix rules')",
)
@click.option("--no-rules", is_flag=True, help="Skip rewrite rules, only fix typos")
@click.option("--no-fuzzy", is_flag=True, help="Skip typo correction, only apply rewrite rules")
@settings_options
@handle_command_errors
def fix(
    input_file: Path,
    output: Path | None,
    rule_names: str | None,
    no_rules: bool,
    no_fuzzy: bool,
    dictionary_path: Path | None,
    config_path: Path | None,
):
    """Fix typos and deprecated API usage in a ServiceNow script.

    INPUT_FILE: Script file to correct
    """
    if rule_names and no_rules:
        raise ValueError("--rules and --no-rules cannot be used together")

    dictionary, matcher_config = load_settings(config_path, dictionary_path)
    rules = [] if no_rules else get_rules(rule_names)

    code = input_file.read_text(encoding="utf-8")
    result = correct_script(
        code, dictionary=dictionary, config=matcher_config, rules=rules, fuzzy=not no_fuzzy
    )

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(result.processed, encoding="utf-8")
        console.print(f"[green]Corrected script saved to:[/green] {output}")
    else:
        click.echo(result.processed, nl=False)

    for message in result.fixes:
        console.print(f"[green]✓[/green] {escape(message)}")
    for message in result.suggestions:
        console.print(f"[yellow]?[/yellow] {escape(message)}")

    if not result.fixes and not result.suggestions:
        console.print("[dim]No changes needed[/dim]")
