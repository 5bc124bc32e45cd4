"""Rules command: list the registered rewrite rules."""

import click
from rich.console import Console
from rich.table import Table

from snfix.rules import get_rules

console = Console()


@click.command(name="rules")
def list_rules():
    """List the rewrite rules applied before typo correction."""
    table = Table(title="Rewrite Rules")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")

    for rule in get_rules():
        table.add_row(rule.rule_name, rule.description)

    console.print(table)
