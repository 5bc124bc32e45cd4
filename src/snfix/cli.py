"""CLI entry point for snfix tool."""

import click

from snfix.commands import check, fix, report, rules
from snfix.core.log_config import setup_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="snfix")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """ServiceNow Script Typo Fixer.

    Corrects misspelled ServiceNow API class and method names and rewrites
    deprecated API usage in server-side scripts.
    """
    setup_logging(verbose)


# Register commands
main.add_command(check.check)
main.add_command(fix.fix)
main.add_command(report.report)
main.add_command(rules.list_rules)


if __name__ == "__main__":
    main()
