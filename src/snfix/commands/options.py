"""Options shared by the commands that run the corrector."""

from pathlib import Path

import click


def settings_options(func):
    """Add --dictionary and --config options to a command."""
    func = click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Configuration file (JSON) with matcher thresholds",
    )(func)
    func = click.option(
        "--dictionary",
        "dictionary_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="API dictionary (JSON) to use instead of the bundled one",
    )(func)
    return func
