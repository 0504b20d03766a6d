"""
Main entry point for autodoc.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from . import version
from .cmd import run_comment, run_resolve, run_split, run_templates
from .config import Config
from .templates.types import DeclarationKind
from .text.comment import CaseMode


logger = logging.getLogger(__name__)

KIND_CHOICE = click.Choice([kind.value for kind in DeclarationKind], case_sensitive=False)


@click.group()
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Optional autodoc config file (JSON)"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose logging"
)
@click.version_option(version=version())
@click.pass_context
def main(ctx: click.Context, config_path: Optional[Path], verbose: bool) -> None:
    """
    Template driven documentation comments.

    Matches declarations against configurable templates and turns
    identifiers into comment text.
    """
    # Set up logging
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    logger.debug("autodoc starting")

    config = Config()
    if config_path:
        try:
            config.load_config(config_path)
        except Exception as e:
            logger.error(f"autodoc failed with error: {e}", exc_info=True)
            sys.exit(1)
        if verbose:
            logging.getLogger().setLevel(logging.DEBUG)
    ctx.obj = config


@main.command()
@click.argument("identifier")
@click.option("--replace", is_flag=True, help="Apply keyword replacements")
@click.option("--kind", type=KIND_CHOICE, default="method", help="Declaration kind for replacements")
@click.pass_obj
def split(config: Config, identifier: str, replace: bool, kind: str) -> None:
    """Split an identifier into words."""
    sys.exit(run_split(identifier, replace, kind, config))


@main.command()
@click.argument("identifier")
@click.option("--kind", type=KIND_CHOICE, default="method", help="Declaration kind of the identifier")
@click.option("--split/--no-split", "split_words", default=True, help="Split into words (default on)")
@click.option("--replace/--no-replace", default=True, help="Apply keyword replacements (default on)")
@click.option("--first-upper", "mode", flag_value=CaseMode.FIRST_TO_UPPER.value, help="First character to upper case")
@click.option("--first-lower", "mode", flag_value=CaseMode.FIRST_TO_LOWER.value, help="First character to lower case")
@click.pass_obj
def comment(config: Config, identifier: str, kind: str, split_words: bool, replace: bool,
            mode: Optional[str]) -> None:
    """Create comment text from an identifier."""
    case_mode = CaseMode(mode) if mode else CaseMode.NONE
    sys.exit(run_comment(identifier, kind, split_words, replace, case_mode, config))


@main.command()
@click.argument("declarations", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--render", is_flag=True, help="Print the rendered template bodies")
@click.pass_obj
def resolve(config: Config, declarations: Path, render: bool) -> None:
    """Resolve the declarations of a JSON file to templates."""
    sys.exit(run_resolve(declarations, render, config))


@main.command()
@click.option("--validate", is_flag=True, help="Check patterns and template bodies")
@click.pass_obj
def templates(config: Config, validate: bool) -> None:
    """List the configured templates."""
    sys.exit(run_templates(config, validate))


if __name__ == "__main__":
    main()
