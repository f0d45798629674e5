"""CLI interface using Typer.

Available subcommands:
    - prank: Prank generation (generate, random, demo, roles)

Usage:
    uv run april-fools prank generate Alice --role employee
    uv run april-fools prank generate "Intern Alice" --role employee --intern
    uv run april-fools prank random --count 5 --seed 7
    uv run april-fools prank demo
    uv run april-fools prank roles
"""

from typing import Annotated

import typer


def create_app() -> typer.Typer:
    """Create the main CLI application with all sub-commands.

    Lazy import를 사용하여 각 서브커맨드 모듈을 필요할 때만 로드합니다.
    """
    from src.cli.prank import app as prank_app
    from src.core.logger import setup_logger, setup_logger_from_config

    main_app = typer.Typer(
        name="april-fools",
        help="April Fools - Role-based prank generator",
        no_args_is_help=True,
    )

    @main_app.callback()
    def _configure(
        verbose: Annotated[
            bool, typer.Option("--verbose", "-v", help="Enable debug logging")
        ] = False,
    ) -> None:
        if verbose:
            setup_logger(console_level="DEBUG")
        else:
            setup_logger_from_config()

    main_app.add_typer(prank_app, name="prank", help="Prank generation")

    return main_app


def main() -> None:
    """Entry point for the ``april-fools`` console script."""
    app = create_app()
    app()
