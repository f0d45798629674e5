"""Typer CLI for the prank generator.

Commands:
    - generate: 이름/Role에 대한 프랭크 1건 출력
    - random: 무작위 Role 프랭크 N건 출력
    - demo: 기본 예시 + 무작위 예시 + 확장 전략 예시 출력
    - roles: Role 목록과 기본 프랭크 템플릿
"""

from __future__ import annotations

import random
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.config.settings import get_settings
from src.core.exceptions import UnknownRoleError
from src.generator import PrankGenerator
from src.models.types import Role
from src.strategy.builtin import PrankStrategyFactory
from src.strategy.intern import InternPrankFactory

app = typer.Typer(no_args_is_help=True)
console = Console()

# 원본 데모의 기본 예시 (이름, Role)
STANDARD_EXAMPLES: tuple[tuple[str, Role], ...] = (
    ("Alice", Role.EMPLOYEE),
    ("Bob", Role.MANAGER),
    ("Charlie", Role.DEVELOPER),
    ("Dave", Role.CORPORATE_PLAYER),
    ("Samantha", Role.HR),
    ("John", Role.UXUI),
)


def _build_generator(*, intern: bool, default: str | None = None) -> PrankGenerator:
    generator = PrankGenerator(default_prank=default)
    if intern:
        generator.register_strategy_factory(InternPrankFactory)
    return generator


def _random_lines(generator: PrankGenerator, count: int, rng: random.Random) -> list[str]:
    """``[Person i][role] prank`` 형식의 무작위 예시."""
    lines: list[str] = []
    for i in range(1, count + 1):
        role = Role.random(rng)
        name = f"Person {i}"
        lines.append(f"[{name}][{role}] {generator.generate_prank(name, role)}")
    return lines


@app.command()
def generate(
    name: Annotated[str, typer.Argument(help="Target name")],
    role: Annotated[str, typer.Option("--role", "-r", help="Target role (e.g. employee, hr)")],
    intern: Annotated[
        bool, typer.Option("--intern", help="Register the intern prank factory")
    ] = False,
    default: Annotated[
        str | None, typer.Option("--default", help="Fallback prank text")
    ] = None,
) -> None:
    """프랭크 1건 생성."""
    try:
        parsed = Role.parse(role)
    except UnknownRoleError as e:
        logger.debug("Role parsing failed", value=e.value)
        console.print(f"[red]{escape(e.message)}[/red]")
        console.print(f"Valid: {', '.join(r.value for r in Role)}")
        raise typer.Exit(code=1) from None

    generator = _build_generator(intern=intern, default=default)
    typer.echo(generator.generate_prank(name, parsed))


@app.command(name="random")
def random_pranks(
    count: Annotated[
        int | None, typer.Option("--count", "-n", min=1, help="Number of examples")
    ] = None,
    seed: Annotated[int | None, typer.Option("--seed", help="Random seed")] = None,
    intern: Annotated[
        bool, typer.Option("--intern", help="Register the intern prank factory")
    ] = False,
) -> None:
    """무작위 Role 프랭크 출력."""
    settings = get_settings()
    rng = random.Random(seed if seed is not None else settings.seed)
    generator = _build_generator(intern=intern)
    for line in _random_lines(generator, count or settings.random_examples, rng):
        typer.echo(line)


@app.command()
def demo(
    seed: Annotated[int | None, typer.Option("--seed", help="Random seed")] = None,
) -> None:
    """기본 예시, 무작위 예시, 확장 전략 예시를 순서대로 출력."""
    settings = get_settings()
    rng = random.Random(seed if seed is not None else settings.seed)
    generator = PrankGenerator()

    typer.echo("\nStandard examples:")
    for name, role in STANDARD_EXAMPLES:
        typer.echo(generator.generate_prank(name, role))

    typer.echo("\nRandom role examples:")
    for line in _random_lines(generator, settings.random_examples, rng):
        typer.echo(line)

    typer.echo("\nExtended strategies example:")
    extended = _build_generator(intern=True)
    typer.echo(extended.generate_prank("Intern Alice", Role.EMPLOYEE))


@app.command()
def roles() -> None:
    """Role 목록과 기본 프랭크 템플릿."""
    table = Table(show_header=True, header_style="bold", title=f"Roles ({len(Role)})")
    table.add_column("Role", style="bold cyan", min_width=16)
    table.add_column("Strategy", min_width=24)
    table.add_column("Prank (name = {name})")

    for role in Role:
        strategy = PrankStrategyFactory.create_strategy(role)
        if strategy is None:
            continue
        table.add_row(
            role.value, type(strategy).__name__, escape(strategy.generate_prank("{name}"))
        )

    console.print(table)
