"""
Subnet Quiz CLI - IPv4 subnetting practice in the terminal.

Usage:
    subnet-quiz play                      # 10-question quiz, 3 strikes
    subnet-quiz play -n 20 --strikes 5    # longer run, more forgiving
    subnet-quiz play -t host_range        # drill one archetype
    subnet-quiz generate -n 5 --json      # dump a question set
    subnet-quiz calc 192.168.1.100/24     # subnet calculator
    subnet-quiz explain broadcast_address # how to solve an archetype
"""

from __future__ import annotations

import json
import sys
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from subnet_quiz.config import Settings, get_settings
from subnet_quiz.core import rng as rng_source
from subnet_quiz.core.errors import SubnetQuizError
from subnet_quiz.core.ipv4 import parse
from subnet_quiz.core.subnet import cidr_from_mask, describe_subnet, parse_cidr_notation
from subnet_quiz.delivery import visuals as ui
from subnet_quiz.generation.explanations import get_guide
from subnet_quiz.generation.question_set import generate_question_set
from subnet_quiz.quiz.models import QuestionArchetype
from subnet_quiz.quiz.session import start_quiz, submit_answer, summarize

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="subnet-quiz",
    help="🌐 Subnet Quiz - randomized IPv4 subnetting practice",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()

QUIT_INPUTS = {"q", "quit", "exit"}


def configure_logging(settings: Settings) -> None:
    """Route loguru output according to settings."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )
    if settings.log_file:
        logger.add(settings.log_file, level="DEBUG", rotation="1 MB", retention=3)


def _fail(message: str) -> typer.Exit:
    console.print(f"[red]✗ {message}[/red]")
    return typer.Exit(code=1)


# =============================================================================
# Quiz Commands
# =============================================================================


@app.command()
def play(
    count: Annotated[
        int | None, typer.Option("--count", "-n", min=1, help="Number of questions")
    ] = None,
    strikes: Annotated[
        int | None, typer.Option("--strikes", "-s", min=1, help="Wrong answers allowed before elimination")
    ] = None,
    types: Annotated[
        list[QuestionArchetype] | None,
        typer.Option("--type", "-t", help="Only ask these archetypes (repeatable)"),
    ] = None,
    seed: Annotated[
        int | None, typer.Option("--seed", help="Seed the random source for a repeatable quiz")
    ] = None,
) -> None:
    """
    Play an interactive subnetting quiz.

    Enter the option number to answer, or 'q' to quit early.
    """
    settings = get_settings()
    if seed is not None:
        rng_source.seed(seed)

    questions = generate_question_set(count or settings.question_count, archetypes=types or None)
    state = start_quiz(questions, strikes or settings.max_strikes)

    console.print(Panel(
        f"[bold cyan]SUBNET QUIZ[/]\n"
        f"Questions: {state.total_questions}\n"
        f"Strikes allowed: {state.max_strikes}",
        title="🌐",
        border_style="cyan",
    ))

    while not state.is_finished:
        question = state.current_question
        ui.render_question(console, question, state.current_index + 1, state.total_questions)

        choice = _ask_choice(len(question.options))
        if choice is None:
            console.print("[yellow]Quiz ended early.[/yellow]")
            break

        state, result = submit_answer(state, choice)
        console.print(ui.result_panel(result, show_explanation=settings.show_explanations))
        console.print(ui.stats_panel(state))

    console.print(ui.summary_panel(summarize(state)))


def _ask_choice(option_count: int) -> int | None:
    """Prompt until a valid 1-based option number is entered. None means quit."""
    valid = {str(i) for i in range(1, option_count + 1)}
    while True:
        raw = Prompt.ask(ui.get_prompt("choice", f"[1-{option_count}]")).strip().lower()
        if raw in QUIT_INPUTS:
            return None
        if raw in valid:
            return int(raw) - 1
        console.print(f"[dim]Enter a number from 1 to {option_count}, or 'q' to quit[/dim]")


@app.command()
def generate(
    count: Annotated[
        int | None, typer.Option("--count", "-n", min=1, help="Number of questions")
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print question records as JSON")
    ] = False,
    types: Annotated[
        list[QuestionArchetype] | None,
        typer.Option("--type", "-t", help="Only generate these archetypes (repeatable)"),
    ] = None,
    seed: Annotated[
        int | None, typer.Option("--seed", help="Seed the random source")
    ] = None,
) -> None:
    """
    Generate a question set and print it with the answers marked.
    """
    settings = get_settings()
    if seed is not None:
        rng_source.seed(seed)

    questions = generate_question_set(count or settings.question_count, archetypes=types or None)

    if as_json:
        typer.echo(json.dumps([q.model_dump(mode="json") for q in questions], indent=2))
        return

    for question in questions:
        console.print(ui.question_panel(question, question.id, len(questions)))
        console.print(ui.options_table(question, reveal=True))


# =============================================================================
# Reference Commands
# =============================================================================


@app.command()
def calc(
    address: Annotated[
        str, typer.Argument(help="Address in CIDR notation (192.168.1.100/24), or a bare address with --mask")
    ],
    mask: Annotated[
        str | None, typer.Option("--mask", "-m", help="Dotted-decimal subnet mask, e.g. 255.255.255.0")
    ] = None,
) -> None:
    """
    Subnet calculator: mask, network, broadcast and usable host range.
    """
    try:
        if mask is not None:
            ip = parse(address)
            cidr = cidr_from_mask(parse(mask))
        else:
            ip, cidr = parse_cidr_notation(address)
        info = describe_subnet(ip, cidr)
    except SubnetQuizError as e:
        raise _fail(str(e)) from None

    console.print(ui.subnet_table(info))


@app.command()
def explain(
    archetype: Annotated[
        QuestionArchetype, typer.Argument(help="Question archetype to explain")
    ],
) -> None:
    """
    Show how to solve one type of question.
    """
    console.print(ui.guide_panel(get_guide(archetype)))


@app.command("types")
def list_types() -> None:
    """
    List question archetypes with their point values.
    """
    table = Table(title="Question archetypes")
    table.add_column("Archetype", style="cyan")
    table.add_column("Title", style="white")
    table.add_column("Points", style="green", justify="right")
    for archetype in QuestionArchetype:
        table.add_row(archetype.value, get_guide(archetype).title, str(archetype.points))
    console.print(table)


# =============================================================================
# Entry Point
# =============================================================================


def main() -> None:
    """CLI entry point."""
    configure_logging(get_settings())
    app()


if __name__ == "__main__":
    main()
