"""
Rich visual components for the quiz CLI.

Blue "network console" color scheme. Every function returns a renderable
(or prints to a given console) so the CLI stays free of styling details.
"""

from __future__ import annotations

from rich import box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from subnet_quiz.core.subnet import SubnetInfo
from subnet_quiz.generation.explanations import ArchetypeGuide, to_binary
from subnet_quiz.quiz.models import Question
from subnet_quiz.quiz.session import AnswerResult, QuizState, QuizSummary

# =============================================================================
# COLOR THEME
# =============================================================================

QUIZ_THEME = {
    "primary": "#3B82F6",  # Blue - main accent
    "secondary": "#60A5FA",  # Light blue - secondary accent
    "accent": "#22D3EE",  # Cyan - highlights
    "success": "#22C55E",  # Green - correct answers
    "warning": "#F59E0B",  # Amber - strikes
    "error": "#EF4444",  # Red - incorrect
    "dim": "#6B7280",  # Gray - secondary text
    "white": "#F3F4F6",  # Off-white - primary text
}

STYLES = {
    "quiz_primary": Style(color=QUIZ_THEME["primary"], bold=True),
    "quiz_secondary": Style(color=QUIZ_THEME["secondary"]),
    "quiz_accent": Style(color=QUIZ_THEME["accent"], bold=True),
    "quiz_success": Style(color=QUIZ_THEME["success"], bold=True),
    "quiz_warning": Style(color=QUIZ_THEME["warning"], bold=True),
    "quiz_error": Style(color=QUIZ_THEME["error"], bold=True),
    "quiz_dim": Style(color=QUIZ_THEME["dim"]),
}

PROMPTS = {
    "choice": ">_ SELECT OPTION",
    "default": ">_ INPUT",
}


def get_prompt(kind: str, suffix: str = "") -> str:
    """Prompt string for Prompt.ask, e.g. get_prompt("choice", "[1-4]")."""
    base = PROMPTS.get(kind, PROMPTS["default"])
    if suffix:
        return f"[cyan]{base}[/cyan] {suffix}"
    return f"[cyan]{base}[/cyan]"


def question_panel(question: Question, position: int, total: int) -> Panel:
    """Question text with a header showing archetype, position and points."""
    header = Text()
    header.append(f"[{question.archetype.value.upper()}]", style=STYLES["quiz_accent"])
    header.append(f" Question {position} of {total}", style=STYLES["quiz_dim"])
    header.append(f"  {question.points} pts", style=STYLES["quiz_secondary"])

    content = Text(question.prompt, style=Style(color=QUIZ_THEME["white"]))

    return Panel(
        Align.left(content),
        title=header,
        title_align="left",
        border_style=Style(color=QUIZ_THEME["primary"]),
        box=box.HEAVY,
        padding=(1, 2),
    )


def options_table(question: Question, reveal: bool = False) -> Table:
    """Numbered option list; `reveal` marks the correct one."""
    table = Table(box=box.MINIMAL, show_header=False)
    table.add_column("Index", style="cyan", justify="right", width=4)
    table.add_column("Option", style="white")

    for i, option in enumerate(question.options):
        label = option
        if reveal and i == question.correct_index:
            label = f"[bold green]{option}  ✓[/bold green]"
        table.add_row(f"[{i + 1}]", label)

    return table


def result_panel(result: AnswerResult, show_explanation: bool = True) -> Panel:
    """Correct/incorrect feedback with the worked solution."""
    color = QUIZ_THEME["success"] if result.correct else QUIZ_THEME["error"]
    status = f"CORRECT  +{result.points_awarded} pts" if result.correct else "INCORRECT  strike!"
    icon = "◉" if result.correct else "✗"

    content = Text()
    content.append(f"{icon} {status}\n\n", style=Style(color=color, bold=True))
    content.append("Answer: ", style=STYLES["quiz_dim"])
    content.append(result.correct_answer, style=Style(color=QUIZ_THEME["white"], bold=True))

    if show_explanation and result.question.explanation:
        content.append("\n\n")
        content.append("Explanation: ", style=STYLES["quiz_warning"])
        content.append(result.question.explanation, style=STYLES["quiz_dim"])

    return Panel(
        content,
        border_style=Style(color=color),
        box=box.HEAVY,
        padding=(1, 2),
    )


def stats_panel(state: QuizState) -> Panel:
    """Running score, accuracy and remaining strikes."""
    answered = len(state.answers)
    incorrect = answered - state.correct_count
    accuracy = (state.correct_count / max(1, answered)) * 100

    stats_text = Text()
    stats_text.append(f"★ {state.score} pts", style=STYLES["quiz_accent"])
    stats_text.append(f"  ✓ {state.correct_count}", style=STYLES["quiz_success"])
    stats_text.append(f"  ✗ {incorrect}", style=STYLES["quiz_error"])
    stats_text.append(f"\n{accuracy:.0f}% accuracy", style=STYLES["quiz_dim"])
    stats_text.append(
        "\nStrikes: " + "✗" * state.strikes + "·" * state.strikes_left,
        style=STYLES["quiz_warning"],
    )

    return Panel(
        stats_text,
        title="[bold]Score[/bold]",
        border_style=Style(color=QUIZ_THEME["accent"]),
        box=box.ROUNDED,
        padding=(0, 1),
    )


def summary_panel(summary: QuizSummary) -> Panel:
    """End-of-quiz results."""
    title = "ELIMINATED" if summary.eliminated else "Quiz Complete!"
    color = QUIZ_THEME["error"] if summary.eliminated else QUIZ_THEME["success"]

    content = Text()
    content.append(
        f"Score: {summary.score} / {summary.max_score} pts\n",
        style=Style(color=QUIZ_THEME["white"], bold=True),
    )
    content.append(
        f"Correct: {summary.correct_count} of {summary.total_questions} ({summary.percentage}%)\n",
        style=STYLES["quiz_secondary"],
    )
    if summary.eliminated:
        content.append(
            f"Out after {summary.strikes} strikes on question {summary.answered}\n",
            style=STYLES["quiz_error"],
        )
    content.append(f"\n{summary.message}", style=STYLES["quiz_dim"])

    return Panel(
        content,
        title=f"[bold]{title}[/bold]",
        border_style=Style(color=color),
        box=box.DOUBLE,
        padding=(1, 2),
    )


def subnet_table(info: SubnetInfo) -> Table:
    """Calculator output for one address/prefix."""
    table = Table(title=f"{info.address}/{info.cidr}", box=box.ROUNDED, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")
    table.add_column("Binary", style="dim")

    has_hosts = info.usable_hosts > 0
    table.add_row("Subnet mask", str(info.mask), to_binary(info.mask))
    table.add_row("Network", str(info.network), to_binary(info.network))
    table.add_row("Broadcast", str(info.broadcast), to_binary(info.broadcast))
    table.add_row("First usable", str(info.first_usable) if has_hosts else "n/a", "")
    table.add_row("Last usable", str(info.last_usable) if has_hosts else "n/a", "")
    table.add_row("Usable hosts", str(info.usable_hosts), "")
    table.add_row("Total addresses", str(info.total_addresses), "")
    return table


def guide_panel(guide: ArchetypeGuide) -> Panel:
    content = Text()
    content.append("How to solve this type of question:\n", style=STYLES["quiz_primary"])
    content.append(guide.how_to, style=Style(color=QUIZ_THEME["white"]))
    content.append("\n\nQuick Tip: ", style=STYLES["quiz_warning"])
    content.append(guide.tip, style=STYLES["quiz_dim"])

    return Panel(
        content,
        title=f"[bold]{guide.title}[/bold]",
        border_style=Style(color=QUIZ_THEME["secondary"]),
        box=box.ROUNDED,
        padding=(1, 2),
    )


def render_question(console: Console, question: Question, position: int, total: int) -> None:
    console.print(question_panel(question, position, total))
    console.print(options_table(question))
