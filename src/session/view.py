"""Rendering of quiz session states with Rich."""

from enum import Enum

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from src.models.quiz import QuestionType
from src.session.machine import QuizSession
from src.session.state import (
    AnsweringState,
    CompletedState,
    GeneratingState,
    RevealedState,
    SessionState,
    SetupState,
    options_for,
)


class OptionMark(str, Enum):
    """How an option is highlighted."""

    UNSELECTED = "unselected"
    SELECTED = "selected"
    CORRECT = "correct"
    INCORRECT = "incorrect"


OPTION_STYLES = {
    OptionMark.UNSELECTED: "white",
    OptionMark.SELECTED: "bold magenta",
    OptionMark.CORRECT: "bold green",
    OptionMark.INCORRECT: "bold red",
}

OPTION_SYMBOLS = {
    OptionMark.UNSELECTED: " ",
    OptionMark.SELECTED: ">",
    OptionMark.CORRECT: "✓",
    OptionMark.INCORRECT: "✗",
}


def option_marks(state: SessionState) -> list[tuple[str, OptionMark]]:
    """
    Mark each option of the current question.

    While answering only the chosen option stands out. Once revealed the
    correct option is marked correct, a wrong choice incorrect, and the rest
    stay unselected.

    Args:
        state: Current session state

    Returns:
        (option, mark) pairs in display order; empty outside a question
    """
    if not isinstance(state, (AnsweringState, RevealedState)):
        return []

    marks = []
    for option in options_for(state.question, state.question_type):
        if isinstance(state, RevealedState):
            if option == state.question.answer:
                mark = OptionMark.CORRECT
            elif option == state.selected:
                mark = OptionMark.INCORRECT
            else:
                mark = OptionMark.UNSELECTED
        elif option == state.selected:
            mark = OptionMark.SELECTED
        else:
            mark = OptionMark.UNSELECTED
        marks.append((option, mark))
    return marks


def render_setup(state: SetupState, can_generate: bool) -> RenderableType:
    form = state.form
    table = Table(title="Quiz Configuration", show_header=False, border_style="cyan")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Topic", Text(form.topic) if form.topic else Text("not set", style="dim"))
    table.add_row("Difficulty", form.difficulty.value.capitalize())
    table.add_row("Questions", str(form.num_questions))
    table.add_row(
        "Type",
        "Multiple Choice" if form.question_type == QuestionType.MCQ else "True/False",
    )

    parts: list[RenderableType] = [table]
    if state.error:
        parts.append(Text(state.error, style="bold red"))
    if not can_generate:
        parts.append(Text("Enter a topic to generate a quiz.", style="yellow"))
    return Group(*parts)


def render_generating(state: GeneratingState) -> RenderableType:
    return Text(f"Generating {state.form.topic} quiz...", style="cyan")


def render_question(state: AnsweringState | RevealedState) -> RenderableType:
    question = state.question
    header = Text.assemble(
        (f"Question {state.index + 1}/{len(state.questions)}", "bold white"),
        "  ",
        (f" {question.difficulty.value.upper()} ", "bold white on magenta"),
    )

    options = [
        Text.assemble(f"{OPTION_SYMBOLS[mark]} {number}. ", (option, OPTION_STYLES[mark]))
        for number, (option, mark) in enumerate(option_marks(state), start=1)
    ]

    parts: list[RenderableType] = [header, Text(""), Text(question.question), Text(""), *options]

    if isinstance(state, RevealedState):
        verdict = (
            Text("Correct!", style="bold green")
            if state.is_correct
            else Text(f"Incorrect. The answer is {question.answer}.", style="bold red")
        )
        parts.extend([Text(""), verdict])
        parts.append(
            Panel(Text(question.explanation), title="Explanation", border_style="blue")
        )

    return Panel(Group(*parts), border_style="magenta")


def render_completed(state: CompletedState) -> RenderableType:
    body = Group(
        Text("Quiz Completed!", style="bold green", justify="center"),
        Text(
            f"You scored {state.score} out of {len(state.questions)} questions",
            justify="center",
        ),
        Text("Start over to generate a new quiz.", style="dim", justify="center"),
    )
    return Panel(body, border_style="green")


def render_state(session: QuizSession) -> RenderableType:
    """Render whatever the session is currently showing."""
    state = session.state
    if isinstance(state, SetupState):
        return render_setup(state, session.can_generate)
    if isinstance(state, GeneratingState):
        return render_generating(state)
    if isinstance(state, (AnsweringState, RevealedState)):
        return render_question(state)
    return render_completed(state)
