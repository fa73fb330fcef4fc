"""Typer CLI application for the quiz generator."""

from typing import Optional

import click
import typer
from rich.console import Console
from rich.panel import Panel

from src.client.api import QuizApiClient, QuizApiError
from src.config.logging import setup_logging
from src.config.settings import get_settings
from src.models.quiz import QuestionDifficulty, QuestionType
from src.session.machine import QuizSession
from src.session.state import (
    AnsweringState,
    CompletedState,
    QuizSetup,
    RevealedState,
    SetupState,
)
from src.session.view import render_state

app = typer.Typer(
    name="quiz-app",
    help="AI-powered quiz generator backed by a local language model",
    add_completion=False,
)

console = Console()


@app.command()
def serve(
    host: Optional[str] = typer.Option(
        None,
        "--host",
        help="Interface to bind (defaults to API_HOST)",
    ),
    port: Optional[int] = typer.Option(
        None,
        "--port",
        "-p",
        help="Port to listen on (defaults to API_PORT)",
    ),
) -> None:
    """Run the quiz generation API server."""
    import uvicorn

    from src.api.app import create_app

    settings = get_settings()
    setup_logging(settings.log_level)

    uvicorn.run(
        create_app(settings),
        host=host or settings.api_host,
        port=port or settings.api_port,
        log_config=None,
    )


@app.command()
def play(
    topic: Optional[str] = typer.Option(
        None,
        "--topic",
        "-t",
        help="Quiz topic (prompted for if omitted)",
    ),
    difficulty: QuestionDifficulty = typer.Option(
        QuestionDifficulty.MEDIUM,
        "--difficulty",
        "-d",
        help="Difficulty level",
        case_sensitive=False,
    ),
    questions: int = typer.Option(
        5,
        "--questions",
        "-q",
        help="Number of questions",
        min=1,
        max=20,
    ),
    question_type: QuestionType = typer.Option(
        QuestionType.MCQ,
        "--type",
        help="mcq for multiple choice, tf for true/false",
        case_sensitive=False,
    ),
    api_url: Optional[str] = typer.Option(
        None,
        "--api-url",
        help="Quiz API base URL (defaults to API_URL)",
    ),
) -> None:
    """
    Play a generated quiz in the terminal.

    Example:
        quiz-app play -t "World History" -q 5 -d hard --type tf
    """
    settings = get_settings()
    setup_logging("WARNING")

    client = QuizApiClient(api_url or settings.api_url)
    session = QuizSession(
        QuizSetup(
            topic=(topic or "").strip(),
            difficulty=difficulty,
            num_questions=questions,
            question_type=question_type,
        )
    )

    run_session(session, client)


def run_session(session: QuizSession, client: QuizApiClient) -> None:
    """Drive a session until the player stops."""
    while True:
        state = session.state

        if isinstance(state, SetupState):
            if not run_setup(session, client):
                return

        elif isinstance(state, AnsweringState):
            console.print(render_state(session))
            choose_option(session)
            session.submit()

        elif isinstance(state, RevealedState):
            console.print(render_state(session))
            next_label = "Finish quiz" if state.is_last else "Next question"
            typer.prompt(
                f"Press Enter for: {next_label}", default="", show_default=False
            )
            session.advance()

        elif isinstance(state, CompletedState):
            console.print(render_state(session))
            if not typer.confirm("Generate a new quiz?", default=False):
                return
            session.reset()


def run_setup(session: QuizSession, client: QuizApiClient) -> bool:
    """
    Collect a topic and generate the quiz.

    Returns:
        False if the player gave up, True once the session moved on
    """
    state = session.state
    if state.error:
        console.print(f"\n[red]Error:[/red] {state.error}", style="bold")
        if not typer.confirm("Try again?", default=True):
            return False

    while not session.can_generate:
        topic = typer.prompt("Quiz topic").strip()
        session.update_form(topic=topic)

    console.print()
    console.print(render_state(session))

    request = session.begin_generation()
    try:
        with console.status("[cyan]Generating quiz...", spinner="dots"):
            quiz = client.generate(request)
    except QuizApiError as e:
        session.generation_failed(str(e))
        return True

    session.generation_succeeded(quiz)
    return True


def choose_option(session: QuizSession) -> None:
    """Ask for an answer until one is selected."""
    options = session.current_options
    while not session.can_submit:
        if options:
            choice = typer.prompt(
                "Your answer", type=click.IntRange(1, len(options))
            )
            session.select(options[choice - 1])
        else:
            # Malformed question without options: accept a typed answer
            session.select(typer.prompt("Your answer").strip())


@app.command()
def info() -> None:
    """Display information about the quiz generator."""
    settings = get_settings()
    info_text = f"""
[bold cyan]AI Quiz Generator[/bold cyan]
Version: 0.1.0

[bold]Components:[/bold]
  • API server - generates quizzes with a local Ollama model
  • Terminal player - answers, reveals and scores questions

[bold]Features:[/bold]
  • Multiple choice and true/false questions
  • Easy, medium and hard difficulty
  • Placeholder quiz when the model is unavailable

[bold]Model:[/bold] {settings.model_name} ({settings.ollama_url})
[bold]API:[/bold] {settings.api_url}
    """
    console.print(Panel(info_text, title="Quiz App Info", border_style="cyan"))


@app.callback()
def callback() -> None:
    """
    AI Quiz Generator - Create and play quizzes using a local language model.
    """
    pass


if __name__ == "__main__":
    app()
