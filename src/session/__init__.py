"""Client-side quiz session: states, transitions and rendering."""

from .machine import QuizSession, SessionError
from .state import (
    AnsweringState,
    CompletedState,
    GeneratingState,
    QuizSetup,
    RevealedState,
    SessionState,
    SetupState,
    options_for,
)
from .view import OptionMark, option_marks, render_state

__all__ = [
    "QuizSession",
    "SessionError",
    "QuizSetup",
    "SessionState",
    "SetupState",
    "GeneratingState",
    "AnsweringState",
    "RevealedState",
    "CompletedState",
    "options_for",
    "OptionMark",
    "option_marks",
    "render_state",
]
