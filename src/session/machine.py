"""Quiz session state machine."""

import logging
from collections.abc import Sequence

from src.models.quiz import QuizQuestion, QuizRequest
from src.session.state import (
    AnsweringState,
    CompletedState,
    GeneratingState,
    QuizSetup,
    RevealedState,
    SessionState,
    SetupState,
    options_for,
)

logger = logging.getLogger(__name__)


class SessionError(Exception):
    """Raised when an action is not available in the current state."""


class QuizSession:
    """
    One traversal of a generated quiz, from setup to completion.

    Transitions that are not available in the current state (submitting
    without a selection, advancing before the answer is revealed) leave the
    state untouched, matching disabled controls in the UI.
    """

    def __init__(self, form: QuizSetup | None = None) -> None:
        self._form = form or QuizSetup()
        self.state: SessionState = SetupState(form=self._form)

    # --- Queries ---

    @property
    def kind(self) -> str:
        return self.state.kind

    @property
    def can_generate(self) -> bool:
        """Generation needs the setup screen and a non-blank topic."""
        return isinstance(self.state, SetupState) and bool(self.state.form.topic.strip())

    @property
    def can_submit(self) -> bool:
        """Submitting needs an open question with a selected option."""
        return isinstance(self.state, AnsweringState) and self.state.selected is not None

    @property
    def current_question(self) -> QuizQuestion | None:
        if isinstance(self.state, (AnsweringState, RevealedState)):
            return self.state.question
        return None

    @property
    def current_options(self) -> tuple[str, ...]:
        if isinstance(self.state, (AnsweringState, RevealedState)):
            return options_for(self.state.question, self.state.question_type)
        return ()

    @property
    def score(self) -> int:
        if isinstance(self.state, (AnsweringState, RevealedState, CompletedState)):
            return self.state.score
        return 0

    @property
    def total(self) -> int:
        if isinstance(self.state, (AnsweringState, RevealedState, CompletedState)):
            return len(self.state.questions)
        return 0

    # --- Setup and generation ---

    def update_form(self, **changes) -> None:
        """Change setup inputs; ignored outside the setup screen."""
        if not isinstance(self.state, SetupState):
            return
        form = QuizSetup(**{**self.state.form.model_dump(), **changes})
        self.state = SetupState(form=form, error=self.state.error)

    def begin_generation(self) -> QuizRequest:
        """
        Move to the generating state.

        Returns:
            The request to send to the generation endpoint

        Raises:
            SessionError: If generation is not available right now
        """
        if not self.can_generate:
            raise SessionError(f"Cannot generate a quiz from the {self.kind} state")
        form = self.state.form
        self._form = form
        self.state = GeneratingState(form=form)
        return form.to_request()

    def generation_succeeded(self, questions: Sequence[QuizQuestion]) -> None:
        if not isinstance(self.state, GeneratingState):
            raise SessionError(f"No generation in flight ({self.kind} state)")
        form = self.state.form
        if not questions:
            self.state = SetupState(form=form, error="The generated quiz has no questions.")
            return
        self.state = AnsweringState(
            question_type=form.question_type,
            questions=tuple(questions),
            index=0,
            score=0,
        )
        logger.debug("Quiz started with %d questions", len(questions))

    def generation_failed(self, message: str) -> None:
        """Return to setup with the error, keeping the form for a retry."""
        if not isinstance(self.state, GeneratingState):
            raise SessionError(f"No generation in flight ({self.kind} state)")
        self.state = SetupState(form=self.state.form, error=message)

    # --- Answering ---

    def select(self, option: str) -> None:
        """Tentatively choose an option for the open question."""
        state = self.state
        if not isinstance(state, AnsweringState) or not option:
            return
        choices = options_for(state.question, state.question_type)
        if choices and option not in choices:
            logger.debug("Ignoring unknown option %r", option)
            return
        self.state = AnsweringState(
            question_type=state.question_type,
            questions=state.questions,
            index=state.index,
            score=state.score,
            selected=option,
        )

    def submit(self) -> None:
        """Reveal the open question, scoring the selected option."""
        if not self.can_submit:
            return
        state = self.state
        correct = state.selected == state.question.answer
        self.state = RevealedState(
            question_type=state.question_type,
            questions=state.questions,
            index=state.index,
            score=state.score + 1 if correct else state.score,
            selected=state.selected,
        )

    def advance(self) -> None:
        """Move past a revealed question."""
        state = self.state
        if not isinstance(state, RevealedState):
            return
        if state.is_last:
            self.state = CompletedState(
                question_type=state.question_type,
                questions=state.questions,
                score=state.score,
            )
            return
        self.state = AnsweringState(
            question_type=state.question_type,
            questions=state.questions,
            index=state.index + 1,
            score=state.score,
        )

    def reset(self) -> None:
        """Discard the quiz and return to a fresh setup screen."""
        if isinstance(self.state, SetupState):
            self.state = SetupState(form=self.state.form)
        elif isinstance(self.state, CompletedState):
            self.state = SetupState(form=self._form)
