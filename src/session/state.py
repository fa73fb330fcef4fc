"""Quiz session states.

Each state is an immutable pydantic model tagged by ``kind``. Data only
exists on the states where it is meaningful, so a revealed question without
a quiz, or a score on the setup screen, cannot be constructed.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.models.quiz import QuestionDifficulty, QuestionType, QuizQuestion, QuizRequest

TRUE_FALSE_OPTIONS = ("True", "False")


class QuizSetup(BaseModel):
    """Inputs on the setup screen."""

    model_config = ConfigDict(frozen=True)

    topic: str = Field(default="", description="Quiz topic")
    difficulty: QuestionDifficulty = Field(default=QuestionDifficulty.MEDIUM)
    num_questions: int = Field(default=5, ge=1, le=20)
    question_type: QuestionType = Field(default=QuestionType.MCQ)

    def to_request(self) -> QuizRequest:
        return QuizRequest(
            topic=self.topic,
            difficulty=self.difficulty,
            num_questions=self.num_questions,
            question_type=self.question_type,
        )


class SetupState(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["setup"] = "setup"
    form: QuizSetup = Field(default_factory=QuizSetup)
    error: str | None = None


class GeneratingState(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["generating"] = "generating"
    form: QuizSetup


class _ActiveQuiz(BaseModel):
    """Fields shared by every state that holds a generated quiz."""

    model_config = ConfigDict(frozen=True)

    question_type: QuestionType
    questions: tuple[QuizQuestion, ...] = Field(..., min_length=1)
    score: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_score(self):
        if self.score > len(self.questions):
            raise ValueError("score cannot exceed the number of questions")
        return self


class _OnQuestion(_ActiveQuiz):
    index: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_index(self):
        if self.index >= len(self.questions):
            raise ValueError("index is past the last question")
        if self.score > self.index + 1:
            raise ValueError("score cannot exceed the questions answered")
        return self

    @property
    def question(self) -> QuizQuestion:
        return self.questions[self.index]

    @property
    def is_last(self) -> bool:
        return self.index == len(self.questions) - 1


class AnsweringState(_OnQuestion):
    kind: Literal["answering"] = "answering"
    selected: str | None = None


class RevealedState(_OnQuestion):
    kind: Literal["revealed"] = "revealed"
    selected: str

    @property
    def is_correct(self) -> bool:
        return self.selected == self.question.answer


class CompletedState(_ActiveQuiz):
    kind: Literal["completed"] = "completed"


SessionState = Annotated[
    Union[SetupState, GeneratingState, AnsweringState, RevealedState, CompletedState],
    Field(discriminator="kind"),
]


def options_for(question: QuizQuestion, question_type: QuestionType) -> tuple[str, ...]:
    """The choices shown for a question; true/false uses a fixed pair."""
    if question_type == QuestionType.TRUE_FALSE:
        return TRUE_FALSE_OPTIONS
    return tuple(question.options or ())
