"""Pydantic models for quiz data structures."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class QuestionType(str, Enum):
    """Kinds of question the generator can produce."""

    MCQ = "mcq"
    TRUE_FALSE = "tf"


class QuestionDifficulty(str, Enum):
    """Question difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(
        cls, value: object, default: "QuestionDifficulty | None" = None
    ) -> "QuestionDifficulty":
        """Map a free-form label onto a difficulty, ignoring case."""
        fallback = default or cls.MEDIUM
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return fallback
        try:
            return cls(value.strip().lower())
        except ValueError:
            return fallback


class QuizQuestion(BaseModel):
    """A single generated quiz question."""

    question: str = Field(..., min_length=1, description="The question text")
    options: list[str] | None = Field(
        None,
        description="Answer choices (multiple choice only)",
    )
    answer: str = Field(
        ...,
        min_length=1,
        description="The correct option text, or True/False",
    )
    explanation: str = Field(
        ...,
        min_length=1,
        description="Shown to the player once the question is answered",
    )
    difficulty: QuestionDifficulty = Field(
        default=QuestionDifficulty.MEDIUM,
        description="Question difficulty level",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "question": "What is Python primarily used for?",
                "options": ["Web development", "Gaming", "Mobile apps", "Hardware design"],
                "answer": "Web development",
                "explanation": "Python is widely used for web development.",
                "difficulty": "medium",
            }
        }
    }


class QuizRequest(BaseModel):
    """Body of a quiz generation request."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "topic": "Python",
                "difficulty": "medium",
                "numQuestions": 5,
                "questionType": "mcq",
            }
        },
    )

    topic: str | None = Field(None, description="What the quiz is about")
    difficulty: QuestionDifficulty = Field(
        default=QuestionDifficulty.MEDIUM,
        description="Requested difficulty level",
    )
    num_questions: int | None = Field(
        None,
        alias="numQuestions",
        description="How many questions to generate",
    )
    question_type: QuestionType = Field(
        default=QuestionType.TRUE_FALSE,
        alias="questionType",
        description="mcq for multiple choice, anything else for true/false",
    )

    @field_validator("topic", mode="before")
    @classmethod
    def clean_topic(cls, v):
        """Strip surrounding whitespace from the topic."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("difficulty", mode="before")
    @classmethod
    def normalize_difficulty(cls, v):
        """Lower-case the difficulty, defaulting unknown labels to medium."""
        if v is None:
            return QuestionDifficulty.MEDIUM
        return QuestionDifficulty.parse(v)

    @field_validator("question_type", mode="before")
    @classmethod
    def normalize_question_type(cls, v):
        """Anything other than mcq is treated as true/false."""
        if v == QuestionType.MCQ.value:
            return QuestionType.MCQ
        return QuestionType.TRUE_FALSE

    @property
    def is_multiple_choice(self) -> bool:
        """Whether questions should carry an option list."""
        return self.question_type == QuestionType.MCQ


class QuizResponse(BaseModel):
    """Successful generation response."""

    quiz: list[QuizQuestion] = Field(
        default_factory=list,
        description="Generated (or placeholder) questions",
    )


class ErrorResponse(BaseModel):
    """Client error response."""

    error: str
