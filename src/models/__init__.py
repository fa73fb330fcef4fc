"""Data models for quiz generation."""

from .quiz import (
    ErrorResponse,
    QuestionDifficulty,
    QuestionType,
    QuizQuestion,
    QuizRequest,
    QuizResponse,
)

__all__ = [
    "QuizQuestion",
    "QuizRequest",
    "QuizResponse",
    "ErrorResponse",
    "QuestionDifficulty",
    "QuestionType",
]
