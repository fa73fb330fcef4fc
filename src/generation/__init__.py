"""Model-backed quiz generation."""

from .errors import (
    EmptyQuizError,
    ModelServiceError,
    QuizGenerationError,
    UnparseableOutputError,
)
from .generator import create_fallback_quiz, generate_questions, generate_quiz
from .ollama import OllamaClient

__all__ = [
    "OllamaClient",
    "generate_quiz",
    "generate_questions",
    "create_fallback_quiz",
    "QuizGenerationError",
    "ModelServiceError",
    "UnparseableOutputError",
    "EmptyQuizError",
]
