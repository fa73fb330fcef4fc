"""Shared test fixtures and configuration for pytest."""

import json
from unittest.mock import MagicMock

import pytest

from src.config.settings import Settings
from src.models.quiz import (
    QuestionDifficulty,
    QuestionType,
    QuizQuestion,
    QuizRequest,
)


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults, independent of the environment."""
    return Settings(
        OLLAMA_URL="http://ollama.test/api/generate",
        MODEL_NAME="mistral:7b",
        API_URL="http://quiz.test",
    )


@pytest.fixture
def mcq_request() -> QuizRequest:
    """A multiple choice generation request."""
    return QuizRequest(
        topic="Python",
        difficulty=QuestionDifficulty.MEDIUM,
        num_questions=3,
        question_type=QuestionType.MCQ,
    )


@pytest.fixture
def tf_request() -> QuizRequest:
    """A true/false generation request."""
    return QuizRequest(
        topic="Astronomy",
        difficulty=QuestionDifficulty.EASY,
        num_questions=2,
        question_type=QuestionType.TRUE_FALSE,
    )


@pytest.fixture
def model_records() -> list[dict]:
    """Question records as a well-behaved model would return them."""
    return [
        {
            "question": "What keyword defines a function in Python?",
            "options": ["func", "def", "lambda", "fn"],
            "answer": "def",
            "explanation": "Functions are defined with the def keyword.",
            "difficulty": "medium",
        },
        {
            "question": "Which type is immutable?",
            "options": ["list", "dict", "tuple", "set"],
            "answer": "tuple",
            "explanation": "Tuples cannot be modified after creation.",
            "difficulty": "easy",
        },
        {
            "question": "What does PEP 8 describe?",
            "options": ["Style guide", "Packaging", "Typing", "Async"],
            "answer": "Style guide",
            "explanation": "PEP 8 is the style guide for Python code.",
            "difficulty": "medium",
        },
    ]


@pytest.fixture
def model_output(model_records: list[dict]) -> str:
    """Raw model text wrapping the records in a json code fence."""
    return "```json\n" + json.dumps(model_records, indent=2) + "\n```"


@pytest.fixture
def mcq_questions() -> list[QuizQuestion]:
    """Three multiple choice questions for session tests."""
    return [
        QuizQuestion(
            question="What is 2 + 2?",
            options=["3", "4", "5", "6"],
            answer="4",
            explanation="Basic addition: 2 + 2 = 4",
            difficulty=QuestionDifficulty.EASY,
        ),
        QuizQuestion(
            question="What is the speed of light?",
            options=["299,792,458 m/s", "300,000,000 m/s", "150,000,000 m/s", "500,000,000 m/s"],
            answer="299,792,458 m/s",
            explanation="The speed of light in vacuum is exactly 299,792,458 m/s.",
            difficulty=QuestionDifficulty.MEDIUM,
        ),
        QuizQuestion(
            question="Who wrote '1984'?",
            options=["Aldous Huxley", "George Orwell", "Ray Bradbury", "Philip K. Dick"],
            answer="George Orwell",
            explanation="George Orwell wrote the dystopian novel '1984' in 1949.",
            difficulty=QuestionDifficulty.MEDIUM,
        ),
    ]


@pytest.fixture
def tf_questions() -> list[QuizQuestion]:
    """Two true/false questions for session tests."""
    return [
        QuizQuestion(
            question="The Sun is a star.",
            answer="True",
            explanation="The Sun is a G-type main-sequence star.",
            difficulty=QuestionDifficulty.EASY,
        ),
        QuizQuestion(
            question="Pluto is still classified as a planet.",
            answer="False",
            explanation="Pluto was reclassified as a dwarf planet in 2006.",
            difficulty=QuestionDifficulty.EASY,
        ),
    ]


@pytest.fixture
def fake_model():
    """A text model whose output is set per test."""
    model = MagicMock()
    model.generate.return_value = "[]"
    return model
