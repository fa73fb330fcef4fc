"""Quiz generator - turns a request into validated questions via the model."""

import logging
from typing import Any, Protocol

from src.generation.errors import (
    EmptyQuizError,
    QuizGenerationError,
    UnparseableOutputError,
)
from src.generation.parser import ParseFailure, parse_quiz_output
from src.generation.prompt import build_quiz_prompt
from src.models.quiz import QuestionDifficulty, QuizQuestion, QuizRequest

logger = logging.getLogger(__name__)

PLACEHOLDER_OPTIONS = ["Option A", "Option B", "Option C", "Option D"]


class TextModel(Protocol):
    def generate(self, prompt: str) -> str: ...


def _clean_text(value: Any) -> str:
    # Objects and lists are not displayable text; treat them as missing.
    if not isinstance(value, (str, int, float)):
        return ""
    return str(value).strip()


def normalize_question(
    item: Any, request: QuizRequest
) -> QuizQuestion | None:
    """
    Validate and normalize one raw record from the model.

    Args:
        item: Decoded JSON value
        request: The generation request

    Returns:
        A QuizQuestion, or None if the record is missing required text
    """
    if not isinstance(item, dict):
        return None

    question = _clean_text(item.get("question"))
    answer = _clean_text(item.get("answer"))
    explanation = _clean_text(item.get("explanation"))
    if not (question and answer and explanation):
        return None

    options = None
    if request.is_multiple_choice:
        raw_options = item.get("options")
        if isinstance(raw_options, list):
            options = [text for text in map(_clean_text, raw_options) if text]
        else:
            options = []

    return QuizQuestion(
        question=question,
        options=options,
        answer=answer,
        explanation=explanation,
        difficulty=QuestionDifficulty.parse(
            item.get("difficulty"), default=request.difficulty
        ),
    )


def normalize_questions(
    items: list[Any], request: QuizRequest
) -> list[QuizQuestion]:
    """Keep the valid records, capped at the requested count."""
    questions = []
    for item in items:
        question = normalize_question(item, request)
        if question is None:
            continue
        questions.append(question)
        if len(questions) >= request.num_questions:
            break

    skipped = len(items) - len(questions)
    if skipped > 0:
        logger.debug("Dropped %d invalid or surplus records", skipped)
    return questions


def generate_questions(request: QuizRequest, client: TextModel) -> list[QuizQuestion]:
    """
    Generate questions with the model, without any fallback.

    Args:
        request: Validated request
        client: Text model used for the completion

    Returns:
        Between 1 and request.num_questions questions

    Raises:
        QuizGenerationError: If the model call, parsing or validation fails
    """
    prompt = build_quiz_prompt(request)
    raw = client.generate(prompt)

    result = parse_quiz_output(raw)
    if isinstance(result, ParseFailure):
        logger.debug("Unparseable model output: %.200s", raw)
        raise UnparseableOutputError(f"Could not parse quiz data: {result.reason}")

    logger.info("Parsed model output (%s stage, %d records)", result.stage, len(result.items))

    questions = normalize_questions(result.items, request)
    if not questions:
        raise EmptyQuizError("No valid questions were generated")

    logger.info("Generated %d valid questions", len(questions))
    return questions


def create_fallback_quiz(request: QuizRequest) -> list[QuizQuestion]:
    """
    Create placeholder questions if AI generation fails.

    Args:
        request: The generation request

    Returns:
        Exactly request.num_questions placeholder questions
    """
    topic = request.topic
    return [
        QuizQuestion(
            question=f"Real {topic} question {i + 1} would appear here",
            options=list(PLACEHOLDER_OPTIONS) if request.is_multiple_choice else None,
            answer=PLACEHOLDER_OPTIONS[0] if request.is_multiple_choice else "True",
            explanation=f"This would be a real explanation about {topic}.",
            difficulty=request.difficulty,
        )
        for i in range(request.num_questions)
    ]


def generate_quiz(request: QuizRequest, client: TextModel) -> list[QuizQuestion]:
    """Generate questions, falling back to placeholders on any model-side failure."""
    try:
        return generate_questions(request, client)
    except QuizGenerationError as e:
        logger.warning("Quiz generation failed, using placeholder quiz: %s", e)
        return create_fallback_quiz(request)
