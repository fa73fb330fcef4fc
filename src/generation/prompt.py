"""Prompt construction for quiz generation."""

import json

from langchain_core.prompts import PromptTemplate

from src.models.quiz import QuizRequest

QUIZ_PROMPT_TEMPLATE = """Generate {num_questions} {difficulty} difficulty {question_kind} questions about {topic}.

Return ONLY a valid JSON array in this exact format:
{example}

Requirements:
- {num_questions} questions only
- {difficulty} difficulty level
- Questions about {topic}
- {format_rule}
- Detailed explanations
- Return ONLY the JSON array, no other text"""

quiz_prompt = PromptTemplate(
    template=QUIZ_PROMPT_TEMPLATE,
    input_variables=[
        "num_questions",
        "difficulty",
        "question_kind",
        "topic",
        "example",
        "format_rule",
    ],
)


def example_output(request: QuizRequest) -> str:
    """
    Build the sample JSON array shown to the model.

    Args:
        request: The generation request

    Returns:
        Pretty-printed JSON array with a single example record
    """
    difficulty = request.difficulty.value
    if request.is_multiple_choice:
        record = {
            "question": "What is Python primarily used for?",
            "options": ["Web development", "Gaming", "Mobile apps", "Hardware design"],
            "answer": "Web development",
            "explanation": "Python is widely used for web development due to frameworks like Django and Flask.",
            "difficulty": difficulty,
        }
    else:
        record = {
            "question": "Python is a compiled language.",
            "answer": "False",
            "explanation": "Python source is executed by an interpreter rather than compiled ahead of time.",
            "difficulty": difficulty,
        }
    return json.dumps([record], indent=2)


def build_quiz_prompt(request: QuizRequest) -> str:
    """
    Create the instruction sent to the model for a generation request.

    Args:
        request: Validated request with topic and num_questions set

    Returns:
        Prompt text
    """
    if request.is_multiple_choice:
        question_kind = "multiple choice"
        format_rule = "4 options each with 1 correct answer"
    else:
        question_kind = "true/false"
        format_rule = 'True/False questions with the answer "True" or "False"'

    return quiz_prompt.format(
        num_questions=request.num_questions,
        difficulty=request.difficulty.value,
        question_kind=question_kind,
        topic=request.topic,
        example=example_output(request),
        format_rule=format_rule,
    )
