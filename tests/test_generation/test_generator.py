"""Tests for the quiz generator."""

import json

import pytest

from src.generation.errors import (
    EmptyQuizError,
    ModelServiceError,
    UnparseableOutputError,
)
from src.generation.generator import (
    PLACEHOLDER_OPTIONS,
    create_fallback_quiz,
    generate_questions,
    generate_quiz,
    normalize_question,
    normalize_questions,
)
from src.models.quiz import QuestionDifficulty, QuizRequest


class TestNormalizeQuestion:
    """Test validation of single records."""

    def test_trims_text_fields(self, mcq_request: QuizRequest):
        """Test that string fields are trimmed."""
        question = normalize_question(
            {
                "question": "  What is 1 + 1?  ",
                "options": [" 1 ", "2", " 3"],
                "answer": " 2 ",
                "explanation": " Addition. ",
            },
            mcq_request,
        )

        assert question.question == "What is 1 + 1?"
        assert question.options == ["1", "2", "3"]
        assert question.answer == "2"
        assert question.explanation == "Addition."

    @pytest.mark.parametrize("missing", ["question", "answer", "explanation"])
    def test_rejects_missing_required_field(self, mcq_request: QuizRequest, missing: str):
        """Test that records without required text are dropped."""
        record = {"question": "Q?", "options": ["A"], "answer": "A", "explanation": "E"}
        del record[missing]

        assert normalize_question(record, mcq_request) is None

    def test_rejects_whitespace_only_field(self, mcq_request: QuizRequest):
        """Test that blank text counts as missing."""
        record = {"question": "   ", "answer": "A", "explanation": "E"}

        assert normalize_question(record, mcq_request) is None

    def test_rejects_non_dict(self, mcq_request: QuizRequest):
        """Test that non-object records are dropped."""
        assert normalize_question("What is 1 + 1?", mcq_request) is None
        assert normalize_question(None, mcq_request) is None

    def test_stringifies_values(self, mcq_request: QuizRequest):
        """Test that non-string values are converted to text."""
        question = normalize_question(
            {"question": "1 + 1?", "options": [1, 2, 3], "answer": 2, "explanation": "Sum."},
            mcq_request,
        )

        assert question.options == ["1", "2", "3"]
        assert question.answer == "2"

    @pytest.mark.parametrize("field", ["question", "answer", "explanation"])
    def test_rejects_nested_values(self, mcq_request: QuizRequest, field: str):
        """Test that object or list values count as missing text."""
        record = {"question": "Q?", "options": ["A"], "answer": "A", "explanation": "E"}

        assert normalize_question({**record, field: {"text": "Q?"}}, mcq_request) is None
        assert normalize_question({**record, field: ["Q?"]}, mcq_request) is None

    def test_drops_non_text_options(self, mcq_request: QuizRequest):
        """Test that blank or nested options are left out."""
        question = normalize_question(
            {
                "question": "Q?",
                "options": ["A", {"label": "B"}, None, "  ", "C"],
                "answer": "A",
                "explanation": "E",
            },
            mcq_request,
        )

        assert question.options == ["A", "C"]

    def test_malformed_options_become_empty(self, mcq_request: QuizRequest):
        """Test that missing or non-list options become an empty list."""
        without = normalize_question(
            {"question": "Q?", "answer": "A", "explanation": "E"}, mcq_request
        )
        malformed = normalize_question(
            {"question": "Q?", "options": "A, B", "answer": "A", "explanation": "E"},
            mcq_request,
        )

        assert without.options == []
        assert malformed.options == []

    def test_true_false_drops_options(self, tf_request: QuizRequest):
        """Test that true/false questions never carry options."""
        question = normalize_question(
            {"question": "Q?", "options": ["True", "False"], "answer": "True", "explanation": "E"},
            tf_request,
        )

        assert question.options is None

    def test_difficulty_is_normalized(self, mcq_request: QuizRequest):
        """Test that the record difficulty is lower-cased."""
        question = normalize_question(
            {"question": "Q?", "answer": "A", "explanation": "E", "difficulty": "HARD"},
            mcq_request,
        )

        assert question.difficulty == QuestionDifficulty.HARD

    def test_difficulty_defaults_to_request(self, tf_request: QuizRequest):
        """Test that an absent difficulty uses the request's."""
        question = normalize_question(
            {"question": "Q?", "answer": "True", "explanation": "E"}, tf_request
        )

        assert question.difficulty == QuestionDifficulty.EASY


class TestNormalizeQuestions:
    """Test validation of record lists."""

    def test_keeps_valid_records_only(self, mcq_request: QuizRequest, model_records: list[dict]):
        """Test that invalid records are skipped."""
        items = [model_records[0], {"question": "broken"}, 42, model_records[1]]

        questions = normalize_questions(items, mcq_request)

        assert [q.answer for q in questions] == ["def", "tuple"]

    def test_truncates_to_requested_count(self, model_records: list[dict]):
        """Test that surplus questions are dropped."""
        request = QuizRequest(topic="Python", num_questions=2)

        questions = normalize_questions(model_records * 2, request)

        assert len(questions) == 2


class TestGenerateQuestions:
    """Test model-backed generation without fallback."""

    def test_returns_parsed_questions(self, fake_model, mcq_request, model_output):
        """Test the happy path."""
        fake_model.generate.return_value = model_output

        questions = generate_questions(mcq_request, fake_model)

        assert len(questions) == 3
        assert questions[1].question == "Which type is immutable?"
        fake_model.generate.assert_called_once()

    def test_sends_built_prompt(self, fake_model, mcq_request, model_output):
        """Test that the model receives the quiz prompt."""
        fake_model.generate.return_value = model_output

        generate_questions(mcq_request, fake_model)

        prompt = fake_model.generate.call_args.args[0]
        assert "about Python" in prompt

    def test_raises_on_unparseable_output(self, fake_model, mcq_request):
        """Test prose with no array."""
        fake_model.generate.return_value = "I cannot produce a quiz right now."

        with pytest.raises(UnparseableOutputError):
            generate_questions(mcq_request, fake_model)

    def test_raises_when_nothing_valid(self, fake_model, mcq_request):
        """Test that an all-invalid list is a failure."""
        fake_model.generate.return_value = json.dumps([{"question": "Q?"}, {"answer": "A"}])

        with pytest.raises(EmptyQuizError):
            generate_questions(mcq_request, fake_model)

    def test_raises_on_empty_array(self, fake_model, mcq_request):
        """Test that an empty array is a failure."""
        fake_model.generate.return_value = "[]"

        with pytest.raises(EmptyQuizError):
            generate_questions(mcq_request, fake_model)

    def test_propagates_model_errors(self, fake_model, mcq_request):
        """Test that model service errors are not swallowed here."""
        fake_model.generate.side_effect = ModelServiceError("Ollama API error: 500")

        with pytest.raises(ModelServiceError):
            generate_questions(mcq_request, fake_model)


class TestCreateFallbackQuiz:
    """Test the placeholder quiz."""

    def test_fills_requested_count(self, mcq_request: QuizRequest):
        """Test that exactly num_questions placeholders are created."""
        assert len(create_fallback_quiz(mcq_request)) == mcq_request.num_questions

    def test_multiple_choice_placeholders(self, mcq_request: QuizRequest):
        """Test the multiple choice placeholder content."""
        quiz = create_fallback_quiz(mcq_request)

        assert quiz[0].question == "Real Python question 1 would appear here"
        assert quiz[2].question == "Real Python question 3 would appear here"
        assert quiz[0].options == PLACEHOLDER_OPTIONS
        assert quiz[0].answer == "Option A"
        assert quiz[0].explanation == "This would be a real explanation about Python."
        assert quiz[0].difficulty == QuestionDifficulty.MEDIUM

    def test_true_false_placeholders(self, tf_request: QuizRequest):
        """Test the true/false placeholder content."""
        quiz = create_fallback_quiz(tf_request)

        assert all(q.options is None for q in quiz)
        assert all(q.answer == "True" for q in quiz)
        assert all("Astronomy" in q.explanation for q in quiz)

    def test_options_are_not_shared(self, mcq_request: QuizRequest):
        """Test that each placeholder owns its option list."""
        quiz = create_fallback_quiz(mcq_request)

        quiz[0].options.append("Option E")
        assert quiz[1].options == PLACEHOLDER_OPTIONS


class TestGenerateQuiz:
    """Test generation with fallback."""

    def test_returns_model_questions(self, fake_model, mcq_request, model_output):
        """Test that real questions pass through."""
        fake_model.generate.return_value = model_output

        quiz = generate_quiz(mcq_request, fake_model)

        assert quiz[0].answer == "def"

    def test_falls_back_on_model_error(self, fake_model, mcq_request):
        """Test fallback when the model is unavailable."""
        fake_model.generate.side_effect = ModelServiceError("connection refused")

        quiz = generate_quiz(mcq_request, fake_model)

        assert quiz == create_fallback_quiz(mcq_request)

    def test_falls_back_on_prose(self, fake_model, tf_request):
        """Test fallback when the output has no array."""
        fake_model.generate.return_value = "Here are some facts about space."

        quiz = generate_quiz(tf_request, fake_model)

        assert len(quiz) == 2
        assert all("Astronomy" in q.question for q in quiz)

    def test_falls_back_when_nothing_valid(self, fake_model, mcq_request):
        """Test fallback when every record fails validation."""
        fake_model.generate.return_value = '[{"question": ""}]'

        quiz = generate_quiz(mcq_request, fake_model)

        assert len(quiz) == mcq_request.num_questions
        assert quiz[0].answer == "Option A"
