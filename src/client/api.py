"""HTTP client for the quiz generation endpoint."""

import logging

import requests
from pydantic import ValidationError

from src.models.quiz import QuizQuestion, QuizRequest, QuizResponse

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate-quiz"


class QuizApiError(Exception):
    """The quiz could not be fetched from the API."""


class QuizApiClient:
    """Fetches generated quizzes from the API server."""

    def __init__(self, base_url: str, timeout: float | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def generate_url(self) -> str:
        return f"{self.base_url}{GENERATE_PATH}"

    def generate(self, request: QuizRequest) -> list[QuizQuestion]:
        """
        Request a quiz from the server.

        Args:
            request: What to generate

        Returns:
            The questions in the response

        Raises:
            QuizApiError: If the server is unreachable, rejects the request,
                or returns something that is not a quiz
        """
        payload = request.model_dump(mode="json", by_alias=True)
        try:
            resp = requests.post(self.generate_url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Quiz API request failed: %s", e)
            raise QuizApiError("Failed to generate quiz. Please try again.") from e

        if not resp.ok:
            message = f"Failed to generate quiz (HTTP {resp.status_code})."
            try:
                error = resp.json().get("error")
            except (ValueError, AttributeError):
                error = None
            if error:
                message = f"{message} {error}"
            raise QuizApiError(message)

        try:
            return QuizResponse.model_validate(resp.json()).quiz
        except (ValueError, ValidationError) as e:
            logger.error("Quiz API returned an unexpected body: %s", e)
            raise QuizApiError("The server returned an invalid quiz.") from e
