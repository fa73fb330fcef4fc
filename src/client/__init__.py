"""Client for the quiz generation API."""

from .api import QuizApiClient, QuizApiError

__all__ = ["QuizApiClient", "QuizApiError"]
