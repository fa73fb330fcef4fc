"""FastAPI application exposing the quiz generation endpoint."""

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.config.settings import Settings, get_settings
from src.generation.generator import generate_quiz
from src.generation.ollama import OllamaClient
from src.models.quiz import ErrorResponse, QuizRequest, QuizResponse

logger = logging.getLogger(__name__)

MISSING_FIELDS_ERROR = "Topic and number of questions are required"


def get_model_client(settings: Settings = Depends(get_settings)) -> OllamaClient:
    """Dependency providing the model client for a request."""
    return OllamaClient(settings)


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the API application.

    Args:
        settings: Configuration to use; defaults to the cached settings

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Quiz Generator",
        description="Generates quizzes on any topic with a local language model.",
        version="0.1.0",
    )
    app.dependency_overrides[get_settings] = lambda: settings

    # --- CORS Middleware ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_body_handler(request: Request, exc: RequestValidationError):
        logger.info("Rejected malformed request: %s", exc.errors())
        return error_response("Invalid request body")

    # --- API Endpoints ---
    @app.get("/")
    def read_root():
        """Health check endpoint."""
        return {"status": "ok", "message": "Quiz generator is running!"}

    @app.post(
        "/api/generate-quiz",
        response_model=QuizResponse,
        response_model_exclude_none=True,
        responses={400: {"model": ErrorResponse}},
    )
    def generate_quiz_endpoint(
        request: QuizRequest,
        client: OllamaClient = Depends(get_model_client),
    ):
        """
        Generate a quiz for the requested topic.

        Model failures never surface as errors: the caller receives a
        placeholder quiz of the requested size instead.
        """
        logger.info(
            "Quiz requested: topic=%r difficulty=%s count=%s type=%s",
            request.topic,
            request.difficulty.value,
            request.num_questions,
            request.question_type.value,
        )

        if not request.topic or not request.num_questions or request.num_questions < 0:
            return error_response(MISSING_FIELDS_ERROR)

        if request.num_questions > settings.max_questions:
            return error_response(
                f"Number of questions must be at most {settings.max_questions}"
            )

        return QuizResponse(quiz=generate_quiz(request, client))

    return app
