"""Exceptions raised while generating a quiz from the model."""


class QuizGenerationError(Exception):
    """Base class for every failure that triggers the placeholder quiz."""


class ModelServiceError(QuizGenerationError):
    """The model service was unreachable or returned an unusable reply."""


class UnparseableOutputError(QuizGenerationError):
    """The model text did not contain a JSON array."""


class EmptyQuizError(QuizGenerationError):
    """No generated record survived validation."""
